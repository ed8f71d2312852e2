import pytest
from django.core.exceptions import ImproperlyConfigured

from config.settings import (
    DEFAULT_STATIC_ROOT,
    StaticRootConfig,
    getenv_bool,
    getenv_list,
    getenv_required,
    getenv_with_default,
)


def test_static_root_defaults_when_unset():
    assert StaticRootConfig.from_environ({}).root == "staticfiles"
    assert StaticRootConfig().root == DEFAULT_STATIC_ROOT


def test_static_root_uses_environment_value_verbatim():
    config = StaticRootConfig.from_environ({"STATIC_ROOT": "/tmp/test-static"})
    assert config.root == "/tmp/test-static"


def test_relative_static_root_is_not_rewritten():
    config = StaticRootConfig.from_environ({"STATIC_ROOT": "var/static"})
    assert config.root == "var/static"


def test_empty_static_root_falls_back_to_default():
    assert StaticRootConfig.from_environ({"STATIC_ROOT": ""}).root == "staticfiles"


def test_static_root_config_is_immutable():
    config = StaticRootConfig(root="/srv/static")
    with pytest.raises(AttributeError):
        config.root = "/elsewhere"


def test_getenv_required_raises_when_missing():
    with pytest.raises(ImproperlyConfigured, match="DJANGO_SECRET_KEY"):
        getenv_required("DJANGO_SECRET_KEY", environ={})


def test_getenv_required_returns_value():
    assert getenv_required("DJANGO_SECRET_KEY", environ={"DJANGO_SECRET_KEY": "abc"}) == "abc"


def test_getenv_with_default():
    assert getenv_with_default("LOG_LEVEL", "INFO", environ={}) == "INFO"
    assert getenv_with_default("LOG_LEVEL", "INFO", environ={"LOG_LEVEL": "debug"}) == "debug"


def test_getenv_list_drops_blanks():
    environ = {"ALLOWED_HOSTS": "beiwe.example.org, ,localhost,"}
    assert getenv_list("ALLOWED_HOSTS", environ=environ) == ["beiwe.example.org", "localhost"]
    assert getenv_list("ALLOWED_HOSTS", environ={}) == []


@pytest.mark.parametrize("raw,expected", [
    ("1", True),
    ("True", True),
    ("on", True),
    ("0", False),
    ("no", False),
    ("", False),
])
def test_getenv_bool(raw, expected):
    assert getenv_bool("DJANGO_DEBUG", environ={"DJANGO_DEBUG": raw}) is expected


def test_module_default_when_environment_unset(monkeypatch, reload_settings):
    monkeypatch.delenv("STATIC_ROOT", raising=False)
    django_settings = reload_settings()

    import config.settings
    assert config.settings.STATIC_ROOT == "staticfiles"
    assert django_settings.STATIC_ROOT == "staticfiles"


def test_module_override_reaches_django_setting(monkeypatch, reload_settings):
    monkeypatch.setenv("STATIC_ROOT", "/tmp/test-static")
    django_settings = reload_settings()

    assert django_settings.STATIC_ROOT == "/tmp/test-static"


@pytest.mark.parametrize("value", [None, "/tmp/test-static", "relative/dir", ""])
def test_sibling_static_settings_stay_fixed(monkeypatch, reload_settings, value):
    if value is None:
        monkeypatch.delenv("STATIC_ROOT", raising=False)
    else:
        monkeypatch.setenv("STATIC_ROOT", value)
    django_settings = reload_settings()

    assert django_settings.STATIC_URL == "/static/"
    assert django_settings.STATICFILES_DIRS == ["frontend/static/"]


def test_reloading_with_same_environment_is_stable(monkeypatch, reload_settings):
    monkeypatch.setenv("STATIC_ROOT", "/var/lib/beiwe/static")
    first = reload_settings().STATIC_ROOT
    second = reload_settings().STATIC_ROOT

    assert first == second == "/var/lib/beiwe/static"


def test_missing_secret_key_fails_at_load(monkeypatch, reload_settings):
    monkeypatch.delenv("DJANGO_SECRET_KEY", raising=False)
    with pytest.raises(ImproperlyConfigured):
        reload_settings()


def forget_static_root(monkeypatch):
    # setenv first so undo() also removes whatever load_dotenv writes
    monkeypatch.setenv("STATIC_ROOT", "")
    monkeypatch.delenv("STATIC_ROOT")


def test_dotenv_file_supplies_static_root(monkeypatch, reload_settings, tmp_path):
    (tmp_path / ".env").write_text("STATIC_ROOT=/srv/beiwe/static\n")
    monkeypatch.chdir(tmp_path)
    forget_static_root(monkeypatch)

    django_settings = reload_settings()

    assert django_settings.STATIC_ROOT == "/srv/beiwe/static"


def test_process_environment_wins_over_dotenv(monkeypatch, reload_settings, tmp_path):
    (tmp_path / ".env").write_text("STATIC_ROOT=/srv/beiwe/static\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STATIC_ROOT", "/var/lib/beiwe/static")

    django_settings = reload_settings()

    assert django_settings.STATIC_ROOT == "/var/lib/beiwe/static"


def test_empty_dotenv_value_falls_back_to_default(monkeypatch, reload_settings, tmp_path):
    (tmp_path / ".env").write_text("STATIC_ROOT=\n")
    monkeypatch.chdir(tmp_path)
    forget_static_root(monkeypatch)

    django_settings = reload_settings()

    assert django_settings.STATIC_ROOT == "staticfiles"

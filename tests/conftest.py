import importlib
import os
from pathlib import Path

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.django_settings")
os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret-key")

django.setup()

from django.test.utils import setup_test_environment  # noqa: E402

setup_test_environment()

REPO_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def repo_root():
    return REPO_ROOT


@pytest.fixture
def reload_settings(monkeypatch):
    """Re-import both configuration modules under a patched environment.

    The modules are reloaded again with the original environment afterwards
    so later tests see the values the process started with.
    """
    import config.django_settings
    import config.settings

    def _reload():
        importlib.reload(config.settings)
        return importlib.reload(config.django_settings)

    yield _reload

    monkeypatch.undo()
    _reload()


@pytest.fixture
def client():
    from django.test import Client
    return Client()

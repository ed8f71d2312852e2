"""
Environment-backed configuration for beiwe.

Every value here is read once, when this module is first imported, and is
treated as read-only for the rest of the process. Django settings live in
config/django_settings.py and import what they need from this module.

A .env file in the working directory is loaded first; variables already
set in the process environment win over it.

Two patterns are used:
    optional with default  - getenv_with_default()
    required               - getenv_required(), fails at load time if unset
"""

import os
from dataclasses import dataclass

from django.core.exceptions import ImproperlyConfigured
from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True))

DEFAULT_STATIC_ROOT = "staticfiles"

TRUTHY = {"1", "true", "yes", "on"}


def getenv_with_default(name, default, environ=None):
    environ = os.environ if environ is None else environ
    # an empty value counts as unset
    return environ.get(name) or default


def getenv_required(name, environ=None):
    environ = os.environ if environ is None else environ
    value = environ.get(name)
    if not value:
        raise ImproperlyConfigured(f"The environment variable {name} must be set.")
    return value


def getenv_list(name, default="", environ=None):
    raw = getenv_with_default(name, default, environ)
    return [item.strip() for item in raw.split(",") if item.strip()]


def getenv_bool(name, default=False, environ=None):
    environ = os.environ if environ is None else environ
    raw = environ.get(name)
    if not raw:
        return default
    return raw.strip().lower() in TRUTHY


@dataclass(frozen=True)
class StaticRootConfig:
    """Directory that collectstatic writes to and the static route serves from.

    Installed files may be immutable (NixOS), so the output directory has to be
    something the deployment can point at a writable path.
    """
    root: str = DEFAULT_STATIC_ROOT

    @classmethod
    def from_environ(cls, environ=None):
        return cls(root=getenv_with_default("STATIC_ROOT", DEFAULT_STATIC_ROOT, environ))


STATIC_FILES = StaticRootConfig.from_environ()
STATIC_ROOT = STATIC_FILES.root

SECRET_KEY = getenv_required("DJANGO_SECRET_KEY")
DEBUG = getenv_bool("DJANGO_DEBUG")
ALLOWED_HOSTS = getenv_list("ALLOWED_HOSTS")
DATABASE_PATH = getenv_with_default("DATABASE_PATH", "db.sqlite3")
LOG_LEVEL = getenv_with_default("LOG_LEVEL", "INFO").upper()

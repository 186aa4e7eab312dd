import os
from pathlib import Path

from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent.parent


def get_env(name, default=None, cast=str, required=False):
    """
    Read a setting from the environment, casting it when present.
    Missing required values fail loudly at startup.
    """
    value = os.environ.get(name)
    if value is None:
        if required:
            raise ImproperlyConfigured(f"Set the {name} environment variable.")
        return default
    return cast(value)


def _integrity_key(value):
    return False if value.lower() in ("", "false", "0", "off") else value


DEBUG = False

SECRET_KEY = get_env("SECRET_KEY", "vitemanifest-insecure-key")

INSTALLED_APPS = [
    "django.contrib.staticfiles",
    "vitemanifest",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {"context_processors": ["django.template.context_processors.request"]},
    }
]

STATIC_URL = get_env("STATIC_URL", "/static/")

# Factory options for vitemanifest.make_vite; only configured keys are applied.
VITE = {
    key: value
    for key, value in {
        "build_dir": get_env("VITE_BUILD_DIR"),
        "public_dir": get_env("VITE_PUBLIC_DIR", str(BASE_DIR / "public")),
        "manifest_filename": get_env("VITE_MANIFEST_FILENAME"),
        "hotfile": get_env("VITE_HOTFILE"),
        "integrity_key": get_env("VITE_INTEGRITY_KEY", cast=_integrity_key),
    }.items()
    if value is not None
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "root": {"handlers": ["console"], "level": "INFO"},
    "loggers": {
        "vitemanifest": {
            "handlers": ["console"],
            "level": get_env("DJANGO_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}

from .base import *

# Tests build their own resolvers against temporary directories.
SECRET_KEY = "test-secret-key"

VITE = {}

DATABASES = {"default": {"ENGINE": "django.db.backends.sqlite3", "NAME": ":memory:"}}

LOGGING["loggers"]["vitemanifest"]["level"] = "WARNING"  # type: ignore

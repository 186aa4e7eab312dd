from django.core.exceptions import ImproperlyConfigured


class ViteException(Exception):
    """Base class for every failure raised while resolving Vite assets."""


class ManifestNotFound(ViteException):
    pass


class ManifestInvalid(ViteException):
    pass


class EntryNotFound(ViteException):
    pass


class ConfigurationError(ViteException, ImproperlyConfigured):
    """Raised when the resolver is built from malformed options."""

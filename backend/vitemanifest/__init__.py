from .exceptions import (
    ConfigurationError,
    EntryNotFound,
    ManifestInvalid,
    ManifestNotFound,
    ViteException,
)
from .factory import make_vite
from .vite import Vite, ViteConfig

__all__ = [
    "ConfigurationError",
    "EntryNotFound",
    "ManifestInvalid",
    "ManifestNotFound",
    "Vite",
    "ViteConfig",
    "ViteException",
    "make_vite",
]

import logging
from collections.abc import Mapping

from .exceptions import ConfigurationError
from .helpers import normalize_resolvers, random_str
from .vite import Vite

logger = logging.getLogger(__name__)

NONCE_LENGTH = 40

PLAIN_OPTIONS = ("hotfile", "build_dir", "public_dir", "manifest_filename")
RESOLVER_OPTIONS = ("script_tag_attributes_resolvers", "style_tag_attributes_resolvers")
KNOWN_OPTIONS = {
    *PLAIN_OPTIONS,
    *RESOLVER_OPTIONS,
    "asset_path_resolver",
    "integrity_key",
    "nonce",
}


def make_vite(options: Mapping | None = None, creator=None) -> Vite:
    """
    Build a configured Vite resolver from a mapping of options.

    Options:
     - asset_path_resolver: callable(path, context) -> str, or None
     - script_tag_attributes_resolvers: callable, attribute mapping, or a list of them
     - style_tag_attributes_resolvers: callable, attribute mapping, or a list of them
     - nonce: str, or None to generate a random nonce
     - build_dir, public_dir, manifest_filename: str
     - hotfile: str, or None for {public_dir}/hot
     - integrity_key: str, or False to disable integrity attributes

    Only the options present are applied. `creator` may supply the base
    instance; it must return a Vite.
    """
    options = dict(options or {})
    unknown = sorted(set(options) - KNOWN_OPTIONS)
    if unknown:
        raise ConfigurationError(f"Unknown Vite option(s): {', '.join(unknown)}")

    vite = creator() if creator else Vite()
    if not isinstance(vite, Vite):
        raise ConfigurationError(
            f"The creator callable must return an instance of {Vite.__module__}.{Vite.__qualname__}"
        )

    changes = {}
    for key in PLAIN_OPTIONS:
        if key not in options:
            continue
        value = options[key]
        if value is None and key != "hotfile":
            raise ConfigurationError(f"{key} must be a string; got None.")
        # hotfile=None restores the default {public_dir}/hot location.
        changes[key] = None if value is None else str(value)

    if "asset_path_resolver" in options:
        resolver = options["asset_path_resolver"]
        if resolver is not None and not callable(resolver):
            raise ConfigurationError(
                f"asset_path_resolver must be callable or None; got {resolver!r}."
            )
        changes["asset_path_resolver"] = resolver

    if "integrity_key" in options:
        integrity_key = options["integrity_key"]
        if integrity_key is not False and not isinstance(integrity_key, str):
            raise ConfigurationError(
                f"integrity_key must be a string or False; got {integrity_key!r}."
            )
        changes["integrity_key"] = integrity_key

    if "nonce" in options:
        nonce = options["nonce"]
        changes["nonce"] = random_str(NONCE_LENGTH) if nonce is None else str(nonce)

    for key in RESOLVER_OPTIONS:
        if key in options:
            existing = getattr(vite.config, key)
            changes[key] = (*existing, *normalize_resolvers(options[key]))

    logger.debug("Configuring Vite resolver with options: %s", ", ".join(sorted(changes)))
    return vite.reconfigure(**changes)

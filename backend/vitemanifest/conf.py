from django.conf import settings
from django.templatetags.static import static
from django.utils.module_loading import import_string

from .factory import make_vite

REQUEST_ATTRIBUTE = "_vite"


def static_path_resolver(path: str, context: dict) -> str:
    """Serve built assets through Django's staticfiles storage."""
    return static(path)


def _import(value):
    return import_string(value) if isinstance(value, str) else value


def vite_options() -> dict:
    """
    Read settings.VITE and resolve dotted import paths to objects.
    """
    options = dict(getattr(settings, "VITE", {}))
    if "asset_path_resolver" in options:
        options["asset_path_resolver"] = _import(options["asset_path_resolver"])
    for key in ("script_tag_attributes_resolvers", "style_tag_attributes_resolvers"):
        if key not in options:
            continue
        value = options[key]
        if isinstance(value, (list, tuple)):
            options[key] = [_import(item) for item in value]
        else:
            options[key] = _import(value)
    return options


def get_vite(request=None):
    """
    Build a resolver from settings. With a request, the resolver is built
    once and reused for the rest of that request so tags share one nonce.
    """
    if request is None:
        return make_vite(vite_options())
    vite = getattr(request, REQUEST_ATTRIBUTE, None)
    if vite is None:
        vite = make_vite(vite_options())
        setattr(request, REQUEST_ATTRIBUTE, vite)
    return vite

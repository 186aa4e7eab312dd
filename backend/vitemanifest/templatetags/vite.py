from django import template
from django.utils.safestring import mark_safe

from vitemanifest.conf import get_vite

register = template.Library()


@register.simple_tag(takes_context=True)
def vite(context, *entries: str, build_dir: str | None = None) -> str:
    """
    Render the <link>/<script> tags for one or more Vite entries.
    """
    return mark_safe(get_vite(context.get("request")).render(entries, build_dir))


@register.simple_tag(takes_context=True)
def vite_asset(context, path: str, build_dir: str | None = None) -> str:
    return get_vite(context.get("request")).asset(path, build_dir)


@register.simple_tag(takes_context=True)
def vite_nonce(context) -> str:
    return get_vite(context.get("request")).nonce or ""

import re
from collections.abc import Mapping

CSS_FILE_PATTERN = re.compile(r"\.(css|less|sass|scss|styl|stylus|pcss|postcss)(\?[^.]*)?$")


class StaticAttributes:
    """Attribute resolver that ignores its arguments and returns fixed attributes."""

    def __init__(self, attributes: Mapping):
        self.attributes = dict(attributes)

    def __call__(self, src, url, chunk=None, manifest=None) -> dict:
        return dict(self.attributes)

    def __repr__(self):
        return f"StaticAttributes({self.attributes!r})"


def as_resolver(value):
    if isinstance(value, Mapping):
        return StaticAttributes(value)
    return value


def is_css_file(path: str) -> bool:
    return CSS_FILE_PATTERN.search(path) is not None


def render_attributes(attributes: Mapping) -> str:
    # False and None drop the attribute, True renders the bare name.
    parts = []
    for name, value in attributes.items():
        if value is False or value is None:
            continue
        if value is True:
            parts.append(name)
        else:
            parts.append(f'{name}="{value}"')
    return " ".join(parts)


def stylesheet_tag(url: str, nonce=None, attributes: Mapping | None = None) -> str:
    merged = {"rel": "stylesheet", "href": url, "nonce": False if nonce is None else nonce}
    merged.update(attributes or {})
    return f"<link {render_attributes(merged)} />\n"


def script_tag(url: str, nonce=None, attributes: Mapping | None = None) -> str:
    merged = {"type": "module", "src": url, "nonce": False if nonce is None else nonce}
    merged.update(attributes or {})
    return f"<script {render_attributes(merged)}></script>\n"


def resolve_attributes(resolvers, src, url, chunk, manifest, integrity_key) -> dict:
    """
    Build the extra attributes for one tag: the chunk's integrity hash (when
    enabled) followed by every resolver's output, later resolvers winning.
    """
    attributes = {}
    if integrity_key is not False:
        attributes["integrity"] = (chunk or {}).get(integrity_key, False)
    for resolver in resolvers:
        attributes.update(resolver(src, url, chunk, manifest) or {})
    return attributes

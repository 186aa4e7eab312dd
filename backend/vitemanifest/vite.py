import logging
from dataclasses import dataclass, replace
from typing import Callable, Literal

from . import hot
from .attributes import (
    as_resolver,
    is_css_file,
    resolve_attributes,
    script_tag,
    stylesheet_tag,
)
from .helpers import partition
from .manifest import chunk_for, find_by_file, load_manifest, manifest_path

logger = logging.getLogger(__name__)

HOT_CLIENT = "@vite/client"


@dataclass(frozen=True)
class ViteConfig:
    build_dir: str = "build"
    public_dir: str = "public"
    manifest_filename: str = "manifest.json"
    hotfile: str | None = None
    # Manifest field holding the SRI hash; False disables integrity attributes.
    integrity_key: str | Literal[False] = "integrity"
    nonce: str | None = None
    asset_path_resolver: Callable[[str, dict], str] | None = None
    script_tag_attributes_resolvers: tuple = ()
    style_tag_attributes_resolvers: tuple = ()

    def __post_init__(self):
        object.__setattr__(
            self,
            "script_tag_attributes_resolvers",
            tuple(as_resolver(r) for r in self.script_tag_attributes_resolvers),
        )
        object.__setattr__(
            self,
            "style_tag_attributes_resolvers",
            tuple(as_resolver(r) for r in self.style_tag_attributes_resolvers),
        )


class Vite:
    """
    Turns Vite manifest entries into the <link> and <script> tags that load them.

    Configuration is immutable; use reconfigure() to derive a new resolver.
    """

    def __init__(self, config: ViteConfig | None = None):
        self.config = config or ViteConfig()

    def reconfigure(self, **changes) -> "Vite":
        return type(self)(replace(self.config, **changes))

    @property
    def nonce(self) -> str | None:
        return self.config.nonce

    @property
    def build_dir(self) -> str:
        return self.config.build_dir

    @property
    def hotfile(self) -> str:
        if self.config.hotfile is None:
            return f"{self.config.public_dir}/hot"
        return self.config.hotfile

    def manifest_path(self, build_dir: str | None = None):
        if build_dir is None:
            build_dir = self.config.build_dir
        return manifest_path(self.config.public_dir, build_dir, self.config.manifest_filename)

    def manifest(self, build_dir: str | None = None) -> dict:
        return load_manifest(self.manifest_path(build_dir))

    def is_running_hot(self) -> bool:
        return hot.is_running_hot(self.hotfile)

    def __call__(self, entries, build_dir: str | None = None) -> str:
        return self.render(entries, build_dir)

    def render(self, entries, build_dir: str | None = None) -> str:
        """
        Traverse the manifest and generate the HTML tags for the given entries.

        Stylesheets pulled in by imported chunks come first, then the entry's
        own file, then its CSS. Duplicates are dropped and every stylesheet is
        placed before every script.
        """
        if isinstance(entries, str):
            entries = [entries]
        if self.is_running_hot():
            tags = self._hot_tags(entries)
        else:
            tags = self._manifest_tags(
                entries, self.config.build_dir if build_dir is None else build_dir
            )

        stylesheets, scripts = partition(dict.fromkeys(tags), lambda tag: tag.startswith("<link"))
        logger.debug("Rendered %d Vite tags for %s", len(stylesheets) + len(scripts), list(entries))
        return "".join(stylesheets) + "".join(scripts)

    def asset(self, path: str, build_dir: str | None = None, context: dict | None = None) -> str:
        """Return the URL of a single manifest entry, or its dev-server URL when running hot."""
        if self.is_running_hot():
            return hot.hot_asset(self.hotfile, path)
        build_dir = self.config.build_dir if build_dir is None else build_dir
        chunk = chunk_for(self.manifest(build_dir), path)
        return self._asset_path(f"{build_dir}/{chunk['file']}", context or {})

    def _manifest_tags(self, entries, build_dir: str) -> list[str]:
        manifest = self.manifest(build_dir)
        tags = []
        for entry in entries:
            chunk = chunk_for(manifest, entry)
            for import_key in chunk.get("imports", []):
                for css in chunk_for(manifest, import_key).get("css", []):
                    tags.append(self._css_tag(css, build_dir, manifest))
            tags.append(
                self._tag_for_chunk(
                    entry, self._asset_path(f"{build_dir}/{chunk['file']}"), chunk, manifest
                )
            )
            for css in chunk.get("css", []):
                tags.append(self._css_tag(css, build_dir, manifest))
        return tags

    def _hot_tags(self, entries) -> list[str]:
        base_url = hot.hot_base_url(self.hotfile)
        return [
            self._tag_for_chunk(entry, f"{base_url}/{entry}")
            for entry in [HOT_CLIENT, *entries]
        ]

    def _css_tag(self, css: str, build_dir: str, manifest: dict) -> str:
        key, chunk = find_by_file(manifest, css)
        if key is None:
            logger.warning("No Vite manifest entry compiles to stylesheet %s", css)
        return self._tag_for_chunk(key, self._asset_path(f"{build_dir}/{css}"), chunk, manifest)

    def _tag_for_chunk(self, src, url: str, chunk: dict | None = None, manifest: dict | None = None) -> str:
        make_tag = stylesheet_tag if is_css_file(url) else script_tag
        if not self._needs_attributes(chunk):
            return make_tag(url)
        resolvers = (
            self.config.style_tag_attributes_resolvers
            if make_tag is stylesheet_tag
            else self.config.script_tag_attributes_resolvers
        )
        attributes = resolve_attributes(
            resolvers, src, url, chunk, manifest, self.config.integrity_key
        )
        return make_tag(url, self.config.nonce, attributes)

    def _needs_attributes(self, chunk: dict | None) -> bool:
        config = self.config
        has_integrity = config.integrity_key is not False and config.integrity_key in (chunk or {})
        return bool(
            config.nonce is not None
            or has_integrity
            or config.script_tag_attributes_resolvers
            or config.style_tag_attributes_resolvers
        )

    def _asset_path(self, path: str, context: dict | None = None) -> str:
        if self.config.asset_path_resolver is None:
            return path
        return self.config.asset_path_resolver(path, context or {})

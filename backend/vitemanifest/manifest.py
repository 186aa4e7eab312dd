import json
import logging
from pathlib import Path

from .exceptions import EntryNotFound, ManifestInvalid, ManifestNotFound

logger = logging.getLogger(__name__)


def manifest_path(public_dir: str, build_dir: str, filename: str) -> Path:
    # Template arguments arrive as SafeString, which pathlib cannot intern;
    # the joined f-string is always a plain str.
    return Path(f"{public_dir}/{build_dir}/.vite/{filename}")


def load_manifest(path: Path) -> dict:
    """
    Read and parse a Vite manifest file.
    Raises ManifestNotFound when the file is missing and ManifestInvalid when
    its contents are not a JSON object.
    """
    if not path.is_file():
        raise ManifestNotFound(f"Vite manifest not found at path: {path}")
    try:
        manifest = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ManifestInvalid(f"Invalid JSON in Vite manifest file at: {path}") from exc
    if not isinstance(manifest, dict):
        raise ManifestInvalid(f"Invalid JSON in Vite manifest file at: {path}")
    logger.debug("Loaded Vite manifest from %s (%d entries)", path, len(manifest))
    return manifest


def chunk_for(manifest: dict, entry: str) -> dict:
    """
    Return the chunk for an entry.
    Raises EntryNotFound for unknown keys and ManifestInvalid when the chunk
    is not a record with a string `file` and list `css`/`imports`.
    """
    if entry not in manifest:
        raise EntryNotFound(f"Unable to find entry in Vite manifest: {entry}")
    chunk = manifest[entry]
    if not isinstance(chunk, dict) or not isinstance(chunk.get("file"), str):
        raise ManifestInvalid(f"Vite manifest entry has no compiled file: {entry}")
    for field in ("css", "imports"):
        if not isinstance(chunk.get(field, []), list):
            raise ManifestInvalid(f"Vite manifest entry {entry} has a non-list {field!r} field")
    return chunk


def find_by_file(manifest: dict, file: str):
    """Return the first (key, chunk) pair whose compiled file matches."""
    for key, chunk in manifest.items():
        if isinstance(chunk, dict) and chunk.get("file") == file:
            return key, chunk
    return None, None

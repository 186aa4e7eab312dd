import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def is_running_hot(hotfile: str) -> bool:
    return Path(hotfile).is_file()


def hot_base_url(hotfile: str) -> str:
    url = Path(hotfile).read_text(encoding="utf-8").rstrip()
    logger.debug("Vite dev server running at %s", url)
    return url


def hot_asset(hotfile: str, path: str) -> str:
    return f"{hot_base_url(hotfile)}/{path}"

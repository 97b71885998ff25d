"""Read word lists from the filesystem."""
from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

SYSTEM_DICTIONARY_PATH = Path("/usr/share/dict")


def system_dictionary_path() -> Path:
    return SYSTEM_DICTIONARY_PATH


def read_dictionary_files(path: Path) -> list[str]:
    """Return the text of *path*, or of every regular file inside it.

    Files that cannot be read or decoded are skipped. A missing path yields
    an empty list so a host without a system dictionary still validates.
    """
    if not path.exists():
        logger.debug("Dictionary path %s does not exist", path)
        return []

    candidates = [path] if path.is_file() else sorted(p for p in path.iterdir() if p.is_file())
    blocks: list[str] = []
    for candidate in candidates:
        try:
            blocks.append(candidate.read_text(encoding="utf-8", errors="replace"))
        except OSError as exc:
            logger.debug("Skipping unreadable dictionary file %s: %s", candidate, exc)
    return blocks

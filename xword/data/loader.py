"""Word list ingestion."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..core.exceptions import WordListLoadError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def read_word_list(path: Path | str) -> List[str]:
    """Read words from a file, one entry per line. Blank lines are skipped."""

    source = Path(path)
    if not source.exists():
        raise WordListLoadError(f"Missing word list: {source}")
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise WordListLoadError(f"Cannot read word list {source}: {exc}") from exc

    words: List[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        words.append(line)
    LOGGER.info("Read %s words from %s", len(words), source)
    return words

"""Loading the word list words are drawn from."""
from __future__ import annotations

import logging
from pathlib import Path

from typeracer.keymap import is_typeable
from typeracer.types import WordListError

logger = logging.getLogger(__name__)


def parse_words(text: str) -> list[str]:
    """One word per line. Blank lines and untypeable entries are dropped.

    Raises WordListError if nothing usable remains.
    """
    words: list[str] = []
    skipped = 0
    for line in text.splitlines():
        word = line.strip()
        if not word:
            continue
        if not is_typeable(word):
            skipped += 1
            continue
        words.append(word)
    if skipped:
        logger.warning("skipped %d words with untypeable characters", skipped)
    if not words:
        raise WordListError("word list is empty")
    return words


def load_words(path: str | Path) -> list[str]:
    """Read and parse a word list file. Raises WordListError on any failure."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise WordListError(f"missing word list: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise WordListError(f"cannot read word list {path}: {exc}") from exc
    words = parse_words(text)
    logger.info("loaded %d words from %s", len(words), path)
    return words

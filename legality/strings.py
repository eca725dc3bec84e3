"""
strings – Character-set classification and the nickname word filter.

Gen 1/2 nicknames can only hold characters from one regional alphabet,
so the set a string fits in also tells how long it may be.
"""

from __future__ import annotations

import logging
import re
import threading
from pathlib import Path
from typing import Iterable, List, Optional

from legality.config import WORDFILTER_PATH

logger = logging.getLogger(__name__)


# ── Script classification ───────────────────────────────────────────────────

_G1_ENGLISH = re.compile(r"^[A-Za-z0-9 ()×:;\[\]\-?!♂♀/.,'’é]+$")
_G1_JAPANESE = re.compile(r"^[ぁ-んァ-ヴー0-9 ()×:;\[\]?!♂♀/.,・…「」『』]+$")
_G2_KOREAN = re.compile(r"^[가-힣 0-9?!.,\-♂♀]+$")
_EAST_ASIAN = re.compile(r"[一-鿿]")


def is_g1_english(text: str) -> bool:
    """Fits the Gen 1/2 international (Latin) character set."""
    return bool(_G1_ENGLISH.match(text))


def is_g1_japanese(text: str) -> bool:
    """Fits the Gen 1/2 Japanese (kana) character set."""
    return bool(_G1_JAPANESE.match(text))


def is_g2_korean(text: str) -> bool:
    """Fits the Gen 2 Korean (Hangul) character set."""
    return bool(_G2_KOREAN.match(text))


def has_east_asian_script(text: str) -> bool:
    """Contains CJK ideographs."""
    return bool(_EAST_ASIAN.search(text))


def normalize_apostrophe(text: str) -> str:
    return text.replace("'", "’")


# ── Word filter ─────────────────────────────────────────────────────────────

class WordFilter:
    """Case-insensitive regular-expression denylist."""

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self.patterns: List[str] = [p for p in patterns if p]
        self._compiled = [re.compile(p, re.IGNORECASE) for p in self.patterns]

    def is_filtered(self, text: str) -> Optional[str]:
        """Return the pattern *text* trips, or None."""
        for pattern, regex in zip(self.patterns, self._compiled):
            if regex.search(text):
                return pattern
        return None

    @classmethod
    def from_file(cls, path: Path) -> "WordFilter":
        patterns = []
        with open(path, encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#"):
                    patterns.append(line)
        logger.info("Loaded %d word filter patterns from %s", len(patterns), path)
        return cls(patterns)


_word_filter: Optional[WordFilter] = None
_word_filter_lock = threading.Lock()


def get_word_filter() -> WordFilter:
    """Shared filter loaded from ``WORDFILTER_PATH``; empty if the file is absent."""
    global _word_filter
    if _word_filter is None:
        with _word_filter_lock:
            if _word_filter is None:
                if WORDFILTER_PATH.exists():
                    _word_filter = WordFilter.from_file(WORDFILTER_PATH)
                else:
                    logger.warning("Word filter not found at %s; nickname filtering disabled",
                                   WORDFILTER_PATH)
                    _word_filter = WordFilter()
    return _word_filter

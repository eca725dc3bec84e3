"""
tables – Reference table store: default species names and trade tables.

The store is loaded once (JSON) and then shared read-only by every check:

  species  – per-language species name lists, indexed by species id
             (index 0 is the egg name)
  trades   – per version group, a LanguageID-indexed list of rows; each row
             is ``[nick_0 .. nick_n-1, ot_0 .. ot_n-1]``

An empty trade row means the trade was never localized for that language.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from legality.config import TABLES_PATH
from legality.game_data import LanguageID, get_generation_languages, language_from_code

logger = logging.getLogger(__name__)

TradeTable = Tuple[Tuple[str, ...], ...]

# Gen 3 stores every egg as the Japanese egg name.
G3_EGG_NAME = "タマゴ"

# Gen 1-4 French names drop the accents on E and I once upper-cased.
_FR_DIACRITICS = str.maketrans("ÈÉÊËÌÍÎÏ", "EEEEIIII")


class TableFormatError(ValueError):
    """Raised when reference data does not follow the table layout."""


# ── Store ───────────────────────────────────────────────────────────────────

class ReferenceTableStore:
    """Immutable lookup over the loaded reference tables."""

    def __init__(
        self,
        species: Optional[Mapping[int, Sequence[str]]] = None,
        trades: Optional[Mapping[str, Sequence[Sequence[str]]]] = None,
    ) -> None:
        self._species: Dict[int, Tuple[str, ...]] = {
            int(lang): tuple(names) for lang, names in (species or {}).items()
        }
        # name → species id, per language
        self._species_dict: Dict[int, Dict[str, int]] = {}
        for lang, names in self._species.items():
            lookup: Dict[str, int] = {}
            for index, name in enumerate(names):
                lookup.setdefault(name, index)
            self._species_dict[lang] = lookup

        self._trades: Dict[str, TradeTable] = {}
        for group, rows in (trades or {}).items():
            table = tuple(tuple(row) for row in rows)
            for lang, row in enumerate(table):
                if len(row) % 2:
                    raise TableFormatError(
                        f"Trade table {group} row {lang} has odd length {len(row)}"
                    )
            self._trades[group] = table

    # ── Species names ──

    @property
    def languages(self) -> List[int]:
        return sorted(self._species)

    @property
    def species_count(self) -> int:
        """Number of species every loaded language covers (0 if nothing loaded)."""
        if not self._species:
            return 0
        return min(len(names) for names in self._species.values())

    def get_species_name(self, species: int, language: int) -> str:
        names = self._species.get(language)
        if names is None or not 0 <= species < len(names):
            return ""
        return names[species]

    def species_name_generation(self, species: int, language: int, generation: int) -> str:
        """Default name as the given generation's games store it."""
        if generation == 3 and species == 0:
            return G3_EGG_NAME

        nick = self.get_species_name(species, language)
        if generation < 5 and (generation != 4 or species != 0):
            nick = nick.upper()
            if language == LanguageID.FRENCH:
                nick = nick.translate(_FR_DIACRITICS)
        if generation < 3:
            nick = nick.replace(" ", "")
        return nick

    def matches_any_language(self, species: int, nickname: str, generation: int) -> bool:
        """True if *nickname* is the default name of *species* in any language of *generation*."""
        return any(
            self.species_name_generation(species, lang, generation) == nickname
            for lang in get_generation_languages(generation)
        )

    def find_species(self, name: str) -> Iterator[Tuple[int, int]]:
        """Yield ``(language, species)`` for every language where *name* is a species name."""
        for lang in sorted(self._species_dict):
            species = self._species_dict[lang].get(name)
            if species is not None:
                yield lang, species

    # ── Trade tables ──

    @property
    def trade_groups(self) -> List[str]:
        return sorted(self._trades)

    def get_trade_table(self, group: str) -> Optional[TradeTable]:
        return self._trades.get(group)

    # ── Loading ──

    @classmethod
    def from_dict(cls, data: Mapping) -> "ReferenceTableStore":
        species_raw = data.get("species", {})
        trades_raw = data.get("trades", {})
        if not isinstance(species_raw, Mapping) or not isinstance(trades_raw, Mapping):
            raise TableFormatError("'species' and 'trades' must be objects")

        species: Dict[int, Sequence[str]] = {}
        for code, names in species_raw.items():
            try:
                species[language_from_code(code)] = names
            except ValueError as exc:
                raise TableFormatError(str(exc)) from exc
        return cls(species=species, trades=trades_raw)

    @classmethod
    def from_json(cls, path: Path) -> "ReferenceTableStore":
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            raise TableFormatError(f"{path}: {exc}") from exc
        store = cls.from_dict(data)
        logger.info(
            "Loaded reference tables from %s (%d languages, %d species, %d trade groups)",
            path, len(store.languages), store.species_count, len(store.trade_groups),
        )
        return store


# ── Process-wide store ──────────────────────────────────────────────────────

_store: Optional[ReferenceTableStore] = None
_store_lock = threading.Lock()


def get_tables() -> ReferenceTableStore:
    """Return the shared store, loading it from ``TABLES_PATH`` on first use."""
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                if TABLES_PATH.exists():
                    _store = ReferenceTableStore.from_json(TABLES_PATH)
                else:
                    logger.warning("Reference tables not found at %s; all checks will be indeterminate",
                                   TABLES_PATH)
                    _store = ReferenceTableStore()
    return _store


def load_tables(path: Path) -> ReferenceTableStore:
    """Load *path* and install it as the shared store."""
    store = ReferenceTableStore.from_json(path)
    set_tables(store)
    return store


def set_tables(store: Optional[ReferenceTableStore]) -> None:
    """Install (or with None, clear) the shared store.  Call before verifying."""
    global _store
    with _store_lock:
        _store = store

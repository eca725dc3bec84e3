"""
records – Read-only record and encounter views consumed by the verifiers.

A ``PokemonRecord`` is the subset of a stored Pokémon that naming checks
look at.  An ``Encounter`` is the template the encounter matcher resolved
the record to; it is a tagged union over ``EncounterKind`` with the
trade / mystery-gift payload carried as plain fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, TYPE_CHECKING

from legality.config import ASH_GRENINJA_CARD_ID, ASH_GRENINJA_FULL_ID
from legality.game_data import (
    LanguageID,
    get_version_group,
    is_platinum,
)

if TYPE_CHECKING:
    from legality.tables import ReferenceTableStore


# ── Pokémon record ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class PokemonRecord:
    """Naming-relevant view of a stored Pokémon."""
    species: int
    nickname: str
    is_nicknamed: bool = False
    language: int = LanguageID.ENGLISH
    ot_name: str = ""
    format: int = 3
    version: str = ""
    tid: int = 0
    sid: int = 0
    is_egg: bool = False
    was_traded_egg: bool = False
    vc: bool = False
    is_native: bool = True

    @property
    def full_id(self) -> int:
        """32-bit combined ID (SID << 16 | TID)."""
        return (self.sid << 16) | self.tid

    @property
    def korean(self) -> bool:
        return self.language == LanguageID.KOREAN

    @property
    def version_group(self) -> Optional[str]:
        return get_version_group(self.version)

    @property
    def pt(self) -> bool:
        return is_platinum(self.version)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PokemonRecord":
        """Build a record from a JSON mapping; unknown keys are ignored."""
        return cls(
            species=int(data["species"]),
            nickname=str(data.get("nickname", "")),
            is_nicknamed=bool(data.get("is_nicknamed", False)),
            language=int(data.get("language", LanguageID.ENGLISH)),
            ot_name=str(data.get("ot_name", "")),
            format=int(data.get("format", 3)),
            version=str(data.get("version", "")),
            tid=int(data.get("tid", 0)),
            sid=int(data.get("sid", 0)),
            is_egg=bool(data.get("is_egg", False)),
            was_traded_egg=bool(data.get("was_traded_egg", False)),
            vc=bool(data.get("vc", False)),
            is_native=bool(data.get("is_native", True)),
        )


# ── Encounter templates ─────────────────────────────────────────────────────

class EncounterKind(str, Enum):
    WILD = "wild"
    STATIC = "static"               # in-game gifts and fixed encounters
    MYSTERY_GIFT = "mystery_gift"
    TRADE = "trade"
    EGG = "egg"                     # bred


@dataclass(frozen=True)
class Encounter:
    """Encounter template a record was matched to."""
    kind: EncounterKind
    species: int
    generation: int
    is_egg: bool = False

    # Trade payload
    tid: int = 0
    trainer_names: Tuple[str, ...] = ()     # indexed by LanguageID
    trade_index: int = -1
    is_nicknamed: bool = True

    # Mystery gift payload
    card_id: int = 0

    @property
    def is_trade(self) -> bool:
        return self.kind == EncounterKind.TRADE

    @property
    def is_mystery_gift(self) -> bool:
        return self.kind == EncounterKind.MYSTERY_GIFT

    @property
    def is_static(self) -> bool:
        return self.kind == EncounterKind.STATIC

    def is_ash_greninja_gift(self, record: PokemonRecord) -> bool:
        """The distributed Ash-Greninja keeps its default name under any language."""
        return (
            self.is_mystery_gift
            and self.card_id == ASH_GRENINJA_CARD_ID
            and record.full_id == ASH_GRENINJA_FULL_ID
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Encounter":
        return cls(
            kind=EncounterKind(data["kind"]),
            species=int(data["species"]),
            generation=int(data["generation"]),
            is_egg=bool(data.get("is_egg", False)),
            tid=int(data.get("tid", 0)),
            trainer_names=tuple(data.get("trainer_names", ())),
            trade_index=int(data.get("trade_index", -1)),
            is_nicknamed=bool(data.get("is_nicknamed", True)),
            card_id=int(data.get("card_id", 0)),
        )


# ── Verification input ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class LegalityInfo:
    """Everything one naming check reads.  Built fresh per record."""
    record: PokemonRecord
    encounter: Encounter
    tables: "ReferenceTableStore"
    original: Optional[Encounter] = None    # before any VC re-match; defaults to ``encounter``
    active_language: Optional[int] = None   # language of the loaded save, if any

    @property
    def generation(self) -> int:
        return self.encounter.generation

    @property
    def encounter_original(self) -> Encounter:
        return self.original or self.encounter

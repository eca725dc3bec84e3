"""
game_data – Game versions, version groups and language IDs for Gen 1–7.

Provides:
  - ``GameVersion`` string constants for every main-series cartridge
  - Version → group lookups (trade tables are per group)
  - ``LanguageID`` exactly as stored in the record's language byte
  - Which languages each generation shipped in
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Optional, Tuple


# ═══════════════════════════════════════════════════════════════════════════════
#  VERSIONS
# ═══════════════════════════════════════════════════════════════════════════════

class GameVersion:
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    GOLD = "gold"
    SILVER = "silver"
    CRYSTAL = "crystal"
    RUBY = "ruby"
    SAPPHIRE = "sapphire"
    EMERALD = "emerald"
    FIRE_RED = "firered"
    LEAF_GREEN = "leafgreen"
    DIAMOND = "diamond"
    PEARL = "pearl"
    PLATINUM = "platinum"
    HEART_GOLD = "heartgold"
    SOUL_SILVER = "soulsilver"
    BLACK = "black"
    WHITE = "white"
    BLACK_2 = "black2"
    WHITE_2 = "white2"
    X = "x"
    Y = "y"
    OMEGA_RUBY = "omegaruby"
    ALPHA_SAPPHIRE = "alphasapphire"
    SUN = "sun"
    MOON = "moon"
    ULTRA_SUN = "ultrasun"
    ULTRA_MOON = "ultramoon"


class VersionGroup:
    RBY = "RBY"
    GSC = "GSC"
    RSE = "RSE"
    FRLG = "FRLG"
    DPPT = "DPPt"
    HGSS = "HGSS"
    BW = "BW"
    B2W2 = "B2W2"
    XY = "XY"
    AO = "AO"
    SM = "SM"
    USUM = "USUM"


# Version → (group, generation)
VERSION_DATA: Dict[str, Tuple[str, int]] = {
    GameVersion.RED:            (VersionGroup.RBY, 1),
    GameVersion.GREEN:          (VersionGroup.RBY, 1),
    GameVersion.BLUE:           (VersionGroup.RBY, 1),
    GameVersion.YELLOW:         (VersionGroup.RBY, 1),
    GameVersion.GOLD:           (VersionGroup.GSC, 2),
    GameVersion.SILVER:         (VersionGroup.GSC, 2),
    GameVersion.CRYSTAL:        (VersionGroup.GSC, 2),
    GameVersion.RUBY:           (VersionGroup.RSE, 3),
    GameVersion.SAPPHIRE:       (VersionGroup.RSE, 3),
    GameVersion.EMERALD:        (VersionGroup.RSE, 3),
    GameVersion.FIRE_RED:       (VersionGroup.FRLG, 3),
    GameVersion.LEAF_GREEN:     (VersionGroup.FRLG, 3),
    GameVersion.DIAMOND:        (VersionGroup.DPPT, 4),
    GameVersion.PEARL:          (VersionGroup.DPPT, 4),
    GameVersion.PLATINUM:       (VersionGroup.DPPT, 4),
    GameVersion.HEART_GOLD:     (VersionGroup.HGSS, 4),
    GameVersion.SOUL_SILVER:    (VersionGroup.HGSS, 4),
    GameVersion.BLACK:          (VersionGroup.BW, 5),
    GameVersion.WHITE:          (VersionGroup.BW, 5),
    GameVersion.BLACK_2:        (VersionGroup.B2W2, 5),
    GameVersion.WHITE_2:        (VersionGroup.B2W2, 5),
    GameVersion.X:              (VersionGroup.XY, 6),
    GameVersion.Y:              (VersionGroup.XY, 6),
    GameVersion.OMEGA_RUBY:     (VersionGroup.AO, 6),
    GameVersion.ALPHA_SAPPHIRE: (VersionGroup.AO, 6),
    GameVersion.SUN:            (VersionGroup.SM, 7),
    GameVersion.MOON:           (VersionGroup.SM, 7),
    GameVersion.ULTRA_SUN:      (VersionGroup.USUM, 7),
    GameVersion.ULTRA_MOON:     (VersionGroup.USUM, 7),
}


def get_version_group(version: str) -> Optional[str]:
    """Return the version group of a game, or None if unknown."""
    data = VERSION_DATA.get(version)
    return data[0] if data else None


def is_platinum(version: str) -> bool:
    return version == GameVersion.PLATINUM


# ═══════════════════════════════════════════════════════════════════════════════
#  LANGUAGES
# ═══════════════════════════════════════════════════════════════════════════════

class LanguageID(IntEnum):
    NONE = 0        # unset / hacked, never a real locale
    JAPANESE = 1
    ENGLISH = 2
    FRENCH = 3
    ITALIAN = 4
    GERMAN = 5
    UNUSED_6 = 6
    SPANISH = 7
    KOREAN = 8
    CHINESE_S = 9
    CHINESE_T = 10


# Short codes used by the reference table JSON
LANGUAGE_CODES: Dict[str, LanguageID] = {
    "ja": LanguageID.JAPANESE,
    "en": LanguageID.ENGLISH,
    "fr": LanguageID.FRENCH,
    "it": LanguageID.ITALIAN,
    "de": LanguageID.GERMAN,
    "es": LanguageID.SPANISH,
    "ko": LanguageID.KOREAN,
    "zh": LanguageID.CHINESE_S,
    "zh2": LanguageID.CHINESE_T,
}

_LANGUAGES_3 = (
    LanguageID.JAPANESE, LanguageID.ENGLISH, LanguageID.FRENCH,
    LanguageID.ITALIAN, LanguageID.GERMAN, LanguageID.SPANISH,
)
_LANGUAGES_4 = _LANGUAGES_3 + (LanguageID.KOREAN,)
_LANGUAGES_7 = _LANGUAGES_4 + (LanguageID.CHINESE_S, LanguageID.CHINESE_T)


def get_generation_languages(generation: int) -> Tuple[LanguageID, ...]:
    """Languages a generation's games were released in."""
    if generation in (1, 3):
        return _LANGUAGES_3
    if generation >= 7:
        return _LANGUAGES_7
    return _LANGUAGES_4


def language_from_code(code: str) -> LanguageID:
    """Map a short code ("en", "ja", …) to a LanguageID."""
    lang = LANGUAGE_CODES.get(code.strip().lower())
    if lang is None:
        raise ValueError(f"Unknown language code: {code}")
    return lang

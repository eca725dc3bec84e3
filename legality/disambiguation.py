"""
disambiguation – Recover the real language of trades that share one tag.

Some in-game trades were stored with the same language byte in every
localization of the game:

  Jynx (FRLG)              – Leaf Green Italian kept the English OT
  Meister's Magikarp (DP)  – always German
  Surge's Pikachu (HGSS)   – always English

Each detector takes the stored language and returns the language whose
trade row the record should be checked against.  When nothing identifies
the origin the stored language is returned unchanged.
"""

from __future__ import annotations

import logging
from typing import Optional

from legality.config import MEISTER_MAGIKARP_INDEX, SURGE_PIKACHU_INDEX
from legality.game_data import GameVersion, LanguageID
from legality.records import PokemonRecord
from legality.tables import TradeTable

logger = logging.getLogger(__name__)


def detect_trade_language_g3_jynx(record: PokemonRecord, lang: int) -> int:
    if lang != LanguageID.ITALIAN:
        return lang

    if record.version == GameVersion.LEAF_GREEN:
        lang = LanguageID.ENGLISH  # OT was not localized; same as English
    return lang


def _find_ot_row(table: TradeTable, ot_name: str, index: int) -> Optional[int]:
    """First row whose OT for template *index* is *ot_name*."""
    for lang, row in enumerate(table):
        if not row:
            continue
        pos = len(row) // 2 + index
        if pos >= len(row) or row[pos] != ot_name:
            continue
        return lang
    return None


def _nickname_at(table: TradeTable, lang: int, index: int) -> str:
    if lang < len(table) and index < len(table[lang]):
        return table[lang][index]
    return ""


def detect_trade_language_g4_meister_magikarp(
    record: PokemonRecord, lang: int, table: TradeTable,
) -> int:
    if lang == LanguageID.ENGLISH:
        return LanguageID.GERMAN

    # All are tagged German regardless of origin; go by the OT.
    index = MEISTER_MAGIKARP_INDEX
    found = _find_ot_row(table, record.ot_name, index)
    if found is not None:
        logger.debug("Magikarp OT %r matches language %d", record.ot_name, found)
        lang = found

    # English OT is shared with French and Spanish; the nickname tells them apart.
    if lang == LanguageID.ENGLISH:
        if record.nickname == _nickname_at(table, LanguageID.FRENCH, index):
            return LanguageID.FRENCH
        return LanguageID.SPANISH  # Spanish is the same as English
    return lang


def detect_trade_language_g4_surge_pikachu(
    record: PokemonRecord, lang: int, table: TradeTable,
) -> int:
    if lang == LanguageID.FRENCH:
        return LanguageID.ENGLISH

    # All are tagged English regardless of origin; go by the OT.
    index = SURGE_PIKACHU_INDEX
    found = _find_ot_row(table, record.ot_name, index)
    if found is not None:
        logger.debug("Pikachu OT %r matches language %d", record.ot_name, found)
        lang = found

    # English OT is shared with Spanish and Italian; the nickname tells them apart.
    if lang == LanguageID.ENGLISH:
        if record.nickname == _nickname_at(table, LanguageID.ITALIAN, index):
            return LanguageID.ITALIAN
        return LanguageID.SPANISH
    return lang


def detect_trade_language_g4_dp(
    record: PokemonRecord, lang: int, table: TradeTable, index: int,
) -> int:
    """
    Diamond/Pearl English-release trades carry the Japanese language tag.

    If the nickname is not the Japanese row's nickname for this trade, the
    record came from an English cartridge.
    """
    if record.pt or lang != LanguageID.JAPANESE:
        return lang
    if _nickname_at(table, LanguageID.JAPANESE, index) != record.nickname:
        return LanguageID.ENGLISH
    return lang

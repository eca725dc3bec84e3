"""
trade_verifier – Nickname / OT checks for in-game trades, Gen 1–7.

Every generation stores trade names differently, so the checks are routed
through ``TRADE_HANDLERS`` keyed by ``(generation, version group)``, with
``(generation, None)`` as the per-generation default.

Table-backed handlers resolve a language and compare the record against
the trade table row for that language:

    row = [nick_0 .. nick_n-1, ot_0 .. ot_n-1]
    nickname → row[index], OT → row[n + index]
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from legality.config import (
    CURTIS_TID,
    G1_TRADE_OT,
    G1_TRADE_OT_JAPANESE,
    RANCH_OT_NAMES,
    RANCH_TID,
    YANCY_TID,
)
from legality.disambiguation import (
    detect_trade_language_g3_jynx,
    detect_trade_language_g4_dp,
    detect_trade_language_g4_meister_magikarp,
    detect_trade_language_g4_surge_pikachu,
)
from legality.game_data import LanguageID, VersionGroup
from legality.records import Encounter, LegalityInfo, PokemonRecord
from legality.verdicts import (
    CheckIdentifier,
    Reason,
    Severity,
    Verdict,
    get_invalid,
    get_valid,
    make_verdict,
)

logger = logging.getLogger(__name__)

SPECIES_JYNX = 124
SPECIES_PIKACHU = 25
SPECIES_MAGIKARP = 129

TradeHandler = Callable[[LegalityInfo, List[Verdict]], None]


# ── Dispatch ────────────────────────────────────────────────────────────────

def verify_trade(info: LegalityInfo) -> List[Verdict]:
    """Run the trade checks for the record's origin generation."""
    results: List[Verdict] = []
    key = (info.generation, info.record.version_group)
    handler = TRADE_HANDLERS.get(key) or TRADE_HANDLERS.get((info.generation, None))
    if handler is None:
        logger.debug("No trade handler for %s", key)
        return results
    handler(info, results)
    return results


# ── Gen 1/2 ─────────────────────────────────────────────────────────────────

def is_trade1_valid(record: PokemonRecord, encounter: Encounter) -> bool:
    """
    OT check for Gen 1 trades without a fixed trainer ID.

    While in a Gen 1/2 format the OT is the in-game "TRAINER" string; once
    transferred it is one of the template's localized trainer names.
    """
    if record.format <= 2:
        if record.language == LanguageID.JAPANESE:
            return record.ot_name == G1_TRADE_OT_JAPANESE
        return record.ot_name == G1_TRADE_OT
    return any(name and name == record.ot_name for name in encounter.trainer_names)


def _verify_trade12(info: LegalityInfo, results: List[Verdict]) -> None:
    et = info.encounter_original
    if et.tid != 0:  # Gen 2 trade
        return  # fully checked when the encounter was matched

    if not is_trade1_valid(info.record, et):
        results.append(get_invalid(Reason.TRADE_OT_MISMATCH, CheckIdentifier.TRAINER))


# ── Gen 3 ───────────────────────────────────────────────────────────────────

def _verify_trade3_frlg(info: LegalityInfo, results: List[Verdict]) -> None:
    lang = info.record.language
    if info.encounter.species == SPECIES_JYNX:
        lang = detect_trade_language_g3_jynx(info.record, lang)
    verify_trade_table(info, results, VersionGroup.FRLG, lang)


def _verify_trade3_rse(info: LegalityInfo, results: List[Verdict]) -> None:
    verify_trade_table(info, results, VersionGroup.RSE, info.record.language)


# ── Gen 4 ───────────────────────────────────────────────────────────────────

def _check_korean_save(info: LegalityInfo, results: List[Verdict], lang: int) -> None:
    # Korean origin carries a non-Korean tag; only a Korean save could have received it.
    active = info.active_language
    if (info.record.format == 4 and lang == LanguageID.KOREAN
            and active is not None and active >= 0 and active != LanguageID.KOREAN):
        results.append(get_invalid(Reason.LANGUAGE_SAVE_MISMATCH, CheckIdentifier.LANGUAGE))


def _verify_trade4_hgss(info: LegalityInfo, results: List[Verdict]) -> None:
    if info.record.tid == RANCH_TID:
        verify_trade_ot_only(info, results, RANCH_OT_NAMES)
        return

    lang = info.record.language
    if info.encounter.species == SPECIES_PIKACHU:
        table = info.tables.get_trade_table(VersionGroup.HGSS) or ()
        lang = detect_trade_language_g4_surge_pikachu(info.record, lang, table)
        _check_korean_save(info, results, lang)
    verify_trade_table(info, results, VersionGroup.HGSS, lang)


def _verify_trade4_dppt(info: LegalityInfo, results: List[Verdict]) -> None:
    if info.record.tid == RANCH_TID:
        verify_trade_ot_only(info, results, RANCH_OT_NAMES)
        return

    lang = info.record.language
    table = info.tables.get_trade_table(VersionGroup.DPPT) or ()
    if info.encounter.species == SPECIES_MAGIKARP:
        lang = detect_trade_language_g4_meister_magikarp(info.record, lang, table)
        _check_korean_save(info, results, lang)
    else:
        lang = detect_trade_language_g4_dp(info.record, lang, table, info.encounter.trade_index)
    verify_trade_table(info, results, VersionGroup.DPPT, lang)


# ── Gen 5 ───────────────────────────────────────────────────────────────────

def _verify_trade5_bw(info: LegalityInfo, results: List[Verdict]) -> None:
    lang = info.record.language
    if info.record.format == 5 and lang == LanguageID.NONE:
        results.append(get_invalid(Reason.LANGUAGE_UNEXPECTED, CheckIdentifier.LANGUAGE, lang))

    lang = max(lang, LanguageID.JAPANESE)
    verify_trade_table(info, results, VersionGroup.BW, lang)


def _verify_trade5_b2w2(info: LegalityInfo, results: List[Verdict]) -> None:
    t = info.encounter
    if t.tid in (YANCY_TID, CURTIS_TID):
        verify_trade_ot_only(info, results, t.trainer_names)
    else:
        verify_trade_table(info, results, VersionGroup.B2W2, info.record.language)


# ── Gen 6/7 ─────────────────────────────────────────────────────────────────

def _verify_trade6_xy(info: LegalityInfo, results: List[Verdict]) -> None:
    verify_trade_table(info, results, VersionGroup.XY, info.record.language)


def _verify_trade6_ao(info: LegalityInfo, results: List[Verdict]) -> None:
    verify_trade_table(info, results, VersionGroup.AO, info.record.language)


def _verify_trade7_sm(info: LegalityInfo, results: List[Verdict]) -> None:
    verify_trade_table(info, results, VersionGroup.SM, info.record.language)


def _verify_trade7_usum(info: LegalityInfo, results: List[Verdict]) -> None:
    verify_trade_table(info, results, VersionGroup.USUM, info.record.language)


TRADE_HANDLERS: Dict[Tuple[int, Optional[str]], TradeHandler] = {
    (1, None): _verify_trade12,
    (2, None): _verify_trade12,
    (3, VersionGroup.FRLG): _verify_trade3_frlg,
    (3, None): _verify_trade3_rse,
    (4, VersionGroup.HGSS): _verify_trade4_hgss,
    (4, None): _verify_trade4_dppt,
    (5, VersionGroup.BW): _verify_trade5_bw,
    (5, None): _verify_trade5_b2w2,
    (6, VersionGroup.XY): _verify_trade6_xy,
    (6, VersionGroup.AO): _verify_trade6_ao,
    (7, VersionGroup.SM): _verify_trade7_sm,
    (7, VersionGroup.USUM): _verify_trade7_usum,
}


# ── Table matching ──────────────────────────────────────────────────────────

def verify_trade_table(info: LegalityInfo, results: List[Verdict], group: str, language: int) -> None:
    """Check nickname and OT against the *group* trade table row for *language*."""
    table = info.tables.get_trade_table(group)
    if not table:
        results.append(make_verdict(Severity.INDETERMINATE, Reason.TRADE_TABLE_MISSING, CheckIdentifier.TRAINER))
        return
    row = table[language] if 0 <= language < len(table) else table[0]
    verify_trade_ot_nick(info, results, row, info.encounter.trade_index)


def verify_trade_ot_nick(info: LegalityInfo, results: List[Verdict], row: Sequence[str], index: int) -> None:
    if len(row) == 0:
        results.append(make_verdict(Severity.INDETERMINATE, Reason.TRADE_TABLE_MISSING, CheckIdentifier.TRAINER))
        return
    count = len(row) // 2
    if index < 0 or index >= count:
        results.append(make_verdict(Severity.INDETERMINATE, Reason.TRADE_TEMPLATE_UNKNOWN, CheckIdentifier.TRAINER))
        return

    nick = row[index]
    ot = row[count + index]

    record = info.record
    if not is_nickname_match(nick, record, info.encounter):
        results.append(get_invalid(Reason.TRADE_NICKNAME_MISMATCH, CheckIdentifier.NICKNAME))
    else:
        results.append(get_valid(Reason.TRADE_MATCH, CheckIdentifier.NICKNAME))

    if ot != record.ot_name:
        results.append(get_invalid(Reason.TRADE_OT_MISMATCH, CheckIdentifier.TRAINER))


def is_nickname_match(nick: str, record: PokemonRecord, encounter: Encounter) -> bool:
    if nick != record.nickname:
        return False
    # unnamed trades share the table with named ones
    return encounter.is_nicknamed


def verify_trade_ot_only(info: LegalityInfo, results: List[Verdict], valid_ot: Sequence[str]) -> None:
    results.append(check_trade_ot_only(info.record, valid_ot))


def check_trade_ot_only(record: PokemonRecord, valid_ot: Sequence[str]) -> Verdict:
    """Trades that keep the species name; only the OT varies by language."""
    if record.is_nicknamed:
        return get_invalid(Reason.TRADE_NICKNAME_MISMATCH, CheckIdentifier.NICKNAME)
    lang = record.language
    if lang < 0 or len(valid_ot) <= lang or not valid_ot[lang]:
        return get_invalid(Reason.TRADE_OT_MISSING, CheckIdentifier.TRAINER)
    if valid_ot[lang] != record.ot_name:
        return get_invalid(Reason.TRADE_OT_MISMATCH, CheckIdentifier.TRAINER)
    return get_valid(Reason.TRADE_MATCH, CheckIdentifier.NICKNAME)

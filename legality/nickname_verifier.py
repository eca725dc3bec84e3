"""
nickname_verifier – Is a record's nickname consistent with its encounter?

Decision order for ``verify_nickname``:
  1. Empty nickname                      → invalid, stop
  2. Species beyond the name tables      → indeterminate, stop
  3. VC origin + nicknamed               → character-set / length check
     otherwise mystery gift + nicknamed  → fishy
  4. In-game trade                       → trade_verifier, stop
  5. Egg                                 → egg name / flag checks, stop
  6. Default-name match, then the word filter for custom names
"""

from __future__ import annotations

import logging
from typing import List, Optional

from legality import config
from legality.config import (
    EAST_ASIAN_SCRIPT_GENERATION,
    G1_ENGLISH_MAX_LENGTH,
    G1_JAPANESE_MAX_LENGTH,
    G2_KOREAN_MAX_LENGTH,
)
from legality.records import Encounter, LegalityInfo, PokemonRecord
from legality.strings import (
    WordFilter,
    get_word_filter,
    has_east_asian_script,
    is_g1_english,
    is_g1_japanese,
    is_g2_korean,
    normalize_apostrophe,
)
from legality.tables import ReferenceTableStore, get_tables
from legality.trade_verifier import verify_trade
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


def verify_nickname(
    record: PokemonRecord,
    encounter: Encounter,
    *,
    original: Optional[Encounter] = None,
    active_language: Optional[int] = None,
    tables: Optional[ReferenceTableStore] = None,
    word_filter: Optional[WordFilter] = None,
) -> List[Verdict]:
    """
    Verify the nickname (and, for trades, the OT) of *record*.

    Args:
        record: The Pokémon being checked.
        encounter: The encounter template it was matched to.
        original: The template before any VC re-match (Gen 1/2 trades).
        active_language: Language of the loaded save, if known.
        tables: Reference tables; defaults to the shared store.
        word_filter: Denylist for custom names; defaults to the shared filter.

    Returns:
        Verdicts in display order.
    """
    info = LegalityInfo(
        record=record,
        encounter=encounter,
        tables=tables if tables is not None else get_tables(),
        original=original,
        active_language=active_language,
    )
    results: List[Verdict] = []

    if len(record.nickname) == 0:
        results.append(get_invalid(Reason.NICKNAME_EMPTY))
        return results
    if record.species >= info.tables.species_count:
        results.append(make_verdict(Severity.INDETERMINATE, Reason.SPECIES_OUT_OF_RANGE))
        return results

    if record.vc and record.is_nicknamed:
        verify_g1_nickname_within_bounds(record, results)
    elif encounter.is_mystery_gift:
        if record.is_nicknamed and not encounter.is_egg:
            results.append(make_verdict(Severity.FISHY, Reason.NICKNAME_FLAGGED_GIFT))

    if encounter.is_trade:
        results.extend(verify_trade(info))
        return results

    if record.is_egg:
        verify_nickname_egg(info, results)
        return results

    nickname = normalize_apostrophe(record.nickname)
    if verify_un_nicknamed_encounter(info, results, nickname):
        return results

    # Non-nicknamed strings have already been checked.
    if config.CHECK_WORD_FILTER and record.is_nicknamed:
        bad = (word_filter or get_word_filter()).is_filtered(nickname)
        if bad is not None:
            logger.debug("Nickname %r blocked by %r", nickname, bad)
            results.append(get_invalid(Reason.NICKNAME_FILTERED, CheckIdentifier.NICKNAME, bad))
    return results


# ── Default / custom names ──────────────────────────────────────────────────

def verify_un_nicknamed_encounter(info: LegalityInfo, results: List[Verdict], nickname: str) -> bool:
    """
    Compare *nickname* with the default species names.

    Returns True when a custom nickname was already judged (species name or
    impossible script) and no further filtering should run.
    """
    record = info.record
    tables = info.tables

    if record.is_nicknamed:
        for lang, species in tables.find_species(nickname):
            if species == record.species and lang != record.language:
                reason = Reason.NICKNAME_OTHER_LANGUAGE
            else:
                reason = Reason.NICKNAME_MATCHES_SPECIES
            results.append(make_verdict(Severity.FISHY, reason))
            return True
        if has_east_asian_script(nickname) and info.generation < EAST_ASIAN_SCRIPT_GENERATION:
            results.append(get_invalid(Reason.NICKNAME_EAST_ASIAN))
            return True
        results.append(get_valid(Reason.NICKNAME_CUSTOM))
    elif record.format < 3:
        # Gen 1/2 only clear the flag when the name already is the default.
        results.append(get_valid(Reason.NICKNAME_DEFAULT))
    else:
        # Another language's name needs an evolution or a traded egg.
        evolved = info.encounter.species != record.species
        match = _is_default_name(tables, record, nickname, record.format, evolved)
        if not match and record.format == 5 and not record.is_native:  # transferred from Gen 4
            match = _is_default_name(tables, record, nickname, 4, evolved)

        if match:
            results.append(get_valid(Reason.NICKNAME_DEFAULT))
        elif info.encounter.is_ash_greninja_gift(record):
            results.append(get_valid(Reason.NICKNAME_ASH_GRENINJA))
        else:
            results.append(get_invalid(Reason.NICKNAME_MISMATCH))
    return False


def _is_default_name(
    tables: ReferenceTableStore, record: PokemonRecord, nickname: str, generation: int, evolved: bool,
) -> bool:
    if tables.species_name_generation(record.species, record.language, generation) == nickname:
        return True
    if record.was_traded_egg or evolved:
        return not tables.matches_any_language(record.species, nickname, generation)
    return False


# ── Eggs ────────────────────────────────────────────────────────────────────

def verify_nickname_egg(info: LegalityInfo, results: List[Verdict]) -> None:
    record = info.record

    if record.format == 4:
        if record.is_nicknamed:  # Gen 4 doesn't use the flag for eggs
            results.append(get_invalid(Reason.EGG_FLAG_SET, CheckIdentifier.EGG))
    elif record.format == 7:
        if info.encounter.is_static ^ (not record.is_nicknamed):  # in-game gift eggs are not flagged
            reason = Reason.EGG_FLAG_SET if record.is_nicknamed else Reason.EGG_FLAG_MISSING
            results.append(get_invalid(reason, CheckIdentifier.EGG))
    elif not record.is_nicknamed:
        results.append(get_invalid(Reason.EGG_FLAG_MISSING, CheckIdentifier.EGG))

    tables = info.tables
    if record.format == 2 and not tables.matches_any_language(0, record.nickname, 2):
        results.append(get_valid(Reason.EGG_NAME_MATCH, CheckIdentifier.EGG))
    elif tables.species_name_generation(0, record.language, info.generation) != record.nickname:
        results.append(get_invalid(Reason.EGG_NAME_MISMATCH, CheckIdentifier.EGG))
    else:
        results.append(get_valid(Reason.EGG_NAME_MATCH, CheckIdentifier.EGG))


# ── Gen 1/2 character sets ──────────────────────────────────────────────────

def verify_g1_nickname_within_bounds(record: PokemonRecord, results: List[Verdict]) -> None:
    text = record.nickname
    if is_g1_english(text):
        if len(text) > G1_ENGLISH_MAX_LENGTH:
            results.append(get_invalid(Reason.NICKNAME_TOO_LONG))
    elif is_g1_japanese(text):
        if len(text) > G1_JAPANESE_MAX_LENGTH:
            results.append(get_invalid(Reason.NICKNAME_TOO_LONG))
    elif record.korean and is_g2_korean(text):
        if len(text) > G2_KOREAN_MAX_LENGTH:
            results.append(get_invalid(Reason.NICKNAME_TOO_LONG_KOREAN))
    else:
        results.append(get_invalid(Reason.NICKNAME_CHARSET))

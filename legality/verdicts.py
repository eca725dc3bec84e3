"""
verdicts – Graded check results and their reason codes.

Severities:
  VALID          – consistent with the matched encounter
  FISHY          – legal, but rare enough to point out
  INVALID        – the record is rejected
  INDETERMINATE  – reference data is missing; no call is made
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    VALID = "valid"
    FISHY = "fishy"
    INVALID = "invalid"
    INDETERMINATE = "indeterminate"


class CheckIdentifier(str, Enum):
    NICKNAME = "nickname"
    TRAINER = "trainer"
    EGG = "egg"
    LANGUAGE = "language"


# ── Reason codes ────────────────────────────────────────────────────────────
# code → human-readable message

class Reason:
    NICKNAME_EMPTY = "nickname_empty"
    SPECIES_OUT_OF_RANGE = "species_out_of_range"
    NICKNAME_TOO_LONG = "nickname_too_long"
    NICKNAME_TOO_LONG_KOREAN = "nickname_too_long_korean"
    NICKNAME_CHARSET = "nickname_charset"
    NICKNAME_FLAGGED_GIFT = "nickname_flagged_gift"
    NICKNAME_OTHER_LANGUAGE = "nickname_other_language"
    NICKNAME_MATCHES_SPECIES = "nickname_matches_species"
    NICKNAME_EAST_ASIAN = "nickname_east_asian"
    NICKNAME_CUSTOM = "nickname_custom"
    NICKNAME_DEFAULT = "nickname_default"
    NICKNAME_ASH_GRENINJA = "nickname_ash_greninja"
    NICKNAME_MISMATCH = "nickname_mismatch"
    NICKNAME_FILTERED = "nickname_filtered"
    EGG_FLAG_SET = "egg_flag_set"
    EGG_FLAG_MISSING = "egg_flag_missing"
    EGG_NAME_MISMATCH = "egg_name_mismatch"
    EGG_NAME_MATCH = "egg_name_match"
    TRADE_TABLE_MISSING = "trade_table_missing"
    TRADE_TEMPLATE_UNKNOWN = "trade_template_unknown"
    TRADE_NICKNAME_MISMATCH = "trade_nickname_mismatch"
    TRADE_OT_MISMATCH = "trade_ot_mismatch"
    TRADE_OT_MISSING = "trade_ot_missing"
    TRADE_MATCH = "trade_match"
    LANGUAGE_UNEXPECTED = "language_unexpected"
    LANGUAGE_SAVE_MISMATCH = "language_save_mismatch"


MESSAGES = {
    Reason.NICKNAME_EMPTY: "Nickname is empty.",
    Reason.SPECIES_OUT_OF_RANGE: "Species is not covered by the loaded name tables.",
    Reason.NICKNAME_TOO_LONG: "Nickname too long.",
    Reason.NICKNAME_TOO_LONG_KOREAN: "Korean nickname too long.",
    Reason.NICKNAME_CHARSET: "Nickname contains characters the game cannot encode.",
    Reason.NICKNAME_FLAGGED_GIFT: "Mystery gift is nicknamed.",
    Reason.NICKNAME_OTHER_LANGUAGE: "Nickname matches the species name in another language.",
    Reason.NICKNAME_MATCHES_SPECIES: "Nickname matches a species name.",
    Reason.NICKNAME_EAST_ASIAN: "East Asian script is not available in the origin game.",
    Reason.NICKNAME_CUSTOM: "Nickname does not match any species name.",
    Reason.NICKNAME_DEFAULT: "Nickname matches the species name.",
    Reason.NICKNAME_ASH_GRENINJA: "Ash-Greninja keeps its distributed name.",
    Reason.NICKNAME_MISMATCH: "Nickname does not match the species name.",
    Reason.NICKNAME_FILTERED: "Nickname is blocked by the word filter: {0}",
    Reason.EGG_FLAG_SET: "Egg should not be flagged as nicknamed.",
    Reason.EGG_FLAG_MISSING: "Egg should be flagged as nicknamed.",
    Reason.EGG_NAME_MISMATCH: "Egg name does not match the language egg name.",
    Reason.EGG_NAME_MATCH: "Egg matches the language egg name.",
    Reason.TRADE_TABLE_MISSING: "No trade data for this language.",
    Reason.TRADE_TEMPLATE_UNKNOWN: "Trade template not found in the trade table.",
    Reason.TRADE_NICKNAME_MISMATCH: "In-game trade nickname does not match.",
    Reason.TRADE_OT_MISMATCH: "In-game trade OT does not match.",
    Reason.TRADE_OT_MISSING: "In-game trade has no OT for this language.",
    Reason.TRADE_MATCH: "In-game trade nickname and OT match.",
    Reason.LANGUAGE_UNEXPECTED: "Language ID {0} is not expected for this trade.",
    Reason.LANGUAGE_SAVE_MISMATCH: "Korean origin trade on a non-Korean save.",
}


@dataclass(frozen=True)
class Verdict:
    """One graded result line."""
    severity: Severity
    category: CheckIdentifier
    reason: str
    comment: str = ""

    @property
    def valid(self) -> bool:
        return self.severity != Severity.INVALID

    def summary(self) -> str:
        return f"{self.severity.value.upper()} [{self.category.value}] {self.comment or self.reason}"


def make_verdict(
    severity: Severity,
    reason: str,
    category: CheckIdentifier = CheckIdentifier.NICKNAME,
    *args: object,
) -> Verdict:
    """Create a verdict with its message filled from ``MESSAGES``."""
    comment = MESSAGES.get(reason, reason).format(*args)
    return Verdict(severity, category, reason, comment)


def get_valid(reason: str, category: CheckIdentifier = CheckIdentifier.NICKNAME) -> Verdict:
    return make_verdict(Severity.VALID, reason, category)


def get_invalid(reason: str, category: CheckIdentifier = CheckIdentifier.NICKNAME, *args: object) -> Verdict:
    return make_verdict(Severity.INVALID, reason, category, *args)

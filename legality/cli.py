"""
cli – Batch nickname checker.

Reads a JSON list of cases and prints the verdicts for each:

    [
      {"record": {...}, "encounter": {...},
       "original": {...}, "active_language": 2},      # last two optional
      ...
    ]

Exit status is 1 if any case produced an invalid verdict.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from legality.config import TABLES_PATH
from legality.nickname_verifier import verify_nickname
from legality.records import Encounter, PokemonRecord
from legality.strings import WordFilter
from legality.tables import ReferenceTableStore, load_tables
from legality.verdicts import Verdict

logger = logging.getLogger(__name__)


@dataclass
class CaseResult:
    """Outcome of one checked case."""
    index: int
    record: Optional[PokemonRecord] = None
    verdicts: List[Verdict] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def invalid(self) -> bool:
        return self.error is not None or any(not v.valid for v in self.verdicts)


def check_cases(
    cases: List[Dict[str, Any]],
    tables: ReferenceTableStore,
    word_filter: Optional[WordFilter] = None,
    active_language: Optional[int] = None,
) -> List[CaseResult]:
    """Verify every case; malformed cases are reported, not raised."""
    results = []
    for i, case in enumerate(cases):
        result = CaseResult(index=i)
        try:
            result.record = PokemonRecord.from_dict(case["record"])
            encounter = Encounter.from_dict(case["encounter"])
            original = Encounter.from_dict(case["original"]) if case.get("original") else None
        except (KeyError, TypeError, ValueError) as exc:
            logger.error("Case %d is malformed: %s", i, exc)
            result.error = f"malformed case: {exc}"
            results.append(result)
            continue

        result.verdicts = verify_nickname(
            result.record,
            encounter,
            original=original,
            active_language=case.get("active_language", active_language),
            tables=tables,
            word_filter=word_filter,
        )
        results.append(result)
    return results


def _result_to_dict(result: CaseResult) -> Dict[str, Any]:
    return {
        "index": result.index,
        "nickname": result.record.nickname if result.record else None,
        "error": result.error,
        "verdicts": [
            {
                "severity": v.severity.value,
                "category": v.category.value,
                "reason": v.reason,
                "comment": v.comment,
            }
            for v in result.verdicts
        ],
    }


# ── CLI entry point ──────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Nickname / trade-name legality checker",
    )
    parser.add_argument(
        "cases",
        type=str,
        help="JSON file with a list of {record, encounter} cases",
    )
    parser.add_argument(
        "--tables", "-t",
        type=str,
        default=str(TABLES_PATH),
        help=f"Reference tables JSON (default: {TABLES_PATH})",
    )
    parser.add_argument(
        "--wordfilter",
        type=str,
        default=None,
        help="Word filter file, one regex per line",
    )
    parser.add_argument(
        "--active-language",
        type=int,
        default=None,
        help="Language ID of the save the records were loaded from",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    tables = load_tables(Path(args.tables))
    word_filter = WordFilter.from_file(Path(args.wordfilter)) if args.wordfilter else None

    with open(args.cases, encoding="utf-8") as f:
        cases = json.load(f)
    if not isinstance(cases, list):
        parser.error("cases file must contain a JSON list")

    results = check_cases(cases, tables, word_filter, args.active_language)

    if args.json:
        print(json.dumps([_result_to_dict(r) for r in results], ensure_ascii=False, indent=2))
    else:
        for r in results:
            name = r.record.nickname if r.record else "?"
            print(f"#{r.index} {name}")
            if r.error:
                print(f"  ERROR {r.error}")
            for v in r.verdicts:
                print(f"  {v.summary()}")

    return 1 if any(r.invalid for r in results) else 0


if __name__ == "__main__":
    sys.exit(main())

"""
Global configuration for the nickname legality checker.
All paths, toggles, and reserved constants live here.
"""

import os
from pathlib import Path

# ── Paths ────────────────────────────────────────────────────────────────────
ROOT_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = ROOT_DIR / "data"

# Reference tables (species names + trade tables), JSON.  Supplied by the user.
TABLES_PATH = Path(os.environ.get("LEGALITY_TABLES", DATA_DIR / "reference_tables.json"))
# Word filter: one regular expression per line, '#' starts a comment.
WORDFILTER_PATH = Path(os.environ.get("LEGALITY_WORDFILTER", DATA_DIR / "wordfilter.txt"))

# ── Checks ───────────────────────────────────────────────────────────────────
CHECK_WORD_FILTER = True

# Nicknames in East Asian ideographs only exist from this generation on.
EAST_ASIAN_SCRIPT_GENERATION = 7

# ── Gen 1/2 nickname caps (characters) ──────────────────────────────────────
G1_ENGLISH_MAX_LENGTH = 10
G1_JAPANESE_MAX_LENGTH = 5
G2_KOREAN_MAX_LENGTH = 5

# ── Reserved trainer IDs ────────────────────────────────────────────────────
RANCH_TID = 1000        # My Pokémon Ranch gifts (DPPt)
YANCY_TID = 10303       # B2W2 Yancy
CURTIS_TID = 54118      # B2W2 Curtis

# ── Trade template indexes with shared language tags ───────────────────────
MEISTER_MAGIKARP_INDEX = 3   # DPPt trade table
SURGE_PIKACHU_INDEX = 6      # HGSS trade table

# ── Ash-Greninja mystery gift ───────────────────────────────────────────────
ASH_GRENINJA_CARD_ID = 2046
ASH_GRENINJA_FULL_ID = 0x79F57B49   # SID << 16 | TID

# ── Fixed OT strings ────────────────────────────────────────────────────────
# Indexed by LanguageID; empty string = no localization.
RANCH_OT_NAMES = ("", "ユカリ", "Hayley", "EULALIE", "GIULIA", "EUKALIA", "", "Eulalia")

# OT stored on Gen 1/2 in-game trades while they remain in a Gen 1/2 format.
G1_TRADE_OT_JAPANESE = "トレーナー"
G1_TRADE_OT = "TRAINER"

"""
Shared fixtures for the test suite.

The reference tables here follow the real layout (species lists indexed by
species id, trade rows ``[nicks.., OTs..]`` indexed by language ID) but the
trade strings are fixtures, not the official in-game text.
"""
import sys
from pathlib import Path

import pytest

# Ensure project root is importable
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

SPECIES_COUNT = 722

# species id → names per language code
KNOWN_NAMES = {
    0:   {"ja": "タマゴ", "en": "Egg", "fr": "Œuf", "it": "Uovo", "de": "Ei", "es": "Huevo", "ko": "알"},
    1:   {"ja": "フシギダネ", "en": "Bulbasaur", "fr": "Bulbizarre", "it": "Bulbasaur", "de": "Bisasam",
          "es": "Bulbasaur", "ko": "이상해씨"},
    4:   {"ja": "ヒトカゲ", "en": "Charmander", "fr": "Salamèche", "it": "Charmander", "de": "Glumanda",
          "es": "Charmander", "ko": "파이리"},
    25:  {"ja": "ピカチュウ", "en": "Pikachu", "fr": "Pikachu", "it": "Pikachu", "de": "Pikachu",
          "es": "Pikachu", "ko": "피카츄"},
    26:  {"ja": "ライチュウ", "en": "Raichu", "fr": "Raichu", "it": "Raichu", "de": "Raichu",
          "es": "Raichu", "ko": "라이츄"},
    122: {"ja": "バリヤード", "en": "Mr. Mime", "fr": "M. Mime", "it": "Mr. Mime", "de": "Pantimos",
          "es": "Mr. Mime", "ko": "마임맨"},
    124: {"ja": "ルージュラ", "en": "Jynx", "fr": "Lippoutou", "it": "Jynx", "de": "Rossana",
          "es": "Jynx", "ko": "루주라"},
    129: {"ja": "コイキング", "en": "Magikarp", "fr": "Magicarpe", "it": "Magikarp", "de": "Karpador",
          "es": "Magikarp", "ko": "잉어킹"},
    133: {"ja": "イーブイ", "en": "Eevee", "fr": "Évoli", "it": "Eevee", "de": "Evoli",
          "es": "Eevee", "ko": "이브이"},
    658: {"ja": "ゲッコウガ", "en": "Greninja", "fr": "Amphinobi", "it": "Greninja", "de": "Quajutsu",
          "es": "Greninja", "ko": "개굴닌자"},
}

LANG_CODES = ("ja", "en", "fr", "it", "de", "es", "ko")
# code → language ID (row index in trade tables)
LANG_IDS = {"ja": 1, "en": 2, "fr": 3, "it": 4, "de": 5, "es": 7, "ko": 8}


def _species_lists():
    lists = {}
    for code in LANG_CODES:
        names = [f"{code}-{i}" for i in range(SPECIES_COUNT)]
        for species, localized in KNOWN_NAMES.items():
            names[species] = localized[code]
        lists[code] = names
    return lists


def _trade_table(count, overrides=None, missing=()):
    """LanguageID-indexed rows; ``overrides[code][index] = (nick, ot)``."""
    overrides = overrides or {}
    table = [[] for _ in range(9)]
    for code, lang in LANG_IDS.items():
        if code in missing:
            continue
        nicks = [f"{code}N{i}" for i in range(count)]
        ots = [f"{code}O{i}" for i in range(count)]
        for index, (nick, ot) in overrides.get(code, {}).items():
            nicks[index] = nick
            ots[index] = ot
        table[lang] = nicks + ots
    return table


def build_tables_data():
    return {
        "species": _species_lists(),
        "trades": {
            "RSE": _trade_table(3),
            "FRLG": _trade_table(2, {
                "en": {1: ("ZYNX", "DONTAE")},
                "it": {1: ("ZYNX", "DONATA")},
            }),
            "DPPt": _trade_table(4, {
                "ja": {3: ("コイコイ", "マイスター")},
                "en": {3: ("Karpy", "Meister")},
                "fr": {3: ("Karpi", "Meister")},
                "es": {3: ("Karpy", "Meister")},
                "it": {3: ("Carpy", "Maestro")},
                "de": {3: ("Karpfi", "Meisterin")},
                "ko": {3: ("잉어", "마이스터")},
            }),
            "HGSS": _trade_table(7, {
                "ja": {6: ("ピカ", "マチス")},
                "en": {6: ("Volty", "Surge")},
                "it": {6: ("Volta", "Surge")},
                "es": {6: ("Volty", "Surge")},
                "fr": {6: ("Volté", "Major Bob")},
                "de": {6: ("Blitzi", "Bob")},
                "ko": {6: ("찌리", "마티스")},
            }),
            "BW": _trade_table(2),
            "B2W2": _trade_table(2),
            "XY": _trade_table(2, missing=("ko",)),
            "AO": _trade_table(2),
            "SM": _trade_table(2),
            "USUM": _trade_table(2),
        },
    }


@pytest.fixture
def tables_data():
    """Raw reference table mapping (JSON-serialisable)."""
    return build_tables_data()


@pytest.fixture
def tables(tables_data):
    """A loaded reference table store."""
    from legality.tables import ReferenceTableStore
    return ReferenceTableStore.from_dict(tables_data)


@pytest.fixture(autouse=True)
def reset_shared_state():
    """Drop the process-wide store / word filter between tests."""
    import legality.strings
    from legality.tables import set_tables
    yield
    set_tables(None)
    legality.strings._word_filter = None

"""Unit tests for legality.strings – character sets and the word filter."""
from concurrent.futures import ThreadPoolExecutor

import pytest
import legality.strings as strings_mod
from legality.strings import (
    WordFilter,
    get_word_filter,
    has_east_asian_script,
    is_g1_english,
    is_g1_japanese,
    is_g2_korean,
    normalize_apostrophe,
)


class TestCharacterSets:
    @pytest.mark.parametrize("text", ["PIKACHU", "Mr.Mime", "SPARKY 2", "NIDORAN♂", "FARFETCH'D"])
    def test_g1_english(self, text):
        assert is_g1_english(text) is True

    @pytest.mark.parametrize("text", ["ピカチュウ", "피카츄", "Pikachu#", ""])
    def test_not_g1_english(self, text):
        assert is_g1_english(text) is False

    @pytest.mark.parametrize("text", ["ピカチュウ", "ぴかちゅう", "ピカ!"])
    def test_g1_japanese(self, text):
        assert is_g1_japanese(text) is True

    @pytest.mark.parametrize("text", ["PIKACHU", "皮卡丘", "피카츄"])
    def test_not_g1_japanese(self, text):
        assert is_g1_japanese(text) is False

    def test_g2_korean(self):
        assert is_g2_korean("피카츄") is True
        assert is_g2_korean("PIKA") is False

    def test_east_asian(self):
        assert has_east_asian_script("皮卡丘") is True
        assert has_east_asian_script("ピカ丘") is True
        assert has_east_asian_script("ピカチュウ") is False
        assert has_east_asian_script("Pikachu") is False


class TestApostrophe:
    def test_straight_to_curly(self):
        assert normalize_apostrophe("Farfetch'd") == "Farfetch’d"

    def test_no_apostrophe(self):
        assert normalize_apostrophe("Pikachu") == "Pikachu"


class TestWordFilter:
    def test_case_insensitive(self):
        wf = WordFilter(["badw[o0]rd"])
        assert wf.is_filtered("MyBADWORD") == "badw[o0]rd"
        assert wf.is_filtered("badw0rd") == "badw[o0]rd"

    def test_clean(self):
        assert WordFilter(["badword"]).is_filtered("Sparky") is None

    def test_empty(self):
        assert WordFilter().is_filtered("anything") is None

    def test_first_pattern_reported(self):
        wf = WordFilter(["spa", "ark"])
        assert wf.is_filtered("Sparky") == "spa"

    def test_from_file(self, tmp_path):
        path = tmp_path / "wordfilter.txt"
        path.write_text("# comment\n\nbadword\n  worse  \n", encoding="utf-8")
        wf = WordFilter.from_file(path)
        assert wf.patterns == ["badword", "worse"]

    def test_shared_filter_missing_file(self, tmp_path, monkeypatch):
        monkeypatch.setattr(strings_mod, "WORDFILTER_PATH", tmp_path / "absent.txt")
        wf = get_word_filter()
        assert wf.patterns == []
        assert get_word_filter() is wf

    def test_shared_filter_loads_file(self, tmp_path, monkeypatch):
        path = tmp_path / "wordfilter.txt"
        path.write_text("badword\n", encoding="utf-8")
        monkeypatch.setattr(strings_mod, "WORDFILTER_PATH", path)
        assert get_word_filter().is_filtered("badword") == "badword"

    def test_shared_filter_built_once_across_threads(self, tmp_path, monkeypatch):
        path = tmp_path / "wordfilter.txt"
        path.write_text("badword\n", encoding="utf-8")
        monkeypatch.setattr(strings_mod, "WORDFILTER_PATH", path)
        with ThreadPoolExecutor(max_workers=8) as pool:
            filters = list(pool.map(lambda _: get_word_filter(), range(32)))
        assert all(f is filters[0] for f in filters)

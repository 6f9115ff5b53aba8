"""
上下文比對器測試
"""

from phonocode.core.matcher import ContextMatcher, fold_case, is_vowel, root_or_inflections


def _matcher(word: str, idx: int) -> ContextMatcher:
    m = ContextMatcher()
    m.word = word
    m.last_idx = len(word) - 1
    m.idx = idx
    return m


class TestCharAndVowel:
    def setup_method(self):
        self.m = _matcher("CAESAR", 2)

    def test_char_at_relative_to_cursor(self):
        assert self.m.char_at(0, "E")
        assert self.m.char_at(-2, "C")
        assert not self.m.char_at(1, "E")

    def test_out_of_bounds_is_false(self):
        assert not self.m.char_at(-3, "C")
        assert not self.m.char_at(10, "R")
        assert not self.m.is_vowel_at(-5)
        assert not self.m.is_vowel_at(4)

    def test_is_vowel_at(self):
        assert self.m.is_vowel_at(0)
        assert self.m.is_vowel_at(-1)
        assert not self.m.is_vowel_at(1)

    def test_accented_vowels(self):
        for ch in "ÀÉÎÕÜÝŒŸ":
            assert is_vowel(ch)
        assert not is_vowel("Ñ")
        assert not is_vowel("B")


class TestStringMatching:
    def setup_method(self):
        self.m = _matcher("KNIGHT", 1)

    def test_string_at_any_candidate(self):
        assert self.m.string_at(0, "XYZ", "NIGH")
        assert self.m.string_at(-1, "KN")
        assert not self.m.string_at(0, "NIGHTS")

    def test_string_at_negative_start(self):
        assert not self.m.string_at(-2, "KNIGHT")

    def test_string_at_end(self):
        assert self.m.string_at_end(2, "GHT")
        assert not self.m.string_at_end(2, "GH")

    def test_string_start_ignores_cursor(self):
        self.m.idx = 4
        assert self.m.string_start("KNI")
        assert not self.m.string_start("NIG")

    def test_string_exact(self):
        assert self.m.string_exact("KNIGHT")
        assert not self.m.string_exact("KNIGHTS", "KNIG")

    def test_matching_does_not_move_cursor(self):
        self.m.string_at(0, "NIGHT")
        self.m.string_at_end(-1, "KNIGHT")
        self.m.char_at(3, "H")
        assert self.m.idx == 1


def test_slavo_germanic():
    assert _matcher("SCHWARZ", 0).is_slavo_germanic()
    assert _matcher("WAGNER", 3).is_slavo_germanic()
    assert _matcher("JAGER", 2).is_slavo_germanic()
    assert not _matcher("GEORGE", 0).is_slavo_germanic()


def test_fold_case_keeps_length():
    assert fold_case("Straße") == "STRAßE"
    assert fold_case("ñandú") == "ÑANDÚ"
    assert len(fold_case("ßß")) == 2


def test_root_or_inflections():
    assert root_or_inflections("ACHE", "ACHE")
    assert root_or_inflections("ACHES", "ACHE")
    assert root_or_inflections("ACHED", "ACHE")
    assert root_or_inflections("ACHING", "ACHE")
    assert root_or_inflections("ACHY", "ACHE")
    assert root_or_inflections("ARCHES", "ARCH")
    assert root_or_inflections("ARCHED", "ARCH")
    assert root_or_inflections("ARCHING", "ARCH")
    assert not root_or_inflections("HEADACHE", "ACHE")
    assert not root_or_inflections("ARCHER", "ARCH")

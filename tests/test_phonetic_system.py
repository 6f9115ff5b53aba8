"""
Metaphone3PhoneticSystem 與編碼快取測試
"""

import pytest

from phonocode import (
    EncoderConfig,
    Metaphone3PhoneticSystem,
    cached_encode,
    clear_encode_cache,
    get_encode_cache_stats,
)


class TestToPhonetic:
    def setup_method(self):
        self.system = Metaphone3PhoneticSystem()

    def test_multiple_words(self):
        assert self.system.to_phonetic("Smith Knight") == "SM0 NT"

    def test_tokens_without_code_are_dropped(self):
        assert self.system.to_phonetic("  123   Smith ") == "SM0"
        assert self.system.to_phonetic("") == ""

    def test_uses_config(self):
        system = Metaphone3PhoneticSystem(EncoderConfig(encode_vowels=True))
        assert system.to_phonetic("Smith") == "SMA0"

    def test_encode_all(self):
        assert self.system.encode_all("Schmidt") == {"XMT", "SMT"}
        assert self.system.encode_all("Smith") == {"SM0"}
        assert self.system.encode_all("") == set()

    def test_sounds_alike(self):
        assert self.system.sounds_alike("Smith", "Smyth")
        assert self.system.sounds_alike("Knight", "night")
        assert not self.system.sounds_alike("Smith", "Schmidt")


class TestSimilarity:
    def setup_method(self):
        self.system = Metaphone3PhoneticSystem()

    def test_identical(self):
        assert self.system.calculate_similarity_score("SM0", "SM0") == (0.0, True)
        assert self.system.calculate_similarity_score("", "") == (0.0, True)

    def test_short_codes_are_strict(self):
        ratio, is_match = self.system.calculate_similarity_score("SMT", "SM0")
        assert ratio == pytest.approx(1 / 3)
        assert not is_match

    def test_longer_codes_tolerate_one_edit(self):
        ratio, is_match = self.system.calculate_similarity_score("AKSTNT", "AKSTNS")
        assert ratio == pytest.approx(1 / 6)
        assert is_match

    def test_first_symbol_group(self):
        assert self.system.are_fuzzy_similar("XMTR", "SMTR")
        assert not self.system.are_fuzzy_similar("KMTR", "SMTR")

    def test_spaces_ignored(self):
        assert self.system.are_fuzzy_similar("SM0 NT", "SM0NT")

    def test_compare_words_uses_best_code_pair(self):
        assert self.system.compare_words("Smith", "Smyth") == (0.0, True)
        ratio, is_match = self.system.compare_words("Schmidt", "Smith")
        assert ratio == pytest.approx(1 / 3)
        assert not is_match

    @pytest.mark.parametrize(
        "length, tolerance",
        [(1, 0.15), (3, 0.15), (4, 0.25), (5, 0.25), (8, 0.35), (12, 0.40)],
    )
    def test_tolerance_by_length(self, length, tolerance):
        assert self.system.get_tolerance(length) == tolerance


class TestEncodeCache:
    def setup_method(self):
        clear_encode_cache()

    def test_cache_hits(self):
        first = cached_encode("Knight")
        second = cached_encode("Knight")
        assert first == second
        stats = get_encode_cache_stats()
        assert stats.hits == 1
        assert stats.misses == 1

    def test_config_is_part_of_key(self):
        assert cached_encode("Smith").primary == "SM0"
        assert cached_encode("Smith", encode_vowels=True).primary == "SMA0"
        assert get_encode_cache_stats().currsize == 2

    def test_clear(self):
        cached_encode("Smith")
        clear_encode_cache()
        assert get_encode_cache_stats().currsize == 0

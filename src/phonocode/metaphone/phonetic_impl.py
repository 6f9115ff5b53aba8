"""
Metaphone 3 發音系統實作

把 Metaphone3Engine 包裝成 PhoneticSystem，供比對層使用:
- 使用 functools.lru_cache 快取編碼結果
- 以 Levenshtein 編輯距離比較兩組編碼
- 比較單字時會同時考慮 primary 與 secondary
"""

from __future__ import annotations

from functools import lru_cache
from itertools import product
from typing import Optional, Set, Tuple

import Levenshtein

from phonocode.config import DEFAULT_CONFIG, EncoderConfig
from phonocode.core.buffers import EncodingResult
from phonocode.core.phonetic_interface import PhoneticSystem
from phonocode.utils.logger import get_logger

from .engine import encode

logger = get_logger("metaphone.phonetic")

# 首碼可互相替代的編碼符號 (清濁、擦音/塞音交替)
FIRST_SYMBOL_GROUPS = (
    frozenset("SX"),
    frozenset("T0D"),
    frozenset("PFBV"),
    frozenset("KG"),
    frozenset("JH"),
)


# =============================================================================
# 編碼快取 (Performance Critical)
# =============================================================================


@lru_cache(maxsize=50000)
def cached_encode(
    word: str,
    encode_vowels: bool = False,
    encode_exact: bool = False,
    max_length: Optional[int] = None,
) -> EncodingResult:
    """
    快取版編碼

    參數攤平成可雜湊的基本型別，相同輸入與配置只計算一次。
    """
    return encode(word, EncoderConfig(encode_vowels, encode_exact, max_length))


def clear_encode_cache():
    """清除編碼快取"""
    cached_encode.cache_clear()


def get_encode_cache_stats():
    """取得編碼快取統計"""
    return cached_encode.cache_info()


class Metaphone3PhoneticSystem(PhoneticSystem):
    """
    Metaphone 3 發音系統

    功能:
    - 將文字 (可含多個單字) 轉為以空白分隔的 primary 編碼
    - 計算兩組編碼的編輯距離比率，依長度動態調整容錯率
    - 比較兩個單字時取 primary/secondary 組合中最接近的一組
    """

    def __init__(self, config: Optional[EncoderConfig] = None):
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> EncoderConfig:
        return self._config

    def encode_word(self, word: str) -> EncodingResult:
        return cached_encode(
            word,
            self._config.encode_vowels,
            self._config.encode_exact,
            self._config.max_length,
        )

    def to_phonetic(self, text: str) -> str:
        """
        將文字轉換為 Metaphone 3 編碼

        Args:
            text: 輸入文字，以空白分隔單字

        Returns:
            str: 各單字的 primary 編碼，以空白連接；沒有可編碼字母的單字會被略過
        """
        codes = [self.encode_word(token).primary for token in text.split()]
        return " ".join(code for code in codes if code)

    def encode_all(self, word: str) -> Set[str]:
        """單字所有非空的編碼 (primary 與 secondary)"""
        result = self.encode_word(word)
        return {code for code in result if code}

    def sounds_alike(self, word1: str, word2: str) -> bool:
        """兩個單字是否共用任一編碼"""
        return bool(self.encode_all(word1) & self.encode_all(word2))

    def are_fuzzy_similar(self, phonetic1: str, phonetic2: str) -> bool:
        """
        判斷兩個編碼是否模糊相似

        使用 Levenshtein 編輯距離計算相似度比率。
        """
        _, is_similar = self.calculate_similarity_score(phonetic1, phonetic2)
        return is_similar

    def calculate_similarity_score(self, phonetic1: str, phonetic2: str) -> Tuple[float, bool]:
        """
        計算兩個編碼的錯誤比率

        Returns:
            (error_ratio, is_fuzzy_match)
        """
        code1 = self._normalize_code(phonetic1)
        code2 = self._normalize_code(phonetic2)

        max_len = max(len(code1), len(code2))
        if max_len == 0:
            return 0.0, True

        error_ratio = Levenshtein.distance(code1, code2) / max_len
        tolerance = self.get_tolerance(max_len)

        # 首碼不同且不屬於同一組時，幾乎不會是同一個字
        if not self._are_first_symbols_similar(code1, code2):
            tolerance = min(tolerance, 0.15)

        return error_ratio, error_ratio <= tolerance

    def compare_words(self, word1: str, word2: str) -> Tuple[float, bool]:
        """
        比較兩個單字，取所有編碼組合中錯誤比率最低的一組

        Returns:
            (error_ratio, is_fuzzy_match)
        """
        codes1 = self.encode_all(word1) or {""}
        codes2 = self.encode_all(word2) or {""}

        best = min(
            (self.calculate_similarity_score(c1, c2) for c1, c2 in product(codes1, codes2)),
            key=lambda score: score[0],
        )
        logger.debug(f"  [Compare] {word1} vs {word2}: ratio={best[0]:.2f}, match={best[1]}")
        return best

    def _normalize_code(self, code: str) -> str:
        return code.replace(" ", "")

    def _are_first_symbols_similar(self, code1: str, code2: str) -> bool:
        if not code1 or not code2:
            return True

        first1 = code1[0]
        first2 = code2[0]
        if first1 == first2:
            return True

        return any(first1 in group and first2 in group for group in FIRST_SYMBOL_GROUPS)

    def get_tolerance(self, length: int) -> float:
        """
        根據編碼長度動態調整容錯率

        Args:
            length: 編碼長度

        Returns:
            float: 容錯率閾值
        """
        if length <= 3:
            return 0.15  # 短碼只接受完全相同
        if length <= 5:
            return 0.25
        if length <= 8:
            return 0.35
        return 0.40

"""
核心抽象層

定義比對原語、輸出緩衝區，以及與演算法無關的引擎介面。
"""

from .buffers import NO_EMISSION, EncodingResult, PhoneticBuffers
from .engine_interface import PhoneticEngine
from .matcher import ContextMatcher, fold_case, is_vowel, root_or_inflections
from .phonetic_interface import PhoneticSystem

__all__ = [
    "ContextMatcher",
    "EncodingResult",
    "NO_EMISSION",
    "PhoneticBuffers",
    "PhoneticEngine",
    "PhoneticSystem",
    "fold_case",
    "is_vowel",
    "root_or_inflections",
]

"""
Metaphone 3 編碼模組

把英文 (以及常見外來語、姓名) 的拼寫轉為 primary/secondary 兩組發音鍵，
用於拼寫不同但讀音相近的字詞比對。

主要類別:
- Metaphone3Engine: 編碼引擎 (單一執行緒重複使用)
- EncoderPool: 多執行緒共用的引擎池
- Metaphone3PhoneticSystem: 以編碼進行模糊比對的發音系統

效能優化:
- cached_encode: 快取版編碼
- clear_encode_cache: 清除快取
- get_encode_cache_stats: 取得快取統計
"""

from __future__ import annotations

import importlib
from typing import Any

_LAZY_IMPORTS = {
    "Metaphone3Engine": (".engine", "Metaphone3Engine"),
    "EncoderPool": (".engine", "EncoderPool"),
    "encode": (".engine", "encode"),
    "Metaphone3PhoneticSystem": (".phonetic_impl", "Metaphone3PhoneticSystem"),
    "cached_encode": (".phonetic_impl", "cached_encode"),
    "clear_encode_cache": (".phonetic_impl", "clear_encode_cache"),
    "get_encode_cache_stats": (".phonetic_impl", "get_encode_cache_stats"),
    "Metaphone3Lexicon": (".lexicon", "Metaphone3Lexicon"),
}

__all__ = [
    "Metaphone3Engine",
    "EncoderPool",
    "encode",
    "Metaphone3PhoneticSystem",
    "Metaphone3Lexicon",
    "cached_encode",
    "clear_encode_cache",
    "get_encode_cache_stats",
]


def __getattr__(name: str) -> Any:
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_path, attr_name = _LAZY_IMPORTS[name]
    module = importlib.import_module(module_path, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(list(globals().keys()) + list(_LAZY_IMPORTS.keys())))

"""
phonocode - Metaphone 3 語音編碼器 (Phonetic Encoder)

核心概念：
- 把單字的拼寫轉為「發音鍵」：primary 為最常見的讀音，
  secondary 為另一種常見讀音 (與 primary 相同時為空字串)
- 拼寫不同但讀音相近的字詞會得到相同或相近的發音鍵
- 發音鍵是比對用的代碼，不是 IPA

官方入口（穩定 API）：
- `phonocode.encode`
- `phonocode.Metaphone3Engine`
- `phonocode.EncoderPool`
"""

# =============================================================================
# Engine 層（官方入口）
# =============================================================================
from phonocode.config import DEFAULT_CONFIG, DEFAULT_MAX_LENGTH, EncoderConfig, configure_logging
from phonocode.core.buffers import EncodingResult
from phonocode.metaphone.engine import EncoderPool, Metaphone3Engine, encode

# =============================================================================
# 比對層（進階用途）
# =============================================================================
from phonocode.metaphone.phonetic_impl import (
    Metaphone3PhoneticSystem,
    cached_encode,
    clear_encode_cache,
    get_encode_cache_stats,
)

# =============================================================================
# 日誌工具
# =============================================================================
from phonocode.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

__all__ = [
    # Engines
    "encode",
    "Metaphone3Engine",
    "EncoderPool",
    "EncoderConfig",
    "EncodingResult",
    "DEFAULT_CONFIG",
    "DEFAULT_MAX_LENGTH",
    # Comparison (advanced)
    "Metaphone3PhoneticSystem",
    "cached_encode",
    "clear_encode_cache",
    "get_encode_cache_stats",
    # Logging
    "configure_logging",
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
]

__version__ = "0.1.0"

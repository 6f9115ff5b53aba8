"""
全域配置模組

提供編碼器配置類別，以及控制日誌的輔助函數。

使用方式:
    from phonocode import EncoderConfig, Metaphone3Engine

    # 預設: 不編碼非首字母母音、不區分清濁音、最長 8 碼
    engine = Metaphone3Engine()

    # 進階: 自訂配置
    config = EncoderConfig(encode_vowels=True, encode_exact=True, max_length=12)
    engine = Metaphone3Engine(config, verbose=True)

    # 使用標準 logging 控制
    import logging
    logging.getLogger("phonocode").setLevel(logging.DEBUG)
"""

import logging
import dataclasses
from dataclasses import dataclass
from typing import Optional

from .utils.logger import setup_logger

# 未指定 (或指定為非正數) 時的最大編碼長度
DEFAULT_MAX_LENGTH = 8


def configure_logging(verbose: bool = False) -> Optional[logging.Logger]:
    """
    verbose 時為 phonocode 根 logger 加上 DEBUG 輸出

    verbose=False 時什麼都不做，交由使用者透過標準 logging 控制。

    Returns:
        設定過的根 logger；沒有設定時為 None
    """
    if not verbose:
        return None
    return setup_logger(level=logging.DEBUG)


@dataclass(frozen=True)
class EncoderConfig:
    """
    編碼器配置類別 (唯讀)

    屬性:
        encode_vowels: 是否編碼非首字母的母音。即使一串母音中有多個母音音，
                       在下一個子音或字尾之前也只會輸出一個 'A'
        encode_exact: 是否盡可能精確地編碼子音，區分 B/P、D/T、G/K、V/F
                      (不包含 S/Z 以及 CH/SH)
        max_length: 輸出編碼的最大長度；None 或非正數時使用 DEFAULT_MAX_LENGTH

    使用範例:
        config = EncoderConfig(encode_vowels=True)
        exact = config.replace(encode_exact=True)
    """

    encode_vowels: bool = False
    encode_exact: bool = False
    max_length: Optional[int] = None

    def __post_init__(self):
        """將未設定或非正數的 max_length 正規化為預設值"""
        if self.max_length is None or self.max_length <= 0:
            object.__setattr__(self, "max_length", DEFAULT_MAX_LENGTH)

    def replace(self, **changes) -> "EncoderConfig":
        """回傳套用變更後的新配置"""
        return dataclasses.replace(self, **changes)


# 預設配置實例 (不可變)
DEFAULT_CONFIG = EncoderConfig()

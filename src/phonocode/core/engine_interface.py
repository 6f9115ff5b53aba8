"""
編碼引擎抽象基類

定義所有語音編碼引擎必須實作的介面。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from phonocode.config import configure_logging
from phonocode.core.buffers import EncodingResult
from phonocode.utils.logger import TimingContext, get_logger


class PhoneticEngine(ABC):
    """
    編碼引擎抽象基類 (Abstract Base Class)

    職責:
    - 持有唯讀配置與可重複使用的暫存緩衝區
    - 提供 encode() 將單字轉為 (primary, secondary) 編碼
    - 提供日誌與計時功能

    生命週期:
    - Engine 可跨多次呼叫重複使用，但同一實例不可被多執行緒同時使用
    - 並行呼叫者應各自持有實例，或透過 EncoderPool 借用
    """

    _engine_name: str = "base"

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        """verbose 時為 phonocode 根 logger 加上 DEBUG 輸出；on_timing 接收每次 encode 的耗時"""
        configure_logging(verbose)
        self._on_timing = on_timing
        self._logger = get_logger(f"engine.{self._engine_name}")

    def _log_timing(self, operation: str) -> TimingContext:
        # 耗時以 DEBUG 寫入引擎自己的 logger
        return TimingContext(operation, self._logger, logging.DEBUG, self._on_timing)

    @abstractmethod
    def encode(self, word: str) -> EncodingResult:
        pass

"""
日誌與計時工具

所有模組的 logger 都掛在 "phonocode" 命名空間之下，
函式庫本身不在 import 時設定 handler，交由使用者透過標準 logging 控制。

使用方式:
    from phonocode.utils.logger import get_logger, TimingContext

    logger = get_logger("metaphone.engine")
    with TimingContext("encode", logger):
        ...

    # 開啟除錯輸出
    import logging
    logging.getLogger("phonocode").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, Optional

ROOT_LOGGER_NAME = "phonocode"
TIMING_LOGGER_NAME = f"{ROOT_LOGGER_NAME}.timing"

_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 phonocode 命名空間下的 logger

    Args:
        name: 子 logger 名稱 (如 "metaphone.engine")，None 表示根 logger

    Returns:
        logging.Logger
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = _DEFAULT_FORMAT) -> logging.Logger:
    """
    為 phonocode 根 logger 加上 StreamHandler (重複呼叫不會重複加入)

    Args:
        level: 日誌等級
        fmt: 輸出格式

    Returns:
        logging.Logger: 根 logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if not any(getattr(h, "_phonocode_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        handler._phonocode_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger


def enable_debug_logging() -> logging.Logger:
    """開啟 DEBUG 等級輸出"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """只開啟計時相關輸出"""
    setup_logger(level=logging.INFO)
    timing_logger = logging.getLogger(TIMING_LOGGER_NAME)
    timing_logger.setLevel(logging.DEBUG)
    return timing_logger


class TimingContext:
    """
    計時上下文管理器

    離開區塊時將耗時寫入 logger，並呼叫可選的回呼函數。

    Args:
        operation: 操作名稱
        logger: 寫入的 logger (預設為 phonocode.timing)
        level: 日誌等級
        callback: 回呼 (operation: str, elapsed: float) -> None
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or logging.getLogger(TIMING_LOGGER_NAME)
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        if self.logger.isEnabledFor(self.level):
            self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.3f} ms")
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    計時裝飾器

    範例:
        >>> @log_timing("build_index")
        ... def build_index(words):
        ...     ...
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with TimingContext(name, level=level):
                return func(*args, **kwargs)

        return wrapper

    return decorator

"""
Metaphone 3 編碼引擎 (Metaphone3Engine)

負責驅動主迴圈：逐字元分類，交給對應字母的規則鏈處理，
直到輸入結束或任一緩衝區達到最大長度為止。

執行緒安全:
- 單一 Metaphone3Engine 會重複使用內部緩衝區，不可被多執行緒同時使用
- 並行呼叫請各自建立實例，或透過 EncoderPool 借用
- 模組層級的 encode() 為每個執行緒保留各自的引擎實例
"""

from __future__ import annotations

import queue
import threading
from collections import OrderedDict
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, Optional

from phonocode.config import DEFAULT_CONFIG, EncoderConfig
from phonocode.core.buffers import EncodingResult, PhoneticBuffers
from phonocode.core.engine_interface import PhoneticEngine
from phonocode.core.matcher import VOWELS, fold_case
from phonocode.utils.logger import get_logger

from .rules_c import CRules
from .rules_consonants import ConsonantRules
from .rules_velar import VelarRules
from .vowels import VowelRules

# 直接對應到單一音素的非拉丁子音 (含兩個私用區的雙字母標記)
DIRECT_SYMBOLS: Dict[str, str] = {
    "ß": "S",
    "Ç": "S",
    "Ñ": "N",
    "Ð": "0",
    "Þ": "0",
    "\uC28A": "X",
    "Š": "X",
    "\uC28E": "S",
    "Ž": "S",
}


class Metaphone3Engine(PhoneticEngine, CRules, VelarRules, ConsonantRules, VowelRules):
    """
    Metaphone 3 編碼引擎

    使用方式:
        engine = Metaphone3Engine()
        engine.encode("Knight")        # EncodingResult(primary='NT', secondary='')

        engine = Metaphone3Engine(EncoderConfig(encode_vowels=True), verbose=True)
    """

    _engine_name = "metaphone3"

    def __init__(
        self,
        config: Optional[EncoderConfig] = None,
        *,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ):
        self._init_logger(verbose=verbose, on_timing=on_timing)

        self.config = config or DEFAULT_CONFIG
        self.buffers = PhoneticBuffers(self.config.max_length)
        self.word = ""
        self.idx = 0
        self.last_idx = -1
        self.flag_al_inversion = False

        self._handlers: Dict[str, Callable[[], None]] = {
            "B": self.encode_b,
            "C": self.encode_c,
            "D": self.encode_d,
            "F": self.encode_f,
            "G": self.encode_g,
            "H": self.encode_h,
            "J": self.encode_j,
            "K": self.encode_k,
            "L": self.encode_l,
            "M": self.encode_m,
            "N": self.encode_n,
            "P": self.encode_p,
            "Q": self.encode_q,
            "R": self.encode_r,
            "S": self.encode_s,
            "T": self.encode_t,
            "V": self.encode_v,
            "W": self.encode_w,
            "X": self.encode_x,
            "Z": self.encode_z,
        }

        self._logger.info(
            f"Metaphone3Engine initialized (encode_vowels={self.config.encode_vowels}, "
            f"encode_exact={self.config.encode_exact}, max_length={self.config.max_length})"
        )

    def encode(self, word: str) -> EncodingResult:
        """
        將單字編碼為 (primary, secondary)

        Args:
            word: 輸入單字 (大小寫不拘)

        Returns:
            EncodingResult: secondary 與 primary 相同時為空字串

        Raises:
            TypeError: word 不是 str
        """
        if not isinstance(word, str):
            raise TypeError(f"word must be str, got {type(word).__name__}")
        if not word:
            return EncodingResult("", "")

        with self._log_timing("Metaphone3Engine.encode"):
            result = self._run(word)

        self._logger.debug(f"  [Encode] {word} -> {result.primary!r}/{result.secondary!r}")
        return result

    def _run(self, word: str) -> EncodingResult:
        self.word = fold_case(word)
        self.last_idx = len(self.word) - 1
        self.idx = 0
        self.flag_al_inversion = False
        self.buffers.reset(self.config.max_length)

        handlers = self._handlers
        while self.idx <= self.last_idx and not self.buffers.is_full:
            start = self.idx
            ch = self.word[start]

            handler = handlers.get(ch)
            if handler is not None:
                handler()
            elif ch in DIRECT_SYMBOLS:
                self.add(DIRECT_SYMBOLS[ch])
                self.idx += 1
            elif ch in VOWELS:
                self.encode_vowels()
            else:
                # 非字母 (空白、標點、數字) 直接略過
                self.idx += 1

            if self.idx <= start:
                self._logger.warning(
                    f"Handler for {ch!r} did not advance at {start} in {self.word!r}; skipping"
                )
                self.idx = start + 1

        return self.buffers.result()

    def __repr__(self) -> str:
        return f"Metaphone3Engine(config={self.config!r})"


# =============================================================================
# 引擎池
# =============================================================================


class EncoderPool:
    """
    固定大小的引擎池

    每次借出一個引擎給單一呼叫使用，用完歸還。
    池中沒有可用引擎時 checkout() 會阻塞 (可設定 timeout)。

    使用方式:
        pool = EncoderPool(size=4, config=EncoderConfig(encode_exact=True))
        with pool.checkout() as engine:
            engine.encode("Smith")

        pool.encode("Schmidt")
    """

    def __init__(
        self,
        size: int = 4,
        config: Optional[EncoderConfig] = None,
        *,
        verbose: bool = False,
    ):
        if size <= 0:
            raise ValueError(f"pool size must be positive, got {size}")

        self._config = config or DEFAULT_CONFIG
        self._size = size
        self._engines: "queue.LifoQueue[Metaphone3Engine]" = queue.LifoQueue(maxsize=size)
        for _ in range(size):
            self._engines.put(Metaphone3Engine(self._config, verbose=verbose))

        self._logger = get_logger("engine.pool")
        self._logger.debug(f"EncoderPool created with {size} engines")

    @property
    def size(self) -> int:
        return self._size

    @property
    def config(self) -> EncoderConfig:
        return self._config

    @property
    def available(self) -> int:
        """目前可借出的引擎數 (僅供參考，並行時隨時變動)"""
        return self._engines.qsize()

    @contextmanager
    def checkout(self, timeout: Optional[float] = None) -> Iterator[Metaphone3Engine]:
        """
        借出一個引擎

        Raises:
            queue.Empty: timeout 到期仍沒有可用引擎
        """
        engine = self._engines.get(timeout=timeout)
        try:
            yield engine
        finally:
            self._engines.put(engine)

    def encode(self, word: str) -> EncodingResult:
        with self.checkout() as engine:
            return engine.encode(word)


# =============================================================================
# 模組層級 API
# =============================================================================

_thread_state = threading.local()

# 每個執行緒最多保留的引擎數 (依配置區分，最久未用的先淘汰)
MAX_ENGINES_PER_THREAD = 8


def _engine_for(config: EncoderConfig) -> Metaphone3Engine:
    engines = getattr(_thread_state, "engines", None)
    if engines is None:
        engines = _thread_state.engines = OrderedDict()

    engine = engines.get(config)
    if engine is not None:
        engines.move_to_end(config)
        return engine

    engine = engines[config] = Metaphone3Engine(config)
    if len(engines) > MAX_ENGINES_PER_THREAD:
        engines.popitem(last=False)
    return engine


def encode(word: str, config: Optional[EncoderConfig] = None) -> EncodingResult:
    """
    以指定配置編碼單字

    每個執行緒各自持有一組引擎 (依配置區分)，可安全地被並行呼叫。

    Args:
        word: 輸入單字
        config: 編碼配置；None 時使用預設配置

    Returns:
        EncodingResult: (primary, secondary)
    """
    return _engine_for(config or DEFAULT_CONFIG).encode(word)

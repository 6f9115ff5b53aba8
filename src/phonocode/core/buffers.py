"""
輸出緩衝區 (Output Buffers)

每次編碼持有兩條平行的音素序列：主要 (primary) 與替代 (alternate)。
NO_EMISSION (None) 代表「這一側不輸出」，與任何真實音素符號都不衝突。
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional

NO_EMISSION = None


class EncodingResult(NamedTuple):
    """編碼結果：secondary 在與 primary 相同時為空字串"""

    primary: str
    secondary: str


class PhoneticBuffers:
    """
    主要/替代兩條編碼緩衝區

    - emit() 接受 None 表示該側不輸出
    - 若緩衝區最後一個符號已經是 "A"，不會再附加單獨的 "A"
      (連續母音因此自然合併，不需要額外處理)
    - 任一側達到 max_length 即視為已滿，主迴圈會停止
    - reset() 只清空內容，list 物件本身可跨呼叫重複使用
    """

    __slots__ = ("max_length", "primary", "alternate")

    def __init__(self, max_length: int):
        self.max_length = max_length
        self.primary: List[str] = []
        self.alternate: List[str] = []

    def reset(self, max_length: Optional[int] = None) -> None:
        if max_length is not None:
            self.max_length = max_length
        self.primary.clear()
        self.alternate.clear()

    @staticmethod
    def _append(buf: List[str], symbol: Optional[str]) -> None:
        if not symbol:
            return
        if symbol == "A" and buf and buf[-1] == "A":
            return
        buf.extend(symbol)

    def emit(self, primary: Optional[str], alternate: Optional[str] = NO_EMISSION) -> None:
        """分別附加到兩條緩衝區；alternate 未指定時不輸出"""
        self._append(self.primary, primary)
        self._append(self.alternate, alternate)

    def emit_both(self, symbol: str) -> None:
        """兩條緩衝區附加同一個符號"""
        self.emit(symbol, symbol)

    @property
    def is_full(self) -> bool:
        return len(self.primary) >= self.max_length or len(self.alternate) >= self.max_length

    def result(self) -> EncodingResult:
        """截斷到 max_length，兩者相同時捨棄 secondary"""
        primary = "".join(self.primary[: self.max_length])
        secondary = "".join(self.alternate[: self.max_length])
        if primary == secondary:
            secondary = ""
        return EncodingResult(primary, secondary)

    def __repr__(self) -> str:
        return f"PhoneticBuffers(primary={''.join(self.primary)!r}, alternate={''.join(self.alternate)!r})"

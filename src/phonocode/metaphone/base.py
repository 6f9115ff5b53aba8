"""
規則鏈共用的狀態與輸出輔助

每個字母的處理器都是 RuleContext 子類別上的方法：
游標 (idx) 進入時指在該字母群組的第一個字元，
處理器結束前必須把游標移到它消耗掉的最後一個字元之後。
"""

from __future__ import annotations

from typing import Optional

from phonocode.config import EncoderConfig
from phonocode.core.buffers import PhoneticBuffers
from phonocode.core.matcher import VOWELS, ContextMatcher


class RuleContext(ContextMatcher):
    """游標、配置與緩衝區的組合，外加規則常用的輸出操作"""

    config: EncoderConfig
    buffers: PhoneticBuffers

    # 'LE' / 'RE' 母音換位已經輸出 "A"，後面的 'E' 不再編碼
    flag_al_inversion: bool = False

    # =========================================================================
    # 輸出
    # =========================================================================

    def add(self, symbol: str) -> None:
        """主要與替代緩衝區輸出同一個符號"""
        self.buffers.emit(symbol, symbol)

    def add_alt(self, primary: Optional[str], alternate: Optional[str]) -> None:
        """主要/替代分別輸出；None 表示該側不輸出"""
        self.buffers.emit(primary, alternate)

    def add_exact_approx(self, exact: str, approx: str) -> None:
        """清濁音有差別的音素：encode_exact 時輸出 exact，否則輸出 approx"""
        if self.config.encode_exact:
            self.add(exact)
        else:
            self.add(approx)

    def add_exact_approx_alt(
        self,
        exact: Optional[str],
        alt_exact: Optional[str],
        approx: Optional[str],
        alt_approx: Optional[str],
    ) -> None:
        if self.config.encode_exact:
            self.add_alt(exact, alt_exact)
        else:
            self.add_alt(approx, alt_approx)

    # =========================================================================
    # 游標
    # =========================================================================

    def advance(self, without_vowels: int, with_vowels: int) -> None:
        """
        依 encode_vowels 決定前進距離

        有些規則在不編碼母音時可以一併吞掉後面的母音，
        編碼母音時則要留給母音處理器。
        """
        self.idx += with_vowels if self.config.encode_vowels else without_vowels

    def skip_vowels(self) -> int:
        """
        從目前位置 (必須是母音) 吞掉整串母音/半母音，回傳第一個未消耗的位置

        - 'W' 視為母音串的延續
        - "WH" 一併吞掉，除非它是 WHOP / WHIDE / WHARD ... 這類英文複合字
        - 斯拉夫姓氏的 W (WICZ, EWSKI, ...) 會讓母音串提前結束，交給 W 處理器
        """
        word = self.word
        pos = self.idx
        while pos <= self.last_idx and (word[pos] in VOWELS or word[pos] == "W"):
            off = pos - self.idx
            if (
                self.string_at(off, "WICZ", "WITZ", "WIAK")
                or self.string_at(off - 1, "EWSKI", "EWSKY", "OWSKI", "OWSKY")
                or self.string_at_end(off, "WICKI", "WACKI")
            ):
                break

            pos += 1
            off += 1
            if (
                word[pos - 1] == "W"
                and self.char_at(off, "H")
                and not self.string_at(
                    off, "HOP", "HIDE", "HARD", "HEAD", "HAWK", "HERD", "HOOK", "HAND",
                    "HOLE", "HEART", "HOUSE", "HOUND", "HAMMER",
                )
            ):
                pos += 1

        return max(pos, self.idx + 1)

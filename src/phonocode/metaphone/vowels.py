"""
母音處理器 (Vowel Reducer)

- 字首母音一律輸出 "A"
- 非字首母音只在 encode_vowels 時輸出，而且一整串母音最多一個 "A"
- 'E' 另外判斷是否發音：字尾不發音的 E、複數/過去式的 E、
  英文字根內部的 E，以及大量外來語/姓名例外
"""

from __future__ import annotations

from phonocode.core.matcher import is_vowel

from .base import RuleContext
from .lexicon import Metaphone3Lexicon as Lex


class VowelRules(RuleContext):
    """母音與 'E' 發音判斷"""

    def encode_vowels(self) -> None:
        if self.idx == 0:
            # 所有字首母音都對應到 'A' (同 Double Metaphone)
            self.add("A")
        elif self.config.encode_vowels:
            if not self.char_at(0, "E"):
                if self._encode_skip_silent_ue():
                    return
                if self._encode_o_silent():
                    self.idx += 1
                    return
                # 所有母音與雙母音都輸出同一個值
                self.add("A")
            elif self._encode_e_pronounced():
                return

        # 斯拉夫姓氏 "-LEWA/-LEWO/-LEWI" 的 W 要留給 'W' 處理
        if not self.is_vowel_at(-2) and self.string_at(-1, "LEWA", "LEWO", "LEWI"):
            self.idx += 1
        else:
            self.idx = self.skip_vowels()

    def _encode_skip_silent_ue(self) -> bool:
        # "-QUE" / "-GUE" 的 UE 幾乎都不發音，如 'plaque', 'rogue'
        if (
            self.string_at(-1, "QUE", "GUE")
            and not self.string_start(
                "RISQUE", "PIROGUE", "ENRIQUE", "BARBEQUE", "PALENQUE", "APPLIQUE", "COMMUNIQUE"
            )
            and not self.string_at(-3, "ARGUE", "SEGUE")
            and self.idx > 1
            and (self.idx + 1 == self.last_idx or self.string_start("JACQUES"))
        ):
            self.idx = self.skip_vowels()
            return True
        return False

    def _encode_o_silent(self) -> bool:
        # 'iron' 在字首或字尾時 O 不發音，'ironic' 除外
        return (
            self.char_at(0, "O")
            and (self.string_start("IRON") or self.string_at_end(-2, "IRON"))
            and not self.string_at(-2, "IRONIC")
        )

    # =========================================================================
    # 'E'
    # =========================================================================

    def _encode_e_pronounced(self) -> bool:
        """
        判斷非字首的 'E' 是否發音 (只在 encode_vowels 時呼叫)

        Returns:
            True 表示已經自行移動游標，呼叫端不再吃掉母音串
        """
        # 兩種讀音都常見：'agape', 'lame', 'resume'
        if self.string_exact("LAME", "SAKE", "PATE", "AGAPE") or (
            self.string_start("RESUME") and self.idx == 5
        ):
            self.add_alt(None, "A")
            return False

        # 'inge' => 'INGA', 'INJ'
        if self.string_exact("INGE"):
            self.add_alt("A", None)
            return False

        # 'blessed', 'learned' 的 "-ED" 兩種讀法，D 的清濁也不同
        if self.idx == 5 and self.string_start("BLESSED", "LEARNED"):
            self.add_exact_approx_alt("D", "AD", "T", "AT")
            self.idx += 2
            return True

        if (
            not self._encode_e_silent()
            and not self.flag_al_inversion
            and not self._encode_silent_internal_e()
        ) or self._encode_e_pronounced_exceptions():
            self.add("A")

        # 換位標記只影響緊接的這個 'E'
        self.flag_al_inversion = False
        return False

    def _encode_e_silent(self) -> bool:
        if self._encode_e_pronounced_at_end():
            return False

        return (
            # 字尾的 E
            self.idx == self.last_idx
            # 複數 's' 或過去式 'd' 之前，如 'grapes', 'banished'
            # 但 'nested', 'rises', 'pieces' 除外
            or (
                self.idx > 1
                and self.idx + 1 == self.last_idx
                and self.string_at(1, "S", "D")
                and not (
                    self.string_at(-1, "TED", "SES", "CES")
                    or self.string_start(*Lex.E_PRONOUNCED_BEFORE_D_NAMES)
                )
            )
            # 'wholeness', 'boneless', 'barely'
            or self.string_at_end(1, "NESS", "LESS")
            or (self.string_at_end(1, "LY") and not self.string_start("CICELY"))
        )

    def _encode_e_pronounced_at_end(self) -> bool:
        """字尾 'E' 發音的例外：希臘、西班牙、日本、義大利、法語外來字，以及短字"""
        if self.idx != self.last_idx:
            return False

        length = len(self.word)
        return (
            self.string_at(-6, "STROPHE")
            # 母音 + 'E' 已經被吃掉，子音 + 'E' 的短字要發音
            or length == 2
            or (length == 3 and not is_vowel(self.word[0]))
            # 德語姓氏字尾
            or (
                self.string_at_end(-2, *Lex.E_PRONOUNCED_GERMAN_KE)
                and not self.string_start("FINKE", "FUNKE", "FRANKE")
            )
            or self.string_at_end(-4, "SCHKE")
            or self.string_exact(*Lex.E_PRONOUNCED_FINAL_WORDS)
        )

    def _encode_silent_internal_e(self) -> bool:
        # 'olesen' 但不含 'olen'；'rake', 'blake'
        return (
            (self.string_start("OLE") and self._encode_e_suffix(3))
            or (self.string_start(*Lex.SILENT_E_ROOTS_4) and self._encode_e_suffix(4))
            or (self.string_start(*Lex.SILENT_E_ROOTS_5) and self._encode_e_suffix(5))
            or (self.string_start(*Lex.SILENT_E_ROOTS_6) and self._encode_e_suffix(6))
            or self.string_at(-5, "CHARLES")
        )

    def _encode_e_suffix(self, at: int) -> bool:
        """
        字根長度為 at 時，字根結尾的 'E' 後面接的是否為不發音字尾

        字尾必須以母音開頭 (或是夠長的 "ST" / "SL")，
        而且不是會讓 'E' 發音的字尾，如 'bridgette', 'olena', 'bridgewood'。
        """
        length = len(self.word)
        if not (
            self.idx == at - 1
            and length > at + 1
            and (
                self.is_vowel_at(at + 1 - self.idx)
                or (self.string_at(at - self.idx, "ST", "SL") and length > at + 2)
            )
        ):
            return False

        return not self.string_at_end(at - self.idx, *Lex.E_PRONOUNCING_SUFFIXES)

    def _encode_e_pronounced_exceptions(self) -> bool:
        """
        通常不發音、但在這些字裡要發音的 'E'

        希臘名字如 'herakles'、西班牙語姓氏如 'robles'，以及 "LE" 換位不適用的情況。
        """
        return (
            (
                self.idx + 1 == self.last_idx
                and (
                    self.string_at_end(-3, "OCLES", "ACLES", "AKLES")
                    or self.string_start(*Lex.E_PRONOUNCED_ES_NAMES)
                )
            )
            or self.string_at(-2, "FRED", "DGES", "DRED", "GNES")
            or self.string_at(-5, "PROBLEM", "RESPLEN")
            or self.string_at(-4, "REPLEN")
            or self.string_at(-3, "SPLE")
        )

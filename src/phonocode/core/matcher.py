"""
上下文比對器 (Context Matcher)

所有規則鏈都由這裡的比對原語組成。除了 string_start / string_exact 之外，
位置皆相對於目前游標 (idx)。比對只讀取輸入，不會移動游標或寫入緩衝區。

輸入字串在進入比對器之前已經轉為大寫，候選字串也一律以大寫撰寫。
"""

from __future__ import annotations

# 各語系的母音 (含帶重音的拉丁字母)
VOWELS = frozenset(
    "AEIOUY"
    "ÀÁÂÃÄÅÆ"
    "ÈÉÊË"
    "ÌÍÎÏ"
    "ÒÓÔÕÖØ"
    "ÙÚÛÜÝ"
    "ŒŸ"
    "\uC29F\uC28C"
)


def is_vowel(ch: str) -> bool:
    """判斷單一字元是否為母音"""
    return ch in VOWELS


def fold_case(text: str) -> str:
    """
    逐字轉為大寫

    str.upper() 會把 'ß' 展開成 "SS" 而改變長度，這類字元保留原樣，
    讓游標位置與輸入字元一一對應。
    """
    folded = []
    for ch in text:
        upper = ch.upper()
        folded.append(upper if len(upper) == 1 else ch)
    return "".join(folded)


def root_or_inflections(word: str, root: str) -> bool:
    """
    判斷 word 是否為 root 本身或其規則英文屈折形式

    例如 root="ACHE" 時，"ACHE", "ACHES", "ACHED", "ACHING", "ACHINGLY", "ACHY"
    都會回傳 True；只包含相同子字串的其他單字則不會。
    """
    if word == root or word == root + "S":
        return True

    if root.endswith("E"):
        if word == root + "D":
            return True
        stem = root[:-1]
    else:
        if word == root + "ES" or word == root + "ED":
            return True
        stem = root

    return word in (stem + "ING", stem + "INGLY", stem + "Y")


class ContextMatcher:
    """
    以游標為中心的比對原語

    子類別 (編碼器) 負責設定 word / idx / last_idx，
    規則鏈透過這些方法查詢目前位置前後的字元。
    """

    word: str = ""
    idx: int = 0
    last_idx: int = -1

    def char_at(self, offset: int, ch: str) -> bool:
        """idx + offset 位置的字元是否等於 ch；越界時為 False"""
        at = self.idx + offset
        if at < 0 or at > self.last_idx:
            return False
        return self.word[at] == ch

    def is_vowel_at(self, offset: int) -> bool:
        """idx + offset 位置是否為母音；越界時為 False"""
        at = self.idx + offset
        if at < 0 or at > self.last_idx:
            return False
        return self.word[at] in VOWELS

    def string_at(self, offset: int, *candidates: str) -> bool:
        """
        是否有任一候選字串從 idx + offset 開始出現

        超出字尾的候選直接略過；候選的排列順序不影響結果。
        """
        start = self.idx + offset
        if start < 0 or start > self.last_idx:
            return False

        word = self.word
        remaining = len(word) - start
        for candidate in candidates:
            if len(candidate) > remaining:
                continue
            if word.startswith(candidate, start):
                return True
        return False

    def string_at_end(self, offset: int, *candidates: str) -> bool:
        """同 string_at，但候選字串必須剛好結束在最後一個字元"""
        start = self.idx + offset
        if start < 0 or start > self.last_idx:
            return False

        word = self.word
        remaining = len(word) - start
        for candidate in candidates:
            if len(candidate) != remaining:
                continue
            if word.startswith(candidate, start):
                return True
        return False

    def string_start(self, *candidates: str) -> bool:
        """單字是否以任一候選字串開頭 (與游標無關)"""
        return self.string_at(-self.idx, *candidates)

    def string_exact(self, *candidates: str) -> bool:
        """整個單字是否等於任一候選字串"""
        return self.word in candidates

    def is_slavo_germanic(self) -> bool:
        """斯拉夫或日耳曼語源的粗略判斷"""
        return self.string_start("SCH", "SW") or self.word[:1] in ("J", "W")

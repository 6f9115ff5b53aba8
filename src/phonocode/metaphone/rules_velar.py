"""
'G', 'H', 'J', 'K', 'Q', 'X' 規則鏈

軟顎音與喉音。'J' 的西班牙語判斷與 'K' 的 "KN" 判斷最複雜，
其餘字母以少數例外加預設規則組成。
"""

from __future__ import annotations

from .base import RuleContext
from .lexicon import Metaphone3Lexicon as Lex


class VelarRules(RuleContext):
    """'G' / 'H' / 'J' / 'K' / 'Q' / 'X' 的規則鏈"""

    # =========================================================================
    # 'G'
    # =========================================================================

    def encode_g(self) -> None:
        if self.char_at(1, "H"):
            self._encode_gh()
            return

        if self._encode_gn() or self._encode_gg_italian() or self._encode_g_front_vowel():
            return

        self.add_exact_approx("G", "K")
        self.idx += 2 if self.char_at(1, "G") else 1

    def _encode_gh(self) -> None:
        # 'burgher', 'afghan'
        if self.idx > 0 and not self.is_vowel_at(-1):
            self.add_exact_approx("G", "K")
        elif self.idx == 0:
            # 'ghislane' => J, 'ghost' => K
            if self.char_at(2, "I"):
                self.add("J")
            else:
                self.add_exact_approx("G", "K")
        elif (
            # 'hugh', 'bough', 'broughton' 不發音
            (self.idx > 1 and self.string_at(-2, "B", "H", "D"))
            or (self.idx > 2 and self.string_at(-3, "B", "H", "D"))
            or (self.idx > 3 and self.string_at(-4, "B", "H"))
            # 'fought', 'caught'，但 'draught' 讀 F
            or (self.string_at(-2, "OUGHT", "AUGHT") and not self.string_start("DRAUGHT"))
        ):
            pass
        elif self.idx > 2 and self.char_at(-1, "U") and self.string_at(-3, "C", "G", "L", "N", "R", "T"):
            # 'laugh', 'cough', 'enough', 'tough'
            self.add("F")
        elif not self.char_at(-1, "I"):
            self.add_exact_approx("G", "K")
        # 其餘如 'night', 'light' 不發音

        self.idx += 2

    def _encode_gn(self) -> bool:
        if not self.char_at(1, "N"):
            return False

        # 'gnome', 'gnostic'
        if self.idx == 0:
            self.idx += 1
            return True

        # 'sign', 'signs', 'designed'，但 'signal', 'ignite' 的 G 照常發音
        if self.string_at_end(0, "GN", "GNS", "GNED", "GNER", "GNING"):
            self.idx += 1
            return True

        return False

    def _encode_gg_italian(self) -> bool:
        # 'loggia', 'maggio', 'suggest', 'exaggerate'
        if self.char_at(1, "G") and (
            (self.char_at(2, "I") and self.is_vowel_at(3))
            or self.string_at(-2, "SUGGES")
            or self.string_at(-3, "EXAGGER")
        ):
            self.add("J")
            self.idx += 2
            return True
        return False

    def _encode_g_front_vowel(self) -> bool:
        """'G' 在 E / I / Y 之前：多半讀作 J，日耳曼字根與 "-NGER" 例外讀作 G/K"""
        if not self.string_at(1, "E", "I", "Y"):
            return False

        if self._hard_g_before_front_vowel():
            self.add_exact_approx("G", "K")
        elif self.is_slavo_germanic():
            self.add_exact_approx_alt("G", "J", "K", "J")
        elif self.idx == 0:
            self.add_exact_approx_alt("J", "G", "J", "K")
        else:
            self.add("J")

        self.idx += 1
        return True

    def _hard_g_before_front_vowel(self) -> bool:
        # 日耳曼字根，如 'get', 'give', 'girl', 'gift'
        if self.idx == 0 and self.string_start(
            "GET", "GIVE", "GIRL", "GIFT", "GEAR", "GEESE", "GIGGL", "GILD", "GILL",
            "GIMP", "GIRD", "GIRTH", "GEISHA", "GEYSER",
        ):
            return True

        # 'begin', 'forget', 'target'
        if self.string_at(-2, "BEGIN", "BEGIR", "FORGET", "TARGET", "FORGIV") or self.string_at(
            -3, "TOGETHER", "ALTOGETHER"
        ):
            return True

        # 'singer', 'finger', 'hunger'；'danger', 'ginger', 'passenger' 例外
        if self.string_at(-1, "NGER", "NGEST"):
            if self.string_at(-2, "ENGER"):
                return False
            if self.string_at(-2, "ANGER") and not (
                self.string_exact("ANGER") or self.string_start("HANGER", "CLANGER")
            ):
                return False
            return not self.string_at(-2, "INGER") or self.string_start(
                "SINGER", "RINGER", "FINGER", "LINGER", "WINGER", "SLINGER", "STINGER"
            )

        # 'tiger', 'eager', 'lager'；'manager' 讀 J
        if self.string_at(-1, "IGER", "AGER", "UGER") and self.string_at_end(1, "ER", "ERS"):
            return self.string_start("TIGER", "EAGER", "AUGER", "LAGER")

        # 'gynecology'
        return self.string_at(0, "GYN")

    # =========================================================================
    # 'H'
    # =========================================================================

    def encode_h(self) -> None:
        if (
            self._encode_initial_silent_h()
            or self._encode_initial_hs()
            or self._encode_initial_hua_hue()
            or self._encode_non_initial_silent_h()
        ):
            return

        if (self.idx == 0 or self.is_vowel_at(-1) or self.char_at(-1, "W")) and self.is_vowel_at(1):
            # 'hello', 'ahead'
            self.add("H")
            self.idx += 1
        elif self.char_at(1, "H") and self.is_vowel_at(2):
            # 'Ahhaim'
            self.add("H")
            self.idx += 2
        else:
            # 'ah', 'Sarah', 'John'
            self.idx += 1

    def _encode_initial_silent_h(self) -> bool:
        # 'hour', 'herb', 'heir', 'honor', 'honest'
        if self.idx != 0 or not self.string_at(1, "OUR", "ERB", "EIR", "ONOR", "ONOUR", "ONEST"):
            return False

        if self.string_at(1, "ERB"):
            # 英式 'herb' 讀 H，美式不讀
            if self.config.encode_vowels:
                self.add_alt("HA", "A")
            else:
                self.add_alt("H", "A")
        else:
            self.add("A")

        self.idx += 1
        self.idx = self.skip_vowels()
        return True

    def _encode_initial_hs(self) -> bool:
        # 中文轉寫，如 'Hsu'
        if self.idx == 0 and self.string_at(0, "HS"):
            self.add("X")
            self.idx += 2
            return True
        return False

    def _encode_initial_hua_hue(self) -> bool:
        # 西班牙語 'Huerta', 'Huang'；但 'Huey' 照常發音
        if self.idx == 0 and self.string_at(0, "HUA", "HUE", "HWA") and not self.string_at(0, "HUEY"):
            self.add("A")
            self.idx += 1
            return True
        return False

    def _encode_non_initial_silent_h(self) -> bool:
        # 'annihilate', 'vehement', 'Cohen'
        if self.idx > 0 and (
            self.string_at(-2, "NIHIL", "VEHEM", "LOHEN", "NEHEM", "MAHON", "MAHAN", "COHEN", "GAHAN")
            or self.string_at(-3, "GRAHAM", "TOUHY")
        ):
            self.idx += 1
            return True
        return False

    # =========================================================================
    # 'J'
    # =========================================================================

    def encode_j(self) -> None:
        if self._encode_spanish_j() or self._encode_spanish_oj_uj():
            return
        self._encode_other_j()

    def _encode_spanish_j(self) -> bool:
        """明顯的西班牙語名字，如 'jose', 'san jacinto'"""
        if (
            (
                self.string_at(1, "UAN", "ACI", "ALI", "EFE", "ICA", "IME", "OAQ", "UAR")
                and not self.string_at(0, "JIMERSON", "JIMERSEN")
            )
            or self.string_at_end(1, "OSE")
            or self.string_at(1, "EREZ", "UNTA", "AIME", "AVIE", "AVIA", "IMINEZ", "ARAMIL")
            or self.string_at_end(-2, "MEJIA")
            or self.string_at(-2, *Lex.SPANISH_J_FRAGMENTS)
            or self.string_at(-3, "ALEJANDR", "GUAJARDO", "TRUJILLO")
            or (self.string_at(-2, "RAJAS") and self.idx > 2)
            or (self.string_at(-2, "MEJIA") and not self.string_at(-2, "MEJIAN"))
            or self.string_at(-1, "OJEDA")
            or self.string_at(-3, "LEIJA", "MINJA", "VIAJES", "GRAJAL")
            or self.string_at(0, "JAUREGUI")
            or self.string_at(-4, "HINOJOSA")
            or self.string_start("SAN ")
            or (
                self.idx + 1 == self.last_idx
                and self.char_at(1, "O")
                and not self.string_start("TOJO", "BANJO", "MARYJO")
            )
        ):
            # 美式讀法中 'juan', 'marijuana', 'tijuana' 的 J 不讀 'H'，當成母音
            if not self.string_at(0, "JUAN", "JOAQ"):
                self.add("H")
            elif self.idx == 0:
                self.add("A")
            self.advance(2, 1)
            return True

        # 'jorge' 的替代讀音 'HARHA'，'julio', 'jesus' 同理
        if self.string_at(1, "ORGE", "ULIO", "ESUS") and not self.string_start("JORGEN"):
            if self.string_at_end(1, "ORGE"):
                if self.config.encode_vowels:
                    self.add_alt("JARJ", "HARHA")
                else:
                    self.add_alt("JRJ", "HRH")
                self.advance(5, 5)
                return True

            self.add_alt("J", "H")
            self.advance(2, 1)
            return True

        return False

    def _encode_spanish_oj_uj(self) -> bool:
        # 巴斯克語 'jojoba', 'jujuy'
        if self.string_at(1, "OJOBA", "UJUY"):
            if self.config.encode_vowels:
                self.add("HAH")
            else:
                self.add("HH")
            self.advance(4, 3)
            return True
        return False

    def _encode_other_j(self) -> None:
        # 德語 'Jahn', 'Johann', 'Jung', 'Jugo'
        if (
            self.string_at(1, "AH")
            or self.string_at_end(1, "OHANN")
            or (self.string_at(1, "UNG") and not self.string_at(1, "UNGL"))
            or self.string_at(1, "UGO")
        ):
            self.add_alt("J", "A")
            self.idx += 1
            return

        # 荷蘭語/斯拉夫語中當母音用的 J，如 'Mijnheer', 'Svejk'
        if (
            self.idx > 0
            and self.is_vowel_at(-1)
            and self.string_at(1, "L", "T", "K", "S", "N", "M")
            and not self.is_vowel_at(2)
        ) or self.string_start("HALLELUJA", "LJUBLJANA"):
            if self.config.encode_vowels:
                self.add("A")
            self.idx += 1
            return

        self.add("J")
        self.idx += 2 if self.char_at(1, "J") else 1

    # =========================================================================
    # 'K'
    # =========================================================================

    def encode_k(self) -> None:
        if self._encode_silent_k():
            return

        self.add("K")
        # 吃掉多餘的 K 與 Q
        if self.char_at(1, "K") or self.char_at(1, "Q"):
            self.idx += 2
        else:
            self.idx += 1

    def _encode_silent_k(self) -> bool:
        if (
            self.idx == 0
            and self.string_start("KN")
            and not self.string_at(2, "ISH", "ESSET", "IEVEL")
        ):
            self.idx += 1
            return True

        # 'know', 'knit', 'knob'
        if (
            self.string_at(1, "NOW", "NIT", "NOT", "NOB") and not self.string_start("BANKNOTE")
        ) or self.string_at(1, "NOCK", "NUCK", "NIFE", "NACK", "NIGHT"):
            # 前面的 N 已經輸出過，如 'penknife'
            if self.idx > 0 and self.char_at(-1, "N"):
                self.idx += 2
            else:
                self.idx += 1
            return True

        return False

    # =========================================================================
    # 'Q'
    # =========================================================================

    def encode_q(self) -> None:
        # 拼音 'Qin', 'Qing'
        if self.string_at(0, "QIN"):
            self.add("X")
            self.idx += 1
            return

        self.add("K")
        self.idx += 2 if self.char_at(1, "Q") else 1

    # =========================================================================
    # 'X'
    # =========================================================================

    def encode_x(self) -> None:
        if self.idx == 0:
            # 拼音 'Xiang', 'Xu' => X，其餘如 'xylophone' => S
            if self.string_at(0, "XIA", "XIO", "XIE", "XU"):
                self.add("X")
            else:
                self.add("S")
            self.idx += 1
            return

        # 'Oaxaca', 'Quixote'
        if self.string_at(-2, "OAXACA") or self.string_at(-3, "QUIXOTE"):
            self.add("H")
            self.idx += 1
            return

        # 'sexual', 'anxious'
        if self.string_at(1, "UAL", "IOUS"):
            self.add("KX")
            self.idx += 1
            return

        # 法語字尾不發音，如 'Bordeaux', 'Sioux', 'faux'
        if self.idx == self.last_idx and (
            self.string_at(-3, "IAU", "EAU", "IEU") or self.string_at(-2, "AI", "AU", "OU", "OI", "EU")
        ):
            self.idx += 1
            return

        self.add("KS")
        # 'excite', 'exceed' 的 C 已經包含在 'KS' 裡
        if self.string_at(1, "X", "Z", "S", "CI", "CE"):
            self.idx += 2
        else:
            self.idx += 1

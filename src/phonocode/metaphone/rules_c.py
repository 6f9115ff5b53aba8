"""
'C' 規則鏈

順序即優先權：越特殊的例外越先檢查，第一個命中的子規則負責輸出與前進，
其餘子規則不再評估。全部未命中時由 encode_c() 的預設規則輸出 'K'。
"""

from __future__ import annotations

from phonocode.core.matcher import root_or_inflections

from .base import RuleContext
from .lexicon import Metaphone3Lexicon as Lex


class CRules(RuleContext):
    """'C' 與 "CH" 的規則鏈"""

    def encode_c(self) -> None:
        if (
            self._encode_silent_c_at_beginning()
            or self._encode_ca_to_s()
            or self._encode_co_to_s()
            or self._encode_ch()
            or self._encode_ccia()
            or self._encode_cc()
            or self._encode_ck_cg_cq()
            or self._encode_c_front_vowel()
            or self._encode_silent_c()
            or self._encode_cz()
            or self._encode_cs()
        ):
            return

        if not self.string_at(-1, "C", "K", "G", "Q"):
            self.add("K")

        # 名字被拆開的情況，如 'mac caffrey', 'mac gregor'
        if self.string_at(1, " C", " Q", " G"):
            self.idx += 3
        elif self.string_at(1, "C", "K", "Q") and not self.string_at(1, "CE", "CI"):
            self.idx += 2
            # 'Ro-ckc-liffe'
            if self.string_at(0, "C", "K", "Q") and not self.string_at(1, "CE", "CI"):
                self.idx += 1
        else:
            self.idx += 1

    def _encode_silent_c_at_beginning(self) -> bool:
        # 'ctenoid', 'cnidaria'
        if self.idx == 0 and self.string_at(0, "CT", "CN"):
            self.idx += 1
            return True
        return False

    def _encode_ca_to_s(self) -> bool:
        """"-CA-" 讀作 S 的例外，包含省略了 cedilla 的拼法 (如 "linguica")"""
        if (self.idx == 0 and self.string_at(0, "CAES", "CAEC", "CAEM")) or self.string_start(
            "FACADE", "FRANCAIS", "FRANCAIX", "LINGUICA", "GONCALVES", "PROVENCAL"
        ):
            self.add("S")
            self.advance(2, 1)
            return True
        return False

    def _encode_co_to_s(self) -> bool:
        # 'coelecanth' => SLKN0
        if (
            (self.string_at(0, "COEL") and (self.is_vowel_at(4) or self.idx + 3 == self.last_idx))
            or self.string_at(0, "COENA", "COENO")
            or self.string_start("GARCON", "FRANCOIS", "MELANCON")
        ):
            self.add("S")
            self.advance(3, 1)
            return True
        return False

    # =========================================================================
    # "CH"
    # =========================================================================

    def _encode_ch(self) -> bool:
        if not self.string_at(0, "CH"):
            return False

        if (
            self._encode_chae()
            or self._encode_ch_to_h()
            or self._encode_silent_ch()
            or self._encode_arch()
            or self._encode_ch_to_x()
            or self._encode_english_ch_to_k()
            or self._encode_germanic_ch_to_k()
            or self._encode_greek_ch_initial()
            or self._encode_greek_ch_non_initial()
        ):
            return True

        if self.idx > 0:
            if self.string_start("MC") and self.idx == 1:
                # 'McHugh'
                self.add("K")
            else:
                self.add_alt("X", "K")
        else:
            self.add("X")

        self.idx += 2
        return True

    def _encode_chae(self) -> bool:
        # 'michael'
        if self.idx > 0 and self.string_at(2, "AE"):
            if self.string_start("RACHAEL"):
                self.add("X")
            elif not self.string_at(-1, "C", "K", "G", "Q"):
                self.add("K")
            self.advance(4, 2)
            return True
        return False

    def _encode_ch_to_h(self) -> bool:
        """
        希伯來語轉寫的 "-CH-" ('kh' 音)

        英文多半讀成 'h' 或 'kh'，其他拼法也常寫成 "-H-"，
        例如 'channukah', 'chabad'
        """
        if (self.idx == 0 and self.string_at(2, *Lex.HEBREW_CH_CONTINUATIONS)) or self.string_at(
            -3, "CLACHAN"
        ):
            self.add("H")
            self.advance(3, 2)
            return True
        return False

    def _encode_silent_ch(self) -> bool:
        if (
            self.string_at(-2, "YACHT", "FUCHSIA")
            or self.string_start("STRACHAN", "CRICHTON")
            or (self.string_at(-3, "DRACHM") and not self.string_at(-3, "DRACHMA"))
        ):
            self.idx += 2
            return True
        return False

    def _encode_ch_to_x(self) -> bool:
        # 'approach', 'beach'
        if (
            (
                self.string_at(-2, "OACH", "EACH", "EECH", "OUCH", "OOCH", "MUCH", "SUCH")
                and not self.string_at(-3, "JOACH")
            )
            # 'dacha', 'macho'
            or self.string_at_end(-1, "ACHA", "ACHO")
            or self.string_at_end(0, "CHOT", "CHOD", "CHAT")
            or (self.string_at_end(-1, "OCHE") and not self.string_at(-2, "DOCHE"))
            or self.string_at(-4, "ATTACH", "DETACH", "KOVACH", "PARACHUT")
            or self.string_at(-5, "SPINACH", "MASSACHU")
            or self.string_start("MACHAU")
            # 排除 "ACHE"
            or (self.string_at(-3, "THACH") and not self.string_at(1, "E"))
            or self.string_at(-2, "VACHON")
        ):
            self.add("X")
            self.idx += 2
            return True
        return False

    def _encode_english_ch_to_k(self) -> bool:
        # 'ache', 'echo', 'michael' 的另一種拼法
        if (
            (self.idx == 1 and root_or_inflections(self.word, "ACHE"))
            or (
                self.idx > 3
                and root_or_inflections(self.word[self.idx - 1:], "ACHE")
                and self.string_start("EAR", "HEAD", "BACK", "HEART", "BELLY", "TOOTH")
            )
            or self.string_at(-1, "ECHO")
            or self.string_at(-2, "MICHAEL")
            or self.string_at(-4, "JERICHO")
            or self.string_at(-5, "LEPRECH")
        ):
            self.add_alt("K", "X")
            self.idx += 2
            return True
        return False

    def _encode_germanic_ch_to_k(self) -> bool:
        """"<子音><母音>CH-" 通常是德語字，"CH" 讀作 K"""
        if (
            (
                self.idx > 1
                and not self.is_vowel_at(-2)
                and self.string_at(-1, "ACH")
                and not self.string_at(-2, "MACHADO", "MACHUCA", "LACHANC", "LACHAPE", "KACHATU")
                and not self.string_at(-3, "KHACHAT")
                and not self.char_at(2, "I")
                and (
                    not self.char_at(2, "E")
                    or self.string_at(-2, "BACHER", "MACHER", "MACHEN", "LACHER")
                )
            )
            # 'brecht', 'fuchs'
            or (
                self.string_at(2, "T", "S")
                and not self.string_start("WHICHSOEVER", "LUNCHTIME")
            )
            # 'andromache'
            or self.string_start("SCHR")
            or (self.idx > 2 and self.string_at(-2, "MACHE"))
            or (self.idx == 2 and self.string_at(-2, "ZACH"))
            or self.string_at(-4, "SCHACH")
            or self.string_at(-1, "ACHEN")
            or self.string_at(-3, "SPICH", "ZURCH", "BUECH")
            # "kirch" 與 "blech" 在字尾時讀 'X'
            or (
                self.string_at(-3, "KIRCH", "JOACH", "BLECH", "MALCH")
                and not (self.string_at(-3, "KIRCHNER") or self.idx + 1 == self.last_idx)
            )
            or self.string_at_end(-2, "NICH", "LICH", "BACH")
            or self.string_at_end(-3, "URICH", "BRICH", "ERICH", "DRICH", "NRICH")
            or self.string_at_end(-5, "ALDRICH")
            or self.string_at_end(-6, "GOODRICH")
            or self.string_at_end(-7, "GINGERICH")
            or self.string_at_end(-4, "ULRICH", "LFRICH", "LLRICH", "EMRICH", "ZURICH", "EYRICH")
            # 'wachtler', 'wechsler'，但不含 'tichner'
            or (
                (self.string_at(-1, "A", "O", "U", "E") or self.idx == 0)
                and self.string_at(2, "L", "R", "N", "M", "B", "H", "F", "V", "W", " ")
            )
        ):
            # "CHR/L-" 如 'chris' 沒有 'X' 的替代讀音
            if self.string_at(2, "R", "L") or self.is_slavo_germanic():
                self.add("K")
            else:
                self.add_alt("K", "X")
            self.idx += 2
            return True
        return False

    def _encode_arch(self) -> bool:
        """
        "-ARCH-"：希臘字根讀 'K'，英文字讀 'X'
        """
        if not self.string_at(-2, "ARCH"):
            return False

        greek_form = (
            (self.is_vowel_at(2) and self.string_at(-2, "ARCHA", "ARCHI", "ARCHO", "ARCHU", "ARCHY"))
            or self.string_at(
                -2, "ARCHEA", "ARCHEG", "ARCHEO", "ARCHET", "ARCHEL", "ARCHES", "ARCHEP",
                "ARCHEM", "ARCHEN",
            )
            or self.string_at_end(-2, "ARCH")
            or self.string_start("MENARCH")
        )
        english_larch = (
            (self.string_at(-3, "LARCH", "MARCH", "PARCH") or self.string_at(-4, "STARCH"))
            and not self.string_start(
                "EPARCH", "NOMARCH", "EXILARCH", "HIPPARCH", "MARCHESE", "ARISTARCH", "MARCHETTI"
            )
        ) or root_or_inflections(self.word, "STARCH")
        english_form = (
            root_or_inflections(self.word, "ARCH")
            or self.string_at(-4, "SEARCH", "POARCH")
            or self.string_start(
                "ARCHER", "ARCHIE", "ARCHENEMY", "ARCHIBALD", "ARCHULETA", "ARCHAMBAU"
            )
            or (
                english_larch
                and (not self.string_at(-2, "ARCHU", "ARCHY") or self.string_start("STARCHY"))
            )
        )

        if greek_form and not english_form:
            self.add_alt("K", "X")
        else:
            self.add("X")
        self.idx += 2
        return True

    def _encode_greek_ch_initial(self) -> bool:
        # 字根開頭的希臘語 "CH"，如 'chemistry', 'chorus'
        if (
            (
                self.string_at(
                    0, "CHAMOM", "CHARAC", "CHARIS", "CHARTO", "CHARTU", "CHARYB", "CHRIST",
                    "CHEMIC", "CHILIA",
                )
                or (
                    self.string_at(
                        0, "CHEMI", "CHEMO", "CHEMU", "CHEMY", "CHOND", "CHONA", "CHONI", "CHOIR",
                        "CHASM", "CHARO", "CHROM", "CHROI", "CHAMA", "CHALC", "CHALD", "CHAET",
                        "CHIRO", "CHILO", "CHELA", "CHOUS", "CHEIL", "CHEIR", "CHEIM", "CHITI",
                        "CHEOP",
                    )
                    and not (self.string_at(0, "CHEMIN") or self.string_at(-2, "ANCHONDO"))
                )
                or (
                    self.string_at(0, "CHISM", "CHELI")
                    # 排除西班牙語 "machismo"
                    and not (
                        self.string_start("MICHEL", "MACHISMO", "RICHELIEU", "REVANCHISM")
                        or self.string_exact("CHISM")
                    )
                )
                # 'chorus', 'chyme', 'chaos'
                or (
                    self.string_at(0, "CHOR", "CHOL", "CHYM", "CHYL", "CHLO", "CHOS", "CHUS", "CHOE")
                    and not self.string_start("CHOLLO", "CHOLLA", "CHORIZ")
                )
                # "chaos" => K，但 "chao" 不是
                or (self.string_at(0, "CHAO") and self.idx + 3 != self.last_idx)
                # 'abranchiate'
                or (self.string_at(0, "CHIA") and not self.string_start("CHIAPAS", "APPALACHIA"))
                # 'chimera'
                or self.string_at(0, "CHIMERA", "CHIMAER", "CHIMERI")
                # 'chameleon'
                or self.string_start("CHAME", "CHELO", "CHITO")
                # 'spirochete'
                or (
                    (self.idx + 4 == self.last_idx or self.idx + 5 == self.last_idx)
                    and self.string_at(-1, "OCHETE")
                )
            )
            # 其他讀 'X' 的例外，如 'chortle', 'crocheter'
            and not (
                self.string_exact("CHORE", "CHOLO", "CHOLA")
                or self.string_at(0, "CHORT", "CHOSE")
                or self.string_at(-3, "CROCHET")
                or self.string_start("CHEMISE", "CHARISE", "CHARISS", "CHAROLE")
            )
        ):
            if self.string_at(2, "R", "L"):
                self.add("K")
            else:
                self.add_alt("K", "X")
            self.idx += 2
            return True
        return False

    def _encode_greek_ch_non_initial(self) -> bool:
        # 字中或字尾的希臘語等字根，如 'tachometer', 'orchid'
        if (
            self.string_at(
                -2, "LYCHN", "TACHO", "ORCHO", "ORCHI", "LICHO", "ORCHID", "NICHOL",
                "MECHAN", "LICHEN", "MACHIC", "PACHEL", "RACHIF", "RACHID",
                "RACHIS", "RACHIC", "MICHAL", "ORCHESTR",
            )
            or self.string_at(
                -3, "MELCH", "GLOCH", "TRACH", "TROCH", "BRACH", "SYNCH", "PSYCH",
                "STICH", "PULCH", "EPOCH",
            )
            or (self.string_at(-3, "TRICH") and not self.string_at(-5, "OSTRICH"))
            or (
                self.string_at(
                    -2, "TYCH", "TOCH", "BUCH", "MOCH", "CICH", "DICH", "NUCH", "EICH", "LOCH",
                    "DOCH", "ZECH", "WYCH",
                )
                and not (self.string_at(-4, "INDOCHINA") or self.string_at(-2, "BUCHON"))
            )
            or (self.idx in (1, 2) and self.string_at(-1, "OCHER", "ECHIN", "ECHID"))
            or self.string_at(
                -4, "BRONCH", "STOICH", "STRYCH", "TELECH", "PLANCH", "CATECH", "MANICH",
                "MALACH", "BIANCH", "DIDACH", "BRANCHIO", "BRANCHIF",
            )
            or self.string_start("ICHA", "ICHN")
            or (
                self.string_at(-1, "ACHAB", "ACHAD", "ACHAN", "ACHAZ")
                and not self.string_at(-2, "MACHADO", "LACHANC")
            )
            or self.string_at(-1, *Lex.GREEK_ACH_FORMS)
            # 'inchoate'
            or (self.idx == 2 and self.string_start("INCHOA"))
            # 'ischemia'
            or self.string_start("ISCH")
            # 'ablimelech', 'antioch', 'pentateuch'
            or (
                self.idx + 1 == self.last_idx
                and self.string_at(-1, "A", "O", "U", "E")
                and not (
                    self.string_start("DEBAUCH")
                    or self.string_at(-2, "MUCH", "SUCH", "KOCH")
                    or self.string_at(-5, "OODRICH", "ALDRICH")
                )
            )
        ):
            self.add_alt("K", "X")
            self.idx += 2
            return True
        return False

    # =========================================================================
    # 重複的 'C'
    # =========================================================================

    def _encode_ccia(self) -> bool:
        # 義大利語 "-CCIA-"，如 'focaccia'
        if self.string_at(1, "CIA"):
            self.add_alt("X", "S")
            self.idx += 2
            return True
        return False

    def _encode_cc(self) -> bool:
        # 雙 'C'，但不含 'McClellan'
        if not self.string_at(0, "CC") or (self.idx == 1 and self.word[0] == "M"):
            return False

        if self.string_at(-3, "FLACCID"):
            self.add("S")
            self.advance(3, 2)
            return True

        # 'bacci', 'bertucci' 等義大利語
        if (
            self.string_at_end(2, "I")
            or self.string_at(2, "IO")
            or self.string_at_end(2, "INO", "INI")
        ):
            self.add("X")
            self.advance(3, 2)
            return True

        # 'accident', 'accede', 'succeed'；'bellocchio', 'bacchus', 'soccer' 讀 K
        if self.string_at(2, "I", "E", "Y") and not (
            self.char_at(2, "H") or self.string_at(-2, "SOCCER")
        ):
            self.add("KS")
            self.advance(3, 2)
            return True

        # Pierce's rule
        self.add("K")
        self.idx += 2
        return True

    def _encode_ck_cg_cq(self) -> bool:
        if not self.string_at(0, "CK", "CG", "CQ"):
            return False

        # 東歐拼法，如 'gorecki' == 'goresky'
        if self.string_at_end(0, "CKI", "CKY") and len(self.word) > 6:
            self.add_alt("K", "SK")
        else:
            self.add("K")

        if self.string_at(2, "K", "G", "Q"):
            self.idx += 3
        else:
            self.idx += 2
        return True

    # =========================================================================
    # 前母音 "CE" / "CI" / "CY"
    # =========================================================================

    def _encode_c_front_vowel(self) -> bool:
        """'C' 在 E / I / Y 之前，多半讀作 S 或 X"""
        if not self.string_at(0, "CI", "CE", "CY"):
            return False

        if not (
            self._encode_british_silent_ce()
            or self._encode_ce()
            or self._encode_ci()
            or self._encode_latinate_suffixes()
        ):
            self.add("S")

        self.advance(2, 1)
        return True

    def _encode_british_silent_ce(self) -> bool:
        # 英國地名，如 'gloucester' 讀作 glo-ster
        return self.string_at_end(1, "ESTER") or self.string_at(1, "ESTERSHIRE")

    def _encode_ce(self) -> bool:
        # 'ocean', 'rosacea', 'botticelli', 'concerto', 'cello'
        if (
            (self.string_at(1, "EAN") and self.is_vowel_at(-1))
            or (self.string_at_end(-1, "ACEA") and not self.string_start("PANACEA"))
            or self.string_at(1, "ELLI", "ERTO", "EORL")
            # 美國人熟悉的義大利姓名
            or self.string_at_end(-3, "CROCE")
            or self.string_at(-3, "DOLCE")
            or self.string_at_end(1, "ELLO")
        ):
            self.add_alt("X", "S")
            return True
        return False

    def _encode_ci(self) -> bool:
        # 'C' 前是子音：'fettucini'，但 'mancini' 採美式讀法
        if (
            (self.string_at(1, "INI") and not self.string_at_end(-self.idx, "MANCINI"))
            # 'medici'
            or self.string_at_end(-1, "ICI")
            # 'commercial', 'provincial', 'cistercian'
            or self.string_at(-1, "RCIAL", "NCIAL", "RCIAN", "UCIUS")
            or self.string_at(-3, "MARCIA")
            or self.string_at(-2, "ANCIENT")
        ):
            self.add_alt("X", "S")
            return True

        if self.string_at(-4, "COERCION"):
            self.add("J")
            return True

        # 'C' 前是母音
        if (self.string_at(0, "CIO", "CIE", "CIA") and self.is_vowel_at(-1)) or self.string_at(
            1, "IAO"
        ):
            if (
                self.string_at(0, "CIAN", "CIAL", "CIAO", "CIES", "CIOL", "CION")
                # "glacier" => 'X'，但 "spacier" => 'S'
                or self.string_at(-3, "GLACIER")
                or self.string_at(
                    0, "CIENT", "CIENC", "CIOUS", "CIATE", "CIATI", "CIATO", "CIABL", "CIARY"
                )
                or self.string_at_end(0, "CIA", "CIO", "CIAS", "CIOS")
            ) and not (
                self.string_at(-4, "ASSOCIATION")
                or self.string_start("OCIE")
                # 在美國這些名字多半來自西班牙語而非義大利語
                or self.string_at(-2, "LUCIO", "SOCIO", "SOCIE", "MACIAS", "LUCIANO", "HACIENDA")
                or self.string_at(-3, "GRACIE", "GRACIA", "MARCIANO")
                or self.string_at(-4, "PALACIO", "POLICIES", "FELICIANO")
                or self.string_at(-5, "MAURICIO")
                or self.string_at(-6, "ANDALUCIA")
                or self.string_at(-7, "ENCARNACION")
            ):
                self.add_alt("X", "S")
            else:
                self.add_alt("S", "X")
            return True

        return False

    def _encode_latinate_suffixes(self) -> bool:
        if self.string_at(1, "EOUS", "IOUS"):
            self.add_alt("X", "S")
            return True
        return False

    # =========================================================================
    # 其他
    # =========================================================================

    def _encode_silent_c(self) -> bool:
        if self.string_at(1, "T", "S") and self.string_start("INDICT", "TUCSON", "CONNECTICUT"):
            self.idx += 1
            return True
        return False

    def _encode_cz(self) -> bool:
        """斯拉夫語拼寫或轉寫的 "-CZ-" """
        if self.string_at(1, "Z") and not self.string_at(-1, "ECZEMA"):
            if self.string_at(0, "CZAR"):
                self.add("S")
            else:
                # 多半是捷克語
                self.add("X")
            self.idx += 2
            return True
        return False

    def _encode_cs(self) -> bool:
        # 'kovacs' 額外給 'X' 讀音，才能和 'kovach' 比對
        if self.string_start("KOVACS"):
            self.add_alt("KS", "X")
            self.idx += 2
            return True

        if self.string_at(-1, "ACS") and not self.string_at_end(-4, "ISAACS"):
            self.add("X")
            self.idx += 2
            return True

        return False

"""
Metaphone3Engine 規則測試

每個案例都對應一條具體的規則分支。
"""

import pytest

from phonocode import EncoderConfig, EncodingResult, Metaphone3Engine, encode

VOWELS_ON = EncoderConfig(encode_vowels=True)
EXACT = EncoderConfig(encode_exact=True)


class TestWorkedExamples:
    """典型的例外規則"""

    def setup_method(self):
        self.engine = Metaphone3Engine()

    def test_debt_silent_b(self):
        # B 不輸出，T 只輸出一次
        assert self.engine.encode("Debt") == EncodingResult("TT", "")

    def test_knight_silent_k(self):
        result = self.engine.encode("Knight")
        assert result == EncodingResult("NT", "")
        assert "K" not in result.primary

    def test_caesar_ca_to_s(self):
        result = self.engine.encode("Caesar")
        assert result.primary.startswith("S")
        assert result == EncodingResult("SSR", "")

    def test_jose_spanish_j(self):
        assert self.engine.encode("Jose") == EncodingResult("HS", "")

    def test_accident_double_c(self):
        result = self.engine.encode("Accident")
        assert result.primary.startswith("AKS")
        assert result == EncodingResult("AKSTNT", "")


class TestConsonantRules:
    def setup_method(self):
        self.engine = Metaphone3Engine()

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("Smith", ("SM0", "")),
            ("Thomas", ("TMS", "")),
            ("Wright", ("RT", "")),
            ("Philip", ("FLP", "")),
            ("School", ("SKL", "")),
            ("Schmidt", ("XMT", "SMT")),
            ("Often", ("AFN", "AFTN")),
            ("Bob", ("PP", "")),
            ("Jorge", ("JRJ", "HRH")),
            ("Jesus", ("JSS", "HSS")),
            ("Juan", ("AN", "")),
        ],
    )
    def test_default_mode(self, word, expected):
        assert self.engine.encode(word) == EncodingResult(*expected)

    def test_exact_mode_keeps_voicing(self):
        engine = Metaphone3Engine(EXACT)
        assert engine.encode("Bob") == EncodingResult("BB", "")
        assert engine.encode("Debt") == EncodingResult("DT", "")


class TestVowelMode:
    def setup_method(self):
        self.engine = Metaphone3Engine(VOWELS_ON)

    def test_non_initial_vowel_emitted(self):
        assert self.engine.encode("Smith").primary == "SMA0"

    def test_le_transposition_silences_e(self):
        assert self.engine.encode("apple").primary == "APAL"

    def test_pronounced_final_e_exception(self):
        assert self.engine.encode("Jose").primary == "HASA"

    def test_default_mode_ignores_internal_vowels(self):
        assert Metaphone3Engine().encode("apple").primary == "APL"


class TestOrchestrator:
    def setup_method(self):
        self.engine = Metaphone3Engine()

    def test_non_latin_consonants(self):
        assert self.engine.encode("Ñandu").primary == "NNT"
        assert self.engine.encode("Þór").primary == "0R"
        assert self.engine.encode("Straße").primary == "STRS"

    def test_punctuation_is_skipped(self):
        assert self.engine.encode("O'Brien").primary == "APRN"

    def test_only_symbols(self):
        assert self.engine.encode("123 !?") == EncodingResult("", "")

    def test_empty_input(self):
        assert self.engine.encode("") == EncodingResult("", "")

    def test_non_str_rejected(self):
        with pytest.raises(TypeError):
            self.engine.encode(None)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            self.engine.encode(b"smith")  # type: ignore[arg-type]

    def test_max_length(self):
        engine = Metaphone3Engine(EncoderConfig(max_length=2))
        assert engine.encode("Smith").primary == "SM"

    def test_engine_reuse_does_not_leak_state(self):
        self.engine.encode("Schmidt")
        assert self.engine.encode("Smith") == EncodingResult("SM0", "")

    def test_module_level_encode(self):
        assert encode("Knight") == EncodingResult("NT", "")
        assert encode("Smith", VOWELS_ON).primary == "SMA0"

    def test_result_is_tuple(self):
        primary, secondary = encode("Schmidt")
        assert (primary, secondary) == ("XMT", "SMT")


# =============================================================================
# 各規則鏈的固定案例
# =============================================================================


def _check(engine, word, expected):
    assert engine.encode(word) == EncodingResult(*expected), word


class TestPronouncedE:
    """母音模式下 'E' 的發音判斷"""

    def setup_method(self):
        self.engine = Metaphone3Engine(VOWELS_ON)

    @pytest.mark.parametrize(
        "word, expected",
        [
            # 兩種讀音都常見：'A' 只放在替代編碼
            ("Lame", ("LAM", "LAMA")),
            ("Resume", ("RASAM", "RASAMA")),
            # 'A' 只放在主要編碼
            ("Inge", ("ANJA", "ANJ")),
            # "-ED" 的 D/T 兩種讀法，並且一併吃掉 "ED"
            ("Blessed", ("PLAST", "PLASAT")),
            # 複數/過去式的 E 不發音，"-TED" 與名字例外要發音
            ("Grapes", ("KRAPS", "")),
            ("Nested", ("NASTAT", "")),
            ("Ahmed", ("AMAT", "")),
            # "-NESS" / "-LY" 之前不發音
            ("Wholeness", ("HALNAS", "")),
            ("Barely", ("PARLA", "")),
            # 二、三個字母的字尾 E 要發音，母音開頭的三字母字除外
            ("Be", ("PA", "")),
            ("The", ("0A", "")),
            ("Ace", ("AS", "")),
            # 德語姓氏 "-DKE"；'Franke' 例外
            ("Radke", ("RATKA", "")),
            ("Franke", ("FRANK", "")),
            # 字根內部的 E：字尾以母音開頭時不發音，"-NA" 這類字尾例外
            ("Olesen", ("ALSAN", "")),
            ("Olena", ("ALANA", "")),
        ],
    )
    def test_e(self, word, expected):
        _check(self.engine, word, expected)

    def test_blessed_without_vowels(self):
        assert Metaphone3Engine().encode("Blessed") == EncodingResult("PLST", "")


class TestVowelRuns:
    @pytest.mark.parametrize(
        "word, expected",
        [
            # 'iron' 的 O 不發音，'ironic' 除外
            ("Iron", ("ARN", "")),
            ("Ironic", ("ARANAK", "")),
            # "-QUE" / "-GUE" 的 UE 不發音，'argue' 除外
            ("Plaque", ("PLAK", "")),
            ("Rogue", ("RAK", "")),
            ("Argue", ("ARKA", "")),
        ],
    )
    def test_vowel_mode(self, word, expected):
        _check(Metaphone3Engine(VOWELS_ON), word, expected)

    @pytest.mark.parametrize(
        "word, expected",
        [
            # WH 併入母音串
            ("Nowhere", ("NR", "")),
            ("Matthew", ("M0", "")),
            ("Kowalski", ("KLSK", "")),
            # 斯拉夫姓氏的 W 另外給 V/F 替代讀音
            ("Lewinski", ("LNSK", "LFNSK")),
            ("Lewandowski", ("LNTSK", "LFNTFSK")),
            ("Horowitz", ("HRTS", "HRFX")),
        ],
    )
    def test_default_mode(self, word, expected):
        _check(Metaphone3Engine(), word, expected)

    def test_lew_w_has_alternate(self):
        assert "F" in Metaphone3Engine().encode("Lewinski").secondary
        assert "V" in Metaphone3Engine(EXACT).encode("Lewinski").secondary


class TestCRules:
    def setup_method(self):
        self.engine = Metaphone3Engine()

    @pytest.mark.parametrize(
        "word, expected",
        [
            # "CH" 子規則鏈
            ("Michael", ("MKL", "")),
            ("Rachael", ("RXL", "")),
            ("Chanukah", ("HNK", "")),
            ("Yacht", ("AT", "")),
            ("Approach", ("APRX", "")),
            ("Ache", ("AK", "AX")),
            ("Bach", ("PK", "PX")),
            ("Arch", ("ARX", "")),
            ("Architect", ("ARKTKT", "ARXTKT")),
            ("Chemistry", ("KMSTR", "XMSTR")),
            ("Orchid", ("ARKT", "ARXT")),
            ("McHugh", ("MK", "")),
            ("Czech", ("XK", "XX")),
            # 重複的 C
            ("Focaccia", ("FKX", "FKS")),
            ("Bacci", ("PX", "")),
            ("Soccer", ("SKR", "")),
            # CK / CS / CZ
            ("Gorecki", ("KRK", "KRSK")),
            ("Kovacs", ("KFKS", "KFX")),
            ("Czar", ("SR", "")),
            # 不發音的 C
            ("Indict", ("ANTT", "")),
            ("Tucson", ("TSN", "")),
            ("Gloucester", ("KLSTR", "")),
            # 前母音 C
            ("Ocean", ("AXN", "ASN")),
            ("Cello", ("XL", "SL")),
            ("Coercion", ("KRJN", "")),
            ("Precious", ("PRXS", "PRSS")),
        ],
    )
    def test_c(self, word, expected):
        _check(self.engine, word, expected)


class TestKAndJ:
    @pytest.mark.parametrize(
        "word, expected",
        [
            ("Penknife", ("PNF", "")),
            ("Banknote", ("PNKNT", "")),
            ("Jojoba", ("HHP", "")),
            ("Jujuy", ("HH", "")),
        ],
    )
    def test_default_mode(self, word, expected):
        _check(Metaphone3Engine(), word, expected)

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("Jojoba", ("HAHAPA", "")),
            ("Jujuy", ("HAHA", "")),
            ("Jorge", ("JARJ", "HARHA")),
        ],
    )
    def test_vowel_mode(self, word, expected):
        _check(Metaphone3Engine(VOWELS_ON), word, expected)


class TestOtherConsonants:
    def setup_method(self):
        self.engine = Metaphone3Engine()

    @pytest.mark.parametrize(
        "word, expected",
        [
            # D
            ("Edge", ("AJ", "")),
            ("Width", ("AT0", "")),
            # G
            ("Ghost", ("KST", "")),
            ("Laugh", ("LF", "")),
            ("Gnome", ("NM", "")),
            ("Sign", ("SN", "")),
            ("George", ("JRJ", "KRJ")),
            ("Singer", ("SNKR", "")),
            # H
            ("Hour", ("AR", "")),
            ("Huang", ("ANK", "")),
            # L
            ("Walk", ("AK", "")),
            ("Lincoln", ("LNKN", "")),
            ("Colonel", ("KRNL", "")),
            # M / N / P
            ("Dumb", ("TM", "")),
            ("Campbell", ("KMPL", "")),
            ("Dances", ("TNTSS", "")),
            ("Pneumonia", ("NMN", "")),
            ("Shepherd", ("XPRT", "")),
            # Q / R
            ("Qin", ("XN", "")),
            ("Cartier", ("KRT", "KRTR")),
            ("Brzezinski", ("PJSNSK", "PRSSNSK")),
            # S
            ("Island", ("ALNT", "")),
            ("Castle", ("KSL", "")),
            ("Listen", ("LSN", "")),
            ("Asthma", ("ASM", "")),
            ("Sugar", ("XKR", "")),
            ("Mission", ("MXN", "")),
            ("Vision", ("FJN", "")),
            # T
            ("Nation", ("NXN", "")),
            ("Nature", ("NXR", "NTR")),
            # W
            ("Wolf", ("ALF", "FLF")),
            ("Who", ("H", "")),
            ("White", ("AT", "")),
            # X
            ("Xavier", ("SFR", "")),
            ("Sexual", ("SKXL", "")),
            ("Bordeaux", ("PRT", "")),
            # Z
            ("Pizza", ("PTS", "PS")),
            ("Zhivago", ("JFK", "")),
            ("Mozart", ("MTSRT", "")),
            ("Azure", ("AJR", "ASR")),
        ],
    )
    def test_default_mode(self, word, expected):
        _check(self.engine, word, expected)

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("Width", ("AD0", "")),
            ("George", ("JRJ", "GRJ")),
            ("Vision", ("VJN", "")),
            ("Wolf", ("ALF", "VLF")),
        ],
    )
    def test_exact_mode(self, word, expected):
        _check(Metaphone3Engine(EXACT), word, expected)

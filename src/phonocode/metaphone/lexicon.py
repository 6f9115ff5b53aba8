"""
Metaphone 3 詞表

集中管理規則鏈用到的較長固定詞表 (外來語、專有名詞、姓氏)。
短的例外清單直接寫在各規則裡，和判斷條件放在一起比較好讀。

所有詞彙皆為大寫。
"""


class Metaphone3Lexicon:
    """Metaphone 3 規則詞表 - 集中管理較長的例外清單"""

    # -------------------------------------------------------------------------
    # 母音 / 'E'
    # -------------------------------------------------------------------------

    # 字尾 'E' 要發音的外來語與專有名詞 (整字比對)
    E_PRONOUNCED_FINAL_WORDS = (
        "ACME", "NIKE", "CAFE", "RENE", "LUPE", "JOSE", "ESME",
        "LETHE", "CADRE", "TILDE", "SIGNE", "POSSE", "LATTE", "ANIME", "DOLCE", "CROCE",
        "ADOBE", "OUTRE", "JESSE", "JAIME", "JAFFE", "BENGE", "RUNGE",
        "CHILE", "DESME", "CONDE", "URIBE", "LIBRE", "ANDRE",
        "HECATE", "PSYCHE", "DAPHNE", "PENSKE", "CLICHE", "RECIPE",
        "TAMALE", "SESAME", "SIMILE", "FINALE", "KARATE", "RENATE", "SHANTE",
        "OBERLE", "COYOTE", "KRESGE", "STONGE", "STANGE", "SWAYZE", "FUENTE",
        "SALOME", "URRIBE",
        "ECHIDNE", "ARIADNE", "MEINEKE", "PORSCHE", "ANEMONE", "EPITOME",
        "SYNCOPE", "SOUFFLE", "ATTACHE", "MACHETE", "KARAOKE", "BUKKAKE",
        "VICENTE", "ELLERBE", "VERSACE",
        "PENELOPE", "CALLIOPE", "CHIPOTLE", "ANTIGONE", "KAMIKAZE", "EURIDICE",
        "YOSEMITE", "FERRANTE",
        "HYPERBOLE", "GUACAMOLE", "XANTHIPPE",
        "SYNECDOCHE",
    )

    # 德語姓氏字尾 "-<子音>KE"，字尾 'E' 發音
    E_PRONOUNCED_GERMAN_KE = (
        "BKE", "DKE", "FKE", "KKE", "LKE", "NKE", "MKE", "PKE", "TKE", "VKE", "ZKE",
    )

    # 以母音 + 'D' 結尾、'E' 仍然發音的名字 (如 "AHMED")
    E_PRONOUNCED_BEFORE_D_NAMES = (
        "ABED", "IMED", "JARED", "AHMED", "HAMED", "JAVED",
        "NORRED", "MEDVED", "MERCED", "ALLRED", "KHALED", "RASHED", "MASJED",
        "MOHAMED", "MOHAMMED", "MUHAMMED", "MOUHAMED", "ANTIPODES", "ANOPHELES",
    )

    # 字尾 "-ES" 的 'E' 發音的希臘/西班牙語系姓名
    E_PRONOUNCED_ES_NAMES = (
        "INES",
        "LOPES", "ESTES", "GOMES", "NUNES", "ALVES", "ICKES",
        "INNES", "PERES", "WAGES", "NEVES", "BENES", "DONES",
        "CORTES", "CHAVES", "VALDES", "ROBLES", "TORRES", "FLORES", "BORGES",
        "NIEVES", "MONTES", "SOARES", "VALLES", "GEDDES", "ANDRES", "VIAJES",
        "CALLES", "FONTES", "HERMES", "ACEVES", "BATRES", "MATHES",
        "DELORES", "MORALES", "DOLORES", "ANGELES", "ROSALES", "MIRELES", "LINARES",
        "PERALES", "PAREDES", "BRIONES", "SANCHES", "CAZARES", "REVELES", "ESTEVES",
        "ALVARES", "MATTHES", "SOLARES", "CASARES", "CACERES", "STURGES", "RAMIRES",
        "FUNCHES", "BENITES", "FUENTES", "PUENTES", "TABARES", "HENTGES", "VALORES",
        "GONZALES", "MERCEDES", "FAGUNDES", "JOHANNES", "GONSALES", "BERMUDES",
        "CESPEDES", "BETANCES", "TERRONES", "DIOGENES", "CORRALES", "CABRALES",
        "MARTINES", "GRAJALES",
        "CERVANTES", "FERNANDES", "GONCALVES", "BENEVIDES", "CIFUENTES", "SIFUENTES",
        "SERVANTES", "HERNANDES", "BENAVIDES",
        "ARCHIMEDES", "CARRIZALES", "MAGALLANES",
    )

    # 子音-母音-子音-E 的英文字根；後面接母音字尾時 'E' 不發音 (如 "FIREARM")
    SILENT_E_ROOTS_4 = (
        "BARE", "FIRE", "FORE", "GATE", "HAGE", "HAVE",
        "HAZE", "HOLE", "CAPE", "HUSE", "LACE", "LINE",
        "LIVE", "LOVE", "MORE", "MOSE", "NICE",
        "RAKE", "ROBE", "ROSE", "SISE", "SIZE", "WARE",
        "WAKE", "WISE", "WINE",
    )
    SILENT_E_ROOTS_5 = (
        "BLAKE", "BRAKE", "BRINE", "CARLE", "CLEVE", "DUNNE",
        "HEDGE", "HOUSE", "JEFFE", "LUNCE", "STOKE", "STONE",
        "THORE", "WEDGE", "WHITE",
    )
    SILENT_E_ROOTS_6 = ("BRIDGE", "CHEESE")

    # 會讓前面 'E' 發音的字尾 (如 "BRIDGETTE", "OLENA")
    E_PRONOUNCING_SUFFIXES = (
        "T", "R", "TA", "TT", "NA", "NO", "NE",
        "RS", "RE", "LA", "AU", "RO", "RA", "TTE", "LIA", "NOW", "ROS", "RAS",
        "WOOD", "WATER", "WORTH",
    )

    # -------------------------------------------------------------------------
    # 'C' / "CH"
    # -------------------------------------------------------------------------

    # 希伯來語轉寫 "CH" => 'H' (接在開頭 "CH" 之後的部分)
    HEBREW_CH_CONTINUATIONS = (
        "AIM", "ETH", "ELM", "ASID", "AZAN",
        "UPPAH", "UTZPA", "ALLAH", "ALUTZ", "AMETZ",
        "ESHVAN", "ADARIM", "ANUKAH", "ALLLOTH", "ANNUKAH", "AROSETH",
    )

    # 希臘字根，"CH" 在字中 => 'K' (從 "CH" 前一個字元開始比對)
    GREEK_ACH_FORMS = (
        "ACHISH", "ACHILL", "ACHAIA", "ACHENE", "ACHAIAN", "ACHATES", "ACHIRAL", "ACHERON",
        "ACHILLEA", "ACHIMAAS", "ACHILARY", "ACHELOUS", "ACHENIAL", "ACHERNAR",
        "ACHALASIA", "ACHILLEAN", "ACHIMENES", "ACHIMELECH", "ACHITOPHEL",
    )

    # -------------------------------------------------------------------------
    # 'J'
    # -------------------------------------------------------------------------

    # 西班牙語系名字片段 (從 'J' 前兩個字元開始比對)
    SPANISH_J_FRAGMENTS = (
        "TEJED", "TEJAD", "LUJAN", "FAJAR", "BEJAR", "BOJOR", "CAJIG",
        "DEJAS", "DUJAR", "DUJAN", "MIJAR", "MEJOR", "NAJAR",
        "NOJOS", "RAJED", "RIJAL", "REJON", "TEJAN", "UIJAN",
    )

    # -------------------------------------------------------------------------
    # 'W'
    # -------------------------------------------------------------------------

    # 以 W 開頭、W 常讀作 V 的日耳曼/斯拉夫姓氏
    GERMANIC_W_NAME_BEGINNINGS = (
        "WEE", "WIX", "WAX",
        "WOLF", "WEIS", "WAHL", "WALZ", "WEIL", "WERT", "WINE", "WILK", "WALT",
        "WOLL", "WADA", "WULF", "WEHR", "WURM", "WYSE", "WENZ", "WIRT", "WOLK",
        "WEIN", "WYSS", "WASS", "WANN", "WINT", "WINK", "WILE", "WIKE", "WIER",
        "WELK", "WISE",
        "WIRTH", "WIESE", "WITTE", "WENTZ", "WOLFF", "WENDT", "WERTZ", "WILKE",
        "WALTZ", "WEISE", "WOOLF", "WERTH", "WEESE", "WURTH", "WINES", "WARGO",
        "WIMER", "WISER", "WAGER", "WILLE", "WILDS", "WAGAR", "WERTS", "WITTY",
        "WIENS", "WIEBE", "WIRTZ", "WYMER", "WULFF", "WIBLE", "WINER", "WIEST",
        "WALKO", "WALLA", "WEBRE", "WEYER", "WYBLE", "WOMAC", "WILTZ", "WURST",
        "WOLAK", "WELKE", "WEDEL", "WEIST", "WYGAN", "WUEST", "WEISZ", "WALCK",
        "WEITZ", "WYDRA", "WANDA", "WILMA", "WEBER",
        "WETZEL", "WEINER", "WENZEL", "WESTER", "WALLEN", "WENGER", "WALLIN",
        "WEILER", "WIMMER", "WEIMER", "WYRICK", "WEGNER", "WINNER", "WESSEL",
        "WILKIE", "WEIGEL", "WOJCIK", "WENDEL", "WITTER", "WIENER", "WEISER",
        "WEXLER", "WACKER", "WISNER", "WITMER", "WINKLE", "WELTER", "WIDMER",
        "WITTEN", "WINDLE", "WASHER", "WOLTER", "WILKEY", "WIDNER", "WARMAN",
        "WEYANT", "WEIBEL", "WANNER", "WILKEN", "WILTSE", "WARNKE", "WALSER",
        "WEIKEL", "WESNER", "WITZEL", "WAGNON", "WINANS", "WENNER",
        "WOLKEN", "WILNER", "WYSONG", "WYCOFF", "WUNDER", "WINKEL", "WIDMAN",
        "WELSCH", "WEHNER", "WEIGLE", "WETTER", "WUNSCH", "WAXMAN",
        "WILKER", "WILHAM", "WITTIG", "WITMAN", "WESTRA", "WEHRLE", "WASSER",
        "WILLER", "WEGMAN", "WARFEL", "WYNTER", "WERNER", "WAGNER", "WISSER",
        "WISEMAN", "WINKLER", "WILHELM", "WELLMAN", "WAMPLER", "WACHTER", "WALTHER",
        "WYCKOFF", "WEIDNER", "WOZNIAK", "WEILAND", "WILFONG", "WIEGAND", "WILCHER",
        "WIELAND", "WILDMAN", "WALDMAN", "WORTMAN", "WYSOCKI", "WEIDMAN", "WITTMAN",
        "WIDENER", "WOLFSON", "WENDELL", "WEITZEL", "WILLMAN", "WALDRUP", "WALTMAN",
        "WALCZAK", "WEIGAND", "WESSELS", "WIDEMAN", "WOLTERS", "WIREMAN", "WILHOIT",
        "WEGENER", "WOTRING", "WINGERT", "WIESNER", "WAYMIRE", "WENTZEL",
        "WINEGAR", "WESTMAN", "WYNKOOP", "WALLICK", "WURSTER", "WINBUSH", "WILBERT",
        "WALLACH", "WOMMACK", "WEISMAN",
        "WEINSTEIN", "WERTHEIM", "WASSERMAN", "WEINBERG", "WINTERS",
    )

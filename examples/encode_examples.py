"""
Metaphone 3 編碼範例

展示基本編碼、母音/清濁音配置、引擎池，
以及用發音鍵做姓名模糊比對。
"""

from concurrent.futures import ThreadPoolExecutor

from phonocode import (
    EncoderConfig,
    EncoderPool,
    Metaphone3Engine,
    Metaphone3PhoneticSystem,
    encode,
)


def demo_basic():
    """基本編碼：primary 與 secondary"""
    print("=" * 60)
    print("範例 1: 基本編碼")
    print("=" * 60)

    for word in ["Debt", "Knight", "Caesar", "Jose", "Accident", "Schmidt", "Often", "Jorge"]:
        primary, secondary = encode(word)
        print(f"  {word:<10} -> {primary:<8} {secondary}")
    print()


def demo_config():
    """比較不同配置的輸出"""
    print("=" * 60)
    print("範例 2: encode_vowels / encode_exact")
    print("=" * 60)

    configs = {
        "預設": EncoderConfig(),
        "母音": EncoderConfig(encode_vowels=True),
        "清濁": EncoderConfig(encode_exact=True),
        "全開": EncoderConfig(encode_vowels=True, encode_exact=True, max_length=12),
    }
    words = ["apple", "Bob", "Smith", "Brzezinski"]

    for name, config in configs.items():
        engine = Metaphone3Engine(config)
        codes = ", ".join(f"{w}={engine.encode(w).primary}" for w in words)
        print(f"  {name}: {codes}")
    print()


def demo_pool():
    """多執行緒透過引擎池編碼"""
    print("=" * 60)
    print("範例 3: EncoderPool")
    print("=" * 60)

    pool = EncoderPool(size=4)
    names = ["Horowitz", "Kowalski", "Michael", "Gnocchi", "Pizza", "Nietzsche"] * 3

    with ThreadPoolExecutor(max_workers=4) as executor:
        results = list(executor.map(pool.encode, names))

    for name, result in sorted(set(zip(names, results))):
        print(f"  {name:<10} -> {result.primary:<8} {result.secondary}")
    print()


def demo_matching():
    """用發音鍵比對拼寫不同的姓名"""
    print("=" * 60)
    print("範例 4: 姓名模糊比對")
    print("=" * 60)

    system = Metaphone3PhoneticSystem()
    pairs = [("Smith", "Smyth"), ("Schmidt", "Smith"), ("Catherine", "Kathryn"), ("Knight", "night")]

    for a, b in pairs:
        ratio, is_match = system.compare_words(a, b)
        flag = "相符" if is_match else "不符"
        print(f"  {a} / {b}: ratio={ratio:.2f} {flag} (sounds_alike={system.sounds_alike(a, b)})")
    print()


if __name__ == "__main__":
    demo_basic()
    demo_config()
    demo_pool()
    demo_matching()

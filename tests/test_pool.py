"""
EncoderPool 與並行呼叫測試
"""

import queue
from concurrent.futures import ThreadPoolExecutor

import pytest

from phonocode import EncoderConfig, EncoderPool, Metaphone3Engine, encode
from phonocode.metaphone import engine as engine_module

WORDS = ["Smith", "Schmidt", "Knight", "Caesar", "Accident", "Jose", "Michael", "Horowitz"] * 25


class TestEncoderPool:
    def setup_method(self):
        self.pool = EncoderPool(size=2)

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            EncoderPool(size=0)
        with pytest.raises(ValueError):
            EncoderPool(size=-1)

    def test_checkout_returns_engine(self):
        assert self.pool.available == 2
        with self.pool.checkout() as engine:
            assert isinstance(engine, Metaphone3Engine)
            assert self.pool.available == 1
        assert self.pool.available == 2

    def test_engine_returned_after_error(self):
        with pytest.raises(RuntimeError):
            with self.pool.checkout():
                raise RuntimeError("boom")
        assert self.pool.available == 2

    def test_checkout_timeout(self):
        pool = EncoderPool(size=1)
        with pool.checkout():
            with pytest.raises(queue.Empty):
                with pool.checkout(timeout=0.01):
                    pass

    def test_pool_uses_config(self):
        pool = EncoderPool(size=1, config=EncoderConfig(encode_exact=True))
        assert pool.config.encode_exact is True
        assert pool.encode("Bob").primary == "BB"

    def test_concurrent_encoding_matches_sequential(self):
        expected = [Metaphone3Engine().encode(w) for w in WORDS]
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(self.pool.encode, WORDS))
        assert results == expected


def test_module_encode_is_thread_safe():
    expected = [encode(w) for w in WORDS]
    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(encode, WORDS))
    assert results == expected


def test_module_encode_bounds_engines_per_thread():
    limit = engine_module.MAX_ENGINES_PER_THREAD
    for length in range(1, limit + 5):
        encode("Smith", EncoderConfig(max_length=length))
    engines = engine_module._thread_state.engines
    assert len(engines) == limit
    # 最近使用的配置仍保留，最早的已淘汰
    assert EncoderConfig(max_length=limit + 4) in engines
    assert EncoderConfig(max_length=1) not in engines


def test_module_encode_evicted_config_still_works():
    limit = engine_module.MAX_ENGINES_PER_THREAD
    for length in range(1, limit + 2):
        encode("Smith", EncoderConfig(max_length=length))
    assert encode("Smith", EncoderConfig(max_length=1)).primary == "S"

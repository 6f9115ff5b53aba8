"""
日誌與計時工具測試
"""

import logging

from phonocode import Metaphone3Engine
from phonocode.utils.logger import (
    TimingContext,
    enable_timing_logging,
    get_logger,
    log_timing,
    setup_logger,
)


def test_get_logger_namespace():
    assert get_logger().name == "phonocode"
    assert get_logger("metaphone.engine").name == "phonocode.metaphone.engine"
    assert get_logger("phonocode.timing").name == "phonocode.timing"


def test_setup_logger_is_idempotent():
    root = logging.getLogger("phonocode")
    previous = root.level
    try:
        setup_logger(level=logging.INFO)
        count = len(root.handlers)
        setup_logger(level=logging.DEBUG)
        assert len(root.handlers) == count
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)


def test_enable_timing_logging():
    root = logging.getLogger("phonocode")
    previous = root.level
    try:
        timing = enable_timing_logging()
        assert timing.name == "phonocode.timing"
        assert timing.level == logging.DEBUG
    finally:
        root.setLevel(previous)


def test_timing_context_callback():
    calls = []
    with TimingContext("work", callback=lambda op, elapsed: calls.append((op, elapsed))) as ctx:
        pass
    assert calls == [("work", ctx.elapsed)]
    assert ctx.elapsed >= 0.0


def test_log_timing_decorator(caplog):
    @log_timing("double")
    def double(x):
        return x * 2

    with caplog.at_level(logging.DEBUG, logger="phonocode"):
        assert double(21) == 42
    assert any("[Timing] double" in r.getMessage() for r in caplog.records)
    assert double.__name__ == "double"


def test_engine_reports_timing():
    calls = []
    engine = Metaphone3Engine(on_timing=lambda op, elapsed: calls.append(op))
    engine.encode("Smith")
    engine.encode("")
    assert calls == ["Metaphone3Engine.encode"]


def test_engine_debug_log(caplog):
    engine = Metaphone3Engine()
    with caplog.at_level(logging.DEBUG, logger="phonocode"):
        engine.encode("Knight")
    assert any("[Encode] Knight" in r.getMessage() for r in caplog.records)


def test_engine_init_logged(caplog):
    with caplog.at_level(logging.INFO, logger="phonocode"):
        Metaphone3Engine()
    assert any("Metaphone3Engine initialized" in r.getMessage() for r in caplog.records)


def test_verbose_engine_keeps_timing_callback():
    calls = []
    root = logging.getLogger("phonocode")
    previous = root.level
    try:
        engine = Metaphone3Engine(verbose=True, on_timing=lambda op, elapsed: calls.append(op))
        assert not hasattr(engine, "_verbose")
        assert root.level == logging.DEBUG
        engine.encode("Smith")
    finally:
        root.setLevel(previous)
    assert calls == ["Metaphone3Engine.encode"]

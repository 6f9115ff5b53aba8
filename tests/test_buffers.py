"""
輸出緩衝區測試
"""

from phonocode.core.buffers import NO_EMISSION, EncodingResult, PhoneticBuffers


class TestPhoneticBuffers:
    def setup_method(self):
        self.buffers = PhoneticBuffers(max_length=8)

    def test_emit_both_sides(self):
        self.buffers.emit("K", "X")
        assert self.buffers.result() == EncodingResult("K", "X")

    def test_no_emission_marker(self):
        self.buffers.emit(NO_EMISSION, "A")
        self.buffers.emit("T", NO_EMISSION)
        assert self.buffers.result() == EncodingResult("T", "A")

    def test_alternate_defaults_to_no_emission(self):
        self.buffers.emit("S")
        assert self.buffers.result() == EncodingResult("S", "")

    def test_consecutive_a_collapses(self):
        self.buffers.emit_both("A")
        self.buffers.emit_both("A")
        self.buffers.emit_both("N")
        self.buffers.emit_both("A")
        assert self.buffers.result().primary == "ANA"

    def test_multi_symbol_emission_counts_each_symbol(self):
        self.buffers.emit_both("KS")
        assert len(self.buffers.primary) == 2

    def test_identical_buffers_drop_secondary(self):
        self.buffers.emit_both("SM0")
        assert self.buffers.result() == EncodingResult("SM0", "")

    def test_full_and_truncated(self):
        buffers = PhoneticBuffers(max_length=3)
        buffers.emit_both("AP")
        assert not buffers.is_full
        buffers.emit_both("KS")
        assert buffers.is_full
        assert buffers.result().primary == "APK"

    def test_one_side_full_is_full(self):
        buffers = PhoneticBuffers(max_length=2)
        buffers.emit(NO_EMISSION, "TS")
        assert buffers.is_full

    def test_reset_keeps_lists(self):
        primary = self.buffers.primary
        self.buffers.emit_both("K")
        self.buffers.reset(4)
        assert self.buffers.primary is primary
        assert self.buffers.primary == []
        assert self.buffers.max_length == 4

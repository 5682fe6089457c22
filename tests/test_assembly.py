"""
DC.B Listing Encoder Unit Tests
===============================

Tests for rendering byte buffers as assembler DC.B lines.
"""

import pytest
from array import array

from binencode.assembly import AssemblyEncoder, encode_assembly, format_byte
from binencode.errors import AllocationFailure


class TestFormatByte:
    """Tests for single byte literals."""

    def test_zero_padded_uppercase(self):
        assert format_byte(0x0A) == "$0A"
        assert format_byte(0xFF) == "$FF"
        assert format_byte(0) == "$00"


class TestAssemblyEncoder:
    """Tests for whole-buffer listing encoding."""

    def test_empty_input(self):
        assert encode_assembly(b"") == ""

    def test_single_byte(self):
        assert encode_assembly(b"\x7f") == "dc.b\t$7F\n"

    def test_sixteen_bytes_is_one_line(self):
        text = encode_assembly(bytes(range(16)))
        assert text.count("\n") == 1
        assert text.endswith("\n")
        body = text[len("dc.b\t"):-1]
        tokens = body.split(", ")
        assert len(tokens) == 16
        assert tokens[0] == "$00"
        assert tokens[-1] == "$0F"

    def test_partial_last_line(self):
        lines = encode_assembly(bytes(range(20))).splitlines()
        assert len(lines) == 2
        assert lines[1] == "dc.b\t$10, $11, $12, $13"

    def test_exact_multiple_has_no_trailing_line(self):
        text = encode_assembly(bytes(32))
        assert text.count("\n") == 2
        assert not text.endswith("\n\n")

    def test_known_output(self):
        assert encode_assembly(b"Hi\x00\xff") == "dc.b\t$48, $69, $00, $FF\n"

    def test_no_trailing_separator(self):
        for line in encode_assembly(bytes(40)).splitlines():
            assert not line.endswith(",")
            assert not line.endswith(" ")

    def test_custom_directive(self):
        encoder = AssemblyEncoder(directive="DC.B")
        assert encoder.encode(b"\x01") == "DC.B\t$01\n"

    @pytest.mark.parametrize("directive", ["", " dc.b", "dc.b\t"])
    def test_invalid_directive(self, directive):
        with pytest.raises(ValueError):
            AssemblyEncoder(directive=directive)

    def test_iter_lines_matches_encode(self):
        encoder = AssemblyEncoder()
        data = bytes(range(50))
        assert "".join(encoder.iter_lines(data)) == encoder.encode(data)

    def test_deterministic(self):
        data = bytes(range(256))
        assert encode_assembly(data) == encode_assembly(bytearray(data))
        assert encode_assembly(memoryview(data)) == encode_assembly(data)

    def test_wide_item_memoryview(self):
        """Each line holds 16 bytes even when the view's items are wider."""
        words = array("H", range(16))
        text = encode_assembly(memoryview(words))
        assert text == encode_assembly(words.tobytes())
        lines = text.splitlines()
        assert len(lines) == 2
        assert all(len(line.split(", ")) == 16 for line in lines)

    def test_allocation_failure(self, monkeypatch):
        def fail(self, data):
            raise MemoryError("out of memory")
            yield

        data = bytes(40)
        monkeypatch.setattr(AssemblyEncoder, "iter_lines", fail)
        with pytest.raises(AllocationFailure) as exc_info:
            encode_assembly(data)
        assert exc_info.value.size == len(data)
        assert isinstance(exc_info.value.__cause__, MemoryError)

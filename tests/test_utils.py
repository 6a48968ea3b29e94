"""Unit tests for fileinfo/utils.py: utility functions."""
import hashlib
import zlib

import pytest

pytest.importorskip("pefile", reason="pefile not installed")

from fileinfo.utils import (
    compute_hashes,
    decode_name,
    format_timestamp,
    get_machine_name,
    shannon_entropy,
)


# ---------------------------------------------------------------------------
# shannon_entropy
# ---------------------------------------------------------------------------

class TestShannonEntropy:
    def test_empty_data(self):
        assert shannon_entropy(b"") == 0.0

    def test_single_byte(self):
        # All identical bytes -> zero entropy
        assert shannon_entropy(b"\x00" * 100) == 0.0

    def test_two_equal_values(self):
        data = b"\x00" * 50 + b"\x01" * 50
        assert abs(shannon_entropy(data) - 1.0) < 1e-6

    def test_all_256_bytes(self):
        assert abs(shannon_entropy(bytes(range(256))) - 8.0) < 1e-6


# ---------------------------------------------------------------------------
# compute_hashes
# ---------------------------------------------------------------------------

class TestComputeHashes:
    def test_known_values(self):
        data = b"fileinfo"
        hashes = compute_hashes(data)
        assert hashes["md5"] == hashlib.md5(data).hexdigest()
        assert hashes["sha256"] == hashlib.sha256(data).hexdigest()
        assert hashes["crc32"] == format(zlib.crc32(data), "08x")

    def test_crc32_is_zero_padded(self):
        assert compute_hashes(b"")["crc32"] == "00000000"


# ---------------------------------------------------------------------------
# format_timestamp
# ---------------------------------------------------------------------------

class TestFormatTimestamp:
    def test_valid_timestamp(self):
        assert format_timestamp(1600000000) == "2020-09-13 12:26:40"

    @pytest.mark.parametrize("value", [0, -1, None, "1600000000"])
    def test_absent_or_invalid(self, value):
        assert format_timestamp(value) == ""

    def test_overflow_timestamp(self):
        assert format_timestamp(2 ** 62) == ""


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------

class TestDecodeName:
    def test_strips_padding(self):
        assert decode_name(b".text\x00\x00\x00") == ".text"

    def test_invalid_bytes_are_dropped(self):
        assert decode_name(b"ab\xffcd") == "abcd"

    def test_none(self):
        assert decode_name(None) == ""

    def test_str_passthrough(self):
        assert decode_name("KERNEL32.dll") == "KERNEL32.dll"


class TestGetMachineName:
    def test_known(self):
        assert get_machine_name(0x14C) == "I386"
        assert get_machine_name(0x8664) == "AMD64"

    def test_unknown(self):
        assert get_machine_name(0xBEEF) == ""

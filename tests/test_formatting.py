"""Unit tests for fileinfo/formatting.py: value rendering helpers."""
import pytest

from fileinfo.formatting import (
    Base,
    UNDEFINED_U64,
    UNSPECIFIED,
    Flags,
    format_flags,
    format_float,
    format_number,
    format_tristate,
    normalize_number,
)


# ---------------------------------------------------------------------------
# format_number
# ---------------------------------------------------------------------------

class TestFormatNumber:
    @pytest.mark.parametrize("value,base,expected", [
        (0, Base.DEC, "0"),
        (255, Base.DEC, "255"),
        (255, Base.HEX, "0xff"),
        (8, Base.OCT, "0o10"),
        (0, Base.HEX, "0x0"),
        (-16, Base.HEX, "-0x10"),
        (-7, Base.DEC, "-7"),
        (0xFFFFFFFFFFFFFFFE, Base.HEX, "0xfffffffffffffffe"),
    ])
    def test_present_values(self, value, base, expected):
        assert format_number(value, base) == expected

    @pytest.mark.parametrize("base", list(Base))
    def test_absent_is_placeholder_in_every_base(self, base):
        assert format_number(None, base) == UNSPECIFIED

    def test_default_base_is_decimal(self):
        assert format_number(4096) == "4096"

    def test_deterministic(self):
        assert format_number(1234, Base.HEX) == format_number(1234, Base.HEX)


class TestNormalizeNumber:
    def test_none_stays_absent(self):
        assert normalize_number(None) is None

    def test_reserved_value_becomes_absent(self):
        assert normalize_number(UNDEFINED_U64) is None

    def test_zero_is_present(self):
        assert normalize_number(0) == 0

    def test_regular_value(self):
        assert normalize_number(0x1000) == 0x1000


# ---------------------------------------------------------------------------
# Other formatters
# ---------------------------------------------------------------------------

class TestFormatFloat:
    def test_precision(self):
        assert format_float(7.12345, 3) == "7.123"

    def test_default_precision(self):
        assert format_float(0.5) == "0.50"

    def test_absent(self):
        assert format_float(None) == UNSPECIFIED


class TestFormatTristate:
    def test_absent_is_empty(self):
        assert format_tristate(None) == ""

    def test_true_and_false(self):
        assert format_tristate(True) == "true"
        assert format_tristate(False) == "false"

    def test_custom_strings(self):
        assert format_tristate(True, "yes", "no") == "yes"
        assert format_tristate(False, "yes", "no") == "no"


class TestFormatFlags:
    def test_bit_string_has_exact_width(self):
        assert format_flags(0x5, 8) == "00000101"

    def test_value_is_masked_to_width(self):
        assert format_flags(0x1FF, 4) == "1111"

    def test_absent(self):
        assert format_flags(None, 16) == ""
        assert format_flags(3, None) == ""


# ---------------------------------------------------------------------------
# Flags
# ---------------------------------------------------------------------------

class TestFlags:
    def test_empty(self):
        flags = Flags()
        assert flags.get_flags_str() == ""
        assert flags.get_number_of_descriptors() == 0
        assert flags.get_descriptors() == ([], [])

    def test_descriptors_keep_insertion_order(self):
        flags = Flags(16, 0x22)
        flags.add_descriptor("IMAGE_FILE_EXECUTABLE_IMAGE", "EXECUTABLE_IMAGE")
        flags.add_descriptor("IMAGE_FILE_LARGE_ADDRESS_AWARE", "LARGE_ADDRESS_AWARE")
        descriptions, abbreviations = flags.get_descriptors()
        assert descriptions == ["IMAGE_FILE_EXECUTABLE_IMAGE", "IMAGE_FILE_LARGE_ADDRESS_AWARE"]
        assert abbreviations == ["EXECUTABLE_IMAGE", "LARGE_ADDRESS_AWARE"]
        assert flags.get_flags_str() == "0000000000100010"

    def test_clear_descriptors(self):
        flags = Flags(8, 1)
        flags.add_descriptor("a", "b")
        flags.clear_descriptors()
        assert flags.get_number_of_descriptors() == 0
        assert flags.get_flags_str() == "00000001"

    def test_equality(self):
        assert Flags(8, 1) == Flags(8, 1)
        assert Flags(8, 1) != Flags(8, 2)

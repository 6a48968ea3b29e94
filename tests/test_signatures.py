"""Unit tests for fileinfo/parsers/signatures.py: YARA matches to patterns."""
from types import SimpleNamespace

import pytest

pytest.importorskip("pefile", reason="pefile not installed")

from fileinfo.parsers.signatures import add_yara_matches, pattern_from_yara_match


def _yara4_match(rule, meta=None, tags=None, hits=()):
    """Match object shaped like yara-python 4.x."""
    instances = [SimpleNamespace(offset=offset, matched_data=data, matched_length=len(data))
                 for offset, data in hits]
    strings = [SimpleNamespace(identifier="$a", instances=instances)] if instances else []
    return SimpleNamespace(rule=rule, meta=meta or {}, tags=tags or [], strings=strings)


def _yara3_match(rule, meta=None, tags=None, hits=()):
    """Match object shaped like yara-python 3.x (strings as tuples)."""
    strings = [(offset, "$a", data) for offset, data in hits]
    return SimpleNamespace(rule=rule, meta=meta or {}, tags=tags or [], strings=strings)


# ---------------------------------------------------------------------------
# pattern_from_yara_match
# ---------------------------------------------------------------------------

class TestPatternFromYaraMatch:
    def test_name_and_description_from_meta(self):
        match = _yara4_match("CRC32_poly_Constant",
                             meta={"name": "CRC32", "description": "CRC32 polynomial"},
                             hits=[(0x120, b"\x20\x83\xb8\xed")])
        pattern = pattern_from_yara_match(match)
        assert pattern.name == "CRC32"
        assert pattern.description == "CRC32 polynomial"
        assert pattern.yara_rule_name == "CRC32_poly_Constant"
        assert pattern.get_number_of_matches() == 1
        assert pattern.matches[0].offset == 0x120
        assert pattern.matches[0].data_size == 4

    def test_rule_name_is_default_name(self):
        pattern = pattern_from_yara_match(_yara4_match("Big_Numbers1"))
        assert pattern.name == "Big_Numbers1"
        assert pattern.description == ""
        assert pattern.get_number_of_matches() == 0

    def test_yara3_tuples(self):
        match = _yara3_match("SHA256_Constants", hits=[(0x10, b"\x67\xe6\x09\x6a"), (0x90, b"\x85\xae\x67\xbb")])
        pattern = pattern_from_yara_match(match)
        assert [(m.offset, m.data_size) for m in pattern.matches] == [(0x10, 4), (0x90, 4)]

    def test_matched_length_fallback(self):
        instance = SimpleNamespace(offset=8, matched_data=b"abcdef")
        match = SimpleNamespace(rule="r", meta={}, tags=[],
                                strings=[SimpleNamespace(identifier="$a", instances=[instance])])
        assert pattern_from_yara_match(match).matches[0].data_size == 6

    @pytest.mark.parametrize("meta,tags,little,big", [
        ({"endianness": "little"}, [], True, False),
        ({"endian": "BE"}, [], False, True),
        ({}, ["big"], False, True),
        ({}, ["crypto"], False, False),
    ])
    def test_endianness(self, meta, tags, little, big):
        pattern = pattern_from_yara_match(_yara4_match("r", meta=meta, tags=tags))
        assert pattern.is_little() is little
        assert pattern.is_big() is big

    def test_value_kind_and_entry_size(self):
        match = _yara4_match("r", meta={"type": "float", "entry_size": "8"}, hits=[(0, b"x" * 8)])
        found = pattern_from_yara_match(match).matches[0]
        assert found.integral is False
        assert found.entry_size == 8

    def test_bad_entry_size_is_absent(self):
        match = _yara4_match("r", meta={"entry_size": "wide"}, hits=[(0, b"x")])
        assert pattern_from_yara_match(match).matches[0].entry_size is None

    def test_addresses_from_mapper(self):
        match = _yara4_match("r", hits=[(0x200, b"ab"), (0x900, b"cd")])
        mapping = {0x200: 0x401000}
        pattern = pattern_from_yara_match(match, mapping.get)
        assert [m.address for m in pattern.matches] == [0x401000, None]

    def test_failing_mapper_leaves_address_absent(self):
        def _broken(offset):
            raise ValueError("unmapped")

        pattern = pattern_from_yara_match(_yara4_match("r", hits=[(4, b"ab")]), _broken)
        assert pattern.matches[0].address is None
        assert pattern.matches[0].offset == 4


# ---------------------------------------------------------------------------
# add_yara_matches
# ---------------------------------------------------------------------------

class TestAddYaraMatches:
    def test_adds_to_category(self, model):
        matches = [_yara4_match("AES_sbox", hits=[(0, b"c|w{")]), _yara4_match("RC4")]
        assert add_yara_matches(model, matches, "crypto") == 2
        assert model.get_number_of_crypto_patterns() == 2
        assert model.get_number_of_other_patterns() == 0

    def test_default_category_is_other(self, model):
        add_yara_matches(model, [_yara4_match("Installer")])
        assert model.get_other_pattern(0).name == "Installer"

    def test_malware(self, model):
        add_yara_matches(model, [_yara4_match("Emotet")], "malware")
        assert model.get_malware_pattern(0).yara_rule_name == "Emotet"

    def test_no_matches(self, model):
        assert add_yara_matches(model, None, "crypto") == 0

    def test_unknown_category(self, model):
        with pytest.raises(ValueError):
            add_yara_matches(model, [_yara4_match("x")], "packer")

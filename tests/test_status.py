"""Unit tests for fileinfo/status.py and the model's status aggregation."""
import pytest

from fileinfo.status import (
    SEVERITY_DEGRADED,
    SEVERITY_FATAL,
    SEVERITY_OK,
    ReturnCode,
    resolve_status,
)


# ---------------------------------------------------------------------------
# ReturnCode
# ---------------------------------------------------------------------------

class TestReturnCode:
    def test_every_code_has_severity_and_message(self):
        for code in ReturnCode:
            assert code.severity in (SEVERITY_OK, SEVERITY_DEGRADED, SEVERITY_FATAL)
            assert isinstance(code.message, str)

    @pytest.mark.parametrize("code", [
        ReturnCode.ENTRY_POINT_DETECTION,
        ReturnCode.FORMAT_PARSER_PROBLEM,
        ReturnCode.UNKNOWN_CP,
    ])
    def test_degraded_codes(self, code):
        assert code.severity == SEVERITY_DEGRADED
        assert not code.is_fatal()

    @pytest.mark.parametrize("code", [
        ReturnCode.ARG,
        ReturnCode.FILE_NOT_EXIST,
        ReturnCode.FILE_PROBLEM,
        ReturnCode.UNKNOWN_FORMAT,
        ReturnCode.MACHO_AR_ERROR,
        ReturnCode.ARCHIVE_DETECTED,
    ])
    def test_fatal_codes(self, code):
        assert code.is_fatal()

    def test_ok(self):
        assert ReturnCode.OK.is_ok()
        assert ReturnCode.OK.severity == SEVERITY_OK


# ---------------------------------------------------------------------------
# resolve_status
# ---------------------------------------------------------------------------

class TestResolveStatus:
    def test_higher_severity_wins(self):
        assert resolve_status(ReturnCode.OK, ReturnCode.FILE_PROBLEM) is ReturnCode.FILE_PROBLEM

    def test_lower_severity_is_ignored(self):
        assert resolve_status(ReturnCode.FILE_PROBLEM, ReturnCode.OK) is ReturnCode.FILE_PROBLEM

    def test_equal_severity_last_write_wins(self):
        assert resolve_status(
            ReturnCode.ENTRY_POINT_DETECTION, ReturnCode.FORMAT_PARSER_PROBLEM,
        ) is ReturnCode.FORMAT_PARSER_PROBLEM


class TestModelStatus:
    def test_initial_status_is_ok(self, model):
        assert model.get_status() is ReturnCode.OK

    def test_status_never_downgrades(self, model):
        model.set_status(ReturnCode.FORMAT_PARSER_PROBLEM)
        model.set_status(ReturnCode.OK)
        assert model.get_status() is ReturnCode.FORMAT_PARSER_PROBLEM

        model.set_status(ReturnCode.FILE_PROBLEM)
        assert model.get_status() is ReturnCode.FILE_PROBLEM

        model.set_status(ReturnCode.FORMAT_PARSER_PROBLEM)
        assert model.get_status() is ReturnCode.FILE_PROBLEM

    def test_messages_keep_order(self, model):
        model.add_message("first")
        model.add_message("second")
        assert model.messages == ["first", "second"]

    def test_failed_deps_list(self, model):
        assert model.get_deps_list_failed_to_load() == ""
        model.set_deps_list_failed_to_load("yara.dll, capstone.dll")
        assert model.get_deps_list_failed_to_load() == "yara.dll, capstone.dll"

"""Pipeline outcome codes and the severity rule used by the result model."""
import enum

from typing import Dict

# Severity levels. Higher wins when two analyzers report different outcomes.
SEVERITY_OK = 0
SEVERITY_DEGRADED = 1
SEVERITY_FATAL = 2


class ReturnCode(enum.Enum):
    """Overall status of one introspection run."""
    OK = "ok"
    ARG = "arg"
    FILE_NOT_EXIST = "file_not_exist"
    FILE_PROBLEM = "file_problem"
    ENTRY_POINT_DETECTION = "entry_point_detection"
    UNKNOWN_FORMAT = "unknown_format"
    FORMAT_PARSER_PROBLEM = "format_parser_problem"
    MACHO_AR_ERROR = "macho_ar_error"
    ARCHIVE_DETECTED = "archive_detected"
    UNKNOWN_CP = "unknown_cp"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    @property
    def message(self) -> str:
        return _MESSAGES[self]

    def is_fatal(self) -> bool:
        return self.severity == SEVERITY_FATAL

    def is_ok(self) -> bool:
        return self is ReturnCode.OK


_SEVERITY: Dict[ReturnCode, int] = {
    ReturnCode.OK: SEVERITY_OK,
    ReturnCode.ENTRY_POINT_DETECTION: SEVERITY_DEGRADED,
    ReturnCode.FORMAT_PARSER_PROBLEM: SEVERITY_DEGRADED,
    ReturnCode.UNKNOWN_CP: SEVERITY_DEGRADED,
    ReturnCode.ARG: SEVERITY_FATAL,
    ReturnCode.FILE_NOT_EXIST: SEVERITY_FATAL,
    ReturnCode.FILE_PROBLEM: SEVERITY_FATAL,
    ReturnCode.UNKNOWN_FORMAT: SEVERITY_FATAL,
    ReturnCode.MACHO_AR_ERROR: SEVERITY_FATAL,
    ReturnCode.ARCHIVE_DETECTED: SEVERITY_FATAL,
}

_MESSAGES: Dict[ReturnCode, str] = {
    ReturnCode.OK: "",
    ReturnCode.ARG: "Invalid arguments.",
    ReturnCode.FILE_NOT_EXIST: "Input file does not exist or is not readable.",
    ReturnCode.FILE_PROBLEM: "Error while reading the input file.",
    ReturnCode.ENTRY_POINT_DETECTION: "Entry point could not be detected.",
    ReturnCode.UNKNOWN_FORMAT: "Unknown or unsupported file format.",
    ReturnCode.FORMAT_PARSER_PROBLEM: "Input file has been parsed only partially.",
    ReturnCode.MACHO_AR_ERROR: "Invalid Mach-O universal binary or archive.",
    ReturnCode.ARCHIVE_DETECTED: "Input file is an archive.",
    ReturnCode.UNKNOWN_CP: "Unknown compiler or packer.",
}


def resolve_status(current: ReturnCode, new: ReturnCode) -> ReturnCode:
    """Return the status that results from writing *new* over *current*.

    Equal severities follow last-write-wins; a lower severity never
    replaces a higher one.
    """
    if new.severity >= current.severity:
        return new
    return current


class FileFormat(enum.Enum):
    """Format classification decided by the upstream format detector."""
    UNDETECTABLE = "undetectable"
    UNKNOWN = "unknown"
    PE = "PE"
    ELF = "ELF"
    COFF = "COFF"
    MACHO = "Mach-O"
    INTEL_HEX = "Intel HEX"
    RAW_DATA = "Raw Data"

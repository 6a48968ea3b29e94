"""Printable string extraction (ASCII and UTF-16LE) over raw file bytes."""
import bisect
import re

from typing import List, Optional, Sequence, Tuple

from fileinfo.records.strings import STRING_ASCII, STRING_WIDE, StringRecord


def _ascii_pattern(min_length: int):
    return re.compile(rb'[\x20-\x7e]{%d,}' % min_length)


def _wide_pattern(min_length: int):
    return re.compile(rb'(?:[\x20-\x7e]\x00){%d,}' % min_length)


def _extract_strings_from_data(data_bytes: bytes, min_length: int = 5) -> List[Tuple[int, str]]:
    # Ensure we have a concrete bytes/bytearray (not memoryview, mmap, etc.)
    if not isinstance(data_bytes, (bytes, bytearray)):
        data_bytes = bytes(data_bytes)
    return [(m.start(), m.group().decode('ascii')) for m in _ascii_pattern(min_length).finditer(data_bytes)]


def _extract_wide_strings_from_data(data_bytes: bytes, min_length: int = 5) -> List[Tuple[int, str]]:
    if not isinstance(data_bytes, (bytes, bytearray)):
        data_bytes = bytes(data_bytes)
    return [(m.start(), m.group().decode('utf-16le')) for m in _wide_pattern(min_length).finditer(data_bytes)]


class _SectionLocator:
    """Maps a file offset to the name of the section whose raw data holds it."""

    def __init__(self, ranges: Sequence[Tuple[int, int, str]]):
        self._ranges = sorted(r for r in ranges if r[1] > 0)
        self._starts = [start for start, _, _ in self._ranges]

    def find(self, offset: int) -> str:
        pos = bisect.bisect_right(self._starts, offset) - 1
        if pos < 0:
            return ""
        start, size, name = self._ranges[pos]
        return name if offset < start + size else ""


def extract_strings(data_bytes: bytes, min_length: int = 5,
                    section_ranges: Optional[Sequence[Tuple[int, int, str]]] = None) -> List[StringRecord]:
    """All ASCII and wide strings of at least *min_length* characters, by file offset.

    *section_ranges* holds ``(raw_offset, raw_size, name)`` triples used to
    attribute each string to a section.
    """
    locator = _SectionLocator(section_ranges or [])
    found = [
        StringRecord(offset=offset, type=STRING_ASCII, content=text, section_name=locator.find(offset))
        for offset, text in _extract_strings_from_data(data_bytes, min_length)
    ]
    found.extend(
        StringRecord(offset=offset, type=STRING_WIDE, content=text, section_name=locator.find(offset))
        for offset, text in _extract_wide_strings_from_data(data_bytes, min_length)
    )
    found.sort(key=lambda record: (record.offset, record.type))
    return found

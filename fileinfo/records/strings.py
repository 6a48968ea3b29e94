"""Strings found by the string extractor."""
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from fileinfo.formatting import Base, format_number

STRING_ASCII = "ascii"
STRING_WIDE = "wide"


@dataclass
class StringRecord:
    offset: Optional[int] = None
    type: str = STRING_ASCII
    content: str = ""
    section_name: str = ""

    def get_offset_str(self, base: Base) -> str:
        return format_number(self.offset, base)

    def is_ascii(self) -> bool:
        return self.type == STRING_ASCII

    def is_wide(self) -> bool:
        return self.type == STRING_WIDE


class StringSet:

    def __init__(self):
        self._strings: List[StringRecord] = []

    def set_strings(self, strings: Iterable[StringRecord]) -> None:
        self._strings = list(strings)

    def add(self, record: StringRecord) -> None:
        self._strings.append(record)

    def get(self, position: int) -> StringRecord:
        return self._strings[position]

    def has_strings(self) -> bool:
        return bool(self._strings)

    def __len__(self):
        return len(self._strings)

    def __iter__(self) -> Iterator[StringRecord]:
        return iter(self._strings)

"""ELF note blocks (from ``SHT_NOTE`` sections or ``PT_NOTE`` segments)."""
from dataclasses import dataclass
from typing import List, Optional

from fileinfo.formatting import Base, format_number


@dataclass
class ElfNote:
    type: Optional[int] = None
    owner: str = ""
    data_offset: Optional[int] = None
    data_length: Optional[int] = None
    description: str = ""

    def get_type_str(self, base: Base) -> str:
        return format_number(self.type, base)


class ElfNotes:

    def __init__(self, section_segment_name: str = "", offset: Optional[int] = None,
                 length: Optional[int] = None):
        self.section_segment_name = section_segment_name
        self.offset = offset
        self.length = length
        self.notes: List[ElfNote] = []
        self.error: str = ""

    def add_note(self, note: ElfNote) -> None:
        self.notes.append(note)

    def set_malformed(self, error: str) -> None:
        self.error = error or "malformed notes found"

    def is_malformed(self) -> bool:
        return bool(self.error)

    def is_named_section(self) -> bool:
        return bool(self.section_segment_name)

    def get_number_of_notes(self) -> int:
        return len(self.notes)

    def get_offset_str(self, base: Base) -> str:
        return format_number(self.offset, base)

    def get_length_str(self, base: Base) -> str:
        return format_number(self.length, base)

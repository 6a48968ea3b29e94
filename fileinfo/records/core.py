"""Core-dump side tables: process auxiliary vector and mapped files."""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from fileinfo.formatting import Base, format_number


@dataclass
class FileMapEntry:
    address: Optional[int] = None
    size: Optional[int] = None
    page: Optional[int] = None
    path: str = ""

    def get_address_str(self, base: Base) -> str:
        return format_number(self.address, base)

    def get_size_str(self, base: Base) -> str:
        return format_number(self.size, base)

    def get_page_str(self, base: Base) -> str:
        return format_number(self.page, base)


class CoreInfo:

    def __init__(self):
        self.aux_vector: List[Tuple[str, int]] = []
        self.file_map: List[FileMapEntry] = []

    def add_aux_vector_entry(self, name: str, value: int) -> None:
        self.aux_vector.append((name, value))

    def add_file_map_entry(self, entry: FileMapEntry) -> None:
        self.file_map.append(entry)

    def has_aux_vector(self) -> bool:
        return bool(self.aux_vector)

    def has_file_map(self) -> bool:
        return bool(self.file_map)

    def get_number_of_aux_vector_entries(self) -> int:
        return len(self.aux_vector)

    def get_number_of_file_map_entries(self) -> int:
        return len(self.file_map)

    def get_aux_vector_entry_name(self, position: int) -> str:
        return self.aux_vector[position][0]

    def get_aux_vector_entry_value_str(self, position: int, base: Base) -> str:
        return format_number(self.aux_vector[position][1], base)

    def get_file_map_entry(self, position: int) -> FileMapEntry:
        return self.file_map[position]

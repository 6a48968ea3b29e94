"""Export table."""
from dataclasses import dataclass
from typing import List, Optional

from fileinfo.formatting import Base, format_number


@dataclass
class Export:
    name: str = ""
    address: Optional[int] = None
    ordinal: Optional[int] = None


class ExportTable:

    def __init__(self):
        self.exports: List[Export] = []
        self.exphash_crc32: str = ""
        self.exphash_md5: str = ""
        self.exphash_sha256: str = ""

    def add_export(self, record: Export) -> None:
        self.exports.append(record)

    def get_number_of_exports(self) -> int:
        return len(self.exports)

    def has_records(self) -> bool:
        return bool(self.exports)

    def get_export_name(self, position: int) -> str:
        return self.exports[position].name

    def get_export_address_str(self, position: int, base: Base) -> str:
        return format_number(self.exports[position].address, base)

    def get_export_ordinal_number_str(self, position: int, base: Base) -> str:
        return format_number(self.exports[position].ordinal, base)

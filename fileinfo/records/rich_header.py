"""Rich header of MSVC-linked PE files."""
from dataclasses import dataclass
from typing import List, Optional

from fileinfo.formatting import Base, format_number


@dataclass
class RichHeaderRecord:
    """One ``@comp.id`` entry: which tool produced how many objects."""
    product_id: Optional[int] = None
    product_build: Optional[int] = None
    number_of_uses: Optional[int] = None
    product_name: str = ""
    visual_studio_name: str = ""


class RichHeaderInfo:

    def __init__(self):
        self.signature: str = ""
        self.offset: Optional[int] = None
        self.key: Optional[int] = None
        self.records: List[RichHeaderRecord] = []
        self.raw_bytes: bytes = b""
        self.sha256: str = ""
        self.crc32: str = ""
        self.md5: str = ""

    def add_record(self, record: RichHeaderRecord) -> None:
        self.records.append(record)

    def get_number_of_stored_records(self) -> int:
        return len(self.records)

    def has_records(self) -> bool:
        return bool(self.records)

    def get_signature(self) -> str:
        return self.signature

    def get_offset_str(self, base: Base) -> str:
        return format_number(self.offset, base)

    def get_key_str(self, base: Base) -> str:
        return format_number(self.key, base)

    def get_record_product_id_str(self, position: int) -> str:
        return format_number(self.records[position].product_id)

    def get_record_product_build_str(self, position: int) -> str:
        return format_number(self.records[position].product_build)

    def get_record_number_of_uses_str(self, position: int) -> str:
        return format_number(self.records[position].number_of_uses)

    def get_record_product_name_str(self, position: int) -> str:
        return self.records[position].product_name

    def get_record_visual_studio_name_str(self, position: int) -> str:
        return self.records[position].visual_studio_name

    def get_raw_bytes_str(self) -> str:
        return self.raw_bytes.hex()

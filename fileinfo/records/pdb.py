"""Debug database reference (CodeView record)."""
from typing import Optional

from fileinfo.formatting import Base, format_number


class PdbInfo:

    def __init__(self):
        self.type: str = ""
        self.path: str = ""
        self.guid: str = ""
        self.age: Optional[int] = None
        self.time_stamp: Optional[int] = None

    def get_type(self) -> str:
        return self.type

    def get_path(self) -> str:
        return self.path

    def get_guid(self) -> str:
        return self.guid

    def get_age_str(self, base: Base) -> str:
        return format_number(self.age, base)

    def get_time_stamp_str(self, base: Base) -> str:
        return format_number(self.time_stamp, base)

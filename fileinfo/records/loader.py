"""Result of simulating the OS loader on the input image."""
from dataclasses import dataclass
from typing import List, Optional

from fileinfo.formatting import Base, format_number


@dataclass
class LoadedSegment:
    index: Optional[int] = None
    name: str = ""
    address: Optional[int] = None
    size: Optional[int] = None

    def get_index_str(self) -> str:
        return format_number(self.index)

    def get_address_str(self, base: Base) -> str:
        return format_number(self.address, base)

    def get_size_str(self, base: Base) -> str:
        return format_number(self.size, base)


@dataclass
class LoaderErrorInfo:
    """Why the loader refused (or would refuse) to map the image."""
    code: Optional[int] = None
    code_str: str = ""
    user_friendly_message: str = ""
    is_loadable: bool = True


class LoaderInfo:

    def __init__(self):
        self.base_address: Optional[int] = None
        self.segments: List[LoadedSegment] = []
        self.status_message: str = ""
        self.error_info = LoaderErrorInfo()

    def add_segment(self, segment: LoadedSegment) -> None:
        self.segments.append(segment)

    def get_number_of_loaded_segments(self) -> int:
        return len(self.segments)

    def get_base_address_str(self, base: Base) -> str:
        return format_number(self.base_address, base)

    def get_number_of_loaded_segments_str(self, base: Base) -> str:
        return format_number(len(self.segments), base)

    def get_loaded_segment(self, index: int) -> LoadedSegment:
        return self.segments[index]

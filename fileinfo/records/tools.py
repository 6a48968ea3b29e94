"""Compiler / packer detection results and PE timestamps."""
from dataclasses import dataclass
from typing import List, Optional

from fileinfo.formatting import Base, format_number

TOOL_COMPILER = "compiler"
TOOL_LINKER = "linker"
TOOL_INSTALLER = "installer"
TOOL_PACKER = "packer"
TOOL_OTHER = "other tool"

SOURCE_SIGNATURE = "signature"
SOURCE_HEURISTIC = "heuristic"


@dataclass
class DetectResult:
    type: str = TOOL_OTHER
    name: str = ""
    version_info: str = ""
    additional_info: str = ""
    source: str = SOURCE_SIGNATURE
    strength: str = ""
    # Signature nibbles that agreed / total significant nibbles.
    agree_count: int = 0
    imp_count: int = 0

    def is_compiler(self) -> bool:
        return self.type == TOOL_COMPILER

    def is_packer(self) -> bool:
        return self.type == TOOL_PACKER

    def get_similarity(self) -> Optional[float]:
        if not self.imp_count:
            return None
        return self.agree_count / self.imp_count


class ToolInformation:

    def __init__(self):
        self.detected_tools: List[DetectResult] = []
        self.ep_address: Optional[int] = None
        self.ep_offset: Optional[int] = None
        self.image_base: Optional[int] = None
        self.ep_bytes: str = ""
        self.ep_section_index: Optional[int] = None
        self.ep_section_name: str = ""

    def add_tool(self, tool: DetectResult) -> None:
        self.detected_tools.append(tool)

    def get_number_of_detected_compilers(self) -> int:
        return sum(1 for t in self.detected_tools if t.is_compiler())

    def get_number_of_detected_tools(self) -> int:
        return len(self.detected_tools)

    def is_packed(self) -> bool:
        return any(t.is_packer() for t in self.detected_tools)

    def get_image_base_str(self, base: Base) -> str:
        return format_number(self.image_base, base)

    def get_ep_address_str(self, base: Base) -> str:
        return format_number(self.ep_address, base)

    def get_ep_offset_str(self, base: Base) -> str:
        return format_number(self.ep_offset, base)

    def get_ep_bytes(self) -> str:
        return self.ep_bytes

    def get_ep_section_index(self) -> str:
        return format_number(self.ep_section_index)

    def get_ep_section_name(self) -> str:
        return self.ep_section_name


class PeTimestamps:
    """Timestamps recorded in various PE directories (seconds since epoch)."""

    def __init__(self):
        self.coff_time: Optional[int] = None
        self.config_time: Optional[int] = None
        self.export_time: Optional[int] = None
        self.resource_time: Optional[int] = None
        self.debug_times: List[int] = []

    def add_debug_time(self, value: Optional[int]) -> None:
        self.debug_times.append(value)

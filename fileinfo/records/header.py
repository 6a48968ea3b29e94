"""File header information shared by all executable formats."""
from typing import List, Optional, Tuple

from fileinfo.formatting import Base, Flags, format_float, format_number


class HeaderInfo:
    """Values read from the file header(s) of the input.

    String fields are empty and numeric fields are ``None`` until the header
    analyzer sets them.
    """

    def __init__(self):
        self.time_stamp: str = ""
        self.file_status: str = ""
        self.file_version: str = ""
        self.file_header_version: str = ""
        self.os_abi: str = ""
        self.os_abi_version: str = ""
        self.file_flags = Flags()
        self.dll_flags = Flags()
        self.bits_in_byte: Optional[int] = None
        self.bits_in_word: Optional[int] = None
        self.file_header_size: Optional[int] = None
        self.segment_table_offset: Optional[int] = None
        self.segment_table_entry_size: Optional[int] = None
        self.segment_table_size: Optional[int] = None
        self.declared_segments: Optional[int] = None
        self.section_table_offset: Optional[int] = None
        self.section_table_entry_size: Optional[int] = None
        self.section_table_size: Optional[int] = None
        self.declared_sections: Optional[int] = None
        self.coff_file_header_size: Optional[int] = None
        self.optional_header_size: Optional[int] = None
        self.checksum: Optional[int] = None
        self.stack_reserve_size: Optional[int] = None
        self.stack_commit_size: Optional[int] = None
        self.heap_reserve_size: Optional[int] = None
        self.heap_commit_size: Optional[int] = None
        self.declared_data_directories: Optional[int] = None
        self.declared_symbol_tables: Optional[int] = None
        self.overlay_offset: Optional[int] = None
        self.overlay_size: Optional[int] = None
        self.overlay_entropy: Optional[float] = None

    # ------------------------------------------------------------------
    #  Flags
    # ------------------------------------------------------------------

    def get_file_flags_str(self) -> str:
        return self.file_flags.get_flags_str()

    def get_number_of_file_flags_descriptors(self) -> int:
        return self.file_flags.get_number_of_descriptors()

    def get_file_flags_descriptors(self) -> Tuple[List[str], List[str]]:
        return self.file_flags.get_descriptors()

    def get_dll_flags_str(self) -> str:
        return self.dll_flags.get_flags_str()

    def get_number_of_dll_flags_descriptors(self) -> int:
        return self.dll_flags.get_number_of_descriptors()

    def get_dll_flags_descriptors(self) -> Tuple[List[str], List[str]]:
        return self.dll_flags.get_descriptors()

    # ------------------------------------------------------------------
    #  Counts (always decimal)
    # ------------------------------------------------------------------

    def get_number_of_bits_in_byte_str(self) -> str:
        return format_number(self.bits_in_byte)

    def get_number_of_bits_in_word_str(self) -> str:
        return format_number(self.bits_in_word)

    def get_number_of_declared_segments_str(self) -> str:
        return format_number(self.declared_segments)

    def get_number_of_declared_sections_str(self) -> str:
        return format_number(self.declared_sections)

    def get_number_of_declared_data_directories_str(self) -> str:
        return format_number(self.declared_data_directories)

    def get_number_of_declared_symbol_tables_str(self) -> str:
        return format_number(self.declared_symbol_tables)

    def get_checksum_str(self) -> str:
        # Checksums are conventionally shown in hex.
        return format_number(self.checksum, Base.HEX)

    # ------------------------------------------------------------------
    #  Sizes and offsets
    # ------------------------------------------------------------------

    def get_file_header_size_str(self, base: Base) -> str:
        return format_number(self.file_header_size, base)

    def get_segment_table_offset_str(self, base: Base) -> str:
        return format_number(self.segment_table_offset, base)

    def get_segment_table_entry_size_str(self, base: Base) -> str:
        return format_number(self.segment_table_entry_size, base)

    def get_segment_table_size_str(self, base: Base) -> str:
        return format_number(self.segment_table_size, base)

    def get_section_table_offset_str(self, base: Base) -> str:
        return format_number(self.section_table_offset, base)

    def get_section_table_entry_size_str(self, base: Base) -> str:
        return format_number(self.section_table_entry_size, base)

    def get_section_table_size_str(self, base: Base) -> str:
        return format_number(self.section_table_size, base)

    def get_coff_file_header_size_str(self, base: Base) -> str:
        return format_number(self.coff_file_header_size, base)

    def get_optional_header_size_str(self, base: Base) -> str:
        return format_number(self.optional_header_size, base)

    def get_stack_reserve_size_str(self, base: Base) -> str:
        return format_number(self.stack_reserve_size, base)

    def get_stack_commit_size_str(self, base: Base) -> str:
        return format_number(self.stack_commit_size, base)

    def get_heap_reserve_size_str(self, base: Base) -> str:
        return format_number(self.heap_reserve_size, base)

    def get_heap_commit_size_str(self, base: Base) -> str:
        return format_number(self.heap_commit_size, base)

    def get_overlay_offset_str(self, base: Base) -> str:
        return format_number(self.overlay_offset, base)

    def get_overlay_size_str(self, base: Base) -> str:
        return format_number(self.overlay_size, base)

    def get_overlay_entropy_str(self, precision: int = 2) -> str:
        return format_float(self.overlay_entropy, precision)

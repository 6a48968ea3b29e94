"""Layout records: data directories, segments, sections, symbol tables,
relocation tables and dynamic sections.

Numeric fields are ``None`` when the analyzer could not determine them.
Nested tables keep their rows in insertion order; indices handed to the
``get_*`` helpers are trusted (see ``fileinfo.model`` for the contract).
"""
from dataclasses import dataclass, field
from typing import List, Optional

from fileinfo.formatting import Base, Flags, format_float, format_number


@dataclass
class DataDirectory:
    """One entry of the PE data directory table."""
    type: str = ""
    address: Optional[int] = None
    size: Optional[int] = None

    def get_address_str(self, base: Base) -> str:
        return format_number(self.address, base)

    def get_size_str(self, base: Base) -> str:
        return format_number(self.size, base)


@dataclass
class _Hashed:
    crc32: str = ""
    md5: str = ""
    sha256: str = ""


@dataclass
class FileSegment(_Hashed):
    """Program header / load command describing one segment."""
    index: Optional[int] = None
    type: str = ""
    offset: Optional[int] = None
    virtual_address: Optional[int] = None
    physical_address: Optional[int] = None
    size_in_file: Optional[int] = None
    size_in_memory: Optional[int] = None
    alignment: Optional[int] = None
    flags: Flags = field(default_factory=Flags)

    def get_index_str(self) -> str:
        return format_number(self.index)

    def get_offset_str(self, base: Base) -> str:
        return format_number(self.offset, base)

    def get_virtual_address_str(self, base: Base) -> str:
        return format_number(self.virtual_address, base)

    def get_physical_address_str(self, base: Base) -> str:
        return format_number(self.physical_address, base)

    def get_size_in_file_str(self, base: Base) -> str:
        return format_number(self.size_in_file, base)

    def get_size_in_memory_str(self, base: Base) -> str:
        return format_number(self.size_in_memory, base)

    def get_alignment_str(self, base: Base) -> str:
        return format_number(self.alignment, base)


@dataclass
class FileSection(_Hashed):
    """Section header as reported by the format parser."""
    name: str = ""
    type: str = ""
    index: Optional[int] = None
    offset: Optional[int] = None
    size_in_file: Optional[int] = None
    entry_size: Optional[int] = None
    address: Optional[int] = None
    size_in_memory: Optional[int] = None
    relocations_offset: Optional[int] = None
    number_of_relocations: Optional[int] = None
    line_numbers_offset: Optional[int] = None
    number_of_line_numbers: Optional[int] = None
    memory_alignment: Optional[int] = None
    link_to_other_section: Optional[int] = None
    extra_info: Optional[int] = None
    line_offset: Optional[int] = None
    relocations_line_offset: Optional[int] = None
    entropy: Optional[float] = None
    flags: Flags = field(default_factory=Flags)

    def get_index_str(self) -> str:
        return format_number(self.index)

    def get_offset_str(self, base: Base) -> str:
        return format_number(self.offset, base)

    def get_size_in_file_str(self, base: Base) -> str:
        return format_number(self.size_in_file, base)

    def get_entry_size_str(self, base: Base) -> str:
        return format_number(self.entry_size, base)

    def get_address_str(self, base: Base) -> str:
        return format_number(self.address, base)

    def get_size_in_memory_str(self, base: Base) -> str:
        return format_number(self.size_in_memory, base)

    def get_relocations_offset_str(self, base: Base) -> str:
        return format_number(self.relocations_offset, base)

    def get_number_of_relocations_str(self) -> str:
        return format_number(self.number_of_relocations)

    def get_line_numbers_offset_str(self, base: Base) -> str:
        return format_number(self.line_numbers_offset, base)

    def get_number_of_line_numbers_str(self) -> str:
        return format_number(self.number_of_line_numbers)

    def get_memory_alignment_str(self, base: Base) -> str:
        return format_number(self.memory_alignment, base)

    def get_link_to_other_section_str(self) -> str:
        return format_number(self.link_to_other_section)

    def get_extra_info_str(self) -> str:
        return format_number(self.extra_info)

    def get_line_offset_str(self, base: Base) -> str:
        return format_number(self.line_offset, base)

    def get_relocations_line_offset_str(self, base: Base) -> str:
        return format_number(self.relocations_line_offset, base)

    def get_entropy_str(self, precision: int = 2) -> str:
        return format_float(self.entropy, precision)


# ---------------------------------------------------------------------------
# Symbols
# ---------------------------------------------------------------------------

@dataclass
class Symbol:
    name: str = ""
    type: str = ""
    bind: str = ""
    other: str = ""
    link_to_section: Optional[int] = None
    index: Optional[int] = None
    address: Optional[int] = None
    value: Optional[int] = None
    size: Optional[int] = None

    def get_link_to_section_str(self) -> str:
        return format_number(self.link_to_section)

    def get_index_str(self) -> str:
        return format_number(self.index)

    def get_address_str(self, base: Base) -> str:
        return format_number(self.address, base)

    def get_value_str(self) -> str:
        return format_number(self.value)

    def get_size_str(self) -> str:
        return format_number(self.size)


@dataclass
class SpecialInformation:
    """Side column attached to every symbol of a table (e.g. Mach-O library ordinal)."""
    description: str
    abbreviation: str
    values: List[str] = field(default_factory=list)

    def add_value(self, value: str) -> None:
        self.values.append(value)


class SymbolTable:
    """Ordered symbols plus the special-information side tables."""

    def __init__(self, name: str = "", offset: Optional[int] = None,
                 declared_symbols: Optional[int] = None):
        self.name = name
        self.offset = offset
        self.declared_symbols = declared_symbols
        self.symbols: List[Symbol] = []
        self.special_information: List[SpecialInformation] = []

    def add_symbol(self, symbol: Symbol) -> None:
        self.symbols.append(symbol)

    def add_special_information(self, info: SpecialInformation) -> None:
        self.special_information.append(info)

    def get_number_of_stored_symbols(self) -> int:
        return len(self.symbols)

    def get_number_of_declared_symbols_str(self) -> str:
        return format_number(self.declared_symbols)

    def get_offset_str(self, base: Base) -> str:
        return format_number(self.offset, base)

    def get_number_of_stored_special_information(self) -> int:
        return len(self.special_information)

    def __len__(self):
        return len(self.symbols)

    def __repr__(self):
        return f"<SymbolTable name={self.name!r} symbols={len(self.symbols)}>"


# ---------------------------------------------------------------------------
# Relocations
# ---------------------------------------------------------------------------

@dataclass
class Relocation:
    symbol_name: str = ""
    offset: Optional[int] = None
    symbol_value: Optional[int] = None
    type: Optional[int] = None
    addend: Optional[int] = None
    calculated_value: Optional[int] = None

    def get_offset_str(self, base: Base) -> str:
        return format_number(self.offset, base)

    def get_symbol_value_str(self) -> str:
        return format_number(self.symbol_value)

    def get_type_str(self) -> str:
        return format_number(self.type)

    def get_addend_str(self) -> str:
        return format_number(self.addend)

    def get_calculated_value_str(self) -> str:
        return format_number(self.calculated_value)


class RelocationTable:

    def __init__(self, name: str = "", associated_symbol_table_name: str = "",
                 applies_section_name: str = "",
                 associated_symbol_table_index: Optional[int] = None,
                 applies_section_index: Optional[int] = None,
                 declared_relocations: Optional[int] = None):
        self.name = name
        self.associated_symbol_table_name = associated_symbol_table_name
        self.applies_section_name = applies_section_name
        self.associated_symbol_table_index = associated_symbol_table_index
        self.applies_section_index = applies_section_index
        self.declared_relocations = declared_relocations
        self.relocations: List[Relocation] = []

    def add_relocation(self, relocation: Relocation) -> None:
        self.relocations.append(relocation)

    def get_number_of_stored_relocations(self) -> int:
        return len(self.relocations)

    def get_number_of_declared_relocations_str(self) -> str:
        return format_number(self.declared_relocations)

    def __len__(self):
        return len(self.relocations)

    def __repr__(self):
        return f"<RelocationTable name={self.name!r} relocations={len(self.relocations)}>"


# ---------------------------------------------------------------------------
# Dynamic sections
# ---------------------------------------------------------------------------

@dataclass
class DynamicEntry:
    type: str = ""
    description: str = ""
    value: Optional[int] = None
    flags: Flags = field(default_factory=Flags)

    def get_value_str(self, base: Base) -> str:
        return format_number(self.value, base)


class DynamicSection:

    def __init__(self, name: str = "", declared_entries: Optional[int] = None):
        self.name = name
        self.declared_entries = declared_entries
        self.entries: List[DynamicEntry] = []

    def add_entry(self, entry: DynamicEntry) -> None:
        self.entries.append(entry)

    def get_number_of_stored_entries(self) -> int:
        return len(self.entries)

    def get_number_of_declared_entries_str(self) -> str:
        return format_number(self.declared_entries)

    def __len__(self):
        return len(self.entries)

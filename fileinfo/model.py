"""Unified per-file result model.

``ResultModel`` composes every sub-record produced by the analyzers and is
handed to the report renderers once the pipeline finishes.

Contracts:

* Absent numbers are ``None``; ``*_str`` accessors render them as
  ``fileinfo.formatting.UNSPECIFIED`` for every base. Absent strings are ``""``.
* Collections are append-only during population. Index *i* is the *i*-th
  added element. Only the pattern sets are reordered afterwards, by
  ``sort_*_pattern_matches`` and ``remove_redundant_crypto_rules``.
* Indexed accessors do not validate their indices. Callers derive indices
  from the matching ``get_number_of_*`` accessor. A debug-only ``assert``
  rejects out-of-range indices; with ``python -O`` the native
  ``IndexError`` (or Python's negative indexing) is all that remains.
* Population is single-threaded. After the pipeline ends the model is not
  mutated and may be read from several threads.
"""
import logging

from typing import Iterable, List, Optional, Sequence, Tuple

from fileinfo.formatting import Base, format_number, format_tristate
from fileinfo.records.anomalies import AnomalyList
from fileinfo.records.certificates import CertificateTable
from fileinfo.records.core import CoreInfo, FileMapEntry
from fileinfo.records.dotnet import DotnetInfo
from fileinfo.records.exports import ExportTable
from fileinfo.records.header import HeaderInfo
from fileinfo.records.imports import ImportTable
from fileinfo.records.loader import LoadedSegment, LoaderErrorInfo, LoaderInfo
from fileinfo.records.notes import ElfNotes
from fileinfo.records.patterns import Pattern, PatternSet
from fileinfo.records.pdb import PdbInfo
from fileinfo.records.resources import ResourceTable
from fileinfo.records.rich_header import RichHeaderInfo
from fileinfo.records.strings import StringRecord, StringSet
from fileinfo.records.structures import (
    DataDirectory, DynamicSection, FileSection, FileSegment,
    RelocationTable, SymbolTable,
)
from fileinfo.records.tls import TlsInfo
from fileinfo.records.tools import DetectResult, PeTimestamps, ToolInformation
from fileinfo.records.visual_basic import VisualBasicInfo
from fileinfo.status import FileFormat, ReturnCode, resolve_status

logger = logging.getLogger("fileinfo")


def _check_index(index: int, items: Sequence) -> None:
    assert 0 <= index < len(items), f"index {index} outside [0, {len(items)})"


class ResultModel:
    """Aggregate snapshot of everything known about one input file."""

    def __init__(self):
        self._status = ReturnCode.OK
        self.file_path: str = ""
        self.telfhash: str = ""
        self.crc32: str = ""
        self.md5: str = ""
        self.sha256: str = ""
        self.section_table_crc32: str = ""
        self.section_table_md5: str = ""
        self.section_table_sha256: str = ""
        self.file_format_enum = FileFormat.UNKNOWN
        self.file_format: str = ""
        self.file_class: str = ""
        self.file_type: str = ""
        self.target_architecture: str = ""
        self.endianness: str = ""
        self.manifest: str = ""
        self.compact_manifest: str = ""

        # Sub-records, each filled by exactly one analyzer
        self.header = HeaderInfo()
        self.rich_header = RichHeaderInfo()
        self.visual_basic_info = VisualBasicInfo()
        self.pdb_info = PdbInfo()
        self.import_table = ImportTable()
        self.export_table = ExportTable()
        self.resource_table = ResourceTable()
        self.tls_info = TlsInfo()
        self.core_info = CoreInfo()
        self.loader_info = LoaderInfo()
        self.dotnet_info = DotnetInfo()
        self.tool_info = ToolInformation()
        self.pe_timestamps = PeTimestamps()

        # Ordered collections
        self.directories: List[DataDirectory] = []
        self.segments: List[FileSegment] = []
        self.sections: List[FileSection] = []
        self.symbol_tables: List[SymbolTable] = []
        self.relocation_tables: List[RelocationTable] = []
        self.dynamic_sections: List[DynamicSection] = []
        self.elf_notes: List[ElfNotes] = []
        self.crypto_patterns = PatternSet("crypto")
        self.malware_patterns = PatternSet("malware")
        self.other_patterns = PatternSet("other")
        self.strings = StringSet()
        self.anomalies = AnomalyList()

        self.signature_verified: Optional[bool] = None
        self.failed_deps_list: str = ""
        self.messages: List[str] = []

        # Shared with the signature parser, never copied.
        self.certificate_table: Optional[CertificateTable] = None

    def __repr__(self):
        return f"<ResultModel {self.file_path!r} format={self.file_format_enum.value} status={self._status.name}>"

    # ------------------------------------------------------------------
    #  Status and diagnostics
    # ------------------------------------------------------------------

    def get_status(self) -> ReturnCode:
        return self._status

    def set_status(self, status: ReturnCode) -> None:
        """Record an outcome; a lower severity never replaces a higher one."""
        resolved = resolve_status(self._status, status)
        if resolved is not status:
            logger.debug(f"Ignoring status {status.name}: {self._status.name} is more severe.")
        self._status = resolved

    def add_message(self, message: str) -> None:
        self.messages.append(message)

    def get_deps_list_failed_to_load(self) -> str:
        return self.failed_deps_list

    def set_deps_list_failed_to_load(self, name: str) -> None:
        self.failed_deps_list = name

    # ------------------------------------------------------------------
    #  Identity setters
    # ------------------------------------------------------------------

    def set_path_to_file(self, path: str) -> None:
        self.file_path = path

    def set_telfhash(self, value: str) -> None:
        self.telfhash = value

    def set_crc32(self, value: str) -> None:
        self.crc32 = value

    def set_md5(self, value: str) -> None:
        self.md5 = value

    def set_sha256(self, value: str) -> None:
        self.sha256 = value

    def set_section_table_crc32(self, value: str) -> None:
        self.section_table_crc32 = value

    def set_section_table_md5(self, value: str) -> None:
        self.section_table_md5 = value

    def set_section_table_sha256(self, value: str) -> None:
        self.section_table_sha256 = value

    def set_file_format_enum(self, value: FileFormat) -> None:
        self.file_format_enum = value

    def set_file_format(self, value: str) -> None:
        self.file_format = value

    def set_file_class(self, value: str) -> None:
        self.file_class = value

    def set_file_type(self, value: str) -> None:
        self.file_type = value

    def set_target_architecture(self, value: str) -> None:
        self.target_architecture = value

    def set_endianness(self, value: str) -> None:
        self.endianness = value

    def set_manifest(self, value: str) -> None:
        self.manifest = value

    def set_compact_manifest(self, value: str) -> None:
        self.compact_manifest = value

    # ------------------------------------------------------------------
    #  Sub-record setters
    # ------------------------------------------------------------------

    def set_header(self, header: HeaderInfo) -> None:
        self.header = header

    def set_rich_header(self, rich_header: RichHeaderInfo) -> None:
        self.rich_header = rich_header

    def set_visual_basic_info(self, info: VisualBasicInfo) -> None:
        self.visual_basic_info = info

    def set_pdb_info(self, info: PdbInfo) -> None:
        self.pdb_info = info

    def set_import_table(self, table: ImportTable) -> None:
        self.import_table = table

    def set_export_table(self, table: ExportTable) -> None:
        self.export_table = table

    def set_resource_table(self, table: ResourceTable) -> None:
        self.resource_table = table

    def set_tls_info(self, info: TlsInfo) -> None:
        self.tls_info = info

    def set_dotnet_info(self, info: DotnetInfo) -> None:
        self.dotnet_info = info

    def set_pe_timestamps(self, timestamps: PeTimestamps) -> None:
        self.pe_timestamps = timestamps

    def set_strings(self, strings: Iterable[StringRecord]) -> None:
        self.strings.set_strings(strings)

    def set_anomalies(self, anomalies: Iterable[Tuple[str, str]]) -> None:
        self.anomalies.set_anomalies(anomalies)

    def set_signature_verified(self, verified: bool) -> None:
        self.signature_verified = bool(verified)

    def set_certificate_table(self, table: Optional[CertificateTable]) -> None:
        """Share *table* with the signature parser.

        The model holds a reference, not a copy: later changes made by the
        parser are visible here, and the table stays alive as long as
        either side references it.
        """
        self.certificate_table = table

    def set_loaded_base_address(self, address: Optional[int]) -> None:
        self.loader_info.base_address = address

    def set_loader_error_info(self, error_info: LoaderErrorInfo) -> None:
        self.loader_info.error_info = error_info

    def set_loader_status_message(self, message: str) -> None:
        self.loader_info.status_message = message

    # ------------------------------------------------------------------
    #  Adders
    # ------------------------------------------------------------------

    def add_file_flags_descriptor(self, description: str, abbreviation: str) -> None:
        self.header.file_flags.add_descriptor(description, abbreviation)

    def clear_file_flags_descriptors(self) -> None:
        self.header.file_flags.clear_descriptors()

    def add_dll_flags_descriptor(self, description: str, abbreviation: str) -> None:
        self.header.dll_flags.add_descriptor(description, abbreviation)

    def clear_dll_flags_descriptors(self) -> None:
        self.header.dll_flags.clear_descriptors()

    def add_data_directory(self, directory: DataDirectory) -> None:
        self.directories.append(directory)

    def add_segment(self, segment: FileSegment) -> None:
        self.segments.append(segment)

    def add_section(self, section: FileSection) -> None:
        self.sections.append(section)

    def add_symbol_table(self, table: SymbolTable) -> None:
        self.symbol_tables.append(table)

    def add_relocation_table(self, table: RelocationTable) -> None:
        self.relocation_tables.append(table)

    def add_dynamic_section(self, section: DynamicSection) -> None:
        self.dynamic_sections.append(section)

    def add_elf_notes(self, notes: ElfNotes) -> None:
        self.elf_notes.append(notes)

    def add_file_map_entry(self, entry: FileMapEntry) -> None:
        self.core_info.add_file_map_entry(entry)

    def add_aux_vector_entry(self, name: str, value: int) -> None:
        self.core_info.add_aux_vector_entry(name, value)

    def add_crypto_pattern(self, pattern: Pattern) -> None:
        self.crypto_patterns.add(pattern)

    def add_malware_pattern(self, pattern: Pattern) -> None:
        self.malware_patterns.add(pattern)

    def add_other_pattern(self, pattern: Pattern) -> None:
        self.other_patterns.add(pattern)

    def add_tool(self, tool: DetectResult) -> None:
        self.tool_info.add_tool(tool)

    def add_loaded_segment(self, segment: LoadedSegment) -> None:
        self.loader_info.add_segment(segment)

    # ------------------------------------------------------------------
    #  Post-processing (once per run, after population)
    # ------------------------------------------------------------------

    def sort_crypto_pattern_matches(self) -> None:
        self.crypto_patterns.sort()

    def sort_malware_pattern_matches(self) -> None:
        self.malware_patterns.sort()

    def sort_other_pattern_matches(self) -> None:
        self.other_patterns.sort()

    def remove_redundant_crypto_rules(self) -> None:
        removed = self.crypto_patterns.remove_redundant()
        if removed:
            logger.debug(f"Removed {removed} redundant crypto pattern(s).")

    # ------------------------------------------------------------------
    #  Identity getters
    # ------------------------------------------------------------------

    def get_path_to_file(self) -> str:
        return self.file_path

    def get_telfhash(self) -> str:
        return self.telfhash

    def get_crc32(self) -> str:
        return self.crc32

    def get_md5(self) -> str:
        return self.md5

    def get_sha256(self) -> str:
        return self.sha256

    def get_section_table_crc32(self) -> str:
        return self.section_table_crc32

    def get_section_table_md5(self) -> str:
        return self.section_table_md5

    def get_section_table_sha256(self) -> str:
        return self.section_table_sha256

    def get_file_format_enum(self) -> FileFormat:
        return self.file_format_enum

    def get_file_format(self) -> str:
        return self.file_format

    def get_file_class(self) -> str:
        return self.file_class

    def get_file_type(self) -> str:
        return self.file_type

    def get_target_architecture(self) -> str:
        return self.target_architecture

    def get_endianness(self) -> str:
        return self.endianness

    def get_manifest(self) -> str:
        return self.manifest

    def get_compact_manifest(self) -> str:
        return self.compact_manifest

    # ------------------------------------------------------------------
    #  Counts
    # ------------------------------------------------------------------

    def get_number_of_stored_data_directories(self) -> int:
        return len(self.directories)

    def get_number_of_stored_segments(self) -> int:
        return len(self.segments)

    def get_number_of_stored_sections(self) -> int:
        return len(self.sections)

    def get_number_of_stored_symbol_tables(self) -> int:
        return len(self.symbol_tables)

    def get_number_of_stored_relocation_tables(self) -> int:
        return len(self.relocation_tables)

    def get_number_of_stored_dynamic_sections(self) -> int:
        return len(self.dynamic_sections)

    def get_number_of_loaded_segments(self) -> int:
        return self.loader_info.get_number_of_loaded_segments()

    def get_number_of_crypto_patterns(self) -> int:
        return len(self.crypto_patterns)

    def get_number_of_malware_patterns(self) -> int:
        return len(self.malware_patterns)

    def get_number_of_other_patterns(self) -> int:
        return len(self.other_patterns)

    def get_number_of_detected_strings(self) -> int:
        return len(self.strings)

    def get_number_of_anomalies(self) -> int:
        return self.anomalies.get_number_of_anomalies()

    def get_number_of_detected_compilers(self) -> int:
        return self.tool_info.get_number_of_detected_compilers()

    def get_number_of_detected_tools(self) -> int:
        return self.tool_info.get_number_of_detected_tools()

    # ------------------------------------------------------------------
    #  Data directories, segments, sections
    # ------------------------------------------------------------------

    def get_data_directory(self, position: int) -> DataDirectory:
        _check_index(position, self.directories)
        return self.directories[position]

    def get_data_directory_type(self, position: int) -> str:
        return self.get_data_directory(position).type

    def get_data_directory_address_str(self, position: int, base: Base) -> str:
        return self.get_data_directory(position).get_address_str(base)

    def get_data_directory_size_str(self, position: int, base: Base) -> str:
        return self.get_data_directory(position).get_size_str(base)

    def get_segment(self, position: int) -> FileSegment:
        _check_index(position, self.segments)
        return self.segments[position]

    def get_segment_type(self, position: int) -> str:
        return self.get_segment(position).type

    def get_segment_offset_str(self, position: int, base: Base) -> str:
        return self.get_segment(position).get_offset_str(base)

    def get_segment_size_in_file_str(self, position: int, base: Base) -> str:
        return self.get_segment(position).get_size_in_file_str(base)

    def get_segment_flags_str(self, position: int) -> str:
        return self.get_segment(position).flags.get_flags_str()

    def get_section(self, position: int) -> FileSection:
        _check_index(position, self.sections)
        return self.sections[position]

    def get_section_name(self, position: int) -> str:
        return self.get_section(position).name

    def get_section_type(self, position: int) -> str:
        return self.get_section(position).type

    def get_section_offset_str(self, position: int, base: Base) -> str:
        return self.get_section(position).get_offset_str(base)

    def get_section_address_str(self, position: int, base: Base) -> str:
        return self.get_section(position).get_address_str(base)

    def get_section_size_in_file_str(self, position: int, base: Base) -> str:
        return self.get_section(position).get_size_in_file_str(base)

    def get_section_entropy(self, position: int, precision: int = 2) -> str:
        return self.get_section(position).get_entropy_str(precision)

    def get_section_flags_str(self, position: int) -> str:
        return self.get_section(position).flags.get_flags_str()

    # ------------------------------------------------------------------
    #  Symbol tables (two-level indices)
    # ------------------------------------------------------------------

    def get_symbol_table(self, position: int) -> SymbolTable:
        _check_index(position, self.symbol_tables)
        return self.symbol_tables[position]

    def get_number_of_stored_symbols_in_table(self, position: int) -> int:
        return self.get_symbol_table(position).get_number_of_stored_symbols()

    def get_number_of_declared_symbols_in_table_str(self, position: int) -> str:
        return self.get_symbol_table(position).get_number_of_declared_symbols_str()

    def get_symbol_table_name(self, position: int) -> str:
        return self.get_symbol_table(position).name

    def get_symbol_table_offset_str(self, position: int, base: Base) -> str:
        return self.get_symbol_table(position).get_offset_str(base)

    def _symbol(self, table_index: int, symbol_index: int):
        symbols = self.get_symbol_table(table_index).symbols
        _check_index(symbol_index, symbols)
        return symbols[symbol_index]

    def get_symbol_name(self, table_index: int, symbol_index: int) -> str:
        return self._symbol(table_index, symbol_index).name

    def get_symbol_type(self, table_index: int, symbol_index: int) -> str:
        return self._symbol(table_index, symbol_index).type

    def get_symbol_bind(self, table_index: int, symbol_index: int) -> str:
        return self._symbol(table_index, symbol_index).bind

    def get_symbol_other(self, table_index: int, symbol_index: int) -> str:
        return self._symbol(table_index, symbol_index).other

    def get_symbol_link_to_section(self, table_index: int, symbol_index: int) -> str:
        return self._symbol(table_index, symbol_index).get_link_to_section_str()

    def get_symbol_index_str(self, table_index: int, symbol_index: int) -> str:
        return self._symbol(table_index, symbol_index).get_index_str()

    def get_symbol_address_str(self, table_index: int, symbol_index: int, base: Base) -> str:
        return self._symbol(table_index, symbol_index).get_address_str(base)

    def get_symbol_value_str(self, table_index: int, symbol_index: int) -> str:
        return self._symbol(table_index, symbol_index).get_value_str()

    def get_symbol_size_str(self, table_index: int, symbol_index: int) -> str:
        return self._symbol(table_index, symbol_index).get_size_str()

    def get_symbol_table_number_of_stored_special_information(self, position: int) -> int:
        return self.get_symbol_table(position).get_number_of_stored_special_information()

    def _special_information(self, table_index: int, info_index: int):
        infos = self.get_symbol_table(table_index).special_information
        _check_index(info_index, infos)
        return infos[info_index]

    def get_symbol_table_number_of_special_information_values(self, table_index: int, info_index: int) -> int:
        return len(self._special_information(table_index, info_index).values)

    def get_symbol_table_special_information_description(self, table_index: int, info_index: int) -> str:
        return self._special_information(table_index, info_index).description

    def get_symbol_table_special_information_abbreviation(self, table_index: int, info_index: int) -> str:
        return self._special_information(table_index, info_index).abbreviation

    def get_symbol_table_special_information_value(self, table_index: int, info_index: int,
                                                   record_index: int) -> str:
        values = self._special_information(table_index, info_index).values
        _check_index(record_index, values)
        return values[record_index]

    # ------------------------------------------------------------------
    #  Relocation tables (two-level indices)
    # ------------------------------------------------------------------

    def get_relocation_table(self, position: int) -> RelocationTable:
        _check_index(position, self.relocation_tables)
        return self.relocation_tables[position]

    def get_number_of_stored_relocations_in_table(self, position: int) -> int:
        return self.get_relocation_table(position).get_number_of_stored_relocations()

    def get_number_of_stored_relocations_in_table_str(self, position: int) -> str:
        return format_number(self.get_number_of_stored_relocations_in_table(position))

    def get_number_of_declared_relocations_in_table_str(self, position: int) -> str:
        return self.get_relocation_table(position).get_number_of_declared_relocations_str()

    def get_relocation_table_name(self, position: int) -> str:
        return self.get_relocation_table(position).name

    def get_relocation_table_associated_symbol_table_name(self, position: int) -> str:
        return self.get_relocation_table(position).associated_symbol_table_name

    def get_relocation_table_applies_section_name(self, position: int) -> str:
        return self.get_relocation_table(position).applies_section_name

    def get_relocation_table_associated_symbol_table_index(self, position: int) -> str:
        return format_number(self.get_relocation_table(position).associated_symbol_table_index)

    def get_relocation_table_applies_section_index(self, position: int) -> str:
        return format_number(self.get_relocation_table(position).applies_section_index)

    def _relocation(self, table_index: int, relocation_index: int):
        relocations = self.get_relocation_table(table_index).relocations
        _check_index(relocation_index, relocations)
        return relocations[relocation_index]

    def get_relocation_symbol_name(self, table_index: int, relocation_index: int) -> str:
        return self._relocation(table_index, relocation_index).symbol_name

    def get_relocation_offset_str(self, table_index: int, relocation_index: int, base: Base) -> str:
        return self._relocation(table_index, relocation_index).get_offset_str(base)

    def get_relocation_symbol_value_str(self, table_index: int, relocation_index: int) -> str:
        return self._relocation(table_index, relocation_index).get_symbol_value_str()

    def get_relocation_type_str(self, table_index: int, relocation_index: int) -> str:
        return self._relocation(table_index, relocation_index).get_type_str()

    def get_relocation_addend_str(self, table_index: int, relocation_index: int) -> str:
        return self._relocation(table_index, relocation_index).get_addend_str()

    def get_relocation_calculated_value_str(self, table_index: int, relocation_index: int) -> str:
        return self._relocation(table_index, relocation_index).get_calculated_value_str()

    # ------------------------------------------------------------------
    #  Dynamic sections (two-level indices)
    # ------------------------------------------------------------------

    def get_dynamic_section(self, position: int) -> DynamicSection:
        _check_index(position, self.dynamic_sections)
        return self.dynamic_sections[position]

    def get_number_of_stored_dynamic_entries_in_section(self, position: int) -> int:
        return self.get_dynamic_section(position).get_number_of_stored_entries()

    def get_number_of_declared_dynamic_entries_in_section_str(self, position: int) -> str:
        return self.get_dynamic_section(position).get_number_of_declared_entries_str()

    def get_dynamic_section_name(self, position: int) -> str:
        return self.get_dynamic_section(position).name

    def _dynamic_entry(self, section_index: int, entry_index: int):
        entries = self.get_dynamic_section(section_index).entries
        _check_index(entry_index, entries)
        return entries[entry_index]

    def get_dynamic_entry_type(self, section_index: int, entry_index: int) -> str:
        return self._dynamic_entry(section_index, entry_index).type

    def get_dynamic_entry_description(self, section_index: int, entry_index: int) -> str:
        return self._dynamic_entry(section_index, entry_index).description

    def get_dynamic_entry_value_str(self, section_index: int, entry_index: int, base: Base) -> str:
        return self._dynamic_entry(section_index, entry_index).get_value_str(base)

    def get_dynamic_entry_flags_str(self, section_index: int, entry_index: int) -> str:
        return self._dynamic_entry(section_index, entry_index).flags.get_flags_str()

    def get_number_of_dynamic_entry_flags_descriptors(self, section_index: int, entry_index: int) -> int:
        return self._dynamic_entry(section_index, entry_index).flags.get_number_of_descriptors()

    def get_dynamic_entry_flags_descriptors(self, section_index: int,
                                            entry_index: int) -> Tuple[List[str], List[str]]:
        return self._dynamic_entry(section_index, entry_index).flags.get_descriptors()

    # ------------------------------------------------------------------
    #  Patterns, strings, notes, loader, anomalies
    # ------------------------------------------------------------------

    def get_crypto_pattern(self, position: int) -> Pattern:
        _check_index(position, self.crypto_patterns)
        return self.crypto_patterns.get(position)

    def get_malware_pattern(self, position: int) -> Pattern:
        _check_index(position, self.malware_patterns)
        return self.malware_patterns.get(position)

    def get_other_pattern(self, position: int) -> Pattern:
        _check_index(position, self.other_patterns)
        return self.other_patterns.get(position)

    def get_crypto_patterns(self) -> List[Pattern]:
        return self.crypto_patterns.as_list()

    def get_malware_patterns(self) -> List[Pattern]:
        return self.malware_patterns.as_list()

    def get_other_patterns(self) -> List[Pattern]:
        return self.other_patterns.as_list()

    def get_strings(self) -> StringSet:
        return self.strings

    def has_strings(self) -> bool:
        return self.strings.has_strings()

    def get_elf_notes(self) -> List[ElfNotes]:
        return self.elf_notes

    def get_elf_core_info(self) -> CoreInfo:
        return self.core_info

    def get_loaded_base_address_str(self, base: Base) -> str:
        return self.loader_info.get_base_address_str(base)

    def get_number_of_loaded_segments_str(self, base: Base) -> str:
        return self.loader_info.get_number_of_loaded_segments_str(base)

    def get_loaded_segment(self, index: int) -> LoadedSegment:
        _check_index(index, self.loader_info.segments)
        return self.loader_info.get_loaded_segment(index)

    def get_loader_status_message(self) -> str:
        return self.loader_info.status_message

    def get_loader_error_info(self) -> LoaderErrorInfo:
        return self.loader_info.error_info

    def get_anomaly_identifier(self, position: int) -> str:
        _check_index(position, self.anomalies)
        return self.anomalies.get_identifier(position)

    def get_anomaly_description(self, position: int) -> str:
        _check_index(position, self.anomalies)
        return self.anomalies.get_description(position)

    # ------------------------------------------------------------------
    #  Signature
    # ------------------------------------------------------------------

    def is_signature_present(self) -> bool:
        return self.signature_verified is not None

    def is_signature_verified(self) -> bool:
        return bool(self.signature_verified)

    def is_signature_verified_str(self, true_str: str = "true", false_str: str = "false") -> str:
        return format_tristate(self.signature_verified, true_str, false_str)

    def get_certificate_table(self) -> Optional[CertificateTable]:
        return self.certificate_table

"""Unit tests for the sub-records in fileinfo/records/."""
import pytest

from fileinfo.formatting import Base, UNSPECIFIED
from fileinfo.records.certificates import Certificate, CertificateTable
from fileinfo.records.dotnet import DotnetClass, DotnetInfo
from fileinfo.records.exports import Export, ExportTable
from fileinfo.records.imports import USAGE_FUNCTION, Import, ImportTable
from fileinfo.records.loader import LoadedSegment
from fileinfo.records.notes import ElfNotes
from fileinfo.records.pdb import PdbInfo
from fileinfo.records.resources import Resource, ResourceTable, VersionInfoString
from fileinfo.records.rich_header import RichHeaderInfo, RichHeaderRecord
from fileinfo.records.strings import STRING_WIDE, StringRecord
from fileinfo.records.tls import TlsInfo
from fileinfo.records.tools import DetectResult, TOOL_COMPILER, TOOL_PACKER, ToolInformation
from fileinfo.records.visual_basic import VisualBasicExtern, VisualBasicInfo


# ---------------------------------------------------------------------------
# Imports / exports
# ---------------------------------------------------------------------------

class TestImportTable:
    def test_records_in_order(self):
        table = ImportTable()
        table.add_library("KERNEL32.dll")
        table.add_import(Import(name="ExitProcess", library_name="KERNEL32.dll",
                                usage_type=USAGE_FUNCTION, address=0x402000))
        table.add_import(Import(library_name="WS2_32.dll", ordinal=23))
        assert table.has_records()
        assert table.get_number_of_libraries() == 1
        assert table.get_import_name(0) == "ExitProcess"
        assert table.get_import_address_str(0, Base.HEX) == "0x402000"
        assert table.get_import_ordinal_number_str(0, Base.DEC) == UNSPECIFIED
        assert table.get_import_ordinal_number_str(1, Base.DEC) == "23"

    def test_missing_dependencies(self):
        table = ImportTable()
        table.add_missing_dependency("msvcr90.dll")
        assert table.get_number_of_missing_deps() == 1
        assert table.get_missing_dep_name(0) == "msvcr90.dll"

    def test_empty(self):
        assert not ImportTable().has_records()


class TestExportTable:
    def test_export(self):
        table = ExportTable()
        table.add_export(Export(name="DllMain", address=0x1000, ordinal=1))
        assert table.get_number_of_exports() == 1
        assert table.get_export_name(0) == "DllMain"
        assert table.get_export_address_str(0, Base.HEX) == "0x1000"
        assert table.get_export_ordinal_number_str(0, Base.DEC) == "1"


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------

class TestResourceTable:
    def test_resource_fields(self):
        table = ResourceTable()
        table.add_resource(Resource(name="1", type="RT_ICON", type_id=3, offset=0x600, size=0x128,
                                    crc32="0badf00d"))
        assert table.has_records()
        assert table.get_resource_type(0) == "RT_ICON"
        assert table.get_resource_type_id_str(0, Base.DEC) == "3"
        assert table.get_resource_offset_str(0, Base.HEX) == "0x600"
        assert table.get_resource_language_id_str(0, Base.DEC) == UNSPECIFIED
        assert table.get_resource_crc32(0) == "0badf00d"

    def test_version_info(self):
        table = ResourceTable()
        table.add_version_info_string(VersionInfoString("CompanyName", "ACME"))
        assert table.get_number_of_version_info_strings() == 1
        assert table.get_version_info_string_value(0) == "ACME"
        assert table.get_number_of_version_info_languages() == 0


# ---------------------------------------------------------------------------
# Header-side records
# ---------------------------------------------------------------------------

class TestRichHeader:
    def test_records(self):
        info = RichHeaderInfo()
        info.key = 0xDEADBEEF
        info.raw_bytes = b"\x01\x02"
        info.add_record(RichHeaderRecord(product_id=0x104, product_build=30729, number_of_uses=5))
        assert info.has_records()
        assert info.get_key_str(Base.HEX) == "0xdeadbeef"
        assert info.get_record_product_build_str(0) == "30729"
        assert info.get_record_product_name_str(0) == ""
        assert info.get_raw_bytes_str() == "0102"


class TestPdbInfo:
    def test_defaults(self):
        info = PdbInfo()
        assert info.get_path() == ""
        assert info.get_age_str(Base.DEC) == UNSPECIFIED


class TestTlsInfo:
    def test_callbacks(self):
        info = TlsInfo()
        assert not info.is_used()
        info.mark_used()
        info.add_callback(0x401500)
        assert info.is_used()
        assert info.get_number_of_callbacks() == 1
        assert info.get_callback_address_str(0, Base.HEX) == "0x401500"
        assert info.get_characteristics_str() == UNSPECIFIED


class TestTools:
    def test_similarity(self):
        assert DetectResult(agree_count=3, imp_count=4).get_similarity() == 0.75
        assert DetectResult().get_similarity() is None

    def test_packed_and_counts(self):
        tools = ToolInformation()
        tools.add_tool(DetectResult(type=TOOL_COMPILER, name="MSVC"))
        assert not tools.is_packed()
        tools.add_tool(DetectResult(type=TOOL_PACKER, name="UPX"))
        tools.add_tool(DetectResult(type=TOOL_COMPILER, name="MinGW"))
        assert tools.is_packed()
        assert tools.get_number_of_detected_compilers() == 2
        assert tools.get_number_of_detected_tools() == 3

    def test_entry_point_absent(self):
        tools = ToolInformation()
        assert tools.get_ep_address_str(Base.HEX) == UNSPECIFIED
        assert tools.get_ep_bytes() == ""


# ---------------------------------------------------------------------------
# Managed runtimes
# ---------------------------------------------------------------------------

class TestDotnet:
    def test_streams(self):
        info = DotnetInfo()
        assert not info.has_stream("blob")
        info.set_stream_info("blob", 0x2A0, 0x40)
        assert info.has_stream("blob")
        assert info.get_stream_offset_str("blob", Base.HEX) == "0x2a0"
        assert info.get_stream_size_str("guid", Base.DEC) == UNSPECIFIED

    def test_unknown_stream(self):
        with pytest.raises(KeyError):
            DotnetInfo().set_stream_info("bogus", 0, 0)

    def test_runtime_version(self):
        info = DotnetInfo()
        info.set_runtime_version(2, 5)
        assert info.runtime_version == "2.5"

    def test_nested_class_names(self):
        outer = DotnetClass(name="Outer", namespace="Acme.Tools")
        inner = DotnetClass(name="Inner", namespace="Acme.Tools", parent=outer, parent_index=0)
        info = DotnetInfo()
        info.imported_classes.extend([outer, inner])
        assert info.get_imported_class_nested_name(1) == "Outer.Inner"
        assert info.get_imported_class_name_with_parent_class_index(1) == "Inner[0]"
        assert inner.get_full_name() == "Acme.Tools.Outer.Inner"


class TestVisualBasic:
    def test_externs(self):
        info = VisualBasicInfo()
        info.add_extern(VisualBasicExtern(module_name="user32", api_name="MessageBoxA"))
        assert info.get_number_of_externs() == 1
        assert info.get_extern_api_name(0) == "MessageBoxA"
        assert info.get_typelib_lcid_str() == UNSPECIFIED


# ---------------------------------------------------------------------------
# Misc
# ---------------------------------------------------------------------------

class TestMisc:
    def test_elf_notes_malformed(self):
        notes = ElfNotes("PT_NOTE", offset=0x100, length=0x10)
        assert not notes.is_malformed()
        notes.set_malformed("truncated note")
        assert notes.is_malformed()
        assert notes.get_offset_str(Base.HEX) == "0x100"

    def test_string_record(self):
        record = StringRecord(offset=0x220, type=STRING_WIDE, content="WideText")
        assert record.is_wide() and not record.is_ascii()
        assert record.get_offset_str(Base.HEX) == "0x220"

    def test_loaded_segment(self):
        segment = LoadedSegment(index=2, name=".rsrc", address=0x404000)
        assert segment.get_index_str() == "2"
        assert segment.get_size_str(Base.DEC) == UNSPECIFIED

    def test_certificate_table_signer(self):
        table = CertificateTable([Certificate(subject="CN=root"), Certificate(subject="CN=leaf")],
                                 signer_index=1)
        assert table.has_signer()
        assert not table.has_counter_signer()
        assert table.get_signer().subject == "CN=leaf"
        assert len(table) == 2

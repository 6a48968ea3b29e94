"""PE adapters: copy what pefile parsed into a ResultModel.

Each ``_populate_*`` function covers one analysis and writes only into the
part of the model it owns. ``populate_from_pe`` runs them in order, each
under ``_safe_parse`` so that a corrupted structure degrades the result
instead of aborting it.
"""
import struct
import warnings

from typing import Any, Callable, Dict, List, Optional, Tuple

from fileinfo.config import (
    logger, pefile,
    CRYPTOGRAPHY_AVAILABLE, DEFAULT_MAX_TLS_CALLBACKS, DEFAULT_MIN_STRING_LENGTH,
)
from fileinfo.formatting import normalize_number
from fileinfo.model import ResultModel
from fileinfo.parsers.strings import extract_strings
from fileinfo.records.certificates import Certificate, CertificateTable
from fileinfo.records.exports import Export
from fileinfo.records.imports import Import
from fileinfo.records.resources import Resource, VersionInfoLanguage, VersionInfoString
from fileinfo.records.rich_header import RichHeaderRecord
from fileinfo.records.structures import DataDirectory, FileSection, Relocation, RelocationTable
from fileinfo.status import FileFormat, ReturnCode
from fileinfo.user_config import get_int_config_value, get_skipped_analyses
from fileinfo.utils import (
    compute_hashes, decode_name, format_timestamp, get_machine_name, shannon_entropy,
)

if CRYPTOGRAPHY_AVAILABLE:
    from cryptography.hazmat.primitives.serialization import pkcs7

SECTION_HEADER_SIZE = 40
EP_BYTES_LENGTH = 16
WIN_CERT_TYPE_PKCS_SIGNED_DATA = 0x0002
METADATA_ROOT_SIGNATURE = 0x424A5342  # "BSJB"

_DOTNET_STREAMS = {
    "#~": "metadata",
    "#-": "metadata",
    "#Strings": "string",
    "#Blob": "blob",
    "#GUID": "guid",
    "#US": "user_string",
}


# --- Safe parse helper for resilient analysis of malformed binaries ---
def _safe_parse(model: ResultModel, key: str, func: Callable, *args, **kwargs) -> Any:
    """Call *func* and return its result.  On any exception, log it, record it
    in the model's message log and mark the result as partial."""
    try:
        return func(*args, **kwargs)
    except Exception as e:
        logger.warning(f"Parser '{key}' failed: {type(e).__name__}: {e}")
        model.add_message(f"{key} parsing failed: {type(e).__name__}: {e}")
        model.set_status(ReturnCode.FORMAT_PARSER_PROBLEM)
        return None


def _is_pe32_plus(pe: pefile.PE) -> bool:
    return pe.OPTIONAL_HEADER.Magic == pefile.OPTIONAL_HEADER_MAGIC_PE_PLUS


def _section_type(characteristics: int) -> str:
    scn = pefile.SECTION_CHARACTERISTICS
    if characteristics & scn['IMAGE_SCN_CNT_CODE']:
        return "CODE"
    if characteristics & scn['IMAGE_SCN_CNT_UNINITIALIZED_DATA']:
        return "BSS"
    if characteristics & scn['IMAGE_SCN_CNT_INITIALIZED_DATA']:
        return "DATA"
    return "INFO"


def _section_table_offset(pe: pefile.PE) -> int:
    return pe.DOS_HEADER.e_lfanew + 4 + pe.FILE_HEADER.sizeof() + pe.FILE_HEADER.SizeOfOptionalHeader


# --- Flag descriptors ---
def describe_pe_flags(value: int, table: Dict) -> List[Tuple[str, str]]:
    """Build ``(description, abbreviation)`` pairs from a pefile flag table.

    pefile tables map both name->value and value->name; only the
    name->value direction is used. Output follows ascending flag value.
    """
    pairs = []
    for flag_name, flag_val in sorted(
        ((k, v) for k, v in table.items() if isinstance(k, str) and isinstance(v, int)),
        key=lambda item: (item[1], item[0]),
    ):
        if flag_val and (value & flag_val) == flag_val:
            abbreviation = flag_name
            for prefix in ("IMAGE_FILE_DLLCHARACTERISTICS_", "IMAGE_DLLCHARACTERISTICS_",
                           "IMAGE_FILE_", "IMAGE_SCN_"):
                if abbreviation.startswith(prefix):
                    abbreviation = abbreviation[len(prefix):]
                    break
            pairs.append((flag_name, abbreviation))
    return pairs


def file_flag_descriptors(value: int) -> List[Tuple[str, str]]:
    return describe_pe_flags(value, pefile.IMAGE_CHARACTERISTICS)


def dll_flag_descriptors(value: int) -> List[Tuple[str, str]]:
    return describe_pe_flags(value, pefile.DLL_CHARACTERISTICS)


def section_flag_descriptors(value: int) -> List[Tuple[str, str]]:
    return describe_pe_flags(value, pefile.SECTION_CHARACTERISTICS)


# --- Per-analysis adapters ---
def _populate_identity(model: ResultModel, pe: pefile.PE) -> None:
    hashes = compute_hashes(pe.__data__)
    model.set_crc32(hashes["crc32"])
    model.set_md5(hashes["md5"])
    model.set_sha256(hashes["sha256"])

    model.set_file_format_enum(FileFormat.PE)
    model.set_file_format("PE")
    model.set_file_class("PE32+" if _is_pe32_plus(pe) else "PE32")
    is_dll = pe.FILE_HEADER.Characteristics & pefile.IMAGE_CHARACTERISTICS['IMAGE_FILE_DLL']
    model.set_file_type("Dynamic-link library" if is_dll else "Executable file")
    model.set_target_architecture(get_machine_name(pe.FILE_HEADER.Machine))
    model.set_endianness("Little endian")


def _populate_header(model: ResultModel, pe: pefile.PE) -> None:
    fh = pe.FILE_HEADER
    oh = pe.OPTIONAL_HEADER
    header = model.header

    header.time_stamp = format_timestamp(fh.TimeDateStamp)
    header.file_version = f"{oh.MajorImageVersion}.{oh.MinorImageVersion}"
    header.file_header_version = f"{oh.MajorLinkerVersion}.{oh.MinorLinkerVersion}"
    header.os_abi = "Windows"
    header.os_abi_version = f"{oh.MajorOperatingSystemVersion}.{oh.MinorOperatingSystemVersion}"
    header.bits_in_byte = 8
    header.bits_in_word = 64 if _is_pe32_plus(pe) else 32

    header.file_header_size = normalize_number(oh.SizeOfHeaders)
    header.coff_file_header_size = fh.sizeof()
    header.optional_header_size = normalize_number(fh.SizeOfOptionalHeader)
    header.section_table_offset = _section_table_offset(pe)
    header.section_table_entry_size = SECTION_HEADER_SIZE
    header.section_table_size = SECTION_HEADER_SIZE * fh.NumberOfSections
    header.declared_sections = normalize_number(fh.NumberOfSections)
    header.declared_data_directories = normalize_number(oh.NumberOfRvaAndSizes)
    header.declared_symbol_tables = 1 if fh.PointerToSymbolTable else 0

    header.checksum = normalize_number(oh.CheckSum)
    header.stack_reserve_size = normalize_number(oh.SizeOfStackReserve)
    header.stack_commit_size = normalize_number(oh.SizeOfStackCommit)
    header.heap_reserve_size = normalize_number(oh.SizeOfHeapReserve)
    header.heap_commit_size = normalize_number(oh.SizeOfHeapCommit)

    header.file_flags.set(16, fh.Characteristics)
    model.clear_file_flags_descriptors()
    for description, abbreviation in file_flag_descriptors(fh.Characteristics):
        model.add_file_flags_descriptor(description, abbreviation)

    header.dll_flags.set(16, oh.DllCharacteristics)
    model.clear_dll_flags_descriptors()
    for description, abbreviation in dll_flag_descriptors(oh.DllCharacteristics):
        model.add_dll_flags_descriptor(description, abbreviation)

    overlay_offset = pe.get_overlay_data_start_offset()
    if overlay_offset is not None:
        overlay = pe.get_overlay() or b""
        header.overlay_offset = overlay_offset
        header.overlay_size = len(overlay)
        header.overlay_entropy = shannon_entropy(overlay)


def _populate_data_directories(model: ResultModel, pe: pefile.PE) -> None:
    for entry in pe.OPTIONAL_HEADER.DATA_DIRECTORY:
        model.add_data_directory(DataDirectory(
            type=entry.name.replace("IMAGE_DIRECTORY_ENTRY_", ""),
            address=normalize_number(entry.VirtualAddress),
            size=normalize_number(entry.Size),
        ))


def _populate_sections(model: ResultModel, pe: pefile.PE) -> None:
    alignment = pe.OPTIONAL_HEADER.SectionAlignment
    for index, section in enumerate(pe.sections):
        characteristics = section.Characteristics
        record = FileSection(
            name=decode_name(section.Name),
            type=_section_type(characteristics),
            index=index,
            offset=normalize_number(section.PointerToRawData),
            size_in_file=normalize_number(section.SizeOfRawData),
            address=normalize_number(section.VirtualAddress),
            size_in_memory=normalize_number(section.Misc_VirtualSize),
            relocations_offset=normalize_number(section.PointerToRelocations),
            number_of_relocations=normalize_number(section.NumberOfRelocations),
            line_numbers_offset=normalize_number(section.PointerToLinenumbers),
            number_of_line_numbers=normalize_number(section.NumberOfLinenumbers),
            memory_alignment=normalize_number(alignment),
            entropy=section.get_entropy(),
        )
        try:
            hashes = compute_hashes(section.get_data())
            record.crc32, record.md5, record.sha256 = hashes["crc32"], hashes["md5"], hashes["sha256"]
        except Exception as e:
            logger.warning(f"Section hash error {record.name}: {e}")
        record.flags.set(32, characteristics)
        for description, abbreviation in section_flag_descriptors(characteristics):
            record.flags.add_descriptor(description, abbreviation)
        model.add_section(record)

    table_offset = _section_table_offset(pe)
    table_bytes = pe.__data__[table_offset:table_offset + SECTION_HEADER_SIZE * len(pe.sections)]
    if table_bytes:
        hashes = compute_hashes(table_bytes)
        model.set_section_table_crc32(hashes["crc32"])
        model.set_section_table_md5(hashes["md5"])
        model.set_section_table_sha256(hashes["sha256"])


def _populate_entry_point(model: ResultModel, pe: pefile.PE) -> None:
    oh = pe.OPTIONAL_HEADER
    info = model.tool_info
    info.image_base = normalize_number(oh.ImageBase)
    ep_rva = normalize_number(oh.AddressOfEntryPoint)
    if not ep_rva:
        return

    info.ep_address = info.image_base + ep_rva if info.image_base is not None else None
    try:
        info.ep_offset = pe.get_offset_from_rva(ep_rva)
    except pefile.PEFormatError as e:
        logger.debug(f"Entry point RVA {hex(ep_rva)} is not backed by file data: {e}")
        model.add_message(f"Entry point {hex(ep_rva)} lies outside of the file.")
        model.set_status(ReturnCode.ENTRY_POINT_DETECTION)
        return

    info.ep_bytes = pe.get_data(ep_rva, EP_BYTES_LENGTH).hex()
    section = pe.get_section_by_rva(ep_rva)
    if section is not None:
        info.ep_section_index = pe.sections.index(section)
        info.ep_section_name = decode_name(section.Name)


def _import_descriptors(pe: pefile.PE) -> List:
    return list(getattr(pe, 'DIRECTORY_ENTRY_IMPORT', [])) + list(getattr(pe, 'DIRECTORY_ENTRY_DELAY_IMPORT', []))


def _populate_imports(model: ResultModel, pe: pefile.PE) -> None:
    table = model.import_table
    for entry in _import_descriptors(pe):
        library = decode_name(entry.dll)
        table.add_library(library)
        for imp in getattr(entry, 'imports', []):
            table.add_import(Import(
                name=decode_name(imp.name),
                library_name=library,
                address=normalize_number(imp.address),
                ordinal=normalize_number(imp.ordinal) if getattr(imp, 'import_by_ordinal', imp.name is None) else None,
            ))
    if table.has_records():
        table.imphash_md5 = pe.get_imphash()


def _populate_exports(model: ResultModel, pe: pefile.PE) -> None:
    export_dir = getattr(pe, 'DIRECTORY_ENTRY_EXPORT', None)
    if export_dir is None:
        return
    table = model.export_table
    image_base = normalize_number(pe.OPTIONAL_HEADER.ImageBase) or 0
    names = []
    for exp in export_dir.symbols:
        name = decode_name(exp.name)
        rva = normalize_number(exp.address)
        table.add_export(Export(
            name=name,
            address=image_base + rva if rva is not None else None,
            ordinal=normalize_number(exp.ordinal),
        ))
        if name:
            names.append(name.lower())
    if names:
        hashes = compute_hashes(",".join(names).encode('utf-8'))
        table.exphash_crc32 = hashes["crc32"]
        table.exphash_md5 = hashes["md5"]
        table.exphash_sha256 = hashes["sha256"]


def _table_name(table: dict, value: Optional[int], prefix: str) -> str:
    name = table.get(value)
    if not isinstance(name, str):
        return ""
    return name[len(prefix):] if name.startswith(prefix) else name


def _resource_name(entry) -> str:
    if getattr(entry, 'name', None) is not None:
        return str(entry.name)
    return ""


def _populate_resources(model: ResultModel, pe: pefile.PE) -> None:
    resource_dir = getattr(pe, 'DIRECTORY_ENTRY_RESOURCE', None)
    if resource_dir is None:
        return
    table = model.resource_table
    for type_entry in resource_dir.entries:
        if not hasattr(type_entry, 'directory'):
            continue
        type_id = getattr(type_entry, 'id', None)
        type_label = _resource_name(type_entry) or _table_name(pefile.RESOURCE_TYPE, type_id, "RT_")
        for id_entry in type_entry.directory.entries:
            if not hasattr(id_entry, 'directory'):
                continue
            for lang_entry in id_entry.directory.entries:
                if not (hasattr(lang_entry, 'data') and hasattr(lang_entry.data, 'struct')):
                    continue
                data_struct = lang_entry.data.struct
                rva = data_struct.OffsetToData
                resource = Resource(
                    name=_resource_name(id_entry),
                    type=type_label,
                    language=_table_name(pefile.LANG, lang_entry.data.lang, "LANG_"),
                    name_id=normalize_number(getattr(id_entry, 'id', None)),
                    type_id=normalize_number(type_id),
                    language_id=normalize_number(lang_entry.data.lang),
                    sublanguage_id=normalize_number(lang_entry.data.sublang),
                    offset=normalize_number(pe.get_offset_from_rva(rva)),
                    size=normalize_number(data_struct.Size),
                )
                hashes = compute_hashes(pe.get_data(rva, data_struct.Size))
                resource.crc32, resource.md5, resource.sha256 = hashes["crc32"], hashes["md5"], hashes["sha256"]
                table.add_resource(resource)


def _populate_version_info(model: ResultModel, pe: pefile.PE) -> None:
    table = model.resource_table
    for file_info in getattr(pe, 'FileInfo', None) or []:
        # pefile groups the blocks of each VS_VERSIONINFO in a list
        blocks = file_info if isinstance(file_info, list) else [file_info]
        for block in blocks:
            key = decode_name(getattr(block, 'Key', b''))
            if key == "StringFileInfo":
                for string_table in getattr(block, 'StringTable', []):
                    for name, value in string_table.entries.items():
                        table.add_version_info_string(VersionInfoString(decode_name(name), decode_name(value)))
            elif key == "VarFileInfo":
                for var in getattr(block, 'Var', []):
                    for var_name, var_value in var.entry.items():
                        if decode_name(var_name) != "Translation":
                            continue
                        parts = decode_name(var_value).split()
                        if len(parts) == 2:
                            table.add_version_info_language(VersionInfoLanguage(
                                lcid=parts[0],
                                code_page=str(int(parts[1], 16)),
                            ))


def _codeview_guid(cv) -> str:
    if hasattr(cv, 'Signature_Data1'):
        tail = bytes(cv.Signature_Data4)
        return (
            f"{cv.Signature_Data1:08X}-{cv.Signature_Data2:04X}-{cv.Signature_Data3:04X}"
            f"-{tail[:2].hex().upper()}-{tail[2:].hex().upper()}"
        )
    if hasattr(cv, 'Signature'):
        return f"{cv.Signature:08X}"
    return ""


def _populate_pdb(model: ResultModel, pe: pefile.PE) -> None:
    codeview = pefile.DEBUG_TYPE['IMAGE_DEBUG_TYPE_CODEVIEW']
    for entry in getattr(pe, 'DIRECTORY_ENTRY_DEBUG', []):
        if entry.struct.Type != codeview or entry.entry is None:
            continue
        cv = entry.entry
        info = model.pdb_info
        info.type = decode_name(getattr(cv, 'CvSignature', b''))
        info.path = decode_name(getattr(cv, 'PdbFileName', b''))
        info.guid = _codeview_guid(cv)
        info.age = normalize_number(getattr(cv, 'Age', None))
        info.time_stamp = normalize_number(entry.struct.TimeDateStamp)
        return


def _populate_rich_header(model: ResultModel, pe: pefile.PE) -> None:
    rich = getattr(pe, 'RICH_HEADER', None)
    if not rich:
        return
    info = model.rich_header
    values = list(rich.values) if rich.values else []
    for i in range(0, len(values) - 1, 2):
        comp_id, count = values[i], values[i + 1]
        info.add_record(RichHeaderRecord(
            product_id=comp_id >> 16,
            product_build=comp_id & 0xFFFF,
            number_of_uses=count,
        ))

    key = rich.key
    info.key = int.from_bytes(key, 'little') if isinstance(key, bytes) else key
    if rich.raw_data:
        offset = pe.__data__.find(rich.raw_data)
        info.offset = offset if offset >= 0 else None
    clear_data = bytes(rich.clear_data or b"")
    info.raw_bytes = clear_data
    info.signature = clear_data.hex().upper()
    if clear_data:
        hashes = compute_hashes(clear_data)
        info.crc32, info.md5, info.sha256 = hashes["crc32"], hashes["md5"], hashes["sha256"]


def _populate_tls(model: ResultModel, pe: pefile.PE) -> None:
    tls = getattr(pe, 'DIRECTORY_ENTRY_TLS', None)
    if not (tls and tls.struct):
        return
    tls_struct = tls.struct
    info = model.tls_info
    info.mark_used()
    info.raw_data_start_address = normalize_number(tls_struct.StartAddressOfRawData)
    info.raw_data_end_address = normalize_number(tls_struct.EndAddressOfRawData)
    info.index_address = normalize_number(tls_struct.AddressOfIndex)
    info.callbacks_address = normalize_number(tls_struct.AddressOfCallBacks)
    info.zero_fill_size = normalize_number(tls_struct.SizeOfZeroFill)
    info.characteristics = normalize_number(tls_struct.Characteristics)

    image_base = normalize_number(pe.OPTIONAL_HEADER.ImageBase) or 0
    ptr_size, ptr_format = (8, '<Q') if _is_pe32_plus(pe) else (4, '<I')
    max_callbacks = get_int_config_value("max_tls_callbacks", DEFAULT_MAX_TLS_CALLBACKS)
    cb_va = info.callbacks_address
    while cb_va and info.get_number_of_callbacks() < max_callbacks:
        try:
            raw_data = pe.get_data(cb_va - image_base, ptr_size)
        except pefile.PEFormatError as e:
            logger.debug(f"TLS callback array at VA {hex(cb_va)} is not mapped: {e}")
            break
        if len(raw_data) < ptr_size:
            break
        func_va = normalize_number(struct.unpack(ptr_format, raw_data)[0])
        if not func_va:
            break
        info.add_callback(func_va)
        cb_va += ptr_size


def _populate_dotnet_streams(pe: pefile.PE, metadata_rva: int, metadata_size: int, info) -> None:
    data = pe.get_data(metadata_rva, metadata_size)
    if len(data) < 16 or struct.unpack_from('<I', data, 0)[0] != METADATA_ROOT_SIGNATURE:
        logger.debug("CLR metadata root signature not found.")
        return
    metadata_offset = pe.get_offset_from_rva(metadata_rva)
    version_length = struct.unpack_from('<I', data, 12)[0]
    pos = 16 + version_length
    streams_count = struct.unpack_from('<H', data, pos + 2)[0]
    pos += 4
    for _ in range(streams_count):
        offset, size = struct.unpack_from('<II', data, pos)
        pos += 8
        end = data.index(b'\x00', pos)
        name = data[pos:end].decode('ascii', 'ignore')
        # name and its terminator are padded to a 4-byte boundary
        pos += (end - pos + 1 + 3) & ~3
        stream = _DOTNET_STREAMS.get(name)
        if stream and not info.has_stream(stream):
            info.set_stream_info(stream, metadata_offset + offset, size)


def _populate_dotnet(model: ResultModel, pe: pefile.PE) -> None:
    com = getattr(pe, 'DIRECTORY_ENTRY_COM_DESCRIPTOR', None)
    if com is None or not hasattr(com, 'struct'):
        return
    cor = com.struct
    info = model.dotnet_info
    info.used = True
    info.set_runtime_version(cor.MajorRuntimeVersion, cor.MinorRuntimeVersion)
    metadata_rva = normalize_number(cor.MetaData_VirtualAddress)
    if metadata_rva:
        info.metadata_header_address = (normalize_number(pe.OPTIONAL_HEADER.ImageBase) or 0) + metadata_rva
        _populate_dotnet_streams(pe, metadata_rva, cor.MetaData_Size, info)


def _populate_relocations(model: ResultModel, pe: pefile.PE) -> None:
    blocks = getattr(pe, 'DIRECTORY_ENTRY_BASERELOC', None)
    if not blocks:
        return
    reloc_dir = pe.OPTIONAL_HEADER.DATA_DIRECTORY[pefile.DIRECTORY_ENTRY['IMAGE_DIRECTORY_ENTRY_BASERELOC']]
    section = pe.get_section_by_rva(reloc_dir.VirtualAddress)
    declared = sum((block.struct.SizeOfBlock - 8) // 2 for block in blocks)
    table = RelocationTable(
        name=decode_name(section.Name) if section is not None else "",
        declared_relocations=declared,
    )
    for block in blocks:
        for entry in getattr(block, 'entries', []):
            table.add_relocation(Relocation(offset=normalize_number(entry.rva), type=normalize_number(entry.type)))
    model.add_relocation_table(table)


def _populate_timestamps(model: ResultModel, pe: pefile.PE) -> None:
    stamps = model.pe_timestamps
    stamps.coff_time = normalize_number(pe.FILE_HEADER.TimeDateStamp)
    for attr, field_name in (
        ('DIRECTORY_ENTRY_EXPORT', 'export_time'),
        ('DIRECTORY_ENTRY_RESOURCE', 'resource_time'),
        ('DIRECTORY_ENTRY_LOAD_CONFIG', 'config_time'),
    ):
        directory = getattr(pe, attr, None)
        if directory is not None and hasattr(directory.struct, 'TimeDateStamp'):
            setattr(stamps, field_name, normalize_number(directory.struct.TimeDateStamp))
    for entry in getattr(pe, 'DIRECTORY_ENTRY_DEBUG', []):
        stamps.add_debug_time(normalize_number(entry.struct.TimeDateStamp))


def _leaf_indices(certificates: List[Certificate]) -> List[int]:
    """Certificates that did not issue any other certificate of the list."""
    return [
        i for i, cert in enumerate(certificates)
        if not any(j != i and other.issuer == cert.subject for j, other in enumerate(certificates))
    ]


def _populate_certificates(model: ResultModel, pe: pefile.PE) -> None:
    sec_dir_idx = pefile.DIRECTORY_ENTRY['IMAGE_DIRECTORY_ENTRY_SECURITY']
    data_dirs = pe.OPTIONAL_HEADER.DATA_DIRECTORY
    if len(data_dirs) <= sec_dir_idx:
        return
    sig_offset = data_dirs[sec_dir_idx].VirtualAddress
    sig_size = data_dirs[sec_dir_idx].Size
    if not (sig_offset and sig_size):
        return

    # Verification is out of reach here; a present signature stays unverified.
    model.set_signature_verified(False)
    if not CRYPTOGRAPHY_AVAILABLE:
        logger.info("Certificate table skipped: cryptography library not available.")
        return

    # The security directory holds a file offset, not an RVA.
    raw_sig_block = bytes(pe.__data__[sig_offset:sig_offset + sig_size])
    if len(raw_sig_block) <= 8:
        return
    length, _revision, cert_type = struct.unpack_from('<IHH', raw_sig_block, 0)
    if cert_type != WIN_CERT_TYPE_PKCS_SIGNED_DATA:
        logger.debug(f"Unsupported WIN_CERTIFICATE type {hex(cert_type)}.")
        return
    pkcs7_blob = raw_sig_block[8:max(length, 8)]
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", UserWarning)
        warnings.simplefilter("ignore", DeprecationWarning)
        parsed = pkcs7.load_der_pkcs7_certificates(pkcs7_blob)

    certificates = [Certificate.from_x509(cert) for cert in parsed]
    leaves = _leaf_indices(certificates)
    model.set_certificate_table(CertificateTable(
        certificates,
        signer_index=leaves[0] if leaves else None,
        counter_signer_index=leaves[1] if len(leaves) > 1 else None,
    ))


def _populate_strings(model: ResultModel, pe: pefile.PE) -> None:
    min_length = get_int_config_value("min_string_length", DEFAULT_MIN_STRING_LENGTH)
    section_ranges = [
        (section.PointerToRawData, section.SizeOfRawData, decode_name(section.Name))
        for section in pe.sections
    ]
    model.set_strings(extract_strings(pe.__data__, min_length, section_ranges))


def _populate_anomalies(model: ResultModel, pe: pefile.PE) -> None:
    model.set_anomalies(("PefileWarning", warning) for warning in pe.get_warnings())


_ANALYZERS = (
    ("header", _populate_header),
    ("data_directories", _populate_data_directories),
    ("sections", _populate_sections),
    ("entry_point", _populate_entry_point),
    ("imports", _populate_imports),
    ("exports", _populate_exports),
    ("resources", _populate_resources),
    ("version_info", _populate_version_info),
    ("pdb", _populate_pdb),
    ("rich_header", _populate_rich_header),
    ("tls", _populate_tls),
    ("dotnet", _populate_dotnet),
    ("relocations", _populate_relocations),
    ("timestamps", _populate_timestamps),
    ("certificates", _populate_certificates),
    ("strings", _populate_strings),
    ("anomalies", _populate_anomalies),
)


# --- Pipeline entry points ---
def open_pe(model: ResultModel, filepath: str) -> Optional[pefile.PE]:
    """Load *filepath* with pefile. Failures are recorded on *model* and
    ``None`` is returned."""
    model.set_path_to_file(filepath)
    try:
        with open(filepath, 'rb') as f:
            data = f.read()
    except FileNotFoundError:
        logger.error(f"Input file not found: {filepath}")
        model.set_status(ReturnCode.FILE_NOT_EXIST)
        return None
    except OSError as e:
        logger.error(f"Error reading {filepath}: {e}")
        model.add_message(f"Unable to read input file: {e}")
        model.set_status(ReturnCode.FILE_PROBLEM)
        return None

    try:
        pe = pefile.PE(data=data, fast_load=False)
    except pefile.PEFormatError as e:
        logger.info(f"{filepath} is not a PE file: {e}")
        model.set_file_format_enum(FileFormat.UNKNOWN)
        model.set_status(ReturnCode.UNKNOWN_FORMAT)
        return None
    return pe


def populate_from_pe(model: ResultModel, pe: pefile.PE,
                     analyses_to_skip: Optional[List[str]] = None) -> ResultModel:
    """Run every PE analysis against *pe*, writing results into *model*.

    *analyses_to_skip* defaults to the ``skip_analyses`` config value.
    """
    if analyses_to_skip is None:
        analyses_to_skip = get_skipped_analyses()
    analyses_to_skip = [analysis.lower() for analysis in analyses_to_skip]

    _safe_parse(model, 'identity', _populate_identity, model, pe)
    for key, func in _ANALYZERS:
        if key in analyses_to_skip:
            logger.info(f"{key} analysis skipped by request.")
            continue
        _safe_parse(model, key, func, model, pe)
    return model


def finalize(model: ResultModel) -> ResultModel:
    """Post-process pattern detections once all analyzers have run."""
    model.sort_crypto_pattern_matches()
    model.sort_malware_pattern_matches()
    model.sort_other_pattern_matches()
    model.remove_redundant_crypto_rules()
    return model


def analyze_pe_file(filepath: str, analyses_to_skip: Optional[List[str]] = None) -> ResultModel:
    model = ResultModel()
    pe = open_pe(model, filepath)
    if pe is None:
        return model
    try:
        populate_from_pe(model, pe, analyses_to_skip)
    finally:
        pe.close()
    return finalize(model)


def pe_offset_to_address(pe: pefile.PE) -> Callable[[int], Optional[int]]:
    """Offset-to-VA mapper for ``add_yara_matches``; offsets outside any section map to None."""
    image_base = normalize_number(pe.OPTIONAL_HEADER.ImageBase) or 0

    def _convert(offset: int) -> Optional[int]:
        rva = pe.get_rva_from_offset(offset)
        return image_base + rva if rva is not None else None
    return _convert

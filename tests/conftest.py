"""Shared fixtures for fileinfo tests."""
import struct

import pytest

IMAGE_BASE = 0x400000
TEXT_RVA = 0x1000
TEXT_RAW_OFFSET = 0x200
FILE_ALIGNMENT = 0x200


def build_minimal_pe(text_data: bytes = b"\xc3", overlay: bytes = b"",
                     characteristics: int = 0x0102, dll_characteristics: int = 0x8140,
                     entry_point: int = TEXT_RVA, machine: int = 0x14C,
                     timestamp: int = 0x5F5E1000) -> bytes:
    """A PE32 image with a single ``.text`` section and optional overlay."""
    dos_header = bytearray(64)
    struct.pack_into("<H", dos_header, 0, 0x5A4D)       # MZ
    struct.pack_into("<I", dos_header, 0x3C, 0x40)      # e_lfanew

    file_header = struct.pack(
        "<HHIIIHH",
        machine, 1, timestamp, 0, 0, 0xE0, characteristics,
    )
    optional_header = struct.pack(
        "<HBB" + "I" * 9 + "H" * 6 + "I" * 4 + "HH" + "I" * 6,
        0x10B, 14, 0,                       # Magic, linker version
        FILE_ALIGNMENT, 0, 0,               # code / data sizes
        entry_point, TEXT_RVA, 0,           # entry point, bases of code / data
        IMAGE_BASE, 0x1000, FILE_ALIGNMENT,
        6, 0, 1, 2, 6, 0,                   # OS, image, subsystem versions
        0, 0x2000, FILE_ALIGNMENT, 0,       # Win32Version, SizeOfImage, SizeOfHeaders, CheckSum
        3, dll_characteristics,
        0x100000, 0x1000, 0x100000, 0x1000,
        0, 16,
    ) + b"\x00" * (16 * 8)
    section_header = struct.pack(
        "<8sIIIIIIHHI",
        b".text", max(len(text_data), 1), TEXT_RVA, FILE_ALIGNMENT, TEXT_RAW_OFFSET,
        0, 0, 0, 0, 0x60000020,
    )

    headers = bytes(dos_header) + b"PE\x00\x00" + file_header + optional_header + section_header
    headers += b"\x00" * (TEXT_RAW_OFFSET - len(headers))
    text = text_data[:FILE_ALIGNMENT].ljust(FILE_ALIGNMENT, b"\x00")
    return headers + text + overlay


SAMPLE_TEXT = b"\xc3Hello, fileinfo!\x00\x00" + "WideText".encode("utf-16le") + b"\x00\x00"


@pytest.fixture
def minimal_pe_bytes():
    return build_minimal_pe(SAMPLE_TEXT, overlay=b"OVERLAY-DATA\x00")


@pytest.fixture
def minimal_pe_file(tmp_path, minimal_pe_bytes):
    path = tmp_path / "sample.exe"
    path.write_bytes(minimal_pe_bytes)
    return path


@pytest.fixture
def model():
    """A fresh, empty ResultModel."""
    from fileinfo.model import ResultModel
    return ResultModel()

"""Utility functions shared by the adapters."""
import datetime
import hashlib
import math
import zlib

from typing import Dict, Optional

from fileinfo.config import pefile


def shannon_entropy(data: bytes) -> float:
    """Compute the Shannon entropy of a byte sequence.

    Returns a value between 0.0 (uniform) and 8.0 (maximum randomness).
    Returns 0.0 for empty input.
    """
    length = len(data)
    if length == 0:
        return 0.0
    byte_counts = [0] * 256
    for b in data:
        byte_counts[b] += 1
    entropy = 0.0
    for count in byte_counts:
        if count > 0:
            p = count / length
            entropy -= p * math.log2(p)
    return entropy


def compute_hashes(data: bytes) -> Dict[str, str]:
    """CRC32, MD5 and SHA-256 of *data* as lowercase hex strings."""
    return {
        "crc32": format(zlib.crc32(data) & 0xFFFFFFFF, "08x"),
        "md5": hashlib.md5(data).hexdigest(),
        "sha256": hashlib.sha256(data).hexdigest(),
    }


def format_timestamp(timestamp_val: Optional[int]) -> str:
    """UTC rendering of a POSIX timestamp; empty when absent or unrepresentable."""
    if not isinstance(timestamp_val, int) or timestamp_val <= 0:
        return ""
    try:
        dt_obj = datetime.datetime.fromtimestamp(timestamp_val, datetime.timezone.utc)
    except (ValueError, OSError, OverflowError):
        return ""
    return dt_obj.strftime('%Y-%m-%d %H:%M:%S')


def decode_name(raw, encoding: str = 'utf-8') -> str:
    if raw is None:
        return ""
    if isinstance(raw, bytes):
        return raw.decode(encoding, 'ignore').rstrip('\x00')
    return str(raw)


def get_machine_name(machine: int) -> str:
    name = pefile.MACHINE_TYPE.get(machine)
    if not isinstance(name, str):
        return ""
    return name.replace("IMAGE_FILE_MACHINE_", "")

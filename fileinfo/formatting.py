"""Value formatting shared by every accessor of the result model.

All helpers are pure and locale independent so that two renderings of the
same model state are byte-for-byte identical.
"""
import enum

from typing import List, Optional, Tuple

# Rendered in place of any absent numeric value, whatever base was requested.
UNSPECIFIED = "N/A"

# Reserved "unspecified" value used by parsers that cannot express absence.
# Only the adapter layer looks at it; model fields store None instead.
UNDEFINED_U64 = 0xFFFFFFFFFFFFFFFF


class Base(enum.Enum):
    """Numeric base requested by the caller of a ``*_str`` accessor."""
    DEC = "dec"
    HEX = "hex"
    OCT = "oct"


def normalize_number(value) -> Optional[int]:
    """Map parser output to a presence-tagged number.

    ``None`` and the reserved all-ones 64-bit value both become ``None``.
    """
    if value is None or value == UNDEFINED_U64:
        return None
    return int(value)


def format_number(value: Optional[int], base: Base = Base.DEC) -> str:
    if value is None:
        return UNSPECIFIED
    sign = "-" if value < 0 else ""
    magnitude = -value if value < 0 else value
    if base is Base.HEX:
        return f"{sign}0x{magnitude:x}"
    if base is Base.OCT:
        return f"{sign}0o{magnitude:o}"
    return f"{sign}{magnitude:d}"


def format_float(value: Optional[float], precision: int = 2) -> str:
    if value is None:
        return UNSPECIFIED
    return f"{value:.{precision}f}"


def format_tristate(value: Optional[bool], true_str: str = "true", false_str: str = "false") -> str:
    """Render an optional boolean; absence is the empty string."""
    if value is None:
        return ""
    return true_str if value else false_str


def format_flags(value: Optional[int], size: Optional[int]) -> str:
    """Bit string of exactly *size* characters, most significant bit first."""
    if value is None or not size:
        return ""
    return format(value & ((1 << size) - 1), f"0{size}b")


class Flags:
    """Flag word with its width and human readable descriptors."""

    def __init__(self, size: Optional[int] = None, value: Optional[int] = None):
        self.size = size
        self.value = value
        self._descriptors: List[Tuple[str, str]] = []

    def set(self, size: Optional[int], value: Optional[int]) -> None:
        self.size = size
        self.value = value

    def add_descriptor(self, description: str, abbreviation: str) -> None:
        self._descriptors.append((description, abbreviation))

    def clear_descriptors(self) -> None:
        self._descriptors = []

    def get_number_of_descriptors(self) -> int:
        return len(self._descriptors)

    def get_descriptors(self) -> Tuple[List[str], List[str]]:
        """Return ``(descriptions, abbreviations)`` as parallel lists."""
        return [d for d, _ in self._descriptors], [a for _, a in self._descriptors]

    def get_flags_str(self) -> str:
        return format_flags(self.value, self.size)

    def __eq__(self, other):
        if not isinstance(other, Flags):
            return NotImplemented
        return (self.size, self.value, self._descriptors) == (other.size, other.value, other._descriptors)

    __hash__ = None

    def __repr__(self):
        return f"<Flags size={self.size} value={self.value!r} descriptors={len(self._descriptors)}>"

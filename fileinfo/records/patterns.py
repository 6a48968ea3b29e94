"""Detected pattern matches (crypto constants, malware signatures, other rules).

Both post-processing steps take their policy as a parameter:

* ``pattern_sort_key`` orders patterns by name, then first match offset,
  then YARA rule name. Matches inside a pattern are ordered by
  ``match_sort_key`` (offset, address, data size). Absent values sort last.
* ``subsumes(b, a)`` decides whether pattern *b* makes pattern *a*
  redundant: *b*'s name extends *a*'s name (same signature family), every
  region matched by *a* lies inside a region matched by *b*, and *b* is
  strictly more (longer name or strictly larger coverage).
"""
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Tuple

from fileinfo.formatting import Base, format_number

ENDIAN_LITTLE = "little"
ENDIAN_BIG = "big"


@dataclass
class PatternMatch:
    offset: Optional[int] = None
    address: Optional[int] = None
    data_size: Optional[int] = None
    entry_size: Optional[int] = None
    # True for integer data, False for floating point, None when unknown.
    integral: Optional[bool] = None

    def region(self) -> Optional[Tuple[int, int]]:
        """Half-open ``[start, end)`` file region, or None when not locatable."""
        if self.offset is None:
            return None
        return self.offset, self.offset + (self.data_size or 0)

    def get_offset_str(self, base: Base) -> str:
        return format_number(self.offset, base)

    def get_address_str(self, base: Base) -> str:
        return format_number(self.address, base)

    def get_data_size_str(self) -> str:
        return format_number(self.data_size)

    def get_entry_size_str(self) -> str:
        return format_number(self.entry_size)


@dataclass
class Pattern:
    name: str = ""
    description: str = ""
    yara_rule_name: str = ""
    endianness: Optional[str] = None
    matches: List[PatternMatch] = field(default_factory=list)

    def add_match(self, match: PatternMatch) -> None:
        self.matches.append(match)

    def get_number_of_matches(self) -> int:
        return len(self.matches)

    def is_little(self) -> bool:
        return self.endianness == ENDIAN_LITTLE

    def is_big(self) -> bool:
        return self.endianness == ENDIAN_BIG

    def regions(self) -> List[Tuple[int, int]]:
        return [r for r in (m.region() for m in self.matches) if r is not None]


# ---------------------------------------------------------------------------
# Policies
# ---------------------------------------------------------------------------

def _absent_last(value):
    return (value is None, value if value is not None else 0)


def match_sort_key(match: PatternMatch):
    return (_absent_last(match.offset), _absent_last(match.address), _absent_last(match.data_size))


def pattern_sort_key(pattern: Pattern):
    first_offset = pattern.matches[0].offset if pattern.matches else None
    return (pattern.name, _absent_last(first_offset), pattern.yara_rule_name)


def _covered(inner: Tuple[int, int], regions: List[Tuple[int, int]]) -> bool:
    start, end = inner
    return any(o_start <= start and end <= o_end for o_start, o_end in regions)


def _coverage_within(a: Pattern, b: Pattern) -> bool:
    b_regions = b.regions()
    a_regions = a.regions()
    if not a_regions or not b_regions:
        return False
    return all(_covered(r, b_regions) for r in a_regions)


def subsumes(b: Pattern, a: Pattern) -> bool:
    """True when *b* strictly subsumes *a* within the same rule family."""
    if not a.name:
        return False
    if not b.name.startswith(a.name):
        return False
    if not _coverage_within(a, b):
        return False
    if b.name != a.name:
        return True
    return not _coverage_within(b, a)


def _same_detection(a: Pattern, b: Pattern) -> bool:
    a_regions = a.regions()
    if not a_regions:
        return False
    return a.name == b.name and sorted(a_regions) == sorted(b.regions())


# ---------------------------------------------------------------------------
# PatternSet
# ---------------------------------------------------------------------------

class PatternSet:
    """Ordered, append-only collection of patterns of one category."""

    def __init__(self, category: str):
        self.category = category
        self._patterns: List[Pattern] = []

    def add(self, pattern: Pattern) -> None:
        self._patterns.append(pattern)

    def get(self, position: int) -> Pattern:
        return self._patterns[position]

    def as_list(self) -> List[Pattern]:
        """Read-only view for renderers; do not mutate the returned list."""
        return self._patterns

    def __len__(self):
        return len(self._patterns)

    def __iter__(self) -> Iterator[Pattern]:
        return iter(self._patterns)

    def sort(self, key: Callable[[Pattern], object] = pattern_sort_key,
             match_key: Callable[[PatternMatch], object] = match_sort_key) -> None:
        """Deterministic order for report output; idempotent and stable."""
        for pattern in self._patterns:
            pattern.matches.sort(key=match_key)
        self._patterns.sort(key=key)

    def remove_redundant(self, predicate: Callable[[Pattern, Pattern], bool] = subsumes) -> int:
        """Drop patterns subsumed by another pattern of this set.

        Exact duplicates keep their first occurrence. Survivors keep their
        relative order. Returns the number of removed patterns.
        """
        kept = []
        for i, candidate in enumerate(self._patterns):
            redundant = False
            for j, other in enumerate(self._patterns):
                if i == j:
                    continue
                if predicate(other, candidate) or (j < i and _same_detection(other, candidate)):
                    redundant = True
                    break
            if not redundant:
                kept.append(candidate)
        removed = len(self._patterns) - len(kept)
        self._patterns = kept
        return removed

    def __repr__(self):
        return f"<PatternSet {self.category} patterns={len(self._patterns)}>"

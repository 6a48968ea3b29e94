"""Conversion of YARA rule matches into detected patterns.

Works on the match objects returned by ``yara.Rules.match``; yara itself
is not imported here, any object with the same attributes is accepted.
"""
from typing import Callable, Iterator, Optional, Tuple

from fileinfo.config import logger
from fileinfo.records.patterns import ENDIAN_BIG, ENDIAN_LITTLE, Pattern, PatternMatch

_ENDIAN_ALIASES = {
    "little": ENDIAN_LITTLE,
    "le": ENDIAN_LITTLE,
    "big": ENDIAN_BIG,
    "be": ENDIAN_BIG,
}


def _string_instances(match) -> Iterator[Tuple[int, int]]:
    """Yield ``(offset, length)`` for every string hit of *match*."""
    for string_match in match.strings or []:
        # Support both yara-python 3.x (tuples) and 4.x (objects)
        if isinstance(string_match, tuple):
            s_match_offset, _s_match_id, s_match_data_bytes = string_match
            yield s_match_offset, len(s_match_data_bytes)
        else:
            for instance in string_match.instances:
                length = getattr(instance, 'matched_length', None)
                if length is None:
                    length = len(instance.matched_data)
                yield instance.offset, length


def _endianness(meta: dict, tags) -> Optional[str]:
    value = str(meta.get("endianness", meta.get("endian", ""))).lower()
    if value in _ENDIAN_ALIASES:
        return _ENDIAN_ALIASES[value]
    for tag in tags or []:
        if str(tag).lower() in _ENDIAN_ALIASES:
            return _ENDIAN_ALIASES[str(tag).lower()]
    return None


def _integral(meta: dict) -> Optional[bool]:
    kind = str(meta.get("type", "")).lower()
    if kind in ("int", "integer", "integral"):
        return True
    if kind in ("float", "double", "floating"):
        return False
    return None


def _entry_size(meta: dict) -> Optional[int]:
    raw = meta.get("entry_size")
    if raw is None:
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        logger.debug(f"Ignoring non-numeric entry_size {raw!r} in YARA metadata.")
        return None


def pattern_from_yara_match(match, offset_to_address: Optional[Callable[[int], Optional[int]]] = None) -> Pattern:
    """Build a ``Pattern`` from one YARA rule match.

    The pattern name comes from the rule's ``name`` meta (rule name when
    missing) and the description from its ``description`` meta. Endianness
    and value kind are read from the ``endianness``/``endian`` and ``type``
    metas, endianness also from ``little``/``big`` tags.
    *offset_to_address* maps a file offset to a virtual address; without it
    match addresses stay absent.
    """
    meta = dict(match.meta) if match.meta else {}
    pattern = Pattern(
        name=str(meta.get("name", match.rule)),
        description=str(meta.get("description", "")),
        yara_rule_name=match.rule,
        endianness=_endianness(meta, match.tags),
    )
    entry_size = _entry_size(meta)
    integral = _integral(meta)
    for offset, length in _string_instances(match):
        address = None
        if offset_to_address is not None:
            try:
                address = offset_to_address(offset)
            except Exception as e:
                logger.debug(f"No address for pattern offset {hex(offset)}: {e}")
        pattern.add_match(PatternMatch(
            offset=offset,
            address=address,
            data_size=length,
            entry_size=entry_size,
            integral=integral,
        ))
    return pattern


PATTERN_CATEGORIES = ("crypto", "malware", "other")


def add_yara_matches(model, matches, category: str = "other",
                     offset_to_address: Optional[Callable[[int], Optional[int]]] = None) -> int:
    """Append one pattern per match to the *category* set of *model*.

    Returns the number of patterns added.
    """
    adders = {
        "crypto": model.add_crypto_pattern,
        "malware": model.add_malware_pattern,
        "other": model.add_other_pattern,
    }
    if category not in adders:
        raise ValueError(f"Unknown pattern category {category!r}; expected one of {PATTERN_CATEGORIES}")
    added = 0
    for match in matches or []:
        adders[category](pattern_from_yara_match(match, offset_to_address))
        added += 1
    logger.debug(f"Added {added} {category} pattern(s) from YARA matches.")
    return added

# record_fields.py
"""Lookup and numeric coercion over raw catalog records.

The archive mixes lower-case and upper-case column names depending on the
endpoint and output format (`pl_name` vs `PL_NAME`). Records are canonicalized
once at ingestion with `canonicalize_record`; `get_field` and `num_field` still
accept uncanonicalized rows and probe both spellings.
"""
from collections.abc import Mapping
from typing import Any, Dict, Optional

from physics_utils import to_finite_float

def canonicalize_record(record) -> Dict[str, Any]:
    """Returns a copy of `record` keyed by lower-case column names.

    When a column appears in several spellings the lower-case key wins, then
    the exact upper-case key, then any other spelling in the order seen;
    this matches the lookup order of `get_field`. Null values
    are dropped so that "present" always means "has a value". Anything that is
    not a mapping yields an empty record.
    """
    if not isinstance(record, Mapping):
        return {}
    canonical: Dict[str, Any] = {}
    ranks: Dict[str, int] = {}
    for key, value in record.items():
        if not isinstance(key, str) or value is None:
            continue
        lowered = key.lower()
        if key == lowered:
            rank = 2
        elif key == lowered.upper():
            rank = 1
        else:
            rank = 0
        if lowered in ranks and ranks[lowered] >= rank:
            continue
        canonical[lowered] = value
        ranks[lowered] = rank
    return canonical

def get_field(record, key: str) -> Optional[Any]:
    """Looks up `key` verbatim, then upper-cased. Returns None when absent or malformed."""
    if not isinstance(record, Mapping):
        return None
    value = record.get(key)
    if value is None:
        value = record.get(key.upper())
    return value

def num_field(record, key: str, fallback: float) -> float:
    """Same lookup as `get_field`, coerced to a finite float; `fallback` otherwise."""
    return to_finite_float(get_field(record, key), fallback)

def optional_num_field(record, key: str) -> Optional[float]:
    return to_finite_float(get_field(record, key), None)

def text_field(record, key: str, fallback: str) -> str:
    """String lookup; empty strings and non-string scalars fall back or are stringified."""
    value = get_field(record, key)
    if value is None:
        return fallback
    text = str(value).strip()
    return text if text else fallback

"""
Record normalization: coerce ragged records onto a fixed column schema.

Every output record holds exactly the schema keys. Missing keys and falsy
values (empty string, 0, None, False, NaN) all become an empty string, so a
literal 0 is indistinguishable from an absent field after normalization.
"""
import json
import math
from typing import Any, Dict, Iterable, List, Mapping, Sequence


def is_blank(value: Any) -> bool:
    """Loose falsiness: None, False, empty string, zero and NaN are blank."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ''
    if isinstance(value, (int, float)):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    return False


def to_display_text(value: Any) -> str:
    """Render a kept source value as cell text."""
    if isinstance(value, str):
        return value
    if value is True:
        return 'true'
    if isinstance(value, float):
        if math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(',', ':'), ensure_ascii=False, default=str)
    return str(value)


def normalize_record(record: Any, keys: Sequence[Any]) -> Dict[Any, str]:
    """
    Map one raw record onto ``keys``.

    Args:
        record: Raw record (non-mappings normalize to all-empty)
        keys: Schema keys in column order

    Returns:
        New dict with exactly ``keys``, all values strings
    """
    source = record if isinstance(record, Mapping) else {}
    normalized = {}
    for key in keys:
        value = source.get(key)
        normalized[key] = '' if is_blank(value) else to_display_text(value)
    return normalized


def normalize_records(records: Iterable[Any], keys: Sequence[Any]) -> List[Dict[Any, str]]:
    """Normalize every record in order. See ``normalize_record``."""
    keys = list(keys)
    return [normalize_record(record, keys) for record in records]

"""
Column sorting for normalized table rows.

The comparison rule is picked from the column key alone (never from the
values). Direction changes the empty-value fallback as well as the order:

    desc: (a or 0) - (b or 0)       ascending by value, blanks as zero
    asc:  (b or inf) - (a or inf)   descending by value, blanks as infinity

String columns follow the same pattern with '' and 'z' as fallbacks.
"""
import locale
import math
import re
from enum import Enum
from functools import cmp_to_key
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from constants import DATE_SEPARATOR, PHONE_STRIP_CHARACTERS, STRING_SORT_FALLBACK
from helpers.schema_helpers import Direction

Row = Dict[Any, str]
Comparator = Callable[[Row, Row], int]


class SortType(Enum):
    """Comparator family for a column."""
    NUMBER = 'number'
    DATE = 'date'
    PHONE = 'phone'
    STRING = 'string'


COLUMN_SORT_TYPES = MappingProxyType({
    'price': SortType.NUMBER,
    'fda_date_approved': SortType.DATE,
    'phone': SortType.PHONE,
})

_DECIMAL_PATTERN = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$', re.ASCII)
_RADIX_PATTERN = re.compile(r'^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$')
_INFINITY_PATTERN = re.compile(r'^([+-]?)Infinity$')
_PHONE_STRIP_PATTERN = re.compile('[' + re.escape(PHONE_STRIP_CHARACTERS) + ']')


def to_number(value: Any) -> float:
    """
    Loose numeric coercion of a cell value.

    Surrounding whitespace is ignored and an empty string is 0. Decimal and
    exponent literals, 0x/0o/0b integer literals and signed 'Infinity' are
    accepted; anything else is NaN.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)

    text = str(value).strip()
    if not text:
        return 0.0
    if _DECIMAL_PATTERN.match(text):
        return float(text)
    if _RADIX_PATTERN.match(text):
        return float(int(text, 0))
    match = _INFINITY_PATTERN.match(text)
    if match:
        return -math.inf if match.group(1) == '-' else math.inf
    return math.nan


def _or_default(number: float, default: float) -> float:
    # zero and NaN count as missing
    if number == 0 or math.isnan(number):
        return default
    return number


def _sign(difference: float) -> int:
    if math.isnan(difference):
        return 0
    return (difference > 0) - (difference < 0)


def _compare_text(a: str, b: str) -> int:
    # collation of the process locale; code point order under "C"
    return _sign(locale.strcoll(a, b))


def _date_value(value: Any) -> float:
    """DD/MM/YYYY -> YYYYMMDD as a number."""
    segments = str(value).split(DATE_SEPARATOR)
    return to_number(''.join(reversed(segments)))


def _phone_value(value: Any) -> float:
    return to_number(_PHONE_STRIP_PATTERN.sub('', str(value)))


_NUMERIC_EXTRACTORS = {
    SortType.NUMBER: to_number,
    SortType.DATE: _date_value,
    SortType.PHONE: _phone_value,
}


def get_sort_type(key: Any, sort_types: Optional[Mapping[Any, SortType]] = None) -> SortType:
    """
    Comparator family for ``key``.

    ``sort_types`` is merged over COLUMN_SORT_TYPES; anything unmapped sorts as a string.
    """
    mapping = dict(COLUMN_SORT_TYPES)
    if sort_types:
        mapping.update(sort_types)
    try:
        return mapping.get(key, SortType.STRING)
    except TypeError:
        return SortType.STRING


def parse_sort_types(raw: Mapping[str, str]) -> Dict[str, SortType]:
    """
    Merge a ``{column: type name}`` mapping over the default column types.

    Raises:
        ValueError: If a type name is not one of number/date/phone/string
    """
    if not isinstance(raw, Mapping):
        raise ValueError("column sort types must be an object")
    merged = dict(COLUMN_SORT_TYPES)
    for column, type_name in raw.items():
        merged[column] = SortType(str(type_name).lower())
    return merged


def build_comparator(key: Any, direction: Union[Direction, str],
                     sort_types: Optional[Mapping[Any, SortType]] = None) -> Comparator:
    """
    Build a two-argument row comparator for one column and direction.

    Args:
        key: Column key to compare on
        direction: Direction or its wire value ('asc' / 'desc')
        sort_types: Optional column -> SortType mapping merged over COLUMN_SORT_TYPES

    Returns:
        Function returning a negative, zero or positive int
    """
    direction = Direction.coerce(direction)
    descending = direction is Direction.DESCENDING
    sort_type = get_sort_type(key, sort_types)

    if sort_type is SortType.STRING:
        def compare_strings(a: Row, b: Row) -> int:
            a1 = str(a.get(key, '')).lower()
            b1 = str(b.get(key, '')).lower()
            if descending:
                return _compare_text(a1 or '', b1 or '')
            return _compare_text(b1 or STRING_SORT_FALLBACK, a1 or STRING_SORT_FALLBACK)
        return compare_strings

    extract = _NUMERIC_EXTRACTORS[sort_type]

    def compare_numbers(a: Row, b: Row) -> int:
        a1 = extract(a.get(key, ''))
        b1 = extract(b.get(key, ''))
        if descending:
            return _sign(_or_default(a1, 0.0) - _or_default(b1, 0.0))
        return _sign(_or_default(b1, math.inf) - _or_default(a1, math.inf))
    return compare_numbers


def sort_records(records: List[Row], comparator: Comparator) -> List[Row]:
    """Return a new list of ``records`` ordered by ``comparator``."""
    return sorted(records, key=cmp_to_key(comparator))


def sort_table_data(data: list, sort_by: Any, sort_dir: Union[Direction, str],
                    sort_types: Optional[Mapping[Any, SortType]] = None) -> list:
    """
    Sort table rows in place by one column.

    Nothing happens without a column key or with direction NONE.

    Args:
        data: List of normalized row dicts
        sort_by: Column key
        sort_dir: Direction or 'asc' / 'desc'
        sort_types: Optional column -> SortType mapping

    Returns:
        The same list, reordered
    """
    direction = Direction.coerce(sort_dir)
    if sort_by is None or sort_by == '' or direction is Direction.NONE:
        return data

    comparator = build_comparator(sort_by, direction, sort_types)
    data.sort(key=cmp_to_key(comparator))
    return data

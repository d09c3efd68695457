"""
Column schema derivation and per-column sort direction state.
"""
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional


class Direction(Enum):
    """Sort direction of a single column. Values match the header ``dir`` attribute."""
    NONE = ''
    ASCENDING = 'asc'
    DESCENDING = 'desc'

    @classmethod
    def coerce(cls, value) -> 'Direction':
        """Accept a Direction, its wire value, or None. Unknown values map to NONE."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value or '')
        except ValueError:
            return cls.NONE

    def toggled(self) -> 'Direction':
        """Next direction on activation. NONE counts as ASCENDING."""
        if self is Direction.DESCENDING:
            return Direction.ASCENDING
        return Direction.DESCENDING


def derive_schema(records: Iterable[Any]) -> List[Any]:
    """
    Collect the unique keys of all records in first-seen order.

    Records are scanned in order and each record's keys in its own order,
    so the result is deterministic for a given input. Items that are not
    mappings contribute nothing.

    Args:
        records: Raw records with possibly differing key sets

    Returns:
        Ordered list of unique keys
    """
    keys = []
    seen = set()
    for record in records:
        if not isinstance(record, Mapping):
            continue
        for key in record:
            if key not in seen:
                seen.add(key)
                keys.append(key)
    return keys


class SchemaColumn:
    """
    A single schema entry.

    Args:
        key: Field key shared by every normalized record
        label: Header text (same as the key)
        direction: Current sort direction
    """

    def __init__(self, key: Any, label: Optional[str] = None,
                 direction: Direction = Direction.NONE):
        self.key = key
        self.label = str(key) if label is None else label
        self.direction = direction

    def to_dict(self) -> Dict[str, Any]:
        return {
            'key': self.key,
            'label': self.label,
            'direction': self.direction.value
        }

    def __repr__(self) -> str:
        return f"SchemaColumn({self.key!r}, direction={self.direction.value!r})"


class Schema:
    """
    Ordered, duplicate-free column list with per-column direction state.

    Key order and membership never change after construction. At most one
    column carries a direction other than NONE.
    """

    def __init__(self, keys: Iterable[Any] = ()):
        self._columns: List[SchemaColumn] = []
        self._index: Dict[Any, SchemaColumn] = {}
        for key in keys:
            if key in self._index:
                continue
            column = SchemaColumn(key)
            self._columns.append(column)
            self._index[key] = column

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> 'Schema':
        return cls(derive_schema(records))

    @property
    def keys(self) -> List[Any]:
        return [column.key for column in self._columns]

    @property
    def columns(self) -> List[SchemaColumn]:
        return list(self._columns)

    @property
    def active_column(self) -> Optional[SchemaColumn]:
        """The column currently sorted, if any."""
        for column in self._columns:
            if column.direction is not Direction.NONE:
                return column
        return None

    def get(self, key: Any) -> Optional[SchemaColumn]:
        try:
            return self._index.get(key)
        except TypeError:
            # Unhashable lookup keys cannot be schema keys
            return None

    def direction_of(self, key: Any) -> Direction:
        column = self.get(key)
        return column.direction if column else Direction.NONE

    def set_direction(self, key: Any, direction: Direction) -> bool:
        """
        Make ``key`` the only column with a direction.

        Returns:
            False (and changes nothing) when ``key`` is not in the schema
        """
        column = self.get(key)
        if column is None:
            return False
        for other in self._columns:
            other.direction = Direction.NONE
        column.direction = direction
        return True

    def to_list(self) -> List[Dict[str, Any]]:
        return [column.to_dict() for column in self._columns]

    def __len__(self) -> int:
        return len(self._columns)

    def __iter__(self) -> Iterator[SchemaColumn]:
        return iter(list(self._columns))

    def __contains__(self, key: Any) -> bool:
        return self.get(key) is not None

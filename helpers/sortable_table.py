"""
Sortable table state: schema, normalized rows and the header toggle.

The presentation layer reads ``schema`` and ``rows``, calls
``activate_column`` when a header is clicked, and rebuilds its view when a
refresh listener fires.
"""
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from helpers.normalization_helpers import normalize_records
from helpers.schema_helpers import Direction, Schema, derive_schema
from helpers.sorting_helpers import SortType, sort_table_data
from logging_helper import LoggingHelper, LogType

logger = LoggingHelper.get_logger(LogType.MAIN)


class SortableTable:
    """
    Owns the column schema and the row dataset for one table.

    Args:
        records: Raw records (ragged key sets allowed)
        sortable: When False, header activation does nothing
        sort_types: Optional column -> SortType mapping overriding the defaults
    """

    def __init__(self, records: Optional[Iterable[Any]] = None, sortable: bool = True,
                 sort_types: Optional[Mapping[Any, SortType]] = None):
        self.sortable = sortable
        self.sort_types = sort_types
        self._listeners: List[Callable[['SortableTable'], None]] = []
        self._load(records)

    def _load(self, records: Optional[Iterable[Any]]):
        records = list(records or [])
        keys = derive_schema(records)
        self.schema = Schema(keys)
        self.rows: List[Dict[Any, str]] = normalize_records(records, keys)
        logger.debug(f"Table loaded: {len(self.rows)} rows, {len(self.schema)} columns")

    def add_refresh_listener(self, callback: Callable[['SortableTable'], None]):
        """Register a callback invoked with the table after rows are reordered or reloaded."""
        self._listeners.append(callback)

    def _notify(self):
        for callback in list(self._listeners):
            callback(self)

    def activate_column(self, key: Any) -> None:
        """
        Toggle the sort direction of ``key`` and reorder the rows.

        The first activation of a column sorts it 'desc'; further
        activations alternate. Every other column is reset. Unknown keys
        and non-sortable tables are a no-op.
        """
        if not self.sortable:
            logger.debug(f"Ignoring activation of {key!r}: table is not sortable")
            return

        column = self.schema.get(key)
        if column is None:
            logger.debug(f"Ignoring activation of unknown column {key!r}")
            return

        next_direction = column.direction.toggled()
        self.schema.set_direction(key, next_direction)
        sort_table_data(self.rows, key, next_direction, self.sort_types)

        LoggingHelper.log_user_action("Sorted column", f"{column.label} → {next_direction.value}")
        self._notify()

    def reload(self, records: Optional[Iterable[Any]]) -> None:
        """Replace schema and rows from a new raw collection. All directions reset."""
        self._load(records)
        LoggingHelper.log_user_action("Reloaded table", f"{len(self.rows)} rows")
        self._notify()

    @property
    def active_direction(self) -> Direction:
        column = self.schema.active_column
        return column.direction if column else Direction.NONE

    def to_dict(self) -> Dict[str, Any]:
        return {
            'columns': self.schema.to_list(),
            'rows': [dict(row) for row in self.rows]
        }

    def __len__(self) -> int:
        return len(self.rows)

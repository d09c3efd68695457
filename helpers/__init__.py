"""
Helper utilities for the JSON Table Viewer.
Schema derivation, normalization and sorting live here; Flask-facing
helpers are in response_helpers and the template package.
"""

from .schema_helpers import Direction, Schema, SchemaColumn, derive_schema
from .normalization_helpers import normalize_record, normalize_records
from .sorting_helpers import (
    COLUMN_SORT_TYPES,
    SortType,
    build_comparator,
    sort_records,
    sort_table_data,
    to_number
)
from .sortable_table import SortableTable
from .loading_helpers import load_records_file, parse_records

__all__ = [
    # Schema helpers
    'Direction',
    'Schema',
    'SchemaColumn',
    'derive_schema',
    # Normalization helpers
    'normalize_record',
    'normalize_records',
    # Sorting helpers
    'COLUMN_SORT_TYPES',
    'SortType',
    'build_comparator',
    'sort_records',
    'sort_table_data',
    'to_number',
    # Table state
    'SortableTable',
    # Loading helpers
    'load_records_file',
    'parse_records',
]

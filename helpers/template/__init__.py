"""
Template helpers for the table viewer page.
"""

from .data_structures import (
    TableColumn,
    TableCell,
    TableRow,
    TableData,
    PageConfig
)

from .rendering import (
    render_table_page,
    create_status_message,
    pluralize
)

from .table_helpers import (
    build_table_data
)

__all__ = [
    'TableColumn',
    'TableCell',
    'TableRow',
    'TableData',
    'PageConfig',
    'render_table_page',
    'create_status_message',
    'pluralize',
    'build_table_data',
]

"""
Rendering functions for the table viewer page.
"""

from typing import Optional
from flask import render_template
from .data_structures import PageConfig, TableData


def render_table_page(
    page_config: PageConfig,
    table_data: Optional[TableData] = None,
    status_message: str = ''
):
    """
    Render the table viewer template.

    Args:
        page_config: PageConfig object with page configuration
        table_data: Optional TableData object with table rows/columns
        status_message: Optional status message to display

    Returns:
        Rendered template response
    """
    return render_template(
        'table_viewer.html',
        page_config=page_config.to_dict(),
        table_data=table_data.to_dict() if table_data and table_data.columns else None,
        status_message=status_message
    )


def pluralize(count: int, singular: str, plural: Optional[str] = None) -> str:
    """Return singular or plural form based on count."""
    if count == 1:
        return singular
    return plural or f"{singular}s"


def create_status_message(items_count: int, columns_count: int = 0,
                          item_type: str = 'record') -> str:
    """
    Create a status line for the table, e.g. "Showing 3 records across 2 columns".
    """
    message = f"Showing {items_count:,} {pluralize(items_count, item_type)}"
    if columns_count:
        message += f" across {columns_count:,} {pluralize(columns_count, 'column')}"
    return message

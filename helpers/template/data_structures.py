"""
Data structures for the table viewer page.

Provides classes for table configuration and data representation.
"""

from typing import Dict, Any, List


class TableColumn:
    """
    Represents a table column header.

    Args:
        key: Schema key the column sorts on
        label: Display name for the column header
        sortable: Whether clicking the header sorts the table
        direction: Current sort direction wire value ('', 'asc' or 'desc')
    """

    def __init__(self, key: Any, label: str, sortable: bool = True,
                 direction: str = ''):
        self.key = key
        self.label = label
        self.sortable = sortable
        self.direction = direction

    def to_dict(self) -> Dict[str, Any]:
        return {
            'key': self.key,
            'label': self.label,
            'sortable': self.sortable,
            'direction': self.direction
        }


class TableCell:
    """
    Represents a table cell.

    Args:
        value: The plain text value of the cell
    """

    def __init__(self, value: Any):
        self.value = str(value) if value is not None else ''

    def to_dict(self) -> Dict[str, Any]:
        return {'value': self.value}


class TableRow:
    """
    Represents a table row.

    Args:
        cells: List of TableCell objects, one per column
    """

    def __init__(self, cells: List[TableCell]):
        self.cells = cells

    def to_dict(self) -> Dict[str, Any]:
        return {'cells': [cell.to_dict() for cell in self.cells]}


class TableData:
    """
    Container for table columns and rows.

    Args:
        columns: List of TableColumn objects defining the table structure
        rows: List of TableRow objects containing the actual data
    """

    def __init__(self, columns: List[TableColumn], rows: List[TableRow]):
        self.columns = columns
        self.rows = rows

    def to_dict(self) -> Dict[str, Any]:
        return {
            'columns': [col.to_dict() for col in self.columns],
            'rows': [row.to_dict() for row in self.rows]
        }


class PageConfig:
    """
    Configuration for the table viewer page.

    Args:
        title: The page title displayed in the header
        enable_sorting: Render headers as sort buttons
    """

    def __init__(self, title: str, enable_sorting: bool = True):
        self.title = title
        self.enable_sorting = enable_sorting
        self.empty_state = None

    def set_empty_state(self, icon: str, title: str, message: str):
        """Set the empty state display."""
        self.empty_state = {'icon': icon, 'title': title, 'message': message}
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for template rendering."""
        return {
            'title': self.title,
            'enable_sorting': self.enable_sorting,
            'empty_state': self.empty_state
        }

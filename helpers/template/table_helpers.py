"""
Build the table view model from a SortableTable.
"""
from helpers.sortable_table import SortableTable
from helpers.template.data_structures import TableCell, TableColumn, TableData, TableRow


def build_table_data(table: SortableTable) -> TableData:
    """
    Build header columns and body rows for rendering.

    Each body row is prepended as it is built, so rows appear in reverse
    dataset order. Under that display a 'desc' sort shows the largest
    value first.

    Args:
        table: The table to render

    Returns:
        TableData with one column per schema entry
    """
    columns = [
        TableColumn(column.key, column.label, sortable=table.sortable,
                    direction=column.direction.value)
        for column in table.schema
    ]

    keys = table.schema.keys
    rows = []
    for record in table.rows:
        rows.insert(0, TableRow([TableCell(record[key]) for key in keys]))

    return TableData(columns, rows)

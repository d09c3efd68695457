"""
Table page routes: render the table, sort on header click, reload pasted JSON.
"""
from flask import Blueprint, redirect, request, url_for
from logging_helper import LoggingHelper, LogType

# Get logger instance
logger = LoggingHelper.get_logger(LogType.MAIN)
from helpers.loading_helpers import parse_records
from helpers.template import (
    PageConfig,
    build_table_data,
    create_status_message,
    render_table_page
)

bp = Blueprint('table', __name__)

# Shared table instance (set by init function)
_table = None


def init_table_routes(table):
    """Initialize table routes with the shared SortableTable."""
    global _table
    _table = table


def _sanitize_log_value(value, max_length: int = 50) -> str:
    """Strip control characters and truncate a value before logging it."""
    if not isinstance(value, str):
        value = str(value)
    value = ''.join(char if char.isprintable() else '?' for char in value)
    if len(value) > max_length:
        value = value[:max_length] + '...'
    return value


@bp.route('/', methods=['GET'])
def index():
    """Render the table in its current order."""
    page_config = PageConfig('JSON Table', enable_sorting=_table.sortable)
    if not len(_table.schema):
        page_config.set_empty_state('📭', 'No data', 'Paste a JSON array of objects below to build a table.')

    table_data = build_table_data(_table)
    status = create_status_message(len(_table), len(_table.schema))
    return render_table_page(page_config, table_data, status)


@bp.route('/sort', methods=['POST'])
def sort_column():
    """Activate the posted header column and show the reordered table."""
    column = request.form.get('column', '')
    if column not in _table.schema:
        logger.warning(f"Sort requested for unknown column: {_sanitize_log_value(column)}")
    _table.activate_column(column)
    return redirect(url_for('table.index'))


@bp.route('/load', methods=['POST'])
def load_table():
    """Replace the table with records parsed from the pasted JSON text."""
    raw_json = request.form.get('raw_json', '')
    records = parse_records(raw_json)
    _table.reload(records)
    return redirect(url_for('table.index'))

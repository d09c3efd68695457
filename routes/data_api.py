"""
JSON API for the table: read state, activate a column, load new records.
"""
from flask import Blueprint, request, Response
from logging_helper import LoggingHelper, LogType

# Get logger instance
logger = LoggingHelper.get_logger(LogType.MAIN)
from helpers.loading_helpers import parse_records
from helpers.response_helpers import error_response, table_response
from helpers.template import pluralize

# Create blueprint
bp = Blueprint('data_api', __name__, url_prefix='/api')

# Table instance will be injected
_table = None


def init_data_api_routes(table):
    """
    Initialize the data API routes with the shared table.

    Args:
        table: SortableTable instance served by the API
    """
    global _table
    _table = table


@bp.route('/table', methods=['GET'])
def get_table() -> Response:
    """Current columns (with directions) and rows in dataset order."""
    return table_response(_table)


@bp.route('/table/sort', methods=['POST'])
def sort_table() -> Response:
    """
    Activate a column.

    Body: {"column": "<key>"} as JSON, or a 'column' form field.
    Unknown columns leave the table unchanged.
    """
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        column = payload.get('column')
    else:
        column = request.form.get('column')

    if column is None or column == '':
        return error_response("Missing 'column' parameter", 400)

    _table.activate_column(column)
    return table_response(_table)


@bp.route('/table/load', methods=['POST'])
def load_table() -> Response:
    """Replace the table from a JSON array body. Invalid JSON loads an empty table."""
    records = parse_records(request.get_data(cache=False))
    _table.reload(records)
    return table_response(_table, f"Loaded {len(_table)} {pluralize(len(_table), 'record')}")

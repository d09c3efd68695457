import json
import locale
import os
import secrets
import traceback

from dotenv import load_dotenv
from flask import Flask, jsonify, request
from flask_wtf.csrf import CSRFProtect, CSRFError
from werkzeug.exceptions import HTTPException

load_dotenv()

from logging_helper import LoggingHelper, LogType

# Get logger instances
logger = LoggingHelper.get_logger(LogType.MAIN)
from constants import DEFAULT_DATA_FILE, FALSE_VALUES
from error_handler import ConfigurationError, validate_environment_variable
from helpers.loading_helpers import load_records_file
from helpers.sortable_table import SortableTable
from helpers.sorting_helpers import parse_sort_types
from routes.data_api import bp as data_api_bp, init_data_api_routes
from routes.table_routes import bp as table_bp, init_table_routes


# ============================================================================
# CONFIGURATION
# ============================================================================

def _parse_bool(raw_value: str) -> bool:
    return raw_value.strip().lower() not in FALSE_VALUES


def _parse_sort_types(raw_value: str):
    """COLUMN_SORT_TYPES='{"rating": "number"}' -> merged column type mapping."""
    try:
        return parse_sort_types(json.loads(raw_value))
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc


DATA_FILE = os.getenv('TABLE_DATA_FILE', DEFAULT_DATA_FILE)
SORTABLE = validate_environment_variable('TABLE_SORTABLE', True, converter=_parse_bool)
SORT_TYPES = validate_environment_variable('COLUMN_SORT_TYPES', None, converter=_parse_sort_types)


app = Flask(__name__)
app.json.sort_keys = False

app.config['SECRET_KEY'] = os.environ.get('FLASK_SECRET_KEY') or secrets.token_hex(32)

# SECURITY: Enable CSRF protection for the sort and load forms
csrf = CSRFProtect(app)


@app.errorhandler(CSRFError)
def handle_csrf_error(e):
    """Handle CSRF validation errors with helpful message."""
    logger.warning(f"CSRF validation failed: {e.description}")
    return jsonify({'success': False, 'error': 'CSRF validation failed', 'message': e.description}), 400


@app.after_request
def add_security_headers(response):
    """Add security headers and disable caching of table state."""
    response.headers['X-Frame-Options'] = 'SAMEORIGIN'
    response.headers['X-Content-Type-Options'] = 'nosniff'
    response.headers['Content-Security-Policy'] = (
        "default-src 'self'; "
        "style-src 'self' 'unsafe-inline'; "
        "frame-ancestors 'self'"
    )
    response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
    response.headers['Cache-Control'] = 'no-cache, no-store, must-revalidate'
    return response


@app.errorhandler(Exception)
def handle_exception(e):
    """Catch-all error handler - returns JSON for API routes, HTML for pages."""
    if isinstance(e, HTTPException):
        return e

    LoggingHelper.log_error_with_trace(f"Unhandled exception on {request.path}", e)

    debug_mode = os.getenv('DEBUG', 'false').lower() == 'true'

    if request.path.startswith('/api/'):
        if debug_mode:
            return jsonify({
                'success': False,
                'error': str(e),
                'type': type(e).__name__
            }), 500
        return jsonify({
            'success': False,
            'error': 'Internal server error'
        }), 500

    if debug_mode:
        # nosec - debug mode only, controlled by environment variable
        html = f"""
        <html>
        <head><title>Error</title></head>
        <body style="font-family: monospace; padding: 20px;">
            <h1>Error: {type(e).__name__}</h1>
            <pre>{traceback.format_exc()}</pre>
        </body>
        </html>
        """
        return html, 500

    html = """
    <html>
    <head><title>Error</title></head>
    <body style="font-family: sans-serif; padding: 40px; text-align: center;">
        <h1>Something went wrong</h1>
        <p>The table could not be displayed. Check the server logs for details.</p>
    </body>
    </html>
    """
    return html, 500


# ============================================================================
# TABLE INITIALIZATION
# ============================================================================

table = SortableTable(load_records_file(DATA_FILE), sortable=SORTABLE, sort_types=SORT_TYPES)
table.add_refresh_listener(
    lambda t: logger.debug(f"Table refreshed: {len(t)} rows, active column {t.schema.active_column}")
)

init_table_routes(table)
init_data_api_routes(table)

app.register_blueprint(table_bp)
app.register_blueprint(data_api_bp)

logger.info(f"JSON Table Viewer ready: {len(table)} records, {len(table.schema)} columns")

# Only run the development server if executed directly (not via WSGI)
if __name__ == '__main__':
    host = os.getenv('HOST', '127.0.0.1')
    port = validate_environment_variable('PORT', 21813, validator=lambda p: 0 < p < 65536, converter=int)

    try:
        locale.setlocale(locale.LC_COLLATE, '')
    except locale.Error as e:
        logger.warning(f"Could not apply system collation, using code point order: {e}")

    if host == '0.0.0.0':
        logger.warning("Binding to 0.0.0.0 exposes the viewer to the network.")

    logger.info(f"Starting Flask development server on {host}:{port}")

    try:
        app.run(host=host, port=port, debug=False)
    except Exception as e:
        LoggingHelper.log_error_with_trace("Flask failed to start", e)
        raise

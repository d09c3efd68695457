"""
Raw record acquisition: JSON text or file -> list of record dicts.

The lenient loaders never raise. Any parse or read failure is logged and
an empty collection is returned, so the table always has something to show.
"""
import json
from pathlib import Path
from typing import Any, Dict, List, Union

from error_handler import DataLoadError, log_and_suppress
from logging_helper import LoggingHelper, LogType

logger = LoggingHelper.get_logger(LogType.MAIN)


def parse_records_strict(text: Union[str, bytes]) -> List[Dict[str, Any]]:
    """
    Parse a JSON array of objects.

    Non-object items inside the array are skipped with a warning.

    Raises:
        DataLoadError: If the text is not valid JSON or not an array
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise DataLoadError(f"Invalid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise DataLoadError(f"Expected a JSON array, got {type(data).__name__}")

    records = []
    for index, item in enumerate(data):
        if isinstance(item, dict):
            records.append(item)
        else:
            logger.warning(f"Skipping item {index}: expected an object, got {type(item).__name__}")
    return records


def parse_records(text: Union[str, bytes, None]) -> List[Dict[str, Any]]:
    """Parse JSON records, returning [] on any failure."""
    if text is None:
        return []
    try:
        return parse_records_strict(text)
    except DataLoadError as exc:
        return log_and_suppress(exc, "Failed to parse table data", level="warning",
                                return_value=[], log_traceback=False)


def load_records_file(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Read and parse a UTF-8 JSON file, returning [] if it is missing or invalid."""
    path = Path(path)
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        return log_and_suppress(exc, f"Failed to read table data from {path}", level="warning",
                                return_value=[], log_traceback=False)

    records = parse_records(text)
    logger.info(f"Loaded {len(records)} records from {path}")
    return records

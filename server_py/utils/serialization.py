"""Conversion of database values into JSON-friendly values."""
import datetime
import decimal
import math
import uuid
from typing import Any, Dict, Iterable, List


def to_json_value(value: Any) -> Any:
    """Convert one value returned by psycopg2 into something JSON can carry.

    Decimals become strings so numeric precision survives the trip to the UI,
    and bytea becomes the ``\\x``-prefixed hex form psql prints. Floats JSON
    cannot carry come back as ``"NaN"``, ``"Infinity"`` or ``"-Infinity"``,
    the way PostgreSQL spells them.
    """
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, decimal.Decimal):
        return str(value)
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, datetime.timedelta):
        return str(value)
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return "\\x" + bytes(value).hex()
    if isinstance(value, dict):
        return {str(k): to_json_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [to_json_value(v) for v in value]
    # ranges, network addresses and other adapter types
    return str(value)


def row_to_json(row: Dict[str, Any]) -> Dict[str, Any]:
    return {key: to_json_value(value) for key, value in row.items()}


def rows_to_json(rows: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [row_to_json(row) for row in rows]

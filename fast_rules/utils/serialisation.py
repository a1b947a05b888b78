from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any


def serialise(val: Any) -> Any:
    """Convert a value captured by a failure into something `json.dumps` accepts."""
    if isinstance(val, Enum):
        return serialise(val.value)
    if val is None or isinstance(val, (str, int, float, bool)):
        return val
    if isinstance(val, (datetime, date, time)):
        return val.isoformat()
    if isinstance(val, Decimal):
        return str(val)
    elif isinstance(val, (list, tuple, set, frozenset)):
        return [serialise(item) for item in val]
    elif isinstance(val, dict):
        return {str(key): serialise(value) for key, value in val.items()}

    return str(val)

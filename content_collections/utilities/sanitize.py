import decimal
import math
import re

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')
_NUMERIC = re.compile(r'\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$')
INT_MAX = 2 ** 63 - 1


def intval(value):
    """Best-effort integer value of `value`, 0 when nothing usable is found.

    Numeric strings are read whole, so '1e3' is 1000 and '3.9' is 3;
    other strings up to the first non-digit, so '12abc' is 12.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return 0
        return int(value)
    if isinstance(value, bytes):
        value = value.decode('utf8', errors='replace')
    if isinstance(value, str):
        if _NUMERIC.match(value):
            number = decimal.Decimal(value.strip())
            if number and number.adjusted() >= 19:
                return INT_MAX if number > 0 else -INT_MAX
            return max(-INT_MAX, min(INT_MAX, int(number)))
        match = _LEADING_INT.match(value)
        if match is None:
            return 0
        return int(match.group(1))
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def to_id(value):
    ret = intval(value)
    return ret if ret > 0 else 0


def sanitize_ids(values):
    return [_id for _id in map(to_id, values) if _id]

import math


def safe_float(val, default=0.0):
    """
    Convert a scalar (or numeric string from YAML/env) to float safely.
    Returns default if conversion fails or value is None.
    """
    if val is None:
        return default
    if isinstance(val, bool):
        return float(val)
    if isinstance(val, (int, float)):
        return float(val)
    try:
        return float(str(val).strip())
    except (TypeError, ValueError):
        return default


def safe_int(val, default=0):
    """
    Convert a scalar to int. Floats are accepted only when integral.
    """
    number = safe_float(val, default=None)
    if number is None or not math.isfinite(number) or not number.is_integer():
        return default
    return int(number)


def is_finite_number(val):
    return isinstance(val, (int, float)) and not isinstance(val, bool) and math.isfinite(val)

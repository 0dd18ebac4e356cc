"""Typed accessors for values read back from stored JSON.

Each raises TypeError or KeyError when the stored value does not have the
expected shape, so callers loading a record can treat it as corrupt.
"""

_MISSING = object()


def _get(data: dict, key: str, default):
    if default is _MISSING:
        return data[key]
    return data.get(key, default)


def get_int(data: dict, key: str, default=_MISSING) -> int:
    value = _get(data, key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key} must be an integer, got {value!r}")
    return value


def get_optional_int(data: dict, key: str) -> int | None:
    if data.get(key) is None:
        return None
    return get_int(data, key)


def get_optional_float(data: dict, key: str) -> float | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key} must be a number, got {value!r}")
    return float(value)


def get_bool(data: dict, key: str, default=_MISSING) -> bool:
    value = _get(data, key, default)
    if not isinstance(value, bool):
        raise TypeError(f"{key} must be a boolean, got {value!r}")
    return value


def get_str(data: dict, key: str, default=_MISSING) -> str:
    value = _get(data, key, default)
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {value!r}")
    return value


def get_optional_str(data: dict, key: str) -> str | None:
    if data.get(key) is None:
        return None
    return get_str(data, key)


def get_str_list(data: dict, key: str) -> list[str]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise TypeError(f"{key} must be a list of strings, got {value!r}")
    return list(value)

"""src/urikit/utils/serialization.py

Query-string serialization utilities for urikit (mapping <-> form-urlencoded).
"""

import urllib.parse
from typing import Any, Dict, List, Mapping, Optional, Union

__all__ = ["build_query", "parse_query"]

QueryValue = Union[str, None, List[str]]

ARRAY_SUFFIX = "[]"


def _encode(value: Any) -> str:
    return urllib.parse.quote(str(value), safe="")


def build_query(params: Mapping[str, Any]) -> str:
    """
    Serialize a mapping into a query string.

    Keys are emitted in sorted order. Sequence values are repeated with
    the ``key[]=value`` convention, ``None`` values are emitted as a bare key
    and empty sequences are dropped.

    Args:
        params: Mapping of query parameter names to values.

    Returns:
        Query string without a leading ``?``.

    Example:
        >>> build_query({"b": ["1", "2"], "a": "x y"})
        'a=x%20y&b%5B%5D=1&b%5B%5D=2'
    """
    pairs: List[str] = []
    for key in sorted(params):
        value = params[key]
        if value is None:
            pairs.append(_encode(key))
        elif isinstance(value, (list, tuple)):
            name = _encode(f"{key}{ARRAY_SUFFIX}")
            pairs.extend(f"{name}={_encode(item)}" for item in value)
        else:
            pairs.append(f"{_encode(key)}={_encode(value)}")
    return "&".join(pairs)


def parse_query(query: str) -> Dict[str, QueryValue]:
    """
    Parse a query string into a mapping.

    Inverse of :func:`build_query`: ``key[]`` entries are collected into
    lists, a plain key seen more than once becomes a list and a key without
    ``=`` maps to ``None``.

    Args:
        query: Query string, with or without a leading ``?``.

    Returns:
        Dictionary of decoded names to decoded values.
    """
    result: Dict[str, QueryValue] = {}
    if query.startswith("?"):
        query = query[1:]

    for pair in query.split("&"):
        if not pair:
            continue
        raw_key, sep, raw_value = pair.partition("=")
        key = urllib.parse.unquote_plus(raw_key)
        value: Optional[str] = urllib.parse.unquote_plus(raw_value) if sep else None

        if key.endswith(ARRAY_SUFFIX):
            key = key[: -len(ARRAY_SUFFIX)]
            _append(result, key, value, force_list=True)
        else:
            _append(result, key, value, force_list=False)

    return result


def _append(
    result: Dict[str, QueryValue], key: str, value: Optional[str], force_list: bool
) -> None:
    if key not in result:
        result[key] = [value or ""] if force_list else value
        return

    current = result[key]
    if isinstance(current, list):
        current.append(value or "")
    else:
        result[key] = [current or "", value or ""]

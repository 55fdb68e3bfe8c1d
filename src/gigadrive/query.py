from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Tuple, Union
from urllib.parse import urlencode


QueryParams = Union[str, Mapping[str, Any], Iterable[Tuple[str, Any]]]


def _stringify(value: Any) -> str:
    # Booleans go first: bool is a subclass of int.
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _pairs_from_mapping(params: Mapping[str, Any]) -> List[Tuple[str, str]]:
    pairs: List[Tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _stringify(v)) for v in value if v is not None)
        else:
            pairs.append((key, _stringify(value)))
    return pairs


def build_query_string(params: QueryParams) -> str:
    """
    Build a query string from query parameters.

    Accepts:
    - str: treated as already encoded and returned unchanged
    - sequence of (key, value) pairs: encoded as given
    - mapping: keys in insertion order, None values skipped,
      list/tuple values repeated under the same key

        >>> build_query_string({"a": "1", "b": ["x", "y"]})
        'a=1&b=x&b=y'
    """
    if isinstance(params, str):
        return params

    if isinstance(params, Mapping):
        return urlencode(_pairs_from_mapping(params))

    return urlencode([(key, _stringify(value)) for key, value in params])


def append_query(path: str, params: QueryParams) -> str:
    """Append encoded params to path, joining with '&' if it already has a query."""
    encoded = build_query_string(params)
    if not encoded:
        return path
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{encoded}"

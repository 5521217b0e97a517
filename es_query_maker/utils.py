from __future__ import annotations

from datetime import timedelta
from typing import Any, Iterable, List, Union

from es_query_maker.exceptions import QueryBuildError


def validate_field_name(name: str, *, what: str = "field") -> str:
    """
    Elasticsearch field names are free-form (dots, dashes and "@" are all
    legal), so only reject what can never address a field: non-strings,
    empty names and names padded with whitespace.
    """
    if not isinstance(name, str):
        raise QueryBuildError(f"{what} name must be a string, got {type(name).__name__}")
    if not name:
        raise QueryBuildError(f"{what} name cannot be empty")
    if name != name.strip():
        raise QueryBuildError(f"{what} name cannot start or end with whitespace: {name!r}")
    return name


def validate_field_names(names: Iterable[str], *, what: str = "field") -> List[str]:
    return [validate_field_name(n, what=what) for n in names]


def format_timeout(timeout: Union[int, float, timedelta]) -> str:
    """
    Render a search timeout as Elasticsearch time units, rounded to whole
    seconds:

      timedelta(minutes=1) -> "60s"
      2.4                  -> "2s"
    """
    if isinstance(timeout, timedelta):
        seconds = timeout.total_seconds()
    elif isinstance(timeout, (int, float)) and not isinstance(timeout, bool):
        seconds = float(timeout)
    else:
        raise QueryBuildError("timeout must be a number of seconds or a timedelta")

    if seconds < 0:
        raise QueryBuildError("timeout cannot be negative")
    return f"{seconds:.0f}s"


def flatten_values(values: Any) -> List[Any]:
    """Accept both varargs-style tuples and a single list/tuple argument."""
    if len(values) == 1 and isinstance(values[0], (list, tuple)):
        return list(values[0])
    return list(values)

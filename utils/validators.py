"""
Input validators for path and query parameters.
Raise ValueError on bad input; the API layer turns that into a 422.
"""

import re
from typing import NamedTuple

OBJECT_ID_PATTERN = r"^[0-9a-fA-F]{24}$"
_OBJECT_ID_RE = re.compile(OBJECT_ID_PATTERN)

_SORT_RE = re.compile(r"^([+-]?)([A-Za-z_][A-Za-z0-9_]*)$")


class SortSpec(NamedTuple):
    field: str
    descending: bool = False


def is_object_id(value: str) -> bool:
    """True for 24-character hex ids as issued by the repositories."""
    return isinstance(value, str) and bool(_OBJECT_ID_RE.match(value))


def parse_sort(value: str, allowed: frozenset[str] | set[str]) -> SortSpec:
    """
    Parse a sort_by value such as "+name", "-cost" or "email".
    No prefix means ascending. Raises ValueError for syntax errors or unknown fields.
    """
    match = _SORT_RE.match((value or "").strip())
    if not match:
        raise ValueError(f"Invalid sort expression: {value!r}")
    sign, field = match.groups()
    if field not in allowed:
        raise ValueError(f"Cannot sort by {field!r}; allowed: {', '.join(sorted(allowed))}")
    return SortSpec(field=field, descending=sign == "-")

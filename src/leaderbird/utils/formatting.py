"""Formatting and parsing helpers for scores and API responses."""

import json
import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

# Characters encodeURIComponent leaves alone besides the unreserved set
_QUERY_SAFE = "!~*'()"

# Leading digits followed by a trailing group of three
_THOUSANDS = re.compile(r"(\d+)(\d{3})")


def add_commas(value: Any) -> str:
    """
    Insert thousands separators into the integer part of a number.

    The fractional part (everything after the first ".") is kept as is.

    Examples:
        add_commas(1234567) -> "1,234,567"
        add_commas(1234.5)  -> "1,234.5"
    """
    integer, dot, fraction = str(value).partition(".")
    while _THOUSANDS.search(integer):
        integer = _THOUSANDS.sub(r"\1,\2", integer, count=1)
    return integer + dot + fraction


def parse_error_response(response) -> Any:
    """
    Decode the JSON body of a failed response.

    Args:
        response: ApiResponse (or anything with a text ``body``)

    Returns:
        Decoded JSON value

    Raises:
        json.JSONDecodeError: If the body is not valid JSON
    """
    return json.loads(response.body)


def to_query_string(params: Mapping[str, Any]) -> str:
    """Encode a mapping as ``key=value`` pairs joined by ``&``."""
    return "&".join(
        f"{quote(str(key), safe=_QUERY_SAFE)}={quote(str(value), safe=_QUERY_SAFE)}"
        for key, value in params.items()
    )

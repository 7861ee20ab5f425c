"""Utility helpers."""

from .formatting import add_commas, parse_error_response, to_query_string

__all__ = ["add_commas", "parse_error_response", "to_query_string"]

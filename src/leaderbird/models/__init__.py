"""Data models."""

from .result import ApiFailure, ApiResponse, Result, Success, TransportFailure

__all__ = [
    "ApiFailure",
    "ApiResponse",
    "Result",
    "Success",
    "TransportFailure",
]

"""
Async Python client for the leaderbird.co leaderboard API.
"""

from .client.rest import LeaderbirdClient
from .exceptions import ApiError, LeaderbirdError, ResponseDecodeError, TransportError
from .models.result import ApiFailure, ApiResponse, Result, Success, TransportFailure
from .utils.config import Config
from .utils.formatting import add_commas, parse_error_response

__version__ = "0.1.0"

__all__ = [
    "LeaderbirdClient",
    "Config",
    "ApiResponse",
    "Result",
    "Success",
    "ApiFailure",
    "TransportFailure",
    "LeaderbirdError",
    "ApiError",
    "TransportError",
    "ResponseDecodeError",
    "add_commas",
    "parse_error_response",
]

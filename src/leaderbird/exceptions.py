"""
Exceptions raised by the Leaderbird client.
"""


class LeaderbirdError(Exception):
    """Base exception for Leaderbird client errors."""
    pass


class ApiError(LeaderbirdError):
    """Raised when the API answers with a status outside 200-399."""

    def __init__(self, response):
        self.response = response
        self.status = response.status
        super().__init__(f"API error {response.status}: {response.method} {response.url}")


class TransportError(LeaderbirdError):
    """Raised when no HTTP response could be obtained at all."""
    pass


class ResponseDecodeError(LeaderbirdError, ValueError):
    """Raised when a successful response body is not valid JSON."""

    def __init__(self, response, message: str):
        self.response = response
        super().__init__(message)

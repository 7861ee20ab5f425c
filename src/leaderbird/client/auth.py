"""Authentication and signing utilities for the Leaderbird API."""

import hashlib
import hmac
from dataclasses import dataclass, field

from ..utils.timing import get_timestamp_seconds

AUTH_HEADER = "X-Authorization"
TIMESTAMP_HEADER = "X-RequestedAt"


@dataclass(frozen=True)
class Credentials:
    """API key pair. The private key is only ever used to sign."""

    public_key: str
    private_key: str = field(repr=False)


def generate_signature(
    timestamp: int, path: str, public_key: str, private_key: str
) -> str:
    """
    Compute the request signature.

    Signature = hex(HMAC-SHA512(private_key, timestamp + path + public_key))
    Example payload: "1700000000player/registerpk_live_123"

    Args:
        timestamp: Unix timestamp in seconds
        path: Endpoint path without leading slash (e.g., "player/register")
        public_key: Public API key
        private_key: Private API key (HMAC key)

    Returns:
        Hex-encoded HMAC-SHA512 digest
    """
    payload = f"{timestamp}{path}{public_key}"
    return hmac.new(
        private_key.encode("utf-8"),
        payload.encode("utf-8"),
        hashlib.sha512,
    ).hexdigest()


def sign_request(
    credentials: Credentials, path: str, timestamp: int | None = None
) -> tuple[str, int]:
    """
    Sign a request path with a fresh timestamp.

    Args:
        credentials: Key pair to sign with
        path: Endpoint path
        timestamp: Unix timestamp in seconds (auto-generated if None)

    Returns:
        Tuple of (signature, timestamp)
    """
    if timestamp is None:
        timestamp = get_timestamp_seconds()

    signature = generate_signature(
        timestamp, path, credentials.public_key, credentials.private_key
    )
    return signature, timestamp


def get_auth_headers(
    credentials: Credentials, signature: str, timestamp: int
) -> dict[str, str]:
    """
    Get authentication headers for a signed request.

    Returns:
        Dictionary with the timestamp and authorization headers
    """
    return {
        TIMESTAMP_HEADER: str(timestamp),
        AUTH_HEADER: f"{credentials.public_key}.{signature}",
    }

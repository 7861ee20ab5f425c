"""Client modules for signed REST communication."""

from .auth import Credentials, generate_signature, sign_request
from .rest import LeaderbirdClient

__all__ = ["Credentials", "LeaderbirdClient", "generate_signature", "sign_request"]

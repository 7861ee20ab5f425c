"""Clock helpers used for request signing."""

import time


def get_timestamp_seconds() -> int:
    """Get current unix timestamp in whole seconds."""
    return int(time.time())

"""Request signing for robot webhooks with a shared secret."""

import base64
import hashlib
import hmac
import time
from urllib.parse import quote_plus


def current_millis() -> int:
    return int(time.time() * 1000)


def sign(secret: str, timestamp_ms: int) -> str:
    """
    Compute the ``sign`` query value for a signed robot request.

    HMAC-SHA256 over ``"<timestamp_ms>\\n<secret>"`` keyed with the secret,
    base64 encoded and then percent-encoded, so the result can be appended
    to a query string as-is.
    """
    string_to_sign = f"{timestamp_ms}\n{secret}"
    digest = hmac.new(
        secret.encode("utf-8"),
        string_to_sign.encode("utf-8"),
        digestmod=hashlib.sha256,
    ).digest()
    return quote_plus(base64.b64encode(digest).decode("utf-8"))

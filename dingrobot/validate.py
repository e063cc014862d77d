"""Config validation for robot endpoints."""

from typing import Optional
from urllib.parse import urlparse


def validate_webhook_url(value, field_name: str = "url") -> Optional[str]:
    """
    Validate a webhook URL.
    Returns None if valid, or an error message string if invalid.
    """
    if not isinstance(value, str) or not value:
        return f"Missing required field: {field_name}"
    try:
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https"):
            return f"{field_name} must use http or https protocol"
        if not parsed.netloc:
            return f"{field_name} is not a valid URL"
    except ValueError:
        return f"{field_name} is not a valid URL"
    return None

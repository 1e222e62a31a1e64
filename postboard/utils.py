"""
Utility functions for Postboard

Shared helpers for identifiers, timestamps and request parsing.
"""

import secrets
import uuid
from datetime import datetime, timezone
from typing import Optional


def generate_post_id() -> str:
    """Generate an opaque, URL-safe post identifier."""
    return secrets.token_hex(8)


def generate_guest_label() -> str:
    """Label for an anonymous guest session, e.g. ``Guest_1a2b3c4d``."""
    return f"Guest_{str(uuid.uuid4())[:8]}"


def utc_now() -> datetime:
    """Generate timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """
    Render a datetime as an ISO-8601 UTC string with millisecond precision.

    Args:
        value: Datetime to format (naive values are treated as UTC)

    Returns:
        String such as ``2023-09-15T10:30:00.000Z``
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 string (``Z`` suffix allowed) into an aware datetime."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def extract_bearer_token(header_value: Optional[str]) -> Optional[str]:
    """
    Pull the credential out of an ``Authorization: Bearer <token>`` header.

    Returns:
        The token, or None when the header is absent or uses another scheme
    """
    if not header_value:
        return None
    scheme, _, token = header_value.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None

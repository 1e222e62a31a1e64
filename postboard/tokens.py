"""Helpers for issuing and verifying signed session tokens."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

import jwt

from .config import DEV_SESSION_SECRET
from .utils import extract_bearer_token, format_timestamp

logger = logging.getLogger(__name__)


def _resolve_ttl(cfg: Mapping[str, Any]) -> int:
    hours = cfg.get("SESSION_LIFETIME_HOURS", 720)
    try:
        return int(hours) * 3600
    except (TypeError, ValueError):
        return 720 * 3600


def _signing_key(cfg: Mapping[str, Any]) -> str:
    secret = cfg.get("SESSION_SECRET") or DEV_SESSION_SECRET
    return secret.decode() if isinstance(secret, (bytes, bytearray)) else str(secret)


def issue_session_token(
    cfg: Mapping[str, Any],
    sub: str,
    name: Optional[str] = None,
    email: Optional[str] = None,
    provider: str = "demo",
) -> str:
    """Issue an HS256 session token for ``sub``."""
    now = int(time.time())
    payload: Dict[str, Any] = {
        "iss": cfg.get("JWT_ISSUER") or "http://localhost:5000",
        "aud": cfg.get("JWT_AUDIENCE") or "postboard",
        "sub": sub,
        "iat": now,
        "exp": now + _resolve_ttl(cfg),
        "provider": provider,
    }
    if name:
        payload["name"] = name
    if email:
        payload["email"] = email

    alg = str(cfg.get("JWT_ALGORITHM") or "HS256").upper()
    return jwt.encode(payload, _signing_key(cfg), algorithm=alg)


def verify_session_token(cfg: Mapping[str, Any], token: Optional[str]) -> Optional[Dict[str, Any]]:
    """
    Decode and verify a session token.

    Returns:
        The token claims, or None for a missing, malformed, expired or
        otherwise unverifiable token.
    """
    if not token:
        return None

    alg = str(cfg.get("JWT_ALGORITHM") or "HS256").upper()
    try:
        return jwt.decode(
            token,
            _signing_key(cfg),
            algorithms=[alg],
            audience=cfg.get("JWT_AUDIENCE") or "postboard",
            issuer=cfg.get("JWT_ISSUER") or "http://localhost:5000",
            options={"require": ["exp", "iat", "sub"]},
        )
    except jwt.InvalidTokenError as e:
        logger.debug(f"Session token rejected: {e}")
        return None


def token_expiry(claims: Mapping[str, Any]) -> Optional[str]:
    """ISO-8601 expiry of verified claims, for session payloads."""
    exp = claims.get("exp")
    if exp is None:
        return None
    return format_timestamp(datetime.fromtimestamp(int(exp), tz=timezone.utc))


def token_from_request(request, cfg: Mapping[str, Any]) -> Optional[str]:
    """Session credential from the Authorization header, else the session cookie."""
    return extract_bearer_token(request.headers.get("Authorization")) or request.cookies.get(
        cfg.get("SESSION_COOKIE_NAME") or "postboard.session-token"
    )


__all__ = ["issue_session_token", "verify_session_token", "token_expiry", "token_from_request"]

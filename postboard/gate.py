"""
Session Gate - authorization decision for the API surface.

Rules, evaluated in order:

1. Pure reads (GET, HEAD, OPTIONS) pass.
2. Requests to the authentication subsystem pass.
3. Anything else needs a valid session token; otherwise it is rejected.
4. Requests carrying a valid session pass.

A missing token and a token that fails verification produce the same
rejection.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from postboard.identity import ANONYMOUS, Identity, identity_from_claims

SAFE_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})

# Reasons reported on a decision; used for logging and auditing only.
REASON_READ = "read"
REASON_AUTH_ROUTE = "auth_route"
REASON_SESSION = "session"
REASON_NO_SESSION = "no_session"

Verifier = Callable[[Optional[str]], Optional[Dict[str, Any]]]


@dataclass(frozen=True)
class GateDecision:
    allowed: bool
    reason: str
    identity: Identity = ANONYMOUS


def path_within(path: str, prefix: str) -> bool:
    """True for ``prefix`` itself and anything beneath it."""
    prefix = prefix.rstrip("/")
    return path == prefix or path.startswith(prefix + "/")


def evaluate(
    method: str,
    path: str,
    token: Optional[str],
    verify: Verifier,
    auth_prefix: str = "/api/auth",
) -> GateDecision:
    """
    Decide whether a request may proceed to its handler.

    Args:
        method: HTTP method
        path: Request path
        token: Raw session credential, if the request carried one
        verify: Returns claims for a valid token, None otherwise
        auth_prefix: Path prefix of the authentication subsystem

    Returns:
        GateDecision; ``identity`` is resolved only when rule 3 had to check it
    """
    if method.upper() in SAFE_METHODS:
        return GateDecision(True, REASON_READ)

    if path_within(path, auth_prefix):
        return GateDecision(True, REASON_AUTH_ROUTE)

    identity = identity_from_claims(verify(token))
    if not identity.is_authenticated():
        return GateDecision(False, REASON_NO_SESSION)

    return GateDecision(True, REASON_SESSION, identity)

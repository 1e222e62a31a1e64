"""
Audit logging for Postboard.

Logs session and content events to Python's logging system under the
``audit`` logger.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Optional

_logger = logging.getLogger("audit")
_audit_logger = None  # Will be initialized by init_audit_logger


def init_audit_logger():
    """Initialize the audit logger."""
    global _audit_logger

    _logger.setLevel(logging.INFO)

    # Add console handler if not already present
    if not _logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s - AUDIT - %(levelname)s - %(message)s"))
        _logger.addHandler(handler)

    _audit_logger = AuditLogger()
    _logger.debug("Audit logger initialized")


def get_audit_logger():
    """Get the audit logger instance."""
    global _audit_logger

    if _audit_logger is None:
        init_audit_logger()
    return _audit_logger


class AuditLogger:
    """Audit logging interface for session and content events."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or _logger

    def log_event(self, event: str, **details: Any) -> None:
        """Generic structured audit event."""

        payload = {"event": event, **details, "timestamp": datetime.now(timezone.utc).isoformat()}
        self.logger.info(json.dumps(payload, default=str))

    def log_signin(self, user_id: str, provider: str, ip_address: Optional[str] = None):
        """Log a successful sign-in."""
        self.logger.info(f"SIGNIN | user={user_id} | provider={provider} | ip={ip_address}")

    def log_signout(self, user_id: Optional[str], ip_address: Optional[str] = None):
        """Log sign-out."""
        self.logger.info(f"SIGNOUT | user={user_id or '-'} | ip={ip_address}")

    def log_access_denied(self, method: str, path: str, ip_address: Optional[str] = None):
        """Log a request rejected for lack of a valid session."""
        self.logger.warning(f"ACCESS_DENIED | method={method} | path={path} | ip={ip_address}")

    def log_post_created(self, post_id: str, author: str, topic: str):
        """Log post creation."""
        self.logger.info(f"POST_CREATED | post={post_id} | author={author} | topic={topic}")

    def log_post_deleted(self, post_id: str, user_id: Optional[str]):
        """Log post removal."""
        self.logger.info(f"POST_DELETED | post={post_id} | user={user_id or '-'}")

"""
Unit tests for the Session Gate decision function.
"""

from unittest.mock import Mock

import pytest

from postboard.gate import (
    REASON_AUTH_ROUTE,
    REASON_NO_SESSION,
    REASON_READ,
    REASON_SESSION,
    evaluate,
    path_within,
)
from postboard.identity import ANONYMOUS, TokenIdentity

CLAIMS = {"sub": "demo-user-id", "name": "DemoUser"}


def _verifier(valid_token="good"):
    return Mock(side_effect=lambda token: dict(CLAIMS) if token == valid_token else None)


class TestReadRequests:
    @pytest.mark.parametrize("method", ["GET", "HEAD", "OPTIONS", "get"])
    def test_reads_pass_without_token(self, method):
        verify = _verifier()

        decision = evaluate(method, "/api/posts", None, verify)

        assert decision.allowed is True
        assert decision.reason == REASON_READ
        verify.assert_not_called()


class TestAuthRoutes:
    @pytest.mark.parametrize("path", ["/api/auth", "/api/auth/signin/demo", "/api/auth/signout"])
    def test_auth_routes_pass_without_token(self, path):
        verify = _verifier()

        decision = evaluate("POST", path, None, verify)

        assert decision.allowed is True
        assert decision.reason == REASON_AUTH_ROUTE
        verify.assert_not_called()

    def test_lookalike_prefix_is_not_auth_route(self):
        decision = evaluate("POST", "/api/authors", None, _verifier())

        assert decision.allowed is False

    def test_custom_auth_prefix(self):
        decision = evaluate("POST", "/v1/auth/signin/demo", None, _verifier(), auth_prefix="/v1/auth")

        assert decision.allowed is True


class TestProtectedRequests:
    @pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE"])
    def test_missing_token_rejected(self, method):
        decision = evaluate(method, "/api/posts", None, _verifier())

        assert decision.allowed is False
        assert decision.reason == REASON_NO_SESSION
        assert decision.identity is ANONYMOUS

    def test_invalid_token_rejected_same_as_missing(self):
        missing = evaluate("POST", "/api/posts", None, _verifier())
        invalid = evaluate("POST", "/api/posts", "forged", _verifier())

        assert missing == invalid

    def test_valid_token_allowed_with_identity(self):
        decision = evaluate("DELETE", "/api/posts", "good", _verifier())

        assert decision.allowed is True
        assert decision.reason == REASON_SESSION
        assert isinstance(decision.identity, TokenIdentity)
        assert decision.identity.display_name() == "DemoUser"


class TestPathWithin:
    @pytest.mark.parametrize(
        "path,prefix,expected",
        [
            ("/api", "/api", True),
            ("/api/posts", "/api", True),
            ("/api/posts", "/api/", True),
            ("/apix", "/api", False),
            ("/health", "/api", False),
        ],
    )
    def test_path_within(self, path, prefix, expected):
        assert path_within(path, prefix) is expected

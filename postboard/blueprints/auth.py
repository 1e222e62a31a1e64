"""
Authentication Blueprint - Sign-in, Session and Sign-out

Issues session tokens for the demo credential and anonymous guests. The
Session Gate lets every request under this blueprint through, so each route
does its own checks.
"""

import logging
from typing import Any, Dict, Mapping

from flask import Blueprint, current_app, jsonify, request

from postboard import utils
from postboard.audit_logger import get_audit_logger
from postboard.identity import identity_from_claims
from postboard.tokens import issue_session_token, token_expiry, token_from_request, verify_session_token

logger = logging.getLogger(__name__)
audit_logger = get_audit_logger()

auth_bp = Blueprint("auth", __name__)

RATE_LIMITED_ENDPOINTS = ("auth.signin_demo", "auth.signin_guest")

PROVIDERS = {
    "demo": {"id": "demo", "name": "Demo User", "type": "credentials"},
    "guest": {"id": "guest", "name": "Guest", "type": "anonymous"},
}


def _auth_rate_limit() -> str:
    return current_app.config["APP_CONFIG"]["AUTH_RATE_LIMIT"]


def apply_rate_limits(app, limiter) -> None:
    """Wrap the sign-in views with the app's own limiter."""
    for endpoint in RATE_LIMITED_ENDPOINTS:
        app.view_functions[endpoint] = limiter.limit(_auth_rate_limit)(app.view_functions[endpoint])


def _session_response(cfg: Mapping[str, Any], token: str, status: int = 200):
    """JSON session payload plus the session cookie."""
    claims = verify_session_token(cfg, token) or {}
    identity = identity_from_claims(claims)
    payload: Dict[str, Any] = {
        "token": token,
        "user": identity.to_dict(),
        "expires": token_expiry(claims),
    }
    response = jsonify(payload)
    response.status_code = status
    response.set_cookie(
        cfg["SESSION_COOKIE_NAME"],
        token,
        max_age=int(cfg["SESSION_LIFETIME_HOURS"]) * 3600,
        httponly=True,
        secure=bool(cfg.get("SECURE_COOKIES")),
        samesite="Lax",
    )
    return response


@auth_bp.route("/providers")
def providers():
    """Sign-in providers available on this deployment."""
    prefix = current_app.config["APP_CONFIG"]["API_PREFIX"]
    return jsonify({
        key: {**info, "signinUrl": f"{prefix}/auth/signin/{key}"}
        for key, info in PROVIDERS.items()
    })


@auth_bp.route("/signin/demo", methods=["POST"])
def signin_demo():
    """
    Demo credential sign-in. Always succeeds.

    Returns:
        JSON with session token, user and expiry; sets the session cookie
    """
    cfg = current_app.config["APP_CONFIG"]
    token = issue_session_token(
        cfg,
        sub=cfg["DEMO_USER_ID"],
        name=cfg["DEMO_USER_NAME"],
        email=cfg["DEMO_USER_EMAIL"],
        provider="demo",
    )
    audit_logger.log_signin(cfg["DEMO_USER_ID"], "demo", request.remote_addr)
    return _session_response(cfg, token)


@auth_bp.route("/signin/guest", methods=["POST"])
def signin_guest():
    """
    Anonymous guest sign-in.

    Returns:
        JSON with session token for a ``Guest_<id>`` label
    """
    cfg = current_app.config["APP_CONFIG"]
    label = utils.generate_guest_label()
    token = issue_session_token(cfg, sub=f"anon_{label[6:]}", name=label, provider="guest")
    audit_logger.log_signin(label, "guest", request.remote_addr)
    return _session_response(cfg, token)


@auth_bp.route("/signin/<provider>", methods=["POST"])
def signin_unknown(provider):
    return jsonify({"error": "bad_request", "message": f"Unknown provider: {provider}"}), 400


@auth_bp.route("/session")
def current_session():
    """
    Describe the caller's session.

    Returns:
        ``{"user": ..., "expires": ...}`` for a valid session, ``{}`` otherwise
    """
    cfg = current_app.config["APP_CONFIG"]
    claims = verify_session_token(cfg, token_from_request(request, cfg))
    if not claims:
        return jsonify({})
    return jsonify({
        "user": identity_from_claims(claims).to_dict(),
        "expires": token_expiry(claims),
    })


@auth_bp.route("/signout", methods=["POST"])
def signout():
    """Clear the session cookie."""
    cfg = current_app.config["APP_CONFIG"]
    claims = verify_session_token(cfg, token_from_request(request, cfg))
    audit_logger.log_signout(claims.get("sub") if claims else None, request.remote_addr)

    response = jsonify({"success": True})
    response.delete_cookie(cfg["SESSION_COOKIE_NAME"])
    return response

"""
Application Factory for Postboard

Implements the Flask application factory pattern with:
- Blueprint registration
- Security configuration (headers, rate limiting)
- Post store initialization
- Session Gate installation
- JSON error handling
"""

import logging
import random
import uuid
from typing import Any, Mapping, Optional

from flask import Flask, g, jsonify, request

from postboard import gate
from postboard.audit_logger import get_audit_logger, init_audit_logger
from postboard.config import get_config, validate_config
from postboard.errors import PostboardError, Unauthorized
from postboard.security import init_security
from postboard.seed import seed_posts
from postboard.store import PostStore
from postboard.tokens import token_from_request, verify_session_token

logger = logging.getLogger(__name__)


def create_app(config_override: Optional[Mapping[str, Any]] = None, store: Optional[PostStore] = None) -> Flask:
    """
    Create and configure the Flask application using the factory pattern.

    Args:
        config_override: Values merged over the environment configuration
        store: Pre-built post store (tests); a seeded one is created otherwise

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)

    # Load configuration
    cfg = dict(get_config())
    if config_override:
        cfg.update(config_override)
    validate_config(cfg)
    app.config["APP_CONFIG"] = cfg

    # Set Flask secret key (required for sessions)
    app.secret_key = cfg.get("FLASK_SECRET_KEY") or cfg["SESSION_SECRET"]
    app.config["SESSION_COOKIE_SECURE"] = bool(cfg.get("SECURE_COOKIES"))

    # Initialize security middleware (Talisman, rate limiting, logging)
    init_security(app, cfg)
    init_audit_logger()

    if store is None:
        store = PostStore(seed_posts() if cfg.get("SEED_POSTS", True) else (), rng=random.Random())
    app.extensions["post_store"] = store
    logger.info(f"Post store ready with {len(store)} posts")
    get_audit_logger().log_event("post_store.ready", posts=len(store))

    register_blueprints(app)
    register_error_handlers(app)
    register_request_handlers(app)

    logger.info("Application factory completed successfully")
    return app


def register_blueprints(app: Flask) -> None:
    """Register all application blueprints."""
    prefix = app.config["APP_CONFIG"]["API_PREFIX"]

    from postboard.blueprints.auth import apply_rate_limits, auth_bp
    app.register_blueprint(auth_bp, url_prefix=f"{prefix}/auth")
    apply_rate_limits(app, app.extensions["rate_limiter"])

    from postboard.blueprints.posts import posts_bp
    app.register_blueprint(posts_bp, url_prefix=f"{prefix}/posts")

    from postboard.blueprints.admin import admin_bp
    app.register_blueprint(admin_bp)

    logger.debug("All blueprints registered")


def register_error_handlers(app: Flask) -> None:
    """Register global error handlers."""

    @app.errorhandler(PostboardError)
    def domain_error(e):
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(400)
    def bad_request(e):
        return jsonify({"error": "bad_request", "message": getattr(e, "description", str(e))}), 400

    @app.errorhandler(401)
    def unauthorized(e):
        return jsonify(Unauthorized().to_dict()), 401

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "not_found", "message": "Resource not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"error": "method_not_allowed", "message": "Method not allowed"}), 405

    @app.errorhandler(429)
    def rate_limit_exceeded(e):
        return jsonify({"error": "rate_limit_exceeded", "message": getattr(e, "description", str(e))}), 429

    @app.errorhandler(500)
    def internal_error(e):
        original = getattr(e, "original_exception", None) or e
        logger.error(f"Internal server error: {original}", exc_info=original)
        return jsonify({"error": "internal_error", "message": "An unexpected error occurred"}), 500


def register_request_handlers(app: Flask) -> None:
    """Register before/after request handlers, including the Session Gate."""

    from postboard.blueprints.admin import record_request

    cfg = app.config["APP_CONFIG"]
    api_prefix = cfg["API_PREFIX"]
    auth_prefix = f"{api_prefix}/auth"
    audit_logger = get_audit_logger()

    def _verify(token):
        return verify_session_token(cfg, token)

    @app.before_request
    def assign_request_id():
        g.request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    @app.before_request
    def session_gate():
        """Reject mutating API requests that lack a valid session."""
        path = request.path or "/"
        if not gate.path_within(path, api_prefix):
            return None

        decision = gate.evaluate(
            request.method,
            path,
            token_from_request(request, cfg),
            _verify,
            auth_prefix=auth_prefix,
        )
        if not decision.allowed:
            audit_logger.log_access_denied(request.method, path, request.remote_addr)
            raise Unauthorized()

        g.identity = decision.identity
        return None

    @app.after_request
    def add_request_id(response):
        response.headers["X-Request-ID"] = g.get("request_id") or str(uuid.uuid4())
        return response

    app.after_request(record_request)

"""
Admin Blueprint - Health Checks and Metrics

Provides monitoring and operational endpoints.
"""

import logging
import time
from typing import Any, Dict

from flask import Blueprint, Response, current_app, jsonify, request
from prometheus_client import CollectorRegistry, Counter, Gauge, generate_latest

from postboard.store import current_store

logger = logging.getLogger(__name__)

admin_bp = Blueprint("admin", __name__)

_started_at = time.time()

# Prometheus metrics
registry = CollectorRegistry()
request_counter = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
    registry=registry
)
posts_gauge = Gauge(
    "posts_total",
    "Number of posts currently held in memory",
    registry=registry
)


def record_request(response):
    """after_request hook: count the request by method, endpoint and status."""
    request_counter.labels(
        method=request.method,
        endpoint=request.endpoint or "unknown",
        status=str(response.status_code),
    ).inc()
    return response


def _app_info() -> Dict[str, Any]:
    cfg = current_app.config["APP_CONFIG"]
    return {"service": cfg["APP_NAME"], "version": cfg["APP_VERSION"]}


@admin_bp.route("/health")
def health():
    """
    Health check endpoint.

    Returns:
        JSON health status with service information
    """
    try:
        health_status: Dict[str, Any] = {
            "status": "healthy",
            "timestamp": time.time(),
            **_app_info(),
            "posts": len(current_store()),
        }
        return jsonify(health_status), 200

    except Exception as e:
        logger.error(f"Health check failed: {e}", exc_info=True)
        return jsonify({
            "status": "unhealthy",
            "error": str(e),
            "timestamp": time.time()
        }), 500


@admin_bp.route("/health/live")
def liveness():
    """Liveness probe - 200 while the process is serving."""
    return jsonify({"status": "alive"}), 200


@admin_bp.route("/metrics")
def metrics_json():
    """
    JSON metrics endpoint for monitoring.

    Returns:
        JSON metrics data
    """
    store = current_store()
    return jsonify({
        "timestamp": time.time(),
        "application": {
            **_app_info(),
            "uptime": round(time.time() - _started_at, 3),
        },
        "posts": {"total": len(store)},
    }), 200


@admin_bp.route("/metrics/prometheus")
def metrics_prometheus():
    """
    Prometheus metrics endpoint.

    Returns:
        Prometheus text format metrics
    """
    try:
        posts_gauge.set(len(current_store()))
        metrics = generate_latest(registry)
        return Response(metrics, mimetype="text/plain; version=0.0.4")

    except Exception as e:
        logger.error(f"Prometheus metrics failed: {e}", exc_info=True)
        return Response(f"# Error: {e}\n", mimetype="text/plain"), 500

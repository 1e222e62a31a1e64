"""
Posts Blueprint - List, Fetch, Generate and Delete

Reads are public. Writes arrive here only after the Session Gate has
accepted the caller's session; the resolved identity is on ``g.identity``.
"""

import logging

from flask import Blueprint, g, jsonify, request

from postboard.audit_logger import get_audit_logger
from postboard.errors import ValidationError
from postboard.identity import ANONYMOUS
from postboard.store import current_store

logger = logging.getLogger(__name__)
audit_logger = get_audit_logger()

posts_bp = Blueprint("posts", __name__)


@posts_bp.route("", methods=["GET"])
def list_posts():
    """All posts, newest first."""
    return jsonify([post.to_dict() for post in current_store().list()])


@posts_bp.route("/<post_id>", methods=["GET"])
def get_post(post_id):
    """Single post by id; 404 when absent."""
    return jsonify(current_store().get(post_id).to_dict())


@posts_bp.route("", methods=["POST"])
def create_post():
    """
    Generate a new post from a topic.

    Expected JSON body:
        - topic: Non-empty subject for the post

    Returns:
        JSON of the created post
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    identity = g.get("identity", ANONYMOUS)

    post = current_store().insert(data.get("topic"), author=identity.display_name())

    audit_logger.log_post_created(post.id, post.author, post.tags[0])
    return jsonify(post.to_dict())


@posts_bp.route("", methods=["DELETE"])
def delete_post():
    """
    Delete the post named by the ``id`` query parameter.

    Returns:
        ``{"success": true}``; 400 without an id, 404 for an unknown id
    """
    post_id = request.args.get("id")
    if not post_id:
        raise ValidationError("Post ID is required")

    current_store().delete(post_id)

    identity = g.get("identity", ANONYMOUS)
    audit_logger.log_post_deleted(post_id, getattr(identity, "subject", None))
    return jsonify({"success": True})

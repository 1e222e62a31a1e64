"""In-memory post store.

Owns the authoritative sequence of posts for the lifetime of the process.
Nothing is persisted: a restart (or ``reset``) brings back the seed posts.
All mutation goes through a single re-entrant lock so concurrent requests
see a consistent, newest-first ordering.
"""

from __future__ import annotations

import logging
import random
import threading
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional

from postboard.errors import NotFound, ValidationError
from postboard.generator import generate
from postboard.models import Post
from postboard.utils import generate_post_id, utc_now

logger = logging.getLogger(__name__)

DEFAULT_AUTHOR = "Anonymous User"


class PostStore:
    """Thread-safe, newest-first collection of posts with an id index."""

    def __init__(
        self,
        seed: Iterable[Post] = (),
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = generate_post_id,
    ):
        self._seed: List[Post] = list(seed)
        self._rng = rng or random.Random()
        self._clock = clock
        self._id_factory = id_factory
        self._lock = threading.RLock()
        self._posts: List[Post] = []
        self._index: Dict[str, Post] = {}
        self.reset()

    def reset(self) -> None:
        """Discard all changes and restore the seed collection."""
        with self._lock:
            self._posts = list(self._seed)
            self._index = {post.id: post for post in self._posts}

    def list(self) -> List[Post]:
        """Snapshot of every post, newest first."""
        with self._lock:
            return list(self._posts)

    def get(self, post_id: str) -> Post:
        with self._lock:
            post = self._index.get(post_id)
        if post is None:
            raise NotFound("Post not found")
        return post

    def insert(self, topic, author: Optional[str] = None) -> Post:
        """
        Generate a post about ``topic`` and place it at the front.

        Args:
            topic: Subject of the post; surrounding whitespace is dropped
            author: Display name for attribution (defaults to ``Anonymous User``)

        Returns:
            The newly created Post

        Raises:
            ValidationError: topic missing, not a string, or blank
        """
        if not isinstance(topic, str) or not topic.strip():
            raise ValidationError("Topic is required")
        topic = topic.strip()

        with self._lock:
            body = generate(topic, self._rng)
            post = Post(
                id=self._new_id(),
                title=body.title,
                content=body.content,
                excerpt=body.excerpt,
                author=author or DEFAULT_AUTHOR,
                created_at=self._clock(),
                read_time=body.read_time,
                tags=body.tags,
                image_url=body.image_url,
            )
            self._posts.insert(0, post)
            self._index[post.id] = post

        logger.info(f"Post created: id={post.id}, topic={topic!r}, author={post.author!r}")
        return post

    def delete(self, post_id: str) -> Post:
        """
        Remove the post with ``post_id``.

        Returns:
            The removed Post

        Raises:
            NotFound: no post carries that id
        """
        with self._lock:
            post = self._index.pop(post_id, None)
            if post is None:
                raise NotFound("Post not found")
            self._posts.remove(post)

        logger.info(f"Post deleted: id={post_id}")
        return post

    def _new_id(self) -> str:
        # Caller holds the lock.
        post_id = self._id_factory()
        while post_id in self._index:
            post_id = self._id_factory()
        return post_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._posts)

    def __contains__(self, post_id: object) -> bool:
        with self._lock:
            return post_id in self._index


def current_store() -> PostStore:
    """The post store owned by the active Flask application."""
    from flask import current_app

    return current_app.extensions["post_store"]

"""
Data model for Postboard.

A single entity: the blog Post. Records are immutable once created; the
store adds or removes them, never edits them in place.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Tuple

from postboard.utils import format_timestamp


@dataclass(frozen=True)
class Post:
    """
    Blog article record.

    ``tags`` keeps creation order; ``content`` is markdown-like text.
    """

    id: str
    title: str
    content: str
    excerpt: str
    author: str
    created_at: datetime
    read_time: int
    tags: Tuple[str, ...]
    image_url: str

    def to_dict(self) -> Dict[str, Any]:
        """JSON representation using the API's camelCase field names."""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "excerpt": self.excerpt,
            "author": self.author,
            "createdAt": format_timestamp(self.created_at),
            "readTime": self.read_time,
            "tags": list(self.tags),
            "imageUrl": self.image_url,
        }

"""
Unit tests for the synthetic content generator.
"""

import random

import pytest

from postboard.generator import (
    IMAGE_URLS,
    MAX_READ_TIME,
    MIN_READ_TIME,
    TAG_VOCABULARY,
    TITLE_PHRASES,
    generate,
    pick_tags,
)


class TestGenerate:
    """Shape of generated post bodies."""

    def test_title_is_topic_plus_phrase(self):
        body = generate("Rust", random.Random(7))

        assert body.title.startswith("Rust ")
        assert body.title[len("Rust "):] in TITLE_PHRASES

    def test_content_interpolates_topic_and_title(self):
        body = generate("Rust", random.Random(7))

        assert body.content.startswith(f"# {body.title}\n")
        assert "## Introduction" in body.content
        assert "## Key Concepts" in body.content
        assert "- The core principles that drive Rust" in body.content
        assert "## Conclusion" in body.content
        # Outline is dedented: no leading indentation on headings
        assert "\n## Best Practices\n" in body.content

    def test_excerpt_template(self):
        body = generate("Kubernetes", random.Random(1))

        assert body.excerpt == (
            "Explore the fascinating world of Kubernetes and discover insights "
            "that can transform your understanding."
        )

    def test_read_time_within_bounds(self):
        rng = random.Random(99)
        times = {generate("Go", rng).read_time for _ in range(300)}

        assert min(times) >= MIN_READ_TIME
        assert max(times) <= MAX_READ_TIME
        assert times == set(range(MIN_READ_TIME, MAX_READ_TIME + 1))

    def test_image_from_fixed_list(self):
        rng = random.Random(3)
        for _ in range(50):
            assert generate("Go", rng).image_url in IMAGE_URLS

    def test_same_seed_same_output(self):
        assert generate("Python", random.Random(42)) == generate("Python", random.Random(42))

    def test_topic_with_braces_is_literal(self):
        body = generate("{title}", random.Random(5))

        assert "Explore the fascinating world of {title}" in body.excerpt
        assert body.tags[0] == "{title}"


class TestPickTags:
    """Tag selection rules."""

    @pytest.mark.parametrize("seed", range(25))
    def test_topic_first_then_two_to_four_distinct(self, seed):
        tags = pick_tags("Rust", random.Random(seed))

        assert tags[0] == "Rust"
        extra = tags[1:]
        assert 2 <= len(extra) <= 4
        assert len(set(extra)) == len(extra)
        assert all(tag in TAG_VOCABULARY for tag in extra)

    @pytest.mark.parametrize("seed", range(25))
    def test_vocabulary_entry_matching_topic_not_repeated(self, seed):
        tags = pick_tags("ai", random.Random(seed))

        assert tags[0] == "ai"
        assert "AI" not in tags[1:]

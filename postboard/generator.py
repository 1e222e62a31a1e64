"""
Synthetic content generator.

Stands in for a real text-generation backend: given a topic it fills a fixed
markdown outline and draws title phrase, tags, read time and cover image from
static lists. The random source is passed in so callers control seeding.
"""

import random
import textwrap
from dataclasses import dataclass
from typing import List, Tuple

TITLE_PHRASES = (
    "Guide: Everything You Need to Know",
    "Essentials for Beginners",
    "Advanced Techniques and Strategies",
    "The Future Trends to Watch",
    "Common Myths Debunked",
    "How To Master the Fundamentals",
    "Surprising Facts You Didn't Know",
    "The Ultimate Resource",
    "Best Practices for 2023",
    "A Comprehensive Overview",
)

TAG_VOCABULARY = (
    "Technology",
    "Development",
    "Programming",
    "Design",
    "UX",
    "Frontend",
    "Backend",
    "AI",
    "Machine Learning",
    "Data Science",
    "Web Development",
    "Mobile",
    "Cloud Computing",
    "DevOps",
    "Agile",
    "Business",
    "Career",
)

_UNSPLASH_PARAMS = (
    "ixlib=rb-4.0.3&ixid=M3wxMjA3fDB8MHxwaG90by1wYWdlfHx8fGVufDB8fHx8fA%3D%3D&auto=format&fit=crop"
)

IMAGE_URLS = (
    f"https://images.unsplash.com/photo-1593720213428-28a5b9e94613?{_UNSPLASH_PARAMS}&w=1470&q=80",
    f"https://images.unsplash.com/photo-1555066931-4365d14bab8c?{_UNSPLASH_PARAMS}&w=1470&q=80",
    f"https://images.unsplash.com/photo-1485827404703-89b55fcc595e?{_UNSPLASH_PARAMS}&w=1470&q=80",
    f"https://images.unsplash.com/photo-1581276879432-15e50529f34b?{_UNSPLASH_PARAMS}&w=1470&q=80",
    f"https://images.unsplash.com/photo-1550439062-609e1531270e?{_UNSPLASH_PARAMS}&w=1470&q=80",
    f"https://images.unsplash.com/photo-1587620962725-abab7fe55159?{_UNSPLASH_PARAMS}&w=1631&q=80",
)

MIN_READ_TIME = 3
MAX_READ_TIME = 12
MIN_EXTRA_TAGS = 2
MAX_EXTRA_TAGS = 4

EXCERPT_TEMPLATE = (
    "Explore the fascinating world of {topic} and discover insights that can transform your understanding."
)

CONTENT_TEMPLATE = textwrap.dedent(
    """\
    # {title}

    This is an AI-generated blog post about {topic}. Let's explore this fascinating subject together.

    ## Introduction

    {topic} is a rapidly evolving field with immense potential. Whether you're a beginner or an expert, there's always something new to learn.

    ## Key Concepts

    When diving into {topic}, it's important to understand these fundamental concepts:

    - The core principles that drive {topic}
    - How {topic} is applied in different contexts
    - The evolution of {topic} over time
    - Current trends and future directions

    ## Practical Applications

    {topic} can be applied in various ways:

    1. Improving efficiency in daily operations
    2. Solving complex problems that were previously insurmountable
    3. Creating new opportunities for innovation and growth
    4. Enhancing user experiences across different platforms

    ## Case Studies

    Let's look at some examples of {topic} in action:

    ### Example 1: Industry Transformation

    Many industries have been revolutionized by implementing {topic} in their core processes.

    ### Example 2: Startup Success

    Startups that leverage {topic} effectively often see accelerated growth and competitive advantages.

    ## Best Practices

    To make the most of {topic}, consider these best practices:

    - Start with a clear understanding of your goals
    - Continuously learn and adapt as the field evolves
    - Collaborate with experts and communities
    - Measure and analyze your results

    ## Conclusion

    {topic} offers tremendous opportunities for those willing to explore and master it. By understanding its core principles and applying best practices, you can leverage {topic} to achieve remarkable results.
    """
)


@dataclass(frozen=True)
class GeneratedContent:
    """Body fields of a generated post; identity and timestamps are added by the store."""

    title: str
    content: str
    excerpt: str
    read_time: int
    tags: Tuple[str, ...]
    image_url: str


def pick_tags(topic: str, rng: random.Random) -> Tuple[str, ...]:
    """
    Topic first, then 2-4 distinct vocabulary tags.

    Vocabulary entries equal to the topic (ignoring case) are skipped so a
    post never carries the same label twice.
    """
    lowered = topic.lower()
    candidates: List[str] = [tag for tag in TAG_VOCABULARY if tag.lower() != lowered]
    count = rng.randint(MIN_EXTRA_TAGS, MAX_EXTRA_TAGS)
    return (topic, *rng.sample(candidates, count))


def generate(topic: str, rng: random.Random) -> GeneratedContent:
    """
    Produce templated post fields for ``topic``.

    Args:
        topic: Already-trimmed, non-empty topic
        rng: Random source; pass a seeded ``random.Random`` for reproducible output

    Returns:
        GeneratedContent with title, markdown body, excerpt, read time, tags and image
    """
    title = f"{topic} {rng.choice(TITLE_PHRASES)}"
    return GeneratedContent(
        title=title,
        content=CONTENT_TEMPLATE.format(title=title, topic=topic),
        excerpt=EXCERPT_TEMPLATE.format(topic=topic),
        read_time=rng.randint(MIN_READ_TIME, MAX_READ_TIME),
        tags=pick_tags(topic, rng),
        image_url=rng.choice(IMAGE_URLS),
    )

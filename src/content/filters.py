"""
Post Lookup and Filtering.

Read-only helpers for consumers of the published blog data. Nothing here
changes the data; every function returns existing model objects.

Filter Criteria (matches_filters):
    - category: Category name the post must carry (case-insensitive)
    - tags: List of tags to include (OR logic - post matches if ANY tag matches)
    - exclude_tags: List of tags to exclude (takes precedence over tags)

Tag and category comparisons ignore case, so "mysql" matches "MySQL".

Usage:
    >>> filters = {"category": "Backend Strategy", "tags": ["redis", "mysql"]}
    >>> posts = filter_posts(BLOG_DATA, filters)
"""
import logging
from typing import Any, Dict, Optional, Tuple

from .models import BlogData, BlogPost, Category


logger = logging.getLogger(__name__)


def _normalized_tags(post: BlogPost) -> set:
    return {tag.lower() for tag in post.tags}


def get_post_by_slug(data: BlogData, slug: str) -> Optional[BlogPost]:
    """Return the first post with the given slug, or None."""
    return next((post for post in data.blogs if post.slug == slug), None)


def get_post_by_id(data: BlogData, post_id: str) -> Optional[BlogPost]:
    """Return the first post with the given id, or None."""
    return next((post for post in data.blogs if post.id == post_id), None)


def get_category(data: BlogData, category_id: str) -> Optional[Category]:
    """Return the category with the given id, or None."""
    return next((category for category in data.categories if category.id == category_id), None)


def matches_filters(post: BlogPost, filters: Dict[str, Any]) -> bool:
    """Check if a post matches the specified filters.

    Filter Logic:
        - Empty filters ({}) match all posts
        - exclude_tags takes precedence over tags
        - All specified filter criteria must match (AND logic)
        - Within tags filter, ANY tag can match (OR logic)

    Args:
        post: Blog post to check
        filters: Dictionary of filter criteria

    Returns:
        True if the post matches all filter criteria, False otherwise

    Example:
        >>> matches_filters(post, {"tags": ["Redis"], "exclude_tags": ["draft"]})
        True
    """
    if not filters:
        return True

    post_tags = _normalized_tags(post)

    exclude_tags = filters.get('exclude_tags', [])
    if exclude_tags:
        if any(tag.lower() in post_tags for tag in exclude_tags):
            logger.debug(f"Post '{post.id}' excluded by exclude_tags filter: {exclude_tags}")
            return False

    tags_filter = filters.get('tags', [])
    if tags_filter:
        if not any(tag.lower() in post_tags for tag in tags_filter):
            logger.debug(f"Post '{post.id}' does not match tags filter: {tags_filter}")
            return False

    category_filter = filters.get('category')
    if category_filter:
        if post.category.lower() != category_filter.lower():
            logger.debug(f"Post '{post.id}' category '{post.category}' does not match filter: {category_filter}")
            return False

    return True


def filter_posts(data: BlogData, filters: Dict[str, Any]) -> Tuple[BlogPost, ...]:
    """Return the posts matching filters, in their published order."""
    return tuple(post for post in data.blogs if matches_filters(post, filters))


def posts_for_category(data: BlogData, category_id: str) -> Tuple[BlogPost, ...]:
    """Return the posts filed under a category, looked up by category id.

    A post belongs to a category when its free-text ``category`` equals the
    category's ``name``.

    Returns:
        Matching posts in published order; empty when the id is unknown
    """
    category = get_category(data, category_id)
    if category is None:
        logger.debug(f"Unknown category id: {category_id}")
        return ()
    return filter_posts(data, {"category": category.name})

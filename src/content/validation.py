"""
Blog Data Validation.

Two layers of checks run before blog content is published:

1. Schema validation (``validate_blog_data_payload``): the raw payload is
   checked against BLOG_DATA_SCHEMA with jsonschema. This covers required
   fields, field types, the four block kinds, heading levels and color format.

2. Conformance checks (``check_blog_data``): rules JSON Schema cannot express
   on its own, run against the typed models:
   - post ids and slugs are non-empty and unique
   - every post has at least one content block
   - headings use level 2 or 3
   - list blocks hold at least one item, all strings
   - code blocks carry a string language and string code
   - category ids are unique and colors match #RRGGBB
   - (strict mode) every post category names a known category

Usage:
    >>> validate_blog_data_payload(raw)        # raises on schema failure
    >>> problems = check_blog_data(blog_data)  # [] when conforming
"""
import logging
import re
from typing import Any, Dict, List

from jsonschema import Draft7Validator

from schema import BLOG_DATA_SCHEMA

from .errors import BlogDataValidationError
from .models import BLOCK_TYPES, BlogData, CodeBlock, Heading, ListBlock

logger = logging.getLogger(__name__)

HEX_COLOR_PATTERN = re.compile(r'#[0-9a-fA-F]{6}')
HEADING_LEVELS = (2, 3)

validator = Draft7Validator(BLOG_DATA_SCHEMA)


def _format_path(path) -> str:
    return ".".join(str(p) for p in path) or "<root>"


def validate_blog_data_payload(payload: Dict[str, Any]) -> None:
    """Validate a raw blog payload against the JSON schema.

    Every schema violation is collected, not just the first one, so a broken
    content file can be fixed in a single pass.

    Args:
        payload: Parsed JSON payload with "blogs" and "categories"

    Raises:
        BlogDataValidationError: If the payload violates the schema. Each
            problem reads "<message> at path: <dotted.path>".

    Example:
        >>> validate_blog_data_payload({"blogs": []})
        BlogDataValidationError: Blog data failed validation: 'categories' is a required property at path: <root>
    """
    errors = sorted(validator.iter_errors(payload), key=lambda e: _format_path(e.path))
    if errors:
        problems = [f"{e.message} at path: {_format_path(e.path)}" for e in errors]
        raise BlogDataValidationError(problems)


def check_blog_data(data: BlogData, strict_categories: bool = False) -> List[str]:
    """Check typed blog data for problems the schema cannot catch.

    Args:
        data: Loaded blog data
        strict_categories: When True, a post whose category is not the name of
            any listed category is a problem. When False it is only logged.

    Returns:
        List of human-readable problems, empty when the data conforms
    """
    problems: List[str] = []

    seen_ids = set()
    seen_slugs = set()
    for index, post in enumerate(data.blogs):
        label = f"blogs[{index}]"

        if not post.id:
            problems.append(f"{label}: id must be a non-empty string")
        elif post.id in seen_ids:
            problems.append(f"{label}: duplicate post id '{post.id}'")
        seen_ids.add(post.id)

        if not post.slug:
            problems.append(f"{label}: slug must be a non-empty string")
        elif post.slug in seen_slugs:
            problems.append(f"{label}: duplicate slug '{post.slug}'")
        seen_slugs.add(post.slug)

        if not post.content:
            problems.append(f"{label}: content must contain at least one block")

        for block_index, block in enumerate(post.content):
            problems.extend(
                f"{label}.content[{block_index}]: {detail}"
                for detail in _check_block(block)
            )

    seen_category_ids = set()
    for index, category in enumerate(data.categories):
        label = f"categories[{index}]"
        if category.id in seen_category_ids:
            problems.append(f"{label}: duplicate category id '{category.id}'")
        seen_category_ids.add(category.id)
        if not isinstance(category.color, str) or not HEX_COLOR_PATTERN.fullmatch(category.color):
            problems.append(f"{label}: color {category.color!r} is not a #RRGGBB hex color")

    category_names = set(data.category_names())
    for index, post in enumerate(data.blogs):
        if post.category in category_names:
            continue
        if strict_categories:
            problems.append(f"blogs[{index}]: category '{post.category}' is not a known category name")
        else:
            logger.warning(f"Post '{post.id}' uses category '{post.category}' which is not in the category list")

    return problems


def _check_block(block) -> List[str]:
    """Return problems for a single typed content block."""
    if type(block) not in BLOCK_TYPES.values():
        return [f"unsupported block kind {type(block).__name__}"]

    if isinstance(block, Heading):
        if type(block.level) is not int or block.level not in HEADING_LEVELS:
            return [f"heading level {block.level!r} must be the integer 2 or 3"]
    elif isinstance(block, ListBlock):
        if not block.items:
            return ["list must contain at least one item"]
        if not all(isinstance(item, str) for item in block.items):
            return ["list items must all be strings"]
    elif isinstance(block, CodeBlock):
        errors = []
        if not isinstance(block.language, str):
            errors.append("code block language must be a string")
        if not isinstance(block.code, str):
            errors.append("code block code must be a string")
        return errors

    return []

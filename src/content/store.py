"""
Content Store.

Holds the blog payload and publishes it as an immutable value. The bundled
payload (blog_data.json, next to this module) is loaded once, at import
time, into the BLOG_DATA constant. Consumers import the constant, or call
get_blog_data(), instead of reading a process-wide global.

Loading Pipeline (load_blog_data):
    1. Read and parse the JSON file
    2. Validate the raw payload against BLOG_DATA_SCHEMA
    3. Build the typed, frozen models
    4. Run the conformance checks (unique ids/slugs, colors, ...)
    5. Return the BlogData, or raise with every problem found

Nothing is published from a payload that fails any step.

Usage:
    >>> from content import BLOG_DATA
    >>> BLOG_DATA.post_count
    2
    >>> custom = load_blog_data("/srv/site/blog_data.json", strict_categories=True)
"""
import json
import logging
from pathlib import Path
from typing import Optional, Union

from .errors import BlogDataError, BlogDataValidationError
from .models import BlogData
from .validation import check_blog_data, validate_blog_data_payload

logger = logging.getLogger(__name__)

CONTENT_DIR = Path(__file__).parent
BUNDLED_CONTENT_PATH = CONTENT_DIR / "blog_data.json"


def load_blog_data(path: Optional[Union[str, Path]] = None, strict_categories: bool = False) -> BlogData:
    """Load, validate and freeze a blog payload file.

    Args:
        path: Payload JSON file. None loads the bundled blog_data.json.
        strict_categories: Treat a post category missing from the category
            list as a validation problem instead of a logged warning.

    Returns:
        Immutable BlogData

    Raises:
        FileNotFoundError: If the payload file doesn't exist
        BlogDataError: If the file is not valid JSON or a record is malformed
        BlogDataValidationError: If schema or conformance checks fail
    """
    content_path = Path(path) if path is not None else BUNDLED_CONTENT_PATH

    if not content_path.exists():
        raise FileNotFoundError(f"Blog data file not found: {content_path}")

    try:
        with open(content_path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        raise BlogDataError(
            f"Invalid JSON in blog data file {content_path}: {e.msg} (line {e.lineno}, column {e.colno})"
        ) from e

    validate_blog_data_payload(payload)
    blog_data = BlogData.from_dict(payload)

    problems = check_blog_data(blog_data, strict_categories=strict_categories)
    if problems:
        for problem in problems:
            logger.error(f"Blog data problem in {content_path}: {problem}")
        raise BlogDataValidationError(problems)

    logger.debug(
        f"Loaded {blog_data.post_count} post(s) and {len(blog_data.categories)} "
        f"category(ies) from {content_path}"
    )
    return blog_data


# Bundled payload, published once at import
BLOG_DATA = load_blog_data()


def get_blog_data() -> BlogData:
    """Return the bundled blog data.

    Same object as the BLOG_DATA constant; no extra I/O.
    """
    return BLOG_DATA

"""Schema Package - JSON Schema Loading.

Loads the JSON schema describing the published blog payload once, at
import time, and exposes it as a module-level constant.

Available Schemas:
    BLOG_DATA_SCHEMA: JSON Schema (Draft 7) for the blog payload
        Validates the "blogs" and "categories" arrays and every content
        block kind (paragraph, heading, list, code).

Usage Patterns:
    # Direct import (most common):
    from schema import BLOG_DATA_SCHEMA
    validate(instance=payload, schema=BLOG_DATA_SCHEMA)

    # Function-based access (for dynamic use):
    from schema import get_blog_data_schema
    schema = get_blog_data_schema()

Error Handling:
    A missing or invalid schema file makes the import fail with a message
    pointing to the expected file location.
"""
from .schema import BLOG_DATA_SCHEMA, get_blog_data_schema

__all__ = ["BLOG_DATA_SCHEMA", "get_blog_data_schema"]

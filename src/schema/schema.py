"""
Centralized JSON Schema Loading Module.

Loads the blog data JSON schema from disk once, at import time, and exposes
it as a module-level constant.

Design Principles:
    1. Load Once: the schema is read when this module is imported
    2. Fail Fast: a missing or unparseable schema file breaks the import
    3. Single Source: all schema access goes through this module

File Location:
    Schema files live next to this module (src/schema/). Paths are resolved
    from __file__, so loading works from any working directory.

Error Handling:
    - FileNotFoundError: schema file doesn't exist at the expected path
    - json.JSONDecodeError: schema file contains invalid JSON
"""
import json
from pathlib import Path
from typing import Dict, Any

SCHEMA_DIR = Path(__file__).parent


def _load_schema(schema_filename: str) -> Dict[str, Any]:
    """
    Load a JSON schema file from the schema directory.

    Args:
        schema_filename: Name of the JSON schema file (e.g., "blog_data_schema.json")

    Returns:
        Parsed JSON schema as a dictionary, ready for use with jsonschema

    Raises:
        FileNotFoundError: If the schema file doesn't exist. The message names
            both the full path checked and the schema directory.
        json.JSONDecodeError: If the file is not valid JSON. The message names
            the file and keeps the original position information.

    Example:
        >>> schema = _load_schema("blog_data_schema.json")
        >>> schema["$schema"]
        'http://json-schema.org/draft-07/schema#'
    """
    schema_path = SCHEMA_DIR / schema_filename

    if not schema_path.exists():
        raise FileNotFoundError(
            f"Schema file not found: {schema_path}. "
            f"Expected location: {SCHEMA_DIR}"
        )

    try:
        with open(schema_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise json.JSONDecodeError(
            f"Invalid JSON in schema file {schema_filename}: {e.msg}",
            e.doc,
            e.pos
        ) from e


# Blog Data Schema
# JSON Schema (Draft 7) for the published payload: the "blogs" and
# "categories" arrays, the four content block kinds, heading levels 2-3
# and #RRGGBB category colors
BLOG_DATA_SCHEMA = _load_schema("blog_data_schema.json")


def get_blog_data_schema() -> Dict[str, Any]:
    """
    Get the blog data JSON schema.

    Returns the same object as the BLOG_DATA_SCHEMA constant; no extra I/O.
    Useful for dynamic schema selection and for patching in tests.

    Returns:
        Blog data JSON schema as a dictionary

    Example:
        >>> schema = get_blog_data_schema()
        >>> schema["required"]
        ['blogs', 'categories']
    """
    return BLOG_DATA_SCHEMA

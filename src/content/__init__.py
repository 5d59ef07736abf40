"""Content Package - the Blog Content Store.

Holds the site's blog posts and categories as immutable, typed data.

The bundled payload is loaded and validated once, when this package is
imported, and published as the BLOG_DATA constant. A consumer (the read API,
a page renderer) iterates ``BLOG_DATA.blogs`` for listings and post pages,
dispatches each post's ``content`` blocks on their class, and iterates
``BLOG_DATA.categories`` for navigation.

Exported Names:
    BLOG_DATA: The bundled BlogData, loaded at import
    get_blog_data: Function access to BLOG_DATA
    load_blog_data: Load and validate any payload file
    check_blog_data: Conformance checks returning a problem list
    validate_blog_data_payload: JSON Schema validation of a raw payload
    BlogData, BlogPost, Category: Record models
    Paragraph, Heading, ListBlock, CodeBlock, Block, parse_block: Content blocks
    BlogDataError, BlogDataValidationError, UnsupportedBlockError: Errors
"""
from .errors import BlogDataError, BlogDataValidationError, UnsupportedBlockError
from .models import (
    Block,
    BlogData,
    BlogPost,
    Category,
    CodeBlock,
    Heading,
    ListBlock,
    Paragraph,
    parse_block,
)
from .validation import check_blog_data, validate_blog_data_payload
from .store import BLOG_DATA, get_blog_data, load_blog_data

__all__ = [
    "BLOG_DATA",
    "get_blog_data",
    "load_blog_data",
    "check_blog_data",
    "validate_blog_data_payload",
    "Block",
    "BlogData",
    "BlogPost",
    "Category",
    "CodeBlock",
    "Heading",
    "ListBlock",
    "Paragraph",
    "parse_block",
    "BlogDataError",
    "BlogDataValidationError",
    "UnsupportedBlockError",
]

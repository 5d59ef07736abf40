"""Exceptions raised while loading and checking blog content."""
from typing import List, Optional


class BlogDataError(Exception):
    """Base error for malformed or unreadable blog content."""
    pass


class UnsupportedBlockError(BlogDataError):
    """Raised when a content block carries an unknown ``type``.

    Attributes:
        kind: The unrecognized block type (None when the key is missing)
    """

    def __init__(self, kind: Optional[str], message: Optional[str] = None):
        self.kind = kind
        super().__init__(message or f"Unsupported content block type: {kind!r}")


class BlogDataValidationError(BlogDataError):
    """Raised when blog content fails schema or conformance validation.

    Attributes:
        problems: Every problem found, in the order it was detected

    Example:
        >>> load_blog_data("broken.json")
        BlogDataValidationError: Blog data failed validation: duplicate post id 'intro'
    """

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        summary = "; ".join(self.problems) if self.problems else "unknown problem"
        super().__init__(f"Blog data failed validation: {summary}")

"""
Typed Content Models.

Immutable representations of the blog payload. A payload is a mapping with
two ordered lists, ``blogs`` and ``categories``; every post body is an ordered
list of content blocks tagged by ``type``.

Block Kinds:
    paragraph: {"type": "paragraph", "text": str}
    heading:   {"type": "heading", "level": 2 | 3, "text": str}
    list:      {"type": "list", "items": [str, ...]}
    code:      {"type": "code", "language": str, "code": str}

Each kind has its own frozen dataclass. ``parse_block`` is the only place that
maps a raw ``type`` to a class, and it raises ``UnsupportedBlockError`` for any
kind it does not know, so an unrecognized block can never reach a consumer.

Payload keys are camelCase (``authorImage``, ``readTime``); attributes are
snake_case. ``to_dict()`` on every model reproduces the payload shape exactly.

Usage:
    >>> post = BlogPost.from_dict(raw_post)
    >>> for block in post.content:
    ...     if isinstance(block, Heading):
    ...         print(block.level, block.text)
"""
from dataclasses import dataclass
import datetime
from typing import Any, ClassVar, Dict, Iterator, Tuple, Type, Union

from .errors import BlogDataError, UnsupportedBlockError


def _require(raw: Dict[str, Any], key: str, context: str) -> Any:
    """Return raw[key] or raise BlogDataError naming the missing field."""
    if not isinstance(raw, dict):
        raise BlogDataError(f"{context} must be an object, got {type(raw).__name__}")
    try:
        return raw[key]
    except KeyError:
        raise BlogDataError(f"{context} is missing required field '{key}'") from None


@dataclass(frozen=True)
class Paragraph:
    text: str

    kind: ClassVar[str] = "paragraph"

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Paragraph":
        return cls(text=_require(raw, "text", "paragraph block"))

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "text": self.text}


@dataclass(frozen=True)
class Heading:
    level: int
    text: str

    kind: ClassVar[str] = "heading"

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Heading":
        return cls(
            level=_require(raw, "level", "heading block"),
            text=_require(raw, "text", "heading block"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "level": self.level, "text": self.text}


@dataclass(frozen=True)
class ListBlock:
    items: Tuple[str, ...]

    kind: ClassVar[str] = "list"

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "ListBlock":
        return cls(items=tuple(_require(raw, "items", "list block")))

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "items": list(self.items)}


@dataclass(frozen=True)
class CodeBlock:
    language: str
    code: str

    kind: ClassVar[str] = "code"

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "CodeBlock":
        return cls(
            language=_require(raw, "language", "code block"),
            code=_require(raw, "code", "code block"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "language": self.language, "code": self.code}


Block = Union[Paragraph, Heading, ListBlock, CodeBlock]

BLOCK_TYPES: Dict[str, Type[Block]] = {
    block_cls.kind: block_cls
    for block_cls in (Paragraph, Heading, ListBlock, CodeBlock)
}


def parse_block(raw: Dict[str, Any]) -> Block:
    """Build the typed block for a raw content block.

    Args:
        raw: Block mapping with a ``type`` key

    Returns:
        Paragraph, Heading, ListBlock or CodeBlock instance

    Raises:
        UnsupportedBlockError: If ``type`` is missing or not a known kind
        BlogDataError: If a field required by the kind is missing

    Example:
        >>> parse_block({"type": "heading", "level": 2, "text": "Intro"})
        Heading(level=2, text='Intro')
        >>> parse_block({"type": "video", "src": "a.mp4"})
        UnsupportedBlockError: Unsupported content block type: 'video'
    """
    kind = raw.get("type") if isinstance(raw, dict) else None
    block_cls = BLOCK_TYPES.get(kind) if isinstance(kind, str) else None
    if block_cls is None:
        raise UnsupportedBlockError(kind)
    return block_cls.from_dict(raw)


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    color: str

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Category":
        return cls(
            id=_require(raw, "id", "category"),
            name=_require(raw, "name", "category"),
            color=_require(raw, "color", "category"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "color": self.color}


@dataclass(frozen=True)
class BlogPost:
    """A single blog post with its metadata and ordered body blocks."""

    id: str
    slug: str
    title: str
    subtitle: str
    author: str
    author_image: str
    date: datetime.date
    read_time: str
    category: str
    tags: Tuple[str, ...]
    featured_image: str
    excerpt: str
    content: Tuple[Block, ...]

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "BlogPost":
        """Build a post from its payload mapping.

        Raises:
            BlogDataError: On a missing field or a date not in YYYY-MM-DD form
            UnsupportedBlockError: If any content block has an unknown type
        """
        post_id = _require(raw, "id", "blog post")
        context = f"blog post '{post_id}'"

        raw_date = _require(raw, "date", context)
        try:
            published = datetime.date.fromisoformat(raw_date)
        except (TypeError, ValueError):
            raise BlogDataError(f"{context} has invalid date {raw_date!r}") from None

        return cls(
            id=post_id,
            slug=_require(raw, "slug", context),
            title=_require(raw, "title", context),
            subtitle=_require(raw, "subtitle", context),
            author=_require(raw, "author", context),
            author_image=_require(raw, "authorImage", context),
            date=published,
            read_time=_require(raw, "readTime", context),
            category=_require(raw, "category", context),
            tags=tuple(_require(raw, "tags", context)),
            featured_image=_require(raw, "featuredImage", context),
            excerpt=_require(raw, "excerpt", context),
            content=tuple(parse_block(block) for block in _require(raw, "content", context)),
        )

    def to_summary(self) -> Dict[str, Any]:
        """Return the post metadata without its body, for listings."""
        return {
            "id": self.id,
            "slug": self.slug,
            "title": self.title,
            "subtitle": self.subtitle,
            "author": self.author,
            "authorImage": self.author_image,
            "date": self.date.isoformat(),
            "readTime": self.read_time,
            "category": self.category,
            "tags": list(self.tags),
            "featuredImage": self.featured_image,
            "excerpt": self.excerpt,
        }

    def to_dict(self) -> Dict[str, Any]:
        data = self.to_summary()
        data["content"] = [block.to_dict() for block in self.content]
        return data


@dataclass(frozen=True)
class BlogData:
    """The complete published payload: posts and categories, both ordered."""

    blogs: Tuple[BlogPost, ...]
    categories: Tuple[Category, ...]

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "BlogData":
        return cls(
            blogs=tuple(BlogPost.from_dict(post) for post in _require(raw, "blogs", "blog data")),
            categories=tuple(
                Category.from_dict(category) for category in _require(raw, "categories", "blog data")
            ),
        )

    @property
    def post_count(self) -> int:
        return len(self.blogs)

    def __iter__(self) -> Iterator[BlogPost]:
        return iter(self.blogs)

    def __len__(self) -> int:
        return len(self.blogs)

    def category_names(self) -> Tuple[str, ...]:
        return tuple(category.name for category in self.categories)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "blogs": [post.to_dict() for post in self.blogs],
            "categories": [category.to_dict() for category in self.categories],
        }

"""Post loading for robowager's blog."""

from .api import (
    get_all_posts,
    get_all_slugs,
    get_filename_from_slug,
    get_friendly_date,
    get_post_from_slug,
    get_slug_from_filename,
    markdown_to_html,
    parse_front_matter,
    render_markdown,
)
from .errors import (
    BlogError,
    DirectoryNotFoundError,
    MetadataParseError,
    PostNotFoundError,
    PostReadError,
    RenderError,
)
from .models import Post

__all__ = [
    "Post",
    "BlogError",
    "DirectoryNotFoundError",
    "MetadataParseError",
    "PostNotFoundError",
    "PostReadError",
    "RenderError",
    "get_all_posts",
    "get_all_slugs",
    "get_filename_from_slug",
    "get_friendly_date",
    "get_post_from_slug",
    "get_slug_from_filename",
    "markdown_to_html",
    "parse_front_matter",
    "render_markdown",
]

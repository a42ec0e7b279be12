import datetime
import logging
import pathlib
import re

import markdown
import yaml

from . import config
from .errors import (
    DirectoryNotFoundError,
    MetadataParseError,
    PostNotFoundError,
    PostReadError,
    RenderError,
)
from .models import Post

logger = logging.getLogger(__name__)

FRONT_MATTER_BOUNDARY_RE = re.compile(r"^-{3}[ \t\r]*$", re.MULTILINE)
REQUIRED_FIELDS = ("title", "date")


def _posts_dir(posts_dir=None) -> pathlib.Path:
    return pathlib.Path(posts_dir) if posts_dir is not None else config.POSTS_DIR


def get_slug_from_filename(filename: str) -> str:
    """Slug, the identifier of a post, for a post filename."""
    if filename.endswith(config.POST_EXTENSION):
        return filename[: -len(config.POST_EXTENSION)]
    return filename


def get_filename_from_slug(slug: str) -> str:
    """Inverse of get_slug_from_filename."""
    return f"{slug}{config.POST_EXTENSION}"


def get_filepath_from_slug(slug: str, posts_dir=None) -> pathlib.Path:
    return _posts_dir(posts_dir) / get_filename_from_slug(slug)


def get_friendly_date(date: datetime.date) -> str:
    """Date as YYYY-MM-DD."""
    return date.isoformat()


def parse_front_matter(text: str):
    """Split a leading YAML front matter block from the markdown body.

    Returns ``(metadata, body)``. Text that does not open with ``---`` has no
    front matter and comes back whole with empty metadata.
    """
    stripped = text.lstrip()
    if not FRONT_MATTER_BOUNDARY_RE.match(stripped):
        return {}, text
    parts = FRONT_MATTER_BOUNDARY_RE.split(stripped, 2)
    if len(parts) < 3:
        raise MetadataParseError("front matter block is not closed with '---'")
    _, front, body = parts
    try:
        meta = yaml.safe_load(front)
    except yaml.YAMLError as e:
        raise MetadataParseError(f"invalid YAML in front matter: {e}") from e
    if meta is None:
        meta = {}
    if not isinstance(meta, dict):
        raise MetadataParseError(
            f"front matter must be a mapping, got {type(meta).__name__}"
        )
    # drop the newline that terminated the closing boundary
    if body.startswith("\n"):
        body = body[1:]
    return meta, body


def render_markdown(markdown_text: str) -> str:
    """Markdown body converted to HTML."""
    try:
        return markdown.markdown(
            markdown_text,
            extensions=config.MARKDOWN_EXTENSIONS,
            extension_configs=config.MARKDOWN_EXTENSION_CONFIGS,
        )
    except Exception as e:
        raise RenderError(f"markdown rendering failed: {e}") from e


markdown_to_html = render_markdown


def _coerce_date(value, path) -> datetime.date:
    if isinstance(value, str):
        try:
            value = datetime.datetime.fromisoformat(value.strip())
        except ValueError as e:
            raise MetadataParseError(f"invalid date {value!r}", path) from e
    if isinstance(value, datetime.datetime):
        # the calendar day is taken in UTC for aware datetimes
        if value.tzinfo is not None:
            value = value.astimezone(datetime.timezone.utc)
        return value.date()
    if isinstance(value, datetime.date):
        return value
    raise MetadataParseError(f"invalid date {value!r}", path)


def _validate_metadata(meta: dict, path):
    missing = [name for name in REQUIRED_FIELDS if meta.get(name) is None]
    if missing:
        raise MetadataParseError(
            f"missing required front matter field(s): {', '.join(missing)}", path
        )
    title = meta["title"]
    if not isinstance(title, str) or not title.strip():
        raise MetadataParseError(f"title must be a non-empty string, got {title!r}", path)
    return title, _coerce_date(meta["date"], path)


def get_post_from_slug(slug: str, posts_dir=None) -> Post:
    """Read, parse and render the post stored under ``slug``."""
    path = get_filepath_from_slug(slug, posts_dir)
    if not path.is_file():
        raise PostNotFoundError(slug, path)
    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MetadataParseError(f"not valid UTF-8: {e}", path) from e
    except OSError as e:
        raise PostReadError(slug, path, e) from e

    try:
        meta, body = parse_front_matter(raw)
    except MetadataParseError as e:
        raise MetadataParseError(str(e), path) from e
    title, date = _validate_metadata(meta, path)

    post = Post(
        slug=slug,
        title=title,
        date=date,
        friendly_date=get_friendly_date(date),
        content=body,
        content_html=render_markdown(body),
    )
    logger.debug(f"Loaded post '{slug}' ({post.friendly_date})")
    return post


def get_post_filenames(posts_dir=None):
    """Post filenames in the posts directory, in filename order."""
    directory = _posts_dir(posts_dir)
    if not directory.is_dir():
        raise DirectoryNotFoundError(f"Posts directory not found: {directory}")
    return [
        path.name
        for path in sorted(directory.glob(f"*{config.POST_EXTENSION}"))
        if path.is_file()
    ]


def get_all_slugs(posts_dir=None):
    """List of all post slugs."""
    return [get_slug_from_filename(name) for name in get_post_filenames(posts_dir)]


def get_all_posts(posts_dir=None):
    """All posts, newest first.

    Posts sharing a date keep filename order. Any failure loading a single
    post propagates and aborts the whole listing.
    """
    posts = [get_post_from_slug(slug, posts_dir) for slug in get_all_slugs(posts_dir)]
    posts.sort(key=lambda p: p.date, reverse=True)
    logger.info(f"Loaded {len(posts)} posts from {_posts_dir(posts_dir)}")
    return posts

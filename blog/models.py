"""Post record shared by the loader and the site build."""

import datetime
from dataclasses import dataclass


@dataclass(frozen=True)
class Post:
    """A single post, built once per build and never mutated."""
    slug: str
    title: str
    date: datetime.date
    friendly_date: str
    # markdown source, front matter excluded
    content: str
    content_html: str

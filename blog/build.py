"""Static site build: render every post and the index page to HTML files."""

import html
import logging
import pathlib
import shutil
import sys

from . import config
from .api import get_all_posts
from .errors import BlogError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = pathlib.Path(__file__).resolve().parent / "templates"
INDEX_TEMPLATE_FILE = TEMPLATES_DIR / "index_template.html"
POST_TEMPLATE_FILE = TEMPLATES_DIR / "post_template.html"


def _load_template(path: pathlib.Path) -> str:
    with path.open("r", encoding="utf-8") as f:
        return f.read()


def render_index(posts, template=None) -> str:
    if template is None:
        template = _load_template(INDEX_TEMPLATE_FILE)
    items = "\n".join(
        f'      <li><a href="posts/{html.escape(post.slug)}.html">'
        f"{post.friendly_date}: {html.escape(post.title)}</a></li>"
        for post in posts
    )
    return (
        template
        .replace("{{site_title}}", html.escape(config.SITE_TITLE))
        .replace("{{description}}", html.escape(config.SITE_DESCRIPTION))
        .replace("{{home}}", "index.html")
        .replace("{{posts}}", items)
    )


def render_post(post, template=None) -> str:
    if template is None:
        template = _load_template(POST_TEMPLATE_FILE)
    # content_html goes in last so text inside it is never treated as a placeholder
    return (
        template
        .replace("{{description}}", html.escape(config.SITE_DESCRIPTION))
        .replace("{{home}}", "../index.html")
        .replace("{{title}}", html.escape(post.title))
        .replace("{{date}}", post.friendly_date)
        .replace("{{content}}", post.content_html)
    )


def build(posts_dir=None, output_dir=None):
    """Write index.html and posts/<slug>.html, returning the written paths."""
    output_dir = pathlib.Path(output_dir) if output_dir is not None else config.OUTPUT_DIR
    posts = get_all_posts(posts_dir)

    post_template = _load_template(POST_TEMPLATE_FILE)
    index_template = _load_template(INDEX_TEMPLATE_FILE)

    # pages of deleted posts must not survive a rebuild
    post_dir = output_dir / "posts"
    if post_dir.exists():
        shutil.rmtree(post_dir)
    post_dir.mkdir(parents=True)

    written = []
    for post in posts:
        out_path = post_dir / f"{post.slug}.html"
        out_path.write_text(render_post(post, post_template), encoding="utf-8")
        logger.info(f"Wrote {out_path}")
        written.append(out_path)

    index_path = output_dir / "index.html"
    index_path.write_text(render_index(posts, index_template), encoding="utf-8")
    logger.info(f"Wrote {index_path}")
    written.append(index_path)
    return written


def main():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        build()
    except BlogError as e:
        logger.error(f"Build failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

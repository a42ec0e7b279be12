import os
import pathlib

ROOT = pathlib.Path(__file__).resolve().parent.parent

POSTS_DIR = pathlib.Path(os.environ.get("BLOG_POSTS_DIR", ROOT / "_posts"))
OUTPUT_DIR = pathlib.Path(os.environ.get("BLOG_OUTPUT_DIR", ROOT / "out"))
LOG_LEVEL: str = os.environ.get("BLOG_LOG_LEVEL", "INFO")

POST_EXTENSION = ".md"

MARKDOWN_EXTENSIONS = [
    "fenced_code",
    "tables",
    "toc",
    "pymdownx.arithmatex",
]
MARKDOWN_EXTENSION_CONFIGS = {
    "pymdownx.arithmatex": {
        "generic": True,
    }
}

SITE_TITLE = "robowager's blog"
SITE_DESCRIPTION = "Notes of an armchair roboticist"

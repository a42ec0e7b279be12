"""Exceptions raised while loading posts."""


class BlogError(Exception):
    """Base class for every post loading failure."""


class DirectoryNotFoundError(BlogError, FileNotFoundError):
    """The posts directory is missing or is not a directory."""


class PostNotFoundError(BlogError, FileNotFoundError):
    def __init__(self, slug, path):
        super().__init__(f"No post file for slug '{slug}' ({path})")
        self.slug = slug
        self.path = path


class MetadataParseError(BlogError, ValueError):
    def __init__(self, message, path=None):
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)
        self.path = path


class RenderError(BlogError):
    """Markdown could not be converted to HTML."""


class PostReadError(BlogError, OSError):
    def __init__(self, slug, path, reason):
        super().__init__(f"Could not read post '{slug}' ({path}): {reason}")
        self.slug = slug
        self.path = path

import re

_INVALID_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def slugify(title: str) -> str:
    """Turn a title into a URL-friendly slug, e.g. "My Talk!" -> "my-talk"."""
    slug = title.lower().strip()
    slug = _INVALID_CHARS.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    return _HYPHENS.sub("-", slug)

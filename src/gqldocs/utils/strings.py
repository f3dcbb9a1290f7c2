"""String helpers for URL-friendly names."""

import re

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str | None) -> str:
    """Convert text to a URL-friendly slug.

    Splits camelCase words, lowercases, replaces runs of anything other
    than ASCII letters and digits with a hyphen and trims hyphens.

    Examples:
        slugify("getUser")          -> "get-user"
        slugify("User Management")  -> "user-management"
        slugify('get"User#1')       -> "get-user-1"
    """
    if not text:
        return ""
    slug = _CAMEL_BOUNDARY.sub(r"\1-\2", text).lower()
    slug = _NON_ALNUM.sub("-", slug)
    return slug.strip("-")

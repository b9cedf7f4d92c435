"""Slug and identifier generation."""

import secrets
import string

from slugify import slugify

ID_ALPHABET = string.ascii_letters + string.digits + "_-"
SLUG_ALPHABET = string.ascii_lowercase + string.digits


def generate_id(size: int = 21, alphabet: str = ID_ALPHABET) -> str:
    """Generate a URL-safe random identifier."""
    return "".join(secrets.choice(alphabet) for _ in range(size))


def make_slug(title: str) -> str:
    """Transliterate a title to a lowercase hyphenated ASCII slug.

    Titles that contain nothing transliterable (only punctuation or symbols)
    get a random slug instead of an empty one.
    """
    slug = slugify(title or "", lowercase=True)
    return slug or generate_id(8, SLUG_ALPHABET)


def with_suffix(slug: str) -> str:
    """Disambiguate a slug with a short random suffix."""
    return f"{slug}-{generate_id(8, SLUG_ALPHABET)}"

"""URL-safe slugs for column names."""
import re
import unicodedata

FALLBACK_SLUG = "column"

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def to_slug(value: str) -> str:
    """Lowercase, strip diacritics, collapse everything else to single hyphens."""
    normalized = unicodedata.normalize("NFKD", value or "")
    ascii_only = normalized.encode("ascii", "ignore").decode("ascii")
    return _NON_ALNUM.sub("-", ascii_only.lower()).strip("-")


def slug_candidates(name: str):
    """Yield base, base-2, base-3, ... forever."""
    base = to_slug(name) or FALLBACK_SLUG
    yield base
    suffix = 2
    while True:
        yield f"{base}-{suffix}"
        suffix += 1

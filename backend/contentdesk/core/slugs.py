"""Slug Generator — text to URL-safe identifier.

Invariants:
    - slugify() never raises and never returns an empty string
    - Default output matches ^[a-z0-9]+(-[a-z0-9]+)*$
    - Unusable input (None, blank, non-text) yields post-<epoch-millis>-<7 base36 chars>
    - Idempotent: slugify(slugify(x)) == slugify(x) for default options

Design Decisions:
    - NFKD + ASCII fold before stripping, so accented titles keep their letters
      ("Café" -> "cafe") instead of losing them
    - bool is rejected as unusable even though it is an int subclass
"""

import re
import secrets
import string
import time
import unicodedata
from dataclasses import dataclass

FALLBACK_PREFIX = "post"
FALLBACK_SUFFIX_LENGTH = 7

STOP_WORDS: tuple[str, ...] = (
    "the", "a", "an", "and", "or", "but", "in",
    "on", "at", "to", "for", "of", "with", "by",
)

_BASE36 = string.digits + string.ascii_lowercase
_STOP_WORDS_RE = re.compile(
    r"\b(?:" + "|".join(STOP_WORDS) + r")\b", re.IGNORECASE,
)
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class SlugOptions:
    """Knobs for slugify(). Defaults produce lowercase, hyphen-separated slugs."""
    lowercase: bool = True
    separator: str = "-"
    remove_stop_words: bool = False


DEFAULT_OPTIONS = SlugOptions()


def fallback_slug() -> str:
    """Timestamp + random suffix identifier for titles that yield nothing."""
    millis = time.time_ns() // 1_000_000
    suffix = "".join(
        secrets.choice(_BASE36) for _ in range(FALLBACK_SUFFIX_LENGTH)
    )
    return f"{FALLBACK_PREFIX}-{millis}-{suffix}"


def _coerce_text(text: object) -> str | None:
    if isinstance(text, bool):
        return None
    if isinstance(text, str):
        return text
    if isinstance(text, (int, float)):
        return str(text)
    return None


def _to_ascii(text: str) -> str:
    return (
        unicodedata.normalize("NFKD", text)
        .encode("ascii", "ignore")
        .decode("ascii")
    )


def slugify(text: object, options: SlugOptions | None = None) -> str:
    """Convert arbitrary text into a URL-safe slug.

    Falls back to fallback_slug() when the input is unusable or when nothing
    survives normalization.
    """
    opts = options or DEFAULT_OPTIONS
    sep = opts.separator or "-"

    raw = _coerce_text(text)
    if raw is None:
        return fallback_slug()
    slug = raw.strip()
    if not slug:
        return fallback_slug()

    if opts.remove_stop_words:
        slug = _STOP_WORDS_RE.sub("", slug)
    if opts.lowercase:
        slug = slug.lower()

    escaped = re.escape(sep)
    slug = _to_ascii(slug)
    slug = re.sub(rf"[^A-Za-z0-9\s{escaped}]", "", slug)
    slug = _WHITESPACE_RE.sub(sep, slug)
    slug = re.sub(rf"(?:{escaped})+", sep, slug)
    slug = slug.strip(sep)

    return slug or fallback_slug()


def with_timestamp_suffix(slug: str, separator: str = "-") -> str:
    """Append epoch millis; used when a store rejects a freshly resolved slug."""
    return f"{slug}{separator}{time.time_ns() // 1_000_000}"

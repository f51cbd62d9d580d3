"""Uniqueness Resolver — turns a title into a slug unused in one collection.

Invariants:
    - Returns slugify(title) when the checker reports it free
    - Otherwise returns the first free <base>-1, <base>-2, ... (counter strictly increases)
    - Only read-only checker calls; checker exceptions propagate unchanged

Design Decisions:
    - Async because the checker does IO; slug text itself comes from core/slugs.py
    - Concurrent writers can still pick the same candidate: ResourceService
      retries the write on a unique-index rejection
"""

from contentdesk.core.repository_protocols import SlugExistenceChecker
from contentdesk.core.slugs import DEFAULT_OPTIONS, SlugOptions, slugify


async def resolve_unique_slug(
    title: object,
    checker: SlugExistenceChecker,
    options: SlugOptions | None = None,
) -> str:
    """Compute a collection-unique slug for `title`."""
    opts = options or DEFAULT_OPTIONS
    base = slugify(title, opts)
    sep = opts.separator or "-"
    candidate = base
    counter = 1
    while await checker.exists(candidate):
        candidate = f"{base}{sep}{counter}"
        counter += 1
    return candidate

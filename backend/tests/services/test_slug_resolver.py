"""Uniqueness Resolver — collision counter over an existence checker.

Tests:
    - Free base slug returned unchanged
    - Collisions append -1, -2, ... in order
    - Checker exceptions propagate unchanged
    - Options (separator) flow through to the counter suffix; empty means "-"
"""

from unittest.mock import AsyncMock

import pytest

from contentdesk.core.slugs import SlugOptions
from contentdesk.services.slug_resolver import resolve_unique_slug


class _SetChecker:
    def __init__(self, taken):
        self.taken = set(taken)
        self.calls = []

    async def exists(self, candidate):
        self.calls.append(candidate)
        return candidate in self.taken


async def test_free_slug_returned():
    checker = _SetChecker([])
    assert await resolve_unique_slug("Hello World", checker) == "hello-world"
    assert checker.calls == ["hello-world"]


async def test_first_collision_gets_counter_one():
    checker = _SetChecker(["hello-world"])
    assert await resolve_unique_slug("Hello World", checker) == "hello-world-1"


async def test_counter_increases_until_free():
    checker = _SetChecker(["hello-world", "hello-world-1", "hello-world-2"])
    assert await resolve_unique_slug("Hello World", checker) == "hello-world-3"
    assert checker.calls == [
        "hello-world", "hello-world-1", "hello-world-2", "hello-world-3",
    ]


async def test_custom_separator_used_for_counter():
    checker = _SetChecker(["hello_world"])
    slug = await resolve_unique_slug(
        "Hello World", checker, SlugOptions(separator="_"),
    )
    assert slug == "hello_world_1"


async def test_empty_separator_falls_back_to_hyphen_for_counter():
    checker = _SetChecker(["annual-report"])
    slug = await resolve_unique_slug(
        "Annual Report", checker, SlugOptions(separator=""),
    )
    assert slug == "annual-report-1"


async def test_unusable_title_still_resolves():
    checker = AsyncMock()
    checker.exists.return_value = False
    slug = await resolve_unique_slug(None, checker)
    assert slug.startswith("post-")
    checker.exists.assert_awaited_once_with(slug)


async def test_checker_errors_propagate():
    checker = AsyncMock()
    checker.exists.side_effect = ConnectionError("store down")
    with pytest.raises(ConnectionError, match="store down"):
        await resolve_unique_slug("Hello", checker)

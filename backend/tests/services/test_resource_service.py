"""Resource Facade — list/get/create/update/delete against a real SQLite session.

Tests:
    - Slug resolved on create; duplicates get -1, -2
    - Rename re-resolves the slug, ignoring the row itself; unchanged title keeps it
    - Filters are allow-listed and type-coerced; bad values raise InvalidFieldError
    - Search, sort, pagination and limit clamping
    - Unique-index race retried with a timestamp suffix, then SlugConflictError
    - Rename races retried the same way; other IntegrityErrors propagate
"""

import re
import uuid

import pytest
from sqlalchemy.exc import IntegrityError

from contentdesk.core.errors import (
    InvalidFieldError, ResourceNotFoundError, SlugConflictError,
)
from contentdesk.services.publication_service import PublicationService
from contentdesk.services.report_service import ReportService


def _publication(title, **overrides):
    data = {
        "title": title,
        "type": "guide",
        "description": f"{title} description",
    }
    data.update(overrides)
    return data


@pytest.fixture
def publications(test_db, settings):
    return PublicationService(test_db, settings=settings)


@pytest.fixture
def reports(test_db, settings):
    return ReportService(test_db, settings=settings)


# ==============================================================================
# Slugs
# ==============================================================================

async def test_create_assigns_slug(publications):
    row = await publications.create(_publication("Field Guide to Wetlands"))
    assert row.slug == "field-guide-to-wetlands"
    assert isinstance(row.id, uuid.UUID)


async def test_duplicate_titles_get_counters(publications):
    first = await publications.create(_publication("Annual Review"))
    second = await publications.create(_publication("Annual Review"))
    third = await publications.create(_publication("Annual Review!"))
    assert [first.slug, second.slug, third.slug] == [
        "annual-review", "annual-review-1", "annual-review-2",
    ]


async def test_same_title_in_other_collection_does_not_collide(publications, reports):
    await publications.create(_publication("Impact 2024"))
    report = await reports.create({
        "title": "Impact 2024", "type": "impact", "year": 2024,
        "description": "Yearly impact numbers",
    })
    assert report.slug == "impact-2024"


async def test_rename_resolves_new_slug(publications):
    row = await publications.create(_publication("Old Name"))
    updated = await publications.update(row.id, {"title": "New Name"})
    assert updated.slug == "new-name"


async def test_rename_to_equivalent_title_keeps_own_slug(publications):
    row = await publications.create(_publication("Hello World"))
    updated = await publications.update(row.id, {"title": "Hello, World!"})
    assert updated.slug == "hello-world"


async def test_rename_onto_taken_slug_gets_counter(publications):
    await publications.create(_publication("Taken"))
    row = await publications.create(_publication("Free"))
    updated = await publications.update(row.id, {"title": "Taken"})
    assert updated.slug == "taken-1"


async def test_update_without_title_keeps_slug(publications):
    row = await publications.create(_publication("Stable"))
    updated = await publications.update(row.id, {"description": "changed"})
    assert updated.slug == "stable"
    assert updated.description == "changed"


async def test_store_race_retried_with_timestamp_suffix(publications, monkeypatch):
    await publications.create(_publication("Contested"))

    async def stale_resolver(title, checker, options=None):
        return "contested"

    monkeypatch.setattr(
        "contentdesk.services.resource_service.resolve_unique_slug", stale_resolver,
    )
    row = await publications.create(_publication("Contested"))
    assert re.match(r"^contested-\d{13,}$", row.slug)


async def test_store_race_exhausted_raises_conflict(publications, monkeypatch):
    await publications.create(_publication("Contested"))

    async def stale_resolver(title, checker, options=None):
        return "contested"

    monkeypatch.setattr(
        "contentdesk.services.resource_service.resolve_unique_slug", stale_resolver,
    )
    monkeypatch.setattr(
        "contentdesk.services.resource_service.with_timestamp_suffix",
        lambda slug: slug,
    )
    with pytest.raises(SlugConflictError) as exc_info:
        await publications.create(_publication("Contested"))
    assert exc_info.value.http_status == 409


async def test_rename_race_retried_with_timestamp_suffix(publications, monkeypatch):
    await publications.create(_publication("Taken"))
    row = await publications.create(_publication("Free"))

    async def stale_resolver(title, checker, options=None):
        return "taken"

    monkeypatch.setattr(
        "contentdesk.services.resource_service.resolve_unique_slug", stale_resolver,
    )
    updated = await publications.update(row.id, {"title": "Taken"})
    assert re.match(r"^taken-\d{13,}$", updated.slug)
    assert updated.title == "Taken"


async def test_non_slug_integrity_error_propagates(publications):
    with pytest.raises(IntegrityError):
        await publications.create(
            {"title": "No Type", "description": None, "type": "guide"},
        )
    # session is usable again after the rollback
    row = await publications.create(_publication("No Type"))
    assert row.slug == "no-type"


# ==============================================================================
# Reads
# ==============================================================================

async def test_get_by_slug_and_id(publications):
    row = await publications.create(_publication("Lookup Me"))
    assert (await publications.get("lookup-me")).id == row.id
    assert (await publications.get(str(row.id))).id == row.id


async def test_get_missing_raises_not_found(publications):
    with pytest.raises(ResourceNotFoundError, match="Publication not found"):
        await publications.get("does-not-exist")


async def test_update_missing_raises_not_found(publications):
    with pytest.raises(ResourceNotFoundError):
        await publications.update(uuid.uuid4(), {"title": "x"})


async def test_delete(publications):
    row = await publications.create(_publication("Short Lived"))
    await publications.delete(row.id)
    with pytest.raises(ResourceNotFoundError):
        await publications.get_by_id(row.id)


async def test_delete_missing_raises_not_found(publications):
    with pytest.raises(ResourceNotFoundError):
        await publications.delete(uuid.uuid4())


# ==============================================================================
# Listing
# ==============================================================================

async def _seed(publications):
    await publications.create(_publication("Alpha", type="book", is_free=False))
    await publications.create(_publication("Beta", type="guide"))
    await publications.create(_publication("Gamma", type="toolkit"))
    await publications.create(_publication("Delta", type="book", language="French"))


async def test_list_sorted_by_title(publications):
    await _seed(publications)
    page = await publications.list({"sort": "title"})
    assert [r.title for r in page.items] == ["Alpha", "Beta", "Delta", "Gamma"]
    assert page.total == 4


async def test_list_descending_sort(publications):
    await _seed(publications)
    page = await publications.list({"sort": "-title"})
    assert page.items[0].title == "Gamma"


async def test_unknown_sort_field_ignored(publications):
    await _seed(publications)
    page = await publications.list({"sort": "nope,title"})
    assert [r.title for r in page.items][:2] == ["Alpha", "Beta"]


async def test_filter_scalar(publications):
    await _seed(publications)
    page = await publications.list({"type": "book", "sort": "title"})
    assert [r.title for r in page.items] == ["Alpha", "Delta"]


async def test_filter_membership(publications):
    await _seed(publications)
    page = await publications.list({"type": "guide,toolkit", "sort": "title"})
    assert [r.title for r in page.items] == ["Beta", "Gamma"]


async def test_filter_bool_coerced(publications):
    await _seed(publications)
    page = await publications.list({"isFree": "false"})
    assert [r.title for r in page.items] == ["Alpha"]


async def test_filter_outside_allow_list_ignored(publications):
    await _seed(publications)
    page = await publications.list({"title": "Alpha"})
    assert page.total == 4


async def test_invalid_filter_value_raises(publications):
    with pytest.raises(InvalidFieldError) as exc_info:
        await publications.list({"type": "magazine"})
    assert exc_info.value.http_status == 400


async def test_blank_filter_values_ignored(publications):
    await _seed(publications)
    assert (await publications.list({"type": ""})).total == 4
    assert (await publications.list({"type": "  ", "isFree": ""})).total == 4
    assert (await publications.list({"type": ","})).total == 4


async def test_search_matches_case_insensitively(publications):
    await _seed(publications)
    page = await publications.list({"search": "GAMMA"})
    assert [r.title for r in page.items] == ["Gamma"]


async def test_search_with_like_wildcards_is_literal(publications):
    await _seed(publications)
    page = await publications.list({"search": "%"})
    assert page.total == 0


async def test_pagination(publications):
    await _seed(publications)
    page = await publications.list({"sort": "title", "page": "2", "limit": "3"})
    assert [r.title for r in page.items] == ["Gamma"]
    assert (page.page, page.pages, page.has_next, page.has_prev) == (2, 2, False, True)


async def test_limit_clamped_to_max(publications):
    page = await publications.list({"limit": "500"})
    assert page.limit == 50


async def test_invalid_paging_params_use_defaults(publications):
    page = await publications.list({"page": "zero", "limit": "-2"})
    assert (page.page, page.limit) == (1, 10)


async def test_int_filter_coerced(reports):
    for year in (2022, 2023):
        await reports.create({
            "title": f"Report {year}", "type": "annual", "year": year,
            "description": "Summary",
        })
    page = await reports.list({"year": "2023"})
    assert [r.year for r in page.items] == [2023]
    with pytest.raises(InvalidFieldError):
        await reports.list({"year": "last"})


async def test_download_counter(publications):
    row = await publications.create(_publication("Downloadable"))
    await publications.record_download(row.id)
    row = await publications.record_download(row.id)
    assert row.download_count == 2

"""Unit tests for page requests and pages."""

import pytest

from project_core import Err, Ok

from app.models.model_page import (
    Page,
    PageRequest,
    SortDirection,
    SortOrder,
    parse_page_request,
)


def parse(items):
    return parse_page_request(items, default_size=20, max_size=100)


@pytest.mark.unit
class TestParsePageRequest:
    def test_defaults(self):
        assert parse([]) == Ok(PageRequest(page=0, size=20, sort=()))

    def test_page_and_size(self):
        assert parse([("page", "3"), ("size", "5")]) == Ok(PageRequest(page=3, size=5))

    @pytest.mark.parametrize(
        ("items", "expected"),
        [
            ([("page", "-1")], PageRequest(page=0, size=20)),
            ([("page", "x")], PageRequest(page=0, size=20)),
            ([("size", "0")], PageRequest(page=0, size=20)),
            ([("size", "500")], PageRequest(page=0, size=100)),
            # OFFSET (page * size) stays within a signed 64-bit integer.
            (
                [("page", "99999999999999999999"), ("size", "10")],
                PageRequest(page=(2**63 - 1) // 10, size=10),
            ),
        ],
    )
    def test_lenient_page_and_size(self, items, expected):
        assert parse(items) == Ok(expected)

    def test_sort(self):
        result = parse([("sort", "name,desc"), ("sort", "id")])

        assert result == Ok(PageRequest(sort=(
            SortOrder("name", SortDirection.DESC),
            SortOrder("id", SortDirection.ASC),
        )))

    def test_sort_direction_applies_to_every_property(self):
        result = parse([("sort", "name,id,DESC")])

        assert result == Ok(PageRequest(sort=(
            SortOrder("name", SortDirection.DESC),
            SortOrder("id", SortDirection.DESC),
        )))

    def test_sort_without_property_is_rejected(self):
        assert isinstance(parse([("sort", "desc")]), Err)


@pytest.mark.unit
class TestPage:
    def test_metadata(self):
        page = Page(content=[1, 2], total_elements=5, page=1, size=2)

        assert page.total_pages == 3
        assert page.has_next
        assert page.has_previous

    def test_empty_page(self):
        page = Page(content=[], total_elements=0, page=0, size=20)

        assert page.total_pages == 0
        assert not page.has_next
        assert not page.has_previous

    def test_offset(self):
        assert PageRequest(page=3, size=10).offset == 30


@pytest.mark.unit
def test_clamped_page_offset_fits_64_bits():
    result = parse([("page", "99999999999999999999"), ("size", "7")])

    assert isinstance(result, Ok)
    assert result.value.offset <= 2**63 - 1

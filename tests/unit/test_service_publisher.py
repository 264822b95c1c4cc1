"""Unit tests for the publisher command and query services.

Services run against the per-test in-memory SQLite session.
"""

import pytest

from project_core import Err, Ok

from app.errors import PublisherErrorCode
from app.models.model_criteria import LongFilter, PublisherCriteria, StringFilter
from app.models.model_io_publisher import PublisherDTO
from app.models.model_page import PageRequest, SortDirection, SortOrder
from app.services.service_publisher import PublisherService
from app.services.service_publisher_query import PublisherQueryService


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def service(db_session):
    return PublisherService(db_session)


@pytest.fixture
def query_service(db_session):
    return PublisherQueryService(db_session)


@pytest.fixture
def seeded(service):
    names = ["Penguin", "HarperCollins", "Macmillan", "Penguin Random House", "100% Books"]
    return [service.save(PublisherDTO(name=name)) for name in names]


# =============================================================================
# Command service
# =============================================================================


@pytest.mark.unit
class TestPublisherService:
    def test_save_assigns_id(self, service):
        saved = service.save(PublisherDTO(name="Penguin"))

        assert saved.id is not None
        assert saved.name == "Penguin"

    def test_find_one(self, service):
        saved = service.save(PublisherDTO(name="Penguin"))

        assert service.find_one(saved.id) == saved
        assert service.find_one(saved.id + 100) is None

    def test_update_existing(self, service):
        saved = service.save(PublisherDTO(name="Penguin"))

        result = service.update(PublisherDTO(id=saved.id, name="Penguin Books"))

        assert result == Ok(PublisherDTO(id=saved.id, name="Penguin Books"))
        assert service.find_one(saved.id).name == "Penguin Books"

    def test_update_unknown_id(self, service):
        result = service.update(PublisherDTO(id=77, name="Ghost"))

        assert isinstance(result, Err)
        assert result.error.code is PublisherErrorCode.ID_NOT_FOUND
        assert service.find_one(77) is None

    def test_update_without_id(self, service):
        result = service.update(PublisherDTO(name="Ghost"))

        assert isinstance(result, Err)
        assert result.error.code is PublisherErrorCode.ID_NULL

    def test_delete_is_idempotent(self, service):
        saved = service.save(PublisherDTO(name="Penguin"))

        service.delete(saved.id)
        service.delete(saved.id)

        assert service.find_one(saved.id) is None


# =============================================================================
# Query service
# =============================================================================


@pytest.mark.unit
class TestPublisherQueryService:
    def find(self, query_service, criteria, page_request=None):
        result = query_service.find_by_criteria(criteria, page_request or PageRequest())
        assert isinstance(result, Ok)
        return result.value

    def test_no_criteria_returns_everything(self, query_service, seeded):
        page = self.find(query_service, PublisherCriteria())

        assert page.content == seeded
        assert page.total_elements == 5

    def test_contains_escapes_wildcards(self, query_service, seeded):
        criteria = PublisherCriteria(name=StringFilter(contains="100%"))

        page = self.find(query_service, criteria)

        assert [p.name for p in page.content] == ["100% Books"]

    def test_specified_false_matches_nothing_for_required_field(self, query_service, seeded):
        criteria = PublisherCriteria(name=StringFilter(specified=False))

        assert self.find(query_service, criteria).content == []
        assert query_service.count_by_criteria(criteria) == 0

    def test_range_and_not_in(self, query_service, seeded):
        criteria = PublisherCriteria(
            id=LongFilter(greater_than_or_equal=2, less_than=5, not_in=(3,)),
        )

        page = self.find(query_service, criteria)

        assert [p.id for p in page.content] == [2, 4]

    def test_pagination_and_sort(self, query_service, seeded):
        request = PageRequest(
            page=1,
            size=2,
            sort=(SortOrder("name", SortDirection.ASC),),
        )

        page = self.find(query_service, PublisherCriteria(), request)

        # "100% Books" < "HarperCollins" < "Macmillan" < "Penguin" < "Penguin Random House"
        assert [p.name for p in page.content] == ["Macmillan", "Penguin"]
        assert page.total_elements == 5
        assert page.total_pages == 3

    def test_unknown_sort_property(self, query_service, seeded):
        request = PageRequest(sort=(SortOrder("founded"),))

        result = query_service.find_by_criteria(PublisherCriteria(), request)

        assert isinstance(result, Err)
        assert result.error.code is PublisherErrorCode.INVALID_QUERY

    def test_distinct_does_not_change_count(self, query_service, seeded):
        criteria = PublisherCriteria(name=StringFilter(contains="Penguin"), distinct=True)

        assert query_service.count_by_criteria(criteria) == 2
        assert self.find(query_service, criteria).total_elements == 2

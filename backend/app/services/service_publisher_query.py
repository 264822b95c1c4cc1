import logging
from typing import Any, Final

from sqlalchemy import func, select
from sqlalchemy.orm import InstrumentedAttribute, Session

from project_core import Err, Ok

from app.errors import PublisherResult
from app.models.model_criteria import PublisherCriteria
from app.models.model_db_publisher import Publisher
from app.models.model_io_publisher import PublisherDTO
from app.models.model_page import Page, PageRequest
from app.services.service_criteria import build_order_by, build_where_clauses


logger = logging.getLogger(__name__)


# 필터/정렬에 쓸 수 있는 필드 → 컬럼
# Filterable/sortable field -> column
PUBLISHER_COLUMNS: Final[dict[str, InstrumentedAttribute[Any]]] = {
    "id": Publisher.id,
    "name": Publisher.name,
}


class PublisherQueryService:
    """
    PublisherCriteria 로 Publisher 를 조회하는 읽기 전용 서비스.
    Read-only service querying Publisher entities by PublisherCriteria.

    필드 간 조건은 모두 AND 로 결합된다.
    Conditions on different fields are ANDed together.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_criteria(
        self,
        criteria: PublisherCriteria,
        page_request: PageRequest,
    ) -> PublisherResult[Page[PublisherDTO]]:
        logger.debug("find by criteria : %s, page: %s", criteria, page_request)

        match build_order_by(page_request.sort, PUBLISHER_COLUMNS, tie_breaker=Publisher.id):
            case Ok(value=order_by):
                pass
            case Err() as err:
                return err
            case _:
                raise TypeError("Unexpected result type from build_order_by.")

        where = build_where_clauses(criteria.filters(), PUBLISHER_COLUMNS)

        stmt = select(Publisher).where(*where)
        if criteria.distinct:
            stmt = stmt.distinct()
        stmt = stmt.order_by(*order_by).offset(page_request.offset).limit(page_request.size)

        entities = self._session.scalars(stmt).all()
        total = self._count(criteria)

        return Ok(Page(
            content=[PublisherDTO.model_validate(entity) for entity in entities],
            total_elements=total,
            page=page_request.page,
            size=page_request.size,
            sort=page_request.sort,
        ))

    def count_by_criteria(self, criteria: PublisherCriteria) -> int:
        logger.debug("count by criteria : %s", criteria)
        return self._count(criteria)

    def _count(self, criteria: PublisherCriteria) -> int:
        where = build_where_clauses(criteria.filters(), PUBLISHER_COLUMNS)
        stmt = select(Publisher.id).where(*where)
        if criteria.distinct:
            stmt = stmt.distinct()
        count_stmt = select(func.count()).select_from(stmt.subquery())
        return int(self._session.scalar(count_stmt) or 0)

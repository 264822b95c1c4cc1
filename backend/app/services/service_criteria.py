"""
필터 조건(criteria)을 SQLAlchemy 조건식과 정렬식으로 컴파일한다.

Compiles criteria filters into SQLAlchemy WHERE clauses and ORDER BY terms.
"""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import ColumnElement
from sqlalchemy.orm import InstrumentedAttribute

from project_core import Err, Ok

from app.errors import PublisherError, PublisherErrorCode, PublisherResult
from app.models.model_criteria import Filter, RangeFilter, StringFilter
from app.models.model_page import SortDirection, SortOrder


type ColumnMap = Mapping[str, InstrumentedAttribute[Any]]


def build_filter_clauses(
    column: InstrumentedAttribute[Any],
    flt: Filter[Any],
) -> list[ColumnElement[bool]]:
    """
    단일 필드 필터를 조건식 목록으로 변환한다(목록 원소끼리는 AND).
    Turn one field filter into a list of clauses (ANDed together).
    """
    clauses: list[ColumnElement[bool]] = []

    if flt.equals is not None:
        clauses.append(column == flt.equals)
    if flt.not_equals is not None:
        clauses.append(column != flt.not_equals)
    if flt.in_ is not None:
        clauses.append(column.in_(flt.in_))
    if flt.not_in is not None:
        clauses.append(column.not_in(flt.not_in))
    if flt.specified is not None:
        clauses.append(column.is_not(None) if flt.specified else column.is_(None))

    if isinstance(flt, RangeFilter):
        if flt.greater_than is not None:
            clauses.append(column > flt.greater_than)
        if flt.less_than is not None:
            clauses.append(column < flt.less_than)
        if flt.greater_than_or_equal is not None:
            clauses.append(column >= flt.greater_than_or_equal)
        if flt.less_than_or_equal is not None:
            clauses.append(column <= flt.less_than_or_equal)

    if isinstance(flt, StringFilter):
        # 와일드카드 문자(%, _)는 값 그대로 비교되도록 이스케이프한다.
        # Wildcards in the value are escaped and matched literally.
        if flt.contains is not None:
            clauses.append(column.icontains(flt.contains, autoescape=True))
        if flt.does_not_contain is not None:
            clauses.append(~column.icontains(flt.does_not_contain, autoescape=True))

    return clauses


def build_where_clauses(
    filters: Mapping[str, Filter[Any]],
    columns: ColumnMap,
) -> list[ColumnElement[bool]]:
    """
    필드별 필터를 모두 AND 로 묶을 조건식 목록으로 만든다.
    Build the clause list for every field filter (all ANDed together).

    매핑에 없는 필드는 조회 대상이 아니므로 KeyError 로 드러낸다.
    A field missing from `columns` is a programming error and raises KeyError.
    """
    clauses: list[ColumnElement[bool]] = []
    for field_name, flt in filters.items():
        clauses.extend(build_filter_clauses(columns[field_name], flt))
    return clauses


def build_order_by(
    sort: tuple[SortOrder, ...],
    columns: ColumnMap,
    *,
    tie_breaker: InstrumentedAttribute[Any],
) -> PublisherResult[list[ColumnElement[Any]]]:
    """
    정렬 조건을 ORDER BY 식으로 변환한다.
    Translate sort orders into ORDER BY terms.

    페이지가 안정적으로 나뉘도록 tie_breaker 컬럼(보통 id)을 마지막에 붙인다.
    A tie-breaker column (usually id) is appended so pages split stably.
    """
    terms: list[ColumnElement[Any]] = []
    sorted_by_tie_breaker = False

    for order in sort:
        column = columns.get(order.field_name)
        if column is None:
            return Err(PublisherError(
                code=PublisherErrorCode.INVALID_QUERY,
                message=f"Cannot sort by unknown property '{order.field_name}'",
            ))

        if order.direction is SortDirection.DESC:
            terms.append(column.desc())
        else:
            terms.append(column.asc())

        if column is tie_breaker:
            sorted_by_tie_breaker = True

    if not sorted_by_tie_breaker:
        terms.append(tie_breaker.asc())

    return Ok(terms)

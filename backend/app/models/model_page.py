"""
페이지 요청과 페이지 결과 모델을 정의합니다.

Defines page request and page result models.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
import math

from project_core import Err, Ok

from app.errors import PublisherError, PublisherErrorCode, PublisherResult
from app.models.model_db_publisher import PUBLISHER_ID_MAX


class SortDirection(str, Enum):
    """정렬 방향 / Sort direction."""

    ASC = "asc"
    DESC = "desc"


@dataclass(slots=True, frozen=True)
class SortOrder:
    """
    단일 속성 정렬 조건.
    Sort order on a single property.
    """

    field_name: str
    direction: SortDirection = SortDirection.ASC


@dataclass(slots=True, frozen=True)
class PageRequest:
    """
    0 부터 시작하는 페이지 번호, 페이지 크기, 정렬 조건.
    Zero-based page index, page size and sort orders.
    """

    page: int = 0
    size: int = 20
    sort: tuple[SortOrder, ...] = ()

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(slots=True, frozen=True)
class Page[T]:
    """
    전체 결과 중 한 페이지 분량과 메타데이터.
    One page of a larger result set plus its metadata.
    """

    content: list[T]
    total_elements: int
    page: int
    size: int
    sort: tuple[SortOrder, ...] = ()

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 1
        return math.ceil(self.total_elements / self.size)

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 0


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _parse_sort(values: Iterable[str]) -> PublisherResult[tuple[SortOrder, ...]]:
    """
    `sort=name,desc` / `sort=name,id` / `sort=name` 형식을 해석한다.
    Parse `sort=name,desc`, `sort=name,id` or `sort=name`.

    마지막 토큰이 asc/desc 이면 같은 값의 모든 속성에 적용된다.
    A trailing asc/desc token applies to every property in that value.
    """
    orders: list[SortOrder] = []

    for value in values:
        tokens = [token.strip() for token in value.split(",") if token.strip()]
        if not tokens:
            continue

        direction = SortDirection.ASC
        if tokens[-1].lower() in (SortDirection.ASC.value, SortDirection.DESC.value):
            direction = SortDirection(tokens[-1].lower())
            tokens = tokens[:-1]

        if not tokens:
            return Err(PublisherError(
                code=PublisherErrorCode.INVALID_QUERY,
                message=f"Sort parameter '{value}' names no property",
            ))

        orders.extend(SortOrder(field_name=token, direction=direction) for token in tokens)

    return Ok(tuple(orders))


def parse_page_request(
    query_items: Iterable[tuple[str, str]],
    *,
    default_size: int,
    max_size: int,
) -> PublisherResult[PageRequest]:
    """
    쿼리 파라미터에서 PageRequest 를 만든다.
    Build a PageRequest from query parameters.

    page/size 는 관대하게 처리한다: 해석할 수 없거나 음수인 page 는 0,
    1 미만이거나 해석할 수 없는 size 는 기본값, 최대값 초과는 최대값으로 맞춘다.
    page/size are lenient: unparsable or negative page becomes 0,
    unparsable or < 1 size becomes the default, and size is capped at max_size.
    page 는 OFFSET (page * size) 이 64비트 정수에 들어가도록 줄인다.
    page is clamped so the OFFSET (page * size) fits a signed 64-bit integer.
    """
    page_raw: str | None = None
    size_raw: str | None = None
    sort_values: list[str] = []

    for key, value in query_items:
        if key == "page":
            page_raw = value
        elif key == "size":
            size_raw = value
        elif key == "sort":
            sort_values.append(value)

    size = _parse_int(size_raw)
    if size is None or size < 1:
        size = default_size
    size = min(size, max_size)

    page = _parse_int(page_raw)
    if page is None or page < 0:
        page = 0
    page = min(page, PUBLISHER_ID_MAX // size)

    match _parse_sort(sort_values):
        case Ok(value=sort):
            return Ok(PageRequest(page=page, size=size, sort=sort))
        case Err() as err:
            return err
        case _:
            raise TypeError("Unexpected result type from _parse_sort.")

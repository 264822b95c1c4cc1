"""
목록/개수 조회용 필터 조건(criteria) 모델을 정의합니다.

Defines the filter (criteria) models used by list and count queries.

쿼리 파라미터는 `<필드>.<연산자>=<값>` 형식이다.
Query parameters have the form `<field>.<operator>=<value>`, e.g.
`name.contains=Peng`, `id.in=1,2,3`, `name.specified=false`.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Final

from project_core import Err, Ok

from app.errors import PublisherError, PublisherErrorCode, PublisherResult
from app.models.model_db_publisher import PUBLISHER_ID_MAX, PUBLISHER_ID_MIN


# 쿼리 파라미터 연산자 이름 → 필터 속성 이름
# Query-parameter operator name -> filter attribute name
_BASE_OPERATORS: Final[dict[str, str]] = {
    "equals": "equals",
    "notEquals": "not_equals",
    "in": "in_",
    "notIn": "not_in",
    "specified": "specified",
}

_LIST_ATTRIBUTES: Final[frozenset[str]] = frozenset({"in_", "not_in"})


@dataclass(slots=True, frozen=True)
class Filter[T]:
    """
    모든 필드 타입에 공통인 연산자(같음/다름/포함/미포함/값 존재 여부).
    Operators shared by every field type.
    """

    OPERATORS: ClassVar[dict[str, str]] = _BASE_OPERATORS

    equals: T | None = None
    not_equals: T | None = None
    in_: tuple[T, ...] | None = None
    not_in: tuple[T, ...] | None = None
    specified: bool | None = None

    @staticmethod
    def parse_value(raw: str) -> Any:
        return raw

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


@dataclass(slots=True, frozen=True)
class RangeFilter[T](Filter[T]):
    """
    비교 가능한 값에 대한 범위 연산자를 추가한다.
    Adds range operators for comparable values.
    """

    OPERATORS: ClassVar[dict[str, str]] = _BASE_OPERATORS | {
        "greaterThan": "greater_than",
        "lessThan": "less_than",
        "greaterThanOrEqual": "greater_than_or_equal",
        "lessThanOrEqual": "less_than_or_equal",
    }

    greater_than: T | None = None
    less_than: T | None = None
    greater_than_or_equal: T | None = None
    less_than_or_equal: T | None = None


@dataclass(slots=True, frozen=True)
class LongFilter(RangeFilter[int]):
    """64비트 정수 필드 필터 / Filter on a 64-bit integer field."""

    @staticmethod
    def parse_value(raw: str) -> int:
        value = int(raw)
        if not PUBLISHER_ID_MIN <= value <= PUBLISHER_ID_MAX:
            raise ValueError(f"{raw!r} is outside the 64-bit integer range")
        return value


@dataclass(slots=True, frozen=True)
class StringFilter(Filter[str]):
    """
    문자열 필드 필터. contains/doesNotContain 은 대소문자를 구분하지 않는다.
    Filter on a string field; contains/doesNotContain are case-insensitive.
    """

    OPERATORS: ClassVar[dict[str, str]] = _BASE_OPERATORS | {
        "contains": "contains",
        "doesNotContain": "does_not_contain",
    }

    contains: str | None = None
    does_not_contain: str | None = None


def _parse_bool(raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _invalid(message: str) -> Err[PublisherError]:
    return Err(PublisherError(code=PublisherErrorCode.INVALID_QUERY, message=message))


def parse_filter[F: Filter[Any]](
    filter_type: type[F],
    field_name: str,
    query_items: Iterable[tuple[str, str]],
) -> PublisherResult[F | None]:
    """
    `<field_name>.<op>` 파라미터를 모아 하나의 필터로 만든다.
    Collect `<field_name>.<op>` parameters into a single filter.

    - 목록 연산자(in/notIn)는 쉼표 구분과 반복 파라미터를 모두 허용한다.
    - 단일 값 연산자가 반복되면 마지막 값이 이긴다.
    - 알 수 없는 연산자는 무시한다.
    - List operators (in/notIn) accept comma-separated and repeated values.
    - A repeated single-value operator keeps the last value.
    - Unknown operators are ignored.
    """
    prefix = f"{field_name}."
    values: dict[str, Any] = {}

    for key, raw in query_items:
        if not key.startswith(prefix):
            continue

        operator = key[len(prefix):]
        attribute = filter_type.OPERATORS.get(operator)
        if attribute is None:
            continue

        parse: Callable[[str], Any] = (
            _parse_bool if attribute == "specified" else filter_type.parse_value
        )

        try:
            if attribute in _LIST_ATTRIBUTES:
                items = [item.strip() for item in raw.split(",") if item.strip()]
                parsed = tuple(parse(item) for item in items)
                values[attribute] = values.get(attribute, ()) + parsed
            else:
                values[attribute] = parse(raw)
        except ValueError:
            return _invalid(f"Invalid value '{raw}' for filter '{key}'")

    if not values:
        return Ok(None)
    return Ok(filter_type(**values))


@dataclass(slots=True, frozen=True)
class PublisherCriteria:
    """
    Publisher 목록/개수 조회 조건. 비어 있는 필드는 제약이 없음을 뜻한다.
    Publisher list/count criteria; an unset field means no constraint.
    """

    id: LongFilter | None = None
    name: StringFilter | None = None
    distinct: bool | None = None

    def filters(self) -> dict[str, Filter[Any]]:
        """설정된 필드 필터만 반환 / Only the field filters that are set."""
        candidates: dict[str, Filter[Any] | None] = {"id": self.id, "name": self.name}
        return {
            name: flt
            for name, flt in candidates.items()
            if flt is not None and not flt.is_empty()
        }


def parse_publisher_criteria(
    query_items: Iterable[tuple[str, str]],
) -> PublisherResult[PublisherCriteria]:
    """
    요청 쿼리 파라미터에서 PublisherCriteria 를 만든다.
    Build PublisherCriteria from request query parameters.
    """
    items = list(query_items)

    id_result = parse_filter(LongFilter, "id", items)
    if isinstance(id_result, Err):
        return id_result

    name_result = parse_filter(StringFilter, "name", items)
    if isinstance(name_result, Err):
        return name_result

    distinct: bool | None = None
    for key, raw in items:
        if key == "distinct":
            try:
                distinct = _parse_bool(raw)
            except ValueError:
                return _invalid(f"Invalid value '{raw}' for 'distinct'")

    return Ok(PublisherCriteria(
        id=id_result.value,
        name=name_result.value,
        distinct=distinct,
    ))

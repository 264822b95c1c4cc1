from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Ok[T]:
    """
    성공 값을 감싸는 Result 분기.

    Successful branch of a Result.
    """

    # match Ok(value=...) 패턴에서 위치 인자로도 매칭되도록 한다.
    # Allow positional matching in `match Ok(value)`.
    __match_args__ = ("value",)

    value: T


@dataclass(slots=True, frozen=True)
class Err[E]:
    """
    실패 정보를 감싸는 Result 분기.

    Error branch of a Result.
    """

    __match_args__ = ("error",)

    error: E


type Result[T, E] = Ok[T] | Err[E]
"""
서비스 계층이 예외 대신 반환하는 값/에러 합 타입.

Value-or-error sum type returned by the service layer instead of raising
for expected (domain) failures.
"""


def is_ok[T, E](result: Result[T, E]) -> bool:
    """Result 가 Ok 인지 여부 / Whether the result is Ok."""
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> bool:
    """Result 가 Err 인지 여부 / Whether the result is Err."""
    return isinstance(result, Err)


__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
]

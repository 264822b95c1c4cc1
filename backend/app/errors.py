from dataclasses import dataclass
from enum import Enum
from typing import Any, Final

from fastapi import HTTPException, status

from project_core import Result

from app.config import Settings
from app.internal.header_util import create_failure_alert


PUBLISHER_ENTITY_NAME: Final[str] = "publisher"


class PublisherErrorCode(str, Enum):
    """
    Publisher 요청 처리 중 발생하는 에러 코드(클라이언트 알림 키로도 쓰인다).
    Error codes raised while handling Publisher requests
    (also used as client alert keys).
    """

    ID_EXISTS = "idexists"
    ID_NULL = "idnull"
    ID_NOT_FOUND = "idnotfound"
    INVALID_QUERY = "invalidquery"


@dataclass(slots=True, frozen=True)
class PublisherError:
    """
    Publisher 도메인 에러 표현.
    Domain error representation for the Publisher resource.
    """

    code: PublisherErrorCode
    message: str
    entity_name: str = PUBLISHER_ENTITY_NAME


type PublisherResult[T] = Result[T, PublisherError]


def _problem_body(error: PublisherError, status_code: int) -> dict[str, Any]:
    """
    클라이언트가 번역 키로 사용할 수 있는 에러 바디를 만든다.
    Build the error body; `message` is a client-side translation key.
    """
    return {
        "title": error.message,
        "status": status_code,
        "entityName": error.entity_name,
        "errorKey": error.code.value,
        "message": f"error.{error.code.value}",
        "params": error.entity_name,
    }


def map_publisher_error_to_http_exception(
    error: PublisherError,
    settings: Settings,
) -> HTTPException:
    """
    PublisherError 를 실패 알림 헤더가 붙은 HTTPException 으로 변환한다.
    Map a PublisherError into an HTTPException carrying failure alert headers.

    모든 코드는 요청 자체의 문제이므로 400 으로 응답한다.
    Every code describes a malformed request, so all map to 400.
    """
    status_code = status.HTTP_400_BAD_REQUEST
    headers = create_failure_alert(
        settings.client_app_name,
        settings.enable_translation,
        error.entity_name,
        error.code.value,
        error.message,
    )

    return HTTPException(
        status_code=status_code,
        detail=_problem_body(error, status_code),
        headers=headers,
    )

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from project_core import Err, Ok

from app.config import Settings, get_settings
from app.database import get_db_session
from app.errors import map_publisher_error_to_http_exception
from app.models.model_criteria import PublisherCriteria, parse_publisher_criteria
from app.models.model_page import PageRequest, parse_page_request
from app.services.service_publisher import PublisherService
from app.services.service_publisher_query import PublisherQueryService


def get_app_settings() -> Settings:
    """
    FastAPI 의존성으로 사용할 설정 객체를 반환한다.
    Return application settings for FastAPI dependency injection.
    """
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
SessionDep = Annotated[Session, Depends(get_db_session)]


def get_publisher_service(session: SessionDep) -> PublisherService:
    """요청 세션에 묶인 명령 서비스 / Command service bound to the request session."""
    return PublisherService(session)


def get_publisher_query_service(session: SessionDep) -> PublisherQueryService:
    """요청 세션에 묶인 조회 서비스 / Query service bound to the request session."""
    return PublisherQueryService(session)


def get_publisher_criteria(request: Request, settings: SettingsDep) -> PublisherCriteria:
    """
    쿼리 파라미터로부터 요청마다 새 PublisherCriteria 를 만든다.
    Build a fresh PublisherCriteria per request from its query parameters.
    """
    match parse_publisher_criteria(request.query_params.multi_items()):
        case Ok(value=criteria):
            return criteria
        case Err(error=error):
            raise map_publisher_error_to_http_exception(error, settings)
        case _:
            raise TypeError("Unexpected result type from parse_publisher_criteria.")


def get_page_request(request: Request, settings: SettingsDep) -> PageRequest:
    """
    page/size/sort 쿼리 파라미터로부터 PageRequest 를 만든다.
    Build a PageRequest from the page/size/sort query parameters.
    """
    result = parse_page_request(
        request.query_params.multi_items(),
        default_size=settings.default_page_size,
        max_size=settings.max_page_size,
    )

    match result:
        case Ok(value=page_request):
            return page_request
        case Err(error=error):
            raise map_publisher_error_to_http_exception(error, settings)
        case _:
            raise TypeError("Unexpected result type from parse_page_request.")


PublisherServiceDep = Annotated[PublisherService, Depends(get_publisher_service)]
PublisherQueryServiceDep = Annotated[
    PublisherQueryService,
    Depends(get_publisher_query_service),
]
PublisherCriteriaDep = Annotated[PublisherCriteria, Depends(get_publisher_criteria)]
PageRequestDep = Annotated[PageRequest, Depends(get_page_request)]

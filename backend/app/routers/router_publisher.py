import logging
from typing import Annotated, Final

from fastapi import APIRouter, HTTPException, Path, Request, Response, status

from project_core import Err, Ok

from app.dependencies import (
    PageRequestDep,
    PublisherCriteriaDep,
    PublisherQueryServiceDep,
    PublisherServiceDep,
    SettingsDep,
)
from app.errors import (
    PUBLISHER_ENTITY_NAME,
    PublisherError,
    PublisherErrorCode,
    map_publisher_error_to_http_exception,
)
from app.internal.header_util import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
)
from app.internal.pagination_util import generate_pagination_headers
from app.models.model_db_publisher import PUBLISHER_ID_MAX, PUBLISHER_ID_MIN
from app.models.model_io_publisher import PublisherDTO


logger = logging.getLogger(__name__)

# 단건 조회 라우트 이름. Location 헤더 경로를 만들 때 사용한다.
# Name of the get-by-id route, used to build the Location header path.
GET_PUBLISHER_ROUTE: Final[str] = "get_publisher"

# 64비트 범위를 벗어난 경로 id 는 422 로 거절된다.
# Path ids outside the 64-bit range are rejected with 422.
PublisherIdPath = Annotated[int, Path(
    ge=PUBLISHER_ID_MIN,
    le=PUBLISHER_ID_MAX,
    description="출판사 id / Publisher id.",
)]

# prefix("/api") 는 main.py 의 include_router 에서 관리한다.
# Router-level prefix ("/api") is managed in main.py via include_router.
router = APIRouter()


@router.post(
    "/publishers",
    status_code=status.HTTP_201_CREATED,
    response_model=PublisherDTO,
    summary="출판사 생성 / Create a publisher",
)
def create_publisher(
    publisher: PublisherDTO,
    request: Request,
    response: Response,
    service: PublisherServiceDep,
    settings: SettingsDep,
) -> PublisherDTO:
    """
    새 출판사를 저장한다. id 가 이미 있으면 400(idexists).
    Create a new publisher; 400 (idexists) if the body already has an id.
    """
    logger.debug("REST request to save Publisher : %s", publisher)

    if publisher.id is not None:
        raise map_publisher_error_to_http_exception(
            PublisherError(
                code=PublisherErrorCode.ID_EXISTS,
                message="A new publisher cannot already have an ID",
            ),
            settings,
        )

    result = service.save(publisher)

    response.headers["Location"] = str(
        request.app.url_path_for(GET_PUBLISHER_ROUTE, publisher_id=str(result.id)),
    )
    response.headers.update(
        create_entity_creation_alert(
            settings.client_app_name,
            settings.enable_translation,
            PUBLISHER_ENTITY_NAME,
            str(result.id),
        ),
    )
    return result


@router.put(
    "/publishers",
    response_model=PublisherDTO,
    summary="출판사 수정 / Update a publisher",
)
def update_publisher(
    publisher: PublisherDTO,
    response: Response,
    service: PublisherServiceDep,
    settings: SettingsDep,
) -> PublisherDTO:
    """
    기존 출판사를 수정한다.
    Update an existing publisher.

    - id 가 없으면 400(idnull) / 400 (idnull) when the id is missing
    - 저장되지 않은 id 면 400(idnotfound) / 400 (idnotfound) for an unknown id
    """
    logger.debug("REST request to update Publisher : %s", publisher)

    if publisher.id is None:
        raise map_publisher_error_to_http_exception(
            PublisherError(code=PublisherErrorCode.ID_NULL, message="Invalid id"),
            settings,
        )

    match service.update(publisher):
        case Ok(value=result):
            response.headers.update(
                create_entity_update_alert(
                    settings.client_app_name,
                    settings.enable_translation,
                    PUBLISHER_ENTITY_NAME,
                    str(publisher.id),
                ),
            )
            return result

        case Err(error=publisher_error):
            raise map_publisher_error_to_http_exception(publisher_error, settings)

        case _:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Unexpected result type from update.",
            )


@router.get(
    "/publishers",
    response_model=list[PublisherDTO],
    summary="출판사 목록 조회 / List publishers",
)
def get_all_publishers(
    request: Request,
    response: Response,
    criteria: PublisherCriteriaDep,
    page_request: PageRequestDep,
    query_service: PublisherQueryServiceDep,
    settings: SettingsDep,
) -> list[PublisherDTO]:
    """
    조건에 맞는 출판사를 페이지 단위로 조회한다.
    Get a page of publishers matching the criteria.

    쿼리 예 / Query example: `?name.contains=peng&page=0&size=20&sort=name,desc`
    """
    logger.debug("REST request to get Publishers by criteria: %s", criteria)

    match query_service.find_by_criteria(criteria, page_request):
        case Ok(value=page):
            response.headers.update(generate_pagination_headers(request.url, page))
            return page.content

        case Err(error=publisher_error):
            raise map_publisher_error_to_http_exception(publisher_error, settings)

        case _:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Unexpected result type from find_by_criteria.",
            )


# "/publishers/{publisher_id}" 보다 먼저 등록해야 한다.
# Must be registered before "/publishers/{publisher_id}".
@router.get(
    "/publishers/count",
    summary="출판사 개수 조회 / Count publishers",
)
def count_publishers(
    criteria: PublisherCriteriaDep,
    query_service: PublisherQueryServiceDep,
) -> int:
    """
    조건에 맞는 출판사 수를 반환한다.
    Count the publishers matching the criteria.
    """
    logger.debug("REST request to count Publishers by criteria: %s", criteria)
    return query_service.count_by_criteria(criteria)


@router.get(
    "/publishers/{publisher_id}",
    name=GET_PUBLISHER_ROUTE,
    response_model=PublisherDTO,
    summary="출판사 단건 조회 / Get a publisher",
)
def get_publisher(
    publisher_id: PublisherIdPath,
    service: PublisherServiceDep,
) -> PublisherDTO | Response:
    """
    id 로 출판사를 조회한다. 없으면 바디 없는 404.
    Get a publisher by id; empty 404 when absent.
    """
    logger.debug("REST request to get Publisher : %s", publisher_id)

    publisher = service.find_one(publisher_id)
    if publisher is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return publisher


@router.delete(
    "/publishers/{publisher_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="출판사 삭제 / Delete a publisher",
)
def delete_publisher(
    publisher_id: PublisherIdPath,
    service: PublisherServiceDep,
    settings: SettingsDep,
) -> Response:
    """
    id 로 출판사를 삭제한다. 없는 id 도 204 로 응답한다.
    Delete a publisher by id; an unknown id still answers 204.
    """
    logger.debug("REST request to delete Publisher : %s", publisher_id)

    service.delete(publisher_id)

    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers=create_entity_deletion_alert(
            settings.client_app_name,
            settings.enable_translation,
            PUBLISHER_ENTITY_NAME,
            str(publisher_id),
        ),
    )

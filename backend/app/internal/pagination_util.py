"""
페이지 조회 결과를 `X-Total-Count` / `Link` 헤더로 변환하는 유틸리티.

Utilities turning a page of results into `X-Total-Count` and `Link`
(RFC 5988) response headers.
"""

from typing import Any, Final

from starlette.datastructures import URL

from app.models.model_page import Page


TOTAL_COUNT_HEADER: Final[str] = "X-Total-Count"
LINK_HEADER: Final[str] = "Link"


def _prepare_link(url: URL, page: int, size: int, rel: str) -> str:
    # include_query_params 는 기존 쿼리(필터 조건 포함)를 유지하고 page/size 만 교체한다.
    # urlencode 가 ',' 와 ';' 를 퍼센트 인코딩하므로 Link 구분자와 충돌하지 않는다.
    link_url = url.include_query_params(page=page, size=size)
    return f'<{link_url}>; rel="{rel}"'


def generate_pagination_headers(url: URL, page: Page[Any]) -> dict[str, str]:
    """
    페이지 메타데이터로 페이지네이션 헤더를 만든다.
    Build pagination headers from page metadata.

    - next: 뒤 페이지가 있을 때만 / only when a later page exists
    - prev: 첫 페이지가 아닐 때만 / only when not on the first page
    - last, first: 항상 / always
    """
    links: list[str] = []

    if page.has_next:
        links.append(_prepare_link(url, page.page + 1, page.size, "next"))
    if page.has_previous:
        links.append(_prepare_link(url, page.page - 1, page.size, "prev"))

    last_page = max(page.total_pages - 1, 0)
    links.append(_prepare_link(url, last_page, page.size, "last"))
    links.append(_prepare_link(url, 0, page.size, "first"))

    return {
        TOTAL_COUNT_HEADER: str(page.total_elements),
        LINK_HEADER: ",".join(links),
    }

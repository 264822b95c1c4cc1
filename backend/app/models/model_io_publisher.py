"""
Publisher REST API 의 입출력 모델을 정의합니다.

Defines input/output models for the Publisher REST API.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from app.models.model_db_publisher import (
    PUBLISHER_ID_MAX,
    PUBLISHER_ID_MIN,
    PUBLISHER_NAME_MAX_LENGTH,
)


class PublisherDTO(BaseModel):
    """
    요청 바디와 응답 바디에 공통으로 쓰이는 출판사 표현입니다.

    Publisher representation shared by request and response bodies.
    생성 시에는 id 가 비어 있어야 하고, 수정 시에는 채워져 있어야 합니다.
    The id must be unset on create and set on update.
    """

    model_config = ConfigDict(from_attributes=True)

    id: Annotated[int | None, Field(
        default=None,
        ge=PUBLISHER_ID_MIN,
        le=PUBLISHER_ID_MAX,
        description=(
            "저장 후 부여되는 식별자입니다.\n"
            "Identifier assigned once the record is persisted."
        ),
    )]

    name: Annotated[str, Field(
        min_length=1,
        max_length=PUBLISHER_NAME_MAX_LENGTH,
        description="출판사 이름 / Publisher name.",
    )]

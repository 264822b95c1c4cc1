import logging

from sqlalchemy import delete
from sqlalchemy.orm import Session

from project_core import Err, Ok

from app.errors import PublisherError, PublisherErrorCode, PublisherResult
from app.models.model_db_publisher import Publisher
from app.models.model_io_publisher import PublisherDTO


logger = logging.getLogger(__name__)


class PublisherService:
    """
    Publisher 저장/수정/삭제/단건 조회를 담당하는 명령 서비스.
    Command service for saving, updating, deleting and loading a Publisher.

    커밋은 이 서비스가 한다. SQLAlchemy 예외는 그대로 전파된다.
    This service owns commits; SQLAlchemy errors propagate unchanged.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, publisher: PublisherDTO) -> PublisherDTO:
        """
        id 가 없으면 삽입하고, 있으면 해당 레코드를 덮어쓴다(merge).
        Insert when id is unset; otherwise overwrite that record (merge).
        """
        logger.debug("Request to save Publisher : %s", publisher)

        entity = Publisher(id=publisher.id, name=publisher.name)
        if publisher.id is None:
            self._session.add(entity)
        else:
            entity = self._session.merge(entity)

        self._session.commit()
        self._session.refresh(entity)
        return PublisherDTO.model_validate(entity)

    def update(self, publisher: PublisherDTO) -> PublisherResult[PublisherDTO]:
        """
        저장된 레코드만 수정한다. 없는 id 는 upsert 하지 않고 Err 로 돌려준다.
        Update a stored record only; an unknown id is an Err, never an upsert.
        """
        logger.debug("Request to update Publisher : %s", publisher)

        # 라우터도 같은 검사를 하지만, 라우터를 거치지 않는 호출자를 위해 여기서도 막는다.
        # The router checks this too; callers outside the HTTP layer rely on this one.
        if publisher.id is None:
            return Err(PublisherError(
                code=PublisherErrorCode.ID_NULL,
                message="Invalid id",
            ))

        if self._session.get(Publisher, publisher.id) is None:
            return Err(PublisherError(
                code=PublisherErrorCode.ID_NOT_FOUND,
                message="Entity not found",
            ))

        return Ok(self.save(publisher))

    def find_one(self, publisher_id: int) -> PublisherDTO | None:
        logger.debug("Request to get Publisher : %s", publisher_id)

        entity = self._session.get(Publisher, publisher_id)
        if entity is None:
            return None
        return PublisherDTO.model_validate(entity)

    def delete(self, publisher_id: int) -> None:
        """
        없는 id 를 삭제해도 오류가 아니다.
        Deleting an unknown id is not an error.
        """
        logger.debug("Request to delete Publisher : %s", publisher_id)

        self._session.execute(delete(Publisher).where(Publisher.id == publisher_id))
        self._session.commit()

"""
Publisher 엔티티의 ORM 매핑.
ORM mapping of the Publisher entity.
"""

from typing import Final

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


PUBLISHER_NAME_MAX_LENGTH: Final[int] = 100

# id 컬럼은 64비트 부호 있는 정수다.
# The id column is a signed 64-bit integer.
PUBLISHER_ID_MIN: Final[int] = -(2**63)
PUBLISHER_ID_MAX: Final[int] = 2**63 - 1


class Publisher(Base):
    """
    출판사 레코드.
    A publisher record.
    """

    __tablename__ = "publisher"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(
        String(PUBLISHER_NAME_MAX_LENGTH),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"Publisher(id={self.id!r}, name={self.name!r})"

from sqlalchemy import Text
from sqlalchemy import true
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import mapped_column

from userservice.domain.entities.user import User as UserEntity
from userservice.infrastructure.adapters.database.models.base import Base
from userservice.infrastructure.adapters.database.models.base import NumericIdMixin


class User(NumericIdMixin, Base):
    __tablename__ = "users"

    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    surname: Mapped[str] = mapped_column(Text, nullable=False)
    phone_number: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)

    is_active: Mapped[bool] = mapped_column(default=True, server_default=true())

    def to_entity(self) -> UserEntity:
        return UserEntity(
            id=self.id,
            first_name=self.first_name,
            surname=self.surname,
            phone_number=self.phone_number,
            email=self.email,
            is_active=self.is_active,
        )

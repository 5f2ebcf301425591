from typing import Final

from userservice.domain.schemas.base import BaseEntity

REQUIRED_FIELDS: Final[tuple[str, ...]] = ("first_name", "surname", "phone_number", "email")


class UserCreate(BaseEntity):
    """Payload of a new user as sent by clients.

    Every text field defaults to an empty string so that a payload missing a
    field still decodes. Presence is enforced afterwards by
    `userservice.application.validators.validate_required`, never here.
    Unknown fields (including `is_active`) are ignored.
    """

    first_name: str = ""
    surname: str = ""
    phone_number: str = ""
    email: str = ""


class UserUpdate(UserCreate):
    """Payload replacing the four text fields of an existing user.

    Partial updates are not supported: all text fields are written together.
    """

    id: int

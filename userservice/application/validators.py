from userservice.domain.exceptions import UserValidationError
from userservice.domain.schemas.user import REQUIRED_FIELDS
from userservice.domain.schemas.user import UserCreate


def validate_required(user_data: UserCreate) -> None:
    """Ensures every required text field of the payload is non-empty.

    Values are checked as received: no trimming, no format or length rule.

    Raises:
        UserValidationError: Listing the fields which are empty.
    """
    missing = [field for field in REQUIRED_FIELDS if not getattr(user_data, field)]
    if missing:
        raise UserValidationError(missing)

from pydantic import BaseModel
from pydantic import ConfigDict


class HealthCheckResponse(BaseModel):
    status: str
    database: str


class SuccessResponse(BaseModel):
    message: str


class UserResponse(BaseModel):
    """Wire representation of a user.

    The declared fields are the allow-list of what clients may see: `is_active`
    is deliberately absent, so it is dropped whatever the entity holds.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    surname: str
    phone_number: str
    email: str


class UserCreatedResponse(BaseModel):
    id: int

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class User:
    id: int
    first_name: str
    surname: str
    phone_number: str
    email: str

    is_active: bool = True

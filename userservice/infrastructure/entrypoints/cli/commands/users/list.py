from rich.console import Console
from rich.table import Table

from userservice.application.use_cases.user_list import user_list
from userservice.domain.entities.user import User
from userservice.infrastructure.entrypoints.cli.dependencies import get_db
from userservice.infrastructure.entrypoints.cli.dependencies import get_user_repository


async def user_list_logic() -> list[User]:
    async with get_db() as session:
        users = await user_list(get_user_repository(session))

    table = Table("ID", "First name", "Surname", "Phone number", "Email", "Active")
    for user in users:
        table.add_row(
            str(user.id),
            user.first_name,
            user.surname,
            user.phone_number,
            user.email,
            "yes" if user.is_active else "no",
        )

    Console().print(table)
    return users

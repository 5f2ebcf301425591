import typer

from userservice.application.use_cases.user_create import user_create
from userservice.domain.exceptions import UserValidationError
from userservice.domain.schemas.user import UserCreate
from userservice.infrastructure.entrypoints.cli.dependencies import get_db
from userservice.infrastructure.entrypoints.cli.dependencies import get_user_repository


async def user_create_logic(first_name: str, surname: str, phone_number: str, email: str) -> int:
    user_data = UserCreate(first_name=first_name, surname=surname, phone_number=phone_number, email=email)

    async with get_db() as session:
        try:
            user_id = await user_create(user_data, get_user_repository(session))
        except UserValidationError as e:
            typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
            raise
        except Exception as e:
            typer.secho(f"Unexpected error: {e}", fg=typer.colors.RED, err=True)
            raise

    typer.secho(f"User {email} created successfully with ID {user_id}!", fg=typer.colors.GREEN)
    return user_id

import asyncio

import typer

from userservice.infrastructure.entrypoints.cli.commands.users.create import user_create_logic
from userservice.infrastructure.entrypoints.cli.commands.users.list import user_list_logic

__all__ = ["app", "user_create_logic", "user_list_logic"]

app = typer.Typer()


@app.command("create", help="Create a user.")
def create(
    first_name: str = typer.Option(..., "--first-name", help="User first name"),
    surname: str = typer.Option(..., "--surname", help="User surname"),
    phone_number: str = typer.Option(..., "--phone-number", help="User phone number"),
    email: str = typer.Option(..., "--email", help="User email address"),
):
    try:
        asyncio.run(user_create_logic(first_name, surname, phone_number, email))
    except Exception as e:
        raise typer.Exit(code=1) from e


@app.command("list", help="List every user.")
def list_():
    try:
        asyncio.run(user_list_logic())
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

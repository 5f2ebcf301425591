import asyncio

import typer

from userservice.infrastructure.entrypoints.cli.commands.db.init import db_init_logic

__all__ = ["app", "db_init_logic"]

app = typer.Typer()


@app.command("init", help="Create the database tables.")
def init():
    try:
        asyncio.run(db_init_logic())
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

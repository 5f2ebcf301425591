import typer
import uvicorn

from userservice import __version__
from userservice.infrastructure.config.loggers import configure_loggers
from userservice.infrastructure.config.settings.app import app_settings
from userservice.infrastructure.entrypoints.cli.commands.db import app as db_app
from userservice.infrastructure.entrypoints.cli.commands.users import app as users_app
from userservice.infrastructure.entrypoints.cli.parsers import parse_log_handler
from userservice.infrastructure.entrypoints.cli.parsers import parse_log_level

app = typer.Typer(help="User Service command line.", no_args_is_help=True)
app.add_typer(users_app, name="users", help="Manage users.")
app.add_typer(db_app, name="db", help="Manage the database.")


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"User Service Version: {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: str = typer.Option(
        app_settings.LOG_LEVEL_CLI,
        "--log-level",
        help="Logging level.",
        parser=parse_log_level,
    ),
    log_handlers: list[str] = typer.Option(
        app_settings.LOG_HANDLERS_CLI,
        "--log-handler",
        help="Logging handler, can be repeated.",
        parser=parse_log_handler,
    ),
) -> None:
    configure_loggers(level=log_level, handlers=log_handlers, filename=app_settings.LOG_FILE)  # type: ignore[arg-type]


@app.command("serve", help="Run the HTTP API.")
def serve(  # pragma: no cover
    host: str = typer.Option(app_settings.HOST, help="Bind address."),
    port: int = typer.Option(app_settings.PORT, help="Bind port.", min=1, max=65535),
    reload: bool = typer.Option(False, "--reload/--no-reload", help="Reload on code changes."),
):
    uvicorn.run(
        "userservice.infrastructure.entrypoints.api.main:app",
        host=host,
        port=port,
        reload=reload,
        # The API sends its own "Server" header.
        server_header=False,
        # Logging is configured by the API lifespan.
        log_config=None,
    )

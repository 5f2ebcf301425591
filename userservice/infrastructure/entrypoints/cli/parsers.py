from pydantic import TypeAdapter
from pydantic import ValidationError

import typer

from userservice.infrastructure.types import LogHandler
from userservice.infrastructure.types import LogLevel

LogLevelAdapter: TypeAdapter[LogLevel] = TypeAdapter(LogLevel)
LogHandlerAdapter: TypeAdapter[LogHandler] = TypeAdapter(LogHandler)


def parse_log_level(value: str) -> str:
    try:
        return LogLevelAdapter.validate_python(value.upper())
    except ValidationError as e:
        raise typer.BadParameter(e.errors()[0]["msg"]) from e


def parse_log_handler(value: str) -> str:
    try:
        return LogHandlerAdapter.validate_python(value)
    except ValidationError as e:
        raise typer.BadParameter(e.errors()[0]["msg"]) from e

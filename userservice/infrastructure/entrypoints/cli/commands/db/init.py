import logging

import typer

from userservice.infrastructure.adapters.database.models import Base
from userservice.infrastructure.entrypoints.cli.dependencies import get_engine

logger = logging.getLogger(__name__)


async def db_init_logic() -> None:
    """Creates the missing tables. Existing tables are left untouched."""
    engine = get_engine()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.debug("Tables created: %s", ", ".join(Base.metadata.tables))
    typer.secho("Database tables created successfully!", fg=typer.colors.GREEN)

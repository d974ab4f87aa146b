"""Database management commands.

Example:bash
    content-service db create
"""

import click

from content_service.cli.utils import coro, info, success
from content_service.core.settings import get_db_settings
from content_service.infra.database import create_tables, dispose_engine


@click.group(name="db")
def db() -> None:
    """Database management commands."""


@db.command()
@coro
async def create() -> None:
    """Create any missing content tables."""
    info(f"Database: {get_db_settings().url}")
    try:
        await create_tables()
    finally:
        await dispose_engine()
    success("Tables created")

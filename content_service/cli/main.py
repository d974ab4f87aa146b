"""Main CLI entry point for content-service management commands."""

import click

from content_service.cli.commands import database, ids, server
from content_service.infra.logging import setup_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="content-service")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Content Service CLI - manage the content graph service.

    \b
    Command Groups:
      ids    Encode and decode global node identifiers
      db     Database management
      serve  Run the GraphQL server

    \b
    Quick Start:
      content-service db create
      content-service serve --reload
      content-service ids encode Post 42
    """
    ctx.ensure_object(dict)


cli.add_command(ids.ids)
cli.add_command(database.db)
cli.add_command(server.serve)


def main() -> None:
    """Entry point for CLI."""
    setup_logging()
    cli(obj={})


if __name__ == "__main__":
    main()

"""Server command."""

import click
import uvicorn

from content_service.cli.utils import info
from content_service.core.settings import get_app_settings, get_logging_settings


@click.command()
@click.option(
    "--host",
    default=None,
    help="Host to bind (default: APP_HOST)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind (default: APP_PORT)",
)
@click.option(
    "--reload/--no-reload",
    default=False,
    help="Enable auto-reload on code changes",
)
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the GraphQL server with uvicorn."""
    settings = get_app_settings()
    host = host or settings.host
    port = port or settings.port

    info(f"Server will run at: http://{host}:{port}")
    info(f"Environment: {settings.environment}")

    uvicorn.run(
        "content_service.app.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=get_logging_settings().level.lower(),
        log_config=None,
    )

"""Global identifier commands.

Example:bash
    content-service ids encode Post 42
    content-service ids decode UG9zdDo0Mg==
"""

import sys

import click

from content_service.cli.utils import error
from content_service.core.exceptions import AppException
from content_service.features.content import NodeKind, build_node_registry


@click.group(name="ids")
def ids() -> None:
    """Encode and decode global node identifiers."""


@ids.command()
@click.argument("kind", type=click.Choice([kind.value for kind in NodeKind]))
@click.argument("local_id")
def encode(kind: str, local_id: str) -> None:
    """Print the global id of KIND with LOCAL_ID."""
    registry = build_node_registry()
    click.echo(registry.encode(NodeKind(kind), local_id))


@ids.command()
@click.argument("global_id")
def decode(global_id: str) -> None:
    """Print the kind and local id named by GLOBAL_ID."""
    registry = build_node_registry()
    try:
        kind, local_id = registry.decode(global_id)
    except AppException as exc:
        error(f"{exc.type}: {exc.detail}")
        sys.exit(1)
    click.echo(f"{kind.value}\t{local_id}")

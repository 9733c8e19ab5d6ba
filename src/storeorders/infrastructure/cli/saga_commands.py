"""CLI commands for inspecting the saga journal."""

from __future__ import annotations

import click

from storeorders.infrastructure.bootstrap import saga_log_repository
from storeorders.infrastructure.config import Settings


@click.command("pending")
@click.pass_obj
def saga_pending(settings: Settings) -> None:
    """Show saga steps that started but never completed."""
    entries = saga_log_repository(settings).pending()

    if not entries:
        click.echo("No interrupted sagas.")
        return

    click.echo(f"{'Order':<34} {'Step':<8} {'Started at'}")
    click.echo("-" * 70)
    for entry in entries:
        click.echo(f"{entry.order_id:<34} {entry.step.value:<8} {entry.recorded_at.isoformat()}")

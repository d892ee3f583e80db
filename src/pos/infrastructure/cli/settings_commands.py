"""CLI commands for store settings."""

from __future__ import annotations

import click

from pos.application.update_setting import UpdateSettingHandler
from pos.domain.exceptions import DomainException
from pos.domain.model.settings import KNOWN_KEYS
from pos.infrastructure.bootstrap import settings_repository


@click.command("set")
@click.option("--key", required=True, type=click.Choice(KNOWN_KEYS), help="Setting key.")
@click.option("--value", required=True, help="Setting value.")
def settings_set(key: str, value: str) -> None:
    """Store one setting."""
    handler = UpdateSettingHandler(settings_repo=settings_repository())

    try:
        handler.handle(key, value)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Setting '{key}' saved.")


@click.command("show")
def settings_show() -> None:
    """Show all stored settings."""
    try:
        values = settings_repository().get_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not values:
        click.echo("No settings stored.")
        return

    for key in sorted(values):
        click.echo(f"{key:<18} {values[key]}")

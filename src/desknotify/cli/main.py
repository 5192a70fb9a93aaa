"""desknotify CLI.

Usage:
    desknotify send --title T --subtitle S --message M [--sound Pop] [--open URL]
    desknotify preview ...    # Print the command line send would run
    desknotify status         # Show the selected tool and whether it is installed
"""

from __future__ import annotations

from typing import Callable

import click
from rich.console import Console
from rich.table import Table

console = Console()


@click.group()
@click.version_option(package_name="desknotify")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """desknotify: send desktop notifications through the OS notification tool."""
    from desknotify.config import configure_logging, load_config

    config = load_config()
    try:
        configure_logging("DEBUG" if verbose else config.log_level)
    except ValueError as e:
        raise click.UsageError(f"DESKNOTIFY_LOG_LEVEL: {e}")


def _notification_options(f: Callable) -> Callable:
    f = click.option("--open", "open_target", default=None, help="URI or path to open on click (macOS)")(f)
    f = click.option("--sound", default=None, help="Sound name, e.g. Pop (macOS)")(f)
    f = click.option("--message", default=None, help="Body text")(f)
    f = click.option("--subtitle", default=None, help="Second line")(f)
    f = click.option("--title", default=None, help="Header line")(f)
    return f


def _build(title, subtitle, message, sound, open_target):
    """Build a Notification from CLI options, reporting missing fields as usage errors."""
    from desknotify.models import NotificationBuilder, UninitializedFieldError

    builder = NotificationBuilder()
    for setter, value in (
        (builder.title, title),
        (builder.subtitle, subtitle),
        (builder.message, message),
        (builder.sound, sound),
        (builder.open, open_target),
    ):
        if value is not None:
            setter(value)

    try:
        return builder.build()
    except UninitializedFieldError as e:
        raise click.UsageError(str(e))


# ── SEND ──────────────────────────────────────────────────────


@cli.command()
@_notification_options
def send(
    title: str | None,
    subtitle: str | None,
    message: str | None,
    sound: str | None,
    open_target: str | None,
) -> None:
    """Send a desktop notification."""
    notification = _build(title, subtitle, message, sound, open_target)
    notification.notify()


# ── PREVIEW ───────────────────────────────────────────────────


@cli.command()
@_notification_options
def preview(
    title: str | None,
    subtitle: str | None,
    message: str | None,
    sound: str | None,
    open_target: str | None,
) -> None:
    """Print the command line `send` would run, without running it."""
    from desknotify.notifications import select_tool

    notification = _build(title, subtitle, message, sound, open_target)
    # click.echo: rich would read [brackets] in the message as markup
    click.echo(select_tool().command_line(notification))


# ── STATUS ────────────────────────────────────────────────────


@cli.command()
def status() -> None:
    """Show the platform, the selected notification tool and whether it responds."""
    from desknotify.config import load_config
    from desknotify.notifications import select_tool

    config = load_config()
    tool = select_tool(config)

    table = Table(title="desknotify Status")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Platform", config.platform)
    table.add_row("Tool", tool.name)
    if tool.is_available():
        table.add_row("Installed", "[green]yes[/green]")
    else:
        table.add_row("Installed", "[red]no[/red]")
    table.add_row("Default sound", config.default_sound)
    table.add_row("Version", _get_version())

    console.print(table)


def _get_version() -> str:
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("desknotify")
    except PackageNotFoundError:
        return "unknown"


if __name__ == "__main__":
    cli()

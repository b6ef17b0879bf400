"""CLI entry point for errorchain-sdk.

Invoked as::

    errorchain [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m errorchain.cli.main
"""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import get_args

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from errorchain.config.loader import CONFIG_FILE_NAMES, ConfigLoader
from errorchain.schema.config import ClientOptions, TransportKind
from errorchain.schema.errors import ConfigurationError

console = Console()
error_console = Console(stderr=True, style="bold red")

_INIT_HEADER = """\
# errorchain client options.
# ERRORCHAIN_<OPTION> environment variables override these values and
# ERRORCHAIN_CONFIG can point at another file.  A relative transport_path
# is resolved against this file's directory.
"""


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="errorchain-sdk")
def cli() -> None:
    """Turn errors and their cause chains into telemetry events"""


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from errorchain import __version__

    console.print(f"[bold]errorchain-sdk[/bold] v{__version__}")
    console.print(f"Python {sys.version}")


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------


@cli.command(name="init")
@click.option(
    "--directory",
    "-d",
    default=".",
    show_default=True,
    help="Directory in which to create errorchain.yaml.",
)
@click.option(
    "--transport",
    type=click.Choice(list(get_args(TransportKind))),
    default="console",
    show_default=True,
    help="Transport the generated options select.",
)
@click.option(
    "--environment",
    default="development",
    show_default=True,
    help="Environment name stamped on events.",
)
@click.option("--force", is_flag=True, help="Overwrite an existing file.")
def init_command(directory: str, transport: str, environment: str, force: bool) -> None:
    """Write an errorchain.yaml spelling out every client option."""
    target_dir = Path(directory).resolve()
    config_path = target_dir / CONFIG_FILE_NAMES[0]

    if config_path.exists() and not force:
        console.print(
            f"[yellow]{config_path} already exists; use --force to replace it.[/yellow]"
        )
        return

    options = ClientOptions(
        transport=transport,  # type: ignore[arg-type]
        environment=environment,
        transport_path="events.jsonl" if transport == "jsonl" else None,
    )
    body = yaml.safe_dump(options.model_dump(), sort_keys=False)
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        config_path.write_text(_INIT_HEADER + body, encoding="utf-8")
    except OSError as exc:
        error_console.print(f"Failed to write {config_path}: {exc}")
        raise SystemExit(1) from exc
    console.print(f"[green]Wrote {config_path}[/green]")


# ---------------------------------------------------------------------------
# config
# ---------------------------------------------------------------------------


@cli.command(name="config")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to read instead of searching for one.",
)
@click.option(
    "--directory",
    "-d",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory searched for a config file (default: cwd).",
)
@click.option(
    "--format",
    "output_format",
    default="table",
    type=click.Choice(["table", "json"]),
    show_default=True,
    help="Output format.",
)
@click.option("--validate", is_flag=True, help="Only report whether the options resolve.")
def config_command(
    config_path: Path | None,
    directory: Path | None,
    output_format: str,
    validate: bool,
) -> None:
    """Show the options init() would resolve and where each value came from."""
    loader = ConfigLoader()
    try:
        source_file = config_path or loader.find_file(directory)
        options = loader.load(source_file, search_dir=directory)
        file_keys = set(loader.read_file(source_file)) if source_file else set()
    except ConfigurationError as exc:
        error_console.print(f"Could not load options: {escape(str(exc))}")
        raise SystemExit(1) from exc
    env_keys = set(ClientOptions.env_values(loader.env_prefix))

    if validate:
        origin = escape(str(source_file or "defaults"))
        console.print(f"[green]Options from {origin} are valid.[/green]")
        return

    if output_format == "json":
        console.print_json(options.model_dump_json())
        return

    table = Table(title=f"errorchain options ({source_file or 'no config file'})")
    table.add_column("option", style="bold")
    table.add_column("value")
    table.add_column("source", style="dim")
    for name, value in options.model_dump().items():
        if name in env_keys:
            origin = f"{loader.env_prefix}{name.upper()}"
        elif name in file_keys:
            origin = "file"
        else:
            origin = "default"
        table.add_row(name, escape(repr(value)), origin)
    console.print(table)


# ---------------------------------------------------------------------------
# parse-type
# ---------------------------------------------------------------------------


@cli.command(name="parse-type")
@click.argument("debug_text")
def parse_type_command(debug_text: str) -> None:
    """Print the type name recovered from DEBUG_TEXT."""
    from errorchain.chain.type_name import extract_type_name

    name = extract_type_name(debug_text)
    if not name:
        error_console.print("No type name found (text starts with a delimiter).")
        raise SystemExit(1)
    click.echo(name)


# ---------------------------------------------------------------------------
# demo
# ---------------------------------------------------------------------------


@cli.command(name="demo")
@click.option(
    "--format",
    "output_format",
    default="table",
    type=click.Choice(["table", "json"]),
    show_default=True,
    help="Output format.",
)
def demo_command(output_format: str) -> None:
    """Capture a sample chained error and print the resulting event."""
    from errorchain.hub.client import Client
    from errorchain.hub.hub import Hub
    from errorchain.transport.base import MemoryTransport

    transport = MemoryTransport()
    hub = Hub(Client(transport=transport))

    try:
        try:
            int("NaN")
        except ValueError as exc:
            raise RuntimeError("could not read retry count") from exc
    except RuntimeError as exc:
        hub.capture_error(exc)

    event = transport.events[0]

    if output_format == "json":
        console.print_json(json.dumps(event.to_dict(), default=str))
        return

    table = Table(
        title=f"event {event.event_id.hex} ({event.level.value})",
        header_style="bold cyan",
    )
    table.add_column("#", justify="right")
    table.add_column("type")
    table.add_column("value")
    for index, record in enumerate(event.exception):
        table.add_row(str(index), record.ty, record.value or "")
    console.print(table)


if __name__ == "__main__":
    cli()

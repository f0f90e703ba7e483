"""
Click-based CLI for provpath.
"""

import json
import logging
import sys
import time
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .application.services import ProvidersService, RegistryPathService, ResolveService
from .domain.envelopes import build_envelope
from .domain.results import CommandResult

console = Console()
err_console = Console(stderr=True)

# Exit status when a SID rewrite was requested for a key outside HKEY_CURRENT_USER
EXIT_DECLINED = 3


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("provpath")
    for handler in list(logger.handlers):
        if getattr(handler, "_provpath_cli", False):
            logger.removeHandler(handler)
    handler = RichHandler(console=err_console, show_time=False, show_path=False, markup=False)
    handler._provpath_cli = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _print_error(result: CommandResult) -> None:
    err_console.print(f"[red]✗ Error:[/red] {escape(result.message)}", soft_wrap=True)
    if result.recommended_action:
        err_console.print(f"  [yellow]→[/yellow] {escape(result.recommended_action)}", soft_wrap=True)


def _emit_json(command: str, result: CommandResult, started: float) -> None:
    duration_ms = int((time.monotonic() - started) * 1000)
    click.echo(json.dumps(build_envelope(command=command, result=result, duration_ms=duration_ms), indent=2))


@click.group()
@click.version_option(version=__version__, prog_name="provpath")
@click.option("--verbose", "-v", is_flag=True, help="Show debug diagnostics on stderr")
def cli(verbose: bool) -> None:
    """Resolve provider-qualified paths and registry keys"""
    _configure_logging(verbose)


@cli.command()
@click.argument("paths", nargs=-1, required=True)
@click.option("--provider", "-p", help="Only resolve paths of this provider (e.g. FileSystem, Registry)")
@click.option("--literal", is_flag=True, help="Treat paths literally, no wildcard expansion")
@click.option("--force", is_flag=True, help="Include hidden and system items in wildcard matches")
@click.option("--include-non-existent", is_flag=True, help="Return paths that do not exist instead of failing")
@click.option("--native", "as_native_path", is_flag=True, help="Print provider-native paths")
@click.option("--relative", is_flag=True, help="Print paths relative to the current location")
@click.option(
    "--path-type",
    type=click.Choice(["any", "container", "leaf"]),
    default="any",
    show_default=True,
    help="Keep only items of this kind",
)
@click.option("--filter", "name_filter", help="Keep items whose leaf name matches this glob")
@click.option("--include", multiple=True, help="Keep items whose leaf name matches any of these globs")
@click.option("--exclude", multiple=True, help="Drop items whose leaf name matches any of these globs")
@click.option("--continue-on-error", is_flag=True, help="Skip failing paths instead of stopping")
@click.option("--json", "json_output", is_flag=True, help="Print a JSON envelope")
def resolve(
    paths: tuple[str, ...],
    provider: Optional[str],
    literal: bool,
    force: bool,
    include_non_existent: bool,
    as_native_path: bool,
    relative: bool,
    path_type: str,
    name_filter: Optional[str],
    include: tuple[str, ...],
    exclude: tuple[str, ...],
    continue_on_error: bool,
    json_output: bool,
) -> None:
    """Resolve PATHS to fully qualified provider paths"""
    started = time.monotonic()
    result = ResolveService().run(
        paths=list(paths),
        literal=literal,
        provider=provider,
        force=force,
        include_non_existent=include_non_existent,
        as_native_path=as_native_path,
        relative=relative,
        continue_on_error=continue_on_error,
        path_type=path_type,
        name_filter=name_filter,
        include=list(include),
        exclude=list(exclude),
    )

    if json_output:
        _emit_json("resolve", result, started)
    elif result.success:
        for path in result.data["paths"]:
            click.echo(path)
    else:
        _print_error(result)

    if not result.success:
        sys.exit(1)


@cli.command("registry-path")
@click.argument("key")
@click.option("--32bit", "use_32bit_view", is_flag=True, help="Map to the 32-bit registry view on 64-bit systems")
@click.option("--sid", help="Rewrite an HKEY_CURRENT_USER key to HKEY_USERS\\<SID>")
@click.option(
    "--hive-map",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file overriding hive aliases and 32-bit view substitutions",
)
@click.option("--json", "json_output", is_flag=True, help="Print a JSON envelope")
def registry_path(
    key: str,
    use_32bit_view: bool,
    sid: Optional[str],
    hive_map: Optional[Path],
    json_output: bool,
) -> None:
    """Convert registry KEY to its fully qualified form.

    Exits with status 3 when --sid is given for a key outside HKEY_CURRENT_USER.
    """
    started = time.monotonic()
    result = RegistryPathService().run(
        key=key,
        use_32bit_view=use_32bit_view,
        sid=sid,
        hive_map_file=hive_map,
    )

    if json_output:
        _emit_json("registry-path", result, started)
    elif not result.success:
        _print_error(result)
    elif result.data["path"] is None:
        for warning in result.warnings:
            err_console.print(f"[yellow]⚠ {escape(warning)}[/yellow]", soft_wrap=True)
    else:
        click.echo(result.data["path"])

    if not result.success:
        sys.exit(1)
    if result.data.get("path") is None:
        sys.exit(EXIT_DECLINED)


@cli.command()
@click.option("--json", "json_output", is_flag=True, help="Print a JSON envelope")
def providers(json_output: bool) -> None:
    """List registered providers"""
    started = time.monotonic()
    result = ProvidersService().run()

    if json_output:
        _emit_json("providers", result, started)
        return

    table = Table(title="Registered providers")
    table.add_column("Name", style="cyan")
    table.add_column("Namespace")
    table.add_column("Drives")
    table.add_column("Description")
    for provider in result.data["providers"]:
        name = provider["name"] + (" (default)" if provider["default"] else "")
        table.add_row(name, provider["namespace"], ", ".join(provider["drives"]), provider["description"])
    console.print(table)


if __name__ == "__main__":
    cli()

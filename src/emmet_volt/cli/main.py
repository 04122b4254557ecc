"""CLI entry point for emmet-volt.

``emmet-volt serve`` is what the editor runs; ``emmet-volt resolve`` runs a
single initialization in the terminal and prints what would be launched.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console

from .. import __version__
from ..core.config import apply_logging, load_logging_config, load_settings
from ..core.config_loader import ConfigFileError, load_json_file
from ..host.console import ConsoleHost
from ..host.stdio import StdioHost, serve as serve_stdio
from ..lsp.installer import run_command
from ..lsp.plugin import EmmetPlugin, Method
from ..util.log import Log

app = typer.Typer(
    name="emmet-volt",
    help="emmet-ls language server plugin",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"emmet-volt {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """emmet-ls language server plugin."""


def _setup_logging(print_logs: bool, log_level: Optional[str], default_file: bool) -> None:
    config = load_logging_config()
    updates: Dict[str, Any] = {}
    if print_logs:
        updates["console"] = True
    if log_level:
        updates["level"] = log_level
    apply_logging(config.model_copy(update=updates), default_file=default_file)


@app.command()
def serve(
    print_logs: bool = typer.Option(
        False,
        "--print-logs",
        help="Write logs to stderr",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Minimum log level (debug, info, warn, error)",
    ),
):
    """Talk JSON-RPC with the editor over stdin/stdout."""
    _setup_logging(print_logs, log_level, default_file=True)
    Log.session("serve", {"version": __version__})
    host = StdioHost(sys.stdout.buffer)
    plugin = EmmetPlugin(host, runner=run_command, settings=load_settings())
    try:
        serve_stdio(plugin, sys.stdin.buffer)
    finally:
        Log.close()


@app.command()
def resolve(
    options: Optional[Path] = typer.Option(
        None,
        "--options",
        "-o",
        help="JSON/JSONC file with the initializationOptions to send",
    ),
    install_dir: Optional[str] = typer.Option(
        None,
        "--install-dir",
        help="Plugin directory URI (defaults to $VOLT_URI)",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the launch description as JSON",
    ),
    print_logs: bool = typer.Option(
        False,
        "--print-logs",
        help="Write logs to stderr",
    ),
):
    """Run one initialization and show the server that would be started."""
    _setup_logging(print_logs, None, default_file=False)

    params: Dict[str, Any] = {"initializationOptions": None}
    if options is not None:
        try:
            params["initializationOptions"] = load_json_file(str(options))
        except ConfigFileError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    host = ConsoleHost(install_dir=install_dir)
    plugin = EmmetPlugin(host, runner=run_command, settings=load_settings())
    server = plugin.handle_request(0, Method.INITIALIZE.value, params)

    if server is not None:
        if json_output:
            typer.echo(json.dumps(server.model_dump(mode="json"), indent=2, ensure_ascii=False))
        else:
            console.print(f"server: {server.uri}", highlight=False)
            console.print(f"args: {' '.join(server.args) or '(none)'}", highlight=False)
            for item in server.selector:
                console.print(f"selector: language={item.language} pattern={item.pattern}", highlight=False)
    elif not host.failed:
        console.print("Unsupported platform; no server started")

    if host.failed:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()

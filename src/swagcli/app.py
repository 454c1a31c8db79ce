"""Typer application for inspecting what swagcli produces from a document.

This is a development aid, not the REST host: it reads a local Swagger 2
file, compiles it and prints the resulting commands, or replays a saved
response through the pagination link parser.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``.  :class:`~swagcli.exceptions.SwagcliError` failures are
printed to stderr and mapped to their exit codes.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import typer

from swagcli import __version__
from swagcli.exceptions import InvalidUsageError, SpecParseError, SwagcliError
from swagcli.exit_codes import EXIT_GENERIC_FAILURE

app = typer.Typer(
    name="swagcli",
    help="Compile Swagger 2 documents into CLI command descriptors.",
    no_args_is_help=True,
    add_completion=False,
)

DEFAULT_BASE = "https://localhost/"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"swagcli {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit."
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output format."),
    plain_output: bool = typer.Option(False, "--plain", help="Plain text output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug output."),
) -> None:
    """Initialise the global output manager from the CLI flags."""
    from swagcli.output import OutputFormat, OutputManager, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    set_output(OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose))
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="[%(name)s] %(message)s")


def _compile_file(path: Path, base: str):  # noqa: ANN202
    from swagcli.config import resolve_settings
    from swagcli.loader import new

    if not path.is_file():
        raise SpecParseError(f"Document not found: {path}")
    loader = new(resolve_settings())
    content = path.read_text(encoding="utf-8")
    if not loader.detect(content):
        raise SpecParseError(f"{path} does not look like a Swagger 2 document")
    return loader.load(base, path.resolve().as_uri(), content)


@app.command("operations")
def operations_command(
    document: Path = typer.Argument(..., help="Path to a Swagger 2 JSON/YAML file."),
    base: str = typer.Option(DEFAULT_BASE, "--base", "-b", help="API base URL."),
    show_hidden: bool = typer.Option(False, "--hidden", help="Include hidden commands."),
) -> None:
    """List the commands compiled from DOCUMENT."""
    from swagcli.output import get_output

    api = _compile_file(document, base)
    rows = [
        [op.name, op.method, op.uri_template, ", ".join(op.aliases), op.group]
        for op in api.operations
        if show_hidden or not op.hidden
    ]
    get_output().print_table(
        ["name", "method", "uri", "aliases", "group"], rows, title=api.short or None
    )


@app.command("show")
def show_command(
    document: Path = typer.Argument(..., help="Path to a Swagger 2 JSON/YAML file."),
    name: str = typer.Argument(..., help="Command name or alias."),
    base: str = typer.Option(DEFAULT_BASE, "--base", "-b", help="API base URL."),
) -> None:
    """Print the help text composed for one command."""
    from swagcli.output import print_data, print_markdown

    api = _compile_file(document, base)
    for op in api.operations:
        if name == op.name or name in op.aliases:
            header = f"{op.method} {op.uri_template}"
            if op.deprecated:
                header += f"  [deprecated: {op.deprecated}]"
            print_data(header + "\n")
            if op.short:
                print_data(op.short + "\n")
            print_markdown(op.long.rstrip("\n"))
            return
    raise InvalidUsageError(f"No command named {name!r} in {document}")


@app.command("next-page")
def next_page_command(
    url: str = typer.Argument(..., help="URL of the request that produced the response."),
    response_file: Path = typer.Argument(..., help="File holding the JSON response body."),
) -> None:
    """Replay a saved response through the pagination link parser."""
    from swagcli.config import resolve_settings
    from swagcli.links import NEXT_REL, new_link_parser
    from swagcli.models import Response
    from swagcli.output import info, print_data

    try:
        body = json.loads(response_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise InvalidUsageError(f"Cannot read response body from {response_file}: {exc}") from exc

    response = Response(body=body)
    new_link_parser(resolve_settings()).parse_links(url, response)

    for link in response.links.get(NEXT_REL, []):
        info(f"next: {link.uri}")
    print_data(json.dumps(response.body, indent=2, ensure_ascii=False))


def main() -> None:
    """CLI entry point invoked by the ``swagcli`` console script."""
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except SwagcliError as exc:
        from swagcli.output import error

        error(str(exc))
        sys.exit(exc.exit_code)
    except Exception as exc:
        from swagcli.output import error

        error(f"Unexpected error: {exc}")
        sys.exit(EXIT_GENERIC_FAILURE)

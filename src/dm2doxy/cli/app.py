import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from dm2doxy.core.pipeline import read_pseudo_source, run_produce
from dm2doxy.errors import Dm2DoxyError
from dm2doxy.parser.config import get_environment_parser

app = typer.Typer(
    name="dm2doxy",
    help="Doxygen filter for DreamMaker environments.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
err_console = Console(stderr=True, soft_wrap=True)

_READ_BACK_SUFFIX = ".dm"
_PRODUCE_SUFFIX = ".dme"


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


@app.command()
def filter_file(
    path: Annotated[Path, typer.Argument(help="A .dme to collate, or a .dm whose pseudo-source to print.")],
    parser_command: Annotated[
        str | None, typer.Option("--parser", help="Command that dumps the environment as JSON.")
    ] = None,
    objtree: Annotated[Path | None, typer.Option(help="Pre-built JSON dump of the environment.")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug details.")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only log warnings and errors.")] = False,
) -> None:
    """Print pseudo-source for a .dm file, or produce it for a whole .dme environment."""
    _configure_logging(verbose, quiet)

    suffix = path.suffix
    if suffix not in (_READ_BACK_SUFFIX, _PRODUCE_SUFFIX):
        err_console.print(f"[red]bad extension:[/red] {escape(suffix or '(none)')}; expected .dm or .dme")
        raise typer.Exit(2)

    try:
        if suffix == _READ_BACK_SUFFIX:
            contents = read_pseudo_source(path)
            sys.stdout.buffer.write(contents)
            sys.stdout.buffer.flush()
        else:
            err_console.print(f"parsing {escape(str(path))}")
            parser = get_environment_parser(parser_command, objtree)
            run_produce(parser, path)
    except (Dm2DoxyError, OSError) as exc:
        err_console.print(f"    [red]error:[/red] {escape(str(exc))}")
        raise typer.Exit(1) from exc


def main() -> None:
    app()

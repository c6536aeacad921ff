"""mdrun CLI Main Entry Point

mdrun - run markdown code blocks by their heading.
Headings form a command hierarchy, fenced code blocks are the commands,
and two-column tables declare environment variables for a heading and
everything below it.

Usage:
    mdrun                              # List runnable headings
    mdrun <heading...>                 # Run the blocks under a heading
    mdrun <heading...> -- <args...>    # Pass trailing args to each block
    mdrun -f path/to/doc.md <heading>  # Use a specific document
    mdrun --dry-run <heading>          # Print commands without running
    mdrun -v                           # Verbose listing / logging
    mdrun -h                           # Show this help
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer

from ._version import __version__
from .commands import list_command, run_command
from .commands.utils import get_document, setup_logging
from .lib.config import load_config
from .lib.context import CLIContext, split_args
from .lib.errors import MdrunError, handle_error
from .lib.parser import parse_markdown_file

log = logging.getLogger(__name__)

typer_app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@typer_app.command()
def cli(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Print more information."
    ),
    file_path: Optional[Path] = typer.Option(
        None, "-f", "--file", help="Markdown file to use."
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Print commands without executing them."
    ),
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    path: Optional[List[str]] = typer.Argument(None, help="Heading path to run."),
) -> None:
    """Run markdown code blocks by their heading.

    \b
    Examples:
        mdrun                       List runnable headings
        mdrun build                 Run the blocks under 'build'
        mdrun deploy prod           Run 'prod' nested under 'deploy'
        mdrun test -- -k unit       Pass '-k unit' to the blocks of 'test'
    """
    if version:
        typer.echo(f"mdrun {__version__}")
        raise typer.Exit()

    setup_logging(verbose)
    cli_ctx = ctx.ensure_object(CLIContext)
    heading_path: List[str] = list(path) if path is not None else []

    try:
        config = load_config()
        registry = config.build_registry()
        document = get_document(file_path, cli_ctx.program, config)
        log.info(f"Using document {document}")

        try:
            root = parse_markdown_file(document, registry)
        except OSError as e:
            raise MdrunError(f"Error reading file: {e}")

        if not heading_path:
            list_command(root, verbose=verbose)
            raise typer.Exit()

        run_command(
            root,
            heading_path,
            cli_ctx.trailing_args,
            registry=registry,
            runner_path=cli_ctx.runner_path,
            document=document,
            dry_run=dry_run,
        )
    except MdrunError as e:
        handle_error(e)


def app(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    Arguments after the first ``--`` are split off before typer sees them
    and handed to the command through the context object.
    """
    runner_path = sys.argv[0]
    head, trailing = split_args(sys.argv[1:] if argv is None else argv)
    program = Path(runner_path).stem or "mdrun"
    cli_ctx = CLIContext(
        program=program, runner_path=runner_path, trailing_args=trailing
    )
    typer_app(args=head, prog_name=program, obj=cli_ctx)


if __name__ == "__main__":
    app()

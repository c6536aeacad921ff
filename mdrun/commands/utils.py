"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from mdrun.lib.config import MdrunConfig
from mdrun.lib.document import find_document

console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the mdrun CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level
    - Debug (MDRUN_DEBUG=1): DEBUG level - parsing, resolution and argv details
    """
    debug = bool(os.environ.get("MDRUN_DEBUG"))
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Children share our stdout, so logs go to stderr
    handler = RichHandler(
        console=err_console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("mdrun")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def get_document(
    file_path: Optional[Path], program: str, config: MdrunConfig
) -> Path:
    """Explicit --file, or the nearest document found by discovery"""
    if file_path is not None:
        return file_path
    return find_document(program, extra_names=config.doc_names)

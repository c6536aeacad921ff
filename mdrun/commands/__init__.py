"""CLI commands"""

from .run import run_command
from .list import list_command

__all__ = ["run_command", "list_command"]

"""Core library: parsing, resolution, environment and execution"""

from .config import LanguageConfig, MdrunConfig, load_config
from .document import find_document
from .env import build_process_env, compose_env
from .errors import (
    ConfigError,
    DocumentNotFoundError,
    ExecutionError,
    MdrunError,
    NoCodeBlocksError,
    ResolutionError,
    UnsupportedLanguageError,
)
from .executor import Executor
from .languages import Language, LanguageRegistry
from .node import CodeBlock, CommandNode
from .parser import DocumentCompiler, parse_markdown, parse_markdown_file
from .resolver import resolve

__all__ = [
    # config
    "LanguageConfig",
    "MdrunConfig",
    "load_config",
    # document
    "find_document",
    "parse_markdown",
    "parse_markdown_file",
    "DocumentCompiler",
    # tree
    "CodeBlock",
    "CommandNode",
    "resolve",
    # execution
    "Executor",
    "Language",
    "LanguageRegistry",
    "build_process_env",
    "compose_env",
    # errors
    "ConfigError",
    "DocumentNotFoundError",
    "ExecutionError",
    "MdrunError",
    "NoCodeBlocksError",
    "ResolutionError",
    "UnsupportedLanguageError",
]

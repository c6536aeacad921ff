"""Language registry: maps a fence tag to an interpreter invocation.

Each entry carries the interpreter program and an argument template. The
template is the full argv, including argv[0], and may contain two
placeholder tokens:

- ``$NAME``: replaced by the interpreter program name
- ``$CODE``: replaced by the block's source text, as a single argument

Placeholders replace whole tokens only; ``"-c$CODE"`` stays literal.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Sequence

NAME_PLACEHOLDER = "$NAME"
CODE_PLACEHOLDER = "$CODE"


@dataclass(frozen=True)
class Language:
    """Interpreter invocation for one language tag."""

    tag: str
    program: str
    template: tuple[str, ...]

    def build_argv(self, code: str, args: Sequence[str] = ()) -> list[str]:
        """Substitute placeholders and append trailing user arguments."""
        argv: list[str] = []
        for token in self.template:
            if token == CODE_PLACEHOLDER:
                argv.append(code)
            elif token == NAME_PLACEHOLDER:
                argv.append(self.program)
            else:
                argv.append(token)
        argv.extend(args)
        return argv


_SHELL_TEMPLATE = (NAME_PLACEHOLDER, "-euc", CODE_PLACEHOLDER, "--")

# tag -> (program, template)
_BUILTIN_LANGUAGES: dict[str, tuple[str, tuple[str, ...]]] = {
    "sh": ("sh", _SHELL_TEMPLATE),
    "bash": ("bash", _SHELL_TEMPLATE),
    "zsh": ("zsh", _SHELL_TEMPLATE),
    "fish": ("fish", _SHELL_TEMPLATE),
    "dash": ("dash", _SHELL_TEMPLATE),
    "ksh": ("ksh", _SHELL_TEMPLATE),
    "ash": ("ash", _SHELL_TEMPLATE),
    "shell": ("sh", _SHELL_TEMPLATE),
    "awk": ("awk", ("awk", CODE_PLACEHOLDER)),
    "js": ("node", ("node", "-e", CODE_PLACEHOLDER)),
    "javascript": ("node", ("node", "-e", CODE_PLACEHOLDER)),
    "py": ("python", ("python", "-c", CODE_PLACEHOLDER)),
    "python": ("python", ("python", "-c", CODE_PLACEHOLDER)),
    "rb": ("ruby", ("ruby", "-e", CODE_PLACEHOLDER)),
    "ruby": ("ruby", ("ruby", "-e", CODE_PLACEHOLDER)),
    "php": ("php", ("php", "-r", CODE_PLACEHOLDER)),
    "cmd": ("cmd.exe", ("cmd.exe", "/c", CODE_PLACEHOLDER)),
    "batch": ("cmd.exe", ("cmd.exe", "/c", CODE_PLACEHOLDER)),
    "powershell": ("powershell.exe", ("powershell.exe", "-c", CODE_PLACEHOLDER)),
}


class LanguageRegistry:
    """Read-only mapping of lower-cased language tag to `Language`.

    Built once per invocation and passed to the parser (to filter blocks)
    and to the executor (to build argv).
    """

    def __init__(self, languages: Mapping[str, Language]):
        self._languages = MappingProxyType(
            {tag.lower(): lang for tag, lang in languages.items()}
        )

    @classmethod
    def default(cls) -> "LanguageRegistry":
        return cls.with_overrides({})

    @classmethod
    def with_overrides(
        cls, overrides: Mapping[str, tuple[str, Sequence[str]]]
    ) -> "LanguageRegistry":
        """Built-in languages with `overrides` (tag -> (program, template)) on top."""
        merged: dict[str, Language] = {}
        for tag, (program, template) in _BUILTIN_LANGUAGES.items():
            merged[tag] = Language(tag=tag, program=program, template=template)
        for tag, (program, template) in overrides.items():
            key = tag.lower()
            merged[key] = Language(tag=key, program=program, template=tuple(template))
        return cls(merged)

    def get(self, tag: str | None) -> Language | None:
        if not tag:
            return None
        return self._languages.get(tag.strip().lower())

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, str) and self.get(tag) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._languages)

    def __len__(self) -> int:
        return len(self._languages)

"""User configuration for mdrun.

Optional YAML file, looked up at ``$MDRUN_CONFIG`` or ``~/.mdrun.yaml``:

    languages:
      deno:
        program: deno
        args: [deno, eval, $CODE]
    doc_names:
      - TASKS.md
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from mdrun.lib.errors import ConfigError
from mdrun.lib.languages import LanguageRegistry

CONFIG_ENV_VAR = "MDRUN_CONFIG"
DEFAULT_CONFIG_NAME = ".mdrun.yaml"


class LanguageConfig(BaseModel):
    """Interpreter invocation for a language tag."""

    program: str
    args: list[str] = Field(
        default_factory=list,
        description="Full argv template; $NAME and $CODE are substituted",
    )


class MdrunConfig(BaseModel):
    """Full mdrun configuration"""

    languages: dict[str, LanguageConfig] = {}
    doc_names: list[str] = []

    @classmethod
    def load(cls, path: Path) -> "MdrunConfig":
        """Load config from yaml file; a missing file gives the defaults"""
        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}")
        except OSError as e:
            raise ConfigError(f"Cannot read config {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config {path}: {e}")

    def build_registry(self) -> LanguageRegistry:
        """Built-in languages with the configured ones merged on top."""
        overrides = {
            tag: (lang.program, lang.args or [lang.program, "$CODE"])
            for tag, lang in self.languages.items()
        }
        return LanguageRegistry.with_overrides(overrides)


def resolve_config_path() -> Path:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / DEFAULT_CONFIG_NAME


def load_config(path: Path | None = None) -> MdrunConfig:
    return MdrunConfig.load(path or resolve_config_path())

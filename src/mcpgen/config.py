"""Configuration shared by the generator and the CLI."""

from __future__ import annotations

import logging
import os
import shlex
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping

__all__ = [
    "BUNDLED_TEMPLATE_DIR",
    "DEFAULT_ENV",
    "DEFAULT_EXCLUDES",
    "GeneratorConfig",
]


BUNDLED_TEMPLATE_DIR = Path(__file__).resolve().parent / "template"

DEFAULT_EXCLUDES: tuple[str, ...] = (
    "create-mcp-project",
    "setup-new-project.js",
    ".git",
    "node_modules",
    "dist",
    ".DS_Store",
    ".env",
    "__pycache__",
)

DEFAULT_ENV: tuple[tuple[str, str], ...] = (
    ("PORT", "3000"),
    ("LOG_LEVEL", "info"),
)


def _parse_log_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level '{value}'")
    return level


def _parse_timeout(value: str) -> float | None:
    value = value.strip()
    if not value or value.lower() == "none":
        return None
    try:
        timeout = float(value)
    except ValueError as exc:
        raise ValueError(f"invalid command timeout '{value}'") from exc
    if timeout <= 0:
        raise ValueError("command timeout must be positive")
    return timeout


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Settings for a generation run.

    Attributes
    ----------
    template_dir:
        Root of the template that gets copied. Defaults to the MCP server
        template bundled with the package.
    excludes:
        Base names that are never copied into a new project.
    env_defaults:
        ``KEY=value`` pairs written to the generated ``.env.example``.
    install_command:
        Command used by the optional dependency installation step.
    git_commit_message:
        Message for the initial commit of the optional git step.
    command_timeout:
        Seconds an external command may run, ``None`` for no limit.
    log_level:
        Level applied to the root logger by the CLI.
    """

    template_dir: Path = BUNDLED_TEMPLATE_DIR
    excludes: tuple[str, ...] = DEFAULT_EXCLUDES
    env_defaults: tuple[tuple[str, str], ...] = DEFAULT_ENV
    install_command: tuple[str, ...] = ("npm", "install")
    git_commit_message: str = "Initial commit: MCP server template setup"
    command_timeout: float | None = None
    log_level: int = field(default=logging.WARNING)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GeneratorConfig":
        """Build a configuration from ``MCPGEN_*`` environment variables.

        Recognised variables are ``MCPGEN_TEMPLATE_DIR``, ``MCPGEN_LOG_LEVEL``,
        ``MCPGEN_COMMAND_TIMEOUT`` and ``MCPGEN_INSTALL_COMMAND``. Unset or
        empty variables keep their defaults.
        """

        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}

        template_dir = env.get("MCPGEN_TEMPLATE_DIR", "").strip()
        if template_dir:
            overrides["template_dir"] = Path(template_dir).expanduser()

        log_level = env.get("MCPGEN_LOG_LEVEL", "").strip()
        if log_level:
            overrides["log_level"] = _parse_log_level(log_level)

        timeout = env.get("MCPGEN_COMMAND_TIMEOUT")
        if timeout is not None:
            overrides["command_timeout"] = _parse_timeout(timeout)

        install_command = env.get("MCPGEN_INSTALL_COMMAND", "").strip()
        if install_command:
            overrides["install_command"] = tuple(shlex.split(install_command))

        return cls(**overrides)  # type: ignore[arg-type]

    def with_template_dir(self, template_dir: str | Path) -> "GeneratorConfig":
        return replace(self, template_dir=Path(template_dir).expanduser())

    def env_example(self) -> str:
        """Return the contents of a fresh ``.env.example`` file."""

        lines = ["# Server Configuration"]
        lines.extend(f"{key}={value}" for key, value in self.env_defaults)
        lines.extend(
            [
                "",
                "# Add your custom environment variables here",
                "# API_KEY=your_api_key_here",
                "# DATABASE_URL=your_database_url_here",
            ]
        )
        return "\n".join(lines) + "\n"

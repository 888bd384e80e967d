from __future__ import annotations

import logging
from pathlib import Path

import pytest

from mcpgen.config import BUNDLED_TEMPLATE_DIR, DEFAULT_EXCLUDES, GeneratorConfig


def test_defaults_point_at_bundled_template():
    config = GeneratorConfig()
    assert config.template_dir == BUNDLED_TEMPLATE_DIR
    assert (BUNDLED_TEMPLATE_DIR / "package.json").is_file()
    assert config.excludes == DEFAULT_EXCLUDES
    assert ".git" in config.excludes and "node_modules" in config.excludes
    assert config.command_timeout is None


def test_from_env_reads_overrides(tmp_path: Path):
    config = GeneratorConfig.from_env(
        {
            "MCPGEN_TEMPLATE_DIR": str(tmp_path),
            "MCPGEN_LOG_LEVEL": "debug",
            "MCPGEN_COMMAND_TIMEOUT": "90",
            "MCPGEN_INSTALL_COMMAND": "pnpm install --frozen-lockfile",
        }
    )
    assert config.template_dir == tmp_path
    assert config.log_level == logging.DEBUG
    assert config.command_timeout == 90.0
    assert config.install_command == ("pnpm", "install", "--frozen-lockfile")


def test_from_env_ignores_empty_values():
    assert GeneratorConfig.from_env({"MCPGEN_TEMPLATE_DIR": "  ", "MCPGEN_LOG_LEVEL": ""}) == GeneratorConfig()


@pytest.mark.parametrize(
    "environ",
    [
        {"MCPGEN_LOG_LEVEL": "chatty"},
        {"MCPGEN_COMMAND_TIMEOUT": "soon"},
        {"MCPGEN_COMMAND_TIMEOUT": "-1"},
    ],
)
def test_from_env_rejects_invalid_values(environ):
    with pytest.raises(ValueError):
        GeneratorConfig.from_env(environ)


def test_with_template_dir_returns_copy(tmp_path: Path):
    config = GeneratorConfig()
    other = config.with_template_dir(tmp_path)
    assert other.template_dir == tmp_path
    assert config.template_dir == BUNDLED_TEMPLATE_DIR


def test_env_example_content():
    assert GeneratorConfig().env_example() == (
        "# Server Configuration\n"
        "PORT=3000\n"
        "LOG_LEVEL=info\n"
        "\n"
        "# Add your custom environment variables here\n"
        "# API_KEY=your_api_key_here\n"
        "# DATABASE_URL=your_database_url_here\n"
    )

"""Best-effort steps run after the project tree has been generated.

Both steps shell out to external tools. A failure never aborts generation: it
is logged and reported back as a :class:`StepOutcome` with a warning status.
"""

from __future__ import annotations

import logging
import subprocess
from enum import Enum
from pathlib import Path
from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["OutcomeStatus", "StepOutcome", "initialize_git", "install_dependencies"]


LOGGER = logging.getLogger(__name__)


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    SKIPPED = "skipped"
    WARNING = "warning"


class StepOutcome(BaseModel):
    """Result of an optional step, kept apart from fatal generation errors."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: OutcomeStatus = Field(..., description="How the step ended.")
    detail: str | None = Field(None, description="Failure cause when the step produced a warning.")

    @classmethod
    def success(cls) -> "StepOutcome":
        return cls(status=OutcomeStatus.SUCCESS)

    @classmethod
    def skipped(cls) -> "StepOutcome":
        return cls(status=OutcomeStatus.SKIPPED)

    @classmethod
    def warning(cls, detail: str) -> "StepOutcome":
        return cls(status=OutcomeStatus.WARNING, detail=detail)

    @property
    def is_warning(self) -> bool:
        return self.status is OutcomeStatus.WARNING


def _describe_failure(exc: Exception) -> str:
    if isinstance(exc, subprocess.CalledProcessError):
        stderr = exc.stderr.strip() if isinstance(exc.stderr, str) else ""
        command = " ".join(str(part) for part in exc.cmd) if isinstance(exc.cmd, (list, tuple)) else str(exc.cmd)
        message = f"'{command}' exited with status {exc.returncode}"
        return f"{message}: {stderr}" if stderr else message
    if isinstance(exc, subprocess.TimeoutExpired):
        return f"'{' '.join(str(part) for part in exc.cmd)}' timed out after {exc.timeout}s"
    return str(exc)


def _run(command: Sequence[str], cwd: Path, *, timeout: float | None, capture: bool = True) -> None:
    LOGGER.debug("running %s in %s", " ".join(command), cwd)
    subprocess.run(
        list(command),
        cwd=cwd,
        capture_output=capture,
        check=True,
        text=True,
        timeout=timeout,
    )


def initialize_git(
    project_dir: str | Path,
    *,
    commit_message: str = "Initial commit: MCP server template setup",
    timeout: float | None = None,
) -> StepOutcome:
    """Create a git repository in ``project_dir`` holding one initial commit."""

    project_dir = Path(project_dir)
    commands = (
        ("git", "init"),
        ("git", "add", "."),
        ("git", "commit", "-m", commit_message),
    )
    try:
        for command in commands:
            _run(command, project_dir, timeout=timeout)
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as exc:
        detail = _describe_failure(exc)
        LOGGER.warning("Failed to initialize git repository: %s", detail)
        return StepOutcome.warning(detail)
    return StepOutcome.success()


def install_dependencies(
    project_dir: str | Path,
    *,
    command: Sequence[str] = ("npm", "install"),
    timeout: float | None = None,
) -> StepOutcome:
    """Run the package installer in ``project_dir`` with output passed through."""

    project_dir = Path(project_dir)
    try:
        _run(command, project_dir, timeout=timeout, capture=False)
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as exc:
        detail = _describe_failure(exc)
        LOGGER.warning("Failed to install dependencies: %s", detail)
        return StepOutcome.warning(detail)
    return StepOutcome.success()

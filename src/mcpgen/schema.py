"""Request and result models exchanged with the generator."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .naming import NameFormatSet
from .steps import StepOutcome


class GenerationState(str, Enum):
    """Stages of a generation run, in the order they are entered."""

    VALIDATING = "validating"
    FORMATTING = "formatting"
    COPYING = "copying"
    REWRITING = "rewriting"
    VCS_INIT = "vcs_init"
    DEPENDENCY_INSTALL = "dependency_install"
    DONE = "done"
    FAILED = "failed"


class GenerationRequest(BaseModel):
    """Everything a run needs, fixed before the filesystem is touched."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Kebab-case project identifier.")
    description: str = Field("", description="Human readable project description.")
    author: str = Field("", description="Author written into the package manifest.")
    target_dir: Path | None = Field(None, description="Destination override; defaults to mcp-<name>.")
    init_git: bool = Field(True, description="Initialise a git repository after generation.")
    install_deps: bool = Field(False, description="Run the dependency installer after generation.")
    cleanup_on_failure: bool = Field(
        False, description="Remove a partially written destination when copying or rewriting fails."
    )


class GenerationResult(BaseModel):
    """Outcome of a successful run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    destination: Path = Field(..., description="Absolute path of the generated project.")
    names: NameFormatSet = Field(..., description="Name variants used while rewriting.")
    rewritten: List[str] = Field(default_factory=list, description="Files changed by the rewrite table.")
    vcs: StepOutcome = Field(..., description="Result of the git initialisation step.")
    dependencies: StepOutcome = Field(..., description="Result of the dependency installation step.")
    states: List[GenerationState] = Field(default_factory=list, description="States entered during the run.")

    @property
    def has_warnings(self) -> bool:
        return self.vcs.is_warning or self.dependencies.is_warning


__all__ = ["GenerationRequest", "GenerationResult", "GenerationState"]

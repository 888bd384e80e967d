"""Project generation: validate, copy, rewrite, then the optional post steps."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Callable, Iterable

from .config import GeneratorConfig
from .copier import TreeCopier
from .errors import DestinationExistsError, GenerationError
from .naming import NameFormatSet, ProjectIdentifier, format_names
from .rewrite import RewriteContext, Rule, TextRewriter, write_env_example
from .rules import DEFAULT_RULES
from .schema import GenerationRequest, GenerationResult, GenerationState
from .steps import StepOutcome, initialize_git, install_dependencies

__all__ = ["ProjectGenerator", "default_destination"]


LOGGER = logging.getLogger(__name__)

Progress = Callable[[str], None]


def default_destination(names: NameFormatSet) -> Path:
    """Return the destination used when no target directory is requested."""

    return Path(f"mcp-{names.kebab}")


class ProjectGenerator:
    """Instantiate the configured template as a new project.

    A run moves through :class:`~mcpgen.schema.GenerationState` in order and
    ends in ``DONE`` or ``FAILED``. Validation and precondition failures happen
    before anything is written. Copy and rewrite failures leave the partial
    tree in place unless the request asks for ``cleanup_on_failure``. Git
    initialisation and dependency installation only ever produce warnings.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        *,
        rules: Iterable[Rule] | None = None,
        progress: Progress | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.rewriter = TextRewriter(DEFAULT_RULES if rules is None else rules)
        self.progress: Progress = progress or LOGGER.info
        self.state = GenerationState.VALIDATING
        self.history: list[GenerationState] = []

    def _enter(self, state: GenerationState) -> None:
        LOGGER.debug("state %s -> %s", self.state.value, state.value)
        self.state = state
        self.history.append(state)

    def generate(self, request: GenerationRequest) -> GenerationResult:
        """Run a complete generation for ``request``.

        Returns the result holding the absolute destination path. Raises a
        :class:`~mcpgen.errors.GenerationError` subclass when the run fails.
        """

        self.history = []
        self._enter(GenerationState.VALIDATING)
        try:
            identifier = ProjectIdentifier(request.name)
        except GenerationError:
            self._enter(GenerationState.FAILED)
            raise

        self.progress(f"Creating new MCP server project: {identifier}")

        self._enter(GenerationState.FORMATTING)
        names = format_names(identifier)

        destination = (request.target_dir or default_destination(names)).expanduser().resolve()
        if destination.exists():
            self._enter(GenerationState.FAILED)
            raise DestinationExistsError(destination)

        self._enter(GenerationState.COPYING)
        try:
            self._copy(destination)
            self._enter(GenerationState.REWRITING)
            rewritten = self._rewrite(destination, RewriteContext(names=names, request=request))
        except GenerationError:
            self._enter(GenerationState.FAILED)
            if request.cleanup_on_failure:
                self._cleanup(destination)
            raise

        vcs = StepOutcome.skipped()
        if request.init_git:
            self._enter(GenerationState.VCS_INIT)
            self.progress("Initializing git repository...")
            vcs = initialize_git(
                destination,
                commit_message=self.config.git_commit_message,
                timeout=self.config.command_timeout,
            )

        dependencies = StepOutcome.skipped()
        if request.install_deps:
            self._enter(GenerationState.DEPENDENCY_INSTALL)
            self.progress("Installing dependencies...")
            dependencies = install_dependencies(
                destination,
                command=self.config.install_command,
                timeout=self.config.command_timeout,
            )

        self._enter(GenerationState.DONE)
        return GenerationResult(
            destination=destination,
            names=names,
            rewritten=rewritten,
            vcs=vcs,
            dependencies=dependencies,
            states=list(self.history),
        )

    def _copy(self, destination: Path) -> None:
        self.progress(f"Creating project directory: {destination}")
        # The destination name is excluded too, so a target inside the template never copies itself.
        excludes = (*self.config.excludes, destination.name)
        TreeCopier(excludes).copy(self.config.template_dir, destination)

    def _rewrite(self, destination: Path, context: RewriteContext) -> list[str]:
        self.progress("Updating configuration files...")
        rewritten = self.rewriter.apply(destination, context)
        write_env_example(destination, self.config.env_example())
        return rewritten

    def _cleanup(self, destination: Path) -> None:
        if not destination.exists():
            return
        LOGGER.warning("Removing partially generated project at %s", destination)
        try:
            shutil.rmtree(destination)
        except OSError as exc:
            LOGGER.warning("Could not remove %s: %s", destination, exc)

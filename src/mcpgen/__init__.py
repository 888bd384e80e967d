"""Generate new MCP server projects from a template.

The package validates a kebab-case project name, derives the name variants the
template needs, copies the template tree while guarding against copying a
destination into itself, and rewrites a fixed set of literal tokens in the
copied files. Git initialisation and dependency installation run afterwards on
a best-effort basis.
"""

from __future__ import annotations

from .config import GeneratorConfig
from .copier import TreeCopier
from .errors import (
    CopyError,
    DestinationExistsError,
    GenerationError,
    InvalidProjectNameError,
    PreconditionError,
    RewriteError,
    TemplateIntegrityError,
    TemplateNotFoundError,
)
from .generator import ProjectGenerator
from .naming import NameFormatSet, ProjectIdentifier, format_names
from .rewrite import LiteralRule, ManifestField, RewriteContext, TextRewriter, find_stale_rules
from .schema import GenerationRequest, GenerationResult, GenerationState
from .steps import OutcomeStatus, StepOutcome

__all__ = [
    "CopyError",
    "DestinationExistsError",
    "GenerationError",
    "GenerationRequest",
    "GenerationResult",
    "GenerationState",
    "GeneratorConfig",
    "InvalidProjectNameError",
    "LiteralRule",
    "ManifestField",
    "NameFormatSet",
    "OutcomeStatus",
    "PreconditionError",
    "ProjectGenerator",
    "ProjectIdentifier",
    "RewriteContext",
    "RewriteError",
    "StepOutcome",
    "TemplateIntegrityError",
    "TemplateNotFoundError",
    "TextRewriter",
    "TreeCopier",
    "find_stale_rules",
    "format_names",
]

__version__ = "0.1.0"

"""Literal find/replace rules applied to files of a freshly copied template."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterable, Sequence, Union

from .errors import RewriteError, TemplateIntegrityError
from .naming import NameFormatSet
from .schema import GenerationRequest

__all__ = [
    "LiteralRule",
    "ManifestField",
    "RewriteContext",
    "Rule",
    "TextRewriter",
    "find_stale_rules",
    "write_env_example",
]


LOGGER = logging.getLogger(__name__)

ENV_EXAMPLE = ".env.example"


@dataclass(frozen=True, slots=True)
class RewriteContext:
    """Values rule builders may draw from."""

    names: NameFormatSet
    request: GenerationRequest


Builder = Callable[[RewriteContext], Any]


@dataclass(frozen=True, slots=True)
class LiteralRule:
    """Replace the first exact occurrence of ``find`` in ``path``.

    A rule whose ``find`` text does not occur in the file does nothing.
    """

    path: str
    find: str
    build: Builder

    def apply(self, content: str, context: RewriteContext) -> str:
        if self.find not in content:
            LOGGER.debug("no match for %r in %s", self.find, self.path)
            return content
        return content.replace(self.find, str(self.build(context)), 1)


@dataclass(frozen=True, slots=True)
class ManifestField:
    """Set the top-level ``key`` of the JSON manifest at ``path``."""

    path: str
    key: str
    build: Builder

    def apply(self, content: str, context: RewriteContext) -> str:
        try:
            manifest = json.loads(content)
        except json.JSONDecodeError as exc:
            raise RewriteError(f"{self.path} is not valid JSON: {exc}") from exc
        if not isinstance(manifest, dict):
            raise RewriteError(f"{self.path} must contain a JSON object")

        manifest[self.key] = self.build(context)
        return json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"


Rule = Union[LiteralRule, ManifestField]


def _group_by_path(rules: Iterable[Rule]) -> dict[str, list[Rule]]:
    grouped: dict[str, list[Rule]] = {}
    for rule in rules:
        grouped.setdefault(rule.path, []).append(rule)
    return grouped


@dataclass(slots=True)
class TextRewriter:
    """Apply an ordered rule table to the files below a project root.

    Rules for one file run in the order they are declared, so a rule may rely
    on the text produced by an earlier one. Every file named by the table must
    exist; files the table does not name are left untouched.
    """

    rules: tuple[Rule, ...] = field(default_factory=tuple)
    encoding: str = "utf-8"

    def __init__(self, rules: Iterable[Rule], *, encoding: str = "utf-8") -> None:
        self.rules = tuple(rules)
        self.encoding = encoding

    @property
    def paths(self) -> list[str]:
        return list(_group_by_path(self.rules))

    def check(self, root: str | Path) -> None:
        """Raise :class:`TemplateIntegrityError` if a target file is missing."""

        root = Path(root)
        for relative in self.paths:
            if not (root / relative).is_file():
                raise TemplateIntegrityError(root / relative)

    def apply(self, root: str | Path, context: RewriteContext) -> list[str]:
        """Rewrite the files under ``root`` and return their relative paths."""

        root = Path(root)
        self.check(root)

        rewritten: list[str] = []
        for relative, rules in _group_by_path(self.rules).items():
            target = root / relative
            try:
                content = target.read_text(encoding=self.encoding)
                for rule in rules:
                    content = rule.apply(content, context)
                target.write_text(content, encoding=self.encoding)
            except (OSError, UnicodeDecodeError) as exc:
                raise RewriteError(f"Failed to rewrite {target}: {exc}") from exc
            LOGGER.debug("rewrote %s with %d rule(s)", relative, len(rules))
            rewritten.append(relative)
        return rewritten


def find_stale_rules(
    root: str | Path, rules: Sequence[Rule], *, encoding: str = "utf-8"
) -> list[LiteralRule]:
    """Return the literal rules whose anchor text is absent from ``root``.

    Intended as a lint over a template and its rule table: a stale rule would
    silently do nothing during generation. Missing files are reported through
    their rules as well.
    """

    root = Path(root)
    stale: list[LiteralRule] = []
    cache: dict[str, str | None] = {}
    for rule in rules:
        if not isinstance(rule, LiteralRule):
            continue
        if rule.path not in cache:
            target = root / rule.path
            cache[rule.path] = target.read_text(encoding=encoding) if target.is_file() else None
        content = cache[rule.path]
        if content is None or rule.find not in content:
            stale.append(rule)
    return stale


def write_env_example(root: str | Path, content: str) -> Path:
    """Write a fresh ``.env.example`` into ``root``, replacing any copied one."""

    target = Path(root) / ENV_EXAMPLE
    try:
        target.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise RewriteError(f"Failed to write {target}: {exc}") from exc
    return target

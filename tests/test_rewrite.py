from __future__ import annotations

import json
from pathlib import Path

import pytest

from mcpgen.errors import RewriteError, TemplateIntegrityError
from mcpgen.naming import ProjectIdentifier, format_names
from mcpgen.rewrite import (
    LiteralRule,
    ManifestField,
    RewriteContext,
    TextRewriter,
    find_stale_rules,
    write_env_example,
)
from mcpgen.schema import GenerationRequest


@pytest.fixture()
def context() -> RewriteContext:
    names = format_names(ProjectIdentifier("weather-service"))
    return RewriteContext(names=names, request=GenerationRequest(name="weather-service", author="Ada"))


def test_literal_rule_replaces_first_occurrence_only(context: RewriteContext):
    rule = LiteralRule("a.txt", "token", lambda ctx: ctx.names.pascal)
    assert rule.apply("token token", context) == "WeatherService token"


def test_literal_rule_without_match_is_a_no_op(context: RewriteContext):
    rule = LiteralRule("a.txt", "absent", lambda ctx: "x")
    assert rule.apply("unchanged", context) == "unchanged"


def test_rules_run_in_declared_order(tmp_path: Path, context: RewriteContext):
    (tmp_path / "README.md").write_text("clone\ncd old\n", encoding="utf-8")
    rewriter = TextRewriter(
        [
            LiteralRule("README.md", "clone", lambda ctx: f"clone\ncd {ctx.names.kebab}"),
            LiteralRule("README.md", "cd old\n", lambda ctx: ""),
        ]
    )

    assert rewriter.apply(tmp_path, context) == ["README.md"]
    assert (tmp_path / "README.md").read_text(encoding="utf-8") == "clone\ncd weather-service\n"


def test_manifest_fields_preserve_order_and_append_new_keys(tmp_path: Path, context: RewriteContext):
    manifest = {"name": "template", "version": "2.0.0", "license": "MIT"}
    (tmp_path / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
    rewriter = TextRewriter(
        [
            ManifestField("package.json", "name", lambda ctx: f"mcp-{ctx.names.kebab}"),
            ManifestField("package.json", "author", lambda ctx: ctx.request.author),
            ManifestField("package.json", "version", lambda ctx: "0.1.0"),
        ]
    )
    rewriter.apply(tmp_path, context)

    text = (tmp_path / "package.json").read_text(encoding="utf-8")
    assert text.endswith("}\n")
    assert text.startswith('{\n  "name"')
    assert list(json.loads(text)) == ["name", "version", "license", "author"]
    assert json.loads(text)["version"] == "0.1.0"
    assert json.loads(text)["author"] == "Ada"


def test_invalid_manifest_raises_rewrite_error(tmp_path: Path, context: RewriteContext):
    (tmp_path / "package.json").write_text("{not json", encoding="utf-8")
    rewriter = TextRewriter([ManifestField("package.json", "name", lambda ctx: "x")])
    with pytest.raises(RewriteError, match="not valid JSON"):
        rewriter.apply(tmp_path, context)


def test_missing_target_file_is_fatal_before_any_write(tmp_path: Path, context: RewriteContext):
    (tmp_path / "README.md").write_text("title", encoding="utf-8")
    rewriter = TextRewriter(
        [
            LiteralRule("README.md", "title", lambda ctx: "changed"),
            LiteralRule("src/index.ts", "x", lambda ctx: "y"),
        ]
    )

    with pytest.raises(TemplateIntegrityError):
        rewriter.apply(tmp_path, context)
    assert (tmp_path / "README.md").read_text(encoding="utf-8") == "title"


def test_files_outside_the_table_are_untouched(tmp_path: Path, context: RewriteContext):
    (tmp_path / "README.md").write_text("token", encoding="utf-8")
    (tmp_path / "other.md").write_text("token", encoding="utf-8")
    TextRewriter([LiteralRule("README.md", "token", lambda ctx: "done")]).apply(tmp_path, context)
    assert (tmp_path / "other.md").read_text(encoding="utf-8") == "token"


def test_find_stale_rules(tmp_path: Path):
    (tmp_path / "README.md").write_text("# Title\n", encoding="utf-8")
    present = LiteralRule("README.md", "# Title", lambda ctx: "")
    drifted = LiteralRule("README.md", "# Old Title", lambda ctx: "")
    missing_file = LiteralRule("gone.md", "anything", lambda ctx: "")
    manifest = ManifestField("package.json", "name", lambda ctx: "")

    assert find_stale_rules(tmp_path, [present, drifted, missing_file, manifest]) == [drifted, missing_file]


def test_write_env_example_replaces_existing_file(tmp_path: Path):
    (tmp_path / ".env.example").write_text("OLD=1\n", encoding="utf-8")
    path = write_env_example(tmp_path, "PORT=3000\n")
    assert path == tmp_path / ".env.example"
    assert path.read_text(encoding="utf-8") == "PORT=3000\n"

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from mcpgen.config import GeneratorConfig  # noqa: E402
from mcpgen.steps import StepOutcome  # noqa: E402


@pytest.fixture()
def template_dir(tmp_path: Path) -> Path:
    """A small template tree with nested files and excluded entries."""

    root = tmp_path / "template"
    (root / "src" / "nested").mkdir(parents=True)
    (root / "node_modules" / "pkg").mkdir(parents=True)
    (root / "README.md").write_text("# Template\n", encoding="utf-8")
    (root / "src" / "index.ts").write_text("console.log('hi');\n", encoding="utf-8")
    (root / "src" / "nested" / "data.bin").write_bytes(bytes(range(256)))
    (root / "node_modules" / "pkg" / "index.js").write_text("module.exports = 1;\n", encoding="utf-8")
    (root / ".env").write_text("SECRET=1\n", encoding="utf-8")
    return root


@pytest.fixture()
def config() -> GeneratorConfig:
    return GeneratorConfig()


@pytest.fixture()
def no_post_steps(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, Path]]:
    """Replace git and npm with recorders so tests never shell out."""

    calls: list[tuple[str, Path]] = []

    def fake_git(project_dir, **_kwargs):
        calls.append(("git", Path(project_dir)))
        return StepOutcome.success()

    def fake_install(project_dir, **_kwargs):
        calls.append(("install", Path(project_dir)))
        return StepOutcome.success()

    monkeypatch.setattr("mcpgen.generator.initialize_git", fake_git)
    monkeypatch.setattr("mcpgen.generator.install_dependencies", fake_install)
    return calls

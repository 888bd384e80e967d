"""Command line interface for generating MCP server projects."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, Sequence

from .config import GeneratorConfig
from .errors import GenerationError
from .generator import ProjectGenerator
from .rules import CONFIG_MODULE, README, SERVER_ENTRY_POINT
from .schema import GenerationRequest, GenerationResult

EXAMPLES = """\
examples:
  create-mcp-project weather-service
  create-mcp-project task-manager --description "Task management MCP server" --author "Jane Doe"
  create-mcp-project file-processor --target-dir ./my-server --install-deps
"""


class _ArgumentParser(argparse.ArgumentParser):
    """Report usage errors with the same exit status as other failures."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="create-mcp-project",
        description="Create a new MCP server project from the bundled template",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("name", help="Name of the new MCP server project (kebab-case)")
    parser.add_argument("--description", default="", help="Project description")
    parser.add_argument("--author", default="", help="Author name")
    parser.add_argument(
        "--target-dir",
        type=Path,
        help="Target directory (default: mcp-<project-name>)",
    )
    parser.add_argument(
        "--install-deps",
        action="store_true",
        help="Install npm dependencies automatically",
    )
    parser.add_argument(
        "--no-git",
        dest="init_git",
        action="store_false",
        help="Skip git repository initialization",
    )
    parser.add_argument(
        "--template-dir",
        type=Path,
        help="Use this template directory instead of the bundled one",
    )
    parser.add_argument(
        "--cleanup-on-failure",
        action="store_true",
        help="Remove the partially created project if copying or rewriting fails",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    return parser


def _configure_logging(config: GeneratorConfig, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level,
        format="%(levelname)s: %(message)s" if not verbose else "%(levelname)s %(name)s: %(message)s",
    )


def _print_summary(result: GenerationResult, display_dir: str, installed: bool) -> None:
    for label, outcome in (
        ("initialize git repository", result.vcs),
        ("install dependencies", result.dependencies),
    ):
        if outcome.is_warning:
            print(f"Warning: Failed to {label}: {outcome.detail}")
    if result.dependencies.is_warning:
        print("You can install them manually by running: npm install")

    print("\nProject created successfully!")
    print("\nNext steps:")
    print(f"   cd {display_dir}")
    if not installed:
        print("   npm install")
    print("   cp .env.example .env")
    print("   npm run dev")
    print("\nDocumentation:")
    print(f"   README: {display_dir}/{README}")
    print(f"   Main server: {display_dir}/{SERVER_ENTRY_POINT}")
    print(f"   Config: {display_dir}/{CONFIG_MODULE}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        parser.print_help()
        return 0
    args = parser.parse_args(argv)

    try:
        config = GeneratorConfig.from_env()
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.template_dir is not None:
        config = config.with_template_dir(args.template_dir)
    _configure_logging(config, args.verbose)

    request = GenerationRequest(
        name=args.name,
        description=args.description,
        author=args.author,
        target_dir=args.target_dir,
        init_git=args.init_git,
        install_deps=args.install_deps,
        cleanup_on_failure=args.cleanup_on_failure,
    )
    generator = ProjectGenerator(config, progress=print)
    try:
        result = generator.generate(request)
    except GenerationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    display_dir = str(args.target_dir) if args.target_dir else f"mcp-{result.names.kebab}"
    _print_summary(result, display_dir, installed=request.install_deps and not result.dependencies.is_warning)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

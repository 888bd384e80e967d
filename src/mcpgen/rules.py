"""Rewrite table for the bundled MCP server template.

Each entry pairs a file of the template with the literal text it anchors on.
The anchors must stay in step with the template files; ``find_stale_rules``
reports any that drifted.
"""

from __future__ import annotations

from .rewrite import LiteralRule, ManifestField, RewriteContext, Rule

__all__ = [
    "CONFIG_MODULE",
    "DEFAULT_RULES",
    "INITIAL_VERSION",
    "MANIFEST",
    "README",
    "SERVER_ENTRY_POINT",
]


MANIFEST = "package.json"
SERVER_ENTRY_POINT = "src/index.ts"
README = "README.md"
CONFIG_MODULE = "src/config/index.ts"

INITIAL_VERSION = "0.1.0"

TEMPLATE_DESCRIPTION = (
    "A production-ready TypeScript template for creating Model Context Protocol (MCP) servers "
    "with HTTP transport. This template provides a solid foundation for building scalable, "
    "secure, and maintainable MCP servers."
)


def _package_name(context: RewriteContext) -> str:
    return f"mcp-{context.names.kebab}"


def _server_name(context: RewriteContext) -> str:
    return f"mcp-{context.names.kebab}-server"


def _manifest_description(context: RewriteContext) -> str:
    return context.request.description or f"MCP server for {context.names.title}"


def _readme_description(context: RewriteContext) -> str:
    return context.request.description or (
        f"A production-ready MCP server for {context.names.title} built with TypeScript "
        "and HTTP transport."
    )


MANIFEST_RULES: tuple[Rule, ...] = (
    ManifestField(MANIFEST, "name", _package_name),
    ManifestField(MANIFEST, "description", _manifest_description),
    ManifestField(MANIFEST, "author", lambda context: context.request.author),
    ManifestField(MANIFEST, "keywords", lambda context: ["mcp", context.names.kebab]),
    ManifestField(MANIFEST, "version", lambda context: INITIAL_VERSION),
)

SERVER_RULES: tuple[Rule, ...] = (
    LiteralRule(
        SERVER_ENTRY_POINT,
        "name: 'mcp-sample-server'",
        lambda context: f"name: '{_server_name(context)}'",
    ),
    LiteralRule(SERVER_ENTRY_POINT, "sample-function", lambda context: f"{context.names.camel}-function"),
    LiteralRule(
        SERVER_ENTRY_POINT,
        "Sample function description",
        lambda context: f"{context.names.title} function description",
    ),
    LiteralRule(
        SERVER_ENTRY_POINT,
        "service: 'mcp-time-server'",
        lambda context: f"service: '{_server_name(context)}'",
    ),
    LiteralRule(
        SERVER_ENTRY_POINT,
        "MCP Time Server running",
        lambda context: f"MCP {context.names.title} Server running",
    ),
)

README_RULES: tuple[Rule, ...] = (
    LiteralRule(README, "# MCP Server Template", lambda context: f"# MCP {context.names.title} Server"),
    LiteralRule(README, TEMPLATE_DESCRIPTION, _readme_description),
    LiteralRule(
        README,
        "git clone <your-repo-url>",
        lambda context: f"git clone <your-repo-url>\ncd {_package_name(context)}",
    ),
    # Must follow the clone rule above, which writes the project's own cd line.
    LiteralRule(README, "cd mcp-template", lambda context: ""),
    LiteralRule(README, "mcp-template/", lambda context: f"{_package_name(context)}/"),
    LiteralRule(README, "your-tool-name", lambda context: f"{context.names.camel}-tool"),
    LiteralRule(
        README,
        "docker build -t mcp-server .",
        lambda context: f"docker build -t {_server_name(context)} .",
    ),
    LiteralRule(
        README,
        "docker run -p 3000:3000 --env-file .env mcp-server",
        lambda context: f"docker run -p 3000:3000 --env-file .env {_server_name(context)}",
    ),
)

DEFAULT_RULES: tuple[Rule, ...] = MANIFEST_RULES + SERVER_RULES + README_RULES

from __future__ import annotations

import typer

from relver.cli.context import build_context
from relver.core.config import tool_repo_url
from relver.core.errors import ErrorCode
from relver.version.validation import is_dirty_build, is_valid_release_build


def validate(
    version: str = typer.Argument(..., help="Version string, e.g. v1.18.0-beta.1"),
) -> None:
    """Check that a version string is usable for a release."""
    valid = is_valid_release_build(version)
    dirty = is_dirty_build(version)

    typer.echo(f"{'valid' if valid else 'invalid'}{' dirty' if dirty else ''}")
    if not valid:
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))


def repo_url(
    ctx: typer.Context,
    ssh: bool = typer.Option(False, "--ssh", help="Print the SSH remote instead of HTTPS."),
) -> None:
    """Print the release tooling repository URL (honours TOOL_ORG/TOOL_REPO)."""
    cli = build_context(ctx)
    typer.echo(tool_repo_url(cli.config.tool, use_ssh=ssh))

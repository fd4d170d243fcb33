from __future__ import annotations

import typer

from relver.cli.commands._helpers import value_or_exit
from relver.cli.context import build_context


_SEMVER_HELP = "Strip the leading 'v' and print strict semver."


def stable(
    ctx: typer.Context,
    semver: bool = typer.Option(False, "--semver", help=_SEMVER_HELP),
) -> None:
    """Print the latest stable release version."""
    cli = build_context(ctx)
    typer.echo(value_or_exit(cli.resolver.resolve_stable_release(semver), cli))


def prerelease(
    ctx: typer.Context,
    semver: bool = typer.Option(False, "--semver", help=_SEMVER_HELP),
) -> None:
    """Print the latest pre-release version."""
    cli = build_context(ctx)
    typer.echo(value_or_exit(cli.resolver.resolve_stable_prerelease(semver), cli))


def latest_ci(
    ctx: typer.Context,
    semver: bool = typer.Option(False, "--semver", help=_SEMVER_HELP),
) -> None:
    """Print the latest CI build version on the trunk."""
    cli = build_context(ctx)
    typer.echo(value_or_exit(cli.resolver.resolve_latest_ci(semver), cli))


def ci(
    ctx: typer.Context,
    branch: str | None = typer.Argument(
        None, help="Branch name, e.g. release-1.18 (default: TOOL_BRANCH)"
    ),
    semver: bool = typer.Option(False, "--semver", help=_SEMVER_HELP),
) -> None:
    """Print the latest CI build version of a branch."""
    cli = build_context(ctx)
    target = branch or cli.config.tool.branch
    typer.echo(value_or_exit(cli.resolver.resolve_ci_for_branch(target, semver), cli))


def marker(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Fully-qualified marker file URL"),
    semver: bool = typer.Option(False, "--semver", help=_SEMVER_HELP),
) -> None:
    """Print the version held by an arbitrary marker file."""
    cli = build_context(ctx)
    typer.echo(value_or_exit(cli.resolver.resolve_marker(url, semver), cli))


def kubecross(
    ctx: typer.Context,
    branches: list[str] = typer.Argument(..., help="Branches to try, in priority order"),
) -> None:
    """Print the kube-cross image version of the first branch that publishes one."""
    cli = build_context(ctx)
    typer.echo(value_or_exit(cli.resolver.resolve_kubecross_version(*branches), cli))

from __future__ import annotations

from pathlib import Path

import typer

from relver.cli.commands._helpers import value_or_exit
from relver.cli.context import build_context
from relver.output.console import Style
from relver.version.artifacts import detect_build_system, read_build_version


def build_version(
    ctx: typer.Context,
    build_dir: Path = typer.Argument(
        Path("."), help="Kubernetes checkout containing build output"
    ),
) -> None:
    """Print the version of the most recent local release build."""
    cli = build_context(ctx)
    root = build_dir.expanduser()

    built_with_bazel = value_or_exit(detect_build_system(root), cli)
    cli.console.print(f"build system: {'bazel' if built_with_bazel else 'docker'}", Style.DIM)

    typer.echo(value_or_exit(read_build_version(root, built_with_bazel), cli))

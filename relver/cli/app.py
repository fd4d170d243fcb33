from __future__ import annotations

from pathlib import Path

import typer

from relver import __version__
from relver.cli.commands.build_version import build_version
from relver.cli.commands.markers import ci, kubecross, latest_ci, marker, prerelease, stable
from relver.cli.commands.validate import repo_url, validate
from relver.cli.context import GlobalOptions


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Marker channels
app.command()(stable)
app.command()(prerelease)
app.command("latest-ci")(latest_ci)
app.command()(ci)
app.command()(marker)
app.command()(kubecross)

# Local build output
app.command("build-version")(build_version)

# Validation
app.command()(validate)
app.command("repo-url")(repo_url)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="TOML config file with [tool] and [endpoints] tables",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Hide progress messages."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)

    ctx.obj = GlobalOptions(config_path=config, quiet=quiet)


def main() -> None:
    app()

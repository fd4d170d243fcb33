"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from relver.core.result import Err, Result
from relver.output.errors import print_version_error, version_error_exit_code
from relver.version.errors import VersionError

if TYPE_CHECKING:
    from relver.cli.context import CLIContext


T = TypeVar("T")


def value_or_exit(result: Result[T, VersionError], ctx: CLIContext) -> T:
    """Return the Ok value, or render the error and exit with its mapped code.

    Replaces the per-command boilerplate:
        match result:
            case Err(e):
                print_version_error(e, ctx.console)
                raise typer.Exit(code=version_error_exit_code(e))
            case Ok(value):
                ...
    """
    if isinstance(result, Err):
        print_version_error(result.error, ctx.console)
        raise typer.Exit(code=version_error_exit_code(result.error))
    return result.value

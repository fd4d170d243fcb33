from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from relver.core.config import Config, load_config, load_config_or_default
from relver.core.errors import ErrorCode
from relver.core.result import Err
from relver.net.http import HttpClient, RealHttpClient
from relver.output.console import ConsoleProtocol, RichConsole, Style
from relver.version.resolver import VersionResolver


@dataclass(frozen=True, slots=True)
class GlobalOptions:
    config_path: Path | None = None
    quiet: bool = False


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol
    resolver: VersionResolver


def _http_client(config: Config) -> HttpClient:
    return RealHttpClient(timeout=config.endpoints.timeout)


def _options(ctx: typer.Context) -> GlobalOptions:
    obj = ctx.obj
    if isinstance(obj, GlobalOptions):
        return obj
    return GlobalOptions()


def build_context(ctx: typer.Context) -> CLIContext:
    options = _options(ctx)
    console = RichConsole(quiet=options.quiet)

    if options.config_path is not None:
        config_result = load_config(options.config_path, os.environ)
        if isinstance(config_result, Err):
            console.error(config_result.error.message)
            if config_result.error.hint:
                console.print(f"hint: {config_result.error.hint}", Style.DIM)
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        config = config_result.value
    else:
        config = load_config_or_default(None, os.environ)

    resolver = VersionResolver(
        http=_http_client(config),
        console=console,
        endpoints=config.endpoints,
        trunk_branch=config.trunk_branch,
    )
    return CLIContext(config=config, console=console, resolver=resolver)

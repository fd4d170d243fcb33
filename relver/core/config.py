"""Typed configuration for version resolution.

Configuration is built once at process start and passed into the resolver;
nothing under ``relver.version`` reads the environment or config files.

Sources, lowest to highest precedence:
- built-in defaults
- an optional TOML file with ``[tool]`` and ``[endpoints]`` tables
- ``TOOL_ORG``, ``TOOL_REPO`` and ``TOOL_BRANCH`` environment variables
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_float, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "EndpointsConfig",
    "ToolConfig",
    "load_config",
    "load_config_or_default",
    "tool_repo_url",
    "DEFAULT_TOOL_ORG",
    "DEFAULT_TOOL_REPO",
    "DEFAULT_TOOL_BRANCH",
    "DEFAULT_RELEASE_BASE",
    "DEFAULT_CI_BASE",
    "DEFAULT_KUBECROSS_URL",
]

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

DEFAULT_TOOL_ORG = "kubernetes"
DEFAULT_TOOL_REPO = "release"
DEFAULT_TOOL_BRANCH = "master"

DEFAULT_RELEASE_BASE = "https://dl.k8s.io/release"
DEFAULT_CI_BASE = "https://dl.k8s.io/ci"
DEFAULT_KUBECROSS_URL = (
    "https://raw.githubusercontent.com/kubernetes/kubernetes/{branch}/build/build-image/cross/VERSION"
)
DEFAULT_HTTP_TIMEOUT = 30.0

ENV_TOOL_ORG = "TOOL_ORG"
ENV_TOOL_REPO = "TOOL_REPO"
ENV_TOOL_BRANCH = "TOOL_BRANCH"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class ToolConfig:
    """GitHub coordinates of the release tooling repository."""

    org: str = DEFAULT_TOOL_ORG
    repo: str = DEFAULT_TOOL_REPO
    branch: str = DEFAULT_TOOL_BRANCH

    def with_env(self, env: Mapping[str, str]) -> ToolConfig:
        """Return a copy with non-empty TOOL_* variables applied."""
        return replace(
            self,
            org=env.get(ENV_TOOL_ORG) or self.org,
            repo=env.get(ENV_TOOL_REPO) or self.repo,
            branch=env.get(ENV_TOOL_BRANCH) or self.branch,
        )

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> ToolConfig:
        return cls().with_env(env)


@dataclass(frozen=True, slots=True)
class EndpointsConfig:
    """Where marker files and per-branch VERSION files are hosted.

    ``kubecross_url`` is a template with a ``{branch}`` placeholder.
    """

    release_base: str = DEFAULT_RELEASE_BASE
    ci_base: str = DEFAULT_CI_BASE
    kubecross_url: str = DEFAULT_KUBECROSS_URL
    timeout: float = DEFAULT_HTTP_TIMEOUT


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    tool: ToolConfig = field(default_factory=ToolConfig)
    endpoints: EndpointsConfig = field(default_factory=EndpointsConfig)
    trunk_branch: str = DEFAULT_TOOL_BRANCH

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        tool: StrDict = get_table(data, "tool") or {}
        endpoints: StrDict = get_table(data, "endpoints") or {}

        kubecross_url = get_str(endpoints, "kubecross_url") or DEFAULT_KUBECROSS_URL
        if "{branch}" not in kubecross_url:
            raise ValueError("endpoints.kubecross_url must contain '{branch}'")
        try:
            kubecross_url.format(branch="master")
        except (KeyError, IndexError) as e:
            raise ValueError(f"endpoints.kubecross_url has an unknown placeholder {e}") from e

        return cls(
            tool=ToolConfig(
                org=get_str(tool, "org") or DEFAULT_TOOL_ORG,
                repo=get_str(tool, "repo") or DEFAULT_TOOL_REPO,
                branch=get_str(tool, "branch") or DEFAULT_TOOL_BRANCH,
            ),
            endpoints=EndpointsConfig(
                release_base=get_str(endpoints, "release_base") or DEFAULT_RELEASE_BASE,
                ci_base=get_str(endpoints, "ci_base") or DEFAULT_CI_BASE,
                kubecross_url=kubecross_url,
                timeout=get_float(endpoints, "timeout") or DEFAULT_HTTP_TIMEOUT,
            ),
            trunk_branch=get_str(data, "trunk_branch") or DEFAULT_TOOL_BRANCH,
        )

    def with_env(self, env: Mapping[str, str]) -> Config:
        return replace(self, tool=self.tool.with_env(env))


def tool_repo_url(tool: ToolConfig, *, use_ssh: bool = False) -> str:
    """Return the GitHub URL of the release tooling repository.

    Examples:
        https://github.com/kubernetes/release
        git@github.com:kubernetes/release
    """
    if use_ssh:
        return f"git@github.com:{tool.org}/{tool.repo}"
    return f"https://github.com/{tool.org}/{tool.repo}"


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and syntax errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path, env: Mapping[str, str] | None = None) -> Result[Config, ConfigError]:
    """Load configuration from a TOML file, then apply TOOL_* overrides.

    Args:
        path: Path to the TOML file
        env: Environment mapping; no overrides when None

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        config = Config.from_dict(result.value)
    except (KeyError, TypeError, ValueError) as e:
        return Err(
            ConfigError(
                f"Invalid config structure: {e}",
                path=path,
                hint="see the [tool] and [endpoints] tables in the README",
            )
        )
    if env is not None:
        config = config.with_env(env)
    return Ok(config)


def load_config_or_default(path: Path | None, env: Mapping[str, str] | None = None) -> Config:
    """Load config from file, or defaults (plus env overrides) when it is unusable."""
    if path is not None:
        result = load_config(path, env)
        if isinstance(result, Ok):
            return result.value
    config = Config()
    if env is not None:
        config = config.with_env(env)
    return config

"""Core types shared by the resolver and the CLI."""

from .config import Config, ConfigError, EndpointsConfig, ToolConfig, load_config
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "EndpointsConfig",
    "ToolConfig",
    "load_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]

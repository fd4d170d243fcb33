"""Process exit codes for the relver CLI.

The numeric values are part of the command-line contract and must stay stable:
- 0: Success
- 1: User error (bad argument, invalid version string)
- 2: Environment error (unreadable or malformed config)
- 4: Network error (marker or VERSION file could not be fetched)
- 5: I/O error (build artifact missing or unreadable)
- 6: Format error (version is not strict semver)
- 7: Not found (no usable version in any candidate source)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    NETWORK_ERROR = 4
    IO_ERROR = 5
    FORMAT_ERROR = 6
    NOT_FOUND = 7

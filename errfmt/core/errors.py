"""Error codes for CLI exit status.

These values are used as process exit codes and should remain stable.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for errfmt commands.

    - 0: Success
    - 1: User error (bad arguments, empty chain)
    - 2: Config error (unreadable or invalid config file)
    """

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2


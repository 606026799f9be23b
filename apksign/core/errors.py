"""Error codes for CLI exit status.

Each failure category maps to one shell exit code. Signing errors and config
errors are translated to these codes at the CLI boundary only.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (bad flag, unknown policy)
    - 2: Environment error (release credentials incomplete)
    - 3: Signing error (keystore file not found)
    - 5: I/O error (unreadable properties or config file)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    SIGNING_ERROR = 3
    IO_ERROR = 5

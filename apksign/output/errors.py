"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apksign.core.config import ConfigError
from apksign.core.errors import ErrorCode
from apksign.output.console import Style
from apksign.signing.errors import (
    KeystoreNotFound,
    MissingCredentials,
    PropertiesUnreadable,
    SigningError,
)
from apksign.signing.model import CredentialSource

if TYPE_CHECKING:
    from apksign.output.console import ConsoleProtocol

__all__ = ["print_config_error", "print_signing_error", "signing_error_exit_code"]


def print_signing_error(error: SigningError, console: ConsoleProtocol) -> None:
    """Print signing error to console with appropriate formatting."""
    match error:
        case MissingCredentials(source=source, keys=keys):
            console.error(f"release credentials incomplete ({source}): missing {', '.join(keys)}")
            if source == CredentialSource.ENVIRONMENT:
                console.print("hint: export the missing variables in the CI job", Style.DIM)
            else:
                console.print("hint: add the missing keys to key.properties", Style.DIM)
        case KeystoreNotFound(path=path):
            console.error(f"keystore not found: {path}")
        case PropertiesUnreadable(path=path, reason=reason):
            console.error(f"cannot read {path}: {reason}")


def signing_error_exit_code(error: SigningError) -> int:
    """Get exit code for a signing error."""
    match error:
        case MissingCredentials():
            return int(ErrorCode.ENV_ERROR)
        case KeystoreNotFound():
            return int(ErrorCode.SIGNING_ERROR)
        case PropertiesUnreadable():
            return int(ErrorCode.IO_ERROR)


def print_config_error(error: ConfigError, console: ConsoleProtocol) -> None:
    console.error(error.message)
    if error.path is not None:
        console.print(f"config: {error.path}", Style.DIM)

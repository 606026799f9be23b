"""Result type for explicit error handling.

Fallible operations return ``Ok(value)`` or ``Err(error)`` instead of raising,
so callers decide where a failure becomes console output or an exit code.

Usage:
    match load_build_context(project_dir):
        case Ok(context):
            choice = resolve(context)
        case Err(error):
            print_signing_error(error, console)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result.

    Attributes:
        error: The error value (usually one of the SigningError variants).
    """

    error: E


Result = Union[Ok[T], Err[E]]

"""Shared helpers for CLI commands."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, NoReturn, TypeVar

import typer

from apksign.core.config import parse_policy
from apksign.core.errors import ErrorCode
from apksign.core.result import Err, Result
from apksign.output.errors import print_config_error, print_signing_error, signing_error_exit_code
from apksign.signing.context import load_build_context
from apksign.signing.errors import SigningError
from apksign.signing.model import BuildContext, SigningPolicy

if TYPE_CHECKING:
    from apksign.cli.context import CLIContext


T = TypeVar("T")


def exit_on_error(result: Result[T, SigningError], ctx: CLIContext) -> T:
    """Return the Ok value, or report the SigningError and exit.

    Replaces the pattern:
        match result:
            case Err(e):
                print_signing_error(e, ctx.console)
                raise typer.Exit(code=signing_error_exit_code(e))
            case Ok(value):
                ...
    """
    if isinstance(result, Err):
        print_signing_error(result.error, ctx.console)
        exit_with_code(signing_error_exit_code(result.error))
    return result.value


def exit_with_code(code: int) -> NoReturn:
    raise typer.Exit(code=code)


def effective_policy(ctx: CLIContext, policy: str | None) -> SigningPolicy:
    """The --policy flag if given, else the configured policy."""
    if policy is None:
        return ctx.config.signing.policy

    parsed = parse_policy(policy)
    if isinstance(parsed, Err):
        print_config_error(parsed.error, ctx.console)
        exit_with_code(int(ErrorCode.USER_ERROR))
    return parsed.value


def load_context(ctx: CLIContext, environ: Mapping[str, str] | None = None) -> BuildContext:
    result = load_build_context(
        ctx.project_dir,
        environ,
        properties_name=ctx.config.signing.properties_file,
        module=ctx.config.android.module,
    )
    return exit_on_error(result, ctx)

from __future__ import annotations

from pathlib import Path

import typer

from apksign.cli.commands._helpers import effective_policy, exit_with_code, load_context
from apksign.cli.context import CLIContext, build_context
from apksign.core.errors import ErrorCode
from apksign.core.result import Err
from apksign.output.console import Style
from apksign.output.errors import print_signing_error, signing_error_exit_code
from apksign.signing.model import Debug, Release
from apksign.signing.resolver import resolve_checked


def check(
    project: Path | None = typer.Option(
        None, "--project", "-p", help="Android project directory (default: cwd)."
    ),
    policy: str | None = typer.Option(
        None, "--policy", help="ci-or-properties or ci-only (default: from apksign.toml)."
    ),
    require_release: bool = typer.Option(
        False, "--require-release", help="Fail when the build would fall back to debug signing."
    ),
) -> None:
    """Validate release signing before packaging."""
    ctx = build_context(project)
    run_check(ctx, policy=policy, require_release=require_release)


def run_check(
    ctx: CLIContext,
    *,
    policy: str | None = None,
    require_release: bool = False,
) -> None:
    console = ctx.console
    signing_policy = effective_policy(ctx, policy)
    build = load_context(ctx)

    console.header("Signing")
    console.print(f"project: {ctx.project_dir}", Style.DIM)
    console.print(f"policy: {signing_policy}", Style.DIM)
    console.print(f"ci: {'yes' if build.is_ci else 'no'}", Style.DIM)

    result = resolve_checked(build, signing_policy, ctx.config.env, check_keystore=True)
    if isinstance(result, Err):
        print_signing_error(result.error, console)
        exit_with_code(signing_error_exit_code(result.error))

    match result.value:
        case Release(identity=identity):
            console.success(
                f"release signing ready ({identity.source}): "
                f"{identity.store_file(build.module_dir)} [{identity.key_alias}]"
            )
        case Debug():
            if require_release:
                console.error("no release credentials; build would use debug signing")
                exit_with_code(int(ErrorCode.ENV_ERROR))
            console.warning("no release credentials; build will use debug signing")

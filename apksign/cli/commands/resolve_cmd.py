from __future__ import annotations

import json
from enum import Enum
from pathlib import Path

import typer

from apksign.cli.commands._helpers import effective_policy, exit_on_error, load_context
from apksign.cli.context import CLIContext, build_context
from apksign.output.console import Style
from apksign.signing.model import Release
from apksign.signing.render import describe, gradle_command_line, to_json_dict
from apksign.signing.resolver import missing_keys, resolve, resolve_checked


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    GRADLE = "gradle"


def resolve_signing(
    project: Path | None = typer.Option(
        None, "--project", "-p", help="Android project directory (default: cwd)."
    ),
    policy: str | None = typer.Option(
        None, "--policy", help="ci-or-properties or ci-only (default: from apksign.toml)."
    ),
    output: OutputFormat = typer.Option(OutputFormat.TEXT, "--format", "-f", help="Output format."),
    strict: bool = typer.Option(
        False, "--strict", help="Fail if release credentials are incomplete or the keystore is missing."
    ),
    reveal: bool = typer.Option(False, "--reveal", help="Include passwords in JSON output."),
) -> None:
    """Show which signing config a release build would use."""
    ctx = build_context(project)
    run_resolve(ctx, policy=policy, output=output, strict=strict, reveal=reveal)


def run_resolve(
    ctx: CLIContext,
    *,
    policy: str | None = None,
    output: OutputFormat = OutputFormat.TEXT,
    strict: bool = False,
    reveal: bool = False,
) -> None:
    signing_policy = effective_policy(ctx, policy)
    build = load_context(ctx)
    env_names = ctx.config.env

    if strict:
        choice = exit_on_error(
            resolve_checked(build, signing_policy, env_names, check_keystore=True), ctx
        )
    else:
        choice = resolve(build, signing_policy, env_names)

    match output:
        case OutputFormat.JSON:
            ctx.console.raw(json.dumps(to_json_dict(choice, reveal=reveal), indent=2))
        case OutputFormat.GRADLE:
            ctx.console.raw(gradle_command_line(choice, build.module_dir))
        case OutputFormat.TEXT:
            app_id = ctx.config.android.application_id
            if app_id:
                ctx.console.print(f"application: {app_id}", Style.DIM)
            ctx.console.print(f"policy: {signing_policy}", Style.DIM)
            for line in describe(choice):
                ctx.console.print(line)

    if not strict and isinstance(choice, Release):
        missing = missing_keys(choice.identity, env_names)
        if missing:
            ctx.console.warning(f"empty release credentials: {', '.join(missing)}")

"""Express a SigningChoice for Gradle, JSON consumers, or humans."""

from __future__ import annotations

import shlex
from pathlib import Path

from .model import Debug, Release, SigningChoice
from .resolver import release_signing_config

__all__ = [
    "REDACTED",
    "describe",
    "gradle_args",
    "gradle_command_line",
    "gradle_properties",
    "to_json_dict",
]

REDACTED = "***"

# Read by the Android Gradle plugin to override signing from the command line.
STORE_FILE_PROP = "android.injected.signing.store.file"
STORE_PASSWORD_PROP = "android.injected.signing.store.password"
KEY_ALIAS_PROP = "android.injected.signing.key.alias"
KEY_PASSWORD_PROP = "android.injected.signing.key.password"


def gradle_properties(choice: SigningChoice, base_dir: Path | None) -> dict[str, str]:
    """Injected signing properties; empty for debug signing.

    The store file is made absolute against base_dir (the app module
    directory). An empty store path stays empty.
    """
    match choice:
        case Debug():
            return {}
        case Release(identity=identity):
            store = ""
            if identity.store_file_path:
                store = str(identity.store_file(base_dir).resolve())
            return {
                STORE_FILE_PROP: store,
                STORE_PASSWORD_PROP: identity.store_password,
                KEY_ALIAS_PROP: identity.key_alias,
                KEY_PASSWORD_PROP: identity.key_password,
            }


def gradle_args(choice: SigningChoice, base_dir: Path | None) -> list[str]:
    """``-Pkey=value`` arguments, unquoted (suitable for an argv list)."""
    return [f"-P{k}={v}" for k, v in gradle_properties(choice, base_dir).items()]


def gradle_command_line(choice: SigningChoice, base_dir: Path | None) -> str:
    """The arguments joined and shell-quoted for pasting into a gradle call."""
    return shlex.join(gradle_args(choice, base_dir))


def to_json_dict(choice: SigningChoice, *, reveal: bool = False) -> dict[str, object]:
    """JSON-serialisable view. Passwords are redacted unless reveal is set."""
    out: dict[str, object] = {"signing_config": release_signing_config(choice)}
    if isinstance(choice, Release):
        identity = choice.identity
        out["source"] = identity.source.name.lower()
        out["key_alias"] = identity.key_alias
        out["key_password"] = identity.key_password if reveal else REDACTED
        out["store_file"] = identity.store_file_path
        out["store_password"] = identity.store_password if reveal else REDACTED
    return out


def describe(choice: SigningChoice) -> list[str]:
    match choice:
        case Debug():
            return ["signing: debug (no release credentials)"]
        case Release(identity=identity):
            return [
                f"signing: release (from {identity.source})",
                f"key alias: {identity.key_alias or '<empty>'}",
                f"keystore: {identity.store_file_path or '<empty>'}",
                f"key password: {_mask(identity.key_password)}",
                f"store password: {_mask(identity.store_password)}",
            ]


def _mask(value: str) -> str:
    return REDACTED if value else "<empty>"

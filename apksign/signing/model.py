"""Signing domain types.

A build resolves to exactly one ``SigningChoice``: ``Release`` carrying a
``SigningIdentity``, or ``Debug`` when no release credentials apply.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

__all__ = [
    "CI_VARIABLE",
    "PROPERTIES_KEYS",
    "BuildContext",
    "CredentialSource",
    "Debug",
    "EnvNames",
    "Release",
    "SigningChoice",
    "SigningIdentity",
    "SigningPolicy",
]

# Presence of this variable marks a CI build; its value is not inspected.
CI_VARIABLE = "CI"


class CredentialSource(Enum):
    """Where a release identity's values were read from."""

    ENVIRONMENT = auto()
    PROPERTIES_FILE = auto()

    def __str__(self) -> str:
        if self == CredentialSource.ENVIRONMENT:
            return "environment"
        return "properties file"


class SigningPolicy(Enum):
    """Which contexts are eligible for release signing."""

    CI_OR_PROPERTIES = "ci-or-properties"
    """CI environment first, then a local key.properties file."""

    CI_ONLY = "ci-only"
    """Only CI builds sign for release; local builds always use debug."""

    def __str__(self) -> str:
        return self.value

    @property
    def allows_properties_file(self) -> bool:
        return self == SigningPolicy.CI_OR_PROPERTIES

    @classmethod
    def choices(cls) -> tuple[str, ...]:
        return tuple(p.value for p in cls)


@dataclass(frozen=True, slots=True)
class EnvNames:
    """Environment variable names holding CI signing credentials."""

    key_alias: str = "FCI_KEY_ALIAS"
    key_password: str = "FCI_KEY_PASSWORD"
    keystore_path: str = "FCI_KEYSTORE_PATH"
    keystore_password: str = "FCI_KEYSTORE_PASSWORD"

    def ordered(self) -> tuple[str, str, str, str]:
        """Names in identity field order: alias, key pw, store path, store pw."""
        return (self.key_alias, self.key_password, self.keystore_path, self.keystore_password)


# key.properties keys in identity field order.
PROPERTIES_KEYS = ("keyAlias", "keyPassword", "storeFile", "storePassword")


@dataclass(frozen=True, slots=True)
class BuildContext:
    """Everything resolution needs, captured once per invocation.

    Attributes:
        is_ci: True when the CI variable is present.
        credentials_file_present: True when key.properties exists.
        credentials_file_contents: Parsed key.properties, if present.
        environment: Snapshot of the environment variables.
        project_dir: Android project root (holds key.properties).
        module_dir: App module directory; relative keystore paths resolve
            against it, as Gradle's ``file()`` does inside the module.
    """

    is_ci: bool
    credentials_file_present: bool
    credentials_file_contents: Mapping[str, str] | None
    environment: Mapping[str, str]
    project_dir: Path | None = None
    module_dir: Path | None = None


@dataclass(frozen=True, slots=True)
class SigningIdentity:
    """Release credential material."""

    key_alias: str
    key_password: str
    store_file_path: str
    store_password: str
    source: CredentialSource = CredentialSource.ENVIRONMENT

    def store_file(self, base_dir: Path | None) -> Path:
        """Resolve the keystore path the way Gradle's ``file()`` does.

        Absolute paths and ``~`` are used as-is; relative paths are taken
        against base_dir (or the current directory when None).
        """
        path = Path(self.store_file_path).expanduser()
        if path.is_absolute() or base_dir is None:
            return path
        return base_dir / path

    def __repr__(self) -> str:
        return (
            f"SigningIdentity(key_alias={self.key_alias!r}, key_password='***', "
            f"store_file_path={self.store_file_path!r}, store_password='***', "
            f"source={self.source.name})"
        )


@dataclass(frozen=True, slots=True)
class Release:
    identity: SigningIdentity


@dataclass(frozen=True, slots=True)
class Debug:
    pass


SigningChoice = Release | Debug

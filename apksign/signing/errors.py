from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .model import CredentialSource


@dataclass(frozen=True, slots=True)
class MissingCredentials:
    """A release identity was selected but some of its values are empty."""

    source: CredentialSource
    keys: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class KeystoreNotFound:
    path: Path


@dataclass(frozen=True, slots=True)
class PropertiesUnreadable:
    path: Path
    reason: str


SigningError = MissingCredentials | KeystoreNotFound | PropertiesUnreadable

"""Signing identity resolution."""

from .context import DEFAULT_MODULE, DEFAULT_PROPERTIES_NAME, load_build_context
from .errors import (
    KeystoreNotFound,
    MissingCredentials,
    PropertiesUnreadable,
    SigningError,
)
from .model import (
    BuildContext,
    CredentialSource,
    Debug,
    EnvNames,
    Release,
    SigningChoice,
    SigningIdentity,
    SigningPolicy,
)
from .properties import load_properties, parse_properties
from .resolver import missing_keys, release_signing_config, resolve, resolve_checked

__all__ = [
    # context
    "DEFAULT_MODULE",
    "DEFAULT_PROPERTIES_NAME",
    "load_build_context",
    # errors
    "KeystoreNotFound",
    "MissingCredentials",
    "PropertiesUnreadable",
    "SigningError",
    # model
    "BuildContext",
    "CredentialSource",
    "Debug",
    "EnvNames",
    "Release",
    "SigningChoice",
    "SigningIdentity",
    "SigningPolicy",
    # properties
    "load_properties",
    "parse_properties",
    # resolver
    "missing_keys",
    "release_signing_config",
    "resolve",
    "resolve_checked",
]

"""Signing resolution.

``resolve`` is a pure function of (context, policy, env names): CI credentials
win, then (policy permitting) the local properties file, otherwise debug.
Missing values come through as empty strings; ``resolve_checked`` is the
strict form that reports them.
"""

from __future__ import annotations

from typing import Literal

from apksign.core.result import Err, Ok, Result
from apksign.core.structured import lookup

from .errors import KeystoreNotFound, MissingCredentials, SigningError
from .model import (
    PROPERTIES_KEYS,
    BuildContext,
    CredentialSource,
    Debug,
    EnvNames,
    Release,
    SigningChoice,
    SigningIdentity,
    SigningPolicy,
)

__all__ = ["resolve", "resolve_checked", "release_signing_config", "missing_keys"]

DEFAULT_ENV_NAMES = EnvNames()


def resolve(
    context: BuildContext,
    policy: SigningPolicy = SigningPolicy.CI_OR_PROPERTIES,
    env_names: EnvNames = DEFAULT_ENV_NAMES,
) -> SigningChoice:
    """Select the signing config for a release build."""
    if context.is_ci:
        alias, key_pw, store, store_pw = (
            lookup(context.environment, name) for name in env_names.ordered()
        )
        return Release(
            SigningIdentity(
                key_alias=alias,
                key_password=key_pw,
                store_file_path=store,
                store_password=store_pw,
                source=CredentialSource.ENVIRONMENT,
            )
        )

    if policy.allows_properties_file and context.credentials_file_present:
        alias, key_pw, store, store_pw = (
            lookup(context.credentials_file_contents, key) for key in PROPERTIES_KEYS
        )
        return Release(
            SigningIdentity(
                key_alias=alias,
                key_password=key_pw,
                store_file_path=store,
                store_password=store_pw,
                source=CredentialSource.PROPERTIES_FILE,
            )
        )

    return Debug()


def release_signing_config(choice: SigningChoice) -> Literal["release", "debug"]:
    """Name of the Gradle signing config the release build type should use."""
    match choice:
        case Release():
            return "release"
        case Debug():
            return "debug"


def missing_keys(
    identity: SigningIdentity, env_names: EnvNames = DEFAULT_ENV_NAMES
) -> tuple[str, ...]:
    """Source-side names of the identity's empty fields, in field order."""
    names = (
        env_names.ordered()
        if identity.source == CredentialSource.ENVIRONMENT
        else PROPERTIES_KEYS
    )
    values = (
        identity.key_alias,
        identity.key_password,
        identity.store_file_path,
        identity.store_password,
    )
    return tuple(name for name, value in zip(names, values) if not value)


def resolve_checked(
    context: BuildContext,
    policy: SigningPolicy = SigningPolicy.CI_OR_PROPERTIES,
    env_names: EnvNames = DEFAULT_ENV_NAMES,
    *,
    check_keystore: bool = False,
) -> Result[SigningChoice, SigningError]:
    """Resolve, then fail on incomplete release credentials.

    With check_keystore, the keystore file must also exist (relative paths are
    taken against ``context.module_dir``).
    """
    choice = resolve(context, policy, env_names)
    if isinstance(choice, Debug):
        return Ok(choice)

    identity = choice.identity
    missing = missing_keys(identity, env_names)
    if missing:
        return Err(MissingCredentials(source=identity.source, keys=missing))

    if check_keystore:
        store_file = identity.store_file(context.module_dir)
        if not store_file.is_file():
            return Err(KeystoreNotFound(path=store_file))

    return Ok(choice)

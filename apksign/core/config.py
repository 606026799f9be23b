"""Typed configuration loading for ``apksign.toml``.

Every key is optional; a project without the file gets the defaults, which
reproduce the stock CI-or-key.properties behaviour.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from apksign.signing.model import EnvNames, SigningPolicy

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "AndroidConfig",
    "Config",
    "ConfigError",
    "SigningConfig",
    "load_config",
    "load_config_or_default",
    "parse_policy",
]

CONFIG_FILENAME = "apksign.toml"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class SigningConfig:
    policy: SigningPolicy = SigningPolicy.CI_OR_PROPERTIES
    properties_file: str = "key.properties"


@dataclass(frozen=True, slots=True)
class AndroidConfig:
    """App module layout and metadata.

    Attributes:
        module: App module directory under the project root. Gradle resolves
            a relative ``storeFile`` against it.
        application_id: Informational, shown alongside the signing decision.
    """

    module: str = "app"
    application_id: str | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    signing: SigningConfig = field(default_factory=SigningConfig)
    env: EnvNames = field(default_factory=EnvNames)
    android: AndroidConfig = field(default_factory=AndroidConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If signing.policy is not a known policy.
        """
        signing: StrDict = get_table(data, "signing") or {}
        env: StrDict = get_table(data, "env") or {}
        android: StrDict = get_table(data, "android") or {}

        defaults = EnvNames()
        policy_value = get_str(signing, "policy")
        policy = SigningPolicy.CI_OR_PROPERTIES
        if policy_value:
            parsed = parse_policy(policy_value)
            if isinstance(parsed, Err):
                raise ValueError(parsed.error.message)
            policy = parsed.value

        return cls(
            signing=SigningConfig(
                policy=policy,
                properties_file=get_str(signing, "properties_file") or "key.properties",
            ),
            env=EnvNames(
                key_alias=get_str(env, "key_alias") or defaults.key_alias,
                key_password=get_str(env, "key_password") or defaults.key_password,
                keystore_path=get_str(env, "keystore_path") or defaults.keystore_path,
                keystore_password=get_str(env, "keystore_password") or defaults.keystore_password,
            ),
            android=AndroidConfig(
                module=get_str(android, "module") or "app",
                application_id=get_str(android, "application_id"),
            ),
        )


def parse_policy(value: str) -> Result[SigningPolicy, ConfigError]:
    """Parse a policy name such as ``ci-only``."""
    try:
        return Ok(SigningPolicy(value.strip().lower()))
    except ValueError:
        allowed = ", ".join(SigningPolicy.choices())
        return Err(ConfigError(f"Unknown signing policy '{value}' (expected one of: {allowed})"))


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to apksign.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Like load_config, but a missing file yields the default Config.

    A file that exists but is invalid is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)

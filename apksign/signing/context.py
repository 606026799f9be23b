"""Build a BuildContext from the process environment and project directory.

This is the only module that touches ``os.environ`` or the filesystem on the
way to a signing decision; everything downstream works on the frozen context.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from apksign.core.result import Err, Ok, Result

from .errors import SigningError
from .model import CI_VARIABLE, BuildContext
from .properties import load_properties

__all__ = ["DEFAULT_MODULE", "DEFAULT_PROPERTIES_NAME", "load_build_context"]

DEFAULT_PROPERTIES_NAME = "key.properties"
DEFAULT_MODULE = "app"


def load_build_context(
    project_dir: Path,
    environ: Mapping[str, str] | None = None,
    *,
    properties_name: str = DEFAULT_PROPERTIES_NAME,
    module: str = DEFAULT_MODULE,
) -> Result[BuildContext, SigningError]:
    """Capture the signing-relevant state of a build.

    Args:
        project_dir: Android project root holding key.properties.
        environ: Environment to read; defaults to ``os.environ``.
        properties_name: Credentials file name, relative to project_dir.
        module: App module directory, relative to project_dir. Relative
            keystore paths in the credentials resolve against it.

    Returns:
        Ok(BuildContext), or Err(PropertiesUnreadable) when the credentials
        file exists but cannot be read.
    """
    env = dict(os.environ if environ is None else environ)

    properties_path = project_dir / properties_name
    contents: dict[str, str] | None = None
    if properties_path.is_file():
        loaded = load_properties(properties_path)
        if isinstance(loaded, Err):
            return loaded
        contents = loaded.value

    return Ok(
        BuildContext(
            is_ci=CI_VARIABLE in env,
            credentials_file_present=contents is not None,
            credentials_file_contents=contents,
            environment=env,
            project_dir=project_dir,
            module_dir=project_dir / module,
        )
    )

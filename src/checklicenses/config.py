"""Configuration loader for checklicenses.

Supports JSON (default), YAML and TOML documents with the fields
``Licenses``, ``GoPkg``, ``Accept`` and ``Reject``. Keys are matched
case-insensitively and unknown keys are ignored.
"""

from __future__ import annotations

import json
import logging
import os
import re
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from checklicenses.errors import ConfigError
from checklicenses.rules.types import LicenseTemplate

logger = logging.getLogger(__name__)

_ENV_VAR = re.compile(r"\$(?:\{([A-Za-z_][A-Za-z0-9_]*)\}|([A-Za-z_][A-Za-z0-9_]*))")

_PREFIX_KEYS = ("gopkg", "moduleprefix")


def expand_env(value: str, environ: Mapping[str, str] | None = None) -> str:
    """Expand ``$VAR`` and ``${VAR}``; undefined variables become empty."""
    env = os.environ if environ is None else environ
    return _ENV_VAR.sub(lambda m: env.get(m.group(1) or m.group(2), ""), value)


def _string_list(value: Any, field_name: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{field_name} must be a list of strings")
    return list(value)


@dataclass(frozen=True)
class RawConfig:
    """Parsed but not yet compiled configuration."""

    licenses: list[LicenseTemplate]
    module_prefix: str = ""
    accept: list[str] = field(default_factory=list)
    reject: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, environ: Mapping[str, str] | None = None) -> RawConfig:
        """Parse and validate config data into RawConfig."""
        if not isinstance(data, dict):
            raise ConfigError("config document must be a mapping")
        fields = {str(k).lower(): v for k, v in data.items()}

        raw_licenses = fields.get("licenses")
        if not isinstance(raw_licenses, list) or not raw_licenses:
            raise ConfigError("Licenses must be a non-empty list of license templates")
        licenses = []
        for i, lines in enumerate(raw_licenses):
            licenses.append(LicenseTemplate(tuple(_string_list(lines, f"Licenses[{i}]"))))

        prefix: Any = ""
        for key in _PREFIX_KEYS:
            if fields.get(key) is not None:
                prefix = fields[key]
                break
        if not isinstance(prefix, str):
            raise ConfigError("GoPkg must be a string")

        return cls(
            licenses=licenses,
            module_prefix=expand_env(prefix, environ),
            accept=_string_list(fields.get("accept"), "Accept"),
            reject=_string_list(fields.get("reject"), "Reject"),
        )


def _parse(path: Path, buf: bytes) -> Any:
    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return yaml.safe_load(buf)
    if suffix == ".toml":
        return tomllib.loads(buf.decode("utf-8"))
    return json.loads(buf)


def load_config(path: Path, environ: Mapping[str, str] | None = None) -> RawConfig:
    """Load a configuration file.

    Args:
        path: Config file; the suffix selects JSON, YAML or TOML
        environ: Environment used to expand the module prefix

    Returns:
        RawConfig ready for compilation

    Raises:
        ConfigError: If the file is missing, unreadable or malformed
    """
    try:
        buf = path.read_bytes()
    except OSError as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e

    try:
        data = _parse(path, buf)
    except (json.JSONDecodeError, yaml.YAMLError, tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Malformed config file {path}: {e}") from e

    try:
        config = RawConfig.from_dict(data, environ)
    except ConfigError as e:
        raise ConfigError(f"Invalid config in {path}: {e}") from e

    logger.debug(
        "loaded %s: %d license(s), %d accept, %d reject, prefix=%r",
        path,
        len(config.licenses),
        len(config.accept),
        len(config.reject),
        config.module_prefix,
    )
    return config

"""Named parameter presets and user parameter files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from microrand.config.schema import LCGParams
from microrand.io.yaml_loader import load_package_yaml, load_yaml
from microrand.utils.exceptions import ConfigError


def _params_from_mapping(data: Any, name: str = "") -> LCGParams:
    if not isinstance(data, dict):
        raise ConfigError(f"expected a mapping of LCG parameters, got {type(data).__name__}")
    fields = dict(data)
    if name:
        fields.setdefault("name", name)
    try:
        return LCGParams.model_validate(fields)
    except ValidationError as e:
        label = f" for {name!r}" if name else ""
        raise ConfigError(f"invalid LCG parameters{label}: {e}") from e


def load_presets() -> dict[str, LCGParams]:
    """Load every preset shipped in ``config/presets.yaml``."""
    data: dict[str, Any] = load_package_yaml("config/presets.yaml")
    return {name: _params_from_mapping(body, name) for name, body in data["presets"].items()}


def get_preset(name: str) -> LCGParams:
    """Look up a single preset by name.

    Raises:
        ConfigError: If no preset has that name.
    """
    presets = load_presets()
    if name not in presets:
        available = ", ".join(sorted(presets))
        raise ConfigError(f"unknown preset {name!r} (available: {available})")
    return presets[name]


def load_params_file(path: Path) -> LCGParams:
    """Read LCG parameters from a YAML or JSON mapping file.

    Args:
        path: File holding ``multiplier``, ``increment`` and optionally
            ``modulus`` and ``name``.

    Raises:
        ConfigError: If the file is missing, unparsable or holds invalid values.
    """
    try:
        data = load_yaml(path)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot read parameter file {path}: {e}") from e
    return _params_from_mapping(data)

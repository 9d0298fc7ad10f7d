"""YAML data file loader for generator presets and parameter files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(path: Path) -> Any:
    """Load and parse a YAML file.

    Files are decoded as UTF-8. JSON files load as well, since JSON is a
    subset of YAML.

    Args:
        path: Absolute or relative path to the YAML file.

    Returns:
        Parsed YAML content (typically a dict or list).

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_package_yaml(relative_path: str) -> Any:
    """Load a YAML file relative to the microrand package root.

    Args:
        relative_path: Path relative to ``src/microrand/``,
            e.g. ``"config/presets.yaml"``.

    Returns:
        Parsed YAML content.
    """
    package_root = Path(__file__).resolve().parent.parent
    return load_yaml(package_root / relative_path)

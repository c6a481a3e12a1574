#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/cli/config.py
"""Configuration file loading for the command line.

Defaults for command-line options can be kept in a JSON, TOML or YAML file,
or in the ``[tool.mdliteral]`` table of a ``pyproject.toml``. Keys use the
option's destination name (``alias_divider``, ``resource_link`` ...).

Example ``.mdliteral.toml``::

    minimal = false
    wiki_links = true
    alias_divider = "|"
    plugins = ["my-plugin"]

"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = [".mdliteral.toml", ".mdliteral.yaml", ".mdliteral.yml", ".mdliteral.json"]

CONFIG_KEYS = frozenset(
    {
        "minimal",
        "wiki_links",
        "alias_divider",
        "resource_link",
        "quote",
        "plugins",
        "log_level",
    }
)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.mdliteral]`` table of a pyproject.toml file."""
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    section = data.get("tool", {}).get("mdliteral", {})
    if not isinstance(section, dict):
        raise argparse.ArgumentTypeError(f"[tool.mdliteral] in {pyproject_path} must be a table")
    return section


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"JSON config file must contain an object, got {type(config).__name__}")
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"YAML config file must contain a mapping, got {type(config).__name__}")
    return config


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration keyed by option name; unknown keys are dropped with a
        warning

    Raises
    ------
    argparse.ArgumentTypeError
        If the file does not exist, has an unsupported extension or cannot
        be parsed

    Examples
    --------
    >>> config = load_config_file(".mdliteral.toml")
    >>> config = load_config_file("pyproject.toml")

    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Config file not found: {config_path}")

    ext = config_path.suffix.lower()
    try:
        if config_path.name == "pyproject.toml":
            config = _load_pyproject_section(config_path)
        elif ext == ".toml":
            config = _load_toml_config(config_path)
        elif ext in (".yaml", ".yml"):
            config = _load_yaml_config(config_path)
        elif ext == ".json":
            config = _load_json_config(config_path)
        else:
            raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    unknown = sorted(set(config) - CONFIG_KEYS)
    for key in unknown:
        logger.warning(f"Ignoring unknown key '{key}' in config file {config_path}")
    logger.debug(f"Loaded configuration from {config_path}")
    return {key: value for key, value in config.items() if key in CONFIG_KEYS}


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file in ``start_dir`` (default: the working directory).

    The dedicated ``.mdliteral.*`` files are checked first, then a
    ``pyproject.toml`` holding a ``[tool.mdliteral]`` table.

    Returns
    -------
    Path or None
        The first configuration file found

    """
    directory = start_dir or Path.cwd()

    for filename in CONFIG_FILENAMES:
        candidate = directory / filename
        if candidate.is_file():
            return candidate

    pyproject_path = directory / "pyproject.toml"
    if pyproject_path.is_file():
        try:
            if _load_pyproject_section(pyproject_path):
                return pyproject_path
        except argparse.ArgumentTypeError:
            logger.debug(f"Skipping unreadable {pyproject_path}")

    return None

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/cli/actions.py
"""argparse actions that take their defaults from environment variables.

An option with destination ``alias_divider`` reads its default from
``MDLITERAL_ALIAS_DIVIDER``. Arguments given on the command line always win.
"""

from __future__ import annotations

import argparse
import logging
import os
from typing import Any, Optional

from mdliteral.constants import ENV_PREFIX

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("true", "1", "yes", "on")


def env_key(dest: str) -> str:
    """Return the environment variable consulted for an option destination.

    Examples
    --------
    >>> env_key("alias-divider")
    'MDLITERAL_ALIAS_DIVIDER'

    """
    return f"{ENV_PREFIX}{dest.upper().replace('-', '_').replace('.', '_')}"


def _env_value(dest: Optional[str]) -> Optional[str]:
    if not dest or dest == argparse.SUPPRESS:
        return None
    return os.environ.get(env_key(dest))


class EnvironmentAwareAction(argparse._StoreAction):
    """Store action whose default comes from the environment."""

    def __init__(self, option_strings: list[str], dest: str, **kwargs: Any):
        env_value = _env_value(dest)
        if env_value is not None:
            try:
                converter = kwargs.get("type")
                value = converter(env_value) if converter is not None else env_value
                choices = kwargs.get("choices")
                if choices is not None and value not in choices:
                    raise ValueError(f"must be one of {', '.join(map(str, choices))}")
                kwargs["default"] = value
            except (ValueError, TypeError) as e:
                logger.warning(f"Invalid environment variable {env_key(dest)}={env_value}: {e}")
        super().__init__(option_strings, dest, **kwargs)


class EnvironmentAwareBooleanAction(argparse._StoreTrueAction):
    """Boolean flag whose default comes from the environment."""

    def __init__(self, option_strings: list[str], dest: str, **kwargs: Any):
        env_value = _env_value(dest)
        if env_value is not None:
            kwargs["default"] = env_value.lower() in _TRUE_VALUES
        super().__init__(option_strings, dest, **kwargs)


class EnvironmentAwareAppendAction(argparse._AppendAction):
    """Append action whose default is a comma-separated environment variable."""

    def __init__(self, option_strings: list[str], dest: str, **kwargs: Any):
        env_value = _env_value(dest)
        if env_value is not None:
            kwargs["default"] = [item.strip() for item in env_value.split(",") if item.strip()]
        super().__init__(option_strings, dest, **kwargs)

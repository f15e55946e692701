from __future__ import annotations

"""
Settings Validation Service.

Turns an untrusted settings dictionary (JSON file, CLI overrides) into a
CombineSettings value, coercing types and falling back to defaults where a
value cannot be used.
"""

import logging
from typing import Any, List, Tuple

from combinenotes.domain.config import CombineSettings
from combinenotes.domain.constants import DEFAULT_OUTPUT_FOLDER, PATH_SEPARATOR

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


def validate_settings(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[CombineSettings, List[str]]:
    """
    Validate and normalize a raw settings dictionary.

    Args:
        config: Raw settings data (usually a dictionary).
        strict: If True, raises on invalid values instead of coercing.

    Returns:
        Tuple[CombineSettings, List[str]]: The normalized settings and a list
        of warnings describing every value that was replaced.

    Raises:
        TypeError: In strict mode, when a value has the wrong type.
        ValueError: In strict mode, when the output folder is empty.
    """
    warnings: List[str] = []
    defaults = CombineSettings()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        return defaults, warnings

    # --- output_folder ---
    output_folder = config.get("output_folder", defaults.output_folder)
    if not isinstance(output_folder, str):
        msg = f"'output_folder' must be a string, received {type(output_folder).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using '{DEFAULT_OUTPUT_FOLDER}'.")
        output_folder = DEFAULT_OUTPUT_FOLDER

    output_folder = output_folder.strip().strip(PATH_SEPARATOR).strip()
    if not output_folder:
        msg = "'output_folder' is empty."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using '{DEFAULT_OUTPUT_FOLDER}'.")
        output_folder = DEFAULT_OUTPUT_FOLDER

    # --- preselect_parent_folder ---
    preselect = config.get("preselect_parent_folder", defaults.preselect_parent_folder)
    if not isinstance(preselect, bool):
        coerced = _coerce_bool(preselect)
        if coerced is None or strict:
            msg = f"'preselect_parent_folder' must be a boolean, received {preselect!r}."
            if strict:
                raise TypeError(msg)
            warnings.append(f"{msg} Using {defaults.preselect_parent_folder}.")
            coerced = defaults.preselect_parent_folder
        preselect = coerced

    for w in warnings:
        logger.debug(f"Settings validation: {w}")

    return CombineSettings(output_folder=output_folder, preselect_parent_folder=preselect), warnings


def _coerce_bool(value: Any):
    """Interpret common textual and numeric boolean spellings, else None."""
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in _TRUE_STRINGS:
            return True
        if v in _FALSE_STRINGS:
            return False
    return None

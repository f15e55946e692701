from __future__ import annotations

"""
Configuration Domain Management.

Handles the persistent settings record (output folder and parent-folder
preselection) stored as JSON in the user data directory. The in-memory
representation is an immutable CombineSettings value that is passed
explicitly to the combiner and the sinks.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from combinenotes.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_OUTPUT_FOLDER,
    DEFAULT_PRESELECT_PARENT_FOLDER,
)
from combinenotes.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")


# -----------------------------------------------------------------------------
# Configuration Model
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class CombineSettings:
    """
    Immutable user settings for the combine commands.

    Attributes:
        output_folder: Vault folder where the file sink writes combined notes.
        preselect_parent_folder: Prefill the folder picker with the parent
            folder of the currently active file.
    """
    output_folder: str = DEFAULT_OUTPUT_FOLDER
    preselect_parent_folder: bool = DEFAULT_PRESELECT_PARENT_FOLDER


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default settings dictionary.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return asdict(CombineSettings())


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the raw settings dictionary from disk, merged over the defaults.

    Unknown keys are dropped. A missing or corrupted file yields the defaults.

    Args:
        config_file: Optional override of the settings file location.

    Returns:
        Dict[str, Any]: The loaded settings.
    """
    path = config_file or CONFIG_FILE
    defaults = get_default_config()

    if not os.path.exists(path):
        logger.debug("Config file not found. Returning defaults.")
        return defaults

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            logger.warning("Corrupted config file. Resetting to defaults.")
            return defaults

        for key in defaults:
            if key in data:
                defaults[key] = data[key]
        return defaults

    except Exception as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return get_default_config()


def save_config(config: Dict[str, Any], config_file: Optional[str] = None) -> bool:
    """
    Persist the settings dictionary to disk.

    Args:
        config: Settings to save.
        config_file: Optional override of the settings file location.

    Returns:
        bool: True if the file was written.
    """
    path = config_file or CONFIG_FILE
    payload = dict(config)
    payload["version"] = CURRENT_CONFIG_VERSION
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {path}")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False

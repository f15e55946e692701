from __future__ import annotations

"""
Domain Constants.

Centralizes the fixed values of the combine workflow: default settings,
the markdown filter, the per-file block layout and the output naming scheme.
"""

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# SETTINGS DEFAULTS
# -----------------------------------------------------------------------------
DEFAULT_OUTPUT_FOLDER = "combined_notes"
DEFAULT_PRESELECT_PARENT_FOLDER = True

# -----------------------------------------------------------------------------
# VAULT CONVENTIONS
# -----------------------------------------------------------------------------
VAULT_ROOT_PATH = "/"
PATH_SEPARATOR = "/"
MARKDOWN_EXTENSION = "md"

# -----------------------------------------------------------------------------
# COMBINED DOCUMENT LAYOUT
# -----------------------------------------------------------------------------
BLOCK_SEPARATOR = "------------\n"
BLOCK_HEADER_TEMPLATE = "# Document: {rel_path}\n\n"
BLOCK_TRAILER = "\n\n"

# -----------------------------------------------------------------------------
# OUTPUT NAMING
# -----------------------------------------------------------------------------
TIMESTAMP_FORMAT = "%Y-%m-%d-%H%M"
OUTPUT_FILE_TEMPLATE = "{folder}/{timestamp}_{name}-combined.md"

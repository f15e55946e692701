from __future__ import annotations

"""
Combine Domain Data Models.

Defines the combined document produced by the combiner and the result object
used to report the outcome of a sink (file, clipboard, preview) back to the
interface layer.
"""

from dataclasses import dataclass, field
from typing import Callable, List

# Fire-and-forget, user-visible message sink
Notifier = Callable[[str], None]

STATUS_SUCCESS = "success"
STATUS_EMPTY = "empty"
STATUS_ERROR = "error"

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CombinedDocument:
    """
    Ordered concatenation of the per-file blocks of one combine run.

    Attributes:
        root_path: Vault path of the folder that was combined.
        text: The full combined text.
        files: Relative paths of the files that contributed, in output order.
    """
    root_path: str
    text: str
    files: List[str] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return len(self.files)


@dataclass(frozen=True)
class CombineResult:
    """
    Outcome of a single sink invocation.

    Attributes:
        ok: True only when the sink delivered the document.
        status: One of 'success', 'empty' or 'error'.
        error: Underlying failure message (empty on success).
        root_path: Vault path of the folder that was combined.
        file_count: Number of markdown files found under the folder.
        output_path: Vault path of the written file (file sink only).
        text: The combined text, when one was produced.
    """
    ok: bool
    status: str
    error: str
    root_path: str
    file_count: int = 0
    output_path: str = ""
    text: str = ""

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result(
        document: CombinedDocument,
        file_count: int,
        output_path: str = "",
) -> CombineResult:
    """
    Create a successful combine result.

    Args:
        document: The delivered document.
        file_count: Number of markdown files found under the root.
        output_path: Destination path for the file sink.

    Returns:
        CombineResult: An immutable success result.
    """
    return CombineResult(
        ok=True,
        status=STATUS_SUCCESS,
        error="",
        root_path=document.root_path,
        file_count=file_count,
        output_path=output_path,
        text=document.text,
    )


def create_empty_result(root_path: str) -> CombineResult:
    """Create the 'nothing to combine' result."""
    return CombineResult(ok=False, status=STATUS_EMPTY, error="", root_path=root_path)


def create_error_result(error: str, root_path: str, output_path: str = "") -> CombineResult:
    """
    Create a failed combine result.

    Args:
        error: Underlying failure message.
        root_path: Vault path of the folder that was combined.
        output_path: Destination that was being written, if any.

    Returns:
        CombineResult: An immutable error result.
    """
    return CombineResult(
        ok=False,
        status=STATUS_ERROR,
        error=error,
        root_path=root_path,
        output_path=output_path,
    )

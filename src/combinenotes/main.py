from __future__ import annotations

"""
combine-notes entry point.

Installs a last-resort exception hook (log at CRITICAL, print the trace)
and runs the CLI controller. Also runnable as a plain script from a source
checkout.
"""

import logging
import os
import sys
import traceback
from types import TracebackType
from typing import List, Optional

if not getattr(sys, "frozen", False):
    _SRC_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if _SRC_DIR not in sys.path:
        sys.path.insert(0, _SRC_DIR)

EXIT_CRASH = 1


def report_crash(
        exctype: type[BaseException],
        value: BaseException,
        tb: Optional[TracebackType],
) -> None:
    """Log an unexpected exception and print its trace on stderr."""
    trace = "".join(traceback.format_exception(exctype, value, tb))
    logging.getLogger("combinenotes.supervisor").critical(f"Unhandled exception: {value}\n{trace}")

    banner = "=" * 80
    print(f"\n{banner}\nCOMBINE NOTES CRASHED\n{banner}\n{trace}", file=sys.stderr)


sys.excepthook = report_crash


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI; unexpected exceptions are reported and turned into exit 1.

    Returns:
        int: Process exit code.
    """
    try:
        from combinenotes.interface.cli.app import main as cli_main
        return cli_main(argv)
    except Exception as e:
        report_crash(type(e), e, e.__traceback__)
        return EXIT_CRASH


if __name__ == "__main__":
    sys.exit(main())

"""reactor.logging_utils
========================

Simple logging utilities, mainly for recording instruction lines the parser
had to skip so the input can be audited later.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from .constants import REJECT_LOG


def log_rejected(line_number: int, line: str, error: Exception, path: Optional[str] = None) -> None:
    """Append a JSON line describing a skipped input line to :data:`REJECT_LOG`."""

    entry = {
        "line_number": line_number,
        "line": line,
        "error": str(error),
    }
    with Path(path or REJECT_LOG).open("a") as handle:
        handle.write(json.dumps(entry) + "\n")


__all__ = ["log_rejected"]

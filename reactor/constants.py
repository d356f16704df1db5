"""reactor.constants
====================

Global constants used across the reboot engine. Keeping them here avoids import
cycles between modules and makes it easier to discover configurable paths.
"""

from __future__ import annotations

INIT_AREA_BOUND = 50
REJECT_LOG = "rejected_steps.jsonl"
SUMMARY_SUFFIX = ".summary.json"

__all__ = ["INIT_AREA_BOUND", "REJECT_LOG", "SUMMARY_SUFFIX"]

"""Exit codes returned by every ``code-presenter`` command.

Code  Meaning
----  -------
  0   Success — document rendered / preset valid
  1   Violation — a preset file failed schema validation
  2   Error — usage error, missing or oversized input, unreadable preset
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2

from __future__ import annotations

"""Loader error types.

CONTRACT
- Inputs: path that failed, failure kind, message
- Outputs:
  - ConfigOpenError (kind="open") and ConfigReadError (kind="read")
- Invariants:
  - Both subclass ConfigLoadError, which subclasses OSError
- Failure:
  - None
"""

from pathlib import Path
from typing import Literal

ErrorKind = Literal["open", "read"]


class ConfigLoadError(OSError):
    """Config file could not be loaded."""

    kind: ErrorKind

    def __init__(self, path: str | Path, message: str) -> None:
        super().__init__(message)
        self.path = str(path)
        self.message = message

    def __str__(self) -> str:
        return f"{self.message}: {self.path}"


class ConfigOpenError(ConfigLoadError):
    kind: ErrorKind = "open"


class ConfigReadError(ConfigLoadError):
    kind: ErrorKind = "read"

from __future__ import annotations

"""Config file loader.

CONTRACT
- Inputs: Path to a config file, text encoding
- Outputs (required):
  - read_config() returns the full file content as a string
  - load_config() returns a LoadResult (never raises for open/read failures)
- Invariants:
  - Content is returned exactly as decoded (no newline translation)
  - The file handle is closed on every exit path
  - No partial content on failure
- Failure:
  - read_config raises ConfigOpenError if the file cannot be opened
  - read_config raises ConfigReadError on I/O or decoding errors while reading
"""

import os
from pathlib import Path
from typing import Literal

from loguru import logger
from pydantic import BaseModel, model_validator

from .errors import ConfigLoadError, ConfigOpenError, ConfigReadError

DEFAULT_CONFIG_PATH = "config.txt"
DEFAULT_ENCODING = "utf-8"


class LoadResult(BaseModel):
    ok: bool
    path: str
    contents: str | None = None
    error_kind: Literal["open", "read"] | None = None
    detail: str = ""

    @model_validator(mode="after")
    def check_outcome(self) -> LoadResult:
        if self.ok and (self.contents is None or self.error_kind is not None):
            raise ValueError("successful result needs contents and no error_kind")
        if not self.ok and (self.contents is not None or self.error_kind is None):
            raise ValueError("failed result needs error_kind and no contents")
        return self


def read_config(path: str | os.PathLike[str], *, encoding: str = DEFAULT_ENCODING) -> str:
    """Read the whole config file at `path` as text."""
    if not os.fspath(path):
        raise ConfigOpenError(path, "Empty config path")
    p = Path(path)

    logger.debug(f"Opening config file {p}")
    try:
        f = p.open("r", encoding=encoding, newline="")
    except (OSError, ValueError) as e:
        # ValueError covers paths with embedded NUL bytes
        raise ConfigOpenError(p, "Failed to open config file") from e

    with f:
        try:
            contents = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigReadError(p, "Failed to read config file") from e

    logger.debug(f"Read {len(contents)} chars from {p}")
    return contents


def load_config(path: str | os.PathLike[str], *, encoding: str = DEFAULT_ENCODING) -> LoadResult:
    """Like read_config, but reports open/read failures in the returned LoadResult."""
    try:
        contents = read_config(path, encoding=encoding)
    except ConfigLoadError as e:
        cause = e.__cause__
        detail = f"{e} ({cause})" if cause else str(e)
        return LoadResult(ok=False, path=str(path), error_kind=e.kind, detail=detail)
    return LoadResult(ok=True, path=str(path), contents=contents)


if __name__ == "__main__":
    import argparse
    import sys

    parser = argparse.ArgumentParser(description="Read a config file and print it")
    parser.add_argument("path", nargs="?", default=DEFAULT_CONFIG_PATH, help="Config file path")
    parser.add_argument("--encoding", default=DEFAULT_ENCODING, help="Text encoding")
    args = parser.parse_args()

    res = load_config(args.path, encoding=args.encoding)
    if res.ok:
        sys.stdout.write(res.contents or "")
    else:
        print(f"Error ({res.error_kind}): {res.detail}", file=sys.stderr)
        sys.exit(1)

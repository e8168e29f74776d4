"""GitHub Actions plumbing: workflow-command logging and step outputs."""

from __future__ import annotations

import logging
import sys
import uuid
from collections.abc import Mapping
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)

_COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def escape_data(message: str) -> str:
    """Escape ``message`` for use as the data part of a workflow command."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionsLogHandler(logging.StreamHandler):
    """Render log records as ``::debug::``/``::warning::``/``::error::`` commands.

    INFO records are written as plain lines so they show up in the step log
    without an annotation.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__(stream or sys.stdout)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = _COMMANDS.get(record.levelno)
        if command is None:
            return message
        return f"::{command}::{escape_data(message)}"


def configure_logging(*, debug: bool = False, stream: TextIO | None = None) -> None:
    """Route the package's loggers through :class:`ActionsLogHandler`."""
    root = logging.getLogger("upload_release_asset")
    for handler in list(root.handlers):
        if isinstance(handler, ActionsLogHandler):
            root.removeHandler(handler)
    handler = ActionsLogHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.INFO)
    root.propagate = False


def set_failed(message: str, *, stream: TextIO | None = None) -> None:
    """Emit an error annotation for the step; the caller owns the exit code."""
    print(f"::error::{escape_data(message)}", file=stream or sys.stdout)


def write_github_output(file: Path, values: Mapping[str, str]) -> None:
    """Append ``values`` to ``file`` using GitHub's multiline syntax.

    Parameters
    ----------
    file:
        Path to the GitHub Actions output file (typically ``GITHUB_OUTPUT``).
    values:
        Mapping of output keys to string values.
    """
    file.parent.mkdir(parents=True, exist_ok=True)
    with file.open("a", encoding="utf-8") as handle:
        for key, value in values.items():
            delimiter = f"EOF_{uuid.uuid4().hex}"
            handle.write(f"{key}<<{delimiter}\n")
            handle.write(str(value))
            handle.write(f"\n{delimiter}\n")


def set_outputs(values: Mapping[str, str], file: Path | None) -> None:
    """Publish step outputs to ``file``, or only log them when running outside Actions."""
    for key, value in values.items():
        logger.info("%s=%s", key, value)
    if file is not None and values:
        write_github_output(file, values)

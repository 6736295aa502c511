"""
Result emitter: writes the finished ConfigRecord as JSON.
"""

import logging
import os
import sys
from pathlib import Path
from typing import TextIO

from pydantic import ValidationError

from zero.wizard.core import ConfigRecord
from zero.wizard.exceptions import EmitError

logger = logging.getLogger(__name__)

OUTPUT_MODE = 0o644


def encode_record(record: ConfigRecord) -> str:
    """
    Encode a record as compact JSON.

    Raises:
        EmitError: If the record cannot be serialized.
    """
    try:
        return record.to_json()
    except (ValidationError, ValueError, TypeError) as e:
        raise EmitError(f"Failed to encode result: {e}") from e


def write_output(payload: str, path: Path) -> None:
    """
    Write the payload to a file, creating or truncating it.

    New files are created owner read/write, group/other read (subject to
    the process umask).

    Raises:
        EmitError: If the file cannot be written.
    """
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, OUTPUT_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
    except OSError as e:
        raise EmitError(f"Cannot write {path}: {e}", path=path) from e
    logger.info(f"Wrote result to {path}")


def emit_record(
    record: ConfigRecord,
    output: str | Path | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    Emit the record to stdout or to a file.

    Args:
        record: The finished record.
        output: Destination path. None or blank writes to the stream.
        stream: Stream used when no path is given, defaults to sys.stdout.

    Raises:
        EmitError: If encoding or writing fails.
    """
    payload = encode_record(record)

    if output is None or not str(output).strip():
        stream = stream or sys.stdout
        try:
            stream.write(payload + "\n")
            stream.flush()
        except OSError as e:
            raise EmitError(f"Cannot write result to stdout: {e}") from e
        return

    write_output(payload, Path(output))

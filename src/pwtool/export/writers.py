"""TXT and CSV writers for generated passwords.

Writers receive a plain ordered sequence of strings and nothing else.
Both formats use CRLF line endings so the files open cleanly in Windows
tools; the CSV carries a UTF-8 byte-order mark for Excel.
"""

from __future__ import annotations

import csv
import logging
import os
from collections.abc import Sequence
from typing import Union

from pwtool.exceptions import ExportError

logger = logging.getLogger("pwtool")

PathLike = Union[str, "os.PathLike[str]"]

CSV_HEADER = ("#", "Password")
LINE_TERMINATOR = "\r\n"


def write_txt(path: PathLike, passwords: Sequence[str]) -> None:
    """Write one password per line, each terminated by CRLF.

    Args:
        path: Destination file; overwritten if it exists.
        passwords: Passwords in output order.

    Raises:
        ExportError: If the file cannot be opened or written.
    """
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            for password in passwords:
                f.write(password)
                f.write(LINE_TERMINATOR)
    except OSError as exc:
        raise ExportError(f"Failed to open TXT file for writing: {path} ({exc})") from exc
    logger.debug("Wrote %d password(s) to TXT %s", len(passwords), path)


def write_csv(path: PathLike, passwords: Sequence[str]) -> None:
    """Write a numbered CSV with a UTF-8 BOM and a ``#,Password`` header.

    Fields containing a comma, double quote, CR or LF are wrapped in double
    quotes with embedded quotes doubled.

    Args:
        path: Destination file; overwritten if it exists.
        passwords: Passwords in output order; rows are numbered from 1.

    Raises:
        ExportError: If the file cannot be opened or written.
    """
    try:
        with open(path, "w", encoding="utf-8-sig", newline="") as f:
            writer = csv.writer(
                f,
                lineterminator=LINE_TERMINATOR,
                quoting=csv.QUOTE_MINIMAL,
                doublequote=True,
            )
            writer.writerow(CSV_HEADER)
            for number, password in enumerate(passwords, start=1):
                writer.writerow((number, password))
    except OSError as exc:
        raise ExportError(f"Failed to open CSV file for writing: {path} ({exc})") from exc
    logger.debug("Wrote %d password(s) to CSV %s", len(passwords), path)

"""Delimited record I/O on binary streams."""

from __future__ import annotations

from typing import BinaryIO, Iterable, List

NEWLINE = b"\n"
NUL = b"\0"


def read_records(stream: BinaryIO, delimiter: bytes = NEWLINE) -> List[bytes]:
    """Read a whole stream and split it into records.

    A trailing delimiter leaves an empty final record; callers drop empties.

    Args:
        stream: Binary input stream.
        delimiter: Single record delimiter byte.

    Returns:
        Records in input order, delimiters removed.
    """
    return stream.read().split(delimiter)


def write_records(stream: BinaryIO, records: Iterable[bytes], delimiter: bytes = NEWLINE) -> int:
    """Write records, each followed by the delimiter, then flush.

    Returns:
        Number of records written.
    """
    count = 0
    for record in records:
        stream.write(record)
        stream.write(delimiter)
        count += 1
    stream.flush()
    return count

"""Delimited record I/O."""

from proximity_sort.io.records import NEWLINE, NUL, read_records, write_records

__all__ = ["NEWLINE", "NUL", "read_records", "write_records"]

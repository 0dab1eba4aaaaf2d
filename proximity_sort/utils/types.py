"""Core data types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

PathLike = Union[str, bytes]


@dataclass(frozen=True)
class CandidateEntry:
    """One retained input record with its proximity score.

    ``index`` is the position among non-empty records, used as tie-break.
    """
    path: PathLike
    score: int
    index: int

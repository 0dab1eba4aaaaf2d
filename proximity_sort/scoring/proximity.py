"""Path proximity scoring.

A candidate path scores +1 for every leading segment it shares with the
reference path and -1 for every segment from the first divergence on.
Paths are opaque strings: nothing touches the filesystem and segments are
compared by plain equality.
"""

from __future__ import annotations

import os
from typing import List, Optional

from proximity_sort.utils.types import PathLike


def _markers(path: PathLike, sep: Optional[PathLike]) -> tuple:
    """Return (separator, current-dir marker) typed to match ``path``."""
    if isinstance(path, bytes):
        if sep is None:
            sep = os.fsencode(os.sep)
        return sep, os.fsencode(os.curdir)
    return (os.sep if sep is None else sep), os.curdir


def split_segments(path: PathLike, sep: Optional[PathLike] = None) -> List[PathLike]:
    """Split a path into its non-empty segments.

    Consecutive separators do not produce empty segments, so
    ``"bar//main.txt"`` and ``"bar/main.txt"`` split identically.
    """
    sep, _ = _markers(path, sep)
    return [segment for segment in path.split(sep) if segment]


def compute_proximity_score(
    reference: PathLike,
    candidate: PathLike,
    sep: Optional[PathLike] = None,
) -> int:
    """Score how close ``candidate`` is to ``reference``.

    Args:
        reference: Path the candidates are ranked against.
        candidate: Path to score. Must be the same type as ``reference``.
        sep: Segment separator. Defaults to the platform separator.

    Returns:
        Signed score. Higher means closer.
    """
    sep, curdir = _markers(reference, sep)

    score = 0
    missed = False

    # An absolute path against a relative one diverges at the root.
    if candidate.startswith(sep) != reference.startswith(sep):
        missed = True
        score -= 1

    ref_segments = split_segments(reference, sep)
    cursor = 0

    for segment in split_segments(candidate, sep):
        if segment == curdir:
            continue

        # once missed, each additional segment is one step further away
        if missed:
            score -= 1
            continue

        # at most one "." is skipped in the reference per comparison
        if cursor < len(ref_segments) and ref_segments[cursor] == curdir:
            cursor += 1

        matched = cursor < len(ref_segments) and ref_segments[cursor] == segment
        cursor += 1
        if matched:
            score += 1
        else:
            missed = True
            score -= 1

    return score

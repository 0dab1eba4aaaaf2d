"""Proximity ranking of candidate paths."""

from __future__ import annotations

import heapq
from typing import Iterable, List, Optional, Tuple

from proximity_sort.scoring.proximity import compute_proximity_score
from proximity_sort.utils.logging import get_logger
from proximity_sort.utils.types import CandidateEntry, PathLike

logger = get_logger("ranking.ranker")


class ProximityRanker:
    """Priority queue of candidate paths ordered by proximity to a reference.

    Highest score comes out first. Equal scores come out in the order they
    were added, so the ranking is a stable sort of the input.
    """

    def __init__(self, reference: PathLike, sep: Optional[PathLike] = None):
        self.reference = reference
        self.sep = sep
        self._heap: List[Tuple[int, int, CandidateEntry]] = []
        self._next_index = 0
        self._dropped = 0

    def __len__(self) -> int:
        return len(self._heap)

    def add(self, path: PathLike) -> Optional[CandidateEntry]:
        """Score a path and queue it.

        Empty paths are dropped without consuming an index.

        Returns:
            The queued entry, or None if the path was dropped.
        """
        if not path:
            self._dropped += 1
            return None

        entry = CandidateEntry(
            path=path,
            score=compute_proximity_score(self.reference, path, self.sep),
            index=self._next_index,
        )
        self._next_index += 1
        heapq.heappush(self._heap, (-entry.score, entry.index, entry))
        return entry

    def add_many(self, paths: Iterable[PathLike]) -> None:
        for path in paths:
            self.add(path)

    def drain(self) -> List[PathLike]:
        """Pop every queued entry in priority order.

        Returns:
            Paths ordered by score descending, then input order.
        """
        logger.debug(
            "Ranking %d paths (%d empty records dropped)",
            len(self._heap),
            self._dropped,
        )
        ranked = []
        while self._heap:
            _, _, entry = heapq.heappop(self._heap)
            ranked.append(entry.path)
        return ranked


def rank(
    reference: PathLike,
    items: Iterable[PathLike],
    sep: Optional[PathLike] = None,
) -> List[PathLike]:
    """Order paths by proximity to ``reference``.

    Args:
        reference: Path to rank against.
        items: Candidate paths in input order. Empty items are dropped.
        sep: Segment separator. Defaults to the platform separator.

    Returns:
        Non-empty paths, closest first; ties keep their input order.
    """
    ranker = ProximityRanker(reference, sep=sep)
    ranker.add_many(items)
    return ranker.drain()

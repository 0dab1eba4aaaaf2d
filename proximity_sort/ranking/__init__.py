"""Proximity ranking."""

from proximity_sort.ranking.ranker import ProximityRanker, rank

__all__ = ["ProximityRanker", "rank"]

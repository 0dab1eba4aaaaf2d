"""Sort paths by their proximity to a reference path."""

from proximity_sort.ranking.ranker import ProximityRanker, rank
from proximity_sort.scoring.proximity import compute_proximity_score, split_segments

__version__ = "0.1.0"

__all__ = ["ProximityRanker", "compute_proximity_score", "rank", "split_segments"]

"""Path proximity scoring."""

from proximity_sort.scoring.proximity import compute_proximity_score, split_segments

__all__ = ["compute_proximity_score", "split_segments"]

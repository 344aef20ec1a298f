from .core import ReviewerAssigner
from .scoring import calculate_score, build_scores, rank_scores, score_candidates

__all__ = [
    'ReviewerAssigner',
    'calculate_score',
    'build_scores',
    'rank_scores',
    'score_candidates',
]

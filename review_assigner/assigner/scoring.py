"""Candidate scoring for ReviewerAssigner.

A candidate's score adds up their open reviews, the size of those reviews
and how many reviews they finished in the last week, each multiplied by its
weight. Lower means less busy.
"""

from typing import Callable, Dict, List, Sequence

from ..models import ReviewerScore, ReviewerWorkload, ScoringWeights


def calculate_score(workload: ReviewerWorkload, recent_reviews_count: int,
                    weights: ScoringWeights) -> float:
    """Weighted load of a single reviewer."""
    return (workload.open_prs_count * weights.open_prs
            + (workload.total_lines_in_review / 100.0) * weights.lines_per_100
            + recent_reviews_count * weights.recent_reviews)


def build_scores(workloads: Dict[str, ReviewerWorkload], team_members: Sequence[str],
                 weights: ScoringWeights, pr_author: str,
                 recent_reviews: Callable[[str], int]) -> List[ReviewerScore]:
    """Score every team member except the PR author.

    Args:
        workloads: Workload per login, must contain every team member
        team_members: Roster in declaration order
        weights: Scoring weights
        pr_author: Login excluded from the result
        recent_reviews: Returns the recent review count for a login

    Returns:
        One ReviewerScore per eligible roster entry, in roster order
    """
    scores = []
    for member in team_members:
        if member == pr_author:
            continue

        workload = workloads[member]
        recent_reviews_count = recent_reviews(member)

        scores.append(ReviewerScore(
            username=member,
            open_prs_count=workload.open_prs_count,
            total_lines_in_review=workload.total_lines_in_review,
            recent_reviews_count=recent_reviews_count,
            total_score=calculate_score(workload, recent_reviews_count, weights)
        ))

    return scores


def rank_scores(scores: Sequence[ReviewerScore]) -> List[ReviewerScore]:
    """Sort ascending by score.

    sorted() is stable, so equal scores keep roster order. NaN compares as
    neither less nor greater than any score, so pairwise it counts as equal;
    where it lands among finite scores is up to the sort.
    """
    return sorted(scores, key=lambda s: s.total_score)


def score_candidates(workloads: Dict[str, ReviewerWorkload], team_members: Sequence[str],
                     weights: ScoringWeights, pr_author: str,
                     recent_reviews: Callable[[str], int]) -> List[ReviewerScore]:
    """Eligible candidates ranked from least to most busy."""
    return rank_scores(build_scores(workloads, team_members, weights, pr_author, recent_reviews))


def calculate_scores(self, workloads: Dict[str, ReviewerWorkload], pr_author: str) -> List[ReviewerScore]:
    """Score and rank the configured team for the target PR.

    Recent review counts are fetched one member at a time.

    Args:
        workloads: Result of aggregate_workload
        pr_author: Login of the target PR's author

    Returns:
        Ranked scores, least busy first
    """
    print("Calculating scores for each reviewer...")

    scores = build_scores(workloads, self.config.team_members, self.config.weights,
                          pr_author, self.recent_review_count)
    self.formatter.print_score_breakdown(scores, self.config.weights)

    return rank_scores(scores)

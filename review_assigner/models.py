"""Data models for reviewer workload scoring."""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional


@dataclass(frozen=True)
class ScoringWeights:
    """Coefficients applied to each workload signal."""
    open_prs: float = 10.0
    lines_per_100: float = 1.0
    recent_reviews: float = 3.0


@dataclass
class ReviewerWorkload:
    """Reviews a user is currently engaged on."""
    open_prs_count: int = 0
    total_lines_in_review: int = 0  # additions + deletions across those PRs

    def add_pr(self, lines: int):
        self.open_prs_count += 1
        self.total_lines_in_review += lines


@dataclass(frozen=True)
class PullRequestSnapshot:
    """The parts of a pull request that matter for workload."""
    number: int
    author: Optional[str] = None
    title: Optional[str] = None
    state: Optional[str] = None
    additions: int = 0
    deletions: int = 0
    requested_reviewers: FrozenSet[str] = frozenset()

    @property
    def changed_lines(self) -> int:
        return self.additions + self.deletions

    @classmethod
    def from_api(cls, data: Dict) -> 'PullRequestSnapshot':
        """Build a snapshot from a pull request detail response.

        Args:
            data: JSON body of ``GET /repos/{owner}/{repo}/pulls/{number}``

        Returns:
            PullRequestSnapshot with missing counts treated as 0
        """
        user = data.get('user') or {}
        requested = data.get('requested_reviewers') or []
        return cls(
            number=data['number'],
            author=user.get('login'),
            title=data.get('title'),
            state=data.get('state'),
            additions=data.get('additions') or 0,
            deletions=data.get('deletions') or 0,
            requested_reviewers=frozenset(r['login'] for r in requested if r and r.get('login'))
        )


@dataclass(frozen=True)
class ReviewerScore:
    """Score breakdown for a single candidate."""
    username: str
    open_prs_count: int
    total_lines_in_review: int
    recent_reviews_count: int
    total_score: float

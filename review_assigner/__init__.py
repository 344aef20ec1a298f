"""GitHub reviewer balance - assigns the least busy team member to a PR."""

from .models import ScoringWeights, ReviewerWorkload, PullRequestSnapshot, ReviewerScore
from .config import Config, load_config
from .exceptions import ReviewerAssignerError, ConfigError, GitHubOperationError
from .api_client import GitHubAPIClient
from .assigner import ReviewerAssigner, score_candidates
from .output import ReportFormatter

__all__ = [
    'ScoringWeights',
    'ReviewerWorkload',
    'PullRequestSnapshot',
    'ReviewerScore',
    'Config',
    'load_config',
    'ReviewerAssignerError',
    'ConfigError',
    'GitHubOperationError',
    'GitHubAPIClient',
    'ReviewerAssigner',
    'score_candidates',
    'ReportFormatter',
]

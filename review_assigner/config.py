"""
Invocation configuration for the reviewer assigner.

Reads the inputs GitHub Actions exposes to a step (``INPUT_*`` variables and
the ``GITHUB_*`` context) and validates them into an immutable Config before
anything touches the network.
"""

import json
import math
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from .exceptions import ConfigError
from .models import ScoringWeights

DEFAULT_API_URL = "https://api.github.com"

TOKEN_VAR = 'INPUT_GITHUB_TOKEN'
TEAM_MEMBERS_VAR = 'INPUT_TEAM_MEMBERS'
WEIGHT_OPEN_PRS_VAR = 'INPUT_WEIGHT_OPEN_PRS'
WEIGHT_LINES_VAR = 'INPUT_WEIGHT_LINES_PER_100'
WEIGHT_RECENT_VAR = 'INPUT_WEIGHT_RECENT_REVIEWS'
REPOSITORY_OWNER_VAR = 'GITHUB_REPOSITORY_OWNER'
REPOSITORY_VAR = 'GITHUB_REPOSITORY'
EVENT_PATH_VAR = 'GITHUB_EVENT_PATH'
API_URL_VAR = 'GITHUB_API_URL'


@dataclass(frozen=True)
class Config:
    """Validated inputs for a single assignment run."""
    github_token: str = field(repr=False)
    team_members: Tuple[str, ...]
    weights: ScoringWeights
    repo_owner: str
    repo_name: str
    pr_number: int
    api_url: str = DEFAULT_API_URL

    @property
    def repository(self) -> str:
        return f"{self.repo_owner}/{self.repo_name}"


def _require(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name)
    if value is None or not value.strip():
        raise ConfigError(f"Missing {name}", field=name)
    return value


def parse_team_members(raw: str) -> Tuple[str, ...]:
    """Split a comma-separated roster.

    Segments are trimmed but neither filtered nor deduplicated, so
    ``"alice, ,bob"`` yields ``('alice', '', 'bob')``.
    """
    return tuple(member.strip() for member in raw.split(','))


def parse_weight(environ: Mapping[str, str], name: str, default: float) -> float:
    """Parse an optional weight, falling back to ``default`` when unset.

    Args:
        environ: Environment mapping
        name: Variable holding the weight
        default: Value used when the variable is absent

    Returns:
        The weight as a float

    Raises:
        ConfigError: If the variable is present but not a finite, non-negative number
    """
    raw = environ.get(name)
    if raw is None:
        return default

    value_text = raw.strip()
    # float() would also take "1_0", which is not a plain decimal number
    if '_' in value_text:
        raise ConfigError(f"Invalid {name}: '{raw}' is not a number", field=name)

    try:
        value = float(value_text)
    except ValueError:
        raise ConfigError(f"Invalid {name}: '{raw}' is not a number", field=name) from None

    if math.isnan(value) or math.isinf(value) or value < 0:
        raise ConfigError(f"Invalid {name}: '{raw}' must be a finite, non-negative number", field=name)

    return value


def parse_repository_name(repository: str) -> str:
    """Return the name part of an ``owner/name`` identifier."""
    parts = repository.split('/')
    if len(parts) < 2 or not parts[1]:
        raise ConfigError(f"Invalid {REPOSITORY_VAR} format: '{repository}'", field=REPOSITORY_VAR)
    return parts[1]


def read_pr_number(event_path: Optional[str]) -> int:
    """Extract ``pull_request.number`` from a GitHub event payload file."""
    error = ConfigError("Could not extract PR number from event", field=EVENT_PATH_VAR)
    if not event_path:
        raise error

    try:
        with open(event_path, 'r', encoding='utf-8') as f:
            event = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise error from e

    pull_request = event.get('pull_request') if isinstance(event, dict) else None
    number = pull_request.get('number') if isinstance(pull_request, dict) else None

    # bool is an int subclass, JSON true must not pass as PR #1
    if not isinstance(number, int) or isinstance(number, bool) or number < 0:
        raise error

    return number


def load_config(environ: Mapping[str, str] = None) -> Config:
    """Build a Config from the process environment.

    Args:
        environ: Environment mapping, defaults to ``os.environ``

    Returns:
        Validated Config

    Raises:
        ConfigError: Naming the first missing or invalid input
    """
    if environ is None:
        environ = os.environ

    token = _require(environ, TOKEN_VAR)
    team_members = parse_team_members(_require(environ, TEAM_MEMBERS_VAR))

    defaults = ScoringWeights()
    weights = ScoringWeights(
        open_prs=parse_weight(environ, WEIGHT_OPEN_PRS_VAR, defaults.open_prs),
        lines_per_100=parse_weight(environ, WEIGHT_LINES_VAR, defaults.lines_per_100),
        recent_reviews=parse_weight(environ, WEIGHT_RECENT_VAR, defaults.recent_reviews)
    )

    repo_owner = _require(environ, REPOSITORY_OWNER_VAR).strip()
    repo_name = parse_repository_name(_require(environ, REPOSITORY_VAR).strip())
    pr_number = read_pr_number(environ.get(EVENT_PATH_VAR))

    api_url = (environ.get(API_URL_VAR) or DEFAULT_API_URL).rstrip('/')

    return Config(
        github_token=token,
        team_members=team_members,
        weights=weights,
        repo_owner=repo_owner,
        repo_name=repo_name,
        pr_number=pr_number,
        api_url=api_url
    )

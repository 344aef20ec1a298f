"""
Shared fixtures: configs and an in-memory stand-in for the GitHub API client
"""

import re
import pytest
import requests
from unittest.mock import Mock

from review_assigner.api_client import GitHubAPIClient
from review_assigner.config import Config
from review_assigner.models import ScoringWeights


def make_config(team_members=('alice', 'bob', 'carol'), weights=None, pr_number=42):
    return Config(
        github_token='test_token',
        team_members=tuple(team_members),
        weights=weights or ScoringWeights(),
        repo_owner='octo',
        repo_name='repo',
        pr_number=pr_number
    )


def make_pr(number, author='dave', additions=0, deletions=0, requested=(), title=None):
    return {
        'number': number,
        'user': {'login': author} if author else None,
        'title': title or f'PR {number}',
        'state': 'open',
        'additions': additions,
        'deletions': deletions,
        'requested_reviewers': [{'login': login} for login in requested]
    }


class FakeGitHub:
    """Routes GitHubAPIClient calls to canned data.

    ``reviews`` and ``recent`` values may be exceptions, which are raised.
    """

    def __init__(self, prs=None, reviews=None, recent=None, open_prs_error=None, assign_error=None):
        self.prs = {pr['number']: pr for pr in (prs or [])}
        self.reviews = reviews or {}
        self.recent = recent or {}
        self.open_prs_error = open_prs_error
        self.assign_error = assign_error

        self.client = Mock(spec=GitHubAPIClient)
        self.client.get_paginated.side_effect = self.get_paginated
        self.client.get_json.side_effect = self.get_json
        self.client.search_issues.side_effect = self.search_issues
        self.client.post_json.side_effect = self.post_json

    def get_paginated(self, path, params=None):
        if path.endswith('/pulls'):
            if self.open_prs_error:
                raise self.open_prs_error
            return [{'number': n} for n in self.prs if self.prs[n]['state'] == 'open']

        number = int(re.search(r'/pulls/(\d+)/reviews$', path).group(1))
        result = self.reviews.get(number, [])
        if isinstance(result, Exception):
            raise result
        return [{'user': {'login': login} if login else None, 'state': 'COMMENTED'} for login in result]

    def get_json(self, path):
        number = int(re.search(r'/pulls/(\d+)$', path).group(1))
        if number not in self.prs:
            raise requests.exceptions.HTTPError(f"404 Not Found: {path}")
        return self.prs[number]

    def search_issues(self, query):
        username = re.search(r'reviewed-by:(\S*)', query).group(1)
        result = self.recent.get(username, 0)
        if isinstance(result, Exception):
            raise result
        return {'total_count': result, 'items': []}

    def post_json(self, path, payload):
        if self.assign_error:
            raise self.assign_error
        return {}

    @property
    def assigned(self):
        return [call.args[1]['reviewers'] for call in self.client.post_json.call_args_list]


@pytest.fixture
def config():
    return make_config()

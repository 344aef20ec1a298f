"""
Unit tests for the end-to-end assignment run
"""

import pytest
import requests
from unittest.mock import Mock

from conftest import FakeGitHub, make_config, make_pr
from review_assigner.assigner import ReviewerAssigner
from review_assigner.exceptions import GitHubOperationError
from review_assigner.models import ScoringWeights


TARGET = 42


class TestFetchPRAuthor:
    """Test cases for fetch_pr_author."""

    def test_returns_author(self, config, capsys):
        github = FakeGitHub(prs=[make_pr(TARGET, author='alice', title='Fix bug')])

        assert ReviewerAssigner(config, api_client=github.client).fetch_pr_author() == 'alice'

        output = capsys.readouterr().out
        assert 'Author: @alice' in output
        assert 'Title: Fix bug' in output

    def test_pr_without_author_is_fatal(self, config):
        github = FakeGitHub(prs=[make_pr(TARGET, author=None)])

        with pytest.raises(GitHubOperationError, match=f'PR #{TARGET} has no author'):
            ReviewerAssigner(config, api_client=github.client).fetch_pr_author()

    def test_missing_pr_is_fatal(self, config):
        github = FakeGitHub()

        with pytest.raises(GitHubOperationError, match=f'PR #{TARGET}'):
            ReviewerAssigner(config, api_client=github.client).fetch_pr_author()


class TestAssignReviewer:
    """Test cases for assign_reviewer."""

    def test_requests_review(self, config):
        github = FakeGitHub()

        ReviewerAssigner(config, api_client=github.client).assign_reviewer('bob')

        github.client.post_json.assert_called_once_with(
            f'repos/octo/repo/pulls/{TARGET}/requested_reviewers', {'reviewers': ['bob']})

    def test_failure_is_fatal(self, config):
        github = FakeGitHub(assign_error=requests.exceptions.HTTPError("422 Unprocessable Entity"))

        with pytest.raises(GitHubOperationError, match=f'Failed to assign @bob as reviewer to PR #{TARGET}') as exc_info:
            ReviewerAssigner(config, api_client=github.client).assign_reviewer('bob')

        assert exc_info.value.username == 'bob'
        assert exc_info.value.pr_number == TARGET


class TestRun:
    """Test cases for the full run."""

    def test_assigns_least_busy(self, capsys):
        """Test the three-member scenario end to end."""
        config = make_config(['A', 'B', 'C'], weights=ScoringWeights(10, 1, 0))
        github = FakeGitHub(
            prs=[
                make_pr(TARGET, author='D'),
                make_pr(5, author='D', additions=30, deletions=10, requested=['A'])
            ],
            reviews={5: ['B']}
        )

        winner = ReviewerAssigner(config, api_client=github.client).run()

        assert winner == 'C'
        assert github.assigned == [['C']]

        output = capsys.readouterr().out
        assert output.index('#1 @C: 0.00 points') < output.index('#2 @A: 10.40 points')
        assert output.index('#2 @A: 10.40 points') < output.index('#3 @B: 10.40 points')
        assert f'PR #{TARGET} has been assigned to @C' in output

    def test_author_on_roster_not_assigned(self):
        config = make_config(['A', 'B'])
        github = FakeGitHub(prs=[make_pr(TARGET, author='A')], recent={'B': 10})

        winner = ReviewerAssigner(config, api_client=github.client).run()

        assert winner == 'B'
        assert github.assigned == [['B']]

    def test_no_open_prs_uses_roster_order(self):
        config = make_config(['A', 'B', 'C'], weights=ScoringWeights(10, 1, 0))
        github = FakeGitHub(prs=[make_pr(TARGET, author='D')], recent={'A': 5, 'B': 1})

        assert ReviewerAssigner(config, api_client=github.client).run() == 'A'

    def test_only_author_on_roster(self, capsys):
        """Test that no assignment is attempted when nobody is eligible."""
        config = make_config(['alice', 'alice'])
        github = FakeGitHub(prs=[make_pr(TARGET, author='alice')])

        assert ReviewerAssigner(config, api_client=github.client).run() is None

        github.client.post_json.assert_not_called()
        github.client.search_issues.assert_not_called()
        assert 'No eligible reviewers found' in capsys.readouterr().out

    def test_recency_failure_counts_zero(self):
        config = make_config(['A', 'B'], weights=ScoringWeights(0, 0, 1))
        github = FakeGitHub(
            prs=[make_pr(TARGET, author='D')],
            recent={'A': requests.exceptions.ConnectionError("timeout"), 'B': 1}
        )

        assert ReviewerAssigner(config, api_client=github.client).run() == 'A'

    def test_calls_happen_in_order(self):
        """Test that author, workload, recency and assignment run strictly in sequence."""
        config = make_config(['A', 'B'])
        github = FakeGitHub(prs=[make_pr(TARGET, author='D'), make_pr(7, requested=['A'])])
        calls = Mock()
        calls.attach_mock(github.client.get_json, 'get_json')
        calls.attach_mock(github.client.get_paginated, 'get_paginated')
        calls.attach_mock(github.client.search_issues, 'search_issues')
        calls.attach_mock(github.client.post_json, 'post_json')

        ReviewerAssigner(config, api_client=github.client).run()

        names = [c[0] for c in calls.mock_calls]
        assert names == [
            'get_json',        # target PR author
            'get_paginated',   # open PRs
            'get_json', 'get_paginated',  # PR #42 details and reviews
            'get_json', 'get_paginated',  # PR #7 details and reviews
            'search_issues', 'search_issues',
            'post_json'
        ]

    def test_assignment_failure_propagates(self):
        config = make_config(['A'])
        github = FakeGitHub(
            prs=[make_pr(TARGET, author='D')],
            assign_error=requests.exceptions.HTTPError("403 Forbidden")
        )

        with pytest.raises(GitHubOperationError):
            ReviewerAssigner(config, api_client=github.client).run()

    def test_fatal_error_before_report(self, capsys):
        config = make_config(['A'])
        github = FakeGitHub(prs=[make_pr(TARGET, author='D')],
                            open_prs_error=requests.exceptions.HTTPError("500"))

        with pytest.raises(GitHubOperationError, match='Failed to fetch open PRs'):
            ReviewerAssigner(config, api_client=github.client).run()

        assert 'FINAL RANKINGS' not in capsys.readouterr().out
        github.client.post_json.assert_not_called()


if __name__ == '__main__':
    pytest.main([__file__, '-v'])

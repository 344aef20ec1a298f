"""Main reviewer assigner."""

import logging
from typing import List, Optional

import requests

from ..api_client import GitHubAPIClient
from ..config import Config
from ..exceptions import GitHubOperationError
from ..models import ReviewerScore
from ..output import ReportFormatter


class ReviewerAssigner:
    """Picks the least busy team member and requests their review on a PR."""

    def __init__(
        self,
        config: Config,
        api_client: GitHubAPIClient = None,
        formatter: ReportFormatter = None
    ):
        """Initialize the assigner.

        Args:
            config: Validated run configuration
            api_client: Client to use, built from the config when omitted
            formatter: Report printer, a plain ReportFormatter when omitted
        """
        self.config = config
        self.api_client = api_client or GitHubAPIClient(config.github_token, config.api_url)
        self.formatter = formatter or ReportFormatter()

        logging.info(f"Initialized assigner for {config.repository} PR #{config.pr_number}")

    def fetch_pr_author(self) -> str:
        """Fetch the target PR and return its author's login.

        Raises:
            GitHubOperationError: If the PR cannot be fetched or has no author
        """
        pr_number = self.config.pr_number
        print(f"Fetching PR #{pr_number}...")

        pr = self.fetch_pr_snapshot(pr_number)
        if not pr.author:
            raise GitHubOperationError(f"PR #{pr_number} has no author", pr_number=pr_number)

        self.formatter.print_pr_details(pr)
        return pr.author

    def assign_reviewer(self, username: str):
        """Request a review from ``username`` on the target PR.

        Raises:
            GitHubOperationError: If GitHub rejects the request
        """
        pr_number = self.config.pr_number
        print(f"Assigning @{username} to PR #{pr_number}...")

        url = f"repos/{self.config.repository}/pulls/{pr_number}/requested_reviewers"
        try:
            self.api_client.post_json(url, {'reviewers': [username]})
        except (requests.RequestException, ValueError) as e:
            raise GitHubOperationError(f"Failed to assign @{username} as reviewer to PR #{pr_number}",
                                       pr_number=pr_number, username=username) from e

        print(f"Successfully assigned @{username} as reviewer!")
        logging.info(f"Requested review from {username} on PR #{pr_number}")

    def run(self) -> Optional[str]:
        """Run the whole assignment.

        Returns:
            Login of the assigned reviewer, or None if nobody was eligible
        """
        self.formatter.print_config(self.config)

        self.formatter.print_section("PULL REQUEST")
        pr_author = self.fetch_pr_author()

        self.formatter.print_section("WORKLOAD")
        workloads = self.aggregate_workload(self.config.team_members)

        self.formatter.print_section("SCORES")
        ranked: List[ReviewerScore] = self.calculate_scores(workloads, pr_author)

        self.formatter.print_rankings(ranked)

        if not ranked:
            self.formatter.print_no_eligible_reviewers()
            logging.warning(f"No eligible reviewer for PR #{self.config.pr_number}")
            return None

        winner = ranked[0].username
        self.formatter.print_best_choice(winner)
        self.assign_reviewer(winner)
        self.formatter.print_assignment_done(winner, self.config.pr_number)

        return winner


# Import and attach methods from submodules
from .workload import aggregate_workload, fetch_open_pr_numbers, fetch_pr_snapshot, fetch_review_logins
from .recency import recent_review_count
from .scoring import calculate_scores

# Attach methods to class
ReviewerAssigner.aggregate_workload = aggregate_workload
ReviewerAssigner.fetch_open_pr_numbers = fetch_open_pr_numbers
ReviewerAssigner.fetch_pr_snapshot = fetch_pr_snapshot
ReviewerAssigner.fetch_review_logins = fetch_review_logins
ReviewerAssigner.recent_review_count = recent_review_count
ReviewerAssigner.calculate_scores = calculate_scores

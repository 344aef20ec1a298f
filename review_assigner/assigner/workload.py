"""Open PR workload methods for ReviewerAssigner."""

import logging
from typing import Dict, List, Sequence, Set

import requests

from ..exceptions import GitHubOperationError
from ..models import PullRequestSnapshot, ReviewerWorkload


def fetch_open_pr_numbers(self) -> List[int]:
    """List the numbers of every open PR in the repository.

    All pages are fetched before any PR is inspected, so a pagination
    failure surfaces before per-PR work starts.

    Returns:
        PR numbers in the order GitHub returned them

    Raises:
        GitHubOperationError: If any page cannot be fetched
    """
    url = f"repos/{self.config.repository}/pulls"

    try:
        open_prs = self.api_client.get_paginated(url, {'state': 'open'})
    except (requests.RequestException, ValueError) as e:
        raise GitHubOperationError("Failed to fetch open PRs") from e

    return [pr['number'] for pr in open_prs]


def fetch_pr_snapshot(self, pr_number: int) -> PullRequestSnapshot:
    """Fetch full details of a single PR.

    Raises:
        GitHubOperationError: If the PR cannot be fetched
    """
    url = f"repos/{self.config.repository}/pulls/{pr_number}"

    try:
        pr_details = self.api_client.get_json(url)
    except (requests.RequestException, ValueError) as e:
        raise GitHubOperationError(f"Failed to fetch details for PR #{pr_number}",
                                   pr_number=pr_number) from e

    return PullRequestSnapshot.from_api(pr_details)


def fetch_review_logins(self, pr_number: int) -> Set[str]:
    """Logins of everyone who submitted a review on a PR.

    Returns:
        Set of reviewer logins, empty if the reviews could not be fetched
    """
    url = f"repos/{self.config.repository}/pulls/{pr_number}/reviews"

    try:
        reviews = self.api_client.get_paginated(url)
        # Reviews from deleted accounts come back with a null user
        return {review['user']['login'] for review in reviews if review.get('user')}
    except Exception as e:
        logging.warning(f"Could not fetch reviews for PR #{pr_number}, assuming none: {e}")
        return set()


def aggregate_workload(self, team_members: Sequence[str]) -> Dict[str, ReviewerWorkload]:
    """Count in-flight reviews and lines under review per team member.

    A member is engaged on a PR when they are a requested reviewer or have
    already submitted a review; being both still counts once.

    Args:
        team_members: Roster logins; duplicates share one entry

    Returns:
        Workload per roster login, in roster order

    Raises:
        GitHubOperationError: If open PRs or a PR's details cannot be fetched
    """
    workloads: Dict[str, ReviewerWorkload] = {}
    for member in team_members:
        workloads[member] = ReviewerWorkload()

    print(f"Fetching open PRs from {self.config.repository}...")
    pr_numbers = self.fetch_open_pr_numbers()
    print(f"  Found {len(pr_numbers)} open PRs, fetching details...")

    for pr_number in pr_numbers:
        pr = self.fetch_pr_snapshot(pr_number)

        engaged = {login for login in pr.requested_reviewers if login in workloads}
        engaged |= {login for login in self.fetch_review_logins(pr_number) if login in workloads}

        for member, workload in workloads.items():
            if member not in engaged:
                continue
            workload.add_pr(pr.changed_lines)
            print(f"  PR #{pr_number}: @{member} reviewing ({pr.additions} additions, {pr.deletions} deletions)")

        logging.debug(f"PR #{pr_number}: {len(engaged)} engaged team member(s), {pr.changed_lines} lines")

    print(f"Analyzed {len(pr_numbers)} open PRs")
    return workloads

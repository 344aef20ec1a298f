"""Recent review velocity methods for ReviewerAssigner."""

import logging
from datetime import datetime, timedelta, timezone


RECENT_WINDOW_DAYS = 7


def build_recent_reviews_query(repository: str, username: str, since: datetime) -> str:
    """Search query for PRs ``username`` reviewed that closed after ``since``."""
    return f"repo:{repository} is:pr reviewed-by:{username} closed:>{since.strftime('%Y-%m-%d')}"


def recent_review_count(self, username: str, now: datetime = None) -> int:
    """Count PRs the user reviewed that were closed in the last week.

    Args:
        username: GitHub login
        now: End of the window, defaults to the current UTC time

    Returns:
        Number of matching PRs, or 0 if the search fails
    """
    now = now or datetime.now(timezone.utc)
    since = now - timedelta(days=RECENT_WINDOW_DAYS)
    query = build_recent_reviews_query(self.config.repository, username, since)

    try:
        result = self.api_client.search_issues(query)
        return result.get('total_count') or 0
    except Exception as e:
        logging.warning(f"Failed to search recent reviews for @{username}, counting 0: {e}")
        return 0

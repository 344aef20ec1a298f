"""GitHub API client for making requests and handling pagination."""

import logging
from typing import Dict, List
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import DEFAULT_API_URL

PER_PAGE = 100


class GitHubAPIClient:
    """Handles GitHub REST API requests with transport retries and pagination."""

    def __init__(self, token: str, api_url: str = DEFAULT_API_URL):
        """Initialize the GitHub API client.

        Args:
            token: GitHub token for authentication
            api_url: Base URL of the REST API (differs on GitHub Enterprise)
        """
        self.token = token
        self.api_url = api_url.rstrip('/')
        self.session = requests.Session()

        # urllib3 only retries idempotent methods by default, POSTs go out once
        adapter = HTTPAdapter(
            max_retries=Retry(
                total=3,
                backoff_factor=0.3,
                status_forcelist=[500, 502, 503, 504]
            )
        )
        self.session.mount('https://', adapter)
        self.session.mount('http://', adapter)

        self.session.headers.update({
            'Authorization': f'token {self.token}',
            'Accept': 'application/vnd.github.v3+json'
        })
        logging.debug(f"Initialized GitHub API client for {self.api_url}")

    def url(self, path: str) -> str:
        """Resolve an API path against the base URL."""
        if path.startswith(('http://', 'https://')):
            return path
        return f"{self.api_url}/{path.lstrip('/')}"

    def _check(self, response: requests.Response):
        if response.status_code == 403:
            logging.error(f"GitHub refused the request (rate limit or missing permission): {response.text}")
        response.raise_for_status()

    def get_paginated(self, path: str, params: Dict = None) -> List[Dict]:
        """Fetch all pages of a paginated GitHub API endpoint.

        Args:
            path: API path or absolute URL
            params: Query parameters

        Returns:
            List of all items from all pages

        Raises:
            requests.HTTPError: If any page request fails
        """
        url = self.url(path)
        results = []
        page = 1

        params = dict(params or {})
        params['per_page'] = PER_PAGE

        while True:
            params['page'] = page
            logging.debug(f"Fetching page {page} from {url}")
            response = self.session.get(url, params=params)
            self._check(response)
            data = response.json()

            if not data:
                break

            results.extend(data)

            # GitHub announces further pages through the Link header
            if 'next' not in response.links:
                break

            page += 1

        logging.debug(f"Fetched {len(results)} total items from {url}")
        return results

    def get_json(self, path: str) -> Dict:
        """Make a single GET request and return the decoded body.

        Raises:
            requests.HTTPError: On a non-2xx response
        """
        response = self.session.get(self.url(path))
        self._check(response)
        return response.json()

    def search_issues(self, query: str) -> Dict:
        """Run an issue/pull request search.

        Args:
            query: GitHub search syntax, e.g. ``repo:o/r is:pr reviewed-by:alice``

        Returns:
            Search response, including ``total_count``
        """
        response = self.session.get(self.url('search/issues'), params={'q': query})
        self._check(response)
        return response.json()

    def post_json(self, path: str, payload: Dict) -> Dict:
        """Make a POST request with a JSON body.

        Raises:
            requests.HTTPError: On a non-2xx response
        """
        response = self.session.post(self.url(path), json=payload)
        self._check(response)
        return response.json() if response.content else {}

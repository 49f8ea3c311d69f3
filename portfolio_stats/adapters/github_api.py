# portfolio_stats/adapters/github_api.py
"""
Anti-corruption layer for GitHub's REST API.

This adapter:
1. Issues the two reads the portfolio needs (user profile, repository list)
2. Translates GitHub API responses to our domain models
3. Surfaces non-success responses as RemoteAPIError

No retry or rate-limit handling: a failed call raises immediately.
"""

import logging
from typing import List, Optional

import requests

from portfolio_stats.config.settings import GitHubConfig, VALID_REPO_SORTS
from portfolio_stats.models.github import Repository, UserProfile
from portfolio_stats.services.ranking import rank_repositories

logger = logging.getLogger(__name__)

GITHUB_ACCEPT_HEADER = 'application/vnd.github.v3+json'
MAX_PER_PAGE = 100


class RemoteAPIError(Exception):
    """Raised when GitHub answers with a non-success status."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"GitHub API error: {status_code} {reason}")


class GitHubRESTAdapter:
    """
    Read-only client for the GitHub REST endpoints behind the portfolio.

    One requests.Session is shared by all calls; it is safe to issue the
    user and repository reads from two threads at once.
    """

    def __init__(
        self,
        config: Optional[GitHubConfig] = None,
        session: Optional[requests.Session] = None
    ):
        self._config = config or GitHubConfig()
        self._base = self._config.api_base.rstrip('/')
        self._session = session or requests.Session()
        self._session.headers.update({
            'Accept': GITHUB_ACCEPT_HEADER,
            'User-Agent': 'Portfolio-Stats/1.0'
        })
        if self._config.token:
            self._session.headers.update({'Authorization': f'Bearer {self._config.token}'})

    def _get(self, path: str, params: Optional[dict] = None) -> requests.Response:
        """GET a path under the API base, raising on any non-2xx status."""
        url = f"{self._base}{path}"
        logger.debug(f"GET {url} params={params}")

        response = self._session.get(
            url,
            params=params,
            headers={'Accept': GITHUB_ACCEPT_HEADER},
            timeout=self._config.timeout
        )

        if not 200 <= response.status_code < 300:
            logger.error(f"GitHub API error on {path}: {response.status_code} {response.reason}")
            raise RemoteAPIError(response.status_code, response.reason or '')

        return response

    def fetch_user(self, username: str) -> UserProfile:
        """Fetch the public profile for a GitHub handle."""
        data = self._get(f"/users/{username}").json()
        user = UserProfile.from_api_response(data)
        logger.info(f"Fetched profile for {user.login}")
        return user

    def fetch_repos(
        self,
        username: str,
        sort: Optional[str] = None,
        per_page: Optional[int] = None
    ) -> List[Repository]:
        """
        Fetch one page of a user's repositories, forks removed.

        Args:
            username: GitHub handle
            sort: 'updated', 'pushed' or 'created' (config default: 'pushed')
            per_page: Page size 1..100 (config default: 100). Repositories
                beyond the first page are not fetched.

        Returns:
            Non-fork repositories, stargazer count descending

        Raises:
            ValueError: If sort or per_page is out of range
            RemoteAPIError: If GitHub answers with a non-success status
        """
        sort = sort or self._config.repo_sort
        per_page = self._config.per_page if per_page is None else per_page

        if sort not in VALID_REPO_SORTS:
            raise ValueError(f"sort must be one of {', '.join(VALID_REPO_SORTS)}, got {sort!r}")
        if not 1 <= per_page <= MAX_PER_PAGE:
            raise ValueError(f"per_page must be between 1 and {MAX_PER_PAGE}, got {per_page}")

        path = f"/users/{username}/repos"
        response = self._get(path, params={'sort': sort, 'per_page': per_page})
        data = response.json()

        if not isinstance(data, list):
            logger.error(f"Expected a repository list from {path}, got {type(data).__name__}")
            raise RemoteAPIError(response.status_code, 'unexpected payload')

        repos = [Repository.from_api_response(item) for item in data]
        ranked = rank_repositories(repos)
        logger.info(
            f"Fetched {len(repos)} repositories for {username} "
            f"({len(repos) - len(ranked)} forks skipped)"
        )
        return ranked

    def close(self):
        """Clean up resources."""
        self._session.close()
        logger.debug("GitHub API adapter closed")

    def __enter__(self) -> 'GitHubRESTAdapter':
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

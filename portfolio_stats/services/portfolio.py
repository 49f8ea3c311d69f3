# portfolio_stats/services/portfolio.py
"""
Portfolio service orchestrating the two GitHub reads.

Coordinates the API adapter and the pure ranking functions without
containing logic specific to either.
"""

import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Optional

from portfolio_stats.adapters.github_api import GitHubRESTAdapter
from portfolio_stats.config.settings import GitHubConfig
from portfolio_stats.models.github import PortfolioSnapshot
from portfolio_stats.services.ranking import top_languages, total_stars

logger = logging.getLogger(__name__)


class PortfolioAggregator:
    """
    Turns a GitHub username into a PortfolioSnapshot.

    The profile and repository reads are independent, so they run on
    two worker threads and are joined before the statistics are derived.
    """

    def __init__(self, adapter: GitHubRESTAdapter):
        self._adapter = adapter

    def fetch_portfolio(self, username: str) -> PortfolioSnapshot:
        """
        Fetch profile and repositories concurrently and aggregate them.

        Args:
            username: GitHub handle

        Returns:
            PortfolioSnapshot with fork-free, star-ranked repositories

        Raises:
            RemoteAPIError: If either read gets a non-success status. The
                first failure is re-raised as-is; the other read's
                outcome is discarded.
        """
        logger.info(f"Aggregating GitHub portfolio for {username}")

        executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix='github')
        try:
            user_future = executor.submit(self._adapter.fetch_user, username)
            repos_future = executor.submit(self._adapter.fetch_repos, username)

            done, _ = wait([user_future, repos_future], return_when=FIRST_EXCEPTION)
            for future in (user_future, repos_future):
                if future in done and future.exception() is not None:
                    raise future.exception()

            user = user_future.result()
            repos = repos_future.result()
        finally:
            # An in-flight sibling request is not aborted, only abandoned
            executor.shutdown(wait=False)

        snapshot = PortfolioSnapshot(
            user=user,
            repos=tuple(repos),
            top_languages=tuple(top_languages(repos)),
            total_stars=total_stars(repos)
        )

        logger.info(
            f"Portfolio for {user.login}: {len(snapshot.repos)} repositories, "
            f"{snapshot.total_stars} stars, {len(snapshot.top_languages)} languages"
        )
        return snapshot


def fetch_portfolio(
    username: Optional[str] = None,
    config: Optional[GitHubConfig] = None
) -> PortfolioSnapshot:
    """
    One-shot helper: build an adapter, aggregate, and clean up.

    Falls back to the environment for configuration and to the
    configured username when none is given.
    """
    config = config or GitHubConfig.from_env()
    with GitHubRESTAdapter(config) as adapter:
        return PortfolioAggregator(adapter).fetch_portfolio(username or config.username)

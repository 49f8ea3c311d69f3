# portfolio_stats/main.py
"""
Entry point for the GitHub portfolio aggregator.

This script runs one aggregation:
1. Load configuration from environment
2. Fetch profile and repositories
3. Log a summary
4. Export the snapshot as JSON for the site build
"""

import json
import os
import sys
import logging

from portfolio_stats.adapters.github_api import GitHubRESTAdapter, RemoteAPIError
from portfolio_stats.config.settings import GitHubConfig
from portfolio_stats.services.portfolio import PortfolioAggregator

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    # stdout is reserved for the JSON export
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


def main() -> int:
    """
    Main entry point for the aggregator.

    Returns:
        Exit code (0 for success, 1 for error, 130 if interrupted)
    """
    _configure_logging()
    logger.info("GitHub portfolio aggregator starting...")

    try:
        config = GitHubConfig.from_env()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    if not config.token:
        logger.warning("GITHUB_TOKEN not set. Using unauthenticated requests (limited rate).")

    logger.info(f"Configuration loaded:")
    logger.info(f"  - Username: {config.username}")
    logger.info(f"  - API base: {config.api_base}")
    logger.info(f"  - Repo sort: {config.repo_sort}, page size: {config.per_page}")

    try:
        with GitHubRESTAdapter(config) as adapter:
            snapshot = PortfolioAggregator(adapter).fetch_portfolio(config.username)

        languages = ', '.join(f"{lang.name} ({lang.count})" for lang in snapshot.top_languages)
        logger.info("=" * 60)
        logger.info("PORTFOLIO SUMMARY")
        logger.info("=" * 60)
        logger.info(f"User: {snapshot.user.login} ({snapshot.user.name or 'no display name'})")
        logger.info(f"Repositories: {len(snapshot.repos)}")
        logger.info(f"Total stars: {snapshot.total_stars:,}")
        logger.info(f"Top languages: {languages or 'none detected'}")
        logger.info("=" * 60)

        payload = json.dumps(snapshot.to_dict(), indent=2)
        output_path = os.getenv('OUTPUT_PATH', '')
        if output_path:
            with open(output_path, 'w', encoding='utf-8') as handle:
                handle.write(payload + '\n')
            logger.info(f"Snapshot exported to {output_path}")
        else:
            sys.stdout.write(payload + '\n')

        return 0

    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except RemoteAPIError as e:
        logger.error(f"Aggregation failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Aggregator interrupted by user")
        return 130
    except Exception as e:
        logger.exception(f"Aggregator failed with error: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())

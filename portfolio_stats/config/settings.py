# portfolio_stats/config/settings.py
import os
from dataclasses import dataclass
from typing import Optional

VALID_REPO_SORTS = ('updated', 'pushed', 'created')


@dataclass(frozen=True)  # Immutable configuration
class GitHubConfig:
    username: str = 'MiguelMatos98'
    api_base: str = 'https://api.github.com'
    token: str = ''
    repo_sort: str = 'pushed'
    per_page: int = 100  # Single page, max 100
    timeout: Optional[float] = None  # No deadline unless the caller sets one

    @classmethod
    def from_env(cls) -> 'GitHubConfig':
        timeout = os.getenv('GITHUB_TIMEOUT', '').strip()
        return cls(
            username=os.getenv('GITHUB_USERNAME', 'MiguelMatos98'),
            api_base=os.getenv('GITHUB_API_BASE', 'https://api.github.com').rstrip('/'),
            token=os.getenv('GITHUB_TOKEN', ''),
            repo_sort=os.getenv('GITHUB_REPO_SORT', 'pushed'),
            per_page=int(os.getenv('GITHUB_PER_PAGE', '100')),
            timeout=float(timeout) if timeout else None
        )

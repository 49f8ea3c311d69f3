# adapters package
from portfolio_stats.adapters.github_api import GitHubRESTAdapter, RemoteAPIError

__all__ = ['GitHubRESTAdapter', 'RemoteAPIError']

# services package
from portfolio_stats.services.ranking import rank_repositories, top_languages, total_stars

__all__ = ['rank_repositories', 'top_languages', 'total_stars']

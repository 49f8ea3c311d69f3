# models package
from portfolio_stats.models.github import (
    LanguageCount,
    PortfolioSnapshot,
    Repository,
    UserProfile,
)

__all__ = ['LanguageCount', 'PortfolioSnapshot', 'Repository', 'UserProfile']

# portfolio_stats/services/ranking.py
"""
Pure transformations over fetched repositories.

No I/O here: these functions take snapshots and return new sequences,
so they can be applied to any repository list regardless of source.
"""

from typing import Dict, Iterable, List

from portfolio_stats.models.github import LanguageCount, Repository


def rank_repositories(repos: Iterable[Repository]) -> List[Repository]:
    """
    Drop forks and order the rest by stargazer count, highest first.

    sorted() is stable, so repositories with equal stars keep the
    order the provider returned them in.
    """
    owned = [repo for repo in repos if not repo.fork]
    return sorted(owned, key=lambda repo: repo.stargazers_count, reverse=True)


def top_languages(repos: Iterable[Repository]) -> List[LanguageCount]:
    """
    Count repositories per primary language, most used first.

    Repositories without a detected language are skipped. Languages
    with equal counts stay in the order they were first seen.
    """
    counts: Dict[str, int] = {}
    for repo in repos:
        if repo.language:
            counts[repo.language] = counts.get(repo.language, 0) + 1

    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [LanguageCount(name=name, count=count) for name, count in ranked]


def total_stars(repos: Iterable[Repository]) -> int:
    """Sum stargazer counts; 0 for no repositories."""
    return sum(repo.stargazers_count for repo in repos)

# portfolio_stats/models/github.py
"""
Immutable data models for the portfolio aggregator.

Every object is a snapshot of one fetch: created fresh from the
GitHub REST payload and never mutated afterwards.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse GitHub's ISO 8601 timestamps ('2020-01-01T00:00:00Z')."""
    if not value:
        return None
    return datetime.fromisoformat(value.replace('Z', '+00:00'))


def _format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _optional_text(value) -> Optional[str]:
    # GitHub sends "" for cleared profile fields such as blog or homepage
    if value is None:
        return None
    value = str(value)
    return value if value.strip() else None


@dataclass(frozen=True)
class UserProfile:
    """Identity and public metadata of one GitHub account."""
    login: str                          # Handle, unique
    name: Optional[str]                 # Display name
    avatar_url: str
    html_url: str
    bio: Optional[str]
    public_repos: int
    followers: int
    following: int
    location: Optional[str]
    blog: Optional[str]
    twitter_username: Optional[str]
    company: Optional[str]
    created_at: Optional[datetime]      # Account creation time

    @classmethod
    def from_api_response(cls, data: dict) -> 'UserProfile':
        """
        Build a UserProfile from a GET /users/{username} payload.

        Raises:
            KeyError: If the login is missing
            TypeError: If the payload is not an object
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected user object, got {type(data).__name__}")

        login = data.get('login')
        if not login:
            raise KeyError("login is required")

        return cls(
            login=str(login),
            name=_optional_text(data.get('name')),
            avatar_url=str(data.get('avatar_url') or ''),
            html_url=str(data.get('html_url') or ''),
            bio=_optional_text(data.get('bio')),
            public_repos=int(data.get('public_repos') or 0),
            followers=int(data.get('followers') or 0),
            following=int(data.get('following') or 0),
            location=_optional_text(data.get('location')),
            blog=_optional_text(data.get('blog')),
            twitter_username=_optional_text(data.get('twitter_username')),
            company=_optional_text(data.get('company')),
            created_at=_parse_timestamp(data.get('created_at'))
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'login': self.login,
            'name': self.name,
            'avatar_url': self.avatar_url,
            'html_url': self.html_url,
            'bio': self.bio,
            'public_repos': self.public_repos,
            'followers': self.followers,
            'following': self.following,
            'location': self.location,
            'blog': self.blog,
            'twitter_username': self.twitter_username,
            'company': self.company,
            'created_at': _format_timestamp(self.created_at)
        }


@dataclass(frozen=True)
class Repository:
    """One repository owned by a user, as listed by the REST API."""
    id: int                             # GitHub's database ID (stable identifier)
    name: str                           # e.g., "vscode"
    full_name: str                      # e.g., "microsoft/vscode"
    html_url: str
    description: Optional[str]
    fork: bool
    stargazers_count: int
    watchers_count: int
    forks_count: int
    language: Optional[str]             # Primary language, may be undetected
    topics: Tuple[str, ...]
    homepage: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    pushed_at: Optional[datetime]       # None for a repository never pushed to

    @classmethod
    def from_api_response(cls, data: dict) -> 'Repository':
        """
        Build a Repository from one item of GET /users/{username}/repos.

        Raises:
            KeyError: If id or name is missing
            TypeError: If the item is not an object
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected repository object, got {type(data).__name__}")

        repo_id = data.get('id')
        if repo_id is None:
            raise KeyError("id is required")

        name = data.get('name')
        if not name:
            raise KeyError("name is required")

        topics = []
        for topic in data.get('topics') or []:
            if topic not in topics:
                topics.append(str(topic))

        return cls(
            id=int(repo_id),
            name=str(name),
            full_name=str(data.get('full_name') or name),
            html_url=str(data.get('html_url') or ''),
            description=_optional_text(data.get('description')),
            fork=bool(data.get('fork', False)),
            stargazers_count=int(data.get('stargazers_count') or 0),
            watchers_count=int(data.get('watchers_count') or 0),
            forks_count=int(data.get('forks_count') or 0),
            language=_optional_text(data.get('language')),
            topics=tuple(topics),
            homepage=_optional_text(data.get('homepage')),
            created_at=_parse_timestamp(data.get('created_at')),
            updated_at=_parse_timestamp(data.get('updated_at')),
            pushed_at=_parse_timestamp(data.get('pushed_at'))
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'id': self.id,
            'name': self.name,
            'full_name': self.full_name,
            'html_url': self.html_url,
            'description': self.description,
            'fork': self.fork,
            'stargazers_count': self.stargazers_count,
            'watchers_count': self.watchers_count,
            'forks_count': self.forks_count,
            'language': self.language,
            'topics': list(self.topics),
            'homepage': self.homepage,
            'created_at': _format_timestamp(self.created_at),
            'updated_at': _format_timestamp(self.updated_at),
            'pushed_at': _format_timestamp(self.pushed_at)
        }


@dataclass(frozen=True)
class LanguageCount:
    """Number of repositories using a language as their primary one."""
    name: str
    count: int

    def to_dict(self) -> dict:
        return {'name': self.name, 'count': self.count}


@dataclass(frozen=True)
class PortfolioSnapshot:
    """
    Aggregate result for one username.

    repos holds no forks and is ordered by stars descending;
    top_languages is ordered by count descending.
    """
    user: UserProfile
    repos: Tuple[Repository, ...]
    top_languages: Tuple[LanguageCount, ...]
    total_stars: int

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'user': self.user.to_dict(),
            'repos': [repo.to_dict() for repo in self.repos],
            'topLanguages': [language.to_dict() for language in self.top_languages],
            'totalStars': self.total_stars
        }

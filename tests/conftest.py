"""Shared fixtures: an in-memory stand-in for requests.Session."""

import threading
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlparse

import pytest

from portfolio_stats.config.settings import GitHubConfig

API_BASE = 'https://api.example.test'


class FakeResponse:
    def __init__(self, status_code: int, payload: Any = None, reason: str = 'OK'):
        self.status_code = status_code
        self.reason = reason
        self._payload = payload

    def json(self):
        return self._payload


class FakeSession:
    """Answers GETs from a path -> FakeResponse table and records every call."""

    def __init__(self, routes: Optional[Dict[str, FakeResponse]] = None):
        self.routes = dict(routes or {})
        self.headers: Dict[str, str] = {}
        self.calls: List[Tuple[str, dict]] = []
        self.closed = False
        self._lock = threading.Lock()

    def get(self, url, params=None, headers=None, timeout=None):
        with self._lock:
            self.calls.append((url, {'params': params, 'headers': headers, 'timeout': timeout}))
        path = urlparse(url).path
        if path not in self.routes:
            return FakeResponse(404, {'message': 'Not Found'}, reason='Not Found')
        return self.routes[path]

    def close(self):
        self.closed = True


def make_user(login: str = 'octocat', **overrides) -> dict:
    data = {
        'login': login,
        'name': 'The Octocat',
        'avatar_url': f'https://avatars.example.test/{login}',
        'html_url': f'https://github.com/{login}',
        'bio': None,
        'public_repos': 3,
        'followers': 10,
        'following': 2,
        'location': 'San Francisco',
        'blog': '',
        'twitter_username': None,
        'company': '@github',
        'created_at': '2011-01-25T18:44:36Z',
    }
    data.update(overrides)
    return data


def make_repo(repo_id: int, stars: int = 0, fork: bool = False, language: Optional[str] = None, **overrides) -> dict:
    name = overrides.pop('name', f'repo-{repo_id}')
    data = {
        'id': repo_id,
        'name': name,
        'full_name': f'octocat/{name}',
        'html_url': f'https://github.com/octocat/{name}',
        'description': None,
        'fork': fork,
        'stargazers_count': stars,
        'watchers_count': stars,
        'forks_count': 0,
        'language': language,
        'topics': [],
        'homepage': None,
        'created_at': '2020-01-01T00:00:00Z',
        'updated_at': '2021-01-01T00:00:00Z',
        'pushed_at': '2021-06-01T12:30:00Z',
    }
    data.update(overrides)
    return data


@pytest.fixture
def config() -> GitHubConfig:
    return GitHubConfig(username='octocat', api_base=API_BASE)


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()

"""Tests for translating GitHub REST payloads into domain models."""

from datetime import datetime, timezone

import pytest

from portfolio_stats.models.github import LanguageCount, PortfolioSnapshot, Repository, UserProfile
from conftest import make_repo, make_user


def test_user_profile_from_api_response():
    user = UserProfile.from_api_response(make_user('octocat', twitter_username='octo'))

    assert user.login == 'octocat'
    assert user.name == 'The Octocat'
    assert user.public_repos == 3
    assert user.followers == 10
    assert user.following == 2
    assert user.twitter_username == 'octo'
    assert user.created_at == datetime(2011, 1, 25, 18, 44, 36, tzinfo=timezone.utc)


def test_user_profile_empty_strings_become_none():
    user = UserProfile.from_api_response(make_user(blog='', location='  ', name=None))

    assert user.blog is None
    assert user.location is None
    assert user.name is None


def test_user_profile_requires_login():
    with pytest.raises(KeyError):
        UserProfile.from_api_response(make_user(login=''))


def test_user_profile_rejects_non_object():
    with pytest.raises(TypeError):
        UserProfile.from_api_response(['not', 'a', 'user'])


def test_repository_from_api_response():
    repo = Repository.from_api_response(
        make_repo(42, stars=7, language='Go', topics=['cli', 'go', 'cli'], homepage='')
    )

    assert repo.id == 42
    assert repo.full_name == 'octocat/repo-42'
    assert repo.stargazers_count == 7
    assert repo.language == 'Go'
    assert repo.topics == ('cli', 'go')
    assert repo.homepage is None
    assert repo.fork is False
    assert repo.pushed_at == datetime(2021, 6, 1, 12, 30, tzinfo=timezone.utc)


def test_repository_without_pushes_has_no_pushed_at():
    repo = Repository.from_api_response(make_repo(1, pushed_at=None))

    assert repo.pushed_at is None


@pytest.mark.parametrize('missing', ['id', 'name'])
def test_repository_requires_identity(missing):
    data = make_repo(1)
    del data[missing]

    with pytest.raises(KeyError):
        Repository.from_api_response(data)


def test_models_are_immutable():
    repo = Repository.from_api_response(make_repo(1, stars=3))

    with pytest.raises(AttributeError):
        repo.stargazers_count = 100


def test_snapshot_to_dict_uses_site_field_names():
    user = UserProfile.from_api_response(make_user())
    repo = Repository.from_api_response(make_repo(1, stars=3, language='Rust'))
    snapshot = PortfolioSnapshot(
        user=user,
        repos=(repo,),
        top_languages=(LanguageCount('Rust', 1),),
        total_stars=3
    )

    data = snapshot.to_dict()

    assert data['user']['login'] == 'octocat'
    assert data['user']['created_at'] == '2011-01-25T18:44:36+00:00'
    assert data['repos'][0]['stargazers_count'] == 3
    assert data['repos'][0]['topics'] == []
    assert data['topLanguages'] == [{'name': 'Rust', 'count': 1}]
    assert data['totalStars'] == 3

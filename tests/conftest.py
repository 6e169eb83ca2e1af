from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Callable, Sequence

import pytest


def make_repo(
    name: str,
    *,
    stars: int = 0,
    forks: int = 0,
    languages: Sequence[tuple[str, str | None, int]] = (),
    primary: tuple[str, str | None] | None = None,
) -> dict[str, Any]:
    return {
        "name": name,
        "stargazerCount": stars,
        "forkCount": forks,
        "primaryLanguage": {"name": primary[0], "color": primary[1]} if primary else None,
        "languages": {
            "edges": [
                {"size": size, "node": {"name": language, "color": color}}
                for language, color, size in languages
            ]
        },
    }


def make_weeks(counts: Sequence[int], *, start: date = date(2025, 1, 1)) -> list[dict[str, Any]]:
    """Chronological daily counts chunked into 7-day weeks."""
    days = [
        {"contributionCount": count, "date": (start + timedelta(days=offset)).isoformat()}
        for offset, count in enumerate(counts)
    ]
    return [{"contributionDays": days[index : index + 7]} for index in range(0, len(days), 7)]


def make_user_payload(
    *,
    counts: Sequence[int] = (),
    start: date = date(2025, 1, 1),
    repos: Sequence[dict[str, Any]] = (),
    total_repos: int | None = None,
    followers: int = 0,
    login: str = "octocat",
    name: str | None = "The Octocat",
) -> dict[str, Any]:
    return {
        "name": name,
        "login": login,
        "avatarUrl": f"https://avatars.githubusercontent.com/{login}",
        "contributionsCollection": {
            "contributionCalendar": {
                "totalContributions": sum(counts),
                "weeks": make_weeks(counts, start=start),
            },
            "totalCommitContributions": 120,
            "totalIssueContributions": 7,
            "totalPullRequestContributions": 15,
            "totalPullRequestReviewContributions": 9,
            "totalRepositoryContributions": 3,
        },
        "repositories": {
            "totalCount": len(repos) if total_repos is None else total_repos,
            "nodes": list(repos),
        },
        "followers": {"totalCount": followers},
    }


@pytest.fixture
def user_payload() -> Callable[..., dict[str, Any]]:
    return make_user_payload


@pytest.fixture
def repo() -> Callable[..., dict[str, Any]]:
    return make_repo

"""Derived, presentation-ready statistics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from github_wrapped.errors import DegenerateAggregation


@dataclass(frozen=True, slots=True)
class LanguageShare:
    """Aggregated language size with its one-decimal percentage string."""

    name: str
    color: str | None
    size: int
    percentage: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "color": self.color, "size": self.size, "percentage": self.percentage}


@dataclass(frozen=True, slots=True)
class RankedPeriod:
    """Weekday or month name paired with its summed contribution count."""

    name: str
    total: int

    def to_list(self) -> list[Any]:
        return [self.name, self.total]


@dataclass(frozen=True, slots=True)
class RepoHighlight:
    name: str
    stargazer_count: int
    fork_count: int
    primary_language: str | None
    primary_language_color: str | None

    def to_dict(self) -> dict[str, Any]:
        primary = None
        if self.primary_language is not None:
            primary = {"name": self.primary_language, "color": self.primary_language_color}
        return {
            "name": self.name,
            "stargazerCount": self.stargazer_count,
            "forkCount": self.fork_count,
            "primaryLanguage": primary,
        }


@dataclass(frozen=True, slots=True)
class DerivedStats:
    """Derived-metrics record consumed read-only by the presentation layer."""

    total_contributions: int
    total_commits: int
    total_prs: int
    total_issues: int
    total_reviews: int
    total_repos: int
    total_repository_contributions: int
    followers: int
    top_languages: tuple[LanguageShare, ...]
    most_productive_day: RankedPeriod | None
    most_productive_month: RankedPeriod | None
    current_streak: int
    max_streak: int
    top_repos: tuple[RepoHighlight, ...]
    degenerate: tuple[DegenerateAggregation, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Render with the camelCase keys the slide renderer expects."""
        return {
            "totalContributions": self.total_contributions,
            "totalCommits": self.total_commits,
            "totalPRs": self.total_prs,
            "totalIssues": self.total_issues,
            "totalReviews": self.total_reviews,
            "totalRepos": self.total_repos,
            "totalRepositoryContributions": self.total_repository_contributions,
            "followers": self.followers,
            "topLanguages": [language.to_dict() for language in self.top_languages],
            "mostProductiveDay": self.most_productive_day.to_list() if self.most_productive_day else None,
            "mostProductiveMonth": self.most_productive_month.to_list() if self.most_productive_month else None,
            "currentStreak": self.current_streak,
            "maxStreak": self.max_streak,
            "topRepos": [repo.to_dict() for repo in self.top_repos],
            "degenerate": [marker.value for marker in self.degenerate],
        }

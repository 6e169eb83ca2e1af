"""Snapshot and derived-stats models"""

from github_wrapped.models.snapshot import (
    ContributionCalendar,
    ContributionCounts,
    ContributionDay,
    Language,
    LanguageSize,
    Repository,
    Snapshot,
    parse_snapshot,
)
from github_wrapped.models.stats import DerivedStats, LanguageShare, RankedPeriod, RepoHighlight

__all__ = [
    "ContributionCalendar",
    "ContributionCounts",
    "ContributionDay",
    "Language",
    "LanguageSize",
    "Repository",
    "Snapshot",
    "parse_snapshot",
    "DerivedStats",
    "LanguageShare",
    "RankedPeriod",
    "RepoHighlight",
]

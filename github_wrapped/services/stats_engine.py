"""Pure derivation of wrapped statistics from one activity snapshot."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Mapping, Sequence

from github_wrapped.errors import DegenerateAggregation
from github_wrapped.models.snapshot import ContributionDay, Repository, Snapshot, parse_snapshot
from github_wrapped.models.stats import DerivedStats, LanguageShare, RankedPeriod, RepoHighlight

logger = logging.getLogger(__name__)

TOP_LANGUAGE_LIMIT = 5
TOP_REPO_LIMIT = 5

# Fixed English names keep results independent of the runtime locale.
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_ONE_DECIMAL = Decimal("0.1")


def derive_stats(snapshot: Snapshot | Mapping[str, Any]) -> DerivedStats:
    """Map one snapshot to a freshly built `DerivedStats`.

    A raw GraphQL `user` mapping is validated with `parse_snapshot` first and
    raises `MalformedSnapshot` on bad shape. Empty language or calendar data is
    recorded in `DerivedStats.degenerate` instead of failing.
    """

    if not isinstance(snapshot, Snapshot):
        snapshot = parse_snapshot(snapshot)

    degenerate: list[DegenerateAggregation] = []

    top_languages = aggregate_languages(snapshot.repositories)
    if not top_languages:
        degenerate.append(DegenerateAggregation.NO_LANGUAGE_DATA)

    days = snapshot.calendar.days()
    if not days:
        degenerate.append(DegenerateAggregation.NO_CONTRIBUTION_DAYS)
    most_productive_day, most_productive_month = aggregate_by_period(days)
    max_streak, current_streak = compute_streaks(days)

    if degenerate:
        logger.info(
            "Derived stats with empty aggregations",
            extra={"login": snapshot.login, "degenerate": [marker.value for marker in degenerate]},
        )

    return DerivedStats(
        total_contributions=snapshot.calendar.total_contributions,
        total_commits=snapshot.counts.commits,
        total_prs=snapshot.counts.pull_requests,
        total_issues=snapshot.counts.issues,
        total_reviews=snapshot.counts.pull_request_reviews,
        total_repos=snapshot.repository_total_count,
        total_repository_contributions=snapshot.counts.repositories,
        followers=snapshot.follower_count,
        top_languages=tuple(top_languages),
        most_productive_day=most_productive_day,
        most_productive_month=most_productive_month,
        current_streak=current_streak,
        max_streak=max_streak,
        top_repos=tuple(select_top_repos(snapshot.repositories)),
        degenerate=tuple(degenerate),
    )


def aggregate_languages(
    repositories: Iterable[Repository],
    *,
    limit: int = TOP_LANGUAGE_LIMIT,
) -> list[LanguageShare]:
    """Merge language sizes by name across repositories and rank the top entries.

    The first color seen for a name wins. Ties in size keep first-seen order.
    A zero total size yields an empty list rather than non-finite percentages.
    """

    totals: dict[str, int] = {}
    colors: dict[str, str | None] = {}
    for repo in repositories:
        for language in repo.languages:
            if language.name not in totals:
                totals[language.name] = 0
                colors[language.name] = language.color
            totals[language.name] += language.size

    total_size = sum(totals.values())
    if total_size == 0:
        return []

    ranked = sorted(totals.items(), key=lambda item: -item[1])
    return [
        LanguageShare(
            name=name,
            color=colors[name],
            size=size,
            percentage=format_percentage(size, total_size),
        )
        for name, size in ranked[:limit]
    ]


def format_percentage(part: int, total: int) -> str:
    """`part / total * 100` as a fixed one-decimal string, rounding half up."""
    ratio = Decimal(part / total * 100)
    return str(ratio.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def aggregate_by_period(days: Sequence[ContributionDay]) -> tuple[RankedPeriod | None, RankedPeriod | None]:
    """Most productive weekday and month over `days`, or `None` when empty."""

    by_weekday: dict[str, int] = {}
    by_month: dict[str, int] = {}
    for day in days:
        weekday = WEEKDAY_NAMES[day.date.weekday()]
        month = MONTH_NAMES[day.date.month - 1]
        by_weekday[weekday] = by_weekday.get(weekday, 0) + day.contribution_count
        by_month[month] = by_month.get(month, 0) + day.contribution_count

    return _pick_max(by_weekday), _pick_max(by_month)


def _pick_max(totals: dict[str, int]) -> RankedPeriod | None:
    if not totals:
        return None
    # max() keeps the first key on ties, i.e. insertion order.
    name = max(totals, key=lambda key: totals[key])
    return RankedPeriod(name=name, total=totals[name])


def compute_streaks(days: Sequence[ContributionDay]) -> tuple[int, int]:
    """Return `(max_streak, current_streak)` from a newest-first scan.

    `current_streak` only takes the running count on an active day that is
    either the newest day or follows an active (chronologically later) day in
    the scan. A later, older run can therefore overwrite it, so it is not the
    same as the length of the trailing active run.
    """

    newest_first = list(reversed(days))
    current_streak = 0
    max_streak = 0
    temp_streak = 0

    for index, day in enumerate(newest_first):
        if day.contribution_count > 0:
            temp_streak += 1
            max_streak = max(max_streak, temp_streak)
            if index == 0 or newest_first[index - 1].contribution_count > 0:
                current_streak = temp_streak
        else:
            temp_streak = 0

    return max_streak, current_streak


def select_top_repos(repositories: Iterable[Repository], *, limit: int = TOP_REPO_LIMIT) -> list[RepoHighlight]:
    """First `limit` starred repositories, in the order the API returned them."""

    highlights: list[RepoHighlight] = []
    for repo in repositories:
        if repo.stargazer_count <= 0:
            continue
        highlights.append(
            RepoHighlight(
                name=repo.name,
                stargazer_count=repo.stargazer_count,
                fork_count=repo.fork_count,
                primary_language=repo.primary_language.name if repo.primary_language else None,
                primary_language_color=repo.primary_language.color if repo.primary_language else None,
            )
        )
        if len(highlights) >= limit:
            break
    return highlights

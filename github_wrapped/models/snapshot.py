"""Typed, read-only snapshot of one user's annual GitHub activity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping

from github_wrapped.errors import MalformedSnapshot


@dataclass(frozen=True, slots=True)
class ContributionDay:
    """Contribution count for one calendar day."""

    date: date
    contribution_count: int


@dataclass(frozen=True, slots=True)
class ContributionCalendar:
    total_contributions: int
    weeks: tuple[tuple[ContributionDay, ...], ...]

    def days(self) -> list[ContributionDay]:
        """Days flattened in delivery order (weeks, then days within a week)."""
        return [day for week in self.weeks for day in week]


@dataclass(frozen=True, slots=True)
class ContributionCounts:
    commits: int
    issues: int
    pull_requests: int
    pull_request_reviews: int
    repositories: int


@dataclass(frozen=True, slots=True)
class Language:
    name: str
    color: str | None


@dataclass(frozen=True, slots=True)
class LanguageSize:
    """Bytes of one language inside one repository."""

    name: str
    color: str | None
    size: int


@dataclass(frozen=True, slots=True)
class Repository:
    name: str
    stargazer_count: int
    fork_count: int
    primary_language: Language | None
    languages: tuple[LanguageSize, ...]


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Snapshot record as returned by the fetch collaborator."""

    login: str
    display_name: str | None
    avatar_url: str | None
    calendar: ContributionCalendar
    counts: ContributionCounts
    repositories: tuple[Repository, ...]
    repository_total_count: int
    follower_count: int


def parse_snapshot(payload: Mapping[str, Any]) -> Snapshot:
    """Validate a GraphQL `user` payload and build a `Snapshot`.

    Raises `MalformedSnapshot` naming the dotted path of the first field that
    is missing or has the wrong shape. The payload itself is only read.
    """

    user = _require_mapping(payload, "user")
    collection = _field_mapping(user, "contributionsCollection", "user")
    calendar_raw = _field_mapping(collection, "contributionCalendar", "user.contributionsCollection")
    repositories_raw = _field_mapping(user, "repositories", "user")
    followers_raw = _field_mapping(user, "followers", "user")

    return Snapshot(
        login=_field_text(user, "login", "user"),
        display_name=_optional_text(user, "name", "user"),
        avatar_url=_optional_text(user, "avatarUrl", "user"),
        calendar=_parse_calendar(calendar_raw, "user.contributionsCollection.contributionCalendar"),
        counts=ContributionCounts(
            commits=_field_count(collection, "totalCommitContributions", "user.contributionsCollection"),
            issues=_field_count(collection, "totalIssueContributions", "user.contributionsCollection"),
            pull_requests=_field_count(collection, "totalPullRequestContributions", "user.contributionsCollection"),
            pull_request_reviews=_field_count(
                collection, "totalPullRequestReviewContributions", "user.contributionsCollection"
            ),
            repositories=_field_count(collection, "totalRepositoryContributions", "user.contributionsCollection"),
        ),
        repositories=tuple(
            _parse_repository(node, f"user.repositories.nodes[{index}]")
            for index, node in enumerate(_field_list(repositories_raw, "nodes", "user.repositories"))
        ),
        repository_total_count=_field_count(repositories_raw, "totalCount", "user.repositories"),
        follower_count=_field_count(followers_raw, "totalCount", "user.followers"),
    )


def _parse_calendar(raw: Mapping[str, Any], path: str) -> ContributionCalendar:
    weeks: list[tuple[ContributionDay, ...]] = []
    for week_index, week in enumerate(_field_list(raw, "weeks", path)):
        week_path = f"{path}.weeks[{week_index}]"
        week_map = _require_mapping(week, week_path)
        days = [
            _parse_day(day, f"{week_path}.contributionDays[{day_index}]")
            for day_index, day in enumerate(_field_list(week_map, "contributionDays", week_path))
        ]
        weeks.append(tuple(days))

    return ContributionCalendar(
        total_contributions=_field_count(raw, "totalContributions", path),
        weeks=tuple(weeks),
    )


def _parse_day(raw: Any, path: str) -> ContributionDay:
    day = _require_mapping(raw, path)
    text = _field_text(day, "date", path)
    try:
        parsed = date.fromisoformat(text[:10])
    except ValueError as exc:
        raise MalformedSnapshot(f"{path}.date", f"invalid ISO date {text!r}") from exc
    return ContributionDay(date=parsed, contribution_count=_field_count(day, "contributionCount", path))


def _parse_repository(raw: Any, path: str) -> Repository:
    repo = _require_mapping(raw, path)

    primary = repo.get("primaryLanguage")
    primary_language = None
    if primary is not None:
        primary_map = _require_mapping(primary, f"{path}.primaryLanguage")
        primary_language = Language(
            name=_field_text(primary_map, "name", f"{path}.primaryLanguage"),
            color=_optional_text(primary_map, "color", f"{path}.primaryLanguage"),
        )

    languages_raw = _field_mapping(repo, "languages", path)
    languages: list[LanguageSize] = []
    for index, edge in enumerate(_field_list(languages_raw, "edges", f"{path}.languages")):
        edge_path = f"{path}.languages.edges[{index}]"
        edge_map = _require_mapping(edge, edge_path)
        node = _field_mapping(edge_map, "node", edge_path)
        languages.append(
            LanguageSize(
                name=_field_text(node, "name", f"{edge_path}.node"),
                color=_optional_text(node, "color", f"{edge_path}.node"),
                size=_field_count(edge_map, "size", edge_path),
            )
        )

    return Repository(
        name=_field_text(repo, "name", path),
        stargazer_count=_field_count(repo, "stargazerCount", path),
        fork_count=_field_count(repo, "forkCount", path),
        primary_language=primary_language,
        languages=tuple(languages),
    )


def _require_mapping(value: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise MalformedSnapshot(path, f"expected object, got {type(value).__name__}")
    return value


def _field(container: Mapping[str, Any], key: str, path: str) -> Any:
    if key not in container or container[key] is None:
        raise MalformedSnapshot(f"{path}.{key}", "required field is missing")
    return container[key]


def _field_mapping(container: Mapping[str, Any], key: str, path: str) -> Mapping[str, Any]:
    return _require_mapping(_field(container, key, path), f"{path}.{key}")


def _field_list(container: Mapping[str, Any], key: str, path: str) -> list[Any]:
    value = _field(container, key, path)
    if not isinstance(value, (list, tuple)):
        raise MalformedSnapshot(f"{path}.{key}", f"expected list, got {type(value).__name__}")
    return list(value)


def _field_text(container: Mapping[str, Any], key: str, path: str) -> str:
    value = _field(container, key, path)
    if not isinstance(value, str):
        raise MalformedSnapshot(f"{path}.{key}", f"expected string, got {type(value).__name__}")
    return value


def _optional_text(container: Mapping[str, Any], key: str, path: str) -> str | None:
    value = container.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedSnapshot(f"{path}.{key}", f"expected string, got {type(value).__name__}")
    return value


def _field_count(container: Mapping[str, Any], key: str, path: str) -> int:
    value = _field(container, key, path)
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedSnapshot(f"{path}.{key}", f"expected integer, got {type(value).__name__}")
    if value < 0:
        raise MalformedSnapshot(f"{path}.{key}", f"expected non-negative integer, got {value}")
    return value

"""Slide payloads describing the wrapped story for a presentation layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from github_wrapped.config.settings import settings
from github_wrapped.models.stats import DerivedStats


@dataclass(slots=True)
class Slide:
    """Plain-data content of one slide; rendering is left to the caller."""

    kind: str
    title: str
    value: Any = None
    label: str | None = None
    detail: str | None = None
    items: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "title": self.title,
            "value": self.value,
            "label": self.label,
            "detail": self.detail,
            "items": list(self.items),
        }


def build_slides(
    stats: DerivedStats,
    *,
    display_name: str | None,
    login: str,
    year: int,
    repo_limit: int | None = None,
) -> list[Slide]:
    """Build the ordered slide deck for one user's year."""

    if repo_limit is None:
        repo_limit = settings.WRAPPED_SLIDE_REPOS

    slides = [
        Slide(kind="welcome", title=f"{display_name or login}'s", value=year, label="GitHub Wrapped"),
        Slide(
            kind="contributions",
            title="You made",
            value=stats.total_contributions,
            label="contributions this year",
            detail="That's dedication!",
        ),
        Slide(
            kind="commits",
            title="You committed",
            value=stats.total_commits,
            label="times",
            detail="Building the future, one commit at a time",
        ),
        _top_language_slide(stats),
        Slide(
            kind="language_breakdown",
            title="Your language breakdown",
            items=[language.to_dict() for language in stats.top_languages],
        ),
    ]

    if stats.most_productive_day is not None:
        slides.append(
            Slide(
                kind="productive_day",
                title="Most productive on",
                value=stats.most_productive_day.name,
                label=f"{stats.most_productive_day.total} contributions",
            )
        )

    slides.extend(
        [
            Slide(
                kind="pull_requests",
                title="You opened",
                value=stats.total_prs,
                label="pull requests",
                detail="Collaboration at its finest",
            ),
            Slide(
                kind="streak",
                title="Longest streak",
                value=stats.max_streak,
                label="days in a row",
                detail="Consistency is key!",
            ),
        ]
    )

    if stats.top_repos:
        slides.append(
            Slide(
                kind="top_repos",
                title="Your starred repos",
                items=[
                    {"name": repo.name, "stargazerCount": repo.stargazer_count}
                    for repo in stats.top_repos[:repo_limit]
                ],
            )
        )

    slides.append(Slide(kind="final", title="What a year!", detail=f"Keep building amazing things in {year}"))
    return slides


def _top_language_slide(stats: DerivedStats) -> Slide:
    slide = Slide(kind="top_language", title="Your top language")
    if stats.top_languages:
        top = stats.top_languages[0]
        slide.value = top.name
        slide.label = f"{top.percentage}% of your code"
        slide.items = [top.to_dict()]
    return slide

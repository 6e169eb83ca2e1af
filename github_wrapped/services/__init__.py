"""Stats derivation and slide helpers."""

from github_wrapped.services.slides import Slide, build_slides
from github_wrapped.services.stats_engine import (
    aggregate_by_period,
    aggregate_languages,
    compute_streaks,
    derive_stats,
    select_top_repos,
)

__all__ = [
    "Slide",
    "build_slides",
    "aggregate_by_period",
    "aggregate_languages",
    "compute_streaks",
    "derive_stats",
    "select_top_repos",
]

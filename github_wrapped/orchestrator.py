"""Runs one fetch, parse and derive cycle for a wrapped request."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any, Callable

from github_wrapped.config.settings import settings
from github_wrapped.crawlers.client import GitHubGraphQLClient, sanitize_log_extra
from github_wrapped.crawlers.contracts import FetchState
from github_wrapped.errors import MalformedSnapshot
from github_wrapped.models.snapshot import parse_snapshot
from github_wrapped.services.slides import build_slides
from github_wrapped.services.stats_engine import derive_stats

logger = logging.getLogger(__name__)

STAGE_INPUT = "input"
STAGE_FETCH = "fetch"
STAGE_PARSE = "parse"
STAGE_DERIVE = "derive"


def failure_status_code(result: dict[str, Any]) -> int:
    """Map a failed run result onto an HTTP-style status code."""
    stage = result.get("stage")
    if stage == STAGE_INPUT:
        return 400
    if stage == STAGE_FETCH:
        return 404 if result.get("not_found") else 502
    if stage == STAGE_DERIVE:
        return 500
    return 502


class WrappedOrchestrator:
    """Coordinates the fetch collaborator with the pure stats engine."""

    def __init__(self, *, github_client_factory: Callable[..., Any] = GitHubGraphQLClient) -> None:
        self._github_client_factory = github_client_factory

    async def run(self, login: str, *, token: str | None = None, year: int | None = None) -> dict[str, Any]:
        """Fetch and derive one user's wrapped year.

        Every failure is returned as `{"success": False, "stage": ..., "error": ...}`.
        """

        login = login.strip() if isinstance(login, str) else ""
        if token is None:
            token = settings.GITHUB_TOKEN or ""
        if not isinstance(token, str):
            return self._failure(STAGE_INPUT, "GitHub token must be a string", login=login, year=year)
        token = token.strip()
        if not login:
            return self._failure(STAGE_INPUT, "GitHub login is required", login=login, year=year)
        if not token:
            return self._failure(STAGE_INPUT, "GitHub token is required", login=login, year=year)
        if year is None:
            year = datetime.now(UTC).year

        logger.info("Wrapped run started", extra={"login": login, "year": year})

        try:
            async with self._github_client_factory(token=token) as client:
                fetched = await client.fetch_user_snapshot(login, year=year)
        except Exception as exc:
            logger.exception("GitHub fetch raised", extra=sanitize_log_extra(login=login, year=year))
            return self._failure(STAGE_FETCH, str(exc) or type(exc).__name__, login=login, year=year)

        if fetched.state != FetchState.OK:
            return self._failure(
                STAGE_FETCH,
                fetched.error or "Failed to fetch GitHub data",
                login=login,
                year=year,
                not_found=fetched.state == FetchState.EMPTY,
                status_code=fetched.status_code,
            )

        try:
            snapshot = parse_snapshot(fetched.data)
        except MalformedSnapshot as exc:
            return self._failure(STAGE_PARSE, str(exc), login=login, year=year)

        try:
            stats = derive_stats(snapshot)
        except Exception as exc:
            logger.error("Stats derivation failed", exc_info=True, extra={"login": login, "year": year})
            return self._failure(STAGE_DERIVE, str(exc), login=login, year=year)

        slides = build_slides(stats, display_name=snapshot.display_name, login=snapshot.login, year=year)

        logger.info(
            "Wrapped run completed",
            extra={"login": login, "year": year, "total_contributions": stats.total_contributions},
        )
        return {
            "success": True,
            "login": snapshot.login,
            "year": year,
            "profile": {
                "displayName": snapshot.display_name,
                "login": snapshot.login,
                "avatarUrl": snapshot.avatar_url,
            },
            "stats": stats.to_dict(),
            "slides": [slide.to_dict() for slide in slides],
        }

    @staticmethod
    def _failure(stage: str, error: str, *, login: str, year: int | None, **details: Any) -> dict[str, Any]:
        logger.warning(
            "Wrapped run failed",
            extra=sanitize_log_extra(stage=stage, login=login, year=year, error=error),
        )
        return {"success": False, "stage": stage, "login": login, "year": year, "error": error, **details}

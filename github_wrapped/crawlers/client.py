"""Resilient async GitHub GraphQL client for annual activity snapshots."""

from __future__ import annotations

import asyncio
import logging
import re
import time
from datetime import UTC, datetime
from typing import Any, Optional

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from github_wrapped.config.settings import settings
from github_wrapped.crawlers.contracts import FetchResult, FetchState, UserSnapshotContract

logger = logging.getLogger(__name__)

_REDACTED_VALUE = "***REDACTED***"
_SENSITIVE_KEYS = (
    "authorization",
    "token",
    "api_key",
    "apikey",
    "secret",
    "password",
    "cookie",
)
_TOKEN_PATTERNS = (
    re.compile(r"(?i)(bearer\s+)[^\s,;]+"),
    re.compile(r"(?i)(token\s*[=:]\s*)[^\s,;]+"),
    re.compile(r"(?i)(access_token=)[^&\s]+"),
    re.compile(r"\b(gh[pousr]_)[A-Za-z0-9]{16,}"),
)

USER_SNAPSHOT_QUERY = """
query($username: String!, $from: DateTime!, $to: DateTime!, $repoLimit: Int!, $languageLimit: Int!) {
  user(login: $username) {
    name
    login
    avatarUrl
    contributionsCollection(from: $from, to: $to) {
      contributionCalendar {
        totalContributions
        weeks {
          contributionDays {
            contributionCount
            date
          }
        }
      }
      totalCommitContributions
      totalIssueContributions
      totalPullRequestContributions
      totalPullRequestReviewContributions
      totalRepositoryContributions
    }
    repositories(first: $repoLimit, ownerAffiliations: OWNER, orderBy: {field: STARGAZERS, direction: DESC}) {
      totalCount
      nodes {
        name
        stargazerCount
        forkCount
        primaryLanguage {
          name
          color
        }
        languages(first: $languageLimit, orderBy: {field: SIZE, direction: DESC}) {
          edges {
            size
            node {
              name
              color
            }
          }
        }
      }
    }
    followers {
      totalCount
    }
  }
}
"""


def sanitize_for_log(value: Any, *, key: Optional[str] = None) -> Any:
    """Return a recursively sanitized copy of log payloads."""

    if isinstance(value, dict):
        sanitized: dict[str, Any] = {}
        for raw_key, raw_value in value.items():
            field = str(raw_key)
            if _contains_keyword(field, _SENSITIVE_KEYS):
                sanitized[field] = _REDACTED_VALUE
                continue
            sanitized[field] = sanitize_for_log(raw_value, key=field)
        return sanitized

    if isinstance(value, (list, tuple, set)):
        return [sanitize_for_log(item, key=key) for item in value]

    if isinstance(value, str):
        return _redact_text(value)

    return value


def sanitize_log_extra(**kwargs: Any) -> dict[str, Any]:
    """Helper for `extra=` payloads in structured logging."""

    return {key: sanitize_for_log(value, key=key) for key, value in kwargs.items()}


def _contains_keyword(field_name: str, keywords: tuple[str, ...]) -> bool:
    lowered = field_name.lower()
    return any(keyword in lowered for keyword in keywords)


def _redact_text(raw: str) -> str:
    redacted = raw
    for pattern in _TOKEN_PATTERNS:
        redacted = pattern.sub(rf"\1{_REDACTED_VALUE}", redacted)
    return redacted


def year_window(year: int) -> tuple[str, str]:
    """Inclusive UTC bounds of a calendar year as GraphQL DateTime strings."""
    return f"{year}-01-01T00:00:00Z", f"{year}-12-31T23:59:59Z"


class _RateLimitRetryableError(Exception):
    """Retryable rate-limit signal for tenacity."""


class GitHubGraphQLClient:
    """Fetches one user's annual activity snapshot from the GraphQL API."""

    def __init__(
        self,
        *,
        token: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        max_retries: Optional[int] = None,
        backoff_base_seconds: Optional[float] = None,
        backoff_max_seconds: Optional[float] = None,
        rate_limit_buffer_seconds: Optional[int] = None,
        repository_limit: Optional[int] = None,
        language_limit: Optional[int] = None,
        graphql_url: Optional[str] = None,
        transport: Optional[Any] = None,
    ) -> None:
        self._token = token or settings.GITHUB_TOKEN
        self._timeout_seconds = timeout_seconds or settings.GITHUB_TIMEOUT_SECONDS
        self._max_retries = max_retries or settings.GITHUB_MAX_RETRIES
        self._backoff_base_seconds = backoff_base_seconds or settings.GITHUB_BACKOFF_BASE_SECONDS
        self._backoff_max_seconds = backoff_max_seconds or settings.GITHUB_BACKOFF_MAX_SECONDS
        self._rate_limit_buffer_seconds = rate_limit_buffer_seconds or settings.GITHUB_RATE_LIMIT_BUFFER_SECONDS
        self._repository_limit = repository_limit or settings.WRAPPED_REPOSITORY_LIMIT
        self._language_limit = language_limit or settings.WRAPPED_LANGUAGES_PER_REPOSITORY
        self._graphql_url = graphql_url or settings.GITHUB_GRAPHQL_URL
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "GitHubGraphQLClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch_user_snapshot(self, login: str, *, year: Optional[int] = None) -> UserSnapshotContract:
        """Fetch the raw `user` payload for `login` over one calendar year.

        Returns OK with the user mapping, EMPTY when GitHub knows no such user,
        or FAILED for transport, auth, query and exhausted rate-limit errors.
        """

        if not self._token:
            return FetchResult(state=FetchState.FAILED, error="GitHub token is required")

        if year is None:
            year = datetime.now(UTC).year
        start, end = year_window(year)
        variables = {
            "username": login,
            "from": start,
            "to": end,
            "repoLimit": self._repository_limit,
            "languageLimit": self._language_limit,
        }

        response = await self._post(USER_SNAPSHOT_QUERY, variables)
        if response.state != FetchState.OK:
            return response

        payload = response.data if isinstance(response.data, dict) else {}
        errors = payload.get("errors")
        if isinstance(errors, list) and errors:
            first = errors[0] if isinstance(errors[0], dict) else {}
            message = str(first.get("message") or "GraphQL query failed")
            logger.warning(
                "GitHub GraphQL query returned errors",
                extra=sanitize_log_extra(login=login, year=year, error=message),
            )
            if first.get("type") == "NOT_FOUND":
                return FetchResult(state=FetchState.EMPTY, error=message, status_code=response.status_code)
            return FetchResult(state=FetchState.FAILED, error=message, status_code=response.status_code)

        data = payload.get("data") if isinstance(payload.get("data"), dict) else {}
        user = data.get("user")
        if not isinstance(user, dict):
            return FetchResult(
                state=FetchState.EMPTY,
                error=f"User not found: {login}",
                status_code=response.status_code,
            )

        return FetchResult(state=FetchState.OK, data=user, status_code=response.status_code)

    async def _post(self, query: str, variables: dict[str, Any]) -> FetchResult[Any]:
        client = await self._ensure_client()
        body = {"query": query, "variables": variables}

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self._max_retries),
                wait=wait_exponential(multiplier=self._backoff_base_seconds, max=self._backoff_max_seconds),
                retry=retry_if_exception_type(_RateLimitRetryableError),
                reraise=True,
            ):
                with attempt:
                    response = await client.post(self._graphql_url, json=body)

                    if self._is_rate_limited(response):
                        wait_seconds = self._compute_rate_limit_wait(response.headers)
                        logger.warning(
                            "GitHub API rate limit encountered",
                            extra=sanitize_log_extra(
                                variables=variables,
                                status_code=response.status_code,
                                retry_after_seconds=wait_seconds,
                            ),
                        )
                        if wait_seconds > 0:
                            await asyncio.sleep(wait_seconds)
                        raise _RateLimitRetryableError(
                            f"GitHub rate limit encountered ({response.status_code})"
                        )

                    response.raise_for_status()
                    return FetchResult(
                        state=FetchState.OK,
                        data=response.json(),
                        status_code=response.status_code,
                    )
        except _RateLimitRetryableError as exc:
            logger.warning(
                "GitHub request failed after rate-limit retries",
                extra=sanitize_log_extra(variables=variables, error=str(exc), status_code=429),
            )
            return FetchResult(state=FetchState.FAILED, error=str(exc), status_code=429)
        except httpx.HTTPError as exc:
            status_code = getattr(getattr(exc, "response", None), "status_code", None)
            logger.warning(
                "GitHub request failed",
                extra=sanitize_log_extra(variables=variables, error=str(exc), status_code=status_code),
            )
            return FetchResult(state=FetchState.FAILED, error=str(exc), status_code=status_code)
        except ValueError as exc:
            logger.warning(
                "GitHub response was not valid JSON",
                extra=sanitize_log_extra(variables=variables, error=str(exc)),
            )
            return FetchResult(state=FetchState.FAILED, error=f"Invalid JSON response: {exc}")

        return FetchResult(state=FetchState.FAILED, error="Unknown GitHub request failure")

    async def _ensure_client(self) -> httpx.AsyncClient:
        if self._client:
            return self._client

        headers = {
            "Content-Type": "application/json",
            "User-Agent": settings.USER_AGENT,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"

        self._client = httpx.AsyncClient(
            headers=headers,
            timeout=self._timeout_seconds,
            transport=self._transport,
        )
        return self._client

    @staticmethod
    def _is_rate_limited(response: httpx.Response) -> bool:
        if response.status_code == 429:
            return True
        if response.status_code != 403:
            return False
        # 403 also covers missing scopes; only retry when GitHub signals throttling.
        return response.headers.get("x-ratelimit-remaining") == "0" or "retry-after" in response.headers

    def _compute_rate_limit_wait(self, headers: httpx.Headers) -> float:
        retry_after = headers.get("retry-after")
        if retry_after is not None:
            try:
                return max(float(retry_after), 0.0)
            except ValueError:
                pass

        reset_raw = headers.get("x-ratelimit-reset")
        if reset_raw is not None:
            try:
                reset_epoch = int(reset_raw)
                wait_seconds = reset_epoch - int(time.time()) + self._rate_limit_buffer_seconds
                return float(max(wait_seconds, 0))
            except ValueError:
                pass

        return self._backoff_base_seconds

from __future__ import annotations

from typing import Any

import pytest

from github_wrapped.crawlers.contracts import FetchResult, FetchState
from github_wrapped.crawlers.client import GitHubGraphQLClient
from github_wrapped.orchestrator import WrappedOrchestrator, failure_status_code


class FakeClient:
    def __init__(self, result: FetchResult[dict[str, Any]]) -> None:
        self.result = result
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    async def __aenter__(self) -> "FakeClient":
        return self

    async def __aexit__(self, *_: Any) -> None:
        self.closed = True

    async def fetch_user_snapshot(self, login: str, *, year: int | None = None) -> FetchResult[dict[str, Any]]:
        self.calls.append({"login": login, "year": year})
        return self.result


class FakeClientFactory:
    def __init__(self, result: FetchResult[dict[str, Any]]) -> None:
        self.client = FakeClient(result)
        self.tokens: list[str] = []

    def __call__(self, *, token: str) -> FakeClient:
        self.tokens.append(token)
        return self.client


@pytest.mark.asyncio
async def test_run_returns_stats_profile_and_slides(user_payload, repo) -> None:
    factory = FakeClientFactory(
        FetchResult(
            state=FetchState.OK,
            data=user_payload(counts=[1, 0, 2], repos=[repo("api", stars=3, languages=[("Go", "#00ADD8", 10)])]),
        )
    )
    orchestrator = WrappedOrchestrator(github_client_factory=factory)

    result = await orchestrator.run(" octocat ", token="ghp_token", year=2025)

    assert result["success"] is True
    assert result["year"] == 2025
    assert result["profile"] == {
        "displayName": "The Octocat",
        "login": "octocat",
        "avatarUrl": "https://avatars.githubusercontent.com/octocat",
    }
    assert result["stats"]["totalContributions"] == 3
    assert result["stats"]["topLanguages"][0]["name"] == "Go"
    assert result["slides"][0]["kind"] == "welcome"
    assert factory.tokens == ["ghp_token"]
    assert factory.client.calls == [{"login": "octocat", "year": 2025}]
    assert factory.client.closed is True


@pytest.mark.asyncio
async def test_run_rejects_blank_input_before_fetching(monkeypatch) -> None:
    from github_wrapped.config.settings import settings

    monkeypatch.setattr(settings, "GITHUB_TOKEN", None)
    factory = FakeClientFactory(FetchResult(state=FetchState.OK, data={}))
    orchestrator = WrappedOrchestrator(github_client_factory=factory)

    missing_login = await orchestrator.run("  ", token="ghp_token")
    missing_token = await orchestrator.run("octocat", token="  ")

    assert missing_login == {"success": False, "stage": "input", "login": "", "year": None, "error": "GitHub login is required"}
    assert missing_token["stage"] == "input"
    assert missing_token["error"] == "GitHub token is required"
    assert factory.tokens == []


@pytest.mark.asyncio
async def test_run_reports_fetch_failures_as_values() -> None:
    factory = FakeClientFactory(FetchResult(state=FetchState.EMPTY, status_code=200, error="User not found: ghost"))
    orchestrator = WrappedOrchestrator(github_client_factory=factory)

    result = await orchestrator.run("ghost", token="ghp_token", year=2025)

    assert result["success"] is False
    assert result["stage"] == "fetch"
    assert result["not_found"] is True
    assert result["error"] == "User not found: ghost"


@pytest.mark.asyncio
async def test_run_reports_malformed_snapshot(user_payload) -> None:
    payload = user_payload()
    del payload["followers"]
    factory = FakeClientFactory(FetchResult(state=FetchState.OK, data=payload))
    orchestrator = WrappedOrchestrator(github_client_factory=factory)

    result = await orchestrator.run("octocat", token="ghp_token", year=2025)

    assert result["success"] is False
    assert result["stage"] == "parse"
    assert "user.followers" in result["error"]


@pytest.mark.asyncio
async def test_run_defaults_to_current_year(user_payload) -> None:
    factory = FakeClientFactory(FetchResult(state=FetchState.OK, data=user_payload()))
    orchestrator = WrappedOrchestrator(github_client_factory=factory)

    result = await orchestrator.run("octocat", token="ghp_token")

    assert result["success"] is True
    assert isinstance(factory.client.calls[0]["year"], int)
    assert result["year"] == factory.client.calls[0]["year"]


class RaisingClient(FakeClient):
    async def fetch_user_snapshot(self, login: str, *, year: int | None = None) -> FetchResult[dict[str, Any]]:
        raise RuntimeError("transport exploded")


@pytest.mark.asyncio
async def test_run_reports_exceptions_from_client_factory() -> None:
    def broken_factory(*, token: str) -> FakeClient:
        raise RuntimeError("client construction failed")

    orchestrator = WrappedOrchestrator(github_client_factory=broken_factory)

    result = await orchestrator.run("octocat", token="ghp_token", year=2025)

    assert result["success"] is False
    assert result["stage"] == "fetch"
    assert result["error"] == "client construction failed"


@pytest.mark.asyncio
async def test_run_reports_exceptions_raised_during_fetch() -> None:
    client = RaisingClient(FetchResult(state=FetchState.OK, data={}))
    orchestrator = WrappedOrchestrator(github_client_factory=lambda *, token: client)

    result = await orchestrator.run("octocat", token="ghp_token", year=2025)

    assert result["success"] is False
    assert result["stage"] == "fetch"
    assert result["error"] == "transport exploded"
    assert client.closed is True


@pytest.mark.asyncio
async def test_run_reports_invalid_graphql_url_as_fetch_failure() -> None:
    def factory(*, token: str) -> GitHubGraphQLClient:
        return GitHubGraphQLClient(token=token, graphql_url="https://exa\x00mple.com/graphql")

    orchestrator = WrappedOrchestrator(github_client_factory=factory)

    result = await orchestrator.run("octocat", token="ghp_token", year=2025)

    assert result["success"] is False
    assert result["stage"] == "fetch"
    assert failure_status_code(result) == 502


@pytest.mark.asyncio
async def test_run_rejects_non_string_token_as_input_error() -> None:
    factory = FakeClientFactory(FetchResult(state=FetchState.OK, data={}))
    orchestrator = WrappedOrchestrator(github_client_factory=factory)

    result = await orchestrator.run("octocat", token=123, year=2025)

    assert result["stage"] == "input"
    assert result["error"] == "GitHub token must be a string"
    assert failure_status_code(result) == 400
    assert factory.tokens == []


def test_failure_status_code_maps_stages() -> None:
    assert failure_status_code({"stage": "input"}) == 400
    assert failure_status_code({"stage": "fetch", "not_found": True}) == 404
    assert failure_status_code({"stage": "fetch", "not_found": False}) == 502
    assert failure_status_code({"stage": "parse"}) == 502
    assert failure_status_code({"stage": "derive"}) == 500

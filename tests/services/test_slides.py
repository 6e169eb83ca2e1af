from github_wrapped.services.slides import build_slides
from github_wrapped.services.stats_engine import derive_stats


def test_slides_follow_story_order(user_payload, repo) -> None:
    payload = user_payload(
        counts=[1, 2, 3],
        repos=[
            repo("a", stars=9, languages=[("Go", "#00ADD8", 30), ("C", "#555555", 10)]),
            repo("b", stars=5),
            repo("c", stars=4),
            repo("d", stars=1),
        ],
    )
    stats = derive_stats(payload)

    slides = build_slides(stats, display_name="The Octocat", login="octocat", year=2025, repo_limit=3)

    assert [slide.kind for slide in slides] == [
        "welcome",
        "contributions",
        "commits",
        "top_language",
        "language_breakdown",
        "productive_day",
        "pull_requests",
        "streak",
        "top_repos",
        "final",
    ]
    assert slides[0].title == "The Octocat's"
    assert slides[3].value == "Go"
    assert slides[3].label == "75.0% of your code"
    assert [item["name"] for item in slides[8].items] == ["a", "b", "c"]
    assert slides[-1].detail == "Keep building amazing things in 2025"


def test_slides_skip_optional_content_for_empty_year(user_payload) -> None:
    stats = derive_stats(user_payload(counts=[], repos=[]))

    slides = build_slides(stats, display_name=None, login="octocat", year=2024)
    kinds = [slide.kind for slide in slides]

    assert slides[0].title == "octocat's"
    assert "productive_day" not in kinds
    assert "top_repos" not in kinds
    top_language = slides[kinds.index("top_language")]
    assert top_language.value is None
    assert top_language.items == []
    assert slides[kinds.index("language_breakdown")].to_dict()["items"] == []

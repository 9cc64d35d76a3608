"""Tests for the recommendation and strength generators."""

from readiness.fixes import generate_recommendations, generate_strengths
from readiness.fixes.recommendations import (
    RecommendationEffort,
    RecommendationImpact,
    RecommendationPriority,
    impact_from_score,
    title_from_code,
)
from readiness.issues.registry import (
    IssueCategory,
    IssueCode,
    IssueSeverity,
    get_issue_definition,
)
from readiness.scoring import score_page
from readiness.scoring.models import Issue
from tests.fixtures.pages import make_blocked_page, make_neglected_page, make_page


def make_issue(code: IssueCode, /, **overrides) -> Issue:
    issue = Issue.from_definition(get_issue_definition(code))
    if not overrides:
        return issue
    values = {**issue.__dict__, **overrides}
    return Issue(**values)


class TestHelpers:
    """Small mapping helpers."""

    def test_title_from_code(self) -> None:
        assert title_from_code("MISSING_LLMS_TXT") == "Missing Llms Txt"
        assert title_from_code(IssueCode.NO_STRUCTURED_DATA) == "No Structured Data"

    def test_impact_from_score(self) -> None:
        assert impact_from_score(-25) == RecommendationImpact.HIGH
        assert impact_from_score(-15) == RecommendationImpact.HIGH
        assert impact_from_score(-8) == RecommendationImpact.MEDIUM
        assert impact_from_score(-5) == RecommendationImpact.LOW
        assert impact_from_score(0) == RecommendationImpact.LOW


class TestGenerateRecommendations:
    """Recommendations from a scored page."""

    def test_blocked_page(self) -> None:
        result = score_page(make_blocked_page())
        recommendations = generate_recommendations(result.issues, result.overall_score)

        assert [rec.issue_code for rec in recommendations] == [
            "MISSING_LLMS_TXT",
            "AI_CRAWLER_BLOCKED",
            "NO_STRUCTURED_DATA",
        ]
        llms, crawler, structured = recommendations
        assert (llms.priority, llms.effort, llms.impact, llms.estimated_improvement) == (
            RecommendationPriority.HIGH,
            RecommendationEffort.QUICK,
            RecommendationImpact.HIGH,
            20,
        )
        assert crawler.estimated_improvement == 20  # 25 capped at 20
        assert (structured.priority, structured.effort, structured.estimated_improvement) == (
            RecommendationPriority.MEDIUM,
            RecommendationEffort.MODERATE,
            15,
        )

    def test_affected_platforms(self) -> None:
        result = score_page(make_blocked_page())
        llms = generate_recommendations(result.issues, result.overall_score)[0]
        assert llms.affected_platforms == ["chatgpt", "claude", "perplexity", "gemini"]

        fallback = generate_recommendations([make_issue(IssueCode.LH_BP_LOW)], 90)[0]
        assert fallback.affected_platforms == [
            "chatgpt",
            "claude",
            "perplexity",
            "gemini",
            "copilot",
            "grok",
        ]

    def test_snippet_becomes_steps(self) -> None:
        recommendation = generate_recommendations([make_issue(IssueCode.MISSING_LLMS_TXT)], 90)[0]
        assert recommendation.steps is not None
        assert recommendation.steps[0] == "Implement the following snippet:"

        no_snippet = generate_recommendations([make_issue(IssueCode.THIN_CONTENT)], 90)[0]
        assert no_snippet.steps is None

    def test_low_score_bonus(self) -> None:
        """Pages under 60 get two extra points on every estimate."""
        issues = [make_issue(IssueCode.MISSING_OG_TAGS)]
        assert generate_recommendations(issues, 60)[0].estimated_improvement == 5
        assert generate_recommendations(issues, 59)[0].estimated_improvement == 7

    def test_minimum_improvement(self) -> None:
        """Zero-impact codes still estimate at least three points."""
        recommendation = generate_recommendations([make_issue(IssueCode.CONTENT_DEPTH)], 90)[0]
        assert recommendation.estimated_improvement == 3

    def test_deduplicates_by_code(self) -> None:
        issues = [
            make_issue(IssueCode.CONTENT_DEPTH),
            make_issue(IssueCode.CONTENT_DEPTH, data={"llm_score": 10}),
        ]
        assert len(generate_recommendations(issues, 90)) == 1

    def test_unknown_code_uses_fallback(self) -> None:
        stored = make_issue(IssueCode.MISSING_H1, code="RETIRED_CHECK")
        recommendation = generate_recommendations([stored], 90)[0]
        assert recommendation.issue_code == "RETIRED_CHECK"
        assert recommendation.title == "Retired Check"
        assert recommendation.priority == RecommendationPriority.MEDIUM
        assert recommendation.estimated_improvement == 5

    def test_sorted_and_capped(self) -> None:
        result = score_page(make_neglected_page())
        recommendations = generate_recommendations(
            result.issues, result.overall_score, max_recommendations=5
        )
        assert len(recommendations) == 5
        ranks = {"high": 0, "medium": 1, "low": 2}
        keys = [
            (ranks[rec.priority.value], ranks[rec.impact.value], -rec.estimated_improvement)
            for rec in recommendations
        ]
        assert keys == sorted(keys)
        assert recommendations[0].priority == RecommendationPriority.HIGH

    def test_settings_cap(self) -> None:
        result = score_page(make_neglected_page())
        assert len(generate_recommendations(result.issues, result.overall_score)) == 10

    def test_zero_cap_returns_nothing(self) -> None:
        result = score_page(make_neglected_page())
        recommendations = generate_recommendations(
            result.issues, result.overall_score, max_recommendations=0
        )
        assert recommendations == []

    def test_no_issues(self) -> None:
        assert generate_recommendations([], 100) == []

    def test_to_dict(self) -> None:
        data = generate_recommendations([make_issue(IssueCode.MISSING_TITLE)], 90)[0].to_dict()
        assert data["issue_code"] == "MISSING_TITLE"
        assert data["priority"] == "high"
        assert data["effort"] == "quick"
        assert data["impact"] == "high"
        assert data["estimated_improvement"] == 15


class TestGenerateStrengths:
    """Strengths from pillar scores."""

    def test_clean_page(self) -> None:
        result = score_page(make_page())
        strengths = generate_strengths(result.category_scores, result.issues)
        assert [strength.category for strength in strengths] == [
            IssueCategory.TECHNICAL,
            IssueCategory.CONTENT,
            IssueCategory.AI_READINESS,
            IssueCategory.PERFORMANCE,
        ]

    def test_critical_issue_blocks_category(self) -> None:
        result = score_page(make_blocked_page())
        strengths = generate_strengths(result.category_scores, result.issues)
        assert IssueCategory.AI_READINESS not in {strength.category for strength in strengths}
        assert len(strengths) == 3

    def test_thresholds(self) -> None:
        scores = {"technical": 85, "content": 87, "ai_readiness": 84, "performance": 80}
        strengths = generate_strengths(scores, [])
        assert [strength.category for strength in strengths] == [
            IssueCategory.TECHNICAL,
            IssueCategory.PERFORMANCE,
        ]

    def test_critical_blocks_even_high_score(self) -> None:
        issues = [make_issue(IssueCode.MISSING_TITLE)]
        assert issues[0].severity == IssueSeverity.CRITICAL
        strengths = generate_strengths({"technical": 99}, issues)
        assert strengths == []

    def test_unknown_category_keys_ignored(self) -> None:
        assert generate_strengths({"vibes": 100}, []) == []

    def test_cap(self) -> None:
        result = score_page(make_page())
        assert len(generate_strengths(result.category_scores, result.issues, max_strengths=2)) == 2

    def test_zero_cap_returns_nothing(self) -> None:
        result = score_page(make_page())
        assert generate_strengths(result.category_scores, result.issues, max_strengths=0) == []

    def test_to_dict(self) -> None:
        strength = generate_strengths({"performance": 95}, [])[0]
        assert strength.to_dict() == {
            "category": "performance",
            "title": "Fast, stable experience",
            "description": (
                "Lighthouse and Core Web Vitals indicators show consistently quick rendering."
            ),
        }

"""Legacy 4-pillar scoring engine.

Scores a page on Technical, Content, AI Readiness and Performance, then
combines them into one weighted score, a letter grade and per-platform
projections.
"""

from collections.abc import Mapping
from dataclasses import replace

import structlog

from readiness.issues.registry import IssueCode, get_issue_definition
from readiness.scoring.deduction import clamp_score, sort_issues
from readiness.scoring.factors import (
    score_ai_readiness_factors,
    score_content_factors,
    score_performance_factors,
    score_technical_factors,
)
from readiness.scoring.grades import letter_grade
from readiness.scoring.models import Issue, PageData, ScoringResult
from readiness.scoring.platforms import calculate_platform_scores
from readiness.scoring.thresholds import HTTP_ERROR_STATUS
from readiness.scoring.weights import resolve_pillar_weights

logger = structlog.get_logger(__name__)

PILLAR_SCORERS = {
    "technical": score_technical_factors,
    "content": score_content_factors,
    "ai_readiness": score_ai_readiness_factors,
    "performance": score_performance_factors,
}


def is_error_page(page: PageData) -> bool:
    return page.status_code >= HTTP_ERROR_STATUS


def http_error_issue(status_code: int) -> Issue:
    """The only issue reported for a page that returned 4xx/5xx."""
    issue = Issue.from_definition(
        get_issue_definition(IssueCode.HTTP_STATUS),
        data={"status_code": status_code},
    )
    return replace(
        issue,
        message=f"Page returned HTTP {status_code}",
        recommendation="Fix the server error or set up a redirect.",
    )


def score_page(page: PageData, weights: Mapping[str, float] | None = None) -> ScoringResult:
    """
    Score a page with the 4-pillar model.

    Error pages (status >= 400) short-circuit to all zeros, grade F and a
    single HTTP_STATUS issue without running any scorer.

    Args:
        page: Crawled page snapshot
        weights: Optional pillar weights; normalized before use

    Returns:
        ScoringResult with pillar scores, grade, platform projections and
        severity-sorted issues
    """
    if is_error_page(page):
        logger.debug("page_short_circuited", url=page.url, status_code=page.status_code)
        return ScoringResult(
            overall_score=0,
            technical_score=0,
            content_score=0,
            ai_readiness_score=0,
            performance_score=0,
            letter_grade="F",
            platform_scores={},
            issues=[http_error_issue(page.status_code)],
        )

    pillar_weights = resolve_pillar_weights(weights)

    pillar_scores: dict[str, int] = {}
    issues: list[Issue] = []
    for pillar, scorer in PILLAR_SCORERS.items():
        result = scorer(page)
        pillar_scores[pillar] = result.score
        issues.extend(result.issues)

    overall = clamp_score(
        sum(pillar_scores[pillar] * pillar_weights[pillar] for pillar in PILLAR_SCORERS)
    )
    grade = letter_grade(overall)

    logger.debug(
        "page_scored",
        url=page.url,
        overall_score=overall,
        letter_grade=grade,
        issue_count=len(issues),
    )

    return ScoringResult(
        overall_score=overall,
        technical_score=pillar_scores["technical"],
        content_score=pillar_scores["content"],
        ai_readiness_score=pillar_scores["ai_readiness"],
        performance_score=pillar_scores["performance"],
        letter_grade=grade,
        platform_scores=calculate_platform_scores(pillar_scores),
        issues=sort_issues(issues),
    )

"""7-dimension scoring engine.

Runs the seven dimension scorers, weights them into an overall score and
fills in the legacy pillar fields through the adapter so existing
consumers keep working.
"""

from collections.abc import Mapping

import structlog

from readiness.scoring.adapter import dimensions_to_legacy_scores
from readiness.scoring.deduction import clamp_score, sort_issues
from readiness.scoring.dimensions import DIMENSION_SCORERS
from readiness.scoring.engine import http_error_issue, is_error_page
from readiness.scoring.grades import letter_grade
from readiness.scoring.models import Issue, PageData, ScoringResultV2
from readiness.scoring.platforms import calculate_platform_scores
from readiness.scoring.weights import DIMENSION_IDS, resolve_dimension_weights

logger = structlog.get_logger(__name__)


def score_page_v2(
    page: PageData, weights: Mapping[str, float] | None = None
) -> ScoringResultV2:
    """
    Score a page with the 7-dimension model.

    Args:
        page: Crawled page snapshot
        weights: Optional per-dimension weights; normalized before use

    Returns:
        ScoringResultV2 with dimension scores, derived pillar scores,
        grade, platform projections and severity-sorted issues
    """
    if is_error_page(page):
        logger.debug("page_short_circuited", url=page.url, status_code=page.status_code)
        return ScoringResultV2(
            overall_score=0,
            technical_score=0,
            content_score=0,
            ai_readiness_score=0,
            performance_score=0,
            letter_grade="F",
            platform_scores={},
            issues=[http_error_issue(page.status_code)],
            dimension_scores={dimension: 0 for dimension in DIMENSION_IDS},
        )

    dimension_weights = resolve_dimension_weights(weights)

    dimension_scores: dict[str, int] = {}
    issues: list[Issue] = []
    for dimension in DIMENSION_IDS:
        result = DIMENSION_SCORERS[dimension](page)
        dimension_scores[dimension] = result.score
        issues.extend(result.issues)

    overall = clamp_score(
        sum(dimension_scores[d] * dimension_weights[d] for d in DIMENSION_IDS)
    )
    grade = letter_grade(overall)
    legacy = dimensions_to_legacy_scores(dimension_scores)

    logger.debug(
        "page_scored_v2",
        url=page.url,
        overall_score=overall,
        letter_grade=grade,
        issue_count=len(issues),
    )

    return ScoringResultV2(
        overall_score=overall,
        technical_score=legacy["technical"],
        content_score=legacy["content"],
        ai_readiness_score=legacy["ai_readiness"],
        performance_score=legacy["performance"],
        letter_grade=grade,
        platform_scores=calculate_platform_scores(legacy),
        issues=sort_issues(issues),
        dimension_scores=dimension_scores,
    )

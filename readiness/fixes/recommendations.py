"""Recommendation and strength generator.

Turns a scored page's issue list into a short, prioritized to-do list, and
its pillar scores into the handful of things the page already does well.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum

import structlog

from readiness.config import get_settings
from readiness.issues.registry import (
    SEVERITY_RANK,
    EffortLevel,
    IssueCategory,
    IssueCode,
    IssueDefinition,
    IssueSeverity,
    find_issue_definition,
)
from readiness.scoring.models import Issue
from readiness.scoring.platforms import PLATFORM_WEIGHTS, platforms_for_issue

logger = structlog.get_logger(__name__)

ALL_PLATFORMS: list[str] = list(PLATFORM_WEIGHTS)

LOW_SCORE_THRESHOLD = 60
LOW_SCORE_BONUS = 2
MIN_IMPROVEMENT = 3
MAX_IMPROVEMENT = 20
FALLBACK_IMPROVEMENT = 5


class RecommendationPriority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RecommendationEffort(StrEnum):
    QUICK = "quick"
    MODERATE = "moderate"
    SIGNIFICANT = "significant"


class RecommendationImpact(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


PRIORITY_FROM_SEVERITY: dict[IssueSeverity, RecommendationPriority] = {
    IssueSeverity.CRITICAL: RecommendationPriority.HIGH,
    IssueSeverity.WARNING: RecommendationPriority.MEDIUM,
    IssueSeverity.INFO: RecommendationPriority.LOW,
}

EFFORT_FROM_LEVEL: dict[EffortLevel, RecommendationEffort] = {
    EffortLevel.LOW: RecommendationEffort.QUICK,
    EffortLevel.MEDIUM: RecommendationEffort.MODERATE,
    EffortLevel.HIGH: RecommendationEffort.SIGNIFICANT,
}

_RANK = {"high": 0, "medium": 1, "low": 2}


@dataclass
class Recommendation:
    """A remediation step for one issue code."""

    issue_code: str
    title: str
    description: str
    priority: RecommendationPriority
    effort: RecommendationEffort
    impact: RecommendationImpact
    estimated_improvement: int  # Points, before weighting
    affected_platforms: list[str] = field(default_factory=list)
    steps: list[str] | None = None

    def to_dict(self) -> dict:
        return {
            "issue_code": self.issue_code,
            "title": self.title,
            "description": self.description,
            "priority": self.priority.value,
            "effort": self.effort.value,
            "impact": self.impact.value,
            "estimated_improvement": self.estimated_improvement,
            "affected_platforms": self.affected_platforms,
            "steps": self.steps,
        }


@dataclass
class Strength:
    category: IssueCategory
    title: str
    description: str

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "title": self.title,
            "description": self.description,
        }


def title_from_code(code: str) -> str:
    """MISSING_LLMS_TXT -> Missing Llms Txt."""
    return " ".join(segment.capitalize() for segment in str(code).lower().split("_"))


def impact_from_score(score_impact: int) -> RecommendationImpact:
    magnitude = abs(score_impact)
    if magnitude >= 15:
        return RecommendationImpact.HIGH
    if magnitude >= 8:
        return RecommendationImpact.MEDIUM
    return RecommendationImpact.LOW


def _from_definition(definition: IssueDefinition) -> Recommendation:
    steps = None
    if definition.implementation_snippet:
        steps = ["Implement the following snippet:", definition.implementation_snippet]

    return Recommendation(
        issue_code=definition.code.value,
        title=title_from_code(definition.code),
        description=definition.recommendation,
        priority=PRIORITY_FROM_SEVERITY[definition.severity],
        effort=EFFORT_FROM_LEVEL[definition.effort_level],
        impact=impact_from_score(definition.score_impact),
        estimated_improvement=max(
            MIN_IMPROVEMENT, min(MAX_IMPROVEMENT, abs(definition.score_impact))
        ),
        affected_platforms=platforms_for_issue(definition.code) or list(ALL_PLATFORMS),
        steps=steps,
    )


def _fallback(code: str) -> Recommendation:
    """Generic template for codes the registry no longer knows."""
    return Recommendation(
        issue_code=str(code),
        title=title_from_code(code),
        description="Address this issue to improve AI visibility.",
        priority=RecommendationPriority.MEDIUM,
        effort=RecommendationEffort.MODERATE,
        impact=RecommendationImpact.MEDIUM,
        estimated_improvement=FALLBACK_IMPROVEMENT,
        affected_platforms=list(ALL_PLATFORMS),
    )


def _dedupe_by_code(issues: Iterable[Issue]) -> dict[str, Issue]:
    """Keep one issue per code, preferring the most severe instance."""
    by_code: dict[str, Issue] = {}
    for issue in issues:
        code = str(issue.code)
        existing = by_code.get(code)
        if existing is None or SEVERITY_RANK[issue.severity] < SEVERITY_RANK[existing.severity]:
            by_code[code] = issue
    return by_code


def generate_recommendations(
    issues: Iterable[Issue],
    overall_score: int,
    max_recommendations: int | None = None,
) -> list[Recommendation]:
    """
    Build a prioritized, deduplicated recommendation list.

    Args:
        issues: Issues from a scoring result
        overall_score: The page's overall score; low scores boost estimates
        max_recommendations: Cap on results (defaults to settings)

    Returns:
        Recommendations sorted by priority, impact, then estimated
        improvement (descending)
    """
    if max_recommendations is None:
        max_recommendations = get_settings().max_recommendations
    bonus = LOW_SCORE_BONUS if overall_score < LOW_SCORE_THRESHOLD else 0

    recommendations: list[Recommendation] = []
    for code in _dedupe_by_code(issues):
        definition = find_issue_definition(code)
        if definition is None:
            logger.debug("recommendation_fallback_template", code=code)
            recommendation = _fallback(code)
        else:
            recommendation = _from_definition(definition)
        recommendation.estimated_improvement += bonus
        recommendations.append(recommendation)

    recommendations.sort(
        key=lambda rec: (
            _RANK[rec.priority.value],
            _RANK[rec.impact.value],
            -rec.estimated_improvement,
        )
    )
    return recommendations[:max_recommendations]


STRENGTH_THRESHOLDS: dict[IssueCategory, int] = {
    IssueCategory.TECHNICAL: 85,
    IssueCategory.CONTENT: 88,
    IssueCategory.AI_READINESS: 85,
    IssueCategory.PERFORMANCE: 80,
}

STRENGTH_TEMPLATES: dict[IssueCategory, tuple[str, str]] = {
    IssueCategory.TECHNICAL: (
        "Technical foundation is solid",
        "Core SEO infrastructure (indexation, canonicals, metadata) is in great shape.",
    ),
    IssueCategory.CONTENT: (
        "Content depth and structure stand out",
        "Pages provide comprehensive coverage with clear hierarchy and supporting assets.",
    ),
    IssueCategory.AI_READINESS: (
        "Optimized for AI discovery",
        "Structured data, crawler access, and llms.txt signals are configured well.",
    ),
    IssueCategory.PERFORMANCE: (
        "Fast, stable experience",
        "Lighthouse and Core Web Vitals indicators show consistently quick rendering.",
    ),
}


def generate_strengths(
    category_scores: Mapping[str, int],
    issues: Iterable[Issue],
    max_strengths: int | None = None,
) -> list[Strength]:
    """
    List pillars the page does well on.

    A pillar qualifies when its score meets its threshold and no critical
    issue was raised in that category.

    Args:
        category_scores: Pillar scores keyed by category
            (``ScoringResult.category_scores``)
        issues: Issues from the same scoring result
        max_strengths: Cap on results (defaults to settings)
    """
    if max_strengths is None:
        max_strengths = get_settings().max_strengths
    critical_categories = {
        issue.category for issue in issues if issue.severity == IssueSeverity.CRITICAL
    }

    strengths: list[Strength] = []
    for key, score in category_scores.items():
        try:
            category = IssueCategory(key)
        except ValueError:
            continue
        if category in critical_categories or score < STRENGTH_THRESHOLDS[category]:
            continue
        title, description = STRENGTH_TEMPLATES[category]
        strengths.append(Strength(category=category, title=title, description=description))

    return strengths[:max_strengths]

"""Derive legacy 4-pillar scores from the 7 dimension scores.

Downstream consumers (platform projections, strengths, stored reports)
still read the pillar fields, so the v2 engine fills them in from here.
"""

from collections.abc import Mapping

from readiness.scoring.deduction import clamp_score

# pillar -> {dimension: share}; shares per pillar sum to 1.0
LEGACY_PILLAR_COMPOSITION: dict[str, dict[str, float]] = {
    "technical": {"meta_tags": 0.40, "robots_crawlability": 0.35, "sitemap": 0.25},
    "content": {"content_citeability": 1.0},
    "ai_readiness": {"llms_txt": 0.35, "schema_markup": 0.35, "robots_crawlability": 0.30},
    "performance": {"bot_access": 1.0},
}


def dimensions_to_legacy_scores(dimension_scores: Mapping[str, float]) -> dict[str, int]:
    """Map dimension scores to technical/content/ai_readiness/performance."""
    return {
        pillar: clamp_score(
            sum(dimension_scores.get(dimension, 0) * share for dimension, share in shares.items())
        )
        for pillar, shares in LEGACY_PILLAR_COMPOSITION.items()
    }

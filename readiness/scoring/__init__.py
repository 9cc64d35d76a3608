"""Page scoring: the 4-pillar and 7-dimension engines."""

from readiness.scoring.engine import score_page
from readiness.scoring.engine_v2 import score_page_v2
from readiness.scoring.models import (
    ExtractedSignals,
    FactorResult,
    Issue,
    LighthouseScores,
    LLMContentScores,
    PageData,
    PlatformScore,
    RedirectHop,
    ScoringResult,
    ScoringResultV2,
    SiteContext,
    SitemapAnalysis,
)

__all__ = [
    # Engines
    "score_page",
    "score_page_v2",
    # Inputs
    "PageData",
    "ExtractedSignals",
    "LighthouseScores",
    "LLMContentScores",
    "RedirectHop",
    "SiteContext",
    "SitemapAnalysis",
    # Outputs
    "FactorResult",
    "Issue",
    "PlatformScore",
    "ScoringResult",
    "ScoringResultV2",
]

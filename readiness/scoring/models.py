"""Data model for page scoring.

Inputs (``PageData`` and its sub-records) describe one crawled page plus
optional site-wide context. Outputs (``ScoringResult`` and friends) are
plain dataclasses with ``to_dict()`` for JSON serialization.
"""

from dataclasses import dataclass, field
from typing import Any

from readiness.issues.registry import (
    IssueCategory,
    IssueCode,
    IssueDefinition,
    IssueSeverity,
)


@dataclass
class ExtractedSignals:
    """Signals pulled out of the page HTML by the crawler."""

    h1: list[str] = field(default_factory=list)
    h2: list[str] = field(default_factory=list)
    h3: list[str] = field(default_factory=list)
    h4: list[str] = field(default_factory=list)
    h5: list[str] = field(default_factory=list)
    h6: list[str] = field(default_factory=list)
    schema_types: list[str] = field(default_factory=list)
    internal_links: list[str] = field(default_factory=list)
    external_links: list[str] = field(default_factory=list)
    images_without_alt: int = 0
    has_robots_meta: bool = False
    robots_directives: list[str] = field(default_factory=list)
    og_tags: dict[str, str] | None = None
    structured_data: list[Any] | None = None

    # Readability
    flesch_score: float | None = None
    flesch_classification: str | None = None
    text_html_ratio: float | None = None  # Percent, 0-100
    text_length: int | None = None
    html_length: int | None = None
    top_transition_words: list[str] = field(default_factory=list)
    sentence_length_variance: float | None = None

    pdf_links: list[str] = field(default_factory=list)

    # CORS
    cors_unsafe_blank_links: int = 0
    cors_mixed_content: int = 0
    cors_has_issues: bool = False

    def headings(self, max_level: int = 6) -> list[str]:
        """All heading texts from H1 down to ``max_level``, in level order."""
        levels = [self.h1, self.h2, self.h3, self.h4, self.h5, self.h6]
        return [text for level in levels[:max_level] for text in level]


@dataclass
class LighthouseScores:
    """Lighthouse category scores, each 0-1."""

    performance: float
    seo: float
    accessibility: float
    best_practices: float


@dataclass
class LLMContentScores:
    """LLM-judged content quality, each 0-100."""

    clarity: float
    authority: float
    comprehensiveness: float
    structure: float
    citation_worthiness: float


@dataclass
class RedirectHop:
    url: str
    status_code: int


@dataclass
class SitemapAnalysis:
    """Site-level sitemap quality, computed once per crawl."""

    is_valid: bool
    url_count: int
    stale_url_count: int = 0
    discovered_page_count: int = 0


@dataclass
class SiteContext:
    """Cross-page signals shared by every page of a crawl."""

    has_llms_txt: bool
    ai_crawlers_blocked: list[str] = field(default_factory=list)
    has_sitemap: bool = True
    content_hashes: dict[str, str] = field(default_factory=dict)  # hash -> url
    response_time_ms: float | None = None
    page_size_bytes: int | None = None
    llms_txt_content: str | None = None
    sitemap_analysis: SitemapAnalysis | None = None
    stale_content: bool = False


@dataclass
class PageData:
    """Input snapshot for one crawled page."""

    url: str
    status_code: int
    title: str | None
    meta_description: str | None
    canonical_url: str | None
    word_count: int
    content_hash: str
    extracted: ExtractedSignals
    lighthouse: LighthouseScores | None = None
    llm_scores: LLMContentScores | None = None
    redirect_chain: list[RedirectHop] | None = None
    site_context: SiteContext | None = None


@dataclass(frozen=True)
class Issue:
    """A single rule violation, always built from a registry entry."""

    code: IssueCode
    category: IssueCategory
    severity: IssueSeverity
    message: str
    recommendation: str
    data: dict[str, Any] | None = None

    @classmethod
    def from_definition(
        cls,
        definition: IssueDefinition,
        data: dict[str, Any] | None = None,
        message: str | None = None,
    ) -> "Issue":
        return cls(
            code=definition.code,
            category=definition.category,
            severity=definition.severity,
            message=message or definition.message,
            recommendation=definition.recommendation,
            data=data,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        result: dict[str, Any] = {
            "code": self.code.value,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "recommendation": self.recommendation,
        }
        if self.data is not None:
            result["data"] = self.data
        return result


@dataclass
class FactorResult:
    """Output of one pillar or dimension scorer."""

    score: int
    issues: list[Issue] = field(default_factory=list)


# Dimension scorers produce the same shape as pillar scorers.
DimensionResult = FactorResult


@dataclass
class PlatformScore:
    """Projected readiness for one AI platform."""

    platform: str
    score: int
    grade: str
    tips: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "platform": self.platform,
            "score": self.score,
            "grade": self.grade,
            "tips": list(self.tips),
        }


@dataclass
class ScoringResult:
    """Result of the 4-pillar engine."""

    overall_score: int
    technical_score: int
    content_score: int
    ai_readiness_score: int
    performance_score: int
    letter_grade: str
    platform_scores: dict[str, PlatformScore] = field(default_factory=dict)
    issues: list[Issue] = field(default_factory=list)

    @property
    def category_scores(self) -> dict[str, int]:
        """Pillar scores keyed by issue category."""
        return {
            IssueCategory.TECHNICAL.value: self.technical_score,
            IssueCategory.CONTENT.value: self.content_score,
            IssueCategory.AI_READINESS.value: self.ai_readiness_score,
            IssueCategory.PERFORMANCE.value: self.performance_score,
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API responses and storage."""
        return {
            "overall_score": self.overall_score,
            "technical_score": self.technical_score,
            "content_score": self.content_score,
            "ai_readiness_score": self.ai_readiness_score,
            "performance_score": self.performance_score,
            "letter_grade": self.letter_grade,
            "platform_scores": {
                platform: score.to_dict()
                for platform, score in self.platform_scores.items()
            },
            "issues": [issue.to_dict() for issue in self.issues],
        }


@dataclass
class ScoringResultV2(ScoringResult):
    """Result of the 7-dimension engine, with legacy pillar fields filled in."""

    dimension_scores: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["dimension_scores"] = dict(self.dimension_scores)
        return result

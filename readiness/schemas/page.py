"""Crawler payload schemas.

The crawler posts one JSON object per page. These models validate it and
convert it into the ``PageData`` the scorers consume.
"""

from typing import Any

import structlog
from pydantic import BaseModel, Field, ValidationError

from readiness.exceptions import PageDataValidationError
from readiness.scoring.models import (
    ExtractedSignals,
    LighthouseScores,
    LLMContentScores,
    PageData,
    RedirectHop,
    SiteContext,
    SitemapAnalysis,
)

logger = structlog.get_logger(__name__)


class ExtractedDataSchema(BaseModel):
    """Signals extracted from a page's HTML."""

    h1: list[str] = Field(default_factory=list)
    h2: list[str] = Field(default_factory=list)
    h3: list[str] = Field(default_factory=list)
    h4: list[str] = Field(default_factory=list)
    h5: list[str] = Field(default_factory=list)
    h6: list[str] = Field(default_factory=list)
    schema_types: list[str] = Field(default_factory=list)
    internal_links: list[str] = Field(default_factory=list)
    external_links: list[str] = Field(default_factory=list)
    images_without_alt: int = Field(default=0, ge=0)
    has_robots_meta: bool = False
    robots_directives: list[str] = Field(default_factory=list)
    og_tags: dict[str, str] | None = None
    structured_data: list[Any] | None = None

    # Readability
    flesch_score: float | None = None
    flesch_classification: str | None = None
    text_html_ratio: float | None = None
    text_length: int | None = None
    html_length: int | None = None
    top_transition_words: list[str] = Field(default_factory=list)
    sentence_length_variance: float | None = None

    pdf_links: list[str] = Field(default_factory=list)

    # CORS
    cors_unsafe_blank_links: int = Field(default=0, ge=0)
    cors_mixed_content: int = Field(default=0, ge=0)
    cors_has_issues: bool = False

    def to_signals(self) -> ExtractedSignals:
        return ExtractedSignals(**self.model_dump())


class LighthouseResultSchema(BaseModel):
    performance: float = Field(..., ge=0, le=1)
    seo: float = Field(..., ge=0, le=1)
    accessibility: float = Field(..., ge=0, le=1)
    best_practices: float = Field(..., ge=0, le=1)
    lh_r2_key: str | None = None

    def to_scores(self) -> LighthouseScores:
        return LighthouseScores(
            performance=self.performance,
            seo=self.seo,
            accessibility=self.accessibility,
            best_practices=self.best_practices,
        )


class RedirectHopSchema(BaseModel):
    url: str
    status_code: int


class CrawlPageResult(BaseModel):
    """Single page result from the crawler."""

    url: str = Field(..., min_length=1)
    status_code: int
    title: str | None = None
    meta_description: str | None = None
    canonical_url: str | None = None
    word_count: int = Field(default=0, ge=0)
    content_hash: str = ""
    html_r2_key: str | None = None
    extracted: ExtractedDataSchema = Field(default_factory=ExtractedDataSchema)
    lighthouse: LighthouseResultSchema | None = None
    timing_ms: float | None = None
    redirect_chain: list[RedirectHopSchema] = Field(default_factory=list)


class LLMScoresSchema(BaseModel):
    """LLM-judged content quality, 0-100 each."""

    clarity: float = Field(..., ge=0, le=100)
    authority: float = Field(..., ge=0, le=100)
    comprehensiveness: float = Field(..., ge=0, le=100)
    structure: float = Field(..., ge=0, le=100)
    citation_worthiness: float = Field(..., ge=0, le=100)


class SitemapAnalysisSchema(BaseModel):
    is_valid: bool
    url_count: int = Field(..., ge=0)
    stale_url_count: int = Field(default=0, ge=0)
    discovered_page_count: int = Field(default=0, ge=0)


class SiteContextSchema(BaseModel):
    """Crawl-wide context shared by every page."""

    has_llms_txt: bool
    ai_crawlers_blocked: list[str] = Field(default_factory=list)
    has_sitemap: bool = True
    content_hashes: dict[str, str] = Field(default_factory=dict)
    response_time_ms: float | None = None
    page_size_bytes: int | None = None
    llms_txt_content: str | None = None
    sitemap_analysis: SitemapAnalysisSchema | None = None
    stale_content: bool = False


class ScorePageRequest(BaseModel):
    """A page plus the optional inputs that enable extra rules."""

    page: CrawlPageResult
    llm_scores: LLMScoresSchema | None = None
    site_context: SiteContextSchema | None = None

    def to_page_data(self) -> PageData:
        page = self.page
        context = self.site_context

        site_context = None
        if context is not None:
            analysis = context.sitemap_analysis
            site_context = SiteContext(
                has_llms_txt=context.has_llms_txt,
                ai_crawlers_blocked=list(context.ai_crawlers_blocked),
                has_sitemap=context.has_sitemap,
                content_hashes=dict(context.content_hashes),
                response_time_ms=context.response_time_ms,
                page_size_bytes=context.page_size_bytes,
                llms_txt_content=context.llms_txt_content,
                sitemap_analysis=SitemapAnalysis(**analysis.model_dump()) if analysis else None,
                stale_content=context.stale_content,
            )

        return PageData(
            url=page.url,
            status_code=page.status_code,
            title=page.title,
            meta_description=page.meta_description,
            canonical_url=page.canonical_url,
            word_count=page.word_count,
            content_hash=page.content_hash,
            extracted=page.extracted.to_signals(),
            lighthouse=page.lighthouse.to_scores() if page.lighthouse else None,
            llm_scores=(
                LLMContentScores(**self.llm_scores.model_dump()) if self.llm_scores else None
            ),
            redirect_chain=[
                RedirectHop(url=hop.url, status_code=hop.status_code)
                for hop in page.redirect_chain
            ],
            site_context=site_context,
        )


def parse_page_payload(payload: dict[str, Any]) -> PageData:
    """
    Validate a raw scoring payload and build ``PageData``.

    Raises:
        PageDataValidationError: If the payload does not match the schema
    """
    try:
        request = ScorePageRequest.model_validate(payload)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        logger.warning("page_payload_invalid", error_count=len(errors))
        raise PageDataValidationError(
            f"Invalid page payload: {len(errors)} validation error(s)",
            errors=[
                {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
                for err in errors
            ],
        ) from e
    return request.to_page_data()

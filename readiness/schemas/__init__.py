"""Pydantic schemas for payloads entering the engine."""

from readiness.schemas.page import (
    CrawlPageResult,
    ExtractedDataSchema,
    LighthouseResultSchema,
    LLMScoresSchema,
    RedirectHopSchema,
    ScorePageRequest,
    SiteContextSchema,
    SitemapAnalysisSchema,
    parse_page_payload,
)

__all__ = [
    "CrawlPageResult",
    "ExtractedDataSchema",
    "LLMScoresSchema",
    "LighthouseResultSchema",
    "RedirectHopSchema",
    "ScorePageRequest",
    "SiteContextSchema",
    "SitemapAnalysisSchema",
    "parse_page_payload",
]

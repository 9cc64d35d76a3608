"""Builders for PageData.

``make_page()`` with no arguments returns a page that passes every rule in
both engines. Tests override the one or two fields they care about.
"""

from __future__ import annotations

from typing import Any

from readiness.scoring.models import (
    ExtractedSignals,
    LighthouseScores,
    LLMContentScores,
    PageData,
    RedirectHop,
    SiteContext,
    SitemapAnalysis,
)

PAGE_URL = "https://example.com/guides/ai-search"

# 38 characters
CLEAN_TITLE = "How to Prepare Your Site for AI Search"

# 128 characters
CLEAN_META_DESCRIPTION = (
    "A practical walkthrough of the signals AI assistants use to find, "
    "read and cite web pages, with a checklist you can apply today."
)

CLEAN_LLMS_TXT = """# Example.com
> Guides on preparing websites for AI search.

## Guides
- [AI search readiness](https://example.com/guides/ai-search): Full checklist
"""


def make_extracted(**overrides: Any) -> ExtractedSignals:
    """Extracted signals for a well-built page."""
    values: dict[str, Any] = {
        "h1": ["Our Research on AI Search Readiness"],
        "h2": ["Summary"],
        "schema_types": ["WebPage", "Organization"],
        "internal_links": ["/guides", "/pricing", "/about"],
        "external_links": ["https://www.nist.gov/ai", "https://schema.org/WebPage"],
        "images_without_alt": 0,
        "has_robots_meta": False,
        "robots_directives": [],
        "og_tags": {
            "og:title": CLEAN_TITLE,
            "og:description": CLEAN_META_DESCRIPTION,
            "og:image": "https://example.com/og.png",
        },
        "structured_data": [
            {
                "@context": "https://schema.org",
                "@type": "WebPage",
                "name": CLEAN_TITLE,
                "description": CLEAN_META_DESCRIPTION,
            },
            {
                "@context": "https://schema.org",
                "@type": "Organization",
                "name": "Example",
                "url": "https://example.com",
            },
        ],
        "flesch_score": 65.0,
        "flesch_classification": "standard",
        "text_html_ratio": 25.0,
        "sentence_length_variance": 40.0,
    }
    values.update(overrides)
    return ExtractedSignals(**values)


def make_lighthouse(**overrides: Any) -> LighthouseScores:
    values: dict[str, Any] = {
        "performance": 0.95,
        "seo": 0.92,
        "accessibility": 0.90,
        "best_practices": 0.88,
    }
    values.update(overrides)
    return LighthouseScores(**values)


def make_llm_scores(**overrides: Any) -> LLMContentScores:
    values: dict[str, Any] = {
        "clarity": 100,
        "authority": 100,
        "comprehensiveness": 100,
        "structure": 100,
        "citation_worthiness": 100,
    }
    values.update(overrides)
    return LLMContentScores(**values)


def make_site_context(**overrides: Any) -> SiteContext:
    values: dict[str, Any] = {
        "has_llms_txt": True,
        "ai_crawlers_blocked": [],
        "has_sitemap": True,
        "content_hashes": {"hash-clean": PAGE_URL},
        "response_time_ms": 420,
        "page_size_bytes": 512_000,
        "llms_txt_content": CLEAN_LLMS_TXT,
    }
    values.update(overrides)
    return SiteContext(**values)


def make_page(**overrides: Any) -> PageData:
    """A page that scores 100 in both engines unless overridden."""
    values: dict[str, Any] = {
        "url": PAGE_URL,
        "status_code": 200,
        "title": CLEAN_TITLE,
        "meta_description": CLEAN_META_DESCRIPTION,
        "canonical_url": PAGE_URL,
        "word_count": 800,
        "content_hash": "hash-clean",
        "extracted": make_extracted(),
        "lighthouse": make_lighthouse(),
        "llm_scores": make_llm_scores(),
        "redirect_chain": None,
        "site_context": make_site_context(),
    }
    values.update(overrides)
    return PageData(**values)


def make_neglected_page() -> PageData:
    """A page with problems spread over every pillar and dimension."""
    return make_page(
        title=None,
        meta_description=None,
        canonical_url=None,
        word_count=300,
        extracted=make_extracted(
            h1=[],
            h2=["Pricing"],
            h4=["Details"],
            images_without_alt=2,
            og_tags=None,
            internal_links=["/a"],
            external_links=[],
            structured_data=None,
            schema_types=[],
        ),
        lighthouse=make_lighthouse(performance=0.6, seo=0.7),
        llm_scores=None,
        site_context=make_site_context(
            has_llms_txt=False,
            llms_txt_content=None,
            has_sitemap=False,
            response_time_ms=2500,
            page_size_bytes=None,
        ),
    )


def make_blocked_page() -> PageData:
    """No llms.txt, GPTBot blocked and an empty structured data list."""
    return make_page(
        site_context=make_site_context(
            has_llms_txt=False,
            llms_txt_content=None,
            ai_crawlers_blocked=["GPTBot"],
        ),
        extracted=make_extracted(structured_data=[]),
    )


def make_low_quality_page(**site_overrides: Any) -> PageData:
    """Thin copied content the LLM judged worthless, behind a GPTBot block.

    Deductions pile up past zero in both the content and the ai_readiness
    pillars, which all land in the single content_citeability dimension.
    """
    site: dict[str, Any] = {
        "ai_crawlers_blocked": ["GPTBot"],
        "content_hashes": {"hash-copy": "https://example.com/guides/original"},
    }
    site.update(site_overrides)
    return make_page(
        word_count=150,
        content_hash="hash-copy",
        extracted=make_extracted(
            internal_links=[],
            pdf_links=["https://example.com/guides/ai-search.pdf"],
            structured_data=None,
            schema_types=[],
        ),
        llm_scores=make_llm_scores(
            clarity=0, authority=0, comprehensiveness=0, structure=0, citation_worthiness=0
        ),
        site_context=make_site_context(**site),
    )


def make_content_collapse_page() -> PageData:
    """Every content rule fires; nothing else is wrong except the missing files."""
    return make_page(
        content_hash="hash-copy",
        extracted=make_extracted(
            h1=["AI Search Readiness Guide"],
            h2=["Summary"],
            h3=["Setup"],
            h4=["Can crawlers read this page?"],
            internal_links=["/guides"],
            external_links=[
                "https://www.nist.gov/ai",
                "https://a.example.net",
                "https://b.example.net",
                "https://c.example.net",
            ],
            flesch_score=30.0,
            flesch_classification="difficult",
            text_html_ratio=5.0,
            top_transition_words=["moreover", "furthermore", "ultimately"],
            sentence_length_variance=5.0,
        ),
        llm_scores=make_llm_scores(clarity=0, authority=0, comprehensiveness=0),
        site_context=make_site_context(
            has_llms_txt=False,
            llms_txt_content=None,
            has_sitemap=False,
            stale_content=True,
            content_hashes={"hash-copy": "https://example.com/guides/original"},
        ),
    )


def make_failing_page() -> PageData:
    """A page that violates nearly every rule in every pillar and dimension."""
    return make_page(
        title=None,
        meta_description=None,
        canonical_url=None,
        content_hash="hash-copy",
        extracted=make_extracted(
            h1=[],
            h2=["Pricing", "What does it cost?"],
            h4=["Details"],
            images_without_alt=10,
            has_robots_meta=True,
            robots_directives=["noindex"],
            og_tags=None,
            internal_links=["/pricing"],
            external_links=[
                "https://a.example.net",
                "https://b.example.net",
                "https://c.example.net",
                "https://d.example.net",
            ],
            structured_data=[{"@type": "Article", "headline": "Pricing"}, {"name": "untyped"}],
            schema_types=["Article"],
            flesch_score=30.0,
            flesch_classification="difficult",
            text_html_ratio=5.0,
            top_transition_words=["moreover", "furthermore", "ultimately"],
            sentence_length_variance=5.0,
            cors_mixed_content=2,
            cors_unsafe_blank_links=3,
        ),
        lighthouse=make_lighthouse(
            performance=0.3, seo=0.5, accessibility=0.5, best_practices=0.5
        ),
        llm_scores=make_llm_scores(
            clarity=0, authority=0, comprehensiveness=0, structure=0, citation_worthiness=0
        ),
        redirect_chain=[
            RedirectHop(url="http://example.com/ai-search", status_code=301),
            RedirectHop(url="https://example.com/ai-search", status_code=301),
            RedirectHop(url=PAGE_URL, status_code=200),
        ],
        site_context=make_site_context(
            ai_crawlers_blocked=["GPTBot", "ClaudeBot"],
            content_hashes={"hash-copy": "https://example.com/guides/original"},
            stale_content=True,
            response_time_ms=4000,
            page_size_bytes=5_000_000,
            llms_txt_content="Just some prose about the site.\n",
            sitemap_analysis=SitemapAnalysis(
                is_valid=False, url_count=10, stale_url_count=4, discovered_page_count=50
            ),
        ),
    )

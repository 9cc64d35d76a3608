"""Rule checks.

Each ``check_*`` function inspects one aspect of a page and calls
``deduct()`` when the page violates it. Rules are independent: none reads
another's outcome, so a scorer is just an ordered list of them. Both the
4-pillar and the 7-dimension scorers are assembled from this module, which
keeps the two models from drifting apart on the rules they share.

Rules that depend on optional inputs (site context, Lighthouse, LLM
scores, redirect chain) do nothing when that input is absent.
"""

import re
from typing import Any

from readiness.issues.registry import IssueCode
from readiness.scoring import thresholds as t
from readiness.scoring.deduction import ScoreState, deduct, round_half_up
from readiness.scoring.llms_txt import analyze_llms_txt
from readiness.scoring.models import PageData

QUESTION_HEADING_PATTERN = re.compile(
    r"^(how|what|why|when|where|which|who|can|does|is|should|will)\b", re.IGNORECASE
)
DIRECT_QUESTION_PATTERN = re.compile(
    r"^(how|what|why|when|where|which|who)\b", re.IGNORECASE
)
SUMMARY_HEADING_PATTERN = re.compile(
    r"\b(summary|key takeaways?|tl;?dr|conclusion|overview|highlights?|in brief)\b",
    re.IGNORECASE,
)
EEAT_MARKER_PATTERNS = (
    re.compile(r"\b(I|me|my|mine|we|us|our)\b", re.IGNORECASE),
    re.compile(r"\b(experience|tested|verified|found|discovered)\b", re.IGNORECASE),
    re.compile(r"\b(case study|data set|analysis|research)\b", re.IGNORECASE),
)

ASSISTANT_TRANSITION_WORDS = frozenset(
    {
        "in conclusion",
        "moreover",
        "furthermore",
        "it is important to note",
        "it's important to note",
        "to summarize",
        "essentially",
        "ultimately",
    }
)

FAQ_SCHEMA_TYPES = frozenset({"faqpage", "qapage"})
ENTITY_SCHEMA_TYPES = frozenset({"Person", "Organization", "Product", "Place", "Event"})
AUTHORITATIVE_TLDS = (".gov", ".edu", ".org")
REQUIRED_OG_TAGS = ("og:title", "og:description", "og:image")

# Required properties for common schema.org types
SCHEMA_REQUIRED_PROPS: dict[str, list[str]] = {
    "Article": ["headline", "author", "datePublished"],
    "WebPage": ["name", "description"],
    "Organization": ["name", "url"],
    "Product": ["name", "description"],
    "FAQPage": ["mainEntity"],
    "LocalBusiness": ["name", "address"],
}


def _has_faq_schema(page: PageData) -> bool:
    return any(
        schema_type.lower() in FAQ_SCHEMA_TYPES for schema_type in page.extracted.schema_types
    )


def _structured_data(page: PageData) -> list[Any]:
    return page.extracted.structured_data or []


def _llm_deduction(llm_score: float) -> int:
    """Map a 0-100 LLM score onto a 0 to -20 deduction."""
    return -round_half_up((100 - llm_score) * t.LLM_SCORE_DEDUCTION_SCALE)


# --- Meta tags ---


def check_title(state: ScoreState, page: PageData) -> None:
    length = len(page.title) if page.title else 0
    if not page.title or not t.TITLE_MIN_LENGTH <= length <= t.TITLE_MAX_LENGTH:
        deduct(state, IssueCode.MISSING_TITLE, {"title_length": length})


def check_meta_description(state: ScoreState, page: PageData) -> None:
    description = page.meta_description
    length = len(description) if description else 0
    if not description or not t.META_DESC_MIN_LENGTH <= length <= t.META_DESC_MAX_LENGTH:
        deduct(state, IssueCode.MISSING_META_DESC, {"desc_length": length})


def check_og_tags(state: ScoreState, page: PageData) -> None:
    og_tags = page.extracted.og_tags or {}
    if not all(og_tags.get(tag) for tag in REQUIRED_OG_TAGS):
        deduct(state, IssueCode.MISSING_OG_TAGS)


# --- Headings and images ---


def check_h1(state: ScoreState, page: PageData) -> None:
    """Exactly one H1 is expected."""
    h1_count = len(page.extracted.h1)
    if h1_count == 0:
        deduct(state, IssueCode.MISSING_H1)
    elif h1_count > 1:
        deduct(state, IssueCode.MULTIPLE_H1, {"h1_count": h1_count})


def check_heading_hierarchy(state: ScoreState, page: PageData) -> None:
    """Flag the first skipped heading level only."""
    extracted = page.extracted
    levels = [
        level
        for level, texts in enumerate(
            [extracted.h1, extracted.h2, extracted.h3, extracted.h4, extracted.h5, extracted.h6],
            start=1,
        )
        if texts
    ]
    for previous, current in zip(levels, levels[1:]):
        if current - previous > 1:
            deduct(
                state,
                IssueCode.HEADING_HIERARCHY,
                {"skipped_from": f"H{previous}", "skipped_to": f"H{current}"},
            )
            return


def check_alt_text(state: ScoreState, page: PageData) -> None:
    missing = page.extracted.images_without_alt
    if missing > 0:
        penalty = min(missing * t.ALT_TEXT_PENALTY_PER_IMAGE, t.ALT_TEXT_MAX_PENALTY)
        deduct(state, IssueCode.MISSING_ALT_TEXT, -penalty, {"images_without_alt": missing})


# --- Crawlability ---


def check_http_status(state: ScoreState, page: PageData) -> None:
    if page.status_code >= t.HTTP_ERROR_STATUS:
        deduct(state, IssueCode.HTTP_STATUS, {"status_code": page.status_code})


def check_noindex(state: ScoreState, page: PageData) -> None:
    extracted = page.extracted
    if extracted.has_robots_meta and "noindex" in extracted.robots_directives:
        deduct(state, IssueCode.NOINDEX_SET)


def check_canonical(state: ScoreState, page: PageData) -> None:
    if not page.canonical_url:
        deduct(state, IssueCode.MISSING_CANONICAL)


def check_redirect_chain(state: ScoreState, page: PageData) -> None:
    chain = page.redirect_chain or []
    if len(chain) >= t.REDIRECT_CHAIN_MIN_HOPS:
        deduct(
            state,
            IssueCode.REDIRECT_CHAIN,
            {"hops": len(chain), "chain": [hop.url for hop in chain]},
        )


def check_ai_crawlers(state: ScoreState, page: PageData) -> None:
    context = page.site_context
    if context is not None and context.ai_crawlers_blocked:
        deduct(
            state,
            IssueCode.AI_CRAWLER_BLOCKED,
            {"blocked_crawlers": list(context.ai_crawlers_blocked)},
        )


# --- llms.txt ---


def check_llms_txt_present(
    state: ScoreState, page: PageData, amount: int | None = None
) -> None:
    """Site has no llms.txt. ``amount`` overrides the registry impact."""
    context = page.site_context
    if context is not None and not context.has_llms_txt:
        deduct(state, IssueCode.MISSING_LLMS_TXT, amount)


def check_llms_txt_quality(state: ScoreState, page: PageData) -> None:
    """Score llms.txt structure when its content was fetched."""
    context = page.site_context
    if context is None or not context.has_llms_txt or not context.llms_txt_content:
        return

    missing = analyze_llms_txt(context.llms_txt_content).missing_elements
    if len(missing) >= 2:
        deduct(state, IssueCode.LLMS_TXT_QUALITY, {"missing_elements": missing})
    elif len(missing) == 1:
        deduct(state, IssueCode.LLMS_TXT_INCOMPLETE, {"missing_elements": missing})


# --- Sitemap ---


def check_sitemap_present(
    state: ScoreState, page: PageData, amount: int | None = None
) -> None:
    """Site has no sitemap. ``amount`` overrides the registry impact."""
    context = page.site_context
    if context is not None and not context.has_sitemap:
        deduct(state, IssueCode.MISSING_SITEMAP, amount)


def check_sitemap_quality(state: ScoreState, page: PageData) -> None:
    context = page.site_context
    if context is None or not context.has_sitemap or context.sitemap_analysis is None:
        return

    analysis = context.sitemap_analysis
    if not analysis.is_valid:
        deduct(state, IssueCode.SITEMAP_INVALID_FORMAT)

    if analysis.stale_url_count > 0:
        deduct(
            state,
            IssueCode.SITEMAP_STALE_URLS,
            {"stale_url_count": analysis.stale_url_count},
        )

    if analysis.discovered_page_count > 0:
        coverage = analysis.url_count / analysis.discovered_page_count
        if coverage < t.SITEMAP_MIN_COVERAGE:
            deduct(
                state,
                IssueCode.SITEMAP_LOW_COVERAGE,
                {
                    "sitemap_url_count": analysis.url_count,
                    "discovered_page_count": analysis.discovered_page_count,
                },
            )


# --- Structured data ---


def check_structured_data_present(state: ScoreState, page: PageData) -> None:
    if not _structured_data(page):
        deduct(state, IssueCode.NO_STRUCTURED_DATA)


def check_schema_completeness(state: ScoreState, page: PageData) -> None:
    """Deduct once, for the first recognized schema missing required props."""
    for schema in _structured_data(page):
        if not isinstance(schema, dict):
            continue
        schema_type = schema.get("@type")
        required = SCHEMA_REQUIRED_PROPS.get(schema_type) if isinstance(schema_type, str) else None
        if not required:
            continue
        missing_props = [prop for prop in required if prop not in schema]
        if missing_props:
            deduct(
                state,
                IssueCode.INCOMPLETE_SCHEMA,
                {"schema_type": schema_type, "missing_props": missing_props},
            )
            return


def check_schema_validity(state: ScoreState, page: PageData) -> None:
    data = _structured_data(page)
    if any(not isinstance(schema, dict) or not schema.get("@type") for schema in data):
        deduct(state, IssueCode.INVALID_SCHEMA)


def check_entity_markup(state: ScoreState, page: PageData) -> None:
    if not _structured_data(page):
        return
    if not any(schema_type in ENTITY_SCHEMA_TYPES for schema_type in page.extracted.schema_types):
        deduct(state, IssueCode.MISSING_ENTITY_MARKUP)


# --- Content volume and quality ---


def check_content_length(state: ScoreState, page: PageData) -> None:
    """Tiered: under 200 words uses the registry impact, under 500 a lighter one."""
    word_count = page.word_count
    if word_count < t.THIN_CONTENT_WORDS:
        deduct(
            state,
            IssueCode.THIN_CONTENT,
            {"word_count": word_count},
            message=(
                f"This page has only {word_count} words and isn't optimized for "
                "LLM citations. Try analyzing a full article or blog post instead "
                "(500+ words recommended)."
            ),
        )
    elif word_count < t.MODERATE_CONTENT_WORDS:
        deduct(
            state,
            IssueCode.THIN_CONTENT,
            t.MODERATE_CONTENT_PENALTY,
            {"word_count": word_count},
        )


def check_llm_content_scores(state: ScoreState, page: PageData) -> None:
    """Depth, clarity and authority, each mapped from the LLM judgement."""
    scores = page.llm_scores
    if scores is None:
        return

    for code, llm_score in (
        (IssueCode.CONTENT_DEPTH, scores.comprehensiveness),
        (IssueCode.CONTENT_CLARITY, scores.clarity),
        (IssueCode.CONTENT_AUTHORITY, scores.authority),
    ):
        amount = _llm_deduction(llm_score)
        if amount < 0:
            deduct(state, code, amount, {"llm_score": llm_score})


def check_citation_worthiness(state: ScoreState, page: PageData) -> None:
    scores = page.llm_scores
    if scores is None:
        return
    amount = _llm_deduction(scores.citation_worthiness)
    if amount < 0:
        deduct(
            state,
            IssueCode.CITATION_WORTHINESS,
            amount,
            {"llm_score": scores.citation_worthiness},
        )


def check_question_coverage(state: ScoreState, page: PageData) -> None:
    scores = page.llm_scores
    if scores is not None and scores.structure < t.STRUCTURE_SCORE_POOR:
        deduct(
            state,
            IssueCode.POOR_QUESTION_COVERAGE,
            {"structure_score": scores.structure},
        )


def check_duplicate_content(state: ScoreState, page: PageData) -> None:
    context = page.site_context
    if context is None or not context.content_hashes:
        return
    other_url = context.content_hashes.get(page.content_hash)
    if other_url and other_url != page.url:
        deduct(state, IssueCode.DUPLICATE_CONTENT, {"duplicate_of": other_url})


def check_stale_content(state: ScoreState, page: PageData) -> None:
    if page.site_context is not None and page.site_context.stale_content:
        deduct(state, IssueCode.STALE_CONTENT)


# --- Links ---


def check_internal_links(state: ScoreState, page: PageData) -> None:
    internal_count = len(page.extracted.internal_links)
    if internal_count < t.MIN_INTERNAL_LINKS:
        deduct(state, IssueCode.NO_INTERNAL_LINKS, {"internal_link_count": internal_count})


def check_link_ratio(state: ScoreState, page: PageData) -> None:
    internal_count = len(page.extracted.internal_links)
    external_count = len(page.extracted.external_links)
    if internal_count > 0 and external_count > internal_count * t.EXCESSIVE_LINK_RATIO:
        deduct(
            state,
            IssueCode.EXCESSIVE_LINKS,
            {"internal_count": internal_count, "external_count": external_count},
        )


def check_authoritative_citations(state: ScoreState, page: PageData) -> None:
    has_citation = any(
        tld in link.lower()
        for link in page.extracted.external_links
        for tld in AUTHORITATIVE_TLDS
    )
    if not has_citation and page.word_count > t.AUTHORITATIVE_CITATION_MIN_WORDS:
        deduct(state, IssueCode.MISSING_AUTHORITATIVE_CITATIONS)


def check_pdf_only_content(state: ScoreState, page: PageData) -> None:
    pdf_count = len(page.extracted.pdf_links)
    if pdf_count > 0 and page.word_count < t.PDF_ONLY_CONTENT_MAX_WORDS:
        deduct(
            state,
            IssueCode.PDF_ONLY_CONTENT,
            {"pdf_count": pdf_count, "word_count": page.word_count},
        )


# --- Question and answer shape ---


def check_faq_structure(state: ScoreState, page: PageData) -> None:
    """Question-shaped headings without FAQPage/QAPage markup."""
    has_questions = any(
        "?" in heading or QUESTION_HEADING_PATTERN.match(heading)
        for heading in page.extracted.headings()
    )
    if has_questions and not _has_faq_schema(page):
        deduct(state, IssueCode.MISSING_FAQ_STRUCTURE)


def check_direct_answers(state: ScoreState, page: PageData) -> None:
    if page.word_count < t.DIRECT_ANSWER_MIN_WORDS:
        return
    has_questions = any(
        "?" in heading or DIRECT_QUESTION_PATTERN.match(heading)
        for heading in page.extracted.headings(max_level=3)
    )
    if has_questions and not _has_faq_schema(page):
        deduct(state, IssueCode.NO_DIRECT_ANSWERS)


def check_summary_section(state: ScoreState, page: PageData) -> None:
    if page.word_count < t.SUMMARY_SECTION_MIN_WORDS:
        return
    if not any(
        SUMMARY_HEADING_PATTERN.search(heading)
        for heading in page.extracted.headings(max_level=3)
    ):
        deduct(state, IssueCode.NO_SUMMARY_SECTION)


# --- Readability ---


def check_readability(state: ScoreState, page: PageData) -> None:
    flesch = page.extracted.flesch_score
    if flesch is None:
        return
    data = {
        "flesch_score": flesch,
        "classification": page.extracted.flesch_classification,
    }
    if flesch < t.FLESCH_POOR:
        deduct(state, IssueCode.POOR_READABILITY, data)
    elif flesch < t.FLESCH_MODERATE:
        deduct(state, IssueCode.POOR_READABILITY, t.FLESCH_MODERATE_PENALTY, data)


def check_text_html_ratio(state: ScoreState, page: PageData) -> None:
    ratio = page.extracted.text_html_ratio
    if ratio is not None and ratio < t.TEXT_HTML_RATIO_MIN:
        deduct(state, IssueCode.LOW_TEXT_HTML_RATIO, {"text_html_ratio": round(ratio, 2)})


def check_assistant_speak(state: ScoreState, page: PageData) -> None:
    detected = [
        word
        for word in page.extracted.top_transition_words
        if word.lower() in ASSISTANT_TRANSITION_WORDS
    ]
    if len(detected) >= t.AI_ASSISTANT_SPEAK_MIN_COUNT:
        deduct(state, IssueCode.AI_ASSISTANT_SPEAK, {"detected_words": detected})


def check_sentence_variance(state: ScoreState, page: PageData) -> None:
    variance = page.extracted.sentence_length_variance
    if (
        page.word_count >= t.THIN_CONTENT_WORDS
        and variance is not None
        and variance < t.SENTENCE_LENGTH_VARIANCE_MIN
    ):
        deduct(state, IssueCode.UNIFORM_SENTENCE_LENGTH, {"variance": round(variance, 2)})


def check_experience_markers(state: ScoreState, page: PageData) -> None:
    """E-E-A-T: first-person, experience or research language in H1/H2."""
    if page.word_count < t.EEAT_MIN_WORDS:
        return
    has_marker = any(
        pattern.search(heading)
        for heading in page.extracted.headings(max_level=2)
        for pattern in EEAT_MARKER_PATTERNS
    )
    if not has_marker:
        deduct(state, IssueCode.LOW_EEAT_SCORE)


# --- Transport and performance ---


def check_response_time(state: ScoreState, page: PageData) -> None:
    response_time = page.site_context.response_time_ms if page.site_context else None
    if response_time and response_time > t.SLOW_RESPONSE_MS:
        deduct(state, IssueCode.SLOW_RESPONSE, {"response_time_ms": response_time})


def check_page_size(state: ScoreState, page: PageData) -> None:
    size = page.site_context.page_size_bytes if page.site_context else None
    if size and size > t.LARGE_PAGE_SIZE_BYTES:
        deduct(state, IssueCode.LARGE_PAGE_SIZE, {"page_size_bytes": size})


def check_lighthouse(state: ScoreState, page: PageData) -> None:
    """Performance is tiered; SEO, accessibility and best practices are flat."""
    lighthouse = page.lighthouse
    if lighthouse is None:
        return

    performance = lighthouse.performance
    if performance < t.LH_PERF_POOR:
        deduct(state, IssueCode.LH_PERF_LOW, t.LH_PERF_POOR_PENALTY, {"score": performance})
    elif performance < t.LH_PERF_MODERATE:
        deduct(state, IssueCode.LH_PERF_LOW, t.LH_PERF_MODERATE_PENALTY, {"score": performance})

    if lighthouse.seo < t.LH_SEO_MIN:
        deduct(state, IssueCode.LH_SEO_LOW, {"score": lighthouse.seo})
    if lighthouse.accessibility < t.LH_A11Y_MIN:
        deduct(state, IssueCode.LH_A11Y_LOW, {"score": lighthouse.accessibility})
    if lighthouse.best_practices < t.LH_BP_MIN:
        deduct(state, IssueCode.LH_BP_LOW, {"score": lighthouse.best_practices})


def check_mixed_content(state: ScoreState, page: PageData) -> None:
    count = page.extracted.cors_mixed_content
    if count > 0:
        deduct(state, IssueCode.CORS_MIXED_CONTENT, {"mixed_content_count": count})


def check_unsafe_blank_links(state: ScoreState, page: PageData) -> None:
    count = page.extracted.cors_unsafe_blank_links
    if count > 0:
        deduct(state, IssueCode.CORS_UNSAFE_LINKS, {"unsafe_link_count": count})

"""7-dimension scorers.

Each dimension maps to a concrete site capability. They reuse the same
rule bodies as the legacy pillars; only the grouping differs, plus two
presence checks that own a whole dimension (no llms.txt or no sitemap
zeroes that dimension) and the llms.txt quality check.

Shared rules are rescaled per dimension so that a violation takes the
same number of overall points in both models: an issue filed under a
pillar with weight ``w`` costs ``w / d`` times its amount inside a
dimension with weight ``d``. The llms.txt dimension holds no shared
quality rules and keeps registry amounts.
"""

from collections.abc import Callable
from functools import partial

from readiness.scoring import rules
from readiness.scoring.deduction import Rule, run_rules
from readiness.scoring.models import DimensionResult, PageData
from readiness.scoring.weights import DEFAULT_DIMENSION_WEIGHTS, DEFAULT_PILLAR_WEIGHTS

# Missing the file means the dimension has nothing left to score.
WHOLE_DIMENSION_PENALTY = -100

LLMS_TXT_RULES: tuple[Rule, ...] = (
    partial(rules.check_llms_txt_present, amount=WHOLE_DIMENSION_PENALTY),
    rules.check_llms_txt_quality,
)

ROBOTS_CRAWLABILITY_RULES: tuple[Rule, ...] = (
    rules.check_http_status,
    rules.check_noindex,
    rules.check_ai_crawlers,
    rules.check_canonical,
    rules.check_redirect_chain,
)

SITEMAP_RULES: tuple[Rule, ...] = (
    partial(rules.check_sitemap_present, amount=WHOLE_DIMENSION_PENALTY),
    rules.check_sitemap_quality,
)

SCHEMA_MARKUP_RULES: tuple[Rule, ...] = (
    rules.check_structured_data_present,
    rules.check_schema_completeness,
    rules.check_entity_markup,
    rules.check_schema_validity,
)

META_TAGS_RULES: tuple[Rule, ...] = (
    rules.check_title,
    rules.check_meta_description,
    rules.check_og_tags,
)

BOT_ACCESS_RULES: tuple[Rule, ...] = (
    rules.check_response_time,
    rules.check_lighthouse,
    rules.check_page_size,
    rules.check_mixed_content,
    rules.check_unsafe_blank_links,
)

CONTENT_CITEABILITY_RULES: tuple[Rule, ...] = (
    # Structure
    rules.check_h1,
    rules.check_heading_hierarchy,
    rules.check_alt_text,
    # Content
    rules.check_content_length,
    rules.check_llm_content_scores,
    rules.check_duplicate_content,
    rules.check_stale_content,
    rules.check_internal_links,
    rules.check_link_ratio,
    rules.check_faq_structure,
    rules.check_readability,
    rules.check_text_html_ratio,
    rules.check_assistant_speak,
    rules.check_sentence_variance,
    rules.check_experience_markers,
    # Citeability
    rules.check_authoritative_citations,
    rules.check_citation_worthiness,
    rules.check_direct_answers,
    rules.check_summary_section,
    rules.check_question_coverage,
    rules.check_pdf_only_content,
)


def pillar_alignment(dimension: str) -> dict[str, float]:
    """Category -> deduction multiplier for one dimension at default weights."""
    share = DEFAULT_DIMENSION_WEIGHTS[dimension]
    return {pillar: weight / share for pillar, weight in DEFAULT_PILLAR_WEIGHTS.items()}


DIMENSION_SCALES: dict[str, dict[str, float] | None] = {
    "llms_txt": None,
    "robots_crawlability": pillar_alignment("robots_crawlability"),
    "sitemap": pillar_alignment("sitemap"),
    "schema_markup": pillar_alignment("schema_markup"),
    "meta_tags": pillar_alignment("meta_tags"),
    "bot_access": pillar_alignment("bot_access"),
    "content_citeability": pillar_alignment("content_citeability"),
}


def score_llms_txt(page: PageData) -> DimensionResult:
    return run_rules(page, LLMS_TXT_RULES)


def score_robots_crawlability(page: PageData) -> DimensionResult:
    return run_rules(page, ROBOTS_CRAWLABILITY_RULES, DIMENSION_SCALES["robots_crawlability"])


def score_sitemap(page: PageData) -> DimensionResult:
    return run_rules(page, SITEMAP_RULES, DIMENSION_SCALES["sitemap"])


def score_schema_markup(page: PageData) -> DimensionResult:
    return run_rules(page, SCHEMA_MARKUP_RULES, DIMENSION_SCALES["schema_markup"])


def score_meta_tags(page: PageData) -> DimensionResult:
    return run_rules(page, META_TAGS_RULES, DIMENSION_SCALES["meta_tags"])


def score_bot_access(page: PageData) -> DimensionResult:
    return run_rules(page, BOT_ACCESS_RULES, DIMENSION_SCALES["bot_access"])


def score_content_citeability(page: PageData) -> DimensionResult:
    """Headings, content quality and answerability in one dimension."""
    return run_rules(page, CONTENT_CITEABILITY_RULES, DIMENSION_SCALES["content_citeability"])


DIMENSION_SCORERS: dict[str, Callable[[PageData], DimensionResult]] = {
    "llms_txt": score_llms_txt,
    "robots_crawlability": score_robots_crawlability,
    "sitemap": score_sitemap,
    "schema_markup": score_schema_markup,
    "meta_tags": score_meta_tags,
    "bot_access": score_bot_access,
    "content_citeability": score_content_citeability,
}

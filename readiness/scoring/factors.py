"""Legacy 4-pillar factor scorers.

Technical, Content, AI Readiness and Performance each start at 100 and
lose points per violated rule. The rule bodies live in ``rules``; this
module only decides which rules feed which pillar, and in what order.
"""

from readiness.scoring import rules
from readiness.scoring.deduction import Rule, run_rules
from readiness.scoring.models import FactorResult, PageData

TECHNICAL_RULES: tuple[Rule, ...] = (
    rules.check_title,
    rules.check_meta_description,
    rules.check_h1,
    rules.check_heading_hierarchy,
    rules.check_http_status,
    rules.check_noindex,
    rules.check_canonical,
    rules.check_alt_text,
    rules.check_og_tags,
    rules.check_response_time,
    rules.check_sitemap_present,
    rules.check_redirect_chain,
    rules.check_sitemap_quality,
    rules.check_mixed_content,
    rules.check_unsafe_blank_links,
)

CONTENT_RULES: tuple[Rule, ...] = (
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
)

AI_READINESS_RULES: tuple[Rule, ...] = (
    rules.check_llms_txt_present,
    rules.check_ai_crawlers,
    rules.check_structured_data_present,
    rules.check_schema_completeness,
    rules.check_citation_worthiness,
    rules.check_direct_answers,
    rules.check_entity_markup,
    rules.check_summary_section,
    rules.check_question_coverage,
    rules.check_schema_validity,
    rules.check_authoritative_citations,
    rules.check_pdf_only_content,
)

PERFORMANCE_RULES: tuple[Rule, ...] = (
    rules.check_lighthouse,
    rules.check_page_size,
)


def score_technical_factors(page: PageData) -> FactorResult:
    """Meta tags, headings, indexability, transport and sitemap."""
    return run_rules(page, TECHNICAL_RULES)


def score_content_factors(page: PageData) -> FactorResult:
    """Volume, LLM-judged quality, links, Q&A shape and readability."""
    return run_rules(page, CONTENT_RULES)


def score_ai_readiness_factors(page: PageData) -> FactorResult:
    """llms.txt, AI crawler access, structured data and answerability."""
    return run_rules(page, AI_READINESS_RULES)


def score_performance_factors(page: PageData) -> FactorResult:
    """Lighthouse categories and page weight."""
    return run_rules(page, PERFORMANCE_RULES)

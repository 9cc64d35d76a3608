"""Page builders shared across the test suite."""

from tests.fixtures.pages import (
    CLEAN_LLMS_TXT,
    make_blocked_page,
    make_content_collapse_page,
    make_extracted,
    make_failing_page,
    make_lighthouse,
    make_llm_scores,
    make_low_quality_page,
    make_neglected_page,
    make_page,
    make_site_context,
)

__all__ = [
    "CLEAN_LLMS_TXT",
    "make_blocked_page",
    "make_content_collapse_page",
    "make_extracted",
    "make_failing_page",
    "make_lighthouse",
    "make_llm_scores",
    "make_low_quality_page",
    "make_neglected_page",
    "make_page",
    "make_site_context",
]

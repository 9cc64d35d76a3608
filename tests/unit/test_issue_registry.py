"""Tests for the issue definition registry."""

import pytest

from readiness.issues import (
    ISSUE_DEFINITIONS,
    EffortLevel,
    IssueCategory,
    IssueCode,
    IssueSeverity,
    find_issue_definition,
    get_codes_by_category,
    get_codes_by_severity,
    get_issue_definition,
)


class TestRegistryIntegrity:
    """Every code has exactly one well-formed definition."""

    def test_every_code_is_registered(self) -> None:
        """No IssueCode is missing from the table."""
        assert set(ISSUE_DEFINITIONS) == set(IssueCode)

    def test_definition_keys_match_codes(self) -> None:
        """Each entry is stored under its own code."""
        for code, definition in ISSUE_DEFINITIONS.items():
            assert definition.code == code

    def test_impacts_are_never_positive(self) -> None:
        """Issues only ever take points away."""
        for definition in ISSUE_DEFINITIONS.values():
            assert definition.score_impact <= 0, definition.code

    def test_copy_is_present(self) -> None:
        """Message and recommendation are non-empty for every code."""
        for definition in ISSUE_DEFINITIONS.values():
            assert definition.message.strip()
            assert definition.recommendation.strip()


class TestKnownDefinitions:
    """Spot checks on entries other modules depend on."""

    def test_missing_llms_txt(self) -> None:
        """MISSING_LLMS_TXT is a critical AI readiness issue worth 20 points."""
        definition = get_issue_definition(IssueCode.MISSING_LLMS_TXT)
        assert definition.category == IssueCategory.AI_READINESS
        assert definition.severity == IssueSeverity.CRITICAL
        assert definition.score_impact == -20

    def test_ai_crawler_blocked(self) -> None:
        """Blocking AI crawlers costs 25 points."""
        definition = get_issue_definition(IssueCode.AI_CRAWLER_BLOCKED)
        assert definition.severity == IssueSeverity.CRITICAL
        assert definition.score_impact == -25
        assert definition.effort_level == EffortLevel.LOW

    def test_llm_mapped_codes_have_zero_default(self) -> None:
        """LLM-derived codes always pass an explicit amount."""
        for code in (
            IssueCode.CONTENT_DEPTH,
            IssueCode.CONTENT_CLARITY,
            IssueCode.CONTENT_AUTHORITY,
            IssueCode.CITATION_WORTHINESS,
        ):
            assert get_issue_definition(code).score_impact == 0

    def test_to_dict(self) -> None:
        """Serialized definitions use plain string values."""
        data = get_issue_definition(IssueCode.MISSING_TITLE).to_dict()
        assert data["code"] == "MISSING_TITLE"
        assert data["category"] == "technical"
        assert data["severity"] == "critical"
        assert data["score_impact"] == -15


class TestLookups:
    """Strict and lenient lookup helpers."""

    def test_get_issue_definition_unknown_raises(self) -> None:
        """The strict lookup raises for unregistered keys."""
        with pytest.raises(KeyError):
            get_issue_definition("NOT_A_CODE")  # type: ignore[arg-type]

    def test_find_accepts_plain_strings(self) -> None:
        """Stored issues come back as strings."""
        definition = find_issue_definition("MISSING_H1")
        assert definition is not None
        assert definition.code == IssueCode.MISSING_H1

    def test_find_unknown_returns_none(self) -> None:
        """Unknown strings resolve to None instead of raising."""
        assert find_issue_definition("RETIRED_CODE") is None

    def test_find_with_custom_registry(self) -> None:
        """A code absent from a custom table is treated as unknown."""
        assert find_issue_definition(IssueCode.MISSING_H1, registry={}) is None

    def test_codes_by_category(self) -> None:
        """Performance holds only the Lighthouse and page weight codes."""
        assert set(get_codes_by_category(IssueCategory.PERFORMANCE)) == {
            IssueCode.LH_PERF_LOW,
            IssueCode.LH_SEO_LOW,
            IssueCode.LH_A11Y_LOW,
            IssueCode.LH_BP_LOW,
            IssueCode.LARGE_PAGE_SIZE,
        }

    def test_codes_by_severity(self) -> None:
        """Severity filter accepts plain strings."""
        critical = get_codes_by_severity("critical")
        assert IssueCode.MISSING_TITLE in critical
        assert IssueCode.HTTP_STATUS in critical
        assert IssueCode.MISSING_OG_TAGS not in critical

    def test_categories_partition_codes(self) -> None:
        """Every code belongs to exactly one category."""
        total = sum(len(get_codes_by_category(category)) for category in IssueCategory)
        assert total == len(IssueCode)

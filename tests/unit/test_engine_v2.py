"""Tests for the 7-dimension scoring engine and its dimension scorers."""

import pytest

from readiness.issues.registry import IssueCode
from readiness.scoring import score_page_v2
from readiness.scoring.dimensions import (
    DIMENSION_SCORERS,
    score_bot_access,
    score_content_citeability,
    score_llms_txt,
    score_meta_tags,
    score_robots_crawlability,
    score_schema_markup,
    score_sitemap,
)
from readiness.scoring.weights import DIMENSION_IDS
from tests.fixtures.pages import (
    make_blocked_page,
    make_neglected_page,
    make_page,
    make_site_context,
)


class TestDimensionScorers:
    """Each dimension scorer in isolation."""

    def test_registry_covers_every_dimension(self) -> None:
        assert set(DIMENSION_SCORERS) == set(DIMENSION_IDS)

    def test_clean_page(self) -> None:
        page = make_page()
        for dimension, scorer in DIMENSION_SCORERS.items():
            result = scorer(page)
            assert result.score == 100, dimension
            assert result.issues == [], dimension

    def test_neglected_page(self) -> None:
        page = make_neglected_page()
        assert score_llms_txt(page).score == 0
        assert score_robots_crawlability(page).score == 89
        assert score_sitemap(page).score == 0
        assert score_schema_markup(page).score == 44
        assert score_meta_tags(page).score == 17
        assert score_bot_access(page).score == 55
        assert score_content_citeability(page).score == 77

    def test_missing_llms_txt_zeroes_dimension(self) -> None:
        """The whole dimension is lost, and the issue keeps its registry copy."""
        page = make_page(site_context=make_site_context(has_llms_txt=False))
        result = score_llms_txt(page)
        assert result.score == 0
        assert [issue.code for issue in result.issues] == [IssueCode.MISSING_LLMS_TXT]

    def test_missing_sitemap_zeroes_dimension(self) -> None:
        page = make_page(site_context=make_site_context(has_sitemap=False))
        assert score_sitemap(page).score == 0

    def test_incomplete_llms_txt(self) -> None:
        context = make_site_context(llms_txt_content="# Site\n> About\n\n## Docs\n")
        result = score_llms_txt(make_page(site_context=context))
        assert result.score == 90
        assert result.issues[0].code == IssueCode.LLMS_TXT_INCOMPLETE


class TestScorePageV2:
    """Overall score, grade and legacy fields."""

    def test_clean_page(self) -> None:
        result = score_page_v2(make_page())
        assert result.overall_score == 100
        assert result.dimension_scores == {dimension: 100 for dimension in DIMENSION_IDS}
        assert result.category_scores == {
            "technical": 100,
            "content": 100,
            "ai_readiness": 100,
            "performance": 100,
        }
        assert result.issues == []

    def test_blocked_page(self) -> None:
        result = score_page_v2(make_blocked_page())
        assert result.dimension_scores["llms_txt"] == 0
        assert result.dimension_scores["robots_crawlability"] == 61
        assert result.dimension_scores["schema_markup"] == 44
        assert result.overall_score == 81
        assert result.letter_grade == "B"
        assert result.technical_score == 86
        assert result.ai_readiness_score == 34
        assert result.content_score == 100
        assert result.performance_score == 100

    def test_platforms_use_derived_pillars(self) -> None:
        result = score_page_v2(make_blocked_page())
        assert result.platform_scores["chatgpt"].score == 77
        assert result.platform_scores["chatgpt"].grade == "C"

    def test_neglected_page(self) -> None:
        result = score_page_v2(make_neglected_page())
        assert result.overall_score == 60
        assert result.letter_grade == "D"
        assert result.category_scores == {
            "technical": 38,
            "content": 77,
            "ai_readiness": 42,
            "performance": 55,
        }

    def test_equal_weights(self) -> None:
        weights = {dimension: 1 for dimension in DIMENSION_IDS}
        assert score_page_v2(make_blocked_page(), weights=weights).overall_score == 72

    def test_invalid_weights_fall_back(self) -> None:
        weights = {dimension: 0 for dimension in DIMENSION_IDS}
        assert score_page_v2(make_blocked_page(), weights=weights).overall_score == 81

    @pytest.mark.parametrize("status_code", [404, 500])
    def test_error_page(self, status_code: int) -> None:
        result = score_page_v2(make_page(status_code=status_code))
        assert result.overall_score == 0
        assert result.letter_grade == "F"
        assert result.dimension_scores == {dimension: 0 for dimension in DIMENSION_IDS}
        assert result.platform_scores == {}
        assert [issue.code for issue in result.issues] == [IssueCode.HTTP_STATUS]
        assert result.issues[0].message == f"Page returned HTTP {status_code}"

    def test_to_dict_includes_dimensions(self) -> None:
        data = score_page_v2(make_blocked_page()).to_dict()
        assert data["dimension_scores"]["llms_txt"] == 0
        assert data["technical_score"] == 86
        assert data["letter_grade"] == "B"

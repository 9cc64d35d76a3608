"""Tests for the dimension-to-pillar adapter."""

import pytest

from readiness.scoring.adapter import LEGACY_PILLAR_COMPOSITION, dimensions_to_legacy_scores
from readiness.scoring.weights import DIMENSION_IDS, PILLAR_IDS


class TestComposition:
    """The composition table itself."""

    def test_covers_every_pillar(self) -> None:
        assert set(LEGACY_PILLAR_COMPOSITION) == set(PILLAR_IDS)

    def test_shares_sum_to_one(self) -> None:
        for pillar, shares in LEGACY_PILLAR_COMPOSITION.items():
            assert sum(shares.values()) == pytest.approx(1.0), pillar

    def test_only_known_dimensions(self) -> None:
        for shares in LEGACY_PILLAR_COMPOSITION.values():
            assert set(shares) <= set(DIMENSION_IDS)


class TestDimensionsToLegacyScores:
    """Blending dimension scores into pillar scores."""

    def test_perfect(self) -> None:
        scores = dimensions_to_legacy_scores({dimension: 100 for dimension in DIMENSION_IDS})
        assert scores == {"technical": 100, "content": 100, "ai_readiness": 100, "performance": 100}

    def test_blend(self) -> None:
        scores = dimensions_to_legacy_scores(
            {
                "llms_txt": 0,
                "robots_crawlability": 75,
                "sitemap": 100,
                "schema_markup": 85,
                "meta_tags": 100,
                "bot_access": 90,
                "content_citeability": 70,
            }
        )
        # 40 + 26.25 + 25 and 0 + 29.75 + 22.5
        assert scores == {"technical": 91, "content": 70, "ai_readiness": 52, "performance": 90}

    def test_missing_dimensions_count_as_zero(self) -> None:
        scores = dimensions_to_legacy_scores({"content_citeability": 80})
        assert scores == {"technical": 0, "content": 80, "ai_readiness": 0, "performance": 0}

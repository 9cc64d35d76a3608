"""Letter grades and score aggregation across pages."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from readiness.scoring.deduction import round_half_up

GRADE_CUTOFFS: tuple[tuple[int, str], ...] = (
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
)


def letter_grade(score: float) -> str:
    """Map a 0-100 score to A-F."""
    for cutoff, grade in GRADE_CUTOFFS:
        if score >= cutoff:
            return grade
    return "F"


def average_scores(values: Iterable[float | None]) -> int:
    """Rounded mean of the non-null values, or 0 when there are none."""
    present = [value for value in values if value is not None]
    if not present:
        return 0
    return round_half_up(sum(present) / len(present))


@dataclass
class SiteScoreSummary:
    """Site-level rollup of many page scores."""

    overall_score: int
    letter_grade: str
    scores: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "overall_score": self.overall_score,
            "letter_grade": self.letter_grade,
            "scores": dict(self.scores),
        }


def aggregate_page_scores(rows: Iterable[Mapping[str, Any]]) -> SiteScoreSummary:
    """
    Average per-page scores into one site summary.

    Each row may hold ``overall_score``, ``technical_score``,
    ``content_score``, ``ai_readiness_score`` and ``performance_score``;
    missing or null values are skipped rather than counted as zero.
    """
    rows = list(rows)
    overall = average_scores(row.get("overall_score") for row in rows)
    scores = {
        pillar: average_scores(row.get(f"{pillar}_score") for row in rows)
        for pillar in ("technical", "content", "ai_readiness", "performance")
    }
    return SiteScoreSummary(
        overall_score=overall,
        letter_grade=letter_grade(overall),
        scores=scores,
    )

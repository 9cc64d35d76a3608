"""Deduction primitive shared by every scorer.

A scorer starts a ``ScoreState`` at 100, calls ``deduct()`` once per
violated rule and reads the final score back. The state never outlives
the scorer call that created it.
"""

import math
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

import structlog

from readiness.issues.registry import (
    SEVERITY_RANK,
    IssueCode,
    IssueDefinition,
    find_issue_definition,
)
from readiness.scoring.models import FactorResult, Issue, PageData

logger = structlog.get_logger(__name__)

MAX_SCORE = 100


@dataclass
class ScoreState:
    """Running score and issue list for one scorer invocation.

    ``scale`` maps an issue category to a multiplier for its deductions; scorers
    without one deduct registry amounts as-is.
    """

    score: float = MAX_SCORE
    issues: list[Issue] = field(default_factory=list)
    scale: Mapping[str, float] | None = None

    def to_result(self) -> FactorResult:
        return FactorResult(score=clamp_score(self.score), issues=list(self.issues))


Rule = Callable[[ScoreState, PageData], None]


def deduct(
    state: ScoreState,
    code: IssueCode | str,
    amount: int | Mapping[str, Any] | None = None,
    data: Mapping[str, Any] | None = None,
    *,
    message: str | None = None,
    registry: dict[IssueCode, IssueDefinition] | None = None,
) -> None:
    """Apply one deduction to ``state``.

    ``amount`` may be omitted to use the registry's default impact, or a
    mapping may be passed in its place as the issue data. Unregistered
    codes leave the state untouched.
    """
    definition = find_issue_definition(code, registry)
    if definition is None:
        logger.debug("unknown_issue_code_skipped", code=str(code))
        return

    if isinstance(amount, Mapping):
        data = amount
        amount = None

    impact = definition.score_impact if amount is None else amount
    if state.scale is not None:
        impact *= state.scale.get(definition.category, 1.0)
    state.score = max(0, state.score + impact)
    state.issues.append(
        Issue.from_definition(
            definition,
            data=dict(data) if data is not None else None,
            message=message,
        )
    )


def run_rules(
    page: PageData,
    rules: Iterable[Rule],
    scale: Mapping[str, float] | None = None,
) -> FactorResult:
    """Run rules in order against a fresh state."""
    state = ScoreState(scale=scale)
    for rule in rules:
        rule(state, page)
    return state.to_result()


def round_half_up(value: float) -> int:
    """Round halves toward positive infinity, matching JavaScript's Math.round."""
    return math.floor(value + 0.5)


def clamp_score(value: float) -> int:
    """Round and force a score into [0, 100]."""
    return max(0, min(MAX_SCORE, round_half_up(value)))


def sort_issues(issues: Iterable[Issue]) -> list[Issue]:
    """Stable sort by severity: critical, then warning, then info."""
    return sorted(issues, key=lambda issue: SEVERITY_RANK[issue.severity])

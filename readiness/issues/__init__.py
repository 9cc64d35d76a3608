"""Issue vocabulary shared by the scorers and the recommendation generator."""

from readiness.issues.registry import (
    ISSUE_DEFINITIONS,
    EffortLevel,
    IssueCategory,
    IssueCode,
    IssueDefinition,
    IssueSeverity,
    find_issue_definition,
    get_codes_by_category,
    get_codes_by_severity,
    get_issue_definition,
)

__all__ = [
    "ISSUE_DEFINITIONS",
    "EffortLevel",
    "IssueCategory",
    "IssueCode",
    "IssueDefinition",
    "IssueSeverity",
    "find_issue_definition",
    "get_codes_by_category",
    "get_codes_by_severity",
    "get_issue_definition",
]

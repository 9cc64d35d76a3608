"""Per-platform score projections.

Each AI assistant weighs the four pillars differently: Claude leans on
content depth, Gemini on technical SEO, Copilot on Bing-style
performance. A projection re-weights the pillar scores with a fixed table
and pairs the result with platform-specific tips.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from readiness.issues.registry import IssueCode
from readiness.scoring.deduction import clamp_score
from readiness.scoring.grades import letter_grade
from readiness.scoring.models import Issue, PlatformScore

# platform -> pillar -> weight; each row sums to 1.0
PLATFORM_WEIGHTS: dict[str, dict[str, float]] = {
    "chatgpt": {"technical": 0.20, "content": 0.35, "ai_readiness": 0.30, "performance": 0.15},
    "claude": {"technical": 0.15, "content": 0.40, "ai_readiness": 0.35, "performance": 0.10},
    "perplexity": {"technical": 0.20, "content": 0.30, "ai_readiness": 0.35, "performance": 0.15},
    "gemini": {"technical": 0.30, "content": 0.30, "ai_readiness": 0.25, "performance": 0.15},
    "copilot": {"technical": 0.30, "content": 0.25, "ai_readiness": 0.25, "performance": 0.20},
    "grok": {"technical": 0.20, "content": 0.35, "ai_readiness": 0.30, "performance": 0.15},
}

PLATFORM_DISPLAY_NAMES: dict[str, str] = {
    "chatgpt": "ChatGPT",
    "claude": "Claude",
    "perplexity": "Perplexity",
    "gemini": "Gemini",
    "copilot": "Copilot",
    "grok": "Grok",
}

PLATFORM_TIPS: dict[str, list[str]] = {
    "chatgpt": [
        "Allow GPTBot and OAI-SearchBot in robots.txt",
        "Lead each section with a direct, quotable answer",
        "Keep titles and meta descriptions specific to the page",
    ],
    "claude": [
        "Allow ClaudeBot and publish an llms.txt file",
        "Favor long-form, well-sourced explanations over listicles",
        "Add a summary section that states the key takeaways",
    ],
    "perplexity": [
        "Allow PerplexityBot in robots.txt",
        "Cite primary sources with outbound links",
        "Phrase headings as the questions users actually ask",
    ],
    "gemini": [
        "Allow Google-Extended in robots.txt",
        "Use complete schema.org markup for your main entities",
        "Keep canonical URLs and the sitemap in sync",
    ],
    "copilot": [
        "Submit your sitemap to Bing Webmaster Tools",
        "Keep pages fast: Bing weights performance heavily",
        "Provide accurate Open Graph tags",
    ],
    "grok": [
        "Publish timely, clearly dated content",
        "Make key facts easy to quote in a sentence or two",
        "Link to original reporting and data",
    ],
}


class CheckImportance(StrEnum):
    CRITICAL = "critical"
    IMPORTANT = "important"
    RECOMMENDED = "recommended"


@dataclass(frozen=True)
class PlatformCheck:
    """One readiness requirement: passes when its issue code is absent."""

    factor: str
    label: str
    issue_code: IssueCode
    importance: CheckImportance


def _check(factor: str, label: str, code: IssueCode, importance: CheckImportance) -> PlatformCheck:
    return PlatformCheck(factor=factor, label=label, issue_code=code, importance=importance)


_CRIT = CheckImportance.CRITICAL
_IMP = CheckImportance.IMPORTANT
_REC = CheckImportance.RECOMMENDED

PLATFORM_REQUIREMENTS: dict[str, list[PlatformCheck]] = {
    "chatgpt": [
        _check("ai_crawlers", "GPTBot allowed", IssueCode.AI_CRAWLER_BLOCKED, _CRIT),
        _check("structured_data", "JSON-LD schema", IssueCode.NO_STRUCTURED_DATA, _CRIT),
        _check("llms_txt", "llms.txt file", IssueCode.MISSING_LLMS_TXT, _IMP),
        _check("direct_answers", "Direct answers", IssueCode.NO_DIRECT_ANSWERS, _IMP),
        _check("title", "Title tag", IssueCode.MISSING_TITLE, _IMP),
        _check("meta_desc", "Meta description", IssueCode.MISSING_META_DESC, _REC),
        _check("sitemap", "Sitemap", IssueCode.MISSING_SITEMAP, _REC),
        _check("citation", "Citation worthy", IssueCode.CITATION_WORTHINESS, _IMP),
    ],
    "claude": [
        _check("llms_txt", "llms.txt file", IssueCode.MISSING_LLMS_TXT, _CRIT),
        _check("ai_crawlers", "ClaudeBot allowed", IssueCode.AI_CRAWLER_BLOCKED, _CRIT),
        _check("structured_data", "JSON-LD schema", IssueCode.NO_STRUCTURED_DATA, _IMP),
        _check("content_depth", "Content depth", IssueCode.THIN_CONTENT, _CRIT),
        _check("direct_answers", "Direct answers", IssueCode.NO_DIRECT_ANSWERS, _IMP),
        _check("citation", "Citation worthy", IssueCode.CITATION_WORTHINESS, _CRIT),
        _check("summary", "Summary section", IssueCode.NO_SUMMARY_SECTION, _REC),
        _check("faq", "FAQ structure", IssueCode.MISSING_FAQ_STRUCTURE, _REC),
    ],
    "perplexity": [
        _check("ai_crawlers", "PerplexityBot allowed", IssueCode.AI_CRAWLER_BLOCKED, _CRIT),
        _check("citation", "Citation worthy", IssueCode.CITATION_WORTHINESS, _CRIT),
        _check("direct_answers", "Direct answers", IssueCode.NO_DIRECT_ANSWERS, _CRIT),
        _check("structured_data", "JSON-LD schema", IssueCode.NO_STRUCTURED_DATA, _IMP),
        _check("llms_txt", "llms.txt file", IssueCode.MISSING_LLMS_TXT, _IMP),
        _check("title", "Title tag", IssueCode.MISSING_TITLE, _IMP),
        _check("internal_links", "Internal links", IssueCode.NO_INTERNAL_LINKS, _REC),
        _check("questions", "Question coverage", IssueCode.POOR_QUESTION_COVERAGE, _IMP),
    ],
    "gemini": [
        _check("structured_data", "JSON-LD schema", IssueCode.NO_STRUCTURED_DATA, _CRIT),
        _check("ai_crawlers", "Google-Extended allowed", IssueCode.AI_CRAWLER_BLOCKED, _CRIT),
        _check("title", "Title tag", IssueCode.MISSING_TITLE, _IMP),
        _check("meta_desc", "Meta description", IssueCode.MISSING_META_DESC, _IMP),
        _check("sitemap", "Sitemap", IssueCode.MISSING_SITEMAP, _IMP),
        _check("canonical", "Canonical URL", IssueCode.MISSING_CANONICAL, _IMP),
        _check("llms_txt", "llms.txt file", IssueCode.MISSING_LLMS_TXT, _REC),
        _check("entity_markup", "Entity markup", IssueCode.MISSING_ENTITY_MARKUP, _REC),
    ],
}


def calculate_platform_scores(pillar_scores: Mapping[str, float]) -> dict[str, PlatformScore]:
    """
    Project pillar scores onto every platform.

    Args:
        pillar_scores: technical/content/ai_readiness/performance, 0-100

    Returns:
        Dict of platform id -> PlatformScore
    """
    results: dict[str, PlatformScore] = {}
    for platform, weights in PLATFORM_WEIGHTS.items():
        score = clamp_score(
            sum(pillar_scores.get(pillar, 0) * weight for pillar, weight in weights.items())
        )
        results[platform] = PlatformScore(
            platform=platform,
            score=score,
            grade=letter_grade(score),
            tips=list(PLATFORM_TIPS[platform]),
        )
    return results


def platforms_for_issue(code: IssueCode | str) -> list[str]:
    """Platforms whose requirement checklist references ``code``."""
    return [
        platform
        for platform, checks in PLATFORM_REQUIREMENTS.items()
        if any(check.issue_code == code for check in checks)
    ]


@dataclass
class PlatformCheckResult:
    check: PlatformCheck
    passed: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "factor": self.check.factor,
            "label": self.check.label,
            "issue_code": self.check.issue_code.value,
            "importance": self.check.importance.value,
            "passed": self.passed,
        }


@dataclass
class PlatformReadiness:
    """A platform's projected score plus its requirement checklist."""

    platform: str
    display_name: str
    score: PlatformScore
    checks: list[PlatformCheckResult] = field(default_factory=list)

    @property
    def critical_failures(self) -> list[PlatformCheckResult]:
        return [
            result
            for result in self.checks
            if not result.passed and result.check.importance == CheckImportance.CRITICAL
        ]

    def to_dict(self) -> dict[str, Any]:
        return {
            "platform": self.platform,
            "display_name": self.display_name,
            **self.score.to_dict(),
            "checks": [result.to_dict() for result in self.checks],
        }


def platform_readiness(
    pillar_scores: Mapping[str, float],
    issues: Iterable[Issue],
) -> dict[str, PlatformReadiness]:
    """Pair each platform projection with its pass/fail checklist."""
    present_codes = {issue.code for issue in issues}
    projections = calculate_platform_scores(pillar_scores)
    return {
        platform: PlatformReadiness(
            platform=platform,
            display_name=PLATFORM_DISPLAY_NAMES[platform],
            score=projection,
            checks=[
                PlatformCheckResult(check=check, passed=check.issue_code not in present_codes)
                for check in PLATFORM_REQUIREMENTS.get(platform, [])
            ],
        )
        for platform, projection in projections.items()
    }

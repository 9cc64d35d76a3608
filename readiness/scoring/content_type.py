"""Heuristic page content-type detection.

Votes come from schema.org types (strong) and URL path keywords (weaker).
The highest total wins; ties keep the first type that scored.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum
from urllib.parse import urlparse


class ContentType(StrEnum):
    BLOG_POST = "blog_post"
    NEWS_ARTICLE = "news_article"
    PRODUCT = "product"
    LANDING_PAGE = "landing_page"
    DOCUMENTATION = "documentation"
    SUPPORT = "support"
    CASE_STUDY = "case_study"
    ABOUT = "about"
    UNKNOWN = "unknown"


SCHEMA_VOTE_WEIGHT = 2.0
CONFIDENCE_SCALE = 4.0

SCHEMA_CONTENT_TYPES: dict[str, ContentType] = {
    "Article": ContentType.BLOG_POST,
    "BlogPosting": ContentType.BLOG_POST,
    "NewsArticle": ContentType.NEWS_ARTICLE,
    "TechArticle": ContentType.DOCUMENTATION,
    "Report": ContentType.CASE_STUDY,
    "FAQPage": ContentType.SUPPORT,
    "HowTo": ContentType.SUPPORT,
    "QAPage": ContentType.SUPPORT,
    "Product": ContentType.PRODUCT,
    "ProductModel": ContentType.PRODUCT,
    "Service": ContentType.LANDING_PAGE,
    "WebApplication": ContentType.PRODUCT,
    "CaseStudy": ContentType.CASE_STUDY,
}

# (pattern, type, weight, signal)
PATH_RULES: list[tuple[re.Pattern[str], ContentType, float, str]] = [
    (re.compile(r"(blog|insights|stories|library)"), ContentType.BLOG_POST, 1.5,
     "URL contains blog keyword"),
    (re.compile(r"(news|press|updates|announcements|release-notes)"), ContentType.NEWS_ARTICLE,
     1.5, "News path keyword"),
    (re.compile(r"(docs|documentation|developers|api|kb)"), ContentType.DOCUMENTATION, 2.0,
     "Documentation path keyword"),
    (re.compile(r"(support|help|knowledge|faq|troubleshoot)"), ContentType.SUPPORT, 1.5,
     "Support/help path keyword"),
    (re.compile(r"(product|features|platform|capabilities)"), ContentType.PRODUCT, 1.0,
     "Product-focused path"),
    (re.compile(r"(solutions|services|why-|platform)"), ContentType.LANDING_PAGE, 1.0,
     "Solution/landing keyword"),
    (re.compile(r"(case-stud|customers|success-stories)"), ContentType.CASE_STUDY, 1.5,
     "Case study keyword"),
    (re.compile(r"(about|company|team|culture|careers)"), ContentType.ABOUT, 1.0,
     "About/company keyword"),
]

DATED_PATH_PATTERN = re.compile(r"/(19|20)\d{2}/")


@dataclass
class ContentTypeResult:
    type: ContentType
    confidence: float  # 0-1
    signals: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "confidence": self.confidence,
            "signals": self.signals,
        }


def _url_path(url: str) -> str | None:
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        return None
    return parsed.path.lower()


def detect_content_type(url: str, schema_types: Iterable[str] | None = None) -> ContentTypeResult:
    """Guess what kind of page ``url`` is from its schema types and path."""
    scores: dict[ContentType, float] = {}
    signals: list[str] = []

    def add_vote(content_type: ContentType, weight: float, signal: str) -> None:
        scores[content_type] = scores.get(content_type, 0.0) + weight
        signals.append(f"{content_type.value}:{signal}")

    for schema_type in schema_types or []:
        mapped = SCHEMA_CONTENT_TYPES.get(schema_type)
        if mapped is not None:
            add_vote(mapped, SCHEMA_VOTE_WEIGHT, f"schema:{schema_type}")

    path = _url_path(url)
    if path is not None:
        for pattern, content_type, weight, signal in PATH_RULES:
            if pattern.search(path):
                add_vote(content_type, weight, signal)
        if DATED_PATH_PATTERN.search(path):
            add_vote(ContentType.NEWS_ARTICLE, 1.0, "dated-path")

    best_type = ContentType.UNKNOWN
    best_score = 0.0
    for content_type, score in scores.items():
        if score > best_score:
            best_type, best_score = content_type, score

    return ContentTypeResult(
        type=best_type,
        confidence=min(1.0, best_score / CONFIDENCE_SCALE),
        signals=signals,
    )

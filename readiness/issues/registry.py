"""Issue definition registry.

A closed vocabulary of issue codes. Each code maps to its category,
severity, default score impact, human-facing copy and remediation effort.
Scorers never build an issue without going through this table.
"""

from dataclasses import dataclass
from enum import StrEnum


class IssueSeverity(StrEnum):
    """How urgently an issue should be addressed."""

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


class IssueCategory(StrEnum):
    """Legacy pillar an issue belongs to."""

    TECHNICAL = "technical"
    CONTENT = "content"
    AI_READINESS = "ai_readiness"
    PERFORMANCE = "performance"


class EffortLevel(StrEnum):
    """Rough cost of fixing an issue."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Sort rank used when ordering issues; lower sorts first.
SEVERITY_RANK: dict[IssueSeverity, int] = {
    IssueSeverity.CRITICAL: 0,
    IssueSeverity.WARNING: 1,
    IssueSeverity.INFO: 2,
}


class IssueCode(StrEnum):
    """Every issue code the engine knows about."""

    # Technical
    MISSING_TITLE = "MISSING_TITLE"
    MISSING_META_DESC = "MISSING_META_DESC"
    MISSING_H1 = "MISSING_H1"
    MULTIPLE_H1 = "MULTIPLE_H1"
    HEADING_HIERARCHY = "HEADING_HIERARCHY"
    BROKEN_LINKS = "BROKEN_LINKS"
    MISSING_CANONICAL = "MISSING_CANONICAL"
    NOINDEX_SET = "NOINDEX_SET"
    MISSING_ALT_TEXT = "MISSING_ALT_TEXT"
    HTTP_STATUS = "HTTP_STATUS"
    MISSING_OG_TAGS = "MISSING_OG_TAGS"
    SLOW_RESPONSE = "SLOW_RESPONSE"
    MISSING_SITEMAP = "MISSING_SITEMAP"
    SITEMAP_INVALID_FORMAT = "SITEMAP_INVALID_FORMAT"
    SITEMAP_STALE_URLS = "SITEMAP_STALE_URLS"
    SITEMAP_LOW_COVERAGE = "SITEMAP_LOW_COVERAGE"
    REDIRECT_CHAIN = "REDIRECT_CHAIN"
    CORS_MIXED_CONTENT = "CORS_MIXED_CONTENT"
    CORS_UNSAFE_LINKS = "CORS_UNSAFE_LINKS"

    # Content
    THIN_CONTENT = "THIN_CONTENT"
    CONTENT_DEPTH = "CONTENT_DEPTH"
    CONTENT_CLARITY = "CONTENT_CLARITY"
    CONTENT_AUTHORITY = "CONTENT_AUTHORITY"
    DUPLICATE_CONTENT = "DUPLICATE_CONTENT"
    STALE_CONTENT = "STALE_CONTENT"
    NO_INTERNAL_LINKS = "NO_INTERNAL_LINKS"
    EXCESSIVE_LINKS = "EXCESSIVE_LINKS"
    MISSING_FAQ_STRUCTURE = "MISSING_FAQ_STRUCTURE"
    POOR_READABILITY = "POOR_READABILITY"
    LOW_TEXT_HTML_RATIO = "LOW_TEXT_HTML_RATIO"
    AI_ASSISTANT_SPEAK = "AI_ASSISTANT_SPEAK"
    UNIFORM_SENTENCE_LENGTH = "UNIFORM_SENTENCE_LENGTH"
    LOW_EEAT_SCORE = "LOW_EEAT_SCORE"

    # AI readiness
    MISSING_AUTHORITATIVE_CITATIONS = "MISSING_AUTHORITATIVE_CITATIONS"
    MISSING_LLMS_TXT = "MISSING_LLMS_TXT"
    LLMS_TXT_QUALITY = "LLMS_TXT_QUALITY"
    LLMS_TXT_INCOMPLETE = "LLMS_TXT_INCOMPLETE"
    AI_CRAWLER_BLOCKED = "AI_CRAWLER_BLOCKED"
    NO_STRUCTURED_DATA = "NO_STRUCTURED_DATA"
    INCOMPLETE_SCHEMA = "INCOMPLETE_SCHEMA"
    CITATION_WORTHINESS = "CITATION_WORTHINESS"
    NO_DIRECT_ANSWERS = "NO_DIRECT_ANSWERS"
    MISSING_ENTITY_MARKUP = "MISSING_ENTITY_MARKUP"
    NO_SUMMARY_SECTION = "NO_SUMMARY_SECTION"
    POOR_QUESTION_COVERAGE = "POOR_QUESTION_COVERAGE"
    INVALID_SCHEMA = "INVALID_SCHEMA"
    HAS_PDF_CONTENT = "HAS_PDF_CONTENT"
    PDF_ONLY_CONTENT = "PDF_ONLY_CONTENT"
    AI_CONTENT_EXTRACTABLE = "AI_CONTENT_EXTRACTABLE"

    # Performance
    LH_PERF_LOW = "LH_PERF_LOW"
    LH_SEO_LOW = "LH_SEO_LOW"
    LH_A11Y_LOW = "LH_A11Y_LOW"
    LH_BP_LOW = "LH_BP_LOW"
    LARGE_PAGE_SIZE = "LARGE_PAGE_SIZE"


@dataclass(frozen=True)
class IssueDefinition:
    """Registry entry for one issue code."""

    code: IssueCode
    category: IssueCategory
    severity: IssueSeverity
    score_impact: int  # Default deduction, zero or negative
    message: str
    recommendation: str
    effort_level: EffortLevel
    implementation_snippet: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "code": self.code.value,
            "category": self.category.value,
            "severity": self.severity.value,
            "score_impact": self.score_impact,
            "message": self.message,
            "recommendation": self.recommendation,
            "effort_level": self.effort_level.value,
            "implementation_snippet": self.implementation_snippet,
        }


_T = IssueCategory.TECHNICAL
_C = IssueCategory.CONTENT
_A = IssueCategory.AI_READINESS
_P = IssueCategory.PERFORMANCE

_CRITICAL = IssueSeverity.CRITICAL
_WARNING = IssueSeverity.WARNING
_INFO = IssueSeverity.INFO


_DEFINITIONS: tuple[IssueDefinition, ...] = (
    # --- Technical ---
    IssueDefinition(
        code=IssueCode.MISSING_TITLE,
        category=_T,
        severity=_CRITICAL,
        score_impact=-15,
        message="Page is missing a title tag or title is outside 30-60 characters",
        recommendation=(
            "Add a unique, descriptive title tag between 30-60 characters "
            "that includes the page's primary topic."
        ),
        effort_level=EffortLevel.LOW,
        implementation_snippet="<title>Your Page Topic | Brand Name</title>",
    ),
    IssueDefinition(
        code=IssueCode.MISSING_META_DESC,
        category=_T,
        severity=_WARNING,
        score_impact=-10,
        message="Page is missing a meta description or it is outside 120-160 characters",
        recommendation=(
            "Add a meta description of 120-160 characters that summarizes "
            "this page's key topic."
        ),
        effort_level=EffortLevel.LOW,
        implementation_snippet=(
            '<meta name="description" content="A concise summary of this '
            'page\'s content in 120-160 characters." />'
        ),
    ),
    IssueDefinition(
        code=IssueCode.MISSING_H1,
        category=_T,
        severity=_WARNING,
        score_impact=-8,
        message="Page is missing an H1 heading",
        recommendation="Add exactly one H1 heading that clearly describes the page's main topic.",
        effort_level=EffortLevel.LOW,
        implementation_snippet="<h1>Your Page's Main Topic</h1>",
    ),
    IssueDefinition(
        code=IssueCode.MULTIPLE_H1,
        category=_T,
        severity=_WARNING,
        score_impact=-5,
        message="Page has multiple H1 headings",
        recommendation="Reduce to a single H1 heading. Convert additional H1s to H2 or lower.",
        effort_level=EffortLevel.LOW,
        implementation_snippet=(
            "<!-- Change extra <h1> tags to <h2> -->\n<h2>Secondary Section Title</h2>"
        ),
    ),
    IssueDefinition(
        code=IssueCode.HEADING_HIERARCHY,
        category=_T,
        severity=_INFO,
        score_impact=-3,
        message="Heading hierarchy has skipped levels (e.g., H1 to H3 without H2)",
        recommendation=(
            "Ensure headings follow a logical hierarchy: H1 > H2 > H3 "
            "without skipping levels."
        ),
        effort_level=EffortLevel.LOW,
    ),
    IssueDefinition(
        code=IssueCode.BROKEN_LINKS,
        category=_T,
        severity=_WARNING,
        score_impact=-5,
        message="Page contains broken internal links",
        recommendation="Fix or remove broken internal links to improve crawlability.",
        effort_level=EffortLevel.MEDIUM,
    ),
    IssueDefinition(
        code=IssueCode.MISSING_CANONICAL,
        category=_T,
        severity=_WARNING,
        score_impact=-8,
        message="Page is missing a canonical URL tag",
        recommendation="Add a canonical tag pointing to the preferred URL for this page.",
        effort_level=EffortLevel.LOW,
        implementation_snippet='<link rel="canonical" href="https://example.com/preferred-url" />',
    ),
    IssueDefinition(
        code=IssueCode.NOINDEX_SET,
        category=_T,
        severity=_CRITICAL,
        score_impact=-20,
        message="Page has a noindex robots directive",
        recommendation=(
            "Remove the noindex directive if this page should be discoverable "
            "by AI search engines."
        ),
        effort_level=EffortLevel.LOW,
        implementation_snippet=(
            '<!-- Remove this tag: -->\n<!-- <meta name="robots" content="noindex"> -->'
        ),
    ),
    IssueDefinition(
        code=IssueCode.MISSING_ALT_TEXT,
        category=_T,
        severity=_WARNING,
        score_impact=-3,  # Per image, capped at -15
        message="Images are missing alt text attributes",
        recommendation=(
            "Add descriptive alt text to all images to improve accessibility "
            "and AI understanding."
        ),
        effort_level=EffortLevel.LOW,
        implementation_snippet=(
            '<img src="photo.jpg" alt="Descriptive text about the image content" />'
        ),
    ),
    IssueDefinition(
        code=IssueCode.HTTP_STATUS,
        category=_T,
        severity=_CRITICAL,
        score_impact=-25,
        message="Page returned a 4xx or 5xx HTTP status code",
        recommendation=(
            "Fix the server error or redirect. Pages must return 200 status to be indexed."
        ),
        effort_level=EffortLevel.HIGH,
    ),
    IssueDefinition(
        code=IssueCode.MISSING_OG_TAGS,
        category=_T,
        severity=_INFO,
        score_impact=-5,
        message="Page is missing Open Graph tags (og:title, og:description, og:image)",
        recommendation=(
            "Add og:title, og:description, and og:image meta tags for better "
            "social and AI sharing."
        ),
        effort_level=EffortLevel.LOW,
        implementation_snippet=(
            '<meta property="og:title" content="Page Title" />\n'
            '<meta property="og:description" content="Page description" />\n'
            '<meta property="og:image" content="https://example.com/image.jpg" />'
        ),
    ),
    IssueDefinition(
        code=IssueCode.SLOW_RESPONSE,
        category=_T,
        severity=_WARNING,
        score_impact=-10,
        message="Server response time exceeds 2 seconds",
        recommendation=(
            "Optimize server response time to under 2 seconds. Check hosting, "
            "caching, and database queries."
        ),
        effort_level=EffortLevel.HIGH,
    ),
    IssueDefinition(
        code=IssueCode.MISSING_SITEMAP,
        category=_T,
        severity=_INFO,
        score_impact=-5,
        message="No valid sitemap.xml found",
        recommendation="Create and submit a sitemap.xml to help crawlers discover all pages.",
        effort_level=EffortLevel.MEDIUM,
        implementation_snippet=(
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
            "  <url>\n"
            "    <loc>https://example.com/</loc>\n"
            "    <lastmod>2025-01-01</lastmod>\n"
            "  </url>\n"
            "</urlset>"
        ),
    ),
    IssueDefinition(
        code=IssueCode.SITEMAP_INVALID_FORMAT,
        category=_T,
        severity=_WARNING,
        score_impact=-8,
        message="Sitemap XML is malformed or does not follow the sitemaps.org schema",
        recommendation=(
            "Fix sitemap.xml to follow the sitemaps.org/schemas/sitemap/0.9 "
            "standard. Validate at xml-sitemaps.com."
        ),
        effort_level=EffortLevel.MEDIUM,
        implementation_snippet=(
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
            "  <url><loc>https://example.com/</loc></url>\n"
            "</urlset>"
        ),
    ),
    IssueDefinition(
        code=IssueCode.SITEMAP_STALE_URLS,
        category=_T,
        severity=_INFO,
        score_impact=-3,
        message="Sitemap contains URLs with lastmod dates older than 12 months",
        recommendation=(
            "Update <lastmod> dates in your sitemap to reflect when pages were "
            "actually last modified."
        ),
        effort_level=EffortLevel.LOW,
        implementation_snippet=(
            "<url>\n  <loc>https://example.com/page</loc>\n  <lastmod>2025-01-01</lastmod>\n</url>"
        ),
    ),
    IssueDefinition(
        code=IssueCode.SITEMAP_LOW_COVERAGE,
        category=_T,
        severity=_WARNING,
        score_impact=-5,
        message="Sitemap lists fewer than 50% of discovered pages",
        recommendation=(
            "Ensure your sitemap includes all indexable pages. Use a sitemap "
            "generator or CMS plugin to auto-generate."
        ),
        effort_level=EffortLevel.MEDIUM,
    ),
    IssueDefinition(
        code=IssueCode.REDIRECT_CHAIN,
        category=_T,
        severity=_WARNING,
        score_impact=-8,
        message="Page has a redirect chain with 3+ hops",
        recommendation=(
            "Reduce redirect chains to a single hop. Each intermediate redirect "
            "adds latency and confuses AI crawlers."
        ),
        effort_level=EffortLevel.MEDIUM,
    ),
    IssueDefinition(
        code=IssueCode.CORS_MIXED_CONTENT,
        category=_T,
        severity=_WARNING,
        score_impact=-5,
        message="HTTPS page loads resources over insecure HTTP",
        recommendation=(
            "Update all resource URLs to use HTTPS. Mixed content is blocked by "
            "browsers and penalized by crawlers."
        ),
        effort_level=EffortLevel.LOW,
        implementation_snippet=(
            '<!-- Change http:// to https:// -->\n<img src="https://cdn.example.com/image.png" />'
        ),
    ),
    IssueDefinition(
        code=IssueCode.CORS_UNSAFE_LINKS,
        category=_T,
        severity=_INFO,
        score_impact=-3,
        message='External links with target="_blank" are missing rel="noopener"',
        recommendation=(
            'Add rel="noopener noreferrer" to all external links that open in a new tab.'
        ),
        effort_level=EffortLevel.LOW,
        implementation_snippet=(
            '<a href="https://external.com" target="_blank" rel="noopener noreferrer">Link</a>'
        ),
    ),
    # --- Content ---
    IssueDefinition(
        code=IssueCode.THIN_CONTENT,
        category=_C,
        severity=_WARNING,
        score_impact=-15,  # -15 under 200 words, -8 for 200-499
        message="Page has insufficient content",
        recommendation="Expand content to at least 500 words of substantive, topic-relevant text.",
        effort_level=EffortLevel.HIGH,
    ),
    IssueDefinition(
        code=IssueCode.CONTENT_DEPTH,
        category=_C,
        severity=_WARNING,
        score_impact=0,  # Mapped from the LLM comprehensiveness score
        message="Content lacks depth and comprehensive topic coverage",
        recommendation=(
            "Expand coverage of subtopics, add supporting data, examples, and "
            "expert analysis."
        ),
        effort_level=EffortLevel.HIGH,
    ),
    IssueDefinition(
        code=IssueCode.CONTENT_CLARITY,
        category=_C,
        severity=_WARNING,
        score_impact=0,
        message="Content readability and structure need improvement",
        recommendation=(
            "Improve clarity with shorter paragraphs, subheadings, bullet "
            "points, and plain language."
        ),
        effort_level=EffortLevel.MEDIUM,
    ),
    IssueDefinition(
        code=IssueCode.CONTENT_AUTHORITY,
        category=_C,
        severity=_WARNING,
        score_impact=0,
        message="Content lacks authority signals (citations, data, expert language)",
        recommendation=(
            "Add citations, statistics, expert quotes, and authoritative "
            "sources to build credibility."
        ),
        effort_level=EffortLevel.HIGH,
    ),
    IssueDefinition(
        code=IssueCode.DUPLICATE_CONTENT,
        category=_C,
        severity=_WARNING,
        score_impact=-15,
        message="Page content is a duplicate of another page in this project",
        recommendation="Consolidate duplicate pages using canonical tags or merge the content.",
        effort_level=EffortLevel.MEDIUM,
        implementation_snippet='<link rel="canonical" href="https://example.com/original-page" />',
    ),
    IssueDefinition(
        code=IssueCode.STALE_CONTENT,
        category=_C,
        severity=_INFO,
        score_impact=-5,
        message="Content appears to be over 12 months old without updates",
        recommendation=(
            "Update content with current information, statistics, and recent developments."
        ),
        effort_level=EffortLevel.MEDIUM,
    ),
    IssueDefinition(
        code=IssueCode.NO_INTERNAL_LINKS,
        category=_C,
        severity=_WARNING,
        score_impact=-8,
        message="Page has fewer than 2 internal links to relevant content",
        recommendation=(
            "Add at least 2-3 internal links to related pages to improve discoverability."
        ),
        effort_level=EffortLevel.LOW,
        implementation_snippet='<a href="/related-topic">Learn more about related topic</a>',
    ),
    IssueDefinition(
        code=IssueCode.EXCESSIVE_LINKS,
        category=_C,
        severity=_INFO,
        score_impact=-3,
        message="External links exceed internal links by more than 3:1 ratio",
        recommendation=(
            "Balance your link profile by adding more internal links relative "
            "to external ones."
        ),
        effort_level=EffortLevel.LOW,
    ),
    IssueDefinition(
        code=IssueCode.MISSING_FAQ_STRUCTURE,
        category=_C,
        severity=_INFO,
        score_impact=-5,
        message="Content addressing questions does not use Q&A format",
        recommendation=(
            "Structure common questions using FAQ format with clear question "
            "headings and concise answers."
        ),
        effort_level=EffortLevel.MEDIUM,
        implementation_snippet=(
            '<script type="application/ld+json">\n'
            "{\n"
            '  "@context": "https://schema.org",\n'
            '  "@type": "FAQPage",\n'
            '  "mainEntity": [{\n'
            '    "@type": "Question",\n'
            '    "name": "What is...?",\n'
            '    "acceptedAnswer": { "@type": "Answer", "text": "..." }\n'
            "  }]\n"
            "}\n"
            "</script>"
        ),
    ),
    IssueDefinition(
        code=IssueCode.POOR_READABILITY,
        category=_C,
        severity=_WARNING,
        score_impact=-10,
        message="Content readability is below recommended level (Flesch score < 50)",
        recommendation=(
            "Simplify language: use shorter sentences, common words, and active "
            "voice. Target Flesch score of 60+."
        ),
        effort_level=EffortLevel.MEDIUM,
    ),
    IssueDefinition(
        code=IssueCode.LOW_TEXT_HTML_RATIO,
        category=_C,
        severity=_WARNING,
        score_impact=-8,
        message=(
            "Text-to-HTML ratio is below 15%: page is code-heavy with little visible content"
        ),
        recommendation=(
            "Increase visible text content relative to HTML markup. Remove "
            "unnecessary wrappers, inline styles, and bloated templates."
        ),
        effort_level=EffortLevel.MEDIUM,
    ),
    IssueDefinition(
        code=IssueCode.AI_ASSISTANT_SPEAK,
        category=_C,
        severity=_WARNING,
        score_impact=-10,
        message="Content uses transition words common in AI-generated text",
        recommendation=(
            "Remove common AI transition words like 'In conclusion', 'Moreover', "
            "and 'It is important to note'. Use more natural, varied language."
        ),
        effort_level=EffortLevel.LOW,
    ),
    IssueDefinition(
        code=IssueCode.UNIFORM_SENTENCE_LENGTH,
        category=_C,
        severity=_INFO,
        score_impact=-5,
        message="Sentence lengths are too uniform, which can look machine-generated",
        recommendation=(
            "Vary your sentence length to create natural 'burstiness' and rhythm. "
            "Mix short, impactful sentences with longer descriptive ones."
        ),
        effort_level=EffortLevel.MEDIUM,
    ),
    IssueDefinition(
        code=IssueCode.LOW_EEAT_SCORE,
        category=_C,
        severity=_WARNING,
        score_impact=-15,
        message="Content lacks personal experience markers (E-E-A-T)",
        recommendation=(
            "Incorporate first-person anecdotes, unique data, or specific case "
            "studies. AI search engines prioritize content that demonstrates "
            "real-world experience over generic information."
        ),
        effort_level=EffortLevel.HIGH,
    ),
    # --- AI readiness ---
    IssueDefinition(
        code=IssueCode.MISSING_AUTHORITATIVE_CITATIONS,
        category=_A,
        severity=_INFO,
        score_impact=-5,
        message=(
            "Page lacks links to high-authority external sources (.gov, .edu, or major media)"
        ),
        recommendation=(
            "Cite and link to authoritative external sources to verify your "
            "claims. This helps LLMs like Gemini and Perplexity validate your "
            "content's accuracy."
        ),
        effort_level=EffortLevel.MEDIUM,
    ),
    IssueDefinition(
        code=IssueCode.MISSING_LLMS_TXT,
        category=_A,
        severity=_CRITICAL,
        score_impact=-20,
        message="No llms.txt file found at /llms.txt",
        recommendation=(
            "Create an llms.txt file at /llms.txt to explicitly permit AI "
            "crawlers and provide structured metadata about your site."
        ),
        effort_level=EffortLevel.LOW,
        implementation_snippet=(
            "# Example.com\n"
            "> Brief description of your site\n"
            "\n"
            "## Docs\n"
            "- [Getting started](https://example.com/start): Overview of the product"
        ),
    ),
    IssueDefinition(
        code=IssueCode.LLMS_TXT_QUALITY,
        category=_A,
        severity=_WARNING,
        score_impact=-20,
        message="llms.txt is missing two or more structural elements",
        recommendation=(
            "Give llms.txt an H1 title, a '>' description line, at least one "
            "'##' section and markdown links to your key pages."
        ),
        effort_level=EffortLevel.LOW,
        implementation_snippet=(
            "# Example.com\n"
            "> Brief description of your site\n"
            "\n"
            "## Docs\n"
            "- [Getting started](https://example.com/start)"
        ),
    ),
    IssueDefinition(
        code=IssueCode.LLMS_TXT_INCOMPLETE,
        category=_A,
        severity=_INFO,
        score_impact=-10,
        message="llms.txt is missing one structural element",
        recommendation=(
            "Add the missing llms.txt element (title, description, section "
            "heading or link) so AI crawlers can parse the file fully."
        ),
        effort_level=EffortLevel.LOW,
    ),
    IssueDefinition(
        code=IssueCode.AI_CRAWLER_BLOCKED,
        category=_A,
        severity=_CRITICAL,
        score_impact=-25,
        message="robots.txt blocks one or more AI crawlers (GPTBot, ClaudeBot, PerplexityBot)",
        recommendation=(
            "Remove Disallow rules for AI user agents (GPTBot, ClaudeBot, "
            "PerplexityBot) in robots.txt."
        ),
        effort_level=EffortLevel.LOW,
        implementation_snippet=(
            "# robots.txt: allow AI crawlers\n"
            "User-agent: GPTBot\nAllow: /\n\n"
            "User-agent: ClaudeBot\nAllow: /\n\n"
            "User-agent: PerplexityBot\nAllow: /"
        ),
    ),
    IssueDefinition(
        code=IssueCode.NO_STRUCTURED_DATA,
        category=_A,
        severity=_WARNING,
        score_impact=-15,
        message="Page has no JSON-LD structured data",
        recommendation=(
            "Add JSON-LD structured data (at minimum: Organization, WebPage, "
            "and Article/FAQPage as appropriate)."
        ),
        effort_level=EffortLevel.MEDIUM,
        implementation_snippet=(
            '<script type="application/ld+json">\n'
            "{\n"
            '  "@context": "https://schema.org",\n'
            '  "@type": "WebPage",\n'
            '  "name": "Page Title",\n'
            '  "description": "Page description"\n'
            "}\n"
            "</script>"
        ),
    ),
    IssueDefinition(
        code=IssueCode.INCOMPLETE_SCHEMA,
        category=_A,
        severity=_WARNING,
        score_impact=-8,
        message="Structured data is present but missing required properties",
        recommendation="Complete all required properties in your JSON-LD schema markup.",
        effort_level=EffortLevel.MEDIUM,
    ),
    IssueDefinition(
        code=IssueCode.CITATION_WORTHINESS,
        category=_A,
        severity=_WARNING,
        score_impact=0,  # Mapped from the LLM citation score
        message="Content has low citation worthiness for AI assistants",
        recommendation=(
            "Add unique data, original research, clear definitions, and expert "
            "analysis that AI would want to cite."
        ),
        effort_level=EffortLevel.HIGH,
    ),
    IssueDefinition(
        code=IssueCode.NO_DIRECT_ANSWERS,
        category=_A,
        severity=_WARNING,
        score_impact=-10,
        message="Content does not contain direct, concise answers to likely queries",
        recommendation=(
            "Add clear, concise answer paragraphs at the top of sections that "
            "directly address likely user questions."
        ),
        effort_level=EffortLevel.MEDIUM,
    ),
    IssueDefinition(
        code=IssueCode.MISSING_ENTITY_MARKUP,
        category=_A,
        severity=_INFO,
        score_impact=-5,
        message="Key named entities are not marked up in schema",
        recommendation=(
            "Add schema markup for key entities (people, organizations, "
            "products) mentioned in your content."
        ),
        effort_level=EffortLevel.MEDIUM,
    ),
    IssueDefinition(
        code=IssueCode.NO_SUMMARY_SECTION,
        category=_A,
        severity=_INFO,
        score_impact=-5,
        message="Page lacks a summary or key takeaway section",
        recommendation=(
            "Add a TL;DR or key takeaways section that summarizes the page's main points."
        ),
        effort_level=EffortLevel.LOW,
        implementation_snippet=(
            "<h2>Key Takeaways</h2>\n<ul>\n"
            "  <li>First main point</li>\n"
            "  <li>Second main point</li>\n"
            "  <li>Third main point</li>\n"
            "</ul>"
        ),
    ),
    IssueDefinition(
        code=IssueCode.POOR_QUESTION_COVERAGE,
        category=_A,
        severity=_WARNING,
        score_impact=-10,
        message="Content does not adequately address likely search queries for this topic",
        recommendation=(
            "Research common questions about this topic and ensure your content "
            "addresses them directly."
        ),
        effort_level=EffortLevel.HIGH,
    ),
    IssueDefinition(
        code=IssueCode.INVALID_SCHEMA,
        category=_A,
        severity=_WARNING,
        score_impact=-8,
        message="JSON-LD structured data contains parse errors",
        recommendation=(
            "Fix JSON-LD syntax errors. Validate at schema.org or Google Rich Results Test."
        ),
        effort_level=EffortLevel.MEDIUM,
    ),
    IssueDefinition(
        code=IssueCode.HAS_PDF_CONTENT,
        category=_A,
        severity=_INFO,
        score_impact=0,
        message="Page links to PDF documents that AI models can index",
        recommendation=(
            "Ensure PDF content is also available as HTML for better AI "
            "discoverability. Add summaries of PDF content on the linking page."
        ),
        effort_level=EffortLevel.MEDIUM,
    ),
    IssueDefinition(
        code=IssueCode.PDF_ONLY_CONTENT,
        category=_A,
        severity=_WARNING,
        score_impact=-5,
        message="Page appears to primarily link to PDF content without HTML alternatives",
        recommendation=(
            "Create HTML versions of important PDF content. AI models struggle "
            "to extract and cite PDF content compared to well-structured HTML."
        ),
        effort_level=EffortLevel.HIGH,
    ),
    IssueDefinition(
        code=IssueCode.AI_CONTENT_EXTRACTABLE,
        category=_A,
        severity=_INFO,
        score_impact=0,
        message="Content is well-structured for AI extraction (high text ratio, good readability)",
        recommendation="No action needed. Content structure is optimized for AI crawlers.",
        effort_level=EffortLevel.LOW,
    ),
    # --- Performance ---
    IssueDefinition(
        code=IssueCode.LH_PERF_LOW,
        category=_P,
        severity=_WARNING,
        score_impact=-20,  # -20 under 0.5, -10 for 0.5-0.79
        message="Lighthouse Performance score is below threshold",
        recommendation=(
            "Improve page performance: optimize images, reduce JavaScript, "
            "enable caching, minimize render-blocking resources."
        ),
        effort_level=EffortLevel.HIGH,
    ),
    IssueDefinition(
        code=IssueCode.LH_SEO_LOW,
        category=_P,
        severity=_WARNING,
        score_impact=-15,
        message="Lighthouse SEO score is below 0.8",
        recommendation=(
            "Address Lighthouse SEO audit failures: ensure crawlable links, "
            "valid hreflang, proper meta tags."
        ),
        effort_level=EffortLevel.MEDIUM,
    ),
    IssueDefinition(
        code=IssueCode.LH_A11Y_LOW,
        category=_P,
        severity=_INFO,
        score_impact=-5,
        message="Lighthouse Accessibility score is below 0.7",
        recommendation=(
            "Improve accessibility: add alt text, ensure color contrast, use "
            "semantic HTML, add ARIA labels."
        ),
        effort_level=EffortLevel.MEDIUM,
    ),
    IssueDefinition(
        code=IssueCode.LH_BP_LOW,
        category=_P,
        severity=_INFO,
        score_impact=-5,
        message="Lighthouse Best Practices score is below 0.8",
        recommendation=(
            "Address Lighthouse best practice issues: use HTTPS, avoid "
            "deprecated APIs, fix console errors."
        ),
        effort_level=EffortLevel.MEDIUM,
    ),
    IssueDefinition(
        code=IssueCode.LARGE_PAGE_SIZE,
        category=_P,
        severity=_WARNING,
        score_impact=-10,
        message="Total page size exceeds 3MB",
        recommendation=(
            "Reduce page weight below 3MB: compress images, minify CSS/JS, "
            "lazy-load below-the-fold content."
        ),
        effort_level=EffortLevel.HIGH,
    ),
)

ISSUE_DEFINITIONS: dict[IssueCode, IssueDefinition] = {
    definition.code: definition for definition in _DEFINITIONS
}


def get_issue_definition(code: IssueCode) -> IssueDefinition:
    """Get the registry entry for a code. Raises KeyError if unregistered."""
    return ISSUE_DEFINITIONS[code]


def find_issue_definition(
    code: IssueCode | str,
    registry: dict[IssueCode, IssueDefinition] | None = None,
) -> IssueDefinition | None:
    """Look up a code leniently.

    Accepts plain strings so issues coming back from storage or another
    service can be resolved. Returns None for anything not registered.
    """
    table = ISSUE_DEFINITIONS if registry is None else registry
    try:
        key = IssueCode(code)
    except ValueError:
        return None
    return table.get(key)


def get_codes_by_category(category: IssueCategory | str) -> list[IssueCode]:
    """Get all issue codes in a category."""
    return [
        definition.code
        for definition in ISSUE_DEFINITIONS.values()
        if definition.category == category
    ]


def get_codes_by_severity(severity: IssueSeverity | str) -> list[IssueCode]:
    """Get all issue codes with a severity level."""
    return [
        definition.code
        for definition in ISSUE_DEFINITIONS.values()
        if definition.severity == severity
    ]

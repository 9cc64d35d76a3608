"""Rule thresholds.

Every numeric cutoff a rule compares against lives here so both scoring
models read the same numbers.
"""

# Meta tags (characters)
TITLE_MIN_LENGTH = 30
TITLE_MAX_LENGTH = 60
META_DESC_MIN_LENGTH = 120
META_DESC_MAX_LENGTH = 160

# Images
ALT_TEXT_PENALTY_PER_IMAGE = 3
ALT_TEXT_MAX_PENALTY = 15

# Server / transport
SLOW_RESPONSE_MS = 2000
LARGE_PAGE_SIZE_BYTES = 3 * 1024 * 1024
REDIRECT_CHAIN_MIN_HOPS = 3
HTTP_ERROR_STATUS = 400

# Sitemap
SITEMAP_MIN_COVERAGE = 0.5

# Content volume (words)
THIN_CONTENT_WORDS = 200
MODERATE_CONTENT_WORDS = 500
MODERATE_CONTENT_PENALTY = -8
EEAT_MIN_WORDS = 500
DIRECT_ANSWER_MIN_WORDS = 200
SUMMARY_SECTION_MIN_WORDS = 500
AUTHORITATIVE_CITATION_MIN_WORDS = 300  # Strictly greater than
PDF_ONLY_CONTENT_MAX_WORDS = 300

# LLM quality scores (0-100) map to a 0-20 deduction
LLM_SCORE_DEDUCTION_SCALE = 0.2
STRUCTURE_SCORE_POOR = 50

# Links
MIN_INTERNAL_LINKS = 2
EXCESSIVE_LINK_RATIO = 3

# Readability
FLESCH_POOR = 50
FLESCH_MODERATE = 60
FLESCH_MODERATE_PENALTY = -5
TEXT_HTML_RATIO_MIN = 15  # Percent
AI_ASSISTANT_SPEAK_MIN_COUNT = 3
SENTENCE_LENGTH_VARIANCE_MIN = 15

# Lighthouse (0-1)
LH_PERF_POOR = 0.5
LH_PERF_POOR_PENALTY = -20
LH_PERF_MODERATE = 0.8
LH_PERF_MODERATE_PENALTY = -10
LH_SEO_MIN = 0.8
LH_A11Y_MIN = 0.7
LH_BP_MIN = 0.8

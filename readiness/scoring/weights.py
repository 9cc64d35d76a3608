"""Weight sets for both scoring models.

Weights are always normalized to sum to 1.0 before use. Callers may pass
their own; otherwise the configured override or the defaults apply.
"""

from collections.abc import Mapping

import structlog

from readiness.config import get_settings

logger = structlog.get_logger(__name__)

PILLAR_IDS: tuple[str, ...] = ("technical", "content", "ai_readiness", "performance")

DEFAULT_PILLAR_WEIGHTS: dict[str, float] = {
    "technical": 0.25,
    "content": 0.30,
    "ai_readiness": 0.30,
    "performance": 0.15,
}

DIMENSION_IDS: tuple[str, ...] = (
    "llms_txt",
    "robots_crawlability",
    "sitemap",
    "schema_markup",
    "meta_tags",
    "bot_access",
    "content_citeability",
)

DIMENSION_DISPLAY_NAMES: dict[str, str] = {
    "llms_txt": "llms.txt",
    "robots_crawlability": "Robots & Crawlability",
    "sitemap": "Sitemap",
    "schema_markup": "Schema Markup",
    "meta_tags": "Meta Tags & Discovery",
    "bot_access": "Bot Access & Performance",
    "content_citeability": "Content & Citeability",
}

DEFAULT_DIMENSION_WEIGHTS: dict[str, float] = {
    "llms_txt": 0.07,
    "robots_crawlability": 0.19,
    "sitemap": 0.03,
    "schema_markup": 0.08,
    "meta_tags": 0.09,
    "bot_access": 0.14,
    "content_citeability": 0.40,
}


def normalize_weights(
    weights: Mapping[str, float],
    defaults: Mapping[str, float],
    event: str = "invalid_weights",
) -> dict[str, float]:
    """
    Scale ``weights`` so they sum to 1.0 over the keys of ``defaults``.

    Keys missing from ``weights`` take their default value; unknown keys are
    ignored. A set with a negative weight or a non-positive total is
    rejected in favor of the (normalized) defaults.

    Args:
        weights: Caller-supplied weights
        defaults: The model's default weight set, which also fixes the keys
        event: Log event name used when the weights are rejected

    Returns:
        Dict of id -> normalized weight
    """
    resolved = {key: float(weights.get(key, default)) for key, default in defaults.items()}
    total = sum(resolved.values())

    if total <= 0 or any(value < 0 for value in resolved.values()):
        logger.warning(event, weights=dict(weights), total=total)
        resolved = dict(defaults)
        total = sum(resolved.values())

    return {key: value / total for key, value in resolved.items()}


def resolve_pillar_weights(weights: Mapping[str, float] | None = None) -> dict[str, float]:
    """Explicit weights, then the configured override, then defaults."""
    chosen = weights if weights is not None else get_settings().pillar_weights
    return normalize_weights(
        chosen if chosen is not None else DEFAULT_PILLAR_WEIGHTS,
        DEFAULT_PILLAR_WEIGHTS,
        event="invalid_pillar_weights",
    )


def resolve_dimension_weights(weights: Mapping[str, float] | None = None) -> dict[str, float]:
    """Explicit weights, then the configured override, then defaults."""
    chosen = weights if weights is not None else get_settings().dimension_weights
    return normalize_weights(
        chosen if chosen is not None else DEFAULT_DIMENSION_WEIGHTS,
        DEFAULT_DIMENSION_WEIGHTS,
        event="invalid_dimension_weights",
    )

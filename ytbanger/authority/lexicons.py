"""
Keyword lexicons used by the keyword-density signals.

Authority terms mark methodical, engineering-heavy content; clickbait terms
mark hype framing. Matching is plain lowercase substring containment, so every
entry must already be lowercase.
"""
import logging
from typing import Dict, Tuple

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "es"

# Spanish lexicons (the catalogue the scoring was tuned on)
AUTHORITY_KEYWORDS_ES: Tuple[str, ...] = (
    "metodología",
    "framework",
    "arquitectura",
    "sistema",
    "pipeline",
    "benchmark",
    "benchmarking",
    "caso real",
    "casos reales",
    "patrón",
    "patrones",
    "diseño",
    "integration",
    "integración",
    "productividad",
    "workflow",
    "trazabilidad",
    "observabilidad",
    "calidad",
    "seguridad",
    "refactor",
    "refactorización",
    "escala",
    "escalable",
    "latencia",
    "performance",
    "métricas",
    "testing",
    "eval",
    "evaluación",
    "coste",
    "costos",
)

CLICKBAIT_KEYWORDS_ES: Tuple[str, ...] = (
    "no creerás",
    "increíble",
    "secreto",
    "truco",
    "hack",
    "viral",
    "bomba",
    "explota",
    "impactante",
    "100x",
    "x10",
    "x100",
    "te va a volar la cabeza",
    "locura",
    "brutal",
)

AUTHORITY_KEYWORDS_EN: Tuple[str, ...] = (
    "methodology",
    "framework",
    "architecture",
    "system design",
    "pipeline",
    "benchmark",
    "benchmarking",
    "case study",
    "case-study",
    "real-world",
    "pattern",
    "design",
    "integration",
    "productivity",
    "workflow",
    "traceability",
    "observability",
    "quality",
    "security",
    "refactor",
    "refactoring",
    "scale",
    "scalable",
    "latency",
    "performance",
    "metrics",
    "testing",
    "eval",
    "evaluation",
    "cost",
)

CLICKBAIT_KEYWORDS_EN: Tuple[str, ...] = (
    "you won't believe",
    "unbelievable",
    "secret",
    "trick",
    "hack",
    "viral",
    "insane",
    "explodes",
    "shocking",
    "100x",
    "10x",
    "x100",
    "blow your mind",
    "crazy",
    "brutal",
)

LEXICONS: Dict[str, Dict[str, Tuple[str, ...]]] = {
    "es": {"authority": AUTHORITY_KEYWORDS_ES, "clickbait": CLICKBAIT_KEYWORDS_ES},
    "en": {"authority": AUTHORITY_KEYWORDS_EN, "clickbait": CLICKBAIT_KEYWORDS_EN},
}

SUPPORTED_LOCALES = tuple(LEXICONS)


def get_lexicons(locale: str = DEFAULT_LOCALE) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """Return the (authority, clickbait) keyword tuples for a locale.

    Raises:
        ValueError: If the locale has no lexicon.
    """
    try:
        lexicon = LEXICONS[locale]
    except KeyError:
        raise ValueError(
            f"Unsupported locale '{locale}'. Choose from: {', '.join(SUPPORTED_LOCALES)}"
        ) from None
    logger.debug("Using %s lexicons", locale)
    return lexicon["authority"], lexicon["clickbait"]

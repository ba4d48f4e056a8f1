"""LLM-based title generation for journal entries."""

import re

import structlog

from llm import LLMProvider, get_llm_provider

logger = structlog.get_logger().bind(source="titler")

FALLBACK_TITLE = "untitled memory"
MAX_CONTENT_CHARS = 2000
MAX_TITLE_CHARS = 50
MAX_TOKENS = 30
TEMPERATURE = 0.4

_SYSTEM = """You are a Poetic Archivist. Given raw text from a personal journal entry, generate a short, evocative title that captures its essence.

Rules:
- 2-5 words only
- Abstract and philosophical
- All lowercase
- No punctuation
- No articles (a, an, the) at the start
- Evoke mood, not literal content

Examples of good titles:
- recursive faults
- the glass horizon
- weight of static
- borrowed silence
- maps without edges"""

_PROMPT = "Generate a title for this journal entry:\n\n{content}"

_STRIP_CHARS = re.compile(r"[.,!?;:'\"]")


def clean_title(text: str) -> str | None:
    """Normalize raw model output into a title.

    Returns None when the result is empty or shorter than two words.
    """
    title = _STRIP_CHARS.sub("", text.strip().lower())[:MAX_TITLE_CHARS]
    if not title or len(title.split()) < 2:
        return None
    return title


def generate_title(content: str, llm_provider: LLMProvider | None = None) -> str:
    """Generate a short poetic title for entry content.

    Uses the process-wide provider when none is passed. Never raises:
    any failure returns FALLBACK_TITLE.
    """
    provider = llm_provider or get_llm_provider()
    if provider is None:
        return FALLBACK_TITLE

    snippet = content[:MAX_CONTENT_CHARS]
    try:
        result = provider.generate(
            messages=[{"role": "user", "content": _PROMPT.format(content=snippet)}],
            system=_SYSTEM,
            max_tokens=MAX_TOKENS,
            temperature=TEMPERATURE,
        )
        title = clean_title(result or "")
    except Exception as e:
        logger.warning("title_generation_failed", error=str(e))
        return FALLBACK_TITLE

    if title is None:
        logger.debug("title_rejected", raw=result)
        return FALLBACK_TITLE
    return title

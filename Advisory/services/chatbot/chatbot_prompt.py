import logging
from pathlib import Path
from typing import Optional
from cachetools import LRUCache
from Advisory.core.config import settings

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_PROMPT = (
    "You are Business Bot. Reply in same language as user. "
    "Keep replies short and precise. Format your answers in clear paragraphs."
)

# Keyed by prompt path; only successful reads are stored
prompt_cache: LRUCache[str, str] = LRUCache(maxsize=1)


def get_system_prompt(path: Optional[str] = None) -> str:
    """Return the system prompt, reading the prompt file on first use.

    A failed read or an empty file falls back to DEFAULT_SYSTEM_PROMPT
    without caching it, so the next call tries the file again.
    """
    path = path or settings.SYSTEM_PROMPT_PATH

    cached = prompt_cache.get(path)
    if cached is not None:
        return cached

    try:
        text = Path(path).read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read system prompt from %s, using default: %s", path, e)
        return DEFAULT_SYSTEM_PROMPT

    if not text:
        logger.warning("System prompt file %s is empty, using default", path)
        return DEFAULT_SYSTEM_PROMPT

    prompt_cache[path] = text
    return text


def build_messages(message: str) -> list[dict]:
    """Conversation sent upstream: optional system prompt, then the user turn."""
    messages = []
    if settings.SYSTEM_PROMPT_ENABLED:
        messages.append({"role": "system", "content": get_system_prompt()})
    messages.append({"role": "user", "content": message})
    return messages

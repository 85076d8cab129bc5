"""
Answer Service Payloads

Builds the chat-completions request for the answer service and unpacks
its response into (content, citations). The HTTP transport itself lives
with the caller; everything here works on already-resolved values.
"""

import json
from typing import Any, Dict, List, Optional, Tuple
from dataclasses import dataclass

from config.logging_config import get_logger
from config.settings import Settings, settings as default_settings
from src.research.errors import ResearchConfigurationError, ResearchServiceError
from src.research.prompts import SYSTEM_PROMPT

logger = get_logger(__name__)


@dataclass(frozen=True)
class ServiceAnswer:
    """Answer text and its citation URLs in the service's order."""
    content: str
    citations: Tuple[str, ...] = ()


def build_headers(settings: Optional[Settings] = None) -> Dict[str, str]:
    """
    Authorization headers for the answer service.

    Raises:
        ResearchConfigurationError: If PERPLEXITY_API_KEY is not configured
    """
    settings = settings or default_settings
    if not settings.has_research_api_key():
        raise ResearchConfigurationError("PERPLEXITY_API_KEY is not configured")

    logger.debug("Answer service key loaded", key=settings.mask_sensitive("PERPLEXITY_API_KEY"))
    return {
        "Authorization": f"Bearer {settings.PERPLEXITY_API_KEY}",
        "Content-Type": "application/json",
    }


def build_chat_payload(prompt: str, settings: Optional[Settings] = None) -> Dict[str, Any]:
    """JSON body of a chat-completions request for the given prompt."""
    settings = settings or default_settings
    return {
        "model": settings.PERPLEXITY_MODEL,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ],
        "temperature": settings.PERPLEXITY_TEMPERATURE,
        "top_p": settings.PERPLEXITY_TOP_P,
        "return_images": False,
        "return_related_questions": False,
        "search_recency_filter": settings.PERPLEXITY_RECENCY_FILTER,
        "stream": False,
    }


def _first_message_content(body: Dict[str, Any]) -> str:
    choices = body.get("choices")
    if not isinstance(choices, list) or not choices:
        return ""
    first = choices[0]
    if not isinstance(first, dict):
        return ""
    message = first.get("message")
    if not isinstance(message, dict):
        return ""
    content = message.get("content")
    return content if isinstance(content, str) else ""


def parse_service_response(status_code: int, body: Any) -> ServiceAnswer:
    """
    Unpack an answer service response.

    Missing content or citations become empty values; the extraction
    engine then falls back as usual.

    Args:
        status_code: HTTP status of the response
        body: Decoded JSON body (or raw text for error responses)

    Returns:
        ServiceAnswer

    Raises:
        ResearchServiceError: On a non-2xx status or a non-object body
    """
    if not 200 <= status_code < 300:
        detail = body if isinstance(body, str) else json.dumps(body)
        logger.error("Answer service request failed", status_code=status_code)
        raise ResearchServiceError(status_code, detail)

    if not isinstance(body, dict):
        raise ResearchServiceError(status_code, "Response body is not a JSON object")

    raw_citations = body.get("citations")
    if not isinstance(raw_citations, list):
        raw_citations = []
    citations: List[str] = [url for url in raw_citations if isinstance(url, str)]
    answer = ServiceAnswer(content=_first_message_content(body), citations=tuple(citations))

    logger.debug(
        "Answer service response parsed",
        content_length=len(answer.content),
        citations=len(answer.citations),
    )
    return answer


__all__ = ["ServiceAnswer", "build_headers", "build_chat_payload", "parse_service_response"]

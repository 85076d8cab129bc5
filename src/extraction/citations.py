"""
Citation Formatter

Turns research text plus the service's ordered citation URLs into display
markup: paragraphs, emphasis, and inline [n] markers linked to the n-th URL.

The rewrite is idempotent. Feeding its own output back in neither wraps
the paragraphs again nor links an already-linked marker.
"""

import re
from typing import Sequence, Tuple
from dataclasses import dataclass
from urllib.parse import urlparse

from config.logging_config import get_logger
from src.extraction.models import Citation

logger = get_logger(__name__)


FALLBACK_SOURCE = "Source"

_EXTRA_BLANK_LINES = re.compile(r"\n{3,}")
_EMPTY_PARAGRAPH = re.compile(r"<p>\s*</p>")
_BOLD = re.compile(r"\*\*([^*]+)\*\*")
_ITALIC = re.compile(r"\*([^*]+)\*")

_LINK_TEMPLATE = (
    '<sup><a href="{url}" target="_blank" rel="noopener noreferrer" '
    'class="text-primary hover:underline">[{number}]</a></sup>'
)


@dataclass(frozen=True)
class FormattedResearch:
    """Display markup and the citation records it links to."""
    research: str
    citations: Tuple[Citation, ...] = ()


def citation_source(url: str) -> str:
    """
    Host of the URL without a leading "www.".

    Falls back to "Source" when no host can be parsed.

    Example:
        >>> citation_source("https://www.espn.com/a")
        'espn.com'
    """
    try:
        host = urlparse(url).hostname
    except ValueError:
        return FALLBACK_SOURCE
    if not host:
        return FALLBACK_SOURCE
    if host.startswith("www."):
        host = host[len("www."):]
    return host


def build_citations(urls: Sequence[str]) -> Tuple[Citation, ...]:
    """Numbered Citation records in input order, numbering from 1."""
    return tuple(
        Citation(
            number=number,
            url=url,
            source=citation_source(url),
            title=f"Reference {number}",
        )
        for number, url in enumerate(urls, start=1)
    )


def render_markup(content: str) -> str:
    """
    Convert plain text with markdown emphasis into paragraph markup.

    Blank lines become paragraph boundaries, single newlines become <br>,
    **bold** and *italic* become <strong>/<em>.
    """
    text = content.replace("\r\n", "\n")
    text = _EXTRA_BLANK_LINES.sub("\n\n", text)
    text = text.replace("\n\n", "</p><p>")
    text = text.replace("\n", "<br>")

    if not (text.startswith("<p>") and text.endswith("</p>")):
        text = f"<p>{text}</p>"
    text = _EMPTY_PARAGRAPH.sub("", text)

    text = _BOLD.sub(r"<strong>\1</strong>", text)
    text = _ITALIC.sub(r"<em>\1</em>", text)
    return text


def link_citations(markup: str, urls: Sequence[str]) -> str:
    """
    Replace [n] markers with links to urls[n - 1].

    Numbers are scanned from highest to lowest so multi-digit markers are
    handled before their single-digit prefixes. Markers already inside a
    link are left alone.
    """
    for number in range(len(urls), 0, -1):
        marker = re.compile(rf"\[{number}\](?!</a>)")
        link = _LINK_TEMPLATE.format(url=urls[number - 1], number=number)
        markup = marker.sub(lambda _match: link, markup)
    return markup


def format_research(content: str, urls: Sequence[str]) -> FormattedResearch:
    """
    Build display markup and citation records for research text.

    Args:
        content: Research text from the answer service
        urls: Citation URLs in the order the service returned them

    Returns:
        FormattedResearch with the rewritten markup and Citation tuple

    Example:
        >>> result = format_research("Duke leads [1].", ["https://www.espn.com/a"])
        >>> result.citations[0].source
        'espn.com'
    """
    urls = list(urls)
    citations = build_citations(urls)
    research = link_citations(render_markup(content), urls)

    logger.debug(
        "Formatted research",
        content_length=len(content),
        citations=len(citations),
    )
    return FormattedResearch(research=research, citations=citations)


__all__ = [
    "FormattedResearch",
    "citation_source",
    "build_citations",
    "render_markup",
    "link_citations",
    "format_research",
    "FALLBACK_SOURCE",
]

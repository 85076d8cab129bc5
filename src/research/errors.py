"""
Research Boundary Errors

Raised only at the boundary with the answer service. Unparseable answer
text is never an error; it degrades to fallback results inside the
extraction engine.
"""

from typing import Optional


class ResearchError(Exception):
    """Base class for research boundary failures."""


class ResearchConfigurationError(ResearchError):
    """The answer service cannot be called because configuration is missing."""


class ResearchServiceError(ResearchError):
    """
    The answer service returned a non-success response.

    Attributes:
        status_code: HTTP status returned by the service
        detail: Response body text, if any
    """

    def __init__(self, status_code: int, detail: Optional[str] = None):
        self.status_code = status_code
        self.detail = detail or ""
        super().__init__(f"Perplexity API error: {status_code} - {self.detail}")


class InvalidRequestError(ResearchError):
    """A tournament or matchup request failed validation."""


__all__ = [
    "ResearchError",
    "ResearchConfigurationError",
    "ResearchServiceError",
    "InvalidRequestError",
]

"""Exception hierarchy for articleparser.

Every failure of an extraction call is an :class:`ExtractionError`.
:class:`NoContentFound` is the one non-fatal kind: the pipeline catches it
and still returns an :class:`~articleparser.items.Article` (with empty
content) so metadata is not lost.
"""

from __future__ import annotations


class ExtractionError(RuntimeError):
    """Base class for all articleparser errors.

    Attributes:
        url -- the URL being processed ("" when unknown)
    """

    def __init__(self, message: str, url: str = "") -> None:
        super().__init__(message)
        self.url = url


class InputError(ExtractionError):
    """The caller supplied something that cannot be processed."""


class InvalidURLError(InputError):
    """The URL is malformed or uses an unsupported scheme."""


class EmptyDocumentError(InputError):
    """The response body was empty after pre-processing."""


class RetrievalError(ExtractionError):
    """Raised when a URL cannot be fetched (HTTP error, network error, timeout).

    Attributes:
        url    -- the URL that failed
        status -- HTTP status code (0 if no response was received)
    """

    def __init__(self, message: str, url: str = "", status: int = 0) -> None:
        super().__init__(message, url=url)
        self.status = status


class ParseError(ExtractionError):
    """The markup could not be turned into a document tree."""


class NoContentFound(ExtractionError):
    """Candidate selection found no paragraph worth scoring."""

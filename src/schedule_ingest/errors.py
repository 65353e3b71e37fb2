"""Error hierarchy for schedule ingestion.

Network failures are split into transient (retry) and permanent (give up) so
tenacity retry decorators can classify them by type:

    @retry(retry=retry_if_exception_type(TransientError), stop=stop_after_attempt(3))
    def download_pdf(link: PDFLink) -> Path:
        ...

Data problems inside a schedule (unparseable names, missing rosters, periods
without times) are not errors: the parsing core logs them and returns less.
"""


class IngestError(Exception):
    """Base exception for all ingestion errors."""

    pass


class TransientError(IngestError):
    """Temporary failure that may succeed on retry.

    Examples: connection resets, timeouts, 502/503 from the school website.
    """

    pass


class RateLimitError(TransientError):
    """HTTP 429 from the website - needs a longer backoff."""

    pass


class PermanentError(IngestError):
    """Failure that won't succeed on retry.

    Examples: 404 on a PDF link, a schedule page without any PDF anchors.
    """

    pass


class ExtractionError(PermanentError):
    """A PDF could not be opened or produced no usable text."""

    pass

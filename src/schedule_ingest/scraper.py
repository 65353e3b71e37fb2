"""Discover and download the weekly schedule PDFs from the school website.

The daily-schedule page is static HTML; each week's schedule is an anchor
like

    <a href="/o/ehs/documents/..." data-file-name="Apr 6-10.pdf"
       data-resource-uuid="...">April 6th - 10th</a>

The PDF is saved under its anchor text, because that text (not the
uploaded file name) reliably names the week.
"""

from pathlib import Path
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from schedule_ingest.errors import PermanentError, RateLimitError, TransientError
from schedule_ingest.logging import get_logger
from schedule_ingest.models import PDFLink
from schedule_ingest.utils import pdf_filename

log = get_logger(__name__)

PDF_ANCHOR_SELECTOR = 'a[data-file-name$=".pdf"]'


def parse_pdf_links(html: str, base_url: str) -> list[PDFLink]:
    """Extract schedule PDF anchors from the schedule page HTML.

    Anchors missing a file name, resource UUID or href are skipped.
    """
    soup = BeautifulSoup(html, "html.parser")

    links: list[PDFLink] = []
    for anchor in soup.select(PDF_ANCHOR_SELECTOR):
        file_name = anchor.get("data-file-name")
        resource_uuid = anchor.get("data-resource-uuid")
        href = anchor.get("href")
        if not (file_name and resource_uuid and href):
            continue
        links.append(
            PDFLink(
                file_name=file_name,
                resource_uuid=resource_uuid,
                url=urljoin(base_url, href),
                text=anchor.get_text(strip=True),
            )
        )
    return links


class ScheduleScraper:
    """Fetches the schedule page and downloads the PDFs it links to."""

    def __init__(
        self,
        page_url: str,
        base_url: str,
        download_dir: str | Path = "downloads",
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        self.page_url = page_url
        self.base_url = base_url
        self.download_dir = Path(download_dir)
        self.timeout = timeout
        self.session = session or requests.Session()

        self.download_dir.mkdir(parents=True, exist_ok=True)

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, max=10),
        retry=retry_if_exception_type(TransientError),
        reraise=True,
    )
    def _get(self, url: str) -> requests.Response:
        """GET a URL, classifying failures for retry.

        Raises:
            RateLimitError: On HTTP 429.
            TransientError: On connection errors, timeouts and 5xx responses.
            PermanentError: On other 4xx responses.
        """
        try:
            response = self.session.get(url, timeout=self.timeout)
        except (requests.ConnectionError, requests.Timeout) as e:
            log.warning("request_failed", url=url, error=str(e))
            raise TransientError(f"Request to {url} failed: {e}") from e

        if response.status_code == 429:
            raise RateLimitError(f"Rate limited by {url}")
        if response.status_code >= 500:
            raise TransientError(f"{url} returned {response.status_code}")
        if response.status_code >= 400:
            raise PermanentError(f"{url} returned {response.status_code}")
        return response

    def extract_pdf_links(self) -> list[PDFLink]:
        """Fetch the schedule page and list its PDF links."""
        log.info("schedule_page_fetching", url=self.page_url)
        response = self._get(self.page_url)
        links = parse_pdf_links(response.text, self.base_url)
        log.info("pdf_links_found", count=len(links))
        return links

    def download_pdf(self, link: PDFLink) -> Path:
        """Download one PDF into the download directory.

        Returns:
            Path of the saved file.
        """
        response = self._get(link.url)
        path = self.download_dir / pdf_filename(link)
        path.write_bytes(response.content)
        log.info("pdf_downloaded", document=link.text, path=str(path))
        return path

    def download_all(self) -> list[Path]:
        """Download every linked PDF, skipping the ones that fail."""
        links = self.extract_pdf_links()
        if not links:
            log.warning("pdf_links_missing", url=self.page_url)
            return []

        downloaded: list[Path] = []
        for link in links:
            try:
                downloaded.append(self.download_pdf(link))
            except (TransientError, PermanentError) as e:
                log.error("pdf_download_failed", document=link.text, error=str(e))

        log.info("pdf_downloads_finished", downloaded=len(downloaded), total=len(links))
        return downloaded

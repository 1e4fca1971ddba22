from abc import abstractmethod

from resume_audit.extraction.base import BaseDocumentExtractor
from resume_audit.extraction.exceptions import ExtractionError
from resume_audit.extraction.models import PageTextRun
from resume_audit.sanitization import sanitize


class BasePdfExtractor(BaseDocumentExtractor):
    """Contract for all PDF text extraction adapters.

    Adapters only decide how a page is split into fragments. Joining pages
    and sanitizing the result is shared so every engine produces text in the
    same shape.
    """

    engine_name = "pdf"

    def extract(self, data: bytes) -> str:
        try:
            pages = self.read_pages(data)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(
                f"{self.engine_name} extraction failed: {exc}"
            ) from exc
        return sanitize(join_pages(pages))

    @abstractmethod
    def read_pages(self, pdf_bytes: bytes) -> list[PageTextRun]:
        """Decode PDF bytes into one PageTextRun per page, first page first."""


def join_pages(pages: list[PageTextRun]) -> str:
    """Fold page runs into one text blob, one line break after each page."""
    ordered = sorted(pages, key=lambda page: page.page_number)
    return "".join(f"{page.text}\n" for page in ordered)

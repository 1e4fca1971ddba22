from itertools import groupby

import pymupdf

from resume_audit.extraction.models import PageTextRun
from resume_audit.extraction.pdf.base import BasePdfExtractor


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF.

    Fragments come from the page's text trace: one fragment per text-show
    operation (``seqno``), in content-stream order. Runs are never merged
    by font or position.
    """

    engine_name = "pymupdf"

    def read_pages(self, pdf_bytes: bytes) -> list[PageTextRun]:
        runs: list[PageTextRun] = []
        with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
            for index in range(doc.page_count):
                page = doc.load_page(index)
                runs.append(
                    PageTextRun(
                        page_number=index + 1,
                        fragments=tuple(self._show_text_runs(page)),
                    )
                )
        return runs

    @staticmethod
    def _show_text_runs(page: pymupdf.Page) -> list[str]:
        fragments: list[str] = []
        for _, spans in groupby(page.get_texttrace(), key=lambda span: span["seqno"]):
            text = "".join(
                chr(char[0]) for span in spans for char in span["chars"] if char[0] > 0
            )
            if text:
                fragments.append(text)
        return fragments

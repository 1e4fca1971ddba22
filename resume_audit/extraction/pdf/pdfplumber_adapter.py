import io

import pdfplumber
from pdfminer.pdfcolor import PDFColorSpace
from pdfminer.pdfdevice import PDFDevice, PDFTextSeq
from pdfminer.pdffont import PDFUnicodeNotDefined
from pdfminer.pdfinterp import (
    PDFGraphicState,
    PDFPageInterpreter,
    PDFResourceManager,
    PDFTextState,
)

from resume_audit.extraction.models import PageTextRun
from resume_audit.extraction.pdf.base import BasePdfExtractor


class _TextShowCollector(PDFDevice):
    """pdfminer device that records one fragment per text-show operator."""

    def __init__(self, rsrcmgr: PDFResourceManager) -> None:
        super().__init__(rsrcmgr)
        self.fragments: list[str] = []

    def render_string(
        self,
        textstate: PDFTextState,
        seq: PDFTextSeq,
        ncs: PDFColorSpace,
        graphicstate: PDFGraphicState,
    ) -> None:
        font = textstate.font
        if font is None:
            return
        chars: list[str] = []
        for obj in seq:
            # numbers in a TJ array are kerning offsets
            if not isinstance(obj, bytes):
                continue
            for cid in font.decode(obj):
                try:
                    chars.append(font.to_unichr(cid))
                except PDFUnicodeNotDefined:
                    continue
        text = "".join(chars)
        if text:
            self.fragments.append(text)


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber.

    pdfplumber opens the document and walks its pages; each page's content
    stream is replayed through pdfminer so that every Tj/TJ call becomes one
    fragment, in stream order. Character positions are not used.
    """

    engine_name = "pdfplumber"

    def read_pages(self, pdf_bytes: bytes) -> list[PageTextRun]:
        runs: list[PageTextRun] = []
        rsrcmgr = PDFResourceManager()
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            for page in pdf.pages:
                collector = _TextShowCollector(rsrcmgr)
                PDFPageInterpreter(rsrcmgr, collector).process_page(page.page_obj)
                runs.append(
                    PageTextRun(
                        page_number=page.page_number,
                        fragments=tuple(collector.fragments),
                    )
                )
        return runs

"""DOCX text extraction built on python-docx."""

import io
from collections.abc import Iterator

import docx
from docx.table import Table
from docx.text.paragraph import Paragraph

from resume_audit.extraction.base import BaseDocumentExtractor
from resume_audit.extraction.exceptions import ExtractionError
from resume_audit.sanitization import sanitize


class DocxExtractor(BaseDocumentExtractor):
    """Extracts the raw text of a Word document.

    Paragraphs and table cells are read in body order and separated by a
    blank line. Styling, images and table borders are dropped.
    """

    def extract(self, data: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(data))
            blocks = list(_iter_text_blocks(document.iter_inner_content()))
        except Exception as exc:
            raise ExtractionError(f"python-docx extraction failed: {exc}") from exc
        return sanitize("\n\n".join(blocks))


def _iter_text_blocks(content: Iterator[Paragraph | Table]) -> Iterator[str]:
    for item in content:
        if isinstance(item, Paragraph):
            yield item.text
        else:
            yield from _iter_table_blocks(item)


def _iter_table_blocks(table: Table) -> Iterator[str]:
    # merged cells come back once per grid column they span; lxml hands out
    # the same proxy for a node while a reference to it is alive
    seen: set[object] = set()
    for row in table.rows:
        for cell in row.cells:
            if cell._tc in seen:
                continue
            seen.add(cell._tc)
            yield from _iter_text_blocks(cell.iter_inner_content())

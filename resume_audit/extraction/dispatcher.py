from pathlib import PurePath

from resume_audit.extraction.base import BaseDocumentExtractor
from resume_audit.extraction.exceptions import UnsupportedFormatError
from resume_audit.extraction.models import (
    DOCX_MIME_TYPE,
    PDF_MIME_TYPE,
    DocumentFormat,
    RawDocument,
)
from resume_audit.logging.logger import Log

MIME_FORMATS: dict[str, DocumentFormat] = {
    PDF_MIME_TYPE: DocumentFormat.PDF,
    DOCX_MIME_TYPE: DocumentFormat.DOCX,
}

EXTENSION_FORMATS: dict[str, DocumentFormat] = {
    ".pdf": DocumentFormat.PDF,
    ".docx": DocumentFormat.DOCX,
}


def detect_format(document: RawDocument) -> DocumentFormat:
    """Resolve the document format from its MIME type, then its file name.

    Raises:
        UnsupportedFormatError: if neither identifies a PDF or DOCX file.
    """
    mime_type = document.mime_type.split(";", 1)[0].strip().lower()
    fmt = MIME_FORMATS.get(mime_type)
    if fmt is not None:
        return fmt
    # unrecognised or missing types (application/x-pdf, octet-stream) defer to the name
    fmt = EXTENSION_FORMATS.get(PurePath(document.filename).suffix.lower())
    if fmt is not None:
        return fmt
    raise UnsupportedFormatError(
        f"Unsupported format: '{document.filename or 'upload'}' "
        f"({document.mime_type or 'unknown type'}). Upload a PDF or DOCX file."
    )


class ExtractionDispatcher:
    """Routes an uploaded document to the extractor for its format."""

    def __init__(
        self,
        pdf_extractor: BaseDocumentExtractor,
        docx_extractor: BaseDocumentExtractor,
    ) -> None:
        self._extractors: dict[DocumentFormat, BaseDocumentExtractor] = {
            DocumentFormat.PDF: pdf_extractor,
            DocumentFormat.DOCX: docx_extractor,
        }

    def extract(self, document: RawDocument) -> str:
        """Extract sanitized text from an uploaded document.

        Raises:
            UnsupportedFormatError: for anything other than PDF or DOCX.
            ExtractionError: propagated from the extractor.
        """
        fmt = detect_format(document)
        Log.info(
            f"Extracting {fmt.value} text from '{document.filename}' "
            f"({len(document.content)} bytes)"
        )
        text = self._extractors[fmt].extract(document.content)
        Log.info(f"Extracted {len(text)} chars from '{document.filename}'")
        return text

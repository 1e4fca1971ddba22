from resume_audit.config.settings import Settings
from resume_audit.extraction.dispatcher import ExtractionDispatcher
from resume_audit.extraction.docx_extractor import DocxExtractor
from resume_audit.extraction.pdf.factory import PdfExtractorFactory


def build_dispatcher(settings: Settings) -> ExtractionDispatcher:
    """Build an ExtractionDispatcher with the configured PDF engine."""
    return ExtractionDispatcher(
        pdf_extractor=PdfExtractorFactory.create(settings),
        docx_extractor=DocxExtractor(),
    )

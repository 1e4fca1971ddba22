from resume_audit.config.settings import Settings
from resume_audit.extraction.pdf.base import BasePdfExtractor
from resume_audit.extraction.pdf.pdfplumber_adapter import PdfPlumberAdapter
from resume_audit.extraction.pdf.pymupdf_adapter import PyMuPdfAdapter
from resume_audit.logging.logger import Log


class PdfExtractorFactory:
    """Creates the correct PDF extractor based on settings."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        if settings.worker_asset_location:
            Log.debug(
                f"PDF engine '{engine}' decodes in-process; ignoring worker asset "
                f"{settings.worker_asset_location}"
            )
        return adapter_cls()

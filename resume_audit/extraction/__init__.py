from resume_audit.extraction.dispatcher import ExtractionDispatcher, detect_format
from resume_audit.extraction.exceptions import (
    DocumentError,
    ExtractionError,
    UnsupportedFormatError,
)
from resume_audit.extraction.factory import build_dispatcher
from resume_audit.extraction.models import DocumentFormat, PageTextRun, RawDocument

__all__ = [
    "DocumentError",
    "DocumentFormat",
    "ExtractionDispatcher",
    "ExtractionError",
    "PageTextRun",
    "RawDocument",
    "UnsupportedFormatError",
    "build_dispatcher",
    "detect_format",
]

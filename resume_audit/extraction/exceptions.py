class DocumentError(Exception):
    """Base exception for all document extraction errors."""


class UnsupportedFormatError(DocumentError):
    """Raised when an upload is neither a PDF nor a DOCX document."""


class ExtractionError(DocumentError):
    """Raised when a decoder cannot parse the uploaded bytes."""

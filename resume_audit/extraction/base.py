from abc import ABC, abstractmethod


class BaseDocumentExtractor(ABC):
    """Contract for all document text extractors."""

    @abstractmethod
    def extract(self, data: bytes) -> str:
        """Extract sanitized plain text from raw document bytes.

        Args:
            data: Raw file content.

        Returns:
            Extracted text as a single sanitized string.

        Raises:
            ExtractionError: if the bytes cannot be decoded.
        """

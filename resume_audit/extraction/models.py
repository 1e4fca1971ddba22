import mimetypes
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)

mimetypes.add_type(DOCX_MIME_TYPE, ".docx")


class DocumentFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"


@dataclass(frozen=True)
class RawDocument:
    """Uploaded file bytes with the type information the client declared."""

    content: bytes
    mime_type: str = ""
    filename: str = ""

    @classmethod
    def from_path(cls, path: Path) -> "RawDocument":
        """Read a file from disk, guessing its MIME type from the name."""
        mime_type, _ = mimetypes.guess_type(path.name)
        return cls(
            content=path.read_bytes(),
            mime_type=mime_type or "",
            filename=path.name,
        )


@dataclass(frozen=True)
class PageTextRun:
    """Text fragments of one PDF page in decoder order."""

    page_number: int
    fragments: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return " ".join(self.fragments)

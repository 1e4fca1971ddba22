import io
from collections.abc import Iterator

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from resume_audit.logging.logger import Log


def _pdf(*pages: list[str]) -> bytes:
    """Render one page per argument, each string drawn on its own line."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 40
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory) -> None:
    """Keep a developer's .env and exported settings out of the tests."""
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
    for name in (
        "APP_ENV",
        "LOG_LEVEL",
        "PDF_ENGINE",
        "WORKER_ASSET_LOCATION",
        "ANALYSIS_PROVIDER",
        "ANALYSIS_API_KEY",
        "ANALYSIS_MODEL_NAME",
        "ANALYSIS_BASE_URL",
        "ANALYSIS_TIMEOUT_SECONDS",
        "ANALYSIS_TEMPERATURE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return _pdf(["Hello PDF World"])


@pytest.fixture()
def three_page_pdf_bytes() -> bytes:
    return _pdf(["Alpha"], ["Beta"], ["Gamma"])


@pytest.fixture()
def split_word_pdf_bytes() -> bytes:
    """Two text runs on one baseline, the second starting where the first ends."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Soft")
    c.drawString(72 + stringWidth("Soft", "Helvetica", 12), 720, "ware")
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def spaced_letters_pdf_bytes() -> bytes:
    return _pdf(["S o f t w a r e   E n g i n e e r"])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return _pdf([])


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    document = docx.Document()
    document.add_paragraph("Hello")
    document.add_paragraph("World")
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def table_docx_bytes() -> bytes:
    """Paragraph, 2x2 table with a merged header row, paragraph."""
    document = docx.Document()
    document.add_paragraph("Experience")
    table = document.add_table(rows=2, cols=2)
    header = table.cell(0, 0).merge(table.cell(0, 1))
    header.text = "Acme Corp"
    table.cell(1, 0).text = "Engineer"
    table.cell(1, 1).text = "2019-2023"
    document.add_paragraph("Education")
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture(autouse=True)
def _reset_log_handlers() -> Iterator[None]:
    """Drop handlers bound to a test's captured stdout."""
    yield
    for handler in list(Log._logger.handlers):
        Log._logger.removeHandler(handler)

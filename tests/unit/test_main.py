from pathlib import Path

import pytest

from resume_audit.main import main


@pytest.fixture()
def example_provider(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ANALYSIS_PROVIDER", "example")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")


class TestMain:
    def test_extract_only_prints_text(
        self,
        example_provider: None,
        tmp_path: Path,
        sample_docx_bytes: bytes,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        resume = tmp_path / "resume.docx"
        resume.write_bytes(sample_docx_bytes)

        assert main([str(resume), "--extract-only"]) == 0

        assert "Hello\n\nWorld" in capsys.readouterr().out

    def test_prints_report(
        self,
        example_provider: None,
        tmp_path: Path,
        sample_pdf_bytes: bytes,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        resume = tmp_path / "resume.pdf"
        resume.write_bytes(sample_pdf_bytes)
        job = tmp_path / "job.txt"
        job.write_text("Backend engineer, Python")

        assert main([str(resume), "--job-description", str(job)]) == 0

        assert "ATS match score: 50/100" in capsys.readouterr().out

    def test_unsupported_file_exits_with_error(
        self,
        example_provider: None,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        resume = tmp_path / "resume.txt"
        resume.write_text("plain text resume")

        assert main([str(resume), "--extract-only"]) == 1

        assert "Unsupported format" in capsys.readouterr().err

    def test_corrupt_pdf_exits_with_error(
        self,
        example_provider: None,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        resume = tmp_path / "resume.pdf"
        resume.write_bytes(b"%PDF-1.4 truncated")

        assert main([str(resume), "--extract-only"]) == 1

        assert "extraction failed" in capsys.readouterr().err

    def test_job_description_required_for_analysis(
        self,
        example_provider: None,
        tmp_path: Path,
        sample_pdf_bytes: bytes,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        resume = tmp_path / "resume.pdf"
        resume.write_bytes(sample_pdf_bytes)

        assert main([str(resume)]) == 1

        assert "--job-description" in capsys.readouterr().err

    def test_missing_resume_file(
        self,
        example_provider: None,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert main([str(tmp_path / "absent.pdf"), "--extract-only"]) == 1
        assert "ERROR" in capsys.readouterr().err

    def test_unknown_log_level_exits_with_error(
        self,
        example_provider: None,
        monkeypatch: pytest.MonkeyPatch,
        tmp_path: Path,
        sample_docx_bytes: bytes,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        resume = tmp_path / "resume.docx"
        resume.write_bytes(sample_docx_bytes)

        assert main([str(resume), "--extract-only"]) == 1
        assert "Unknown log level 'chatty'" in capsys.readouterr().err

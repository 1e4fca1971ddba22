import argparse
import sys
from pathlib import Path

from resume_audit.analysis.exceptions import AnalysisError
from resume_audit.analysis.factory import AnalyzerFactory
from resume_audit.config.settings import Settings
from resume_audit.extraction.exceptions import DocumentError
from resume_audit.extraction.factory import build_dispatcher
from resume_audit.extraction.models import RawDocument
from resume_audit.logging.logger import Log
from resume_audit.presentation.report import render_report
from resume_audit.session.upload_session import UploadSession


def build_session(settings: Settings) -> UploadSession:
    """Build an UploadSession with the configured extractor and analyzer."""
    return UploadSession(
        dispatcher=build_dispatcher(settings),
        analyzer=AnalyzerFactory.create(settings),
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="resume-audit",
        description="Score a PDF or DOCX resume against a job description.",
    )
    parser.add_argument("resume", type=Path, help="Path to the resume (.pdf or .docx)")
    parser.add_argument(
        "-j",
        "--job-description",
        type=Path,
        help="Text file with the job description",
    )
    parser.add_argument(
        "--extract-only",
        action="store_true",
        help="Print the extracted resume text and exit",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: extract resume text -> analyze -> print report."""
    args = parse_args(argv)
    settings = Settings()
    try:
        Log.configure(settings.log_level)
        session = build_session(settings)
        document = RawDocument.from_path(args.resume)
        text = session.upload(document) or ""
        if args.extract_only:
            print(text)
            return 0
        if args.job_description is None:
            print(
                "ERROR: --job-description is required unless --extract-only is set",
                file=sys.stderr,
            )
            return 1
        job_description = args.job_description.read_text(encoding="utf-8")
        result = session.analyze(job_description)
    except (DocumentError, AnalysisError, OSError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(render_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())

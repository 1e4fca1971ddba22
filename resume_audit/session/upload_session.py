import itertools
import threading

from resume_audit.analysis.base import BaseAnalyzer
from resume_audit.analysis.exceptions import AnalysisError
from resume_audit.analysis.models import AnalysisResult
from resume_audit.extraction.dispatcher import ExtractionDispatcher
from resume_audit.extraction.exceptions import DocumentError
from resume_audit.extraction.models import RawDocument
from resume_audit.logging.logger import Log
from resume_audit.session.models import SessionSnapshot, SessionStatus, UploadTicket

ANALYSIS_FAILED_MESSAGE = "Analysis failed. Check API key and try again."
MISSING_INPUT_MESSAGE = "Please provide both resume and job description."


class UploadSession:
    """Holds one user's resume text, job description and last analysis.

    Every upload takes a ticket from a monotonically increasing counter.
    Only the completion carrying the latest ticket may change the resume
    text, so the most recent upload wins no matter which extraction
    finishes first.
    """

    def __init__(self, dispatcher: ExtractionDispatcher, analyzer: BaseAnalyzer) -> None:
        self._dispatcher = dispatcher
        self._analyzer = analyzer
        self._lock = threading.Lock()
        self._sequence = itertools.count(1)
        self._latest = 0
        self._status = SessionStatus.IDLE
        self._resume_text = ""
        self._job_description = ""
        self._filename: str | None = None
        self._error: str | None = None
        self._result: AnalysisResult | None = None

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(
                status=self._status,
                resume_text=self._resume_text,
                job_description=self._job_description,
                filename=self._filename,
                error=self._error,
                result=self._result,
            )

    def set_job_description(self, text: str) -> None:
        with self._lock:
            self._job_description = text

    def upload(self, document: RawDocument) -> str | None:
        """Extract text from an upload and store it if no newer upload started.

        Returns the extracted text, or None when the result was discarded
        because a newer upload superseded it.

        Raises:
            DocumentError: if the latest upload could not be extracted.
        """
        ticket = self.begin_upload(document.filename)
        try:
            text = self._dispatcher.extract(document)
        except DocumentError as exc:
            if self.fail_upload(ticket, exc):
                raise
            return None
        return text if self.complete_upload(ticket, text) else None

    def begin_upload(self, filename: str) -> UploadTicket:
        with self._lock:
            ticket = UploadTicket(sequence=next(self._sequence), filename=filename)
            self._latest = ticket.sequence
            self._filename = filename
            self._error = None
            self._status = SessionStatus.LOADING
        Log.info("Upload started", upload=ticket.sequence, filename=filename)
        return ticket

    def complete_upload(self, ticket: UploadTicket, text: str) -> bool:
        """Store extracted text; returns False if the ticket is stale."""
        with self._lock:
            if ticket.sequence != self._latest:
                Log.warning(
                    "Discarding stale extraction",
                    upload=ticket.sequence,
                    latest=self._latest,
                )
                return False
            self._resume_text = text
            self._status = SessionStatus.IDLE
        Log.info("Upload stored", upload=ticket.sequence, chars=len(text))
        return True

    def fail_upload(self, ticket: UploadTicket, error: Exception) -> bool:
        """Record an extraction failure; returns False if the ticket is stale."""
        with self._lock:
            if ticket.sequence != self._latest:
                Log.warning(
                    f"Discarding stale extraction failure: {error}",
                    upload=ticket.sequence,
                    latest=self._latest,
                )
                return False
            self._error = str(error)
            self._filename = None
            self._status = SessionStatus.ERROR
        Log.error(f"Upload failed: {error}", upload=ticket.sequence)
        return True

    def analyze(self, job_description: str | None = None) -> AnalysisResult:
        """Run the analysis on the stored resume text.

        Raises:
            ValueError: if the resume text or job description is blank.
            AnalysisError: with a generic message if the provider call fails.
        """
        with self._lock:
            if job_description is not None:
                self._job_description = job_description
            resume_text = self._resume_text
            job_text = self._job_description
            if not resume_text.strip() or not job_text.strip():
                self._error = MISSING_INPUT_MESSAGE
                raise ValueError(MISSING_INPUT_MESSAGE)
            self._status = SessionStatus.LOADING
            self._error = None

        try:
            result = self._analyzer.analyze(resume_text, job_text)
        except AnalysisError as exc:
            Log.exception(
                "Analysis failed", resume_chars=len(resume_text), job_chars=len(job_text)
            )
            with self._lock:
                self._error = ANALYSIS_FAILED_MESSAGE
                self._status = SessionStatus.ERROR
            raise AnalysisError(ANALYSIS_FAILED_MESSAGE) from exc

        with self._lock:
            self._result = result
            self._status = SessionStatus.SUCCESS
        return result

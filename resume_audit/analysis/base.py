from abc import ABC, abstractmethod

from resume_audit.analysis.models import AnalysisRequest, AnalysisResult


class BaseAnalyzer(ABC):
    """Contract for all resume analysis adapters."""

    @abstractmethod
    def analyze(self, resume_text: str, job_description: str) -> AnalysisResult:
        """Evaluate a resume against a job description.

        Args:
            resume_text: Sanitized text extracted from the uploaded resume.
            job_description: Job description as typed by the user.

        Returns:
            AnalysisResult with scores, keyword gaps and the audit.

        Raises:
            AnalysisError: on any failure.
        """


class BaseAnalysisClient(ABC):
    """Transport for one analysis request to an AI provider."""

    @abstractmethod
    def complete(self, request: AnalysisRequest) -> str:
        """Send the request and return the model's raw text answer.

        Raises:
            AnalysisNetworkError: if the provider cannot be reached.
            AnalysisError: if the provider returns no usable answer.
        """

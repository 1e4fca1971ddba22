from dataclasses import dataclass
from enum import Enum

from resume_audit.analysis.models import AnalysisResult


class SessionStatus(str, Enum):
    IDLE = "IDLE"
    LOADING = "LOADING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


@dataclass(frozen=True)
class UploadTicket:
    """Handle for one extraction request; higher sequence means newer."""

    sequence: int
    filename: str


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of the session state at one point in time."""

    status: SessionStatus
    resume_text: str
    job_description: str
    filename: str | None
    error: str | None
    result: AnalysisResult | None

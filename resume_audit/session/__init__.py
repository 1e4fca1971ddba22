from resume_audit.session.models import SessionSnapshot, SessionStatus, UploadTicket
from resume_audit.session.upload_session import UploadSession

__all__ = ["SessionSnapshot", "SessionStatus", "UploadSession", "UploadTicket"]

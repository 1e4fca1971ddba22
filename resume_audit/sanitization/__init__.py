from resume_audit.sanitization.sanitizer import sanitize

__all__ = ["sanitize"]

class AnalysisError(Exception):
    """Base exception for resume analysis failures."""


class AnalysisValidationError(AnalysisError):
    """Raised when the provider's answer is not a usable analysis result."""


class AnalysisRefusedError(AnalysisValidationError):
    """Raised when the model declines to evaluate the resume."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the AI provider cannot be reached or rejects the call."""

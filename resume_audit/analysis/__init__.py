from resume_audit.analysis.analyzer import ResumeAnalyzer
from resume_audit.analysis.base import BaseAnalyzer
from resume_audit.analysis.factory import AnalyzerFactory

__all__ = ["AnalyzerFactory", "BaseAnalyzer", "ResumeAnalyzer"]

"""Offline analysis client.

Returns a fixed, valid analysis so the pipeline can run without an API key.
Also the smallest template for a new provider: implement
BaseAnalysisClient.complete and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from resume_audit.analysis.base import BaseAnalysisClient
from resume_audit.analysis.models import AnalysisRequest
from resume_audit.analysis.validator import AUDIT_METRICS


class ExampleClientAdapter(BaseAnalysisClient):
    """Scores every resume 50 and passes every audit check."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "score": 50,
        "formattingScore": 50,
        "summary": "Example analysis: no AI provider was called.",
        "strengths": [],
        "weaknesses": [],
        "matchedKeywords": [],
        "missingKeywords": [],
        "recommendations": [],
        "audit": {
            key: {"status": "pass", "message": "No issues found.", "details": []}
            for key in AUDIT_METRICS
        },
    }

    def complete(self, request: AnalysisRequest) -> str:
        _ = request
        return json.dumps(self.DEFAULT_RESPONSE)

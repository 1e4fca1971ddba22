"""Turns the provider's text answer into an AnalysisResult.

Models wrap JSON in markdown fences or a sentence of preamble often enough
that the outermost object is cut out of the answer before decoding. Shape
problems of any kind surface as AnalysisValidationError.
"""

import json
from typing import Any

from resume_audit.analysis.exceptions import AnalysisValidationError
from resume_audit.analysis.models import AnalysisResult, Audit, AuditMetric, AuditStatus

# wire name -> Audit field
AUDIT_METRICS: dict[str, str] = {
    "typography": "typography",
    "grammarSpelling": "grammar_spelling",
    "repetition": "repetition",
    "layoutComplexity": "layout_complexity",
    "sectionHeadings": "section_headings",
}

_STRING_LISTS: dict[str, str] = {
    "strengths": "strengths",
    "weaknesses": "weaknesses",
    "matchedKeywords": "matched_keywords",
    "missingKeywords": "missing_keywords",
    "recommendations": "recommendations",
}

_VALID_STATUSES = frozenset(status.value for status in AuditStatus)


def parse_response(raw: str) -> AnalysisResult:
    """Decode and validate the model's raw answer."""
    start = raw.find("{")
    end = raw.rfind("}")
    if start == -1 or end < start:
        raise AnalysisValidationError("Response contains no JSON object")
    try:
        data = json.loads(raw[start : end + 1])
    except json.JSONDecodeError as exc:
        raise AnalysisValidationError(f"Invalid JSON response: {exc}") from exc
    return validate_and_build(data)


def validate_and_build(data: dict[str, Any]) -> AnalysisResult:
    """Validate raw parsed JSON and build an AnalysisResult.

    Raises:
        AnalysisValidationError: on any validation failure.
    """
    _require_top_level_fields(data)
    lists = {attr: _build_string_list(data[key], key) for key, attr in _STRING_LISTS.items()}
    return AnalysisResult(
        score=_build_score(data["score"], "score"),
        formatting_score=_build_score(data["formattingScore"], "formattingScore"),
        summary=_build_string(data["summary"], "summary"),
        audit=_build_audit(data["audit"]),
        **lists,
    )


def _require_top_level_fields(data: dict[str, Any]) -> None:
    for field in ("score", "formattingScore", "summary", "audit", *_STRING_LISTS):
        if field not in data:
            raise AnalysisValidationError(f"Missing required top-level field: {field}")


def _build_score(raw: Any, name: str) -> int:
    # bool is an int subclass
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise AnalysisValidationError(f"'{name}' must be a number")
    if isinstance(raw, float) and not raw.is_integer():
        raise AnalysisValidationError(f"'{name}' must be an integer, got {raw}")
    score = int(raw)
    if not 0 <= score <= 100:
        raise AnalysisValidationError(f"'{name}' must be between 0 and 100, got {score}")
    return score


def _build_string(raw: Any, name: str) -> str:
    if not isinstance(raw, str):
        raise AnalysisValidationError(f"'{name}' must be a string")
    return raw


def _build_string_list(raw: Any, name: str) -> list[str]:
    if not isinstance(raw, list):
        raise AnalysisValidationError(f"'{name}' must be a list")
    for i, item in enumerate(raw):
        if not isinstance(item, str):
            raise AnalysisValidationError(f"'{name}' item at index {i} must be a string")
    return list(raw)


def _build_audit(raw: Any) -> Audit:
    if not isinstance(raw, dict):
        raise AnalysisValidationError("'audit' must be an object")
    metrics: dict[str, AuditMetric] = {}
    for key, attr in AUDIT_METRICS.items():
        if key not in raw:
            raise AnalysisValidationError(f"Missing audit metric: {key}")
        metrics[attr] = _build_metric(raw[key], key)
    return Audit(**metrics)


def _build_metric(raw: Any, name: str) -> AuditMetric:
    if not isinstance(raw, dict):
        raise AnalysisValidationError(f"Audit metric '{name}' must be an object")
    status = raw.get("status")
    if status not in _VALID_STATUSES:
        raise AnalysisValidationError(
            f"Audit metric '{name}': 'status' must be one of "
            f"{sorted(_VALID_STATUSES)}, got {status!r}"
        )
    message = _build_string(raw.get("message"), f"audit.{name}.message")
    details = raw.get("details")
    if details is None:
        details = []
    return AuditMetric(
        status=AuditStatus(status),
        message=message,
        details=_build_string_list(details, f"audit.{name}.details"),
    )

"""Plain-text rendering of an AnalysisResult for the terminal."""

from resume_audit.analysis.models import AnalysisResult, AuditMetric, AuditStatus

STATUS_LABELS: dict[AuditStatus, str] = {
    AuditStatus.PASS: "PASSED",
    AuditStatus.WARNING: "FIX RECOMMENDED",
    AuditStatus.FAIL: "CRITICAL ISSUE",
}

AUDIT_TITLES: dict[str, str] = {
    "typography": "Typography",
    "grammar_spelling": "Grammar & Spelling",
    "repetition": "Repetition",
    "layout_complexity": "Layout Complexity",
    "section_headings": "Section Headings",
}


def score_band(score: int) -> str:
    """Verbal band for a 0-100 score."""
    if score >= 80:
        return "strong match"
    if score >= 60:
        return "fair match"
    return "weak match"


def render_report(result: AnalysisResult) -> str:
    lines = [
        f"ATS match score: {result.score}/100 ({score_band(result.score)})",
        f"Formatting score: {result.formatting_score}/100",
        "",
        result.summary,
    ]
    lines += _section("Strengths", result.strengths)
    lines += _section("Weaknesses", result.weaknesses)
    lines += _section("Matched keywords", result.matched_keywords)
    lines += _section("Missing keywords", result.missing_keywords)
    lines += _section("Recommendations", result.recommendations)
    lines += ["", "Audit"]
    for attr, title in AUDIT_TITLES.items():
        lines += _metric(title, getattr(result.audit, attr))
    return "\n".join(lines)


def _section(title: str, items: list[str]) -> list[str]:
    if not items:
        return []
    return ["", f"{title}:", *(f"  - {item}" for item in items)]


def _metric(title: str, metric: AuditMetric) -> list[str]:
    lines = [f"  [{STATUS_LABELS[metric.status]}] {title}: {metric.message}"]
    for detail in metric.parsed_details():
        lines.append(f'    * "{detail.item}"')
        if detail.reason:
            lines.append(f"      Why: {detail.reason}")
        if detail.fix:
            lines.append(f"      Replace with: {detail.fix}")
        if detail.alternative:
            lines.append(f"      Other ways: {detail.alternative}")
    return lines

from dataclasses import dataclass, field
from enum import Enum

DETAIL_SEPARATOR = " | "


class AuditStatus(str, Enum):
    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


@dataclass(frozen=True)
class AuditDetail:
    """One flagged item of an audit metric.

    The provider encodes it as "<item> | <reason> | <fix> | <alternative>".
    """

    item: str
    reason: str = ""
    fix: str = ""
    alternative: str = ""

    @classmethod
    def parse(cls, raw: str) -> "AuditDetail":
        parts = [part.strip() for part in raw.split(DETAIL_SEPARATOR, 3)]
        parts += [""] * (4 - len(parts))
        return cls(item=parts[0], reason=parts[1], fix=parts[2], alternative=parts[3])


@dataclass(frozen=True)
class AuditMetric:
    """Outcome of one writing-quality check."""

    status: AuditStatus
    message: str
    details: list[str] = field(default_factory=list)

    def parsed_details(self) -> list[AuditDetail]:
        return [AuditDetail.parse(detail) for detail in self.details]


@dataclass(frozen=True)
class Audit:
    typography: AuditMetric
    grammar_spelling: AuditMetric
    repetition: AuditMetric
    layout_complexity: AuditMetric
    section_headings: AuditMetric


@dataclass(frozen=True)
class AnalysisResult:
    """Structured evaluation of a resume against a job description."""

    score: int
    formatting_score: int
    summary: str
    audit: Audit
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)
    matched_keywords: list[str] = field(default_factory=list)
    missing_keywords: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class AnalysisRequest:
    """Everything a provider needs to score one resume."""

    model: str
    system_prompt: str
    user_prompt: str
    json_schema: dict[str, object]
    temperature: float = 0.2

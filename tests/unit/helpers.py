import json
from typing import Any

AUDIT_KEYS = ("typography", "grammarSpelling", "repetition", "layoutComplexity", "sectionHeadings")


def valid_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "score": 72,
        "formattingScore": 85,
        "summary": "Solid backend profile.",
        "strengths": ["Python"],
        "weaknesses": ["No cloud experience"],
        "matchedKeywords": ["Python", "SQL"],
        "missingKeywords": ["Kubernetes"],
        "recommendations": ["Add a skills section"],
        "audit": {
            key: {"status": "pass", "message": f"{key} ok", "details": []}
            for key in AUDIT_KEYS
        },
    }
    payload.update(overrides)
    return payload


def valid_json(**overrides: Any) -> str:
    return json.dumps(valid_payload(**overrides))

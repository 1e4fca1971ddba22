"""Resume-versus-job analysis through an AI provider.

The analyzer owns the prompt: a bundled template (with guidance about
extraction noise such as letter-spaced words) and a bundled JSON schema
describing the expected answer. Either can be replaced by a file path for
experiments. The provider's text answer goes to the validator unchanged.
"""

import json
import re
from pathlib import Path

from resume_audit.analysis.base import BaseAnalysisClient, BaseAnalyzer
from resume_audit.analysis.exceptions import AnalysisError
from resume_audit.analysis.models import AnalysisRequest, AnalysisResult
from resume_audit.analysis.validator import parse_response
from resume_audit.logging.logger import Log

PROMPTS_DIR = Path(__file__).parent / "prompts"
DEFAULT_PROMPT_PATH = PROMPTS_DIR / "analysis_prompt.txt"
DEFAULT_SCHEMA_PATH = PROMPTS_DIR / "analysis_schema.json"

_PLACEHOLDER_RE = re.compile(r"\{(resume_text|job_description|json_schema)\}")

DEFAULT_SYSTEM_PROMPT = (
    "You are an applicant tracking system auditor. Respond with JSON only."
)


class ResumeAnalyzer(BaseAnalyzer):
    """Scores a resume against a job description using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.2,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._system_prompt = system_prompt
        self._prompt_template = _read_asset(
            prompt_template_path or DEFAULT_PROMPT_PATH, "prompt template"
        )
        schema_text = _read_asset(json_schema_path or DEFAULT_SCHEMA_PATH, "JSON schema")
        try:
            self._json_schema: dict[str, object] = json.loads(schema_text)
        except json.JSONDecodeError as exc:
            raise AnalysisError(f"JSON schema is not valid JSON: {exc}") from exc

    def analyze(self, resume_text: str, job_description: str) -> AnalysisResult:
        request = self.build_request(resume_text, job_description)
        Log.debug(f"Analysis prompt:\n{request.user_prompt}")

        raw_response = self._client.complete(request)
        Log.debug(f"AI raw response:\n{raw_response}")

        result = parse_response(raw_response)
        Log.info(
            f"Analysis complete: score {result.score}, "
            f"{len(result.missing_keywords)} missing keywords"
        )
        return result

    def build_request(self, resume_text: str, job_description: str) -> AnalysisRequest:
        # single pass, so placeholders typed inside the texts stay literal
        values = {
            "resume_text": resume_text,
            "job_description": job_description,
            "json_schema": json.dumps(self._json_schema, indent=2),
        }
        user_prompt = _PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], self._prompt_template)
        return AnalysisRequest(
            model=self._model,
            system_prompt=self._system_prompt,
            user_prompt=user_prompt,
            json_schema=self._json_schema,
            temperature=self._temperature,
        )


def _read_asset(path: Path, label: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalysisError(f"Failed to load {label} from {path}: {exc}") from exc

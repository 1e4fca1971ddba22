import httpx
import openai

from resume_audit.analysis.base import BaseAnalysisClient
from resume_audit.analysis.exceptions import (
    AnalysisError,
    AnalysisNetworkError,
    AnalysisRefusedError,
)
from resume_audit.analysis.models import AnalysisRequest
from resume_audit.logging.logger import Log

SCHEMA_NAME = "resume_analysis"


class OpenAIClientAdapter(BaseAnalysisClient):
    """Chat-completions client for OpenAI and OpenAI-compatible endpoints.

    With strict_schema the bundled schema is enforced server-side
    (structured outputs). Compatible endpoints that reject json_schema
    get plain JSON mode, and the schema travels in the prompt only.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        strict_schema: bool = True,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )
        self._strict_schema = strict_schema

    def complete(self, request: AnalysisRequest) -> str:
        try:
            response = self._client.chat.completions.create(
                model=request.model,
                temperature=request.temperature,
                response_format=self._response_format(request),
                messages=[
                    {"role": "system", "content": request.system_prompt},
                    {"role": "user", "content": request.user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AnalysisNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AnalysisError("AI returned no choices")
        choice = response.choices[0]
        refusal = getattr(choice.message, "refusal", None)
        if refusal:
            raise AnalysisRefusedError(f"AI declined to analyze the resume: {refusal}")
        if choice.finish_reason == "length":
            raise AnalysisError("AI response was cut off at the token limit")
        content = choice.message.content
        if not content:
            raise AnalysisError("AI returned empty response")
        if response.usage is not None:
            Log.debug(
                f"Analysis tokens: {response.usage.prompt_tokens} prompt, "
                f"{response.usage.completion_tokens} completion"
            )
        return content

    def _response_format(self, request: AnalysisRequest) -> dict[str, object]:
        if not self._strict_schema:
            return {"type": "json_object"}
        return {
            "type": "json_schema",
            "json_schema": {
                "name": SCHEMA_NAME,
                "strict": True,
                "schema": request.json_schema,
            },
        }

from dataclasses import dataclass
from typing import ClassVar

from resume_audit.analysis.analyzer import ResumeAnalyzer
from resume_audit.analysis.base import BaseAnalyzer
from resume_audit.analysis.example_client_adapter import ExampleClientAdapter
from resume_audit.analysis.openai_client_adapter import OpenAIClientAdapter
from resume_audit.config.settings import Settings


@dataclass(frozen=True)
class ProviderPreset:
    """How to reach one OpenAI-compatible provider.

    strict_schema marks endpoints that accept structured outputs
    (response_format=json_schema with strict=True); the rest get JSON mode.
    """

    base_url: str | None = None
    default_model: str = ""
    strict_schema: bool = False


class AnalyzerFactory:
    """Creates the configured analyzer adapter."""

    PROVIDERS: ClassVar[dict[str, ProviderPreset]] = {
        "openai": ProviderPreset(default_model="gpt-4o-mini", strict_schema=True),
        # base URL comes from settings
        "openai_compatible": ProviderPreset(strict_schema=True),
        "gemini": ProviderPreset(
            base_url="https://generativelanguage.googleapis.com/v1beta/openai/",
            default_model="gemini-3-flash-preview",
        ),
        "deepseek": ProviderPreset(
            base_url="https://api.deepseek.com/v1", default_model="deepseek-chat"
        ),
        "openrouter": ProviderPreset(base_url="https://openrouter.ai/api/v1"),
        "groq": ProviderPreset(base_url="https://api.groq.com/openai/v1"),
        "together": ProviderPreset(base_url="https://api.together.xyz/v1"),
        "ollama": ProviderPreset(base_url="http://localhost:11434/v1"),
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalyzer:
        """Create a configured analyzer from application settings.

        Raises:
            ValueError: for an unknown provider, or when the provider needs a
                base URL or model name that settings do not supply.
        """
        provider = settings.analysis_provider.lower()
        if provider == "example":
            return ResumeAnalyzer(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
            )
        preset = cls._preset(provider)
        client = OpenAIClientAdapter(
            api_key=settings.analysis_api_key,
            timeout_seconds=settings.analysis_timeout_seconds,
            base_url=cls._resolve_base_url(provider, preset, settings),
            strict_schema=preset.strict_schema,
        )
        return ResumeAnalyzer(
            client=client,
            model=cls._resolve_model(provider, preset, settings),
            temperature=settings.analysis_temperature,
        )

    @classmethod
    def _preset(cls, provider: str) -> ProviderPreset:
        preset = cls.PROVIDERS.get(provider)
        if preset is None:
            supported = ["example", *sorted(cls.PROVIDERS)]
            raise ValueError(
                f"Unknown analysis provider '{provider}'. Choose from: {supported}"
            )
        return preset

    @staticmethod
    def _resolve_base_url(
        provider: str, preset: ProviderPreset, settings: Settings
    ) -> str | None:
        override = settings.analysis_base_url.strip()
        if provider == "openai_compatible" and not override:
            raise ValueError(
                "analysis_base_url is required for analysis_provider=openai_compatible"
            )
        return override or preset.base_url

    @staticmethod
    def _resolve_model(provider: str, preset: ProviderPreset, settings: Settings) -> str:
        model = settings.analysis_model_name.strip() or preset.default_model
        if not model:
            raise ValueError(f"analysis_model_name is required for analysis_provider={provider}")
        return model

"""
Report Generator Configuration
------------------------------
Central configuration for the LLM provider, weather lookups and sampling.
"""

import os
from enum import Enum
from dataclasses import dataclass, field


class LLMProvider(Enum):
    """Chat-completion providers."""
    OPENAI = "openai"      # OpenAI chat completions (default)
    BEDROCK = "bedrock"    # Amazon Bedrock (Anthropic models)


def _env(name: str, default: str = "") -> str:
    return os.environ.get(name, default)


@dataclass
class ReportConfig:
    """Report generator settings."""

    # Secrets
    openai_api_key: str = field(default_factory=lambda: _env("OPENAI_API_KEY"))
    weather_api_key: str = field(default_factory=lambda: _env("WEATHER_API_KEY"))

    # LLM Settings
    llm_provider: LLMProvider = field(
        default_factory=lambda: _env("LLM_PROVIDER", LLMProvider.OPENAI.value)
    )
    openai_model: str = field(default_factory=lambda: _env("OPENAI_MODEL", "chatgpt-4o-latest"))
    openai_api_url: str = "https://api.openai.com/v1/chat/completions"
    bedrock_model: str = field(
        default_factory=lambda: _env("BEDROCK_MODEL", "anthropic.claude-3-haiku-20240307-v1:0")
    )
    aws_region: str = field(default_factory=lambda: _env("AWS_REGION", "us-east-1"))
    temperature: float = 0.5
    max_tokens: int = 1000
    llm_timeout_seconds: int = 60

    # Weather Settings
    weather_api_url: str = "http://api.weatherapi.com/v1/history.json"
    weather_timeout_seconds: int = 10

    def __post_init__(self):
        """Coerce the provider name into an LLMProvider."""
        if not isinstance(self.llm_provider, LLMProvider):
            name = str(self.llm_provider).strip().lower()
            try:
                self.llm_provider = LLMProvider(name)
            except ValueError:
                raise ValueError(f"Unknown LLM provider: {self.llm_provider}") from None

    @classmethod
    def from_env(cls) -> "ReportConfig":
        """Build a fresh config from the current process environment."""
        return cls()


# Global config instance
config = ReportConfig()

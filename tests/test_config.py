"""
Unit tests for report configuration
"""

import pytest
from unittest.mock import patch

from forensic_report.config import LLMProvider, ReportConfig


class TestReportConfig:
    """Test cases for ReportConfig."""

    @patch.dict("os.environ", {
        "OPENAI_API_KEY": "sk-test",
        "WEATHER_API_KEY": "wx-test",
        "LLM_PROVIDER": "Bedrock",
        "AWS_REGION": "us-west-2",
    }, clear=True)
    def test_from_env(self):
        """Settings are read from the environment at construction time."""
        cfg = ReportConfig.from_env()

        assert cfg.openai_api_key == "sk-test"
        assert cfg.weather_api_key == "wx-test"
        assert cfg.llm_provider == LLMProvider.BEDROCK
        assert cfg.aws_region == "us-west-2"

    @patch.dict("os.environ", {}, clear=True)
    def test_defaults(self):
        cfg = ReportConfig()

        assert cfg.openai_api_key == ""
        assert cfg.weather_api_key == ""
        assert cfg.llm_provider == LLMProvider.OPENAI
        assert cfg.openai_model == "chatgpt-4o-latest"
        assert cfg.temperature == 0.5
        assert cfg.max_tokens == 1000

    def test_unknown_provider_rejected(self):
        with pytest.raises(ValueError, match="Unknown LLM provider"):
            ReportConfig(llm_provider="gemini")

    def test_explicit_values_override_environment(self):
        cfg = ReportConfig(openai_api_key="explicit", llm_provider=LLMProvider.OPENAI)
        assert cfg.openai_api_key == "explicit"
        assert cfg.llm_provider == LLMProvider.OPENAI

    def test_unknown_provider_error_is_not_chained(self):
        with pytest.raises(ValueError) as exc_info:
            ReportConfig(llm_provider="gemini")

        assert exc_info.value.__cause__ is None
        assert exc_info.value.__suppress_context__ is True

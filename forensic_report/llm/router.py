"""
Completion Router
-----------------
Routes chat-completion requests to the configured provider.
"""

from typing import Optional

from ..config import LLMProvider, ReportConfig, config as default_config
from ..utils.logger import logger
from .bedrock_client import BedrockChatClient
from .openai_client import OpenAIChatClient


class CompletionRouter:
    """
    Routes completions to the provider named in the config.

    Routing Logic:
    - LLM_PROVIDER=openai → OpenAI chat completions
    - LLM_PROVIDER=bedrock → Amazon Bedrock
    """

    def __init__(self, config: Optional[ReportConfig] = None):
        self.config = config or default_config
        self._openai: Optional[OpenAIChatClient] = None
        self._bedrock: Optional[BedrockChatClient] = None

    @property
    def openai(self) -> OpenAIChatClient:
        """Lazy initialization of OpenAI client."""
        if self._openai is None:
            self._openai = OpenAIChatClient(self.config)
        return self._openai

    @property
    def bedrock(self) -> BedrockChatClient:
        """Lazy initialization of Bedrock client."""
        if self._bedrock is None:
            self._bedrock = BedrockChatClient(self.config)
        return self._bedrock

    def complete(self, system_prompt: str, user_prompt: str) -> str:
        provider = self.config.llm_provider
        logger.info(f"Completion routing: provider={provider.value}")

        if provider == LLMProvider.OPENAI:
            return self.openai.complete(system_prompt, user_prompt)
        elif provider == LLMProvider.BEDROCK:
            return self.bedrock.complete(system_prompt, user_prompt)
        else:
            raise ValueError(f"Unknown LLM provider: {provider}")


# Reused across warm Lambda invocations
_router: Optional[CompletionRouter] = None


def get_router(config: Optional[ReportConfig] = None) -> CompletionRouter:
    """Return the cached router, rebuilding it only when the config changes."""
    global _router
    cfg = config or default_config
    if _router is None or _router.config is not cfg:
        _router = CompletionRouter(cfg)
    return _router


def generate_completion(
    system_prompt: str,
    user_prompt: str,
    config: Optional[ReportConfig] = None,
) -> str:
    """Send one system + user prompt pair and return the generated text."""
    return get_router(config).complete(system_prompt, user_prompt)

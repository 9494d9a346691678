"""
OpenAI Chat Client
------------------
Chat completions over the OpenAI REST API.
"""

import json
import urllib.request
import urllib.error
from typing import Optional

from ..config import ReportConfig, config as default_config
from ..utils.logger import logger
from .errors import CompletionError


class OpenAIChatClient:
    """
    OpenAI chat-completions wrapper.

    Sends a system + user message pair with fixed sampling parameters and
    returns the first choice's text.
    """

    def __init__(self, config: Optional[ReportConfig] = None):
        cfg = config or default_config
        self.api_key = cfg.openai_api_key
        self.api_url = cfg.openai_api_url
        self.model = cfg.openai_model
        self.temperature = cfg.temperature
        self.max_tokens = cfg.max_tokens
        self.timeout = cfg.llm_timeout_seconds

        if not self.api_key:
            logger.warning("OpenAI API key not configured")

    def complete(self, system_prompt: str, user_prompt: str) -> str:
        """
        Generate text for a prompt.

        Args:
            system_prompt: Fixed instructions for the model
            user_prompt: Section prompt

        Returns:
            Generated text ("" if the model returned no content)
        """
        if not self.api_key:
            raise CompletionError("OpenAI API key not configured")

        logger.info(f"Calling OpenAI model: {self.model}")

        payload = json.dumps({
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }).encode("utf-8")

        request = urllib.request.Request(
            self.api_url,
            data=payload,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
        )

        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                result = json.loads(response.read().decode("utf-8"))
        except urllib.error.HTTPError as e:
            error_body = e.read().decode("utf-8", errors="replace")
            logger.error(f"OpenAI chat error: {e.code} - {error_body}")
            raise CompletionError(f"OpenAI chat error: {e.code}", status_code=e.code)

        try:
            content = result["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            raise CompletionError("OpenAI response missing choices")

        return content or ""

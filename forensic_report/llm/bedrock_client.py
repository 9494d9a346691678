import json
from typing import Optional

import boto3

from ..config import ReportConfig, config as default_config
from ..utils.logger import logger
from .errors import CompletionError


class BedrockChatClient:
    """Anthropic models on Amazon Bedrock."""

    def __init__(self, config: Optional[ReportConfig] = None):
        cfg = config or default_config
        self.region = cfg.aws_region
        self.model = cfg.bedrock_model
        self.temperature = cfg.temperature
        self.max_tokens = cfg.max_tokens
        # Lazy initialization
        self._bedrock = None

    def _get_bedrock_client(self):
        """Lazily initialize Bedrock client."""
        if self._bedrock is None:
            logger.info(f"Initializing Bedrock client in region: {self.region}")
            self._bedrock = boto3.client("bedrock-runtime", region_name=self.region)
        return self._bedrock

    def complete(self, system_prompt: str, user_prompt: str) -> str:
        logger.info(f"Calling Bedrock model: {self.model}")

        body = json.dumps({
            "anthropic_version": "bedrock-2023-05-31",
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "system": system_prompt,
            "messages": [
                {
                    "role": "user",
                    "content": user_prompt
                }
            ]
        })

        try:
            bedrock = self._get_bedrock_client()
            response = bedrock.invoke_model(
                modelId=self.model,
                contentType="application/json",
                accept="application/json",
                body=body
            )

            result = json.loads(response["body"].read().decode())
        except Exception as e:
            logger.error(f"Bedrock LLM error: {e}")
            raise

        texts = [block.get("text", "") for block in result.get("content", []) if block.get("type") == "text"]
        if not texts:
            raise CompletionError("Bedrock response contained no text")
        return texts[0]

# Chat-completion clients
from .errors import CompletionError
from .openai_client import OpenAIChatClient
from .bedrock_client import BedrockChatClient
from .router import CompletionRouter, generate_completion, get_router

__all__ = [
    "CompletionError",
    "OpenAIChatClient",
    "BedrockChatClient",
    "CompletionRouter",
    "generate_completion",
    "get_router",
]

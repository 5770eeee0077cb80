"""Azure OpenAI infrastructure adapters."""

from .azure_chat_client import AzureChatClient
from .chat_response_parser import ChatResponseParser

__all__ = [
    "AzureChatClient",
    "ChatResponseParser",
]

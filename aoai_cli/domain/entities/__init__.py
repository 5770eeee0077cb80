"""Domain entities package"""

from .chat import (
    ChatMessage,
    ChatRequest,
    ChatResponse,
    Choice,
    ContentFilterCategory,
    ContentFilterError,
    ContentFilterResults,
    SYSTEM_PROMPT,
)

__all__ = [
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "Choice",
    "ContentFilterCategory",
    "ContentFilterError",
    "ContentFilterResults",
    "SYSTEM_PROMPT",
]

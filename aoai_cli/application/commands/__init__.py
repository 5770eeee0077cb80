"""Application commands."""

from .chat_completion import ChatCompletionCommand

__all__ = ["ChatCompletionCommand"]

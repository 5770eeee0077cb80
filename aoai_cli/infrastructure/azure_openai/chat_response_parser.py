"""Parse Azure OpenAI chat-completion responses into domain entities."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from aoai_cli.domain.entities.chat import ChatResponse, Choice, ContentFilterResults

logger = logging.getLogger(__name__)


class ChatResponseParser:
    """Converts SDK response objects into :class:`ChatResponse`.

    Azure attaches ``content_filter_results`` to each choice as an extra field
    the ``openai`` models do not declare, so it arrives as a plain dict (or a
    model, depending on SDK version) and is normalised here.
    """

    def parse(self, response: Any) -> ChatResponse:
        if response is None:
            return ChatResponse()

        raw_choices = getattr(response, "choices", None) or []
        choices = tuple(self._parse_choice(position, raw) for position, raw in enumerate(raw_choices))
        return ChatResponse(choices=choices)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _parse_choice(self, position: int, raw: Any) -> Choice:
        index = getattr(raw, "index", None)
        if not isinstance(index, int):
            index = position

        message = getattr(raw, "message", None)
        content = getattr(message, "content", None) if message is not None else None
        if content is not None and not isinstance(content, str):
            logger.debug("Ignoring non-text content on choice %s: %r", index, content)
            content = None

        finish_reason = getattr(raw, "finish_reason", None)
        if finish_reason is not None:
            finish_reason = str(getattr(finish_reason, "value", finish_reason))

        filters = _as_mapping(getattr(raw, "content_filter_results", None))

        return Choice(
            index=index,
            content=content,
            finish_reason=finish_reason,
            content_filter_results=ContentFilterResults.from_dict(filters),
        )


def _as_mapping(value: Any) -> Optional[Dict[str, Any]]:
    if value is None:
        return None
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if hasattr(value, "model_dump"):
        return value.model_dump()
    if hasattr(value, "__dict__"):
        return {key: _plain(item) for key, item in vars(value).items()}
    return None


def _plain(value: Any) -> Any:
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return _as_mapping(value)

"""Render chat-completion replies as diagnostic text lines."""
from __future__ import annotations

from typing import Iterator, List, Optional

from aoai_cli.domain.entities.chat import ChatResponse, Choice, ContentFilterResults

REPLY_RECEIVED_LINE = "Received chat completions reply"
CONTENT_FILTER_HEADER = "Content filter results"
MISSING_VALUE = "<nil>"


def _format_value(value: object) -> str:
    if value is None:
        return MISSING_VALUE
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def content_filter_lines(results: ContentFilterResults) -> List[str]:
    lines = [CONTENT_FILTER_HEADER]
    if results.error is not None:
        lines.append(f"  Error:{results.error}")
    for label, category in results.categories():
        if category is None:
            continue
        lines.append(
            f"  {label}: sev: {_format_value(category.severity)}, filtered: {_format_value(category.filtered)}"
        )
    return lines


def choice_lines(choice: Choice) -> List[str]:
    lines: List[str] = []
    if choice.content_filter_results is not None:
        lines.extend(content_filter_lines(choice.content_filter_results))
    if choice.content is not None:
        lines.append(f"Content[{choice.index}]: {choice.content}")
    if choice.finish_reason is not None:
        lines.append(f"Finish reason[{choice.index}]: {choice.finish_reason}")
    return lines


def iter_report_lines(response: Optional[ChatResponse]) -> Iterator[str]:
    """Yield report lines for every choice, in the order the service returned them."""
    if response is None:
        return
    got_reply = False
    for choice in response.choices:
        got_reply = True
        yield from choice_lines(choice)
    if got_reply:
        yield REPLY_RECEIVED_LINE

"""
Chat completion entities

Request and response shapes for a single chat-completion exchange. Response
fields the service may omit are Optional and stay None when absent.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

SYSTEM_PROMPT = "You are a helpful assistant."


@dataclass(frozen=True)
class ChatMessage:
    role: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class ChatRequest:
    """A system prompt followed by one user message, bound to a deployment."""

    deployment_id: str
    messages: Tuple[ChatMessage, ...]

    @classmethod
    def create(cls, deployment_id: str, message: str) -> ChatRequest:
        return cls(
            deployment_id=deployment_id,
            messages=(
                ChatMessage(role="system", content=SYSTEM_PROMPT),
                ChatMessage(role="user", content=message),
            ),
        )

    def to_messages(self) -> List[Dict[str, str]]:
        return [message.to_dict() for message in self.messages]


@dataclass(frozen=True)
class ContentFilterCategory:
    severity: Optional[str] = None
    filtered: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional[ContentFilterCategory]:
        if not isinstance(data, dict):
            return None
        severity = data.get("severity")
        filtered = data.get("filtered")
        return cls(
            severity=str(severity) if severity is not None else None,
            filtered=bool(filtered) if filtered is not None else None,
        )


@dataclass(frozen=True)
class ContentFilterError:
    code: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional[ContentFilterError]:
        if not isinstance(data, dict):
            return None
        code = data.get("code")
        message = data.get("message")
        if code is None and message is None:
            return None
        return cls(
            code=str(code) if code is not None else None,
            message=str(message) if message is not None else None,
        )

    def __str__(self) -> str:
        if self.code and self.message:
            return f"{self.code}: {self.message}"
        return self.code or self.message or ""


@dataclass(frozen=True)
class ContentFilterResults:
    """Moderation verdicts attached to one choice."""

    hate: Optional[ContentFilterCategory] = None
    self_harm: Optional[ContentFilterCategory] = None
    sexual: Optional[ContentFilterCategory] = None
    violence: Optional[ContentFilterCategory] = None
    error: Optional[ContentFilterError] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional[ContentFilterResults]:
        if not isinstance(data, dict) or not data:
            return None
        return cls(
            hate=ContentFilterCategory.from_dict(data.get("hate")),
            self_harm=ContentFilterCategory.from_dict(data.get("self_harm")),
            sexual=ContentFilterCategory.from_dict(data.get("sexual")),
            violence=ContentFilterCategory.from_dict(data.get("violence")),
            error=ContentFilterError.from_dict(data.get("error")),
        )

    def categories(self) -> List[Tuple[str, Optional[ContentFilterCategory]]]:
        """Categories in report order, labelled for display."""
        return [
            ("Hate", self.hate),
            ("SelfHarm", self.self_harm),
            ("Sexual", self.sexual),
            ("Violence", self.violence),
        ]


@dataclass(frozen=True)
class Choice:
    index: int
    content: Optional[str] = None
    finish_reason: Optional[str] = None
    content_filter_results: Optional[ContentFilterResults] = None


@dataclass(frozen=True)
class ChatResponse:
    choices: Tuple[Choice, ...] = field(default_factory=tuple)

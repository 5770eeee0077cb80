"""Azure OpenAI chat-completion client adapter."""
from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import urlparse

from azure.core.exceptions import ClientAuthenticationError
from azure.identity import DefaultAzureCredential, get_bearer_token_provider
from openai import AzureOpenAI, OpenAIError

from aoai_cli.config import DEFAULT_API_VERSION, normalize_endpoint
from aoai_cli.domain.entities.chat import ChatRequest, ChatResponse
from aoai_cli.domain.exceptions import ChatCompletionError, ClientConstructionError

from .chat_response_parser import ChatResponseParser

logger = logging.getLogger(__name__)

COGNITIVE_SERVICES_SCOPE = "https://cognitiveservices.azure.com/.default"


class AzureChatClient:
    """Issues a single chat-completion call against an Azure OpenAI deployment."""

    def __init__(
        self,
        *,
        endpoint: str,
        api_key: Optional[str] = None,
        api_version: str = DEFAULT_API_VERSION,
        use_default_credential: bool = False,
        client: Optional[Any] = None,
        parser: Optional[ChatResponseParser] = None,
    ) -> None:
        endpoint = normalize_endpoint(endpoint)
        _validate_endpoint(endpoint)

        if client is not None:
            self._client = client
        elif use_default_credential:
            token_provider = get_bearer_token_provider(
                DefaultAzureCredential(),
                COGNITIVE_SERVICES_SCOPE,
            )
            self._client = _build_client(
                api_version=api_version,
                azure_endpoint=endpoint,
                azure_ad_token_provider=token_provider,
            )
        else:
            if not api_key:
                raise ClientConstructionError("an API key is required unless the default Azure credential is used")
            self._client = _build_client(
                api_key=api_key,
                api_version=api_version,
                azure_endpoint=endpoint,
            )

        self._parser = parser or ChatResponseParser()

    def complete(self, request: ChatRequest) -> ChatResponse:
        """Send ``request`` once and return the parsed reply.

        Raises:
            ChatCompletionError: the service or transport rejected the call, or
                the Azure credential could not supply a token.
        """
        logger.debug("Requesting chat completion from deployment %s", request.deployment_id)
        try:
            response = self._client.chat.completions.create(
                model=request.deployment_id,
                messages=request.to_messages(),
            )
        except (OpenAIError, ClientAuthenticationError) as exc:
            raise ChatCompletionError(str(exc), cause=exc) from exc
        return self._parser.parse(response)


def _validate_endpoint(endpoint: str) -> None:
    if not endpoint:
        raise ClientConstructionError("Azure OpenAI endpoint must be configured")
    parsed = urlparse(endpoint)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ClientConstructionError(f"invalid Azure OpenAI endpoint: {endpoint!r}")


def _build_client(**kwargs: Any) -> AzureOpenAI:
    # Retries are left to the caller; one invocation makes one request.
    try:
        return AzureOpenAI(max_retries=0, **kwargs)
    except (OpenAIError, ValueError) as exc:
        raise ClientConstructionError(f"failed to initialize Azure OpenAI client: {exc}", cause=exc) from exc

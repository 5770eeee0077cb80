"""ChatCompletion Command - Sends one message to an Azure OpenAI deployment.

Validates configuration, builds the client, issues a single chat-completion
call and writes the choices with their content-filter verdicts to stderr.
Every failure is logged and ends the invocation; nothing is retried.
"""
from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO

from aoai_cli.application.reporting.chat_report import iter_report_lines
from aoai_cli.config import CommandConfig
from aoai_cli.domain.entities.chat import ChatRequest
from aoai_cli.domain.exceptions import (
    ChatCompletionError,
    ClientConstructionError,
    ConfigurationError,
)
from aoai_cli.infrastructure.azure_openai.azure_chat_client import AzureChatClient

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., AzureChatClient]


class ChatCompletionCommand:
    """Runs the ``chatcompletion`` subcommand."""

    def __init__(
        self,
        *,
        client_factory: ClientFactory = AzureChatClient,
        output: Optional[TextIO] = None,
    ) -> None:
        self._client_factory = client_factory
        self._output = output

    def run(self, config: CommandConfig) -> None:
        missing = config.missing_fields()
        if missing:
            logger.error("Invalid configuration: %s", ConfigurationError(missing))
            return

        try:
            client = self._client_factory(
                endpoint=config.endpoint,
                api_key=config.api_key,
                api_version=config.api_version,
                use_default_credential=config.use_default_credential,
            )
        except ClientConstructionError as exc:
            logger.error("Failed to create Azure OpenAI client: %s", exc)
            return

        request = ChatRequest.create(config.model_deployment_id, config.message)

        try:
            response = client.complete(request)
        except ChatCompletionError as exc:
            logger.error("Chat completion request failed: %s", exc)
            return

        output = self._output or sys.stderr
        for line in iter_report_lines(response):
            print(line, file=output)

"""Command-line entry point.

The command tree is ``aoai-cli aoai chatcompletion``; it is built by
:func:`build_parser` and handed to :func:`main` rather than registered
globally.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, NoReturn, Optional, Sequence

from dotenv import load_dotenv

from aoai_cli.app_logging import configure_logging
from aoai_cli.application.commands.chat_completion import ChatCompletionCommand
from aoai_cli.config import (
    DEFAULT_DEPLOYMENT_ID,
    DEFAULT_MESSAGE,
    CommandConfig,
    Settings,
    get_settings,
)
from aoai_cli.domain.exceptions import FlagParsingError

logger = logging.getLogger(__name__)

CHAT_COMPLETION_HELP = "A command for Azure OpenAI Service Chat Completion"
CHAT_COMPLETION_DESCRIPTION = (
    "ref. https://learn.microsoft.com/azure/ai-services/openai/chatgpt-quickstart"
)


class CommandArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises :class:`FlagParsingError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise FlagParsingError(f"{self.prog}: {message}")


def _run_chat_completion(args: argparse.Namespace, command: ChatCompletionCommand) -> None:
    config = CommandConfig(
        model_deployment_id=args.modelDeploymentID,
        endpoint=args.azureOpenAIEndpoint,
        api_key=args.azureOpenAIKey,
        message=args.message,
        api_version=args.apiVersion,
        use_default_credential=args.useDefaultCredential,
    )
    command.run(config)


def add_chat_completion_command(subparsers: argparse._SubParsersAction, settings: Settings) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(
        "chatcompletion",
        help=CHAT_COMPLETION_HELP,
        description=CHAT_COMPLETION_DESCRIPTION,
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "-d", "--modelDeploymentID",
        default=settings.azure_openai_deployment_name or DEFAULT_DEPLOYMENT_ID,
        help="Model Deployment ID",
    )
    parser.add_argument(
        "-e", "--azureOpenAIEndpoint",
        default=settings.ensure_endpoint(),
        help="Azure OpenAI Endpoint",
    )
    parser.add_argument(
        "-k", "--azureOpenAIKey",
        default=settings.azure_openai_api_key or "",
        help="Azure OpenAI Key",
    )
    parser.add_argument(
        "-m", "--message",
        default=DEFAULT_MESSAGE,
        help="Message",
    )
    parser.add_argument(
        "--apiVersion",
        default=settings.azure_openai_api_version,
        help="Azure OpenAI REST API version",
    )
    parser.add_argument(
        "--useDefaultCredential",
        action="store_true",
        help="Authenticate with DefaultAzureCredential instead of an API key",
    )
    parser.set_defaults(handler=_run_chat_completion)
    return parser


def build_parser(settings: Optional[Settings] = None) -> CommandArgumentParser:
    settings = settings or get_settings()

    parser = CommandArgumentParser(
        prog="aoai-cli",
        description="Command-line samples for Azure services",
    )
    groups = parser.add_subparsers(dest="group", metavar="<group>", required=True)

    aoai = groups.add_parser("aoai", help="Azure OpenAI Service commands")
    commands = aoai.add_subparsers(dest="command", metavar="<command>", required=True)
    add_chat_completion_command(commands, settings)

    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    parser: Optional[argparse.ArgumentParser] = None,
    command: Optional[ChatCompletionCommand] = None,
) -> int:
    load_dotenv()
    configure_logging()

    parser = parser or build_parser()
    try:
        args = parser.parse_args(argv)
    except FlagParsingError as exc:
        logger.error("Error: %s", exc)
        return 1

    handler: Callable[[argparse.Namespace, ChatCompletionCommand], None] = args.handler
    handler(args, command or ChatCompletionCommand())
    return 0


if __name__ == "__main__":
    sys.exit(main())

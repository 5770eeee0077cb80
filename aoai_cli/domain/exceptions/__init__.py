"""Command exceptions."""


class CommandError(Exception):
    """Base exception for errors that end a command invocation."""
    pass


class FlagParsingError(CommandError):
    """Exception raised when command-line flags cannot be parsed."""

    def __init__(self, message: str):
        super().__init__(message)


class ConfigurationError(CommandError):
    """Exception raised when required configuration values are missing."""

    def __init__(self, missing: list[str]):
        message = f"missing required configuration: {', '.join(missing)}"
        super().__init__(message)
        self.missing = list(missing)


class ClientConstructionError(CommandError):
    """Exception raised when the API client cannot be built."""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.cause = cause


class ChatCompletionError(CommandError):
    """Exception raised when the chat-completion call fails."""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.cause = cause

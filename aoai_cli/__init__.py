"""Azure OpenAI chat-completion command-line tool."""

"""GaiAI auto daily bot: wallet login, check-in and prompt tasks."""

__version__ = "1.0.0"

from .commands import parse_command, CommandError
from .session import App, TextStreamUser

__all__ = ["parse_command", "CommandError", "App", "TextStreamUser"]

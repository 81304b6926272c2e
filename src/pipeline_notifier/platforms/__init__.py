from .base import GitPlatform, ChatPlatform
from .gitlab import GitLabClient
from .slack import SlackClient

__all__ = ["GitPlatform", "ChatPlatform", "GitLabClient", "SlackClient"]

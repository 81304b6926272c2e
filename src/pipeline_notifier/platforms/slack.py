from typing import Any
from slack_sdk.web.async_client import AsyncWebClient
from .base import ChatPlatform


class SlackClient(ChatPlatform):
    def __init__(self, token: str, timeout: float = 30.0):
        self.token = token
        self.client = AsyncWebClient(token=token, timeout=int(timeout))

    async def get_user_info(self, user: str) -> dict[str, Any]:
        """Look up a user in the workspace directory. Raises ``SlackApiError`` on ``ok: false``."""
        response = await self.client.users_info(user=user)
        return response.data if isinstance(response.data, dict) else {}

    async def post_message(self, channel: str, text: str) -> None:
        await self.client.chat_postMessage(channel=channel, text=text)

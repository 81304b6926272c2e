from abc import ABC, abstractmethod
from typing import Any


class GitPlatform(ABC):
    @abstractmethod
    async def get_current_user(self) -> dict[str, Any]:
        pass

    @abstractmethod
    async def get_pipeline_jobs(self, project_id: int, pipeline_id: int) -> list[dict[str, Any]]:
        pass

    @abstractmethod
    async def get_mr_info(self, project_id: int, mr_iid: int) -> dict[str, Any]:
        pass


class ChatPlatform(ABC):
    @abstractmethod
    async def get_user_info(self, user: str) -> dict[str, Any]:
        pass

    @abstractmethod
    async def post_message(self, channel: str, text: str) -> None:
        pass

from enum import Enum
from pydantic import BaseModel


class PipelineStatus(str, Enum):
    CREATED = "created"
    WAITING_FOR_RESOURCE = "waiting_for_resource"
    PREPARING = "preparing"
    PENDING = "pending"
    RUNNING = "running"
    SUCCESS = "success"
    FAILED = "failed"
    CANCELED = "canceled"
    SKIPPED = "skipped"
    MANUAL = "manual"
    SCHEDULED = "scheduled"
    CANCELING = "canceling"
    WAITING_FOR_CALLBACK = "waiting_for_callback"

    @property
    def label(self) -> str:
        """CamelCase label used in notifications, e.g. ``WaitingForResource``."""
        return "".join(part.capitalize() for part in self.value.split("_"))


class GitLabUser(BaseModel):
    username: str
    name: str | None = None


class JobRecord(BaseModel):
    name: str
    status: PipelineStatus
    web_url: str


class MergeRequestDetail(BaseModel):
    id: int
    iid: int
    title: str
    web_url: str
    author: GitLabUser
    merged_by: GitLabUser | None = None

from typing import Annotated, Any, Literal, Union
from pydantic import BaseModel, Discriminator, Tag, TypeAdapter
from .gitlab import PipelineStatus


class GitLabProject(BaseModel):
    id: int
    name: str | None = None
    path_with_namespace: str | None = None
    web_url: str | None = None


class PipelineAttributes(BaseModel):
    id: int
    status: PipelineStatus
    ref: str | None = None
    sha: str | None = None


class MergeRequestReference(BaseModel):
    id: int
    iid: int | None = None

    @property
    def lookup_id(self) -> int:
        """Identifier accepted by the project-scoped merge request endpoint."""
        return self.iid if self.iid is not None else self.id


class PipelineEvent(BaseModel):
    object_kind: Literal["pipeline"]
    object_attributes: PipelineAttributes
    project: GitLabProject
    merge_request: MergeRequestReference | None = None


class OtherEvent(BaseModel):
    object_kind: str


def _event_kind(value: Any) -> str | None:
    if isinstance(value, dict):
        kind = value.get("object_kind")
    else:
        kind = getattr(value, "object_kind", None)
    if not isinstance(kind, str):
        return None
    return "pipeline" if kind == "pipeline" else "other"


InboundEvent = Annotated[
    Union[
        Annotated[PipelineEvent, Tag("pipeline")],
        Annotated[OtherEvent, Tag("other")],
    ],
    Discriminator(_event_kind),
]

inbound_event_adapter = TypeAdapter(InboundEvent)


def parse_event(body: bytes | str) -> PipelineEvent | OtherEvent:
    """Decode a raw webhook body. Raises ``pydantic.ValidationError`` if malformed."""
    return inbound_event_adapter.validate_json(body)

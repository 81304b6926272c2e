from .gitlab import PipelineStatus, GitLabUser, JobRecord, MergeRequestDetail
from .webhook import (
    InboundEvent,
    MergeRequestReference,
    OtherEvent,
    PipelineEvent,
    parse_event,
)

__all__ = [
    "PipelineStatus",
    "GitLabUser",
    "JobRecord",
    "MergeRequestDetail",
    "InboundEvent",
    "MergeRequestReference",
    "OtherEvent",
    "PipelineEvent",
    "parse_event",
]

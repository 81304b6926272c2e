from .composer import compose_message
from .engine import PipelineRelay, RelayResult
from .identity import resolve_mention
from .jobs import collect_failed_jobs, filter_failed_jobs
from .merge_requests import fetch_merge_request

__all__ = [
    "compose_message",
    "PipelineRelay",
    "RelayResult",
    "resolve_mention",
    "collect_failed_jobs",
    "filter_failed_jobs",
    "fetch_merge_request",
]

# src/pipeline_notifier/context.py
from dataclasses import dataclass
from pipeline_notifier.config import Settings
from pipeline_notifier.platforms.base import ChatPlatform, GitPlatform
from pipeline_notifier.platforms.gitlab import GitLabClient
from pipeline_notifier.platforms.slack import SlackClient


@dataclass(frozen=True)
class RelayContext:
    """Process-wide, read-only state shared by every request."""
    settings: Settings
    gitlab: GitPlatform
    slack: ChatPlatform


def build_context(settings: Settings) -> RelayContext:
    return RelayContext(
        settings=settings,
        gitlab=GitLabClient(
            token=settings.gitlab_api_token,
            base_url=settings.gitlab_url,
            jobs_limit=settings.gitlab_jobs_limit,
            timeout=settings.request_timeout,
        ),
        slack=SlackClient(token=settings.slack_api_token, timeout=settings.request_timeout),
    )

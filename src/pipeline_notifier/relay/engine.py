# src/pipeline_notifier/relay/engine.py
import logging
from dataclasses import dataclass
from pipeline_notifier.models.gitlab import JobRecord
from pipeline_notifier.platforms.base import ChatPlatform, GitPlatform
from .composer import compose_message
from .identity import resolve_mention
from .jobs import collect_failed_jobs
from .merge_requests import fetch_merge_request


logger = logging.getLogger(__name__)


@dataclass
class RelayResult:
    """Outcome of relaying one failed pipeline."""
    message: str
    failed_jobs: list[JobRecord]


class PipelineRelay:
    def __init__(self, gitlab: GitPlatform, slack: ChatPlatform, channel: str):
        self.gitlab = gitlab
        self.slack = slack
        self.channel = channel

    async def relay_failure(self, project_id: int, pipeline_id: int, mr_iid: int) -> RelayResult:
        """Enrich a failed pipeline and post it to Slack.

        Errors from the job list, the merge request or the delivery propagate.
        Mention lookups never fail.
        """
        failed_jobs = await collect_failed_jobs(self.gitlab, project_id, pipeline_id)
        logger.info(f"Pipeline {pipeline_id}: {len(failed_jobs)} job(s) not successful")

        merge_request = await fetch_merge_request(self.gitlab, project_id, mr_iid)

        author_mention = await resolve_mention(self.slack, merge_request.author.username)
        merger_mention = None
        if merge_request.merged_by is not None:
            merger_mention = await resolve_mention(self.slack, merge_request.merged_by.username)

        message = compose_message(merge_request, author_mention, merger_mention, failed_jobs)
        await self._deliver(message)
        logger.info(f"Slacked: {message}")

        return RelayResult(message=message, failed_jobs=failed_jobs)

    async def _deliver(self, message: str) -> None:
        try:
            await self.slack.post_message(self.channel, message)
        except Exception as e:
            logger.error(f"Slack error posting to {self.channel}: {e}\n{message}")
            raise

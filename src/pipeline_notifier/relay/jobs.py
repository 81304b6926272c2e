# src/pipeline_notifier/relay/jobs.py
from pipeline_notifier.models.gitlab import JobRecord, PipelineStatus
from pipeline_notifier.platforms.base import GitPlatform


def filter_failed_jobs(jobs: list[JobRecord]) -> list[JobRecord]:
    """Keep every job that did not succeed, preserving order."""
    return [job for job in jobs if job.status != PipelineStatus.SUCCESS]


async def collect_failed_jobs(
    gitlab: GitPlatform,
    project_id: int,
    pipeline_id: int,
) -> list[JobRecord]:
    """Fetch all jobs of a pipeline and return the ones that did not succeed.

    Transport and decoding errors propagate to the caller.
    """
    raw_jobs = await gitlab.get_pipeline_jobs(project_id, pipeline_id)
    jobs = [JobRecord.model_validate(job) for job in raw_jobs]
    return filter_failed_jobs(jobs)

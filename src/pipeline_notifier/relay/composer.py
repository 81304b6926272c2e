# src/pipeline_notifier/relay/composer.py
from pipeline_notifier.models.gitlab import JobRecord, MergeRequestDetail


HEADER_LINE = "Failed MR: <{url}|{title}>"
AUTHOR_LINE = "Author: <@{mention}>"
MERGER_LINE = "Merged by: <@{mention}>"
JOBS_HEADER = "Failed jobs"
JOB_LINE = "- <{url}|{name}> {status}"


def compose_message(
    merge_request: MergeRequestDetail,
    author_mention: str,
    merger_mention: str | None,
    failed_jobs: list[JobRecord],
) -> str:
    """Build the Slack notification text. Every line ends with a newline."""
    lines = [
        HEADER_LINE.format(url=merge_request.web_url, title=merge_request.title),
        AUTHOR_LINE.format(mention=author_mention),
    ]
    if merger_mention is not None:
        lines.append(MERGER_LINE.format(mention=merger_mention))
    lines.append(JOBS_HEADER)
    lines.extend(
        JOB_LINE.format(url=job.web_url, name=job.name, status=job.status.label)
        for job in failed_jobs
    )
    return "".join(f"{line}\n" for line in lines)

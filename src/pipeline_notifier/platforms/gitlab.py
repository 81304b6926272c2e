import logging
from typing import Any
import httpx
from .base import GitPlatform


logger = logging.getLogger(__name__)

# GitLab rejects larger pages
MAX_PER_PAGE = 100


class GitLabClient(GitPlatform):
    def __init__(
        self,
        token: str,
        base_url: str = "https://gitlab.com",
        jobs_limit: int = 300,
        timeout: float = 30.0,
    ):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.api_url = f"{self.base_url}/api/v4"
        self.jobs_limit = jobs_limit
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        return {"PRIVATE-TOKEN": self.token}

    async def get_current_user(self) -> dict[str, Any]:
        """Get the user owning the token. Used to verify connectivity at startup."""
        async with httpx.AsyncClient() as client:
            response = await client.get(
                f"{self.api_url}/user",
                headers=self._headers(),
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json()

    async def get_pipeline_jobs(self, project_id: int, pipeline_id: int) -> list[dict[str, Any]]:
        """Get pipeline jobs in API order, following pages up to ``jobs_limit`` entries."""
        jobs: list[dict[str, Any]] = []
        per_page = max(1, min(MAX_PER_PAGE, self.jobs_limit))
        page: str | None = "1"

        async with httpx.AsyncClient() as client:
            while page and len(jobs) < self.jobs_limit:
                response = await client.get(
                    f"{self.api_url}/projects/{project_id}/pipelines/{pipeline_id}/jobs",
                    headers=self._headers(),
                    params={"per_page": per_page, "page": page},
                    timeout=self.timeout,
                )
                response.raise_for_status()
                batch = response.json()
                if not isinstance(batch, list):
                    raise ValueError(f"Unexpected jobs payload for pipeline {pipeline_id}: {batch!r}")
                jobs.extend(batch)
                page = response.headers.get("X-Next-Page")

        if page or len(jobs) > self.jobs_limit:
            logger.warning(
                f"Pipeline {pipeline_id} has more than {self.jobs_limit} jobs, truncating"
            )
        return jobs[: self.jobs_limit]

    async def get_mr_info(self, project_id: int, mr_iid: int) -> dict[str, Any]:
        """Get MR info including title, author and merger."""
        async with httpx.AsyncClient() as client:
            response = await client.get(
                f"{self.api_url}/projects/{project_id}/merge_requests/{mr_iid}",
                headers=self._headers(),
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json()

from pipeline_notifier.models.gitlab import MergeRequestDetail
from pipeline_notifier.platforms.base import GitPlatform


async def fetch_merge_request(gitlab: GitPlatform, project_id: int, mr_iid: int) -> MergeRequestDetail:
    data = await gitlab.get_mr_info(project_id, mr_iid)
    return MergeRequestDetail.model_validate(data)

# src/pipeline_notifier/relay/identity.py
import logging
from pipeline_notifier.platforms.base import ChatPlatform


logger = logging.getLogger(__name__)


async def resolve_mention(slack: ChatPlatform, username: str) -> str:
    """Translate a GitLab username into a Slack user id.

    Best effort: any lookup failure or unexpected response falls back to the
    username itself, so this never raises.
    """
    try:
        data = await slack.get_user_info(username)
    except Exception as e:
        logger.warning(f"Slack lookup failed for {username}: {e}")
        return username

    user = data.get("user") if isinstance(data, dict) else None
    user_id = user.get("id") if isinstance(user, dict) else None
    if isinstance(user_id, str) and user_id:
        return user_id

    logger.info(f"No Slack user found for {username}, using username")
    return username

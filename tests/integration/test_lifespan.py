# tests/integration/test_lifespan.py
import httpx
import pytest
from unittest.mock import AsyncMock, patch
from pipeline_notifier.config import Settings
from pipeline_notifier.main import app, lifespan
from pipeline_notifier.platforms.gitlab import GitLabClient
from pipeline_notifier.platforms.slack import SlackClient


def _settings():
    return Settings(
        gitlab_api_token="glpat-test",
        gitlab_api_hostname="gitlab.example.com",
        slack_api_token="xoxb-test",
        slack_channel="C123",
        _env_file=None,
    )


@pytest.mark.integration
@pytest.mark.asyncio
async def test_startup_builds_shared_context():
    with patch("pipeline_notifier.main.get_settings", return_value=_settings()), \
         patch.object(GitLabClient, "get_current_user", AsyncMock(return_value={"id": 1})) as check:
        async with lifespan(app):
            context = app.state.context

    check.assert_awaited_once()

    assert isinstance(context.gitlab, GitLabClient)
    assert isinstance(context.slack, SlackClient)
    assert context.gitlab.api_url == "https://gitlab.example.com/api/v4"
    assert context.settings.slack_channel == "C123"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_startup_fails_when_gitlab_unreachable():
    with patch("pipeline_notifier.main.get_settings", return_value=_settings()), \
         patch.object(GitLabClient, "get_current_user", AsyncMock(side_effect=httpx.ConnectError("down"))):
        with pytest.raises(RuntimeError, match="Couldn't connect to gitlab"):
            async with lifespan(app):
                pass

# src/pipeline_notifier/main.py
import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from fastapi import Depends, FastAPI, Request, Response
from pydantic import ValidationError

from pipeline_notifier.config import Settings
from pipeline_notifier.context import RelayContext, build_context
from pipeline_notifier.models.gitlab import PipelineStatus
from pipeline_notifier.models.webhook import OtherEvent, parse_event
from pipeline_notifier.relay.engine import PipelineRelay


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Logged payloads are cut to this many bytes
MAX_LOGGED_PAYLOAD = 2000


@lru_cache
def get_settings() -> Settings:
    return Settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Reading env vars...")
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level.upper())

    context = build_context(settings)
    logger.info(f"Connecting to gitlab at {settings.gitlab_url}...")
    try:
        await context.gitlab.get_current_user()
    except Exception as e:
        raise RuntimeError(f"Couldn't connect to gitlab: {settings.gitlab_url}") from e

    app.state.context = context
    logger.info("Pipeline notifier starting...")
    yield
    logger.info("Pipeline notifier shutting down...")


app = FastAPI(title="Pipeline Notifier", lifespan=lifespan)


def get_context(request: Request) -> RelayContext:
    return request.app.state.context


@app.post("/")
async def webhook(request: Request, context: RelayContext = Depends(get_context)) -> Response:
    body = await request.body()

    # Malformed payloads are acknowledged so GitLab does not keep retrying them
    try:
        event = parse_event(body)
    except ValidationError as e:
        logger.error(
            f"Got something unexpected: {e.errors(include_url=False)} "
            f"payload={body[:MAX_LOGGED_PAYLOAD]!r}"
        )
        return Response(status_code=200)

    if isinstance(event, OtherEvent):
        logger.info(f"Not a pipeline ({event.object_kind}). Skipping.")
        return Response(status_code=200)

    pipeline_id = event.object_attributes.id
    project_id = event.project.id
    status = event.object_attributes.status
    logger.info(f"Pipeline {pipeline_id} received, status: {status.value}")

    if status != PipelineStatus.FAILED:
        logger.info("Pipeline status not failure. Skipping.")
        return Response(status_code=200)

    if event.merge_request is None:
        logger.info("Pipeline has no merge request. Skipping.")
        return Response(status_code=200)

    relay = PipelineRelay(
        gitlab=context.gitlab,
        slack=context.slack,
        channel=context.settings.slack_channel,
    )
    try:
        await relay.relay_failure(
            project_id=project_id,
            pipeline_id=pipeline_id,
            mr_iid=event.merge_request.lookup_id,
        )
    except Exception as e:
        logger.exception(f"Relay failed for pipeline {pipeline_id}: {e}")
        return Response(status_code=500)

    return Response(status_code=200)


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "pipeline_notifier.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )

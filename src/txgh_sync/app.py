"""FastAPI application receiving GitHub and Transifex webhooks."""

import asyncio
import logging
from urllib.parse import parse_qs

from fastapi import BackgroundTasks, FastAPI, Header, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from txgh_sync.exceptions import StageFailure
from txgh_sync.handlers.push import PushHandler
from txgh_sync.infrastructure.dependency_injection import DependenciesContainer
from txgh_sync.models.schemas import PushEvent
from txgh_sync.utils.signatures import verify_github_signature

logger = logging.getLogger(__name__)


def run_push(handler: PushHandler, event: PushEvent) -> None:
    """Background task running the push pipeline; failures are already reported as statuses."""
    try:
        handler.handle(event)
    except StageFailure as e:
        logger.error("Push %s aborted at stage %s", event.head_sha, e.stage.value)
    except Exception as e:
        logger.error("Push %s failed: %s", event.head_sha, e, exc_info=True)


def create_app(container: DependenciesContainer | None = None) -> FastAPI:
    """Create the webhook application, resolving handlers from ``container``."""
    container = container or DependenciesContainer()
    app = FastAPI(title="txgh-sync", version="0.1.0")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    @app.post("/github/webhook")
    async def github_webhook(
        request: Request,
        background_tasks: BackgroundTasks,
        x_github_event: str = Header(default=""),
        x_hub_signature_256: str | None = Header(default=None),
    ):
        body = await request.body()
        config = container.config()

        if config.github_webhook_secret and not verify_github_signature(
            config.github_webhook_secret, body, x_hub_signature_256
        ):
            logger.warning("Rejected GitHub webhook with invalid signature")
            return JSONResponse(status_code=401, content={"status": "rejected"})

        if x_github_event == "ping":
            return {"status": "pong"}
        if x_github_event != "push":
            return {"status": "ignored"}

        payload = body
        if "application/x-www-form-urlencoded" in request.headers.get("content-type", ""):
            payload = parse_qs(body.decode("utf-8")).get("payload", [""])[0]

        try:
            event = PushEvent.model_validate_json(payload)
        except ValidationError as e:
            logger.warning("Malformed push payload: %s", e)
            return JSONResponse(status_code=400, content={"status": "rejected"})

        handler = container.push_handler()
        if not handler.should_handle(event):
            return {"status": "ignored"}

        background_tasks.add_task(run_push, handler, event)
        return JSONResponse(
            status_code=202,
            content={"status": "accepted", "head_sha": event.head_sha},
        )

    @app.post("/transifex/webhook")
    async def transifex_webhook(request: Request) -> JSONResponse:
        body = await request.body()
        handler = container.translation_ready_handler()

        loop = asyncio.get_running_loop()
        outcome = await loop.run_in_executor(
            None, handler.handle, body, dict(request.headers), str(request.url)
        )
        return JSONResponse(
            status_code=outcome.status_code,
            content={"status": outcome.status, "detail": outcome.detail},
        )

    return app

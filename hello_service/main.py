from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse

from .config import ServiceConfig
from .schemas import GREETING_MESSAGE, HEALTH_BODY, GreetingResponse

# Both routes answer on path alone, whatever the method.
ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def get_config(request: Request) -> ServiceConfig:
    return request.app.state.config


# === Routes ===
# Registration order is match order: greeting first, then health, then
# FastAPI's default 404.


async def greeting(config: ServiceConfig = Depends(get_config)) -> GreetingResponse:
    return GreetingResponse(
        message=GREETING_MESSAGE,
        hostname=config.hostname,
        timestamp=utc_timestamp(),
    )


async def health() -> PlainTextResponse:
    return PlainTextResponse(HEALTH_BODY, status_code=200)


def create_app(config: Optional[ServiceConfig] = None) -> FastAPI:
    """Build the application around a configuration resolved exactly once."""
    app = FastAPI(title="Hello Service", version="1.0.0")
    app.state.config = config if config is not None else ServiceConfig.from_env()
    app.add_api_route("/", greeting, methods=ANY_METHOD, response_model=GreetingResponse)
    app.add_api_route("/health", health, methods=ANY_METHOD, response_class=PlainTextResponse)
    return app

from __future__ import annotations

from typing import Mapping, Optional

import uvicorn

from .config import ServiceConfig
from .logging_config import configure_logging
from .main import create_app


def run(environ: Optional[Mapping[str, str]] = None) -> None:
    config = ServiceConfig.from_env(environ)
    app = create_app(config)
    logger = configure_logging()
    logger.info("Starting Python server on port %d", config.port)
    # Bind failures surface as uvicorn's own error and exit status.
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level="warning",
        access_log=False,
    )

"""
FastAPI application for MyApp, deployed on EKS with secrets synced by External Secrets.

Features
--------
- Liveness probe (`/health`) used by Kubernetes to check if the process is alive.
- Readiness probe (`/ready`) used by Kubernetes to decide if the Pod can receive traffic.
- Root endpoint (`/`) that returns app info as JSON, or an HTML landing page
  when the client prefers HTML and the bundled template was loaded.
- Live status (`/api/status`) with hostname, uptime and which secrets are present.
- Secured data (`/api/data`) guarded by the `x-api-key` header.
- Prometheus metrics at (`/metrics`) via `prometheus-fastapi-instrumentator`.

Intended Use
------------
`DATABASE_URL` and `API_SECRET_KEY` are synced from AWS Secrets Manager into a
Kubernetes Secret and injected as environment variables. Either may be missing;
the service still starts and reports "NOT CONFIGURED" instead of failing.

Notes
-----
- Settings and the landing template are read once in `create_app` and stored on
  `app.state`; handlers get them through dependencies, never from the environment.
- Every error response is a JSON object with a single `error` field.

"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import CollectorRegistry
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException as StarletteHTTPException

from myapp import __version__
from myapp.api.data import router as data_router
from myapp.api.info import router as info_router
from myapp.api.probes import router as probes_router
from myapp.config import Settings
from myapp.landing import load_landing_template
from myapp.logger import setup_logging
from myapp.status import UptimeClock

logger = logging.getLogger(__name__)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # routes are GET-only; any other method falls through to not found
    if exc.status_code == 405:
        return JSONResponse(status_code=404, content={"error": "Not Found"})
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def log_startup(settings: Settings, html_enabled: bool) -> None:
    logger.info("Configured listen address: %s:%s", settings.host, settings.port)
    logger.info("Version: %s | Environment: %s", settings.version, settings.environment)
    secrets = settings.secrets_summary()
    logger.info("Secrets: database=%s apiKey=%s", secrets["database"], secrets["apiKey"])
    logger.info(
        "HTML landing: %s | Metrics: %s",
        "enabled" if html_enabled else "disabled",
        "enabled" if settings.metrics_enabled else "disabled",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)
    landing_template = load_landing_template(settings.landing_template_path)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        log_startup(settings, landing_template is not None)
        try:
            yield
        finally:
            logger.info("MyApp shutdown complete.")

    app = FastAPI(title="MyApp", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.landing_template = landing_template
    app.state.uptime = UptimeClock()

    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    if settings.metrics_enabled:
        # instrument and expose /metrics, one registry per app instance
        Instrumentator(registry=CollectorRegistry()).instrument(app).expose(
            app, endpoint="/metrics"
        )

    app.include_router(probes_router)
    app.include_router(info_router)
    app.include_router(data_router)

    return app


app = create_app()


def main() -> None:
    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()

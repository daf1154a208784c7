"""FastAPI front-end.

Routes
------
GET  /          Form asking for the URL to analyse
POST /analyse   Form field ``url`` → summary page, or error page on failure
GET  /health    Liveness probe

Analysis is blocking (page fetch plus link probes), so the analyse route is a
plain ``def`` and runs on FastAPI's threadpool.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse

from webanalyse.analyzer import PageAnalyzer, error_message
from webanalyse.config import Config
from webanalyse.constants import GRACEFUL_SHUTDOWN_SECONDS
from webanalyse.exceptions import WebAnalyseError
from webanalyse.logging_config import get_logger
from webanalyse.report_generator import ReportGenerator

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log service start and stop."""
    logger.info("Server : Service started")
    try:
        yield
    finally:
        logger.info("Server : Service stopped")


def create_app(
    config: Optional[Config] = None,
    analyzer: Optional[PageAnalyzer] = None,
) -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    config = config or Config.from_env()

    app = FastAPI(
        title="Web Analyse",
        description="Analyses a single web page: title, markup version, headings, "
                    "login form and internal/external/inaccessible links.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.analyzer = analyzer or PageAnalyzer(config)
    app.state.reports = ReportGenerator()

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request) -> str:
        return request.app.state.reports.render_index()

    @app.post("/analyse", response_class=HTMLResponse)
    def analyse(request: Request, url: str = Form("")) -> str:
        """Analyse the submitted URL and render the summary."""
        reports: ReportGenerator = request.app.state.reports
        try:
            summary = request.app.state.analyzer.analyse(url)
        except WebAnalyseError as e:
            return reports.render_error(error_message(e, url))
        return reports.render_summary(summary)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


def run_server(config: Optional[Config] = None) -> None:
    """Serve the application until interrupted.

    In-flight requests get GRACEFUL_SHUTDOWN_SECONDS to finish once a
    shutdown signal arrives.
    """
    config = config or Config.from_env()
    logger.info(f"Server : Service starting : Host={config.host}:{config.port}")

    server = uvicorn.Server(
        uvicorn.Config(
            create_app(config),
            host=config.host,
            port=config.port,
            timeout_graceful_shutdown=GRACEFUL_SHUTDOWN_SECONDS,
            log_config=None,
        )
    )
    server.run()
    logger.info("shutting down")

# -*- coding: utf-8 -*-
"""
FatSecret food proxy API

Signs food search / detail queries with OAuth 1.0a and forwards them to the
FatSecret Platform API.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import settings
from .food.api import router as food_router
from .food.models import HealthResponse
from .oauth import ConfigurationError, OAuthError

logger = logging.getLogger(__name__)

app = FastAPI(
    title="FatSecret food proxy",
    description="OAuth 1.0a signing proxy for FatSecret food search and detail lookups",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(OAuthError)
async def _oauth_error_handler(request: Request, exc: OAuthError) -> JSONResponse:
    logger.error("request signing unavailable for %s: %s", request.url.path, exc)
    if isinstance(exc, ConfigurationError):
        message = "FatSecret credentials are not configured"
    else:
        message = "Failed to sign FatSecret request"
    return JSONResponse(status_code=500, content={"error": message})


@app.exception_handler(RequestValidationError)
async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part not in ("query", "path"))
        problems.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return JSONResponse(status_code=422, content={"error": "Invalid request: " + "; ".join(problems)})


app.include_router(food_router)


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(ok=True)


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("FatSecret proxy listening on %s:%s", settings.host, settings.port)
    uvicorn.run("foodproxy.api:app", host=settings.host, port=settings.port, reload=False)

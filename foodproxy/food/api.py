# -*- coding: utf-8 -*-
"""Food — search and detail endpoints proxied to FatSecret."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ..config import settings
from ..fatsecret import FatSecretAPIError, FatSecretClient, FatSecretError
from ..oauth import OAuthError, Signer
from .models import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/food", tags=["Food"])

SEARCH_FAILED = "Failed to fetch data from FatSecret"
DETAIL_FAILED = "Failed to fetch food details"
# FatSecret "Invalid ID" error code.
INVALID_ID_CODE = 106
MAX_BATCH_IDS = 20


def get_signer() -> Signer:
    # Raises ConfigurationError before any provider call when credentials are missing.
    return Signer(settings.credentials)


def get_fatsecret_client(signer: Signer = Depends(get_signer)) -> FatSecretClient:
    return FatSecretClient.from_settings(signer, settings)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _log_failure(action: str, exc: Exception) -> None:
    if isinstance(exc, FatSecretAPIError):
        logger.error("FatSecret %s error code=%s: %s", action, exc.code, exc.message)
    else:
        logger.error("FatSecret %s failed: %s", action, exc)


@router.get(
    "/search",
    summary="Search foods by free text",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search_foods(
    q: str | None = Query(default=None, description="Search expression, e.g. 'apple'"),
    max_results: int | None = Query(default=None, ge=1, le=50),
    page: int | None = Query(default=None, ge=0, description="Zero-based page number"),
    client: FatSecretClient = Depends(get_fatsecret_client),
):
    logger.info("food search called, q=%r", q)
    query = (q or "").strip()
    if not query:
        return _error(400, "Missing search query")
    try:
        return await client.search_foods(query, max_results=max_results, page_number=page)
    except (FatSecretError, OAuthError) as exc:
        _log_failure("search", exc)
        return _error(500, SEARCH_FAILED)


@router.get(
    "/batch",
    summary="Food details for several ids, fetched concurrently",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_food_batch(
    ids: str | None = Query(default=None, description="Comma separated food ids, e.g. '33691,35718'"),
    client: FatSecretClient = Depends(get_fatsecret_client),
):
    food_ids = [fid.strip() for fid in (ids or "").split(",") if fid.strip()]
    if not food_ids:
        return _error(400, "Missing food ids")
    if len(food_ids) > MAX_BATCH_IDS:
        return _error(400, f"At most {MAX_BATCH_IDS} food ids per request")
    try:
        foods = await client.get_foods(food_ids)
    except (FatSecretError, OAuthError) as exc:
        _log_failure("food batch", exc)
        return _error(500, DETAIL_FAILED)
    return {"foods": foods}


@router.get(
    "/{food_id}",
    summary="Food detail by FatSecret food id",
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_food(food_id: str, client: FatSecretClient = Depends(get_fatsecret_client)):
    try:
        food = await client.get_food(food_id)
    except FatSecretAPIError as exc:
        if exc.code == INVALID_ID_CODE:
            return _error(404, "Food not found")
        _log_failure("food detail", exc)
        return _error(500, DETAIL_FAILED)
    except (FatSecretError, OAuthError) as exc:
        _log_failure("food detail", exc)
        return _error(500, DETAIL_FAILED)
    if not food:
        return _error(404, "Food not found")
    return food

# -*- coding: utf-8 -*-
"""Food — Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Human-readable failure reason")


class HealthResponse(BaseModel):
    ok: bool = True

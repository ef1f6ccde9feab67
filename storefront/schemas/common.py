"""Schemas shared by every endpoint: the camelCase base, row timestamps, health."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serialized with camelCase keys; built from ORM rows or snake_case kwargs."""

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "from_attributes": True,
    }


class TimestampedOut(CamelModel):
    """Base for list items; `createdAt` and `updatedAt` are the common sort keys."""

    id: str
    created_at: datetime
    updated_at: datetime


class HealthResponse(BaseModel):
    """Returned by /health. `degraded` means the app is up but the database is not reachable."""

    status: Literal["ok", "degraded"]
    app: str
    env: str
    database: Literal["ok", "unavailable"]

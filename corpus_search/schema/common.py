from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel


class HealthStatus(BaseModel):
    status: Literal["ok", "degraded", "down"] = "ok"
    version: Optional[str] = None
    opensearch: Optional[Literal["ok", "down"]] = None

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from lk30codec.codec import DownlinkResult


class DownlinkResponse(DownlinkResult):
    bytes_hex: Optional[str] = None
    bytes_b64: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


class EventsResponse(BaseModel):
    events: List[Dict[str, Any]] = Field(default_factory=list)

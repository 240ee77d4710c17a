from __future__ import annotations

import base64
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from lk30codec.codec import DownlinkInput, PayloadCodec, UplinkInput, UplinkResult
from lk30codec.codec_server_app.config import CodecServerSettings, get_settings
from lk30codec.codec_server_app.models import DownlinkResponse, EventsResponse, HealthResponse
from lk30codec.core.logging import create_logger, ring_buffer


def _package_version() -> str:
    from lk30codec import __version__

    return __version__


def create_app(settings: Optional[CodecServerSettings] = None) -> FastAPI:
    settings = settings or get_settings()
    logger = create_logger("lk30codec.server", settings.log_ring_size, settings.log_level)
    codec = PayloadCodec(logger=logger, warn_on_trailing_bytes=settings.warn_on_trailing_bytes)

    app = FastAPI(title="LK30 payload codec")
    app.state.settings = settings
    app.state.codec = codec
    app.state.logger = logger

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(version=_package_version())

    @app.get("/events", response_model=EventsResponse)
    async def events() -> EventsResponse:
        handler = ring_buffer(logger)
        return EventsResponse(events=handler.get_events() if handler else [])

    @app.post("/uplink/decode", response_model=UplinkResult)
    async def uplink_decode(body: UplinkInput):
        result = codec.decode_uplink(body)
        if result.errors:
            return JSONResponse(status_code=422, content=result.model_dump())
        return result

    @app.post("/downlink/encode", response_model=DownlinkResponse, response_model_by_alias=True)
    async def downlink_encode(body: DownlinkInput):
        result = codec.encode_downlink(body)
        if result.errors:
            return JSONResponse(status_code=422, content=result.model_dump(by_alias=True))
        frame = bytes(result.payload or [])
        return DownlinkResponse(
            payload=result.payload,
            warnings=result.warnings,
            bytes_hex=frame.hex(),
            bytes_b64=base64.b64encode(frame).decode("utf-8"),
        )

    return app

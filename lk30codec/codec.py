"""
ChirpStack payload codec boundary for the LK30 sensor.

ChirpStack calls ``decodeUplink({bytes, fPort, variables})`` and
``encodeDownlink({data, variables})`` and expects an object back that carries
either the result or an ``errors`` list. ``PayloadCodec`` exposes the same
contract on top of the pure decoder and encoder, so failures come back as data
rather than exceptions.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from lk30codec.core.binary import b64_to_bytes, hex_to_bytes
from lk30codec.core.logging import redact
from lk30codec.errors import CodecError
from lk30codec.parsing.commands import command_from_dict, encode_downlink
from lk30codec.parsing.uplink import UPLINK_LENGTH, decode_uplink


class UplinkInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    payload: Optional[List[int]] = Field(None, alias="bytes")
    data_b64: Optional[str] = None
    data_hex: Optional[str] = None
    f_port: Optional[int] = Field(None, alias="fPort")
    variables: Dict[str, str] = Field(default_factory=dict)


class UplinkResult(BaseModel):
    data: Optional[Dict[str, Any]] = None
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class DownlinkInput(BaseModel):
    data: Dict[str, Any]
    variables: Dict[str, str] = Field(default_factory=dict)


class DownlinkResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    payload: Optional[List[int]] = Field(None, alias="bytes")
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


def _resolve_payload(request: UplinkInput) -> bytes | list[int]:
    if request.payload is not None:
        # Range checks on the items happen in the decoder.
        return request.payload
    if request.data_b64 is not None:
        return b64_to_bytes(request.data_b64)
    if request.data_hex is not None:
        return hex_to_bytes(request.data_hex)
    raise CodecError("Uplink carries no payload (expected 'bytes', 'data_b64' or 'data_hex')")


def _validation_errors(exc: ValidationError) -> list[str]:
    return [f"{'.'.join(str(part) for part in err['loc']) or 'request'}: {err['msg']}" for err in exc.errors()]


class PayloadCodec:
    def __init__(self, logger: Optional[logging.Logger] = None, warn_on_trailing_bytes: bool = True) -> None:
        self.logger = logger or logging.getLogger("lk30codec")
        self.warn_on_trailing_bytes = warn_on_trailing_bytes

    def _failed(self, event: str, details: dict, errors: list[str], result_cls):
        self.logger.warning(event, extra={"details": {**details, "error": "; ".join(errors)}})
        return result_cls(errors=errors)

    def decode_uplink(self, request: UplinkInput | dict) -> UplinkResult:
        details: dict = {}
        try:
            if isinstance(request, dict):
                request = UplinkInput.model_validate(request)
            details = {"f_port": request.f_port, "variables": redact(request.variables)}
            payload = _resolve_payload(request)
            message = decode_uplink(payload)
        except ValidationError as exc:
            return self._failed("uplink_decode_failed", details, _validation_errors(exc), UplinkResult)
        except CodecError as exc:
            return self._failed("uplink_decode_failed", details, [str(exc)], UplinkResult)

        warnings: list[str] = []
        if self.warn_on_trailing_bytes and len(payload) > UPLINK_LENGTH:
            warnings.append(f"ignored {len(payload) - UPLINK_LENGTH} trailing byte(s)")
        self.logger.info("uplink_decoded", extra={"details": {**details, "func": message.function_code}})
        return UplinkResult(data=message.as_dict(), warnings=warnings)

    def encode_downlink(self, request: DownlinkInput | dict) -> DownlinkResult:
        details: dict = {}
        try:
            if isinstance(request, dict):
                request = DownlinkInput.model_validate(request)
            details = {"func": request.data.get("func"), "variables": redact(request.variables)}
            frame = encode_downlink(command_from_dict(request.data))
        except ValidationError as exc:
            return self._failed("downlink_encode_failed", details, _validation_errors(exc), DownlinkResult)
        except CodecError as exc:
            return self._failed("downlink_encode_failed", details, [str(exc)], DownlinkResult)
        self.logger.info("downlink_encoded", extra={"details": {**details, "length": len(frame)}})
        return DownlinkResult(payload=list(frame))

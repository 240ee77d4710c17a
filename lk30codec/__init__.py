from lk30codec.codec import PayloadCodec
from lk30codec.codec_server_app import create_app, CodecServerSettings
from lk30codec.codec_server import CodecServer
from lk30codec.errors import CodecError, InvalidCommandError, OutOfRangeError, UnsupportedFunctionError
from lk30codec.parsing.commands import (
    command_from_dict,
    encode_downlink,
    DownlinkCommand,
    FunctionCode,
    Reset,
    SetAlarmConfig,
    SetSchedule,
)
from lk30codec.parsing.uplink import decode_uplink, UplinkMessage
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "PayloadCodec",
    "create_app",
    "CodecServerSettings",
    "CodecServer",
    "CodecError",
    "InvalidCommandError",
    "OutOfRangeError",
    "UnsupportedFunctionError",
    "command_from_dict",
    "encode_downlink",
    "DownlinkCommand",
    "FunctionCode",
    "Reset",
    "SetAlarmConfig",
    "SetSchedule",
    "decode_uplink",
    "UplinkMessage",
]

try:
    __version__ = version("lk30-codec")
except PackageNotFoundError:
    __version__ = "0.0.0"

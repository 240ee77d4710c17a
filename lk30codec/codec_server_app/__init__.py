from lk30codec.codec_server_app.api import create_app
from lk30codec.codec_server_app.config import CodecServerSettings, get_settings

__all__ = ["create_app", "CodecServerSettings", "get_settings"]

from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class CodecServerSettings(BaseSettings):
    server_ip: str = Field("127.0.0.1", validation_alias="SERVER_IP")
    server_port: int = Field(10290, validation_alias="SERVER_PORT")

    log_ring_size: int = Field(200, validation_alias="LOG_RING_SIZE")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")

    # Report uplinks longer than the fixed layout as warnings
    warn_on_trailing_bytes: bool = Field(True, validation_alias="WARN_ON_TRAILING_BYTES")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> CodecServerSettings:
    return CodecServerSettings()

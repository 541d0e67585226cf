# mountfs/config.py
from pydantic_settings import BaseSettings

from mountfs.services.sandbox import TeardownPolicy


class Settings(BaseSettings):
    # Mount root for every logical path; empty string means pass-through
    MOUNT_POINT: str = "./.sandbox"
    TEARDOWN_POLICY: TeardownPolicy = TeardownPolicy.NONE

    # HTTP MCP transport
    MCP_HTTP_HOST: str = "127.0.0.1"
    MCP_HTTP_PORT: int = 8080
    MCP_HTTP_PATH: str = "/mcp"

    # Security: Bearer token and allowed origins
    MCP_HTTP_BEARER_TOKEN: str = "change-me"         # set in .env for prod
    MCP_HTTP_ALLOWED_ORIGINS: str = "http://localhost, http://127.0.0.1"
    MCP_HTTP_ALLOW_NO_ORIGIN: bool = True            # allow non-browser clients

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

import os
from functools import lru_cache
from typing import Literal, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict


# ============================================================
# Settings sections
# ============================================================

class AppSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = "Identity Claims MCP Server"
    version: str = "?.?"


class IdentityStorageApiSettings(BaseModel):
    """Remote claims store. e.g. api_url="http://localhost:5005", api_base_path="/api/v1"."""

    model_config = ConfigDict(frozen=True)

    api_url: str = ""
    api_base_path: str = ""
    timeout: float = 30.0


class AuthSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    scheme: str = "Bearer"
    expected_token: str = ""


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    app: AppSettings = AppSettings()
    identity_storage_api: IdentityStorageApiSettings = IdentityStorageApiSettings()
    auth: AuthSettings = AuthSettings()

    transport: Literal["stdio", "http"] = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000
    mcp_path: str = "/mcp"
    log_level: str = "INFO"


# ============================================================
# Loading
# ============================================================

def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from ``environ`` (defaults to ``os.environ``); unset or blank keys keep defaults."""
    env = os.environ if environ is None else environ

    def getenv(name: str, default: str) -> str:
        return env.get(name) or default

    return Settings(
        app=AppSettings(
            name=getenv("APP_NAME", "Identity Claims MCP Server"),
            version=getenv("APP_VERSION", "?.?"),
        ),
        identity_storage_api=IdentityStorageApiSettings(
            api_url=getenv("IDENTITY_STORAGE_API_URL", ""),
            api_base_path=getenv("IDENTITY_STORAGE_API_BASE_PATH", ""),
            timeout=getenv("IDENTITY_STORAGE_API_TIMEOUT", "30"),
        ),
        auth=AuthSettings(
            scheme=getenv("AUTH_SCHEME", "Bearer"),
            expected_token=getenv("AUTH_EXPECTED_TOKEN", ""),
        ),
        transport=getenv("MCP_TRANSPORT", "stdio"),
        host=getenv("MCP_HOST", "127.0.0.1"),
        port=getenv("MCP_PORT", "8000"),
        mcp_path=getenv("MCP_PATH", "/mcp"),
        log_level=getenv("LOG_LEVEL", "INFO"),
    )


@lru_cache
def get_settings() -> Settings:
    load_dotenv()
    return load_settings()

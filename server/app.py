# server/app.py
#
# HTTP host for the claims MCP server:
#   uvicorn server.app:create_app --factory

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from claims_backend.auth.token_auth import AuthOutcome, authenticate
from claims_backend.config.settings import Settings, get_settings
from claims_backend.mcp_tools.app_info_tool import get_app_version
from claims_backend.mcp_tools.claim_tools import ClaimTools
from claims_backend.services.claim_client import ClaimClient
from claims_backend.utils.logger import logger
from mcp_server import build_mcp


def _is_mcp_path(path: str, mcp_path: str) -> bool:
    return path == mcp_path or path.startswith(mcp_path.rstrip("/") + "/")


def create_app(settings: Optional[Settings] = None, claim_tools: Optional[ClaimTools] = None) -> FastAPI:
    settings = settings or get_settings()

    owned_client: Optional[ClaimClient] = None
    if claim_tools is None:
        owned_client = ClaimClient(settings.identity_storage_api)
        claim_tools = ClaimTools(owned_client)

    mcp = build_mcp(settings, claim_tools)
    mcp_app = mcp.http_app(path=settings.mcp_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with mcp_app.lifespan(app):
            logger.info(f"[HTTP] {settings.app.name} ver:{settings.app.version} serving MCP at {settings.mcp_path}")
            yield
        if owned_client is not None:
            await owned_client.aclose()

    app = FastAPI(title=settings.app.name, version=settings.app.version, lifespan=lifespan)

    # -----------------------------
    # Token check on the MCP endpoint
    # -----------------------------
    @app.middleware("http")
    async def require_token(request: Request, call_next):
        if _is_mcp_path(request.url.path, settings.mcp_path):
            result = authenticate(request.headers.get("Authorization"), settings.auth)
            if result.outcome is not AuthOutcome.SUCCESS:
                logger.warning(f"[HTTP] Rejected {request.method} {request.url.path}: {result.message}")
                return JSONResponse(
                    status_code=401,
                    content={"detail": result.message},
                    headers={"WWW-Authenticate": settings.auth.scheme},
                )
        return await call_next(request)

    # -----------------------------
    # Version endpoint
    # -----------------------------
    @app.get("/version")
    def version():
        return Response(content=get_app_version(settings.app.version), media_type="application/json")

    app.mount("/", mcp_app)
    return app

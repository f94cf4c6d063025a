# mcp_server.py

import asyncio
import sys
from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from claims_backend.config.settings import Settings, get_settings
from claims_backend.mcp_tools.app_info_tool import get_app_version
from claims_backend.mcp_tools.claim_tools import ClaimTools
from claims_backend.services.claim_client import ClaimClient
from claims_backend.state.claim_state import ClaimCreateDto, ClaimUpdateDto
from claims_backend.utils.logger import configure_logging, logger

SERVER_INSTRUCTIONS = "Manage identity claims."


def build_mcp(settings: Settings, claim_tools: ClaimTools) -> FastMCP:
    mcp = FastMCP(
        name=settings.app.name,
        version=settings.app.version,
        instructions=SERVER_INSTRUCTIONS,
    )

    # ----------------------
    # Claim tools
    # ----------------------
    @mcp.tool(name="IdentityStorage.GetClaims", description="Get a list of claims.")
    async def get_claims() -> str:
        return await claim_tools.get_claims()

    @mcp.tool(name="IdentityStorage.GetClaimDetails", description="Get a claim by id.")
    async def get_claim_details(
        claim_id: Annotated[str, Field(description="The id of the claim to get details for")],
    ) -> str:
        return await claim_tools.get_claim_details(claim_id)

    @mcp.tool(name="IdentityStorage.DeleteClaim", description="Delete a claim by id.")
    async def delete_claim(
        claim_id: Annotated[str, Field(description="The id of the claim to delete")],
    ) -> str:
        return await claim_tools.delete_claim(claim_id)

    @mcp.tool(name="IdentityStorage.CreateClaim", description="Create a new claim.")
    async def create_claim(
        claim_dto: Annotated[
            ClaimCreateDto,
            Field(description="The data for the new claim. The 'Id' will be generated by the server."),
        ],
    ) -> str:
        return await claim_tools.create_claim(claim_dto)

    @mcp.tool(name="IdentityStorage.UpdateClaim", description="Update a claim by id.")
    async def update_claim(
        claim_id: Annotated[str, Field(description="The id of the claim to update")],
        claim_dto: Annotated[
            ClaimUpdateDto,
            Field(description="The data to update the claim. The 'Id' in the body must match the 'claimId' in the path."),
        ],
    ) -> str:
        return await claim_tools.update_claim(claim_id, claim_dto)

    # ----------------------
    # General tools
    # ----------------------
    @mcp.tool(
        name="General.GetAppVersion",
        description="Returns the current application version, local time, UTC time, and UTC ticks as a JSON object.",
    )
    def app_version() -> str:
        return get_app_version(settings.app.version)

    return mcp


async def serve_stdio(settings: Settings) -> None:
    async with ClaimClient(settings.identity_storage_api) as claim_client:
        mcp = build_mcp(settings, ClaimTools(claim_client))
        await mcp.run_async(transport="stdio")


def main() -> int:
    logger.info("App starting ...")
    try:
        settings = get_settings()
        configure_logging(settings.log_level)
        logger.info(f"{settings.app.name} ver:{settings.app.version}")

        if settings.transport == "http":
            import uvicorn

            from server.app import create_app

            uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
        else:
            asyncio.run(serve_stdio(settings))
    except Exception:
        logger.exception("Host terminated unexpectedly")
        return 1
    return 0


# ----------------------
# Run MCP server
# ----------------------
if __name__ == "__main__":
    sys.exit(main())

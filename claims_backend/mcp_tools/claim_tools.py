from typing import Any, List, Mapping, Union

from pydantic import TypeAdapter

from claims_backend.services.claim_client import ClaimClient
from claims_backend.state.claim_state import (
    ClaimCreateDto,
    ClaimOutgoingDto,
    ClaimUpdateDto,
    ErrorOutgoingDto,
)
from claims_backend.utils.logger import logger
from claims_backend.utils.mapper import (
    claim_to_outgoing_dto,
    create_dto_to_claim,
    update_dto_to_claim,
)
from claims_backend.utils.validator import validate

VALIDATION_FAILED = "Validation Failed"

_OUTGOING_LIST = TypeAdapter(List[ClaimOutgoingDto])


# ---------------------------------------------------
# Helpers
# ---------------------------------------------------

def _serialize(dto: Union[ClaimOutgoingDto, ErrorOutgoingDto]) -> str:
    return dto.model_dump_json(by_alias=True)


def _validation_error(errors: List[str]) -> str:
    return _serialize(ErrorOutgoingDto(errors=errors, status=VALIDATION_FAILED))


class ClaimTools:
    """
    Claim operations as exposed to the MCP host.

    Every method returns a compact JSON string: the outgoing claim (or list of
    claims), or an ``{"Errors": [...], "Status": "Validation Failed"}`` object
    when the request is rejected before reaching the gateway. Gateway failures
    are raised, not serialized.
    """

    def __init__(self, claim_client: ClaimClient):
        self.claim_client = claim_client

    async def get_claims(self) -> str:
        claims = await self.claim_client.load_claims()
        dtos = [claim_to_outgoing_dto(c) for c in claims or []]
        return _OUTGOING_LIST.dump_json(dtos, by_alias=True).decode()

    async def get_claim_details(self, claim_id: str) -> str:
        claim = await self.claim_client.load_claim_details(claim_id)
        return _serialize(claim_to_outgoing_dto(claim))

    async def delete_claim(self, claim_id: str) -> str:
        deleted = await self.claim_client.delete_claim(claim_id)
        return _serialize(claim_to_outgoing_dto(deleted))

    async def create_claim(self, claim_dto: Union[ClaimCreateDto, Mapping[str, Any]]) -> str:
        dto = ClaimCreateDto.model_validate(claim_dto)

        ok, errors = validate(dto)
        if not ok:
            logger.info(f"[ClaimTools] create_claim rejected: {errors}")
            return _validation_error(errors)

        created = await self.claim_client.create_claim(create_dto_to_claim(dto))
        return _serialize(claim_to_outgoing_dto(created))

    async def update_claim(self, claim_id: str, claim_dto: Union[ClaimUpdateDto, Mapping[str, Any]]) -> str:
        dto = ClaimUpdateDto.model_validate(claim_dto)

        # Path/body identity first, field rules second
        if not claim_id or not claim_id.strip():
            return _validation_error(["The claimId path parameter cannot be empty."])
        if claim_id != dto.id:
            logger.info(f"[ClaimTools] update_claim id mismatch: path={claim_id} body={dto.id}")
            return _validation_error(["The claimId in the path must match the Id in the request body."])

        ok, errors = validate(dto)
        if not ok:
            logger.info(f"[ClaimTools] update_claim rejected: {errors}")
            return _validation_error(errors)

        updated = await self.claim_client.update_claim(claim_id, update_dto_to_claim(dto))
        return _serialize(claim_to_outgoing_dto(updated))

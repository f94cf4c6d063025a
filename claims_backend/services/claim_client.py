"""
Gateway to the identity storage API (``masterdata/claims``).

Each public method issues exactly one HTTP request and returns entities, or
raises one of:

- ``httpx.TransportError`` - the request never completed (re-raised as is)
- ``ClaimApiError``        - the API answered with a non-2xx status
- ``ClaimIntegrityError``  - 2xx, but the body was empty or not a claim
"""

from typing import Any, List, Optional
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from claims_backend.config.settings import IdentityStorageApiSettings
from claims_backend.services.errors import ClaimApiError, ClaimIntegrityError
from claims_backend.state.claim_state import Claim, ClaimDto
from claims_backend.utils.logger import logger
from claims_backend.utils.mapper import claim_to_dto, dto_to_claim

CLAIMS_API_ENDPOINT = "masterdata/claims"

_CLAIM_LIST = TypeAdapter(Optional[List[ClaimDto]])


def combine_url(*segments: str) -> str:
    """Join path segments with single slashes, ignoring empty ones."""
    parts = [s.strip("/") for s in segments if s and s.strip("/")]
    return "/".join(parts)


class ClaimClient:

    def __init__(
        self,
        settings: IdentityStorageApiSettings,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        if not settings.api_url:
            raise ValueError("IDENTITY_STORAGE_API_URL is missing! Set it in .env or environment variables.")

        self._base_path = settings.api_base_path
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(timeout=settings.timeout)
        http_client.base_url = settings.api_url
        self._http = http_client

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "ClaimClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ----------------------
    # Helpers
    # ----------------------

    def _resource_path(self, claim_id: Optional[str] = None) -> str:
        if claim_id is None:
            return combine_url(self._base_path, CLAIMS_API_ENDPOINT)
        if not claim_id.strip():
            raise ValueError("claim_id must not be blank")
        return combine_url(self._base_path, CLAIMS_API_ENDPOINT, quote(claim_id, safe=""))

    async def _send(self, method: str, path: str, caller: str, **kwargs: Any) -> httpx.Response:
        logger.info(f"[ClaimClient] Start {caller} for {path}...")
        try:
            return await self._http.request(method, path, **kwargs)
        except httpx.TransportError:
            logger.exception(f"[ClaimClient] Failed HTTP {method} operation in {caller} for {path}")
            raise

    @staticmethod
    def _raise_for_status(response: httpx.Response, operation: str) -> None:
        if response.is_success:
            return
        error = ClaimApiError(operation, response.status_code, response.text, response.reason_phrase)
        logger.error(f"[ClaimClient] {error}")
        raise error

    @staticmethod
    def _read_json(response: httpx.Response, operation: str) -> Any:
        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as e:
            error = ClaimIntegrityError(
                operation,
                f"API returned success for {operation} but the response content could not be parsed as JSON.",
            )
            logger.error(f"[ClaimClient] {error}")
            raise error from e

    def _parse_claim_response(self, response: httpx.Response, operation: str) -> Claim:
        self._raise_for_status(response, operation)

        payload = self._read_json(response, operation)
        dto = None
        cause = None
        if isinstance(payload, dict):
            try:
                dto = ClaimDto.model_validate(payload)
            except ValidationError as e:
                cause = e
        if dto is None:
            error = ClaimIntegrityError(
                operation,
                f"API returned success for {operation} but the response content was null "
                f"or could not be deserialized to {ClaimDto.__name__}.",
            )
            logger.error(f"[ClaimClient] {error}")
            raise error from cause
        return dto_to_claim(dto)

    # ----------------------
    # Operations
    # ----------------------

    async def load_claims(self) -> List[Claim]:
        operation = "loading claims"
        response = await self._send("GET", self._resource_path(), "load_claims")
        self._raise_for_status(response, operation)

        try:
            dtos = _CLAIM_LIST.validate_python(self._read_json(response, operation))
        except ValidationError as e:
            error = ClaimIntegrityError(
                operation,
                f"API returned success for {operation} but the response content "
                f"could not be deserialized to a list of {ClaimDto.__name__}.",
            )
            logger.error(f"[ClaimClient] {error}")
            raise error from e
        return [dto_to_claim(dto) for dto in dtos or []]

    async def load_claim_details(self, claim_id: str) -> Claim:
        response = await self._send("GET", self._resource_path(claim_id), "load_claim_details")
        return self._parse_claim_response(response, f"loading claim '{claim_id}'")

    async def delete_claim(self, claim_id: str) -> Claim:
        """Delete a claim; the API answers with the record it removed."""
        response = await self._send("DELETE", self._resource_path(claim_id), "delete_claim")
        return self._parse_claim_response(response, f"deleting claim '{claim_id}'")

    async def create_claim(self, claim: Claim) -> Claim:
        body = claim_to_dto(claim).model_dump(by_alias=True, exclude={"id"})
        response = await self._send("POST", self._resource_path(), "create_claim", json=body)
        return self._parse_claim_response(response, "creating new claim")

    async def update_claim(self, claim_id: str, claim: Claim) -> Claim:
        body = claim_to_dto(claim).model_dump(by_alias=True)
        response = await self._send("PATCH", self._resource_path(claim_id), "update_claim", json=body)
        return self._parse_claim_response(response, f"updating claim '{claim_id}'")

from enum import Enum
from typing import NamedTuple, Optional

from claims_backend.config.settings import AuthSettings
from claims_backend.utils.logger import logger


class AuthOutcome(str, Enum):
    NO_RESULT = "no_result"
    SUCCESS = "success"
    FAILURE = "failure"


class AuthResult(NamedTuple):
    outcome: AuthOutcome
    message: str = ""


def authenticate(authorization: Optional[str], settings: AuthSettings) -> AuthResult:
    """
    Check an ``Authorization`` header against the single configured token.

    The configured token is compared literally; there is no wildcard.
    """
    if not authorization or not authorization.strip():
        return AuthResult(AuthOutcome.NO_RESULT, "Missing Authorization header.")

    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != settings.scheme.lower():
        return AuthResult(AuthOutcome.NO_RESULT, f"Expected {settings.scheme} authorization.")

    if not settings.expected_token:
        logger.error("[Auth] AUTH_EXPECTED_TOKEN is not configured.")
        return AuthResult(AuthOutcome.FAILURE, "Server configuration error for authentication.")

    if token.strip() == settings.expected_token:
        return AuthResult(AuthOutcome.SUCCESS)
    return AuthResult(AuthOutcome.FAILURE, "Invalid token.")

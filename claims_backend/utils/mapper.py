from claims_backend.state.claim_state import (
    Claim,
    ClaimCreateDto,
    ClaimDto,
    ClaimOutgoingDto,
    ClaimUpdateDto,
)


# ----------------------
# Incoming tool DTOs -> entity
# ----------------------

def create_dto_to_claim(dto: ClaimCreateDto) -> Claim:
    return Claim(
        type=dto.type,
        value=dto.value,
        value_type=dto.value_type,
        display_text=dto.display_text,
        properties=dto.properties,
        description=dto.description,
    )


def update_dto_to_claim(dto: ClaimUpdateDto) -> Claim:
    return Claim(
        id=dto.id,
        type=dto.type,
        value=dto.value,
        value_type=dto.value_type,
        display_text=dto.display_text,
        properties=dto.properties,
        description=dto.description,
    )


# ----------------------
# Entity -> outgoing tool DTO
# ----------------------

def claim_to_outgoing_dto(claim: Claim) -> ClaimOutgoingDto:
    return ClaimOutgoingDto(
        id=claim.id,
        type=claim.type,
        value=claim.value,
        value_type=claim.value_type,
        display_text=claim.display_text,
        properties=claim.properties,
        description=claim.description,
    )


# ----------------------
# Remote API DTO <-> entity
# ----------------------

def claim_to_dto(claim: Claim) -> ClaimDto:
    return ClaimDto(
        id=claim.id,
        type=claim.type,
        value=claim.value,
        value_type=claim.value_type,
        display_text=claim.display_text,
        properties=claim.properties,
        description=claim.description,
    )


def dto_to_claim(dto: ClaimDto) -> Claim:
    return Claim(
        id=dto.id,
        type=dto.type,
        value=dto.value,
        value_type=dto.value_type,
        display_text=dto.display_text,
        properties=dto.properties,
        description=dto.description,
    )

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from typing import Optional

from app.api.deps import get_identity_service
from app.api.v1.auth.schemas import IdentityResponse, UnregisteredResponse
from app.core.exceptions import ValidationError
from app.domain.identity.service import IdentityService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.get(
    "",
    response_model=IdentityResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": UnregisteredResponse}},
)
async def resolve_identity(
    address: Optional[str] = Query(None),
    identity_service: IdentityService = Depends(get_identity_service)
):
    """Resolve a wallet address to its registered role"""
    if not address:
        raise ValidationError("Wallet address is required", details={"field": "address"})

    identity = await identity_service.resolve(address)
    if not identity.is_registered:
        body = UnregisteredResponse(error="Wallet not registered. Please register first.")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=body.model_dump(by_alias=True)
        )

    return identity

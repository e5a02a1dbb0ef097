"""
Signature verification and history API routes.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from notaire.di import Container
from notaire.presentation.api.dependencies import (
    get_container,
    get_current_identity,
)
from notaire.presentation.schemas import (
    ClearHistoryResponse,
    SignatureHistoryResponse,
    SignatureRecordResponse,
    VerifySignatureRequest,
    VerifySignatureResponse,
)

router = APIRouter(tags=["signatures"])


@router.post(
    "/verify-signature",
    response_model=VerifySignatureResponse,
    response_model_exclude_unset=True,
)
async def verify_signature(
    request: VerifySignatureRequest,
    identity: Optional[str] = Depends(get_current_identity),
    container: Container = Depends(get_container),
):
    """
    Recover the signer of an EIP-191 signed message.

    A signature that does not recover is reported with isValid=false
    and status 200; only malformed bodies are rejected with 400.
    """
    use_case = container.get_verify_signature_use_case()
    result = await use_case.execute(
        message=request.message,
        signature=request.signature,
        user_id=identity,
    )
    return VerifySignatureResponse.from_result(result)


@router.get("/signatures", response_model=SignatureHistoryResponse)
async def get_signature_history(
    limit: Optional[int] = Query(None, ge=1, le=1000),
    identity: Optional[str] = Depends(get_current_identity),
    container: Container = Depends(get_container),
):
    """Verification history of the authenticated caller, newest first."""
    use_case = container.get_signature_history_use_case()
    records = await use_case.execute(identity, limit=limit)
    items = [SignatureRecordResponse.from_entity(r) for r in records]
    return SignatureHistoryResponse(items=items, count=len(items))


@router.delete("/signatures", response_model=ClearHistoryResponse)
async def clear_signature_history(
    identity: Optional[str] = Depends(get_current_identity),
    container: Container = Depends(get_container),
):
    """Remove the verification history of the authenticated caller."""
    use_case = container.get_clear_signature_history_use_case()
    removed = await use_case.execute(identity)
    return ClearHistoryResponse(removed=removed)

from fastapi import APIRouter, Depends

from app.api.deps import get_faucet_service
from app.schemas.faucet import (
    ErrorResponse,
    FaucetRequest,
    FaucetResponse,
    RateLimitedResponse,
    TransactionFailedResponse,
)
from app.services.faucet_service import FaucetService

router = APIRouter(tags=["Faucet"])


@router.post(
    "/faucet",
    response_model=FaucetResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or malformed address"},
        429: {"model": RateLimitedResponse, "description": "Address already served in the last 24 hours"},
        500: {"model": TransactionFailedResponse, "description": "Wallet CLI failed"},
    },
)
async def request_tokens(
    payload: FaucetRequest,
    service: FaucetService = Depends(get_faucet_service),
) -> FaucetResponse:
    """Send testnet tokens to the given address.

    Domain errors (invalid address, rate limit, transaction failure) propagate
    to the global exception handlers, which shape the error body.

    Args:
        payload: Request body with the recipient address.
        service: Faucet service bound to the running app.

    Returns:
        FaucetResponse: Transaction hash, amount and confirmation message.
    """
    result = await service.dispense(payload.address)
    return FaucetResponse(
        success=True,
        txhash=result.txhash,
        amount=result.amount,
        message=result.message,
    )

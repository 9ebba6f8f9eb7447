from fastapi import APIRouter, HTTPException, Request

from starknet_checker.api.models import ClassificationResponse, NormalizeResponse
from starknet_checker.core.address import normalize_address
from starknet_checker.core.checker import AddressChecker

router = APIRouter(tags=["Address Checker"])


def get_checker(request: Request) -> AddressChecker:
    """Dependency to retrieve the initialized AddressChecker from app state."""
    checker = getattr(request.app.state, "checker", None)
    if not checker:
        raise HTTPException(status_code=500, detail="address checker not initialized")
    return checker


@router.get("/address/{address}", response_model=ClassificationResponse)
def check(request: Request, address: str):
    """
    Classify a Starknet address as smart wallet or smart contract.

    Invalid and undeployed addresses are answered with 200 and a negative result.
    Node failures after all retries return 502.
    """
    checker = get_checker(request)
    result = checker.check(address)
    valid, canonical = normalize_address(address)

    return ClassificationResponse(
        address=address,
        canonical_address=canonical if valid else None,
        is_valid_address=result.is_valid_address,
        is_smart_wallet=result.is_smart_wallet,
        is_smart_contract=result.is_smart_contract,
        message=result.message,
    )


@router.get("/address/{address}/normalize", response_model=NormalizeResponse)
async def normalize(address: str):
    """Check the address format only. Never touches the node."""
    valid, canonical = normalize_address(address)
    return NormalizeResponse(valid=valid, address=canonical)

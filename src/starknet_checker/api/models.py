from pydantic import BaseModel, Field


class ClassificationResponse(BaseModel):
    """Response model for an address check."""

    address: str = Field(..., description="Address as supplied by the caller")
    canonical_address: str | None = Field(
        None,
        description="Canonical 66-character form. Omitted if the format is invalid.",
    )
    is_valid_address: bool = Field(..., description="Address is well-formed and has a deployed contract")
    is_smart_wallet: bool = Field(..., description="Deployed class exposes __execute__ and __validate__")
    is_smart_contract: bool = Field(..., description="Deployed class is not an account")
    message: str = Field(..., description="Human-readable outcome")


class NormalizeResponse(BaseModel):
    """Response model for a format-only address check."""

    valid: bool = Field(..., description="Address matches the Starknet address format")
    address: str = Field(..., description="Canonical address, or the input unchanged if invalid")

"""Result DTOs returned by the hasher manager."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class HashSelectionDTO(BaseModel):
    """DTO for a hash produced by a provider picked through a selection strategy."""

    provider_id: str = Field(..., description="Identifier of the provider that was chosen")
    encoded: str = Field(..., description="Self-describing encoded hash")

    model_config = ConfigDict(frozen=True)


class UpgradeResultDTO(BaseModel):
    """
    DTO for the verify-then-rehash workflow.

    ``new_encoded`` is only set when ``upgraded`` is True; callers should
    then replace the stored hash with it.
    """

    verified: bool = Field(..., description="Whether the password matched")
    upgraded: bool = Field(default=False, description="Whether a fresh hash was produced")
    new_encoded: Optional[str] = Field(default=None, description="Replacement encoded hash")

    model_config = ConfigDict(frozen=True)

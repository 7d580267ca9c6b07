"""Agent-side request and result types."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Flags carried in an agent sign request; the service picks the RSA hash from them.
SSH_AGENT_RSA_SHA2_256 = 2
SSH_AGENT_RSA_SHA2_512 = 4

UINT32_MAX = 0xFFFFFFFF

SignatureBlob = bytes


class SignRequest(BaseModel):
    """Request to sign ``data`` with the key whose public blob is ``pubkey_blob``."""

    model_config = ConfigDict(frozen=True)

    pubkey_blob: bytes
    data: bytes
    flags: int = Field(default=0, ge=0, le=UINT32_MAX)

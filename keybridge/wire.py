"""JSON payloads exchanged with the remote signing service.

Byte fields travel as standard padded base64. Decoding a byte field goes
through :func:`keybridge.codec.decode`, so an invalid base64 value surfaces
as a field error inside the payload's :class:`pydantic.ValidationError`.
"""

from __future__ import annotations

from typing import Annotated, Any, Tuple

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator

from . import codec
from .contracts import SignatureBlob


def _validate_base64(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if not isinstance(value, str):
        raise ValueError(f"expected base64 string, got {type(value).__name__}")
    return codec.decode(value)


WireBytes = Annotated[
    bytes,
    PlainValidator(_validate_base64),
    PlainSerializer(codec.encode, return_type=str),
]


class IdentityList(BaseModel):
    """Identities the service is willing to sign with, in service order."""

    model_config = ConfigDict(frozen=True)

    identities: Tuple[str, ...]


class WireSignRequest(BaseModel):
    """Outbound sign request body."""

    model_config = ConfigDict(frozen=True)

    public_key: WireBytes = Field(alias="pubkey")
    data: WireBytes
    flags: int

    def to_json(self) -> str:
        """Serialize to the compact JSON body sent to the service."""
        return self.model_dump_json(by_alias=True)


class WireSignature(BaseModel):
    """Sign response body."""

    model_config = ConfigDict(frozen=True)

    signature: WireBytes = Field(alias="sig")

    def to_blob(self) -> SignatureBlob:
        return self.signature


class ServiceErrorBody(BaseModel):
    """Body returned by the service alongside an error status."""

    model_config = ConfigDict(frozen=True)

    message: str

"""Mapping from agent-side sign requests to the wire request."""

from __future__ import annotations

from .contracts import SignRequest
from .wire import WireSignRequest


def to_wire_request(request: SignRequest) -> WireSignRequest:
    """Hand the buffers of ``request`` over to a :class:`WireSignRequest`.

    No validation happens here; ``request`` should not be reused afterwards.
    """
    return WireSignRequest.model_construct(
        pubkey=request.pubkey_blob,
        data=request.data,
        flags=request.flags,
    )

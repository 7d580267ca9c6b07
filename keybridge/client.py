"""Signing service facade over an injected ``httpx.AsyncClient``."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from .adapter import to_wire_request
from .config import ServiceConfig
from .contracts import SignatureBlob, SignRequest
from .pipeline import (
    LIST_IDENTITIES_FAILURES,
    SIGN_FAILURES,
    FailureKinds,
    parse_identity_list,
    parse_signature,
)
from .wire import IdentityList

logger = logging.getLogger(__name__)


def build_http_client(config: ServiceConfig) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` pointed at the configured service."""
    return httpx.AsyncClient(base_url=config.base_url, timeout=config.timeout)


class SigningServiceClient:
    """Answers the agent's two operations using the remote signing service.

    The HTTP client is owned by the caller, including any authentication it
    carries. Every call sends one request and decodes one response; nothing
    is retried or cached.
    """

    def __init__(
        self, http: httpx.AsyncClient, config: Optional[ServiceConfig] = None
    ) -> None:
        self.http = http
        self.config = config or ServiceConfig()

    async def list_identities(self) -> IdentityList:
        request = self.http.build_request("GET", self.config.identities_path)
        response = await self._send(request, LIST_IDENTITIES_FAILURES)
        identities = await parse_identity_list(response)
        logger.info(f"Service offered {len(identities.identities)} identities")
        return identities

    async def sign(self, request: SignRequest) -> SignatureBlob:
        wire_request = to_wire_request(request)
        http_request = self.http.build_request(
            "POST",
            self.config.sign_path,
            content=wire_request.to_json(),
            headers={"Content-Type": "application/json"},
        )
        response = await self._send(http_request, SIGN_FAILURES)
        signature = await parse_signature(response)
        logger.info(f"Received {len(signature.signature)}-byte signature")
        return signature.to_blob()

    async def _send(
        self, request: httpx.Request, failures: FailureKinds
    ) -> httpx.Response:
        logger.debug(f"Dispatching {request.method} {request.url}")
        try:
            return await self.http.send(request, stream=True)
        except httpx.RequestError as exc:
            logger.warning(f"Dispatch of {request.method} {request.url} failed: {exc}")
            raise failures.dispatch(exc) from exc

"""Buffering and decoding of signing service responses.

Each parser awaits the response body exactly once, then decodes it into the
expected wire model. Failures are raised as the operation's error family:
a transport or content-decoding fault while buffering becomes a
``DispatchFailure`` and nothing is decoded; an undecodable body becomes a
``ParseFailure``. An error status with a ``{"message": ...}`` body becomes
the operation's rejection.
"""

from __future__ import annotations

import logging
from typing import Callable, NamedTuple, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .errors import (
    DispatchFailure,
    ListIdentitiesDispatchFailure,
    ListIdentitiesParseFailure,
    ListIdentitiesRejected,
    ParseFailure,
    ServiceRejected,
    SignDispatchFailure,
    SignParseFailure,
    rejected_sign_error,
)
from .wire import IdentityList, ServiceErrorBody, WireSignature

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class FailureKinds(NamedTuple):
    """Concrete error classes raised for one operation."""

    dispatch: Type[DispatchFailure]
    parse: Type[ParseFailure]
    rejected: Callable[[int, str], ServiceRejected]


LIST_IDENTITIES_FAILURES = FailureKinds(
    dispatch=ListIdentitiesDispatchFailure,
    parse=ListIdentitiesParseFailure,
    rejected=ListIdentitiesRejected,
)

SIGN_FAILURES = FailureKinds(
    dispatch=SignDispatchFailure,
    parse=SignParseFailure,
    rejected=rejected_sign_error,
)


async def parse_identity_list(response: httpx.Response) -> IdentityList:
    """Buffer ``response`` and decode a list-identities body.

    Raises:
        ListIdentitiesError: One of its dispatch, parse or rejected variants.
    """
    return await _parse(response, IdentityList, LIST_IDENTITIES_FAILURES)


async def parse_signature(response: httpx.Response) -> WireSignature:
    """Buffer ``response`` and decode a sign body.

    Raises:
        SignError: One of its dispatch, parse or rejected variants.
    """
    return await _parse(response, WireSignature, SIGN_FAILURES)


async def _parse(
    response: httpx.Response, model: Type[ModelT], failures: FailureKinds
) -> ModelT:
    try:
        body = await response.aread()
    except (httpx.RequestError, httpx.StreamError) as exc:
        logger.debug(f"Transport failed while buffering {model.__name__}: {exc!r}")
        raise failures.dispatch(exc) from exc
    finally:
        # Releases a partially received body on failure or cancellation.
        await response.aclose()

    logger.debug(
        f"Buffered {len(body)} bytes for {model.__name__} (status {response.status_code})"
    )
    if response.status_code >= 400:
        _raise_if_rejected(response.status_code, body, failures)
    return _decode(body, model, failures)


def _raise_if_rejected(status_code: int, body: bytes, failures: FailureKinds) -> None:
    try:
        error = ServiceErrorBody.model_validate_json(body)
    except ValidationError:
        return
    logger.debug(f"Service rejected request ({status_code}): {error.message}")
    raise failures.rejected(status_code, error.message)


def _decode(body: bytes, model: Type[ModelT], failures: FailureKinds) -> ModelT:
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        logger.debug(f"Failed to decode {model.__name__}: {exc.error_count()} error(s)")
        raise failures.parse(f"failed to decode {model.__name__}: {exc}") from exc

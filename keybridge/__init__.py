"""Keybridge: adapts key agent requests to a remote HTTP signing service."""

from .adapter import to_wire_request
from .client import SigningServiceClient, build_http_client
from .contracts import SSH_AGENT_RSA_SHA2_256, SSH_AGENT_RSA_SHA2_512, SignRequest
from .errors import (
    DecodeError,
    DispatchFailure,
    KeybridgeError,
    ListIdentitiesError,
    ParseFailure,
    ServiceRejected,
    SignError,
    UnknownKey,
)
from .pipeline import parse_identity_list, parse_signature
from .wire import IdentityList, WireSignature, WireSignRequest

__version__ = "0.1.0"
__all__ = [
    "SSH_AGENT_RSA_SHA2_256",
    "SSH_AGENT_RSA_SHA2_512",
    "DecodeError",
    "DispatchFailure",
    "IdentityList",
    "KeybridgeError",
    "ListIdentitiesError",
    "ParseFailure",
    "ServiceRejected",
    "SignError",
    "SignRequest",
    "SigningServiceClient",
    "UnknownKey",
    "WireSignRequest",
    "WireSignature",
    "build_http_client",
    "parse_identity_list",
    "parse_signature",
    "to_wire_request",
]

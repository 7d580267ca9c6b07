"""Tests for the JSON payload models and the request adapter."""

import json

import pytest
from pydantic import ValidationError

from keybridge.adapter import to_wire_request
from keybridge.contracts import SSH_AGENT_RSA_SHA2_512, SignRequest
from keybridge.wire import IdentityList, WireSignature, WireSignRequest


def test_sign_request_encodes_to_wire_body():
    request = SignRequest(pubkey_blob=bytes([0x01, 0x02]), data=bytes([0xAA]), flags=4)

    wire = to_wire_request(request)

    assert wire.to_json() == '{"pubkey":"AQI=","data":"qg==","flags":4}'


def test_adapter_hands_over_fields():
    request = SignRequest(
        pubkey_blob=b"ssh-ed25519 blob", data=b"challenge", flags=SSH_AGENT_RSA_SHA2_512
    )

    wire = to_wire_request(request)

    assert isinstance(wire, WireSignRequest)
    assert wire.public_key is request.pubkey_blob
    assert wire.data is request.data
    assert wire.flags == SSH_AGENT_RSA_SHA2_512


def test_flags_travel_as_plain_integer():
    request = SignRequest(pubkey_blob=b"k", data=b"d", flags=0xFFFFFFFF)

    body = json.loads(to_wire_request(request).to_json())

    assert body["flags"] == 4294967295


@pytest.mark.parametrize("flags", [-1, 0x100000000])
def test_domain_request_rejects_out_of_range_flags(flags):
    with pytest.raises(ValidationError):
        SignRequest(pubkey_blob=b"k", data=b"d", flags=flags)


def test_signature_decodes_base64_field():
    signature = WireSignature.model_validate_json('{"sig":"AQI="}')

    assert signature.signature == b"\x01\x02"
    assert signature.to_blob() == b"\x01\x02"


def test_signature_with_invalid_base64_is_a_validation_error():
    with pytest.raises(ValidationError) as exc_info:
        WireSignature.model_validate_json('{"sig":"AQ!="}')

    assert "invalid base64" in str(exc_info.value)


def test_signature_rejects_non_string_field():
    with pytest.raises(ValidationError):
        WireSignature.model_validate_json('{"sig": 12}')


def test_identity_list_preserves_order_and_is_frozen():
    identities = IdentityList.model_validate_json('{"identities": ["b", "a", "c"]}')

    assert identities.identities == ("b", "a", "c")
    with pytest.raises(ValidationError):
        identities.identities = ("x",)


def test_identity_list_rejects_non_string_entries():
    with pytest.raises(ValidationError):
        IdentityList.model_validate_json('{"identities": ["a", 1]}')

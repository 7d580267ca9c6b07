"""Byte sequence <-> base64 text conversion used by the wire payloads."""

from __future__ import annotations

import base64
import binascii

from .errors import DecodeError


def encode(data: bytes) -> str:
    """Encode ``data`` as standard base64 with padding."""
    return base64.b64encode(data).decode("ascii")


def decode(text: str) -> bytes:
    """Decode standard, padded base64 ``text``.

    Raises:
        DecodeError: If ``text`` contains characters outside the standard
            alphabet, has missing or misplaced padding, or ends in a
            truncated group.
    """
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"invalid base64: {exc}") from exc

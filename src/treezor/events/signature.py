"""HMAC-SHA256 signing of webhook payloads.

The upstream signs the exact bytes of ``object_payload`` with the shared
webhook secret and sends the digest base64-encoded.
"""

import base64
import binascii
import hashlib
import hmac


def _key(secret: str | bytes) -> bytes:
    return secret.encode("utf-8") if isinstance(secret, str) else secret


def sign_payload(payload: bytes, secret: str | bytes) -> str:
    """Compute the base64 HMAC-SHA256 signature of a raw payload."""
    digest = hmac.new(_key(secret), payload, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def decode_signature(signature: str) -> bytes:
    """Base64-decode a signature. Raises ValueError when it is not valid base64."""
    try:
        return base64.b64decode(signature, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"signature is not valid base64: {exc}") from exc


def verify_signature(payload: bytes, signature: str, secret: str | bytes) -> bool:
    """Constant-time check of ``signature`` against the payload's HMAC."""
    try:
        expected = decode_signature(signature)
    except ValueError:
        return False
    actual = hmac.new(_key(secret), payload, hashlib.sha256).digest()
    return hmac.compare_digest(actual, expected)

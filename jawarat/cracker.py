"""Token decoding and HS256 secret verification."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
import re
import threading
import time
from dataclasses import dataclass
from typing import Any

COMMON_SECRETS: tuple[str, ...] = (
    "secret", "password", "123456", "admin", "root", "test",
    "key", "jwt", "token", "auth", "login", "user", "pass",
    "default", "demo", "example", "sample", "weak", "simple",
    "qwerty", "abc123", "password123", "secret123", "admin123", "1234", "123", "111", "12345",
    "letmein", "welcome", "iloveyou", "trustno1", "monkey", "dragon", "sunshine", "football",
    "baseball", "qwertyuiop", "12345678", "123456789", "1234567", "1234567890", "password1",
    "123123", "1q2w3e4r", "1qaz2wsx", "qazwsx", "zxcvbnm", "asdfghjkl", "qwerty123", "qwerty!@#",
)

_B64URL = re.compile(r"[A-Za-z0-9_-]*")


class InvalidTokenError(ValueError):
    """Raised when a token cannot be split or decoded."""


def b64url_decode(text: str) -> bytes:
    """Decode unpadded base64url text."""
    if not _B64URL.fullmatch(text):
        raise InvalidTokenError("invalid base64url data")
    try:
        return base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))
    except (binascii.Error, ValueError) as exc:
        raise InvalidTokenError("invalid base64url data") from exc


def b64url_encode(data: bytes) -> str:
    """Encode bytes as base64url without padding."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"unsupported JSON constant {name}")


def _parse_object(part: str) -> dict[str, Any]:
    raw = b64url_decode(part)
    try:
        value = json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError) as exc:
        raise InvalidTokenError("invalid json") from exc
    if not isinstance(value, dict):
        raise InvalidTokenError("invalid json")
    return value


def _split_token(token: str, message: str) -> tuple[str, str, str]:
    first = token.find(".")
    if first < 0:
        raise InvalidTokenError(message)
    second = token.find(".", first + 1)
    if second < 0:
        raise InvalidTokenError(message)
    return token[:first], token[first + 1:second], token[second + 1:]


@dataclass(frozen=True)
class DecodedToken:
    """The three parts of a token, raw and decoded."""

    header_part: str
    payload_part: str
    signature_part: str
    header: dict[str, Any]
    payload: dict[str, Any]
    signature: bytes

    @property
    def signing_input(self) -> bytes:
        return f"{self.header_part}.{self.payload_part}".encode("ascii")


def decode_token(token: str) -> DecodedToken:
    """Split and decode a token; raise InvalidTokenError if it is malformed."""
    header_part, payload_part, signature_part = _split_token(token, "invalid token supplied")
    return DecodedToken(
        header_part=header_part,
        payload_part=payload_part,
        signature_part=signature_part,
        header=_parse_object(header_part),
        payload=_parse_object(payload_part),
        signature=b64url_decode(signature_part),
    )


def _timestamp(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _claims_valid(payload: dict[str, Any], now: float) -> bool:
    checks = (
        ("exp", lambda stamp: now <= stamp),
        ("nbf", lambda stamp: now >= stamp),
        ("iat", lambda stamp: now >= stamp),
    )
    for name, accept in checks:
        if name not in payload:
            continue
        stamp = _timestamp(payload[name])
        if stamp is None or not accept(stamp):
            return False
    return True


def verify_hs256(decoded: DecodedToken, secret: str | bytes) -> bool:
    """Return True if the token is a valid HS256 token signed with ``secret``."""
    if decoded.header.get("alg") != "HS256":
        return False
    key = secret.encode("utf-8") if isinstance(secret, str) else secret
    expected = hmac.new(key, decoded.signing_input, hashlib.sha256).digest()
    if not hmac.compare_digest(expected, decoded.signature):
        return False
    return _claims_valid(decoded.payload, int(time.time()))


class JWTCracker:
    """Holds a target token and records the secret once one verifies it."""

    def __init__(self, token: str) -> None:
        self.token = token
        self.header_part, self.payload_part, self.signature_part = _split_token(
            token, "Invalid JWT format"
        )
        try:
            self._decoded: DecodedToken | None = decode_token(token)
        except InvalidTokenError:
            self._decoded = None
        self.common_secrets = COMMON_SECRETS
        self.output_lock = threading.Lock()
        self.found_secret = ""
        self._found = threading.Event()

    @property
    def found(self) -> bool:
        return self._found.is_set()

    def test_secret(self, secret: str | bytes) -> bool:
        """Check one candidate; always False once a secret has been found."""
        if self.found or self._decoded is None:
            return False
        return verify_hs256(self._decoded, secret)

    def mark_found(self, secret: str) -> None:
        self.found_secret = secret
        self._found.set()
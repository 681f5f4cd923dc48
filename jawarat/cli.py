"""Command-line entry point for the token secret auditor."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .attacks import check_alg_none_vulnerability, check_common_secrets_attack
from .bruteforce import run_bruteforce_attack
from .cracker import JWTCracker
from .dictionary import run_dictionary_attack
from .info import print_jwt_information

_VERSION = "1.0"


class _UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command."""
    parser = _Parser(prog="jawarat")
    parser.add_argument("jwt", help="Target JWT token to crack")
    parser.add_argument("-v", "--version", action="version", version=_VERSION)
    parser.add_argument("-w", "--wordlist", help="Path to wordlist file for dictionary attack")
    parser.add_argument(
        "-b", "--bruteforce", default="", help="Character set for brute force attack"
    )
    parser.add_argument(
        "--min-len", type=int, default=1, help="Minimum length for brute force"
    )
    parser.add_argument(
        "--max-len", type=int, default=6, help="Maximum length for brute force"
    )
    parser.add_argument(
        "-t", "--threads", type=int, default=4, help="Number of threads for brute force"
    )
    parser.add_argument(
        "--alg-none", action="store_true", help="Check for alg:none vulnerability"
    )
    parser.add_argument("--info", action="store_true", help="Display JWT information")
    return parser


def _report_found(cracker: JWTCracker) -> int:
    print(f"\n[+] Use this secret to forge new JWTs: '{cracker.found_secret}'")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the requested checks and attacks; return the exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except _UsageError as exc:
        print(exc, file=sys.stderr)
        sys.stderr.write(parser.format_help())
        return 1

    out = sys.stdout
    out.write("JWT Secret Key Auditor & Cracker v1.0\n")
    out.write("=====================================\n")

    try:
        cracker = JWTCracker(args.jwt)

        if args.info:
            print_jwt_information(cracker.token, out)
        if args.alg_none:
            check_alg_none_vulnerability(cracker.token, out)

        if check_common_secrets_attack(cracker, out):
            return _report_found(cracker)

        if args.wordlist is not None and run_dictionary_attack(cracker, args.wordlist, out):
            return _report_found(cracker)

        if args.bruteforce and run_bruteforce_attack(
            cracker, args.bruteforce, args.min_len, args.max_len, args.threads, out
        ):
            return _report_found(cracker)

        if not cracker.found:
            nothing_requested = (
                args.wordlist is None
                and not args.bruteforce
                and not args.alg_none
                and not args.info
            )
            if nothing_requested:
                out.write("\n[!] No attack method specified, and no info/alg-none check requested.\n")
                out.write("[!] Use --wordlist, --bruteforce, --alg-none, or --info.\n")
                out.write("[!] Example: ./jawarat <token> -w rockyou.txt\n")
                out.write(
                    '[!] Example: ./jawarat <token> -b "abcdefghijklmnopqrstuvwxyz" --max-len 8\n'
                )
            else:
                out.write("\n[-] All specified attacks completed. Secret not found.\n")
    except ValueError as exc:
        print(f"Initialization Error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        print(f"Runtime Error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
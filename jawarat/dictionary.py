"""Dictionary attack: try each word of a wordlist as the signing secret."""

from __future__ import annotations

import sys
import time
from collections.abc import Iterable, Iterator
from typing import TextIO

from .cracker import JWTCracker

_TRAILING = " \t\r\n"


def iter_wordlist(lines: Iterable[str]) -> Iterator[str]:
    """Yield words with trailing whitespace removed, skipping blank lines."""
    for line in lines:
        word = line.rstrip(_TRAILING)
        if word:
            yield word


def _display(word: str) -> str:
    return word.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def run_dictionary_attack(
    cracker: JWTCracker, wordlist_path: str, out: TextIO | None = None
) -> bool:
    """Try every word in the wordlist file; return True if the secret is found."""
    out = sys.stdout if out is None else out
    out.write(f"[*] Starting dictionary attack with: {wordlist_path}\n")

    try:
        handle = open(wordlist_path, encoding="utf-8", errors="surrogateescape", newline="")
    except OSError:
        print(f"[-] Could not open wordlist file: {wordlist_path}", file=sys.stderr)
        return False

    attempts = 0
    started = time.perf_counter()
    with handle:
        for word in iter_wordlist(handle):
            if cracker.found:
                break
            if cracker.test_secret(word.encode("utf-8", "surrogateescape")):
                cracker.mark_found(word)
                elapsed_ms = int((time.perf_counter() - started) * 1000)
                with cracker.output_lock:
                    out.write(f"\n[+] SECRET FOUND (dictionary): '{_display(word)}'\n")
                    out.write(f"[+] Time taken: {elapsed_ms} ms\n")
                    out.write(f"[+] Attempts: {attempts + 1}\n")
                return True
            attempts += 1
            if attempts % 1000 == 0:
                with cracker.output_lock:
                    out.write(f"\r[*] Tested {attempts} passwords from dictionary...")
                    out.flush()

    out.write("\n[-] Dictionary attack completed. Secret not found.\n")
    return False
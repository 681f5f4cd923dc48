"""Multi-threaded brute force over every string of a character set."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Iterator
from typing import TextIO

from .cracker import JWTCracker

_MAX_CANDIDATES = 2**63 - 1
_PROGRESS_EVERY = 50000


def candidate_count(charset_size: int, length: int) -> int | None:
    """Number of strings of ``length`` over the charset, or None if impractical."""
    if length < 0:
        raise ValueError("length must not be negative")
    total = charset_size**length
    if total > _MAX_CANDIDATES or (total == 0 and length > 0):
        return None
    return total


def thread_range(total: int, thread_id: int, total_threads: int) -> tuple[int, int]:
    """Return the half-open index range of candidates handled by one thread."""
    if total_threads < 1:
        raise ValueError("total_threads must be positive")
    per_thread, remainder = divmod(total, total_threads)
    start = thread_id * per_thread + min(thread_id, remainder)
    end = start + per_thread + (1 if thread_id < remainder else 0)
    return start, end


def iter_combinations(charset: str, length: int, start: int, end: int) -> Iterator[str]:
    """Yield candidates ``start`` to ``end - 1`` in base-N order over the charset."""
    base = len(charset)
    if base == 0 and length > 0:
        raise ValueError("charset must not be empty")
    for number in range(start, end):
        digits = []
        for _ in range(length):
            number, digit = divmod(number, base)
            digits.append(charset[digit])
        yield "".join(reversed(digits))


def _search_range(
    cracker: JWTCracker,
    charset: str,
    length: int,
    start: int,
    end: int,
    thread_id: int,
    out: TextIO,
) -> None:
    candidates = iter_combinations(charset, length, start, end)
    for tested, candidate in enumerate(candidates, start=start + 1):
        if cracker.found:
            return
        if cracker.test_secret(candidate):
            cracker.mark_found(candidate)
            with cracker.output_lock:
                out.write(f"\n[+] SECRET FOUND (bruteforce): '{candidate}'\n")
                out.write(f"[+] Thread {thread_id} found the secret!\n")
            return
        if tested % _PROGRESS_EVERY == 0 and thread_id == 0:
            with cracker.output_lock:
                out.write(
                    f"\r[*] Bruteforce (len {length}, thread {thread_id}) tested "
                    f"{tested - start} combinations..."
                )
                out.flush()


def _worker(
    cracker: JWTCracker,
    charset: str,
    min_len: int,
    max_len: int,
    thread_id: int,
    total_threads: int,
    out: TextIO,
) -> None:
    for length in range(min_len, max_len + 1):
        if cracker.found:
            return
        total = candidate_count(len(charset), length)
        if total is None:
            if thread_id == 0:
                with cracker.output_lock:
                    print(
                        f"\nWarning: Too many combinations for length {length}. "
                        "Skipping or may take extremely long.",
                        file=sys.stderr,
                    )
            continue
        start, end = thread_range(total, thread_id, total_threads)
        if thread_id == 0 and length == min_len:
            with cracker.output_lock:
                out.write(f"\r[*] Starting bruteforce for length {length} (Total: {total})\n")
        _search_range(cracker, charset, length, start, end, thread_id, out)
        if cracker.found:
            return


def run_bruteforce_attack(
    cracker: JWTCracker,
    charset: str,
    min_len: int,
    max_len: int,
    threads: int,
    out: TextIO | None = None,
) -> bool:
    """Try every string of length min_len..max_len; return True if found."""
    out = sys.stdout if out is None else out
    if not charset:
        print("[-] Character set for bruteforce cannot be empty.", file=sys.stderr)
        return False
    if min_len < 0 or max_len < 0:
        raise ValueError("lengths for bruteforce must not be negative")

    out.write("[*] Starting brute force attack...\n")
    out.write(f"[*] Character set: {charset}\n")
    out.write(f"[*] Length range: {min_len}-{max_len}\n")
    out.write(f"[*] Threads: {threads}\n")

    started = time.perf_counter()
    workers = [
        threading.Thread(
            target=_worker,
            args=(cracker, charset, min_len, max_len, thread_id, threads, out),
            daemon=True,
        )
        for thread_id in range(threads)
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    seconds = int(time.perf_counter() - started)

    with cracker.output_lock:
        if cracker.found:
            out.write("\n[+] Brute force attack finished. Secret found.\n")
            out.write(f"[+] Time taken: {seconds} seconds\n")
            return True
        out.write("\n[-] Brute force attack completed. Secret not found.\n")
        out.write(f"[*] Time taken: {seconds} seconds\n")
        return False
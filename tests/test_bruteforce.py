import hashlib
import hmac
import io
import json

import pytest

from jawarat.bruteforce import (
    candidate_count,
    iter_combinations,
    run_bruteforce_attack,
    thread_range,
)
from jawarat.cracker import JWTCracker, b64url_encode


def make_token(phrase):
    header = b64url_encode(json.dumps({"alg": "HS256", "typ": "JWT"}).encode())
    body = b64url_encode(json.dumps({"sub": "1"}).encode())
    signing_input = f"{header}.{body}".encode()
    sig = hmac.new(phrase.encode(), signing_input, hashlib.sha256).digest()
    return f"{header}.{body}.{b64url_encode(sig)}"


def test_candidate_count_small_values():
    assert candidate_count(10, 3) == 1000
    assert candidate_count(5, 0) == 1
    assert candidate_count(2, 62) == 2**62


def test_candidate_count_overflow_and_empty():
    assert candidate_count(2, 63) is None
    assert candidate_count(95, 10) is None
    assert candidate_count(0, 1) is None


def test_candidate_count_negative_length():
    with pytest.raises(ValueError):
        candidate_count(3, -1)


@pytest.mark.parametrize("total,threads", [(10, 3), (9, 4), (2, 5), (0, 2), (27, 1)])
def test_thread_ranges_partition_total(total, threads):
    ranges = [thread_range(total, tid, threads) for tid in range(threads)]
    assert ranges[0][0] == 0
    assert ranges[-1][1] == total
    for (_, end), (start, _) in zip(ranges, ranges[1:]):
        assert end == start
    sizes = [end - start for start, end in ranges]
    assert max(sizes) - min(sizes) <= 1


def test_thread_range_worked_example():
    assert thread_range(10, 0, 3) == (0, 4)


def test_thread_range_rejects_zero_threads():
    with pytest.raises(ValueError):
        thread_range(10, 0, 0)


def test_iter_combinations_full_order():
    assert list(iter_combinations("ab", 2, 0, 4)) == ["aa", "ab", "ba", "bb"]


def test_iter_combinations_slice_matches_full_listing():
    full = list(iter_combinations("abc", 3, 0, 27))
    assert len(full) == 27
    assert len(set(full)) == 27
    assert list(iter_combinations("abc", 3, 5, 9)) == full[5:9]


def test_iter_combinations_empty_charset():
    with pytest.raises(ValueError):
        list(iter_combinations("", 2, 0, 1))


@pytest.mark.parametrize("threads", [1, 2, 3])
def test_bruteforce_finds_candidate(threads):
    out = io.StringIO()
    cracker = JWTCracker(make_token("cab"))
    assert run_bruteforce_attack(cracker, "abc", 1, 3, threads, out) is True
    assert cracker.found_secret == "cab"
    text = out.getvalue()
    assert "[+] SECRET FOUND (bruteforce): 'cab'" in text
    assert "[+] Brute force attack finished. Secret found." in text
    assert "[*] Starting bruteforce for length 1 (Total: 3)" in text


def test_bruteforce_not_found():
    out = io.StringIO()
    cracker = JWTCracker(make_token("cab"))
    assert run_bruteforce_attack(cracker, "ab", 1, 2, 2, out) is False
    assert not cracker.found
    assert "[-] Brute force attack completed. Secret not found." in out.getvalue()


def test_bruteforce_empty_charset(capsys):
    cracker = JWTCracker(make_token("cab"))
    assert run_bruteforce_attack(cracker, "", 1, 3, 2, io.StringIO()) is False
    assert "Character set for bruteforce cannot be empty." in capsys.readouterr().err


def test_bruteforce_without_threads_finds_nothing():
    cracker = JWTCracker(make_token("a"))
    assert run_bruteforce_attack(cracker, "a", 1, 1, 0, io.StringIO()) is False
    assert not cracker.found


def test_bruteforce_negative_length_rejected():
    cracker = JWTCracker(make_token("a"))
    with pytest.raises(ValueError):
        run_bruteforce_attack(cracker, "a", -1, 1, 1, io.StringIO())
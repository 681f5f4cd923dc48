# jawarat

A command-line auditor for JSON Web Tokens signed with HS256. It looks for
weak signing secrets. It can also show what a token contains and produce an
`alg: none` variant so you can test whether a server accepts unsigned tokens.

Use it only on tokens and systems you are authorised to test.

The package has no dependencies outside the Python standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Usage

```
jawarat <token> [options]
```

The built-in list of common weak secrets is always tried first. After that,
jawarat runs whichever attacks you ask for, in this order: dictionary, then
brute force. It stops as soon as a secret is found.

| Option | Meaning |
| --- | --- |
| `-w`, `--wordlist PATH` | Dictionary attack. Each line of the file is one candidate; trailing spaces, tabs and line endings are removed and blank lines are skipped. |
| `-b`, `--bruteforce CHARSET` | Brute-force attack over every string built from `CHARSET`. An empty charset means no brute force. |
| `--min-len N` | Shortest brute-force candidate (default 1). |
| `--max-len N` | Longest brute-force candidate (default 6). |
| `-t`, `--threads N` | Number of brute-force worker threads (default 4). |
| `--info` | Print the header and payload claims (sorted by name) and the signature of the token. |
| `--alg-none` | Print a copy of the token re-issued with header `{"alg":"none"}`, the original payload claims and an empty signature. |
| `-v`, `--version` | Print the version and exit. |

Examples:

```
jawarat <token> --info --alg-none
jawarat <token> -w wordlist.txt
jawarat <token> -b "abcdefghijklmnopqrstuvwxyz" --max-len 5 -t 8
```

When a secret is found, jawarat prints it and exits with status 0. It also
exits with status 0 when every requested attack ran without finding one.
Invalid arguments, and a token that does not contain the two dots of the
`header.payload.signature` form, end with status 1. A wordlist that cannot be
opened is reported on standard error and the remaining attacks still run.

A candidate counts as the secret only if the token's header says
`"alg": "HS256"`, the HMAC-SHA256 signature matches, and any `exp`, `nbf`
and `iat` claims are numbers that are valid at the current time. Brute-force
lengths with more than 2**63 - 1 candidates are skipped with a warning.

## Library use

The same checks are available from Python:

```python
import sys

from jawarat.cracker import JWTCracker
from jawarat.attacks import check_common_secrets_attack
from jawarat.dictionary import run_dictionary_attack
from jawarat.bruteforce import run_bruteforce_attack

cracker = JWTCracker(token)
if check_common_secrets_attack(cracker, sys.stdout):
    print(cracker.found_secret)
elif run_dictionary_attack(cracker, "wordlist.txt", sys.stdout):
    print(cracker.found_secret)
elif run_bruteforce_attack(cracker, "abc123", 1, 4, 4, sys.stdout):
    print(cracker.found_secret)
```

- `JWTCracker(token)` raises `jawarat.cracker.InvalidTokenError` (a
  `ValueError`) when the token has fewer than three dot-separated parts.
  `test_secret(secret)` reports whether one candidate verifies the token; it
  returns `False` once `found` is set. `mark_found(secret)` records a secret
  in `found_secret`.
- `jawarat.cracker.decode_token(token)` returns a `DecodedToken` with the raw
  parts, the decoded header and payload, and the signature bytes.
- `jawarat.info.format_jwt_information(token)` returns the decoded token as
  text; `print_jwt_information(token, out)` writes it with a frame around it.
- `jawarat.attacks.build_alg_none_token(token)` returns the unsigned variant.
- `jawarat.dictionary.iter_wordlist(lines)` yields the candidates a wordlist
  contributes.
- `jawarat.bruteforce.candidate_count`, `thread_range` and
  `iter_combinations` expose how the brute-force keyspace is counted, split
  between threads and enumerated.

## What it does not do

jawarat only tests HS256 secrets. It does not check HS384, HS512 or
public-key algorithms, and it does not sign new tokens with a secret it has
found; it only prints the secret.
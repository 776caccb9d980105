"""
- HTTP call with clear fallback
Get a secret code of 4 colors. Locally we use Python's secure random. With the
"random.org" source we ask random.org for palette indices instead; if anything goes
wrong (no internet, timeout, bad response), we fall back to the local generator so
the game still works.
"""

import logging
from secrets import SystemRandom
from typing import List

import requests

from .types import CODE_LENGTH, PALETTE, Code

log = logging.getLogger(__name__)

INTEGERS_URL = "https://www.random.org/integers/"
SEQUENCES_URL = "https://www.random.org/sequences/"

# keep network quick; if it takes too long, we will just fallback
TIMEOUT_SECONDS = 3.0

_rng = SystemRandom()


def local_code(allow_repeats: bool = False, length: int = CODE_LENGTH) -> Code:
    # with replacement -> choices, without -> sample
    if allow_repeats:
        return tuple(_rng.choices(PALETTE, k=length))
    return tuple(_rng.sample(PALETTE, k=length))


def _parse_indices(body: str) -> List[int]:
    # The body looks like:
    #   0\n3\n1\n2\n
    indices = []
    for line in body.splitlines():
        text = line.strip()
        if text != "":
            indices.append(int(text))
    return indices


def remote_code(allow_repeats: bool = False, length: int = CODE_LENGTH) -> Code:
    top = len(PALETTE) - 1
    if allow_repeats:
        # `length` independent numbers in 0..top
        url = INTEGERS_URL
        params = {
            "num": length,
            "min": 0,
            "max": top,
            "col": 1,
            "base": 10,
            "format": "plain",
            "rnd": "new",
        }
    else:
        # a shuffled 0..top; the first `length` entries are distinct
        url = SEQUENCES_URL
        params = {
            "min": 0,
            "max": top,
            "col": 1,
            "format": "plain",
            "rnd": "new",
        }

    response = requests.get(url, params=params, timeout=TIMEOUT_SECONDS)
    # If the response was not 200 OK, this will raise an error
    response.raise_for_status()

    indices = _parse_indices(response.text)[:length]
    if len(indices) != length:
        raise ValueError(f"random.org returned {len(indices)} values, expected {length}.")
    for index in indices:
        if index < 0 or index > top:
            raise ValueError(f"random.org number {index} out of range 0..{top}.")
    if not allow_repeats and len(set(indices)) != length:
        raise ValueError("random.org sequence repeated a value.")

    return tuple(PALETTE[index] for index in indices)


def fetch_code(allow_repeats: bool = False, source: str = "local") -> Code:
    if source == "random.org":
        try:
            return remote_code(allow_repeats)
        except (requests.RequestException, ValueError) as exc:
            log.warning("random.org unavailable (%s); using local randomness", exc)
    return local_code(allow_repeats)

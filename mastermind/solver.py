"""
Automated guesser: hypothesis elimination over every code without repeated colors.

Each turn we walk the candidate codes in a fixed order and play the first one that
would have produced exactly the recorded responses to all earlier guesses.
Nothing is remembered between turns; the search starts over from the history.
"""

import logging
from typing import Iterator, List, Sequence

from .engine import score
from .errors import CandidateSpaceExhausted
from .types import CODE_LENGTH, PALETTE, Code, Color

log = logging.getLogger(__name__)


class CandidateSpace:
    """
    Every ordered arrangement of `length` distinct colors from `palette`.

    Iterating yields codes in lexicographic order over the palette order, so with
    the default palette the first code is R, Y, G, B and the last is K, W, B, G.
    The object can be iterated any number of times; each pass starts fresh.
    """

    def __init__(self, palette: Sequence[Color] = PALETTE, length: int = CODE_LENGTH):
        if length > len(palette):
            raise ValueError("Cannot pick more distinct colors than the palette holds.")
        self.palette = tuple(palette)
        self.length = length

    def __iter__(self) -> Iterator[Code]:
        return self._extend([])

    def _extend(self, prefix: List[Color]) -> Iterator[Code]:
        if len(prefix) == self.length:
            yield tuple(prefix)
            return
        for color in self.palette:
            if color not in prefix:
                prefix.append(color)
                yield from self._extend(prefix)
                prefix.pop()

    def __len__(self) -> int:
        # n! / (n - k)!
        total = 1
        for n in range(len(self.palette) - self.length + 1, len(self.palette) + 1):
            total *= n
        return total


CANDIDATES = CandidateSpace()


def is_consistent(candidate: Code, history) -> bool:
    """
    True if `candidate`, had it been the secret, would have answered every past
    guess with the same black/white counts that were actually recorded.
    """
    for attempt in history:
        if score(candidate, attempt.guess) != attempt.response:
            return False
    return True


def next_guess(history, candidates: CandidateSpace = CANDIDATES) -> Code:
    examined = 0
    for candidate in candidates:
        examined += 1
        if is_consistent(candidate, history):
            log.debug(
                "Picked candidate #%d after %d attempt(s)", examined, len(history)
            )
            return candidate
    log.debug("All %d candidates rejected", examined)
    raise CandidateSpaceExhausted(len(history))

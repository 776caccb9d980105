"""
Pure game logic (no terminal, no players).
We compare every position of the secret with every position of the guess:
- same color, same position      -> one black peg
- same color, different position -> one white peg

This is a pairwise rule, not the usual Mastermind matching. A color that shows up
twice on both sides produces a peg for every pair, so repeated colors are counted
more than once. The solver checks its hypotheses with this same function, so the
rule must stay exactly as it is.
"""

from dataclasses import dataclass
from typing import Tuple

from .types import CODE_LENGTH, Code, Peg


@dataclass(frozen=True, eq=False)
class Response:
    """
    The pegs a codemaker gives back for one guess.

    Pegs are kept in the order they were produced (or typed) so the transcript can
    show them as-is, but the order means nothing: two responses are equal when
    their black and white counts are equal.
    """

    pegs: Tuple[Peg, ...] = ()

    @classmethod
    def from_counts(cls, black: int, white: int) -> "Response":
        return cls((Peg.BLACK,) * black + (Peg.WHITE,) * white)

    @property
    def black(self) -> int:
        return self.pegs.count(Peg.BLACK)

    @property
    def white(self) -> int:
        return self.pegs.count(Peg.WHITE)

    def counts(self) -> Tuple[int, int]:
        return (self.black, self.white)

    def __len__(self) -> int:
        return len(self.pegs)

    def __eq__(self, other):
        if not isinstance(other, Response):
            return NotImplemented
        return self.counts() == other.counts()

    def __hash__(self):
        return hash(self.counts())

    def __repr__(self):
        return f"Response(black={self.black}, white={self.white})"


def score(secret: Code, guess: Code) -> Response:
    """
    Example:
      secret = [R, Y, G, B]
      guess  = [B, G, Y, R]
      no color sits in the same place, every color appears once on each side
      -> 0 black, 4 white

      secret = [R, R, G, B]
      guess  = [R, Y, Y, Y]
      guess[0] matches secret[0] (black) and secret[1] (white)
      -> 1 black, 1 white
    """
    pegs = []
    for i, secret_color in enumerate(secret):
        for j, guess_color in enumerate(guess):
            if secret_color == guess_color:
                pegs.append(Peg.BLACK if i == j else Peg.WHITE)
    return Response(tuple(pegs))


def is_win(response: Response) -> bool:
    """
    Win = exactly CODE_LENGTH pegs and every one of them black.
    """
    return len(response) == CODE_LENGTH and response.white == 0

"""
Game state and the turn loop.
One Game owns its guesser, its codemaker and the append-only list of attempts.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from . import codec
from .engine import Response, is_win
from .errors import GameOver
from .players import Codemaker, Guesser
from .types import MAX_ATTEMPTS, Code, GameStatus

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Attempt:
    guess: Code
    response: Response


Renderer = Callable[..., None]


@dataclass
class Game:
    guesser: Guesser
    codemaker: Codemaker
    renderer: Optional[Renderer] = None
    debug: bool = False
    max_attempts: int = MAX_ATTEMPTS
    status: GameStatus = "in_progress"
    _attempts: List[Attempt] = field(default_factory=list, repr=False)

    @property
    def attempts(self) -> Tuple[Attempt, ...]:
        return tuple(self._attempts)

    @property
    def debug_line(self) -> str:
        return f"{self.guesser} | {self.codemaker}"

    def render(self) -> None:
        if self.renderer is not None:
            self.renderer(self.attempts, self.debug_line if self.debug else None)

    def did_guesser_win(self) -> bool:
        if not self._attempts:
            return False
        return len(self._attempts) <= self.max_attempts and is_win(
            self._attempts[-1].response
        )

    def did_codemaker_win(self) -> bool:
        return len(self._attempts) == self.max_attempts

    def play_turn(self) -> GameStatus:
        if self.status != "in_progress":
            raise GameOver(f"Game already finished: {self.status}")

        # Both calls may raise; nothing is recorded unless both succeed
        guess = self.guesser.guess(self.attempts)
        response = self.codemaker.respond(guess)

        self._attempts.append(Attempt(guess, response))
        log.debug(
            "Turn %d: %s -> %s",
            len(self._attempts),
            codec.encode_code(guess),
            codec.encode_response(response) or "-",
        )
        self.render()

        # Check the guesser first: a win on the last turn is still a win
        if self.did_guesser_win():
            self.status = "guesser_won"
        elif self.did_codemaker_win():
            self.status = "codemaker_won"
        return self.status

    def play(self) -> GameStatus:
        self.render()
        while self.play_turn() == "in_progress":
            pass
        return self.status


RESULT_MESSAGES = {
    "guesser_won": "Guesser won!",
    "codemaker_won": "Codemaker won!",
}

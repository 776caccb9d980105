"""
The two roles and their two variants each.

Guesser:   guess(history) -> Code
Codemaker: respond(guess) -> Response

Computer players are pure functions of their inputs (plus the secret).
Human players go through two small callables: `read_line()` returns one line the
human typed, `write(text)` shows something to them. They default to input/print.
"""

import logging
from typing import Callable, Optional, Protocol, Sequence

from . import codec
from .engine import Response, score
from .random_client import fetch_code
from .schemas import Settings
from .solver import next_guess
from .types import CODE_LENGTH, Code, Role

log = logging.getLogger(__name__)

ReadLine = Callable[[], str]
Write = Callable[[str], None]


class Guesser(Protocol):
    def guess(self, history: Sequence) -> Code:
        ...


class Codemaker(Protocol):
    def respond(self, guess: Code) -> Response:
        ...


class ComputerGuesser:
    def guess(self, history: Sequence) -> Code:
        return next_guess(history)

    def __str__(self):
        return "Computer guesser"


class HumanGuesser:
    def __init__(self, read_line: Optional[ReadLine] = None, write: Optional[Write] = None):
        self.read_line = read_line or input
        self.write = write or print

    def guess(self, history: Sequence) -> Code:
        # the human reads the history off the transcript
        self.write("Enter your guess:")
        return codec.decode_code(self.read_line())

    def __str__(self):
        return "Human guesser"


class ComputerCodemaker:
    def __init__(
        self,
        secret: Optional[Code] = None,
        allow_repeats: bool = False,
        random_source: str = "local",
    ):
        if secret is None:
            secret = fetch_code(allow_repeats, random_source)
            log.debug("Generated secret from %s source", random_source)
        elif len(secret) != CODE_LENGTH:
            raise ValueError(f"Secret must have exactly {CODE_LENGTH} colors.")
        self._secret: Code = tuple(secret)

    @property
    def secret(self) -> Code:
        return self._secret

    def respond(self, guess: Code) -> Response:
        return score(self._secret, guess)

    def __str__(self):
        return f"Computer codemaker ({codec.encode_code(self._secret)})"


class HumanCodemaker:
    def __init__(self, read_line: Optional[ReadLine] = None, write: Optional[Write] = None):
        self.read_line = read_line or input
        self.write = write or print

    def respond(self, guess: Code) -> Response:
        self.write(f"The guesser guessed: {codec.encode_code(guess)}")
        self.write("Enter your response: ")
        return codec.decode_response(self.read_line())

    def __str__(self):
        return "Human codemaker"


def build_guesser(
    role: Role, read_line: Optional[ReadLine] = None, write: Optional[Write] = None
) -> Guesser:
    if role == "computer":
        return ComputerGuesser()
    if role == "human":
        return HumanGuesser(read_line, write)
    raise ValueError(f"Invalid player role: {role}")


def build_codemaker(
    role: Role,
    settings: Optional[Settings] = None,
    read_line: Optional[ReadLine] = None,
    write: Optional[Write] = None,
) -> Codemaker:
    settings = settings or Settings()
    if role == "computer":
        return ComputerCodemaker(
            allow_repeats=settings.allow_repeats,
            random_source=settings.random_source,
        )
    if role == "human":
        return HumanCodemaker(read_line, write)
    raise ValueError(f"Invalid player role: {role}")

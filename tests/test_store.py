"""
Testing the turn loop
- Stub players make the outcome of every turn predictable.
- The self-play test uses the real computer guesser against fixed secrets.
"""

import pytest

from mastermind.codec import decode_code
from mastermind.engine import Response
from mastermind.errors import GameOver, InvalidResponseToken
from mastermind.players import ComputerCodemaker, ComputerGuesser
from mastermind.solver import CANDIDATES
from mastermind.store import Attempt, Game


class FixedGuesser:
    def __init__(self, text="R, Y, G, B"):
        self.code = decode_code(text)
        self.calls = 0
        self.seen = []

    def guess(self, history):
        self.calls += 1
        self.seen.append(len(history))
        return self.code

    def __str__(self):
        return "Fixed guesser"


class FailingCodemaker:
    def respond(self, guess):
        raise InvalidResponseToken("X")


def test_win_on_first_turn():
    game = Game(FixedGuesser(), ComputerCodemaker(secret=decode_code("R, Y, G, B")))
    assert game.status == "in_progress"
    assert game.attempts == ()

    status = game.play_turn()

    assert status == "guesser_won"
    assert len(game.attempts) == 1
    assert game.attempts[0].response == Response.from_counts(4, 0)


def test_codemaker_wins_after_exactly_ten_turns():
    guesser = FixedGuesser("W, K, W, K")
    game = Game(guesser, ComputerCodemaker(secret=decode_code("R, Y, G, B")))

    assert game.play() == "codemaker_won"
    assert guesser.calls == 10
    assert len(game.attempts) == 10
    # the guesser always saw the full history so far
    assert guesser.seen == list(range(10))

    with pytest.raises(GameOver):
        game.play_turn()
    assert guesser.calls == 10


def test_win_on_tenth_turn_goes_to_guesser():
    secret = decode_code("R, Y, G, B")

    class LateGuesser:
        def guess(self, history):
            return secret if len(history) == 9 else decode_code("W, K, W, K")

    game = Game(LateGuesser(), ComputerCodemaker(secret=secret))
    assert game.play() == "guesser_won"
    assert len(game.attempts) == 10


def test_failed_turn_records_nothing():
    game = Game(FixedGuesser(), FailingCodemaker())
    with pytest.raises(InvalidResponseToken):
        game.play_turn()
    assert game.attempts == ()
    assert game.status == "in_progress"


def test_attempts_snapshot_is_read_only():
    game = Game(FixedGuesser("W, K, W, K"), ComputerCodemaker(secret=decode_code("R, Y, G, B")))
    game.play_turn()
    snapshot = game.attempts
    game.play_turn()
    assert len(snapshot) == 1
    assert len(game.attempts) == 2
    assert isinstance(snapshot[0], Attempt)


def test_renderer_gets_history_and_debug_line():
    calls = []

    def renderer(attempts, debug_line=None):
        calls.append((len(attempts), debug_line))

    secret = decode_code("R, Y, G, B")
    game = Game(FixedGuesser(), ComputerCodemaker(secret=secret), renderer=renderer, debug=True)
    game.play()

    line = "Fixed guesser | Computer codemaker (R, Y, G, B)"
    # initial empty board, then once per turn
    assert calls == [(0, line), (1, line)]


def test_renderer_without_debug_gets_no_debug_line():
    calls = []
    game = Game(
        FixedGuesser(),
        ComputerCodemaker(secret=decode_code("R, Y, G, B")),
        renderer=lambda attempts, debug_line=None: calls.append(debug_line),
    )
    game.play()
    assert calls == [None, None]


@pytest.mark.parametrize("secret", list(CANDIDATES)[::9])
def test_self_play_always_cracks_the_code(secret):
    game = Game(ComputerGuesser(), ComputerCodemaker(secret=secret))
    assert game.play() == "guesser_won"
    assert len(game.attempts) <= 10
    assert game.attempts[-1].guess == secret

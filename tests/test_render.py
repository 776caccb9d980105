"""
Testing the transcript layout.
"""

from mastermind.codec import decode_code
from mastermind.engine import score
from mastermind.render import CLEAR_SCREEN, TranscriptPrinter, transcript_lines
from mastermind.store import Attempt


def make_attempts():
    secret = decode_code("R, Y, G, B")
    guesses = [decode_code("R, Y, W, K"), decode_code("Y, R, G, B")]
    return [Attempt(g, score(secret, g)) for g in guesses]


def test_transcript_lines_numbered():
    lines = transcript_lines(make_attempts())
    assert lines == [
        CLEAR_SCREEN,
        "\nGame so far: ",
        "1: R, Y, W, K  |  K, K",
        "2: Y, R, G, B  |  W, W, K, K",
        "",
    ]


def test_transcript_lines_with_debug_line():
    lines = transcript_lines([], debug_line="Computer guesser | Human codemaker")
    assert lines == [CLEAR_SCREEN, "Computer guesser | Human codemaker", "\nGame so far: ", ""]


def test_printer_writes_every_line():
    written = []
    TranscriptPrinter(written.append)(make_attempts())
    assert written == transcript_lines(make_attempts())

"""
Terminal transcript.
Every turn the screen is cleared and the whole game so far is printed again.
"""

from typing import Callable, Iterable, List

from . import codec

CLEAR_SCREEN = "\x1b[2J\x1b[0;0H"


def attempt_line(number: int, attempt) -> str:
    return (
        f"{number}: {codec.encode_code(attempt.guess)}"
        f"  |  {codec.encode_response(attempt.response)}"
    )


def transcript_lines(attempts: Iterable, debug_line: str = None) -> List[str]:
    lines = [CLEAR_SCREEN]
    if debug_line is not None:
        lines.append(debug_line)
    lines.append("\nGame so far: ")
    for number, attempt in enumerate(attempts, start=1):
        lines.append(attempt_line(number, attempt))
    lines.append("")
    return lines


class TranscriptPrinter:
    def __init__(self, write: Callable[[str], None] = print):
        self.write = write

    def __call__(self, attempts, debug_line: str = None) -> None:
        for line in transcript_lines(attempts, debug_line):
            self.write(line)

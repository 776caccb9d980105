"""
Text encoding used when talking to humans.

Colors:   R Y G B W K  (red, yellow, green, blue, white, black)
Pegs:     K = black peg, W = white peg
Both are written as letters joined by ", ", e.g. "R, Y, G, B" or "K, W".

W and K mean different things in the two encodings, so always decode with the
function for the kind of value you expect.
"""

from typing import List

from .engine import Response
from .errors import InvalidColorToken, InvalidResponseToken
from .types import CODE_LENGTH, Code, Color, Peg

SEPARATOR = ", "

_COLORS_BY_LETTER = {color.value: color for color in Color}
_PEGS_BY_LETTER = {peg.value: peg for peg in Peg}


def color_from_letter(letter: str) -> Color:
    try:
        return _COLORS_BY_LETTER[letter]
    except KeyError:
        raise InvalidColorToken(letter) from None


def peg_from_letter(letter: str) -> Peg:
    try:
        return _PEGS_BY_LETTER[letter]
    except KeyError:
        raise InvalidResponseToken(letter) from None


def decode_code(text: str) -> Code:
    letters: List[str] = text.strip().split(SEPARATOR)
    code = tuple(color_from_letter(letter) for letter in letters)
    if len(code) != CODE_LENGTH:
        raise InvalidColorToken(text)
    return code


def encode_code(code: Code) -> str:
    return SEPARATOR.join(color.value for color in code)


def decode_response(text: str) -> Response:
    """
    An empty line is a response with no pegs at all.
    """
    text = text.strip()
    if text == "":
        return Response()
    return Response(tuple(peg_from_letter(letter) for letter in text.split(SEPARATOR)))


def encode_response(response: Response) -> str:
    return SEPARATOR.join(peg.value for peg in response.pegs)

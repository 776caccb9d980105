"""
Labels for clarity.
"""

from enum import Enum
from typing import Literal, Tuple


class Color(Enum):
    # Declaration order is the palette order the solver enumerates in.
    RED = "R"
    YELLOW = "Y"
    GREEN = "G"
    BLUE = "B"
    WHITE = "W"
    BLACK = "K"


class Peg(Enum):
    WHITE = "W"  # same color, different position
    BLACK = "K"  # same color, same position


CODE_LENGTH = 4
PALETTE_SIZE = len(Color)
MAX_ATTEMPTS = 10

PALETTE: Tuple[Color, ...] = tuple(Color)

Code = Tuple[Color, ...]  # 4 colors
GameStatus = Literal["in_progress", "guesser_won", "codemaker_won"]
Role = Literal["computer", "human"]

"""
- Keep tests independent of the machine they run on: no MASTERMIND_* variables
  and no local .env leak into a test.
- Provide small scripted stand-ins for the human side of the game.
"""

from typing import Iterable, List

import pytest

import mastermind.config as config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in config.ENV_VARS.values():
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(config, "load_dotenv", lambda *args, **kwargs: False)
    yield


class Script:
    """Feeds prepared lines to a human player and records what it was shown."""

    def __init__(self, lines: Iterable[str]):
        self._lines = list(lines)
        self.shown: List[str] = []

    def read_line(self) -> str:
        # an exhausted script means the player asked more often than expected
        return self._lines.pop(0)

    def write(self, text: str) -> None:
        self.shown.append(text)


@pytest.fixture
def script():
    return Script

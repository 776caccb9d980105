"""
Everything the game can fail with.
None of these are retried: the CLI stops the program on any MastermindError.
"""


class MastermindError(Exception):
    pass


class InvalidColorToken(MastermindError, ValueError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid color: {token!r}")


class InvalidResponseToken(MastermindError, ValueError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid response: {token!r}")


class CandidateSpaceExhausted(MastermindError, RuntimeError):
    """No candidate code agrees with every recorded response.

    Only reachable if the codemaker scored a guess dishonestly or with a
    different rule than the solver uses.
    """

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(
            f"No code is consistent with the {attempts} recorded attempt(s). I give up."
        )


class ConfigError(MastermindError, ValueError):
    pass


class GameOver(MastermindError):
    pass

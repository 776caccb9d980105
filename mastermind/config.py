"""
Single place to:
- Load a local .env if present
- Read MASTERMIND_* variables from the environment
- Turn them into a validated Settings object

Why: the CLI only takes --debug, everything else about a run is configured here.
"""

import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from .errors import ConfigError
from .schemas import Settings

ENV_PREFIX = "MASTERMIND_"

# Settings field -> environment variable
ENV_VARS = {
    "guesser": ENV_PREFIX + "GUESSER",
    "codemaker": ENV_PREFIX + "CODEMAKER",
    "allow_repeats": ENV_PREFIX + "ALLOW_REPEATS",
    "random_source": ENV_PREFIX + "RANDOM_SOURCE",
    "log_level": ENV_PREFIX + "LOG_LEVEL",
}


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    debug: bool = False,
    use_dotenv: bool = True,
) -> Settings:
    if environ is None:
        # dev convenience; values already in the environment win over .env
        if use_dotenv:
            load_dotenv()
        environ = os.environ

    raw = {}
    for field, var in ENV_VARS.items():
        value = environ.get(var)
        if value is not None and value.strip() != "":
            raw[field] = value
    raw["debug"] = debug
    if debug:
        raw["log_level"] = "DEBUG"

    try:
        return Settings(**raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc

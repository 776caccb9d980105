"""
Explicit validation & Pydantic models
- Settings is what the CLI runs with, validated once at startup.
- Raw values usually come from environment variables (see config.py), so they
  arrive as strings and are coerced here.
"""

import logging
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    guesser: Literal["computer", "human"] = Field(
        "computer", description="Who guesses the code"
    )
    codemaker: Literal["computer", "human"] = Field(
        "computer", description="Who makes (and scores) the code"
    )
    allow_repeats: bool = Field(
        False, description="Can a color repeat in a computer-generated secret?"
    )
    random_source: Literal["local", "random.org"] = Field(
        "local", description="Where a computer codemaker gets its randomness"
    )
    log_level: str = Field("WARNING", description="Logging level name")
    debug: bool = Field(False, description="Show role details above the transcript")

    model_config = {"frozen": True}

    @field_validator("guesser", "codemaker", "random_source", mode="before")
    @classmethod
    def normalize_choice(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        name = value.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level {value!r}.")
        return name

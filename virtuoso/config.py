"""
Game Configuration - Settings for a session, validated with Pydantic.

Settings come from the environment and can be overridden on the command line:

    VIRTUOSO_SEED                 Seed for the secret draw
    VIRTUOSO_LOG_LEVEL            Logging level name (default WARNING)
    VIRTUOSO_COUNT_INVALID_TRIES  "0"/"false" to count only scored guesses
    NO_COLOR                      Any non-empty value disables ANSI colors
"""

from __future__ import annotations
from typing import Callable, Optional
import logging
import os
import random
import time

from pydantic import BaseModel, Field, field_validator

from .engine_core.render import AnsiRenderer, PlainRenderer, Renderer
from .session import GameSession

_FALSE_VALUES = {"0", "false", "no", "off"}


class GameConfig(BaseModel):
    """Configuration for one game session."""
    seed: Optional[int] = Field(
        default=None, description="Seed for the random source; None draws freely"
    )
    color: bool = Field(default=True, description="Use ANSI background colors")
    count_invalid_tries: bool = Field(
        default=True, description="Rejected guesses still count as tries"
    )
    log_level: str = Field(default="WARNING", description="Root logging level")

    model_config = {"frozen": True}

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "GameConfig":
        """Build a config from environment variables."""
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        seed = env.get("VIRTUOSO_SEED")
        if seed:
            values["seed"] = seed
        if env.get("NO_COLOR"):
            values["color"] = False
        log_level = env.get("VIRTUOSO_LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level
        count_invalid = env.get("VIRTUOSO_COUNT_INVALID_TRIES")
        if count_invalid:
            values["count_invalid_tries"] = count_invalid.lower() not in _FALSE_VALUES

        return cls(**values)

    def make_renderer(self) -> Renderer:
        return AnsiRenderer() if self.color else PlainRenderer()

    def build_session(self, clock: Callable[[], float] = time.monotonic) -> GameSession:
        """Create a stopped session using these settings."""
        return GameSession(
            rng=random.Random(self.seed),
            clock=clock,
            renderer=self.make_renderer(),
            count_invalid_tries=self.count_invalid_tries,
        )

"""Runtime settings for the functionals, loaded from the environment."""

import os
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Literal

from pydantic import BaseModel

__all__ = ["PredicateMode", "Settings", "settings", "override_settings"]


class PredicateMode(str, Enum):
    STRICT = "strict"
    TRUTHY = "truthy"


class Settings(BaseModel):
    predicate_mode: PredicateMode = PredicateMode.STRICT
    index_base: Literal[0, 1] = 0
    log_level: str = "WARNING"

    @classmethod
    def load(cls) -> "Settings":
        values = {}
        mode = os.getenv("FUNCTIONALS_PREDICATE_MODE")
        if mode:
            values["predicate_mode"] = mode.lower()
        base = os.getenv("FUNCTIONALS_INDEX_BASE")
        if base:
            values["index_base"] = int(base)
        level = os.getenv("FUNCTIONALS_LOG_LEVEL")
        if level:
            values["log_level"] = level.upper()
        return cls(**values)


settings = Settings.load()


@contextmanager
def override_settings(**changes) -> Iterator[Settings]:
    """Temporarily replace the active settings.

    Example:
        with override_settings(predicate_mode="truthy"):
            keep([0, 1, 2], lambda v: v)
    """
    global settings
    previous = settings
    settings = Settings(**{**previous.model_dump(), **changes})
    try:
        yield settings
    finally:
        settings = previous

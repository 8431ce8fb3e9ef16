"""Error taxonomy for type conversion.

Skips are not errors (see skip.py). Everything here names the type being
converted and the step that failed so batch runs can report precisely.
"""

from __future__ import annotations
from enum import Enum
from typing import Optional


class Step(Enum):
    PATH = "path"
    RENDER = "render"
    WRITE = "write"

    def __str__(self) -> str:
        return self.value


class ConversionError(Exception):
    def __init__(self, message: str, class_name: str, step: Step,
                 member: Optional[str] = None):
        self.message = message
        self.class_name = class_name
        self.step = step
        self.member = member
        where = f"{class_name}.{member}" if member else class_name
        super().__init__(f"{where}: {step}: {message}")


class InvariantError(ConversionError):
    """Input violates an assumption the upstream resolver is expected to keep."""

    def __init__(self, message: str, class_name: str, member: Optional[str] = None):
        super().__init__(message, class_name, Step.RENDER, member)


class OutputError(ConversionError):
    """Output directory or file could not be created."""


class LoadError(Exception):
    def __init__(self, message: str, path: str = "$"):
        self.path = path
        super().__init__(f"{message} at {path}")

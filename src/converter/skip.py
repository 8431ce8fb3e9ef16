"""Metadata-driven skip policy, evaluated before any output is produced."""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Optional

from .ast_nodes import CONVERT_ONCE, NO_CONVERSION, TypeDeclaration

logger = logging.getLogger(__name__)


class SkipReason(Enum):
    EXPLICIT = "explicit"
    ALREADY_CONVERTED = "already-converted"

    def __str__(self) -> str:
        return self.value


def check_skip(decl: TypeDeclaration, output_file: str) -> Optional[SkipReason]:
    """Return why `decl` must not be emitted, or None to emit it.

    Tags other than NoConversion and ConvertOnce are ignored. A ConvertOnce
    type is emitted the first time only; later runs keep the existing
    (possibly hand-edited) file.
    """
    metadata = decl.metadata or frozenset()
    if NO_CONVERSION in metadata:
        logger.info("No conversion: %s", decl.name)
        return SkipReason.EXPLICIT
    if CONVERT_ONCE in metadata and os.path.exists(output_file):
        logger.info("Convert once: %s (keeping %s)", decl.name, output_file)
        return SkipReason.ALREADY_CONVERTED
    return None

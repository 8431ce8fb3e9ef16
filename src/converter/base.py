"""Target-independent conversion driver.

A target emitter subclasses TargetConverter and implements render(); the
base class owns the parts every target shares: the skip policy, output
path layout, atomic file write and batch conversion.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from .ast_nodes import TypeDeclaration
from .context import ConversionContext
from .errors import ConversionError, OutputError, Step
from .naming import CodeHelper
from .skip import SkipReason, check_skip
from .writer import CodeWriter, ensure_dir

logger = logging.getLogger(__name__)


class Status(Enum):
    WRITTEN = "written"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ConversionResult:
    name: str
    status: Status
    path: str
    reason: Optional[SkipReason] = None

    @property
    def skipped(self) -> bool:
        return self.status == Status.SKIPPED


@dataclass
class BatchReport:
    results: list[ConversionResult] = field(default_factory=list)
    failures: list[ConversionError] = field(default_factory=list)

    @property
    def written(self) -> list[ConversionResult]:
        return [r for r in self.results if r.status == Status.WRITTEN]

    @property
    def skipped(self) -> list[ConversionResult]:
        return [r for r in self.results if r.status == Status.SKIPPED]

    @property
    def ok(self) -> bool:
        return not self.failures


class TargetConverter(ABC):
    extension: str = ""

    def __init__(self, helper: CodeHelper, context: ConversionContext | None = None):
        self.helper = helper
        self.context = context or ConversionContext(helper)

    @abstractmethod
    def render(self, decl: TypeDeclaration) -> CodeWriter:
        """Render one type into a fresh buffer. Must not touch the filesystem."""

    def generate(self, decl: TypeDeclaration) -> CodeWriter:
        """render() with any unexpected failure reported against the type."""
        try:
            return self.render(decl)
        except ConversionError:
            raise
        except Exception as e:
            raise ConversionError(f"{type(e).__name__}: {e}", decl.name, Step.RENDER) from e

    def output_path(self, decl: TypeDeclaration, output_root: str) -> str:
        directory = os.path.join(output_root, *decl.package)
        return os.path.join(directory, f"{self.context.class_name(decl)}.{self.extension}")

    def convert(self, decl: TypeDeclaration, output_root: str) -> ConversionResult:
        """Convert one type into at most one file under output_root."""
        path = self.output_path(decl, output_root)

        reason = check_skip(decl, path)
        if reason is not None:
            return ConversionResult(decl.name, Status.SKIPPED, path, reason)

        writer = self.generate(decl)

        try:
            ensure_dir(os.path.dirname(path))
        except OSError as e:
            raise OutputError(f"cannot create {os.path.dirname(path)}: {e.strerror or e}",
                              decl.name, Step.PATH) from e

        try:
            writer.write_to_file(path)
        except OSError as e:
            raise OutputError(f"cannot write {path}: {e.strerror or e}",
                              decl.name, Step.WRITE) from e

        logger.debug("Wrote %s", path)
        return ConversionResult(decl.name, Status.WRITTEN, path)

    def convert_all(self, decls: Iterable[TypeDeclaration], output_root: str, *,
                    fail_fast: bool = False, jobs: int = 1) -> BatchReport:
        """Convert independent types; failures are collected unless fail_fast.

        Results keep input order regardless of `jobs`.
        """
        decls = list(decls)
        report = BatchReport()

        def record(outcome_fn):
            try:
                report.results.append(outcome_fn())
            except ConversionError as e:
                if fail_fast:
                    raise
                logger.error("%s", e)
                report.failures.append(e)

        if jobs <= 1:
            for decl in decls:
                record(lambda: self.convert(decl, output_root))
            return report

        with ThreadPoolExecutor(max_workers=jobs) as pool:
            futures = [pool.submit(self.convert, decl, output_root) for decl in decls]
            try:
                for future in futures:
                    record(future.result)
            except ConversionError:
                for future in futures:
                    future.cancel()
                raise
        return report

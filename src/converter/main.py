#!/usr/bin/env python3
"""as2cs — render resolved ActionScript class models as C# source files.

Usage: python as2cs.py <types.json> [-o output_dir] [--fail-fast] [-j N]
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Optional

from .ast_nodes import NO_CONVERSION
from .csharp import CsCodeHelper, CsConverter
from .errors import ConversionError, LoadError
from .loader import load_file
from .naming import PrefixAccessorNaming


@dataclass
class ConverterOptions:
    output: str = "out"
    fail_fast: bool = False
    jobs: int = 1
    getter_prefix: str = "get"
    setter_prefix: str = "set"
    default_namespace: str = "Global"
    dry_run: bool = False
    verbose: int = 0

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ConverterOptions":
        return cls(
            output=args.output,
            fail_fast=args.fail_fast,
            jobs=args.jobs,
            getter_prefix=args.getter_prefix,
            setter_prefix=args.setter_prefix,
            default_namespace=args.default_namespace,
            dry_run=args.dry_run,
            verbose=args.verbose,
        )


def build_converter(options: ConverterOptions) -> CsConverter:
    accessors = PrefixAccessorNaming(options.getter_prefix, options.setter_prefix)
    helper = CsCodeHelper(accessors, default_namespace=options.default_namespace)
    return CsConverter(helper)


def _build_argparser() -> argparse.ArgumentParser:
    argparser = argparse.ArgumentParser(description="ActionScript to C# class emitter")
    argparser.add_argument("input", help="JSON file with resolved type declarations")
    argparser.add_argument("-o", "--output", default="out",
                           help="Output root directory (default: out)")
    argparser.add_argument("--fail-fast", action="store_true",
                           help="Stop at the first type that fails to convert")
    argparser.add_argument("-j", "--jobs", type=int, default=1,
                           help="Convert this many types in parallel")
    argparser.add_argument("--getter-prefix", default="get",
                           help="Prefix for getter method names (default: get)")
    argparser.add_argument("--setter-prefix", default="set",
                           help="Prefix for setter method names (default: set)")
    argparser.add_argument("--default-namespace", default="Global",
                           help="Namespace for types without a package")
    argparser.add_argument("--dry-run", action="store_true",
                           help="Print the C# source instead of writing files")
    argparser.add_argument("-v", "--verbose", action="count", default=0,
                           help="Log skipped types (-v) and written files (-vv)")
    return argparser


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_argparser().parse_args(argv)
    options = ConverterOptions.from_args(args)

    level = logging.WARNING
    if options.verbose == 1:
        level = logging.INFO
    elif options.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s: %(message)s")

    try:
        decls = load_file(args.input)
    except FileNotFoundError:
        print(f"error: file '{args.input}' not found", file=sys.stderr)
        return 1
    except LoadError as e:
        print(f"error: {args.input}: {e}", file=sys.stderr)
        return 1

    converter = build_converter(options)

    if options.dry_run:
        status = 0
        for decl in decls:
            if NO_CONVERSION in decl.metadata:
                continue
            try:
                sys.stdout.write(converter.generate(decl).text())
            except ConversionError as e:
                print(f"error: {e}", file=sys.stderr)
                if options.fail_fast:
                    return 1
                status = 1
        return status

    try:
        report = converter.convert_all(decls, options.output,
                                       fail_fast=options.fail_fast, jobs=options.jobs)
    except ConversionError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"Converted {len(report.written)} type(s), skipped {len(report.skipped)}, "
          f"failed {len(report.failures)} → {options.output}")
    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())

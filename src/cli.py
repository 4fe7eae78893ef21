"""Command-line interface for tagmap-core."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import cast

from artifacts.write import generate_output
from contract.artifacts import (
    OUTPUT_FORMAT_SPECS,
    PROGRAM_NAME,
    PROGRAM_VERSION,
    SUPPORTED_LANGUAGES,
)
from rules.config import ConfigError, TagmapConfig, build_emit_options, load_config
from rules.fields import InvalidFieldsError
from scan.files import read_names, resolve_inputs
from verify.verify import verify_determinism


def _add_input_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "files",
        nargs="*",
        help="Symbol record files (JSON Lines)",
    )
    parser.add_argument(
        "-L",
        dest="input_list",
        default=None,
        help='Read input file names from the specified file ("-" for stdin)',
    )
    parser.add_argument(
        "-R",
        dest="recurse",
        action="store_true",
        help="Recurse into directories in the file list",
    )
    parser.add_argument(
        "--fields",
        default=None,
        help="Include selected extension fields (only +l)",
    )
    parser.add_argument(
        "--extra",
        default=None,
        help="Include extra tags with package and receiver name prefixes (+q)",
    )
    parser.add_argument(
        "--sort",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Sort tags (default: config value, true)",
    )
    parser.add_argument(
        "--tag-relative",
        action="store_true",
        default=None,
        help="Write file paths relative to the tags file directory",
    )
    parser.add_argument(
        "--silent",
        action="store_true",
        default=None,
        help="Do not report input errors",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROGRAM_NAME)
    parser.add_argument(
        "--version",
        action="version",
        version=f"{PROGRAM_NAME} version {PROGRAM_VERSION}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for spec in OUTPUT_FORMAT_SPECS.values():
        format_parser = subparsers.add_parser(
            spec.name, help=f"{spec.description} ({spec.format})"
        )
        _add_input_options(format_parser)
        format_parser.add_argument(
            "-f",
            dest="output",
            default=None,
            help='Write output to specified file ("-" for stdout)',
        )

    verify_parser = subparsers.add_parser(
        "verify", help="Verify that a tags file is reproducible"
    )
    _add_input_options(verify_parser)
    verify_parser.add_argument(
        "-f",
        dest="output",
        required=True,
        help="Tags file to verify",
    )

    subparsers.add_parser("languages", help="List supported languages")

    return parser


def _resolve_output(output: str | None) -> Path | None:
    if output is None or output == "-":
        return None
    return Path(output).expanduser()


def _pick(value: bool | None, default: bool) -> bool:
    return default if value is None else value


def _collect_inputs(args: argparse.Namespace) -> list[Path]:
    names = list(args.files)
    if args.input_list is not None:
        names.extend(read_names(args.input_list))
    return resolve_inputs(names, recurse=args.recurse)


def _usage_error(parser: argparse.ArgumentParser, message: str) -> int:
    sys.stderr.write(f"{message}\n\n")
    parser.print_usage(sys.stderr)
    return 1


def _report_errors(errors: list[str], *, silent: bool) -> None:
    if silent:
        return
    for error in errors:
        sys.stderr.write(f"parse error: {error}\n")


def _handle_generate(
    parser: argparse.ArgumentParser, args: argparse.Namespace, config: TagmapConfig
) -> int:
    try:
        options = build_emit_options(config, fields=args.fields, extra=args.extra)
    except InvalidFieldsError as exc:
        return _usage_error(parser, str(exc))

    try:
        inputs = _collect_inputs(args)
    except OSError as exc:
        sys.stderr.write(f"cannot get specified files: {exc}\n")
        return 1
    if not inputs:
        return _usage_error(parser, "no file specified")

    silent = _pick(args.silent, config.silent)
    output = _resolve_output(args.output or config.output)
    try:
        summary = generate_output(
            inputs=inputs,
            output_format=args.command,
            output=output,
            options=options,
            sort_output=_pick(args.sort, config.sort),
            tag_relative=_pick(args.tag_relative, config.tag_relative),
        )
    except OSError as exc:
        if not silent:
            sys.stderr.write(f"could not write output: {exc}\n")
        return 1

    _report_errors(cast("list[str]", summary["errors"]), silent=silent)
    return 0


def _handle_verify(
    parser: argparse.ArgumentParser, args: argparse.Namespace, config: TagmapConfig
) -> int:
    try:
        options = build_emit_options(config, fields=args.fields, extra=args.extra)
    except InvalidFieldsError as exc:
        return _usage_error(parser, str(exc))

    try:
        inputs = _collect_inputs(args)
    except OSError as exc:
        sys.stderr.write(f"cannot get specified files: {exc}\n")
        return 1
    if not inputs:
        return _usage_error(parser, "no file specified")

    tags_file = Path(args.output).expanduser()
    try:
        result = verify_determinism(
            inputs=inputs,
            tags_file=tags_file,
            options=options,
            sort_output=_pick(args.sort, config.sort),
            tag_relative=_pick(args.tag_relative, config.tag_relative),
        )
    except (FileNotFoundError, IsADirectoryError) as exc:
        sys.stderr.write(f"tags-file: {tags_file}\n")
        sys.stderr.write(f"error: {exc}\n")
        return 2

    _report_errors(list(result.errors), silent=_pick(args.silent, config.silent))
    for line in result.mismatched_lines:
        sys.stderr.write(f"mismatch: {tags_file}:{line}\n")
    return 0 if result.ok else 1


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command == "languages":
        for language in SUPPORTED_LANGUAGES:
            sys.stdout.write(f"{language}\n")
        return 0

    try:
        config = load_config(Path.cwd())
    except ConfigError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1

    if args.command == "verify":
        return _handle_verify(parser, args, config)

    if args.command in OUTPUT_FORMAT_SPECS:
        return _handle_generate(parser, args, config)

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())

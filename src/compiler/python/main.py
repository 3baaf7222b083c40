#!/usr/bin/env python3
"""dice — syntax and lint checker for the Dice scripting language.

Usage: python dice.py <input.dice>... [--format text|json] [--no-warnings] [--werror]
"""

import sys
import argparse
import json
from typing import Optional

from .analyzer import analyze
from .diagnostics import Diagnostic, Severity, codepoint_offset, split_lines

EXIT_OK = 0
EXIT_DIAGNOSTICS = 1
EXIT_BAD_INPUT = 2


def _format_diagnostic(source_lines: list[str], filename: str,
                       diag: Diagnostic) -> str:
    """Format a diagnostic with source context and caret.

    The header location is 1-based, as compilers print it.
    """
    label = diag.severity.label()
    line = diag.range.start.line + 1
    col = diag.range.start.character + 1
    if line > len(source_lines):
        return f"{label}: {diag.message}\n --> {filename}:{line}:{col}"
    source_line = source_lines[line - 1]
    width = len(str(line))
    pad = " " * width
    # Terminal columns follow code points, not UTF-16 units
    caret_start = codepoint_offset(source_line, diag.range.start.character)
    caret_end = codepoint_offset(source_line, diag.range.end.character)
    caret = " " * caret_start + "^" * max(caret_end - caret_start, 1)
    return (
        f"{label}: {diag.message}\n"
        f" {pad}--> {filename}:{line}:{col}\n"
        f" {pad} |\n"
        f" {line} | {source_line}\n"
        f" {pad} | {caret}"
    )


def _diagnostic_to_json(filename: str, diag: Diagnostic) -> dict:
    return {
        "file": filename,
        "line": diag.range.start.line,
        "character": diag.range.start.character,
        "end_line": diag.range.end.line,
        "end_character": diag.range.end.character,
        "severity": diag.severity.label(),
        "message": diag.message,
    }


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def build_arg_parser() -> argparse.ArgumentParser:
    argparser = argparse.ArgumentParser(prog="dice", description="Dice syntax checker")
    argparser.add_argument("inputs", nargs="+", metavar="input",
                           help="Input .dice file(s), '-' for stdin")
    argparser.add_argument("--format", choices=("text", "json"), default="text",
                           help="Output format (default: text)")
    argparser.add_argument("--no-warnings", action="store_true",
                           help="Don't report warnings")
    argparser.add_argument("--werror", action="store_true",
                           help="Treat warnings as errors for the exit status")
    return argparser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    failed = False
    json_report = []
    for path in args.inputs:
        filename = "<stdin>" if path == "-" else path
        try:
            source = _read_source(path)
        except FileNotFoundError:
            print(f"error: File '{path}' not found", file=sys.stderr)
            return EXIT_BAD_INPUT
        except (OSError, UnicodeDecodeError) as e:
            print(f"error: Cannot read '{path}': {e}", file=sys.stderr)
            return EXIT_BAD_INPUT

        diagnostics = analyze(source)
        if args.no_warnings:
            diagnostics = [d for d in diagnostics if d.severity is not Severity.WARNING]

        for diag in diagnostics:
            if diag.is_error or args.werror:
                failed = True

        if args.format == "json":
            json_report.extend(_diagnostic_to_json(filename, d) for d in diagnostics)
            continue

        source_lines = split_lines(source)
        for diag in diagnostics:
            print(_format_diagnostic(source_lines, filename, diag), file=sys.stderr)

    if args.format == "json":
        print(json.dumps(json_report, indent=2))

    return EXIT_DIAGNOSTICS if failed else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

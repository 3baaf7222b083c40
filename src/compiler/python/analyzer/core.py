"""Analyzer core: per-call state, block bookkeeping, and the line loop."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto

from ..diagnostics import WHITESPACE, Diagnostic, Range, Severity, split_lines, trim, utf16_len


class BlockKind(Enum):
    IF = auto()


@dataclass
class BlockFrame:
    start_line: int
    start_column: int
    kind: BlockKind = BlockKind.IF
    # Only meaningful for BlockKind.IF; flips False -> True once
    has_else: bool = False


@dataclass
class AnalysisState:
    """Everything one analyze() call accumulates. Never shared between calls."""

    diagnostics: list[Diagnostic] = field(default_factory=list)
    paren_stack: list[tuple[int, int]] = field(default_factory=list)
    variables: dict[str, str] = field(default_factory=dict)
    block_stack: list[BlockFrame] = field(default_factory=list)


class AnalyzerBase:
    def __init__(self):
        self.state = AnalysisState()

    def analyze(self, text: str) -> list[Diagnostic]:
        self.state = AnalysisState()
        for i, line in enumerate(split_lines(text)):
            self._analyze_line(i, line)
        self._report_unclosed_blocks()
        self._report_unclosed_parens()
        return list(self.state.diagnostics)

    def _analyze_line(self, i: int, line: str):
        trimmed = trim(line)
        self._scan_parens(i, line)
        self._check_terminators(i, trimmed)
        self._track_declaration(trimmed)
        self._check_condition_types(i, line, trimmed)
        self._track_blocks(i, line, trimmed)

    def _error(self, msg: str, line: int, start: int, end: int):
        self._emit(Severity.ERROR, msg, line, start, end)

    def _warning(self, msg: str, line: int, start: int, end: int):
        self._emit(Severity.WARNING, msg, line, start, end)

    def _emit(self, severity: Severity, msg: str, line: int, start: int, end: int):
        self.state.diagnostics.append(
            Diagnostic(Range.on_line(line, start, end), severity, msg)
        )

    @staticmethod
    def _indent_width(line: str) -> int:
        return utf16_len(line) - utf16_len(line.lstrip(WHITESPACE))

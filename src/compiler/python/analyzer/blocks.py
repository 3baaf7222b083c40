"""Conditional blocks: if-header type check and if/else/end nesting."""

from __future__ import annotations

from ..diagnostics import trim, utf16_len
from .core import BlockFrame, BlockKind
from .type_inference import infer_type

# Multi-character operators must come before their one-character prefixes
COMPARISON_OPERATORS = (">=", "<=", ">", "<", "==", "!=")


def find_comparison(condition: str) -> tuple[str, str, str] | None:
    """Split *condition* at the first operator found, in priority order.

    Returns (left, op, right) with both operands stripped, or None.
    """
    for op in COMPARISON_OPERATORS:
        if op in condition:
            left, _, right = condition.partition(op)
            return trim(left), op, trim(right)
    return None


class BlocksMixin:

    def _check_condition_types(self, i: int, line: str, trimmed: str):
        if not (trimmed.startswith("if ") and trimmed.endswith("then")):
            return
        condition = trim(trimmed[len("if"):-len("then")])
        comparison = find_comparison(condition)
        if comparison is None:
            return
        left, _op, right = comparison
        variables = self.state.variables
        left_type = infer_type(left, variables)
        right_type = infer_type(right, variables)
        if left_type and right_type and left_type != right_type:
            self._error(
                f"Type mismatch in condition: cannot compare {left_type} and {right_type}",
                i, 0, utf16_len(line))

    def _track_blocks(self, i: int, line: str, trimmed: str):
        stack = self.state.block_stack
        if trimmed.startswith("if ") and " then" in trimmed:
            stack.append(BlockFrame(i, self._indent_width(line), BlockKind.IF))
        elif trimmed == "else":
            if not stack:
                self._error("Unmatched 'else' with no open 'if'", i, 0, 4)
            elif stack[-1].has_else:
                self._error("Multiple 'else' blocks for one 'if'", i, 0, 4)
            else:
                stack[-1].has_else = True
        elif trimmed == "end":
            if stack:
                stack.pop()
            else:
                self._error("Unmatched 'end' with no corresponding 'if'", i, 0, 3)

    def _report_unclosed_blocks(self):
        for frame in self.state.block_stack:
            if frame.kind is BlockKind.IF:
                self._error("Unclosed 'if' block, missing 'end'",
                            frame.start_line, frame.start_column, frame.start_column + 2)

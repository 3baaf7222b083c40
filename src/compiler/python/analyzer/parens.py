"""Delimiter balance: parenthesis stack."""

from ..diagnostics import char_width


class ParensMixin:

    def _scan_parens(self, i: int, line: str):
        stack = self.state.paren_stack
        col = 0
        for ch in line:
            if ch == '(':
                stack.append((i, col))
            elif ch == ')':
                if stack:
                    stack.pop()
                else:
                    self._error("Unmatched ')'", i, col, col + 1)
            col += char_width(ch)

    def _report_unclosed_parens(self):
        # Outermost first, i.e. push order
        for line, col in self.state.paren_stack:
            self._error("Unmatched '('", line, col, col + 1)

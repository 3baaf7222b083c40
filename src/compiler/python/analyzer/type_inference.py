"""Type inference: infer_type and `let` declaration tracking."""

from __future__ import annotations

import re

from ..diagnostics import trim

INT = "int"
STRING = "string"

_INT_LITERAL_RE = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2 ** 63)
_I64_MAX = 2 ** 63 - 1


def _is_i64_literal(expr: str) -> bool:
    if not _INT_LITERAL_RE.fullmatch(expr):
        return False
    # Anything longer can't fit; also keeps int() clear of the digit limit
    if len(expr.lstrip("+-").lstrip("0")) > 19:
        return False
    return _I64_MIN <= int(expr) <= _I64_MAX


def infer_type(expr: str, variables: dict[str, str]) -> str | None:
    """Best-effort type of an expression. Returns None if unknown.

    Only three forms resolve: a double-quoted string, a signed 64-bit
    integer literal, or the name of a variable already in *variables*.
    """
    expr = trim(expr)
    if expr.startswith('"') and expr.endswith('"'):
        return STRING
    if _is_i64_literal(expr):
        return INT
    return variables.get(expr)


class TypeInferenceMixin:

    def _track_declaration(self, trimmed: str):
        """Record `let name = expr` when expr has a known type.

        Declarations with zero or several '=' are ignored, as are ones whose
        value can't be typed.
        """
        if not trimmed.startswith("let "):
            return
        parts = trimmed[len("let "):].split('=')
        if len(parts) != 2:
            return
        name = trim(parts[0])
        vtype = infer_type(parts[1], self.state.variables)
        if vtype is not None:
            self.state.variables[name] = vtype

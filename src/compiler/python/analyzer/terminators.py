"""Statement terminator lint."""

from ..diagnostics import utf16_len


class TerminatorsMixin:

    def _check_terminators(self, i: int, trimmed: str):
        """Warn once per line that contains any ';'."""
        if ';' in trimmed:
            self._warning("Semicolons are unnecessary in Dice", i, 0, utf16_len(trimmed))

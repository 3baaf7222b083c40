"""Analyzer assembly: combines all analysis mixins into the final Analyzer class."""

from ..diagnostics import Diagnostic
from .core import AnalysisState, AnalyzerBase, BlockFrame, BlockKind
from .parens import ParensMixin
from .terminators import TerminatorsMixin
from .type_inference import TypeInferenceMixin, infer_type
from .blocks import BlocksMixin, find_comparison


class Analyzer(
    BlocksMixin,
    TypeInferenceMixin,
    TerminatorsMixin,
    ParensMixin,
    AnalyzerBase,
):
    """Single-pass syntax and lint checker for Dice source text."""
    pass


def analyze(text: str) -> list[Diagnostic]:
    """Analyze a whole document with a fresh Analyzer."""
    return Analyzer().analyze(text)


__all__ = [
    "Analyzer", "AnalysisState", "BlockFrame", "BlockKind",
    "analyze", "find_comparison", "infer_type",
]

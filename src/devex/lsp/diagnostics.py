"""Diagnostic computation for Dice documents.

Runs the analyzer on source text and converts its records into LSP
Diagnostic objects. Analyzer columns are already UTF-16 code units, so
positions pass through unchanged.
"""

from dataclasses import dataclass, field

from lsprotocol import types as lsp

from src.compiler.python.analyzer import analyze
from src.compiler.python.diagnostics import Diagnostic, Severity

SOURCE_NAME = "dice"

_SEVERITIES = {
    Severity.ERROR: lsp.DiagnosticSeverity.Error,
    Severity.WARNING: lsp.DiagnosticSeverity.Warning,
}


@dataclass
class AnalysisResult:
    """Result of analyzing one version of a document."""

    uri: str
    source: str
    diagnostics: list[lsp.Diagnostic] = field(default_factory=list)


def to_lsp_diagnostic(diag: Diagnostic) -> lsp.Diagnostic:
    start, end = diag.range.start, diag.range.end
    return lsp.Diagnostic(
        range=lsp.Range(
            start=lsp.Position(line=start.line, character=start.character),
            end=lsp.Position(line=end.line, character=end.character),
        ),
        message=diag.message,
        severity=_SEVERITIES[diag.severity],
        source=SOURCE_NAME,
    )


def compute_diagnostics(uri: str, source: str) -> AnalysisResult:
    """Analyze the full document text and return diagnostics in analyzer order."""
    result = AnalysisResult(uri=uri, source=source)
    result.diagnostics = [to_lsp_diagnostic(d) for d in analyze(source)]
    return result

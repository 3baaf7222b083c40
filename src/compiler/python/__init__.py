"""Dice Python checker package."""

from .analyzer import Analyzer as Analyzer, analyze as analyze
from .diagnostics import Diagnostic as Diagnostic, Severity as Severity

"""Dice analyzer: one forward pass over the document, four cooperating checks."""

from .analyzer import Analyzer as Analyzer, analyze as analyze
from .type_inference import infer_type as infer_type

"""Analyzer capabilities — base class, registry, and built-in analyzers.

Usage::

    from exercise_analyzer.analyzers import default_registry

    analyzer = default_registry.resolve("Baseline")
    if analyzer is None:
        ...  # unknown analyzer name

Exercise-specific analyzers register themselves with
``@register_analyzer`` when their module is imported.
"""

from __future__ import annotations

from exercise_analyzer.analyzers.base import BaseAnalyzer
from exercise_analyzer.analyzers.registry import (
    AnalyzerRegistry,
    default_registry,
    register_analyzer,
)
from exercise_analyzer.analyzers.baseline import BaselineAnalyzer

__all__ = [
    "BaseAnalyzer",
    "AnalyzerRegistry",
    "default_registry",
    "register_analyzer",
    "BaselineAnalyzer",
]

"""Analyzer registry — maps analyzer names to statically registered classes.

Exercise configuration refers to analyzers by name (``analyzer_module``).
Resolution is a plain dictionary lookup: an unknown name resolves to
``None`` and never raises, so the pipeline can contain a bad exercise id
or a retired analyzer instead of crashing a batch run.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TypeVar

from exercise_analyzer.analyzers.base import BaseAnalyzer

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=type[BaseAnalyzer])


class AnalyzerRegistry:
    """Name -> analyzer class mapping.

    Examples
    --------
    >>> registry = AnalyzerRegistry()
    >>> registry.resolve("Missing") is None
    True
    """

    def __init__(self) -> None:
        self._analyzers: dict[str, type[BaseAnalyzer]] = {}

    # -- Registration -------------------------------------------------------

    def register(self, cls: A) -> A:
        """Register *cls* under ``cls.name``.

        Usable as a class decorator. Re-registering the same class is a
        no-op.

        Raises
        ------
        ValueError
            If ``cls.name`` is empty or already taken by a different class.
        """
        name = getattr(cls, "name", "")
        if not name:
            raise ValueError(f"{cls.__name__} has no analyzer name")
        existing = self._analyzers.get(name)
        if existing is not None and existing is not cls:
            raise ValueError(
                f"Analyzer name {name!r} is already registered to {existing.__name__}"
            )
        self._analyzers[name] = cls
        logger.debug("Registered analyzer %s (%s)", name, cls.__name__)
        return cls

    def unregister(self, name: str) -> bool:
        if name in self._analyzers:
            del self._analyzers[name]
            return True
        return False

    # -- Lookup -------------------------------------------------------------

    def resolve(self, name: str | None) -> BaseAnalyzer | None:
        """Instantiate the analyzer registered as *name*, or return ``None``."""
        if not name:
            return None
        cls = self._analyzers.get(name)
        if cls is None:
            logger.debug("No analyzer registered as %r", name)
            return None
        return cls()

    def names(self) -> list[str]:
        return sorted(self._analyzers)

    def items(self) -> Iterator[tuple[str, type[BaseAnalyzer]]]:
        for name in self.names():
            yield name, self._analyzers[name]

    def copy(self) -> AnalyzerRegistry:
        clone = AnalyzerRegistry()
        clone._analyzers = dict(self._analyzers)
        return clone

    def __contains__(self, name: object) -> bool:
        return name in self._analyzers

    def __len__(self) -> int:
        return len(self._analyzers)


# Process-wide registry populated by ``@register_analyzer`` at import time.
default_registry = AnalyzerRegistry()


def register_analyzer(cls: A) -> A:
    """Class decorator registering an analyzer in ``default_registry``."""
    return default_registry.register(cls)

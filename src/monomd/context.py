#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/monomd/context.py
"""Per-call rendering state.

Everything mutable that one conversion needs lives on a
:class:`RenderContext` created by that call and dropped when it returns,
so concurrent calls share nothing.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Callable

from monomd.escaper import EscapeMap
from monomd.options import MonoMdOptions
from monomd.placeholders import PlaceholderTable

IdFactory = Callable[[], str]


def sequential_ids(prefix: str) -> IdFactory:
    """Return a generator of ``prefix-1``, ``prefix-2``, ... ids.

    Examples
    --------
        >>> next_id = sequential_ids("checkbox")
        >>> next_id(), next_id()
        ('checkbox-1', 'checkbox-2')

    """
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


@dataclass
class RenderContext:
    """State owned by a single conversion call.

    Parameters
    ----------
    options : MonoMdOptions
        Options in effect for the call
    escapes : EscapeMap
        Sentinels recorded by the escape pass
    placeholders : PlaceholderTable
        Spans rendered by the extraction passes
    id_factory : callable, optional
        Source of checklist checkbox ids; defaults to a counter using
        ``options.checkbox_id_prefix``

    """

    options: MonoMdOptions = field(default_factory=MonoMdOptions)
    escapes: EscapeMap = field(default_factory=EscapeMap)
    placeholders: PlaceholderTable = field(default_factory=PlaceholderTable)
    id_factory: IdFactory | None = None
    _next_id: IdFactory = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Fall back to a per-call counter for checkbox ids."""
        self._next_id = self.id_factory or sequential_ids(self.options.checkbox_id_prefix)

    def next_id(self) -> str:
        """Return a fresh element id."""
        return self._next_id()

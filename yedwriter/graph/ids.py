"""Counters that hand out node and edge identifiers."""
from __future__ import annotations

from dataclasses import dataclass, field

SCOPE_SEPARATOR = ":"


def scoped_id(scope: str, local_id: str) -> str:
    """Return ``local_id`` qualified by ``scope``; an empty scope leaves it as is."""

    if not scope:
        return local_id
    return f"{scope}{SCOPE_SEPARATOR}{local_id}"


def subgraph_id(node_id: str) -> str:
    """Return the identifier of the graph nested inside ``node_id``."""

    return f"{node_id}{SCOPE_SEPARATOR}"


@dataclass
class IdCounter:
    """Monotonic ``<prefix><n>`` allocator, optionally qualified by a scope.

    Counters never reset and identifiers are never reused.
    """

    prefix: str
    scope: str = ""
    _next: int = field(default=0, init=False, repr=False)

    def allocate(self) -> str:
        """Return the next identifier."""

        local_id = f"{self.prefix}{self._next}"
        self._next += 1
        return scoped_id(self.scope, local_id)

    @property
    def allocated(self) -> int:
        """Number of identifiers handed out so far."""

        return self._next

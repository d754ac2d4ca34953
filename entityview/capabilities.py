"""
entityview.capabilities
=======================

Capability gate used to decide which mutating actions the current actor
may see.  The permission set is supplied from outside (session, token,
settings) and is never modified here.
"""

from __future__ import annotations

from typing import Callable, FrozenSet, Iterable, Optional

ENTITIES_CREATE = "entities:create"


class CapabilityGate:
    """
    Read‑only lookup over a granted permission set.

    Unknown action identifiers resolve to ``False``.

    Example
    -------
    >>> gate = CapabilityGate({"entities:create"})
    >>> gate.can("entities:create")
    True
    >>> gate.can("entities:delete")
    False
    """

    def __init__(
        self,
        granted: Iterable[str] = (),
        check: Optional[Callable[[str], bool]] = None,
    ) -> None:
        self._granted: FrozenSet[str] = frozenset(granted)
        self._check = check

    @classmethod
    def from_check(cls, check: Callable[[str], bool]) -> "CapabilityGate":
        """Wrap an externally supplied permission‑check function."""
        return cls(check=check)

    @property
    def granted(self) -> FrozenSet[str]:
        return self._granted

    def can(self, action_id: str) -> bool:
        if action_id in self._granted:
            return True
        if self._check is not None:
            return self._check(action_id) is True
        return False

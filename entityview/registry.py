"""
entityview.registry
===================

An in‑memory registry that stores :class:`entityview.models.Entity`
objects keyed by their id.  It backs the reference read endpoint in
:pymod:`api.main`; the production store lives elsewhere and is only
reached through the HTTP contract.

Only the standard library is used so it can be unit‑tested without a
server.
"""

from __future__ import annotations

from typing import Dict, Iterator, List

from .models import Entity, Registration


class EntityRegistry:
    """
    Dictionary‑backed registry of entities, in insertion order.

    Example
    -------
    >>> reg = EntityRegistry()
    >>> reg.add(Entity("1", "Acme", "AE", "ACTIVE", "2024-01-01T00:00:00Z"))
    >>> [e.name for e in reg.search(country="AE")]
    ['Acme']
    """

    def __init__(self) -> None:
        self._entities: Dict[str, Entity] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def add(self, ent: Entity) -> None:
        """Insert or overwrite an entity."""
        self._entities[ent.id] = ent

    def get(self, entity_id: str) -> Entity:
        """Retrieve by id (raise KeyError if not present)."""
        return self._entities[entity_id]

    def search(self, search: str = "", country: str = "", status: str = "") -> List[Entity]:
        """
        Filter the registry.  Empty arguments mean *no constraint*.

        ``search`` is a case‑insensitive substring match on the name;
        ``country`` and ``status`` must match exactly.
        """
        needle = search.lower()
        return [
            e for e in self._entities.values()
            if (not needle or needle in e.name.lower())
            and (not country or e.country == country)
            and (not status or e.status == status)
        ]

    # ------------------------------------------------------------------
    # Dunder helpers for convenience
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities.values())

    def __len__(self) -> int:
        return len(self._entities)


# ---------------------------------------------------------------------
# Sample data for local development and demos
# ---------------------------------------------------------------------
SAMPLE_ENTITIES = [
    Entity(
        id="ent_001",
        name="Acme Trading LLC",
        country="AE",
        status="ACTIVE",
        legal_form="LLC",
        created_at="2024-01-01T00:00:00Z",
        registrations=[Registration("VAT", "VERIFIED"), Registration("TRADE", "PENDING")],
    ),
    Entity(
        id="ent_002",
        name="Najd Logistics Co.",
        country="SA",
        status="PENDING",
        legal_form="Joint Stock Company",
        created_at="2024-03-18T09:30:00Z",
        registrations=[Registration("CR", "VERIFIED"), Registration("ZATCA", "VERIFIED")],
    ),
    Entity(
        id="ent_003",
        name="Nile Crafts",
        country="EG",
        status="ARCHIVED",
        created_at="2023-11-05T14:00:00Z",
    ),
    Entity(
        id="ent_004",
        name="Sahara Imports",
        country="AE",
        status="PENDING",
        legal_form="Sole Establishment",
        created_at="2024-06-30T00:00:00Z",
        registrations=[Registration("TRADE", "REJECTED")],
    ),
]


def seed(registry: EntityRegistry) -> EntityRegistry:
    """Load :data:`SAMPLE_ENTITIES` into *registry* and return it."""
    for ent in SAMPLE_ENTITIES:
        registry.add(ent)
    return registry

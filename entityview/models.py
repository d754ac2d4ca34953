"""
entityview.models
=================

Dataclasses and enums describing a single registry entity as returned by
the read endpoint.  Like the rest of the core they carry **no**
external‑library dependencies, so importing `entityview` stays cheap.

The wire form is camelCase JSON; :meth:`Entity.from_json` and
:meth:`Entity.to_json` convert between the two.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class Status(str, Enum):
    """Known life‑cycle states for a registry entity."""
    ACTIVE = "ACTIVE"
    PENDING = "PENDING"
    ARCHIVED = "ARCHIVED"

    def __str__(self) -> str:        # nicer REPL display
        return self.value


#: Registration status with derived meaning (counted in the ratio column).
VERIFIED = "VERIFIED"


@dataclass(frozen=True)
class Registration:
    """One regulatory filing attached to an entity."""
    type: str
    status: str

    @property
    def verified(self) -> bool:
        return self.status == VERIFIED


@dataclass
class Entity:
    """
    Core record listed by the admin view.

    Parameters
    ----------
    id : str
        Opaque identifier, stable across requests.
    name : str
        Display name (e.g., "Acme Trading LLC").
    country : str
        Jurisdiction code (``AE``, ``SA``, ``EG`` or anything else).
    status : str
        Life‑cycle state.  Kept as raw text so that values outside
        :class:`Status` survive untouched.
    created_at : str
        ISO‑8601 timestamp, used for display only.
    legal_form : str | None, default=None
        Optional classification (``LLC``, ``Sole Establishment``...).
    registrations : list[Registration], default=[]
        Ordered regulatory filings.
    """
    id: str
    name: str
    country: str
    status: str
    created_at: str
    legal_form: Optional[str] = None
    registrations: List[Registration] = field(default_factory=list)

    # Convenience helpers -------------------------------------------------
    @property
    def known_status(self) -> Optional[Status]:
        """Return the matching :class:`Status`, or *None* for unknown text."""
        try:
            return Status(self.status)
        except ValueError:
            return None

    def verified_count(self) -> int:
        return sum(1 for r in self.registrations if r.verified)

    # Wire conversion -----------------------------------------------------
    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "Entity":
        """
        Build an entity from one element of the endpoint's ``data`` list.

        Raises
        ------
        KeyError
            If ``id`` or ``name`` is missing.
        TypeError
            If *payload* (or a registration) is not a mapping, or ``id`` or
            ``name`` is null.
        """
        if not isinstance(payload, dict):
            raise TypeError(f"entity payload must be an object, got {type(payload).__name__}")
        registrations = []
        for item in payload.get("registrations") or []:
            if not isinstance(item, dict):
                raise TypeError("registration must be an object")
            registrations.append(
                Registration(type=str(item.get("type", "")), status=str(item.get("status", "")))
            )
        for required in ("id", "name"):
            if payload[required] is None:
                raise TypeError(f"entity {required} must not be null")
        legal_form = payload.get("legalForm")
        return cls(
            id=str(payload["id"]),
            name=str(payload["name"]),
            country=str(payload.get("country") or ""),
            status=str(payload.get("status") or ""),
            created_at=str(payload.get("createdAt") or ""),
            legal_form=str(legal_form) if legal_form else None,
            registrations=registrations,
        )

    def to_json(self) -> Dict[str, Any]:
        """Return the camelCase wire representation."""
        return {
            "id": self.id,
            "name": self.name,
            "country": self.country,
            "status": self.status,
            "legalForm": self.legal_form,
            "createdAt": self.created_at,
            "registrations": [
                {"type": r.type, "status": r.status} for r in self.registrations
            ],
        }


def parse_timestamp(value: str) -> Optional[datetime]:
    """
    Parse an ISO‑8601 string, accepting the trailing ``Z`` form.

    Returns *None* instead of raising so display code stays total.
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None

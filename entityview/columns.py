"""
entityview.columns
==================

Column projection for the entities table.

:data:`COLUMNS` is a fixed, ordered list of :class:`Column` specs.  Each
carries a pure ``derive`` function turning an :class:`Entity` into a
:class:`Cell`.  Every derivation is total: values outside the known
jurisdiction and status sets fall back to their raw text, an entity with
no registrations shows ``0/0`` and an unparsable timestamp is shown as is.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from entityview.models import Entity, Status, parse_timestamp
from entityview.settings import CREATE_ROUTE, DETAIL_ROUTE

PLACEHOLDER = "—"

JURISDICTION_LABELS: Dict[str, str] = {
    "AE": "🇦🇪 UAE",
    "SA": "🇸🇦 KSA",
    "EG": "🇪🇬 Egypt",
}

# Badge tone per known status; anything else gets DEFAULT_BADGE.
STATUS_BADGES: Dict[str, str] = {
    Status.ACTIVE.value: "success",
    Status.PENDING.value: "warning",
    Status.ARCHIVED.value: "neutral",
}
DEFAULT_BADGE = "neutral"

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass(frozen=True)
class Cell:
    """Display value for one table cell."""
    text: str
    href: Optional[str] = None
    style: Optional[str] = None

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Column:
    id: str
    header: str
    derive: Callable[[Entity], Cell]


# ---------------------------------------------------------------------
# Navigation targets
# ---------------------------------------------------------------------
def detail_route(entity_id: str) -> str:
    return DETAIL_ROUTE.format(id=entity_id)


def create_route() -> str:
    return CREATE_ROUTE


# ---------------------------------------------------------------------
# Derivations
# ---------------------------------------------------------------------
def jurisdiction_label(code: str) -> str:
    """Flag + short name for known codes, the raw code otherwise."""
    return JURISDICTION_LABELS.get(code, code)


def status_badge(status: str) -> str:
    return STATUS_BADGES.get(status, DEFAULT_BADGE)


def verified_ratio(entity: Entity) -> str:
    """``"<verified>/<total>"``; ``"0/0"`` for an entity with no filings."""
    return f"{entity.verified_count()}/{len(entity.registrations)}"


def format_date(value: str) -> str:
    """
    en‑US short form, e.g. ``"Jan 1, 2024"``.

    The locale is fixed to en‑US (English month abbreviations) and does not
    follow the process locale.

    The calendar date is taken as written in the timestamp; no timezone
    conversion happens.  Unparsable input is returned unchanged.
    """
    dt = parse_timestamp(value)
    if dt is None:
        return value or PLACEHOLDER
    return f"{_MONTHS[dt.month - 1]} {dt.day}, {dt.year}"


COLUMNS: List[Column] = [
    Column("name", "Business Name",
           lambda e: Cell(e.name, href=detail_route(e.id))),
    Column("country", "Country",
           lambda e: Cell(jurisdiction_label(e.country))),
    Column("legalForm", "Legal Form",
           lambda e: Cell(e.legal_form or PLACEHOLDER)),
    Column("status", "Status",
           lambda e: Cell(e.status, style=status_badge(e.status))),
    Column("registrations", "Registrations",
           lambda e: Cell(verified_ratio(e))),
    Column("createdAt", "Created",
           lambda e: Cell(format_date(e.created_at))),
    # Row navigation is never capability‑gated.
    Column("actions", "Actions",
           lambda e: Cell("View", href=detail_route(e.id))),
]


def project(entity: Entity, columns: List[Column] = COLUMNS) -> List[Cell]:
    """Apply every column to *entity*, in column order."""
    return [col.derive(entity) for col in columns]

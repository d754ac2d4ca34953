"""
entityview.table
================

Table renderer for the entities admin page.

:class:`EntityTable` owns a :class:`FilterState` and turns the query
cache's output for the active key into a :class:`TableView`, a plain
presentation model any front end (CLI, template, JSON) can paint.

Presentation states
-------------------
- ``LOADING``   – first load for the key, no rows
- ``ERROR``     – the last fetch failed; no rows, filters stay editable
- ``EMPTY``     – zero records; create call‑to‑action if permitted
- ``POPULATED`` – one row per record, in the order received
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from entityview.cache import QueryCache, QueryResult
from entityview.capabilities import ENTITIES_CREATE, CapabilityGate
from entityview.columns import COLUMNS, Cell, Column, create_route, project
from entityview.filters import FilterState

TITLE = "Entities"
SUBTITLE = "Manage companies, individuals, and organizations"
LOADING_TEXT = "Loading entities..."
ERROR_TITLE = "Error Loading Entities"
ERROR_MESSAGE = "Failed to fetch entities"
EMPTY_TITLE = "No entities found"
EMPTY_HINT = "Start by creating a new entity or importing from CSV"
NEW_ENTITY_LABEL = "New Entity"
FIRST_ENTITY_LABEL = "Create First Entity"


class Presentation(Enum):
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    POPULATED = "populated"

    def __str__(self) -> str:
        return self.name


@dataclass
class Row:
    entity_id: str
    cells: List[Cell]


@dataclass
class Action:
    label: str
    href: str


@dataclass
class TableView:
    """Everything needed to paint the page once."""
    state: Presentation
    headers: List[str]
    rows: List[Row] = field(default_factory=list)
    summary: str = ""
    title: str = TITLE
    subtitle: str = SUBTITLE
    create_action: Optional[Action] = None      # page header, gated
    empty_action: Optional[Action] = None       # empty state CTA, gated
    message: Optional[str] = None               # error or empty‑state text
    is_refreshing: bool = False


def summarize(count: int) -> str:
    return f"Showing {count} entit{'y' if count == 1 else 'ies'}"


class EntityTable:
    """
    Composes filter state, query cache, columns and capability gate.

    Example
    -------
    >>> table = EntityTable(QueryCache(client.fetch), CapabilityGate({"entities:create"}))
    >>> table.set_country_filter("AE")
    >>> view = await table.load()
    >>> view.state
    <Presentation.POPULATED: 'populated'>
    """

    def __init__(
        self,
        cache: QueryCache,
        gate: CapabilityGate,
        filters: Optional[FilterState] = None,
        columns: Optional[List[Column]] = None,
    ) -> None:
        self.cache = cache
        self.gate = gate
        self.filters = filters or FilterState()
        self.columns = list(columns or COLUMNS)

    # ---------- filter input --------------------------------------------
    def set_search_term(self, value: str) -> None:
        self.filters.set_search_term(value)

    def set_country_filter(self, value: str) -> None:
        self.filters.set_country_filter(value)

    def set_status_filter(self, value: str) -> None:
        self.filters.set_status_filter(value)

    # ---------- rendering -----------------------------------------------
    def render(self) -> TableView:
        """
        Derive the key, ask the cache for it (scheduling a fetch if
        needed) and paint whatever it holds right now.
        """
        return self.present(self.cache.read(self.filters.query_key()))

    async def load(self) -> TableView:
        """Like :meth:`render`, but wait for a pending fetch first."""
        key = self.filters.query_key()
        await self.cache.resolve(key)
        return self.present(self.cache.snapshot(key))

    def present(self, result: QueryResult) -> TableView:
        """Pure mapping from one cache result to a :class:`TableView`."""
        can_create = self.gate.can(ENTITIES_CREATE)
        view = TableView(
            state=Presentation.LOADING,
            headers=[c.header for c in self.columns],
            create_action=Action(NEW_ENTITY_LABEL, create_route()) if can_create else None,
            is_refreshing=result.is_fetching and not result.is_loading,
        )

        if result.error is not None:
            view.state = Presentation.ERROR
            view.summary = ERROR_TITLE
            view.message = ERROR_MESSAGE
            return view

        if result.is_loading:
            view.summary = LOADING_TEXT
            return view

        view.summary = summarize(len(result.data))
        if not result.data:
            view.state = Presentation.EMPTY
            view.message = f"{EMPTY_TITLE}. {EMPTY_HINT}"
            if can_create:
                view.empty_action = Action(FIRST_ENTITY_LABEL, create_route())
            return view

        view.state = Presentation.POPULATED
        view.rows = [Row(e.id, project(e, self.columns)) for e in result.data]
        return view

"""
entityview.filters
==================

Filter state for the listing view and the canonical cache key derived
from it.

An empty filter value always means *no constraint*; empty fields are left
out of both the query parameters and the cache key, so two states that
differ only in empty fields share one cache entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple
from urllib.parse import urlencode

# ---------------------------------------------------------------------
# Dropdown options: (value, label).  Empty value = "no constraint".
# ---------------------------------------------------------------------
COUNTRY_OPTIONS = [
    ("", "All Countries"),
    ("AE", "UAE"),
    ("SA", "Saudi Arabia"),
    ("EG", "Egypt"),
]

STATUS_OPTIONS = [
    ("", "All Statuses"),
    ("ACTIVE", "Active"),
    ("PENDING", "Pending"),
    ("ARCHIVED", "Archived"),
]


@dataclass(frozen=True)
class QueryKey:
    """
    Canonical, order‑independent encoding of the active constraints.

    ``fields`` is a sorted tuple of ``(param, value)`` pairs holding only
    non‑empty values, so equality and hashing follow normalisation.
    """
    fields: Tuple[Tuple[str, str], ...] = ()

    @classmethod
    def from_params(cls, **params: str) -> "QueryKey":
        return cls(tuple(sorted((k, v) for k, v in params.items() if v)))

    def params(self) -> Dict[str, str]:
        """Query parameters for the read endpoint."""
        return dict(self.fields)

    def __str__(self) -> str:
        return f"entities?{urlencode(self.fields)}" if self.fields else "entities"


class FilterState:
    """
    Current search text and the two categorical filters.

    Setters store the raw string verbatim: no trimming, no validation.
    """

    def __init__(self, search_term: str = "", country_filter: str = "", status_filter: str = "") -> None:
        self.search_term = search_term
        self.country_filter = country_filter
        self.status_filter = status_filter

    # ---------- setters -------------------------------------------------
    def set_search_term(self, value: str) -> None:
        self.search_term = value

    def set_country_filter(self, value: str) -> None:
        self.country_filter = value

    def set_status_filter(self, value: str) -> None:
        self.status_filter = value

    # ---------- derived -------------------------------------------------
    def params(self) -> Dict[str, str]:
        return self.query_key().params()

    def query_key(self) -> QueryKey:
        return QueryKey.from_params(
            search=self.search_term,
            country=self.country_filter,
            status=self.status_filter,
        )

    def __repr__(self) -> str:
        return (
            f"FilterState(search_term={self.search_term!r}, "
            f"country_filter={self.country_filter!r}, status_filter={self.status_filter!r})"
        )

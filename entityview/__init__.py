"""
EntityView
==========

Query‑and‑presentation core for the business‑entity registry admin
listing: filter state, a stale‑while‑revalidate query cache, a declarative
column projection and the table renderer that composes them.

Import structure
----------------
`import entityview` is intentionally cheap: nothing is imported eagerly.
*httpx* is only pulled in through :pymod:`entityview.client` (and the
modules that use it); *pydantic‑settings* through :pymod:`entityview.settings`.

Sub‑modules
~~~~~~~~~~~
- :pymod:`entityview.models`        – ``Entity`` / ``Registration`` dataclasses + :class:`~entityview.models.Status`
- :pymod:`entityview.capabilities`  – ``CapabilityGate`` over an injected permission set
- :pymod:`entityview.filters`       – ``FilterState`` and the canonical ``QueryKey``
- :pymod:`entityview.client`        – async read‑endpoint client, ``FetchFailed``
- :pymod:`entityview.cache`         – ``QueryCache`` (dedup + stale‑while‑revalidate)
- :pymod:`entityview.columns`       – ``COLUMNS`` projection
- :pymod:`entityview.table`         – ``EntityTable`` renderer and ``TableView``
- :pymod:`entityview.registry`      – in‑memory registry behind the reference API
- :pymod:`entityview.cli`           – plain‑text front end

Quick start
-----------
>>> from entityview.cache import QueryCache
>>> from entityview.capabilities import CapabilityGate
>>> from entityview.client import EntitiesClient
>>> from entityview.table import EntityTable
>>> async def show():
...     async with EntitiesClient() as client:
...         table = EntityTable(QueryCache(client.fetch), CapabilityGate())
...         table.set_country_filter("AE")
...         return await table.load()
"""

__all__ = [
    "models",
    "capabilities",
    "filters",
    "client",
    "cache",
    "columns",
    "table",
    "registry",
    "cli",
]

__version__ = "0.1.0"

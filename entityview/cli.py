"""
entityview.cli
==============

Plain‑text front end for the entities listing.

Examples
--------
$ entityview                                  # all entities
$ entityview --country AE --status ACTIVE
$ entityview --search acme --permission entities:create
$ entityview --endpoint http://api.internal/api/entities -v
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import textwrap
from typing import List, Optional

from entityview.cache import QueryCache
from entityview.capabilities import CapabilityGate
from entityview.client import EntitiesClient
from entityview.filters import COUNTRY_OPTIONS, STATUS_OPTIONS, FilterState
from entityview.settings import LOG_LEVEL, settings
from entityview.table import EntityTable, Presentation, TableView


def format_view(view: TableView) -> str:
    """Render a :class:`TableView` as aligned plain text."""
    lines = [view.title, view.subtitle]
    if view.create_action:
        lines.append(f"[{view.create_action.label}] -> {view.create_action.href}")
    lines.append("")

    if view.state is Presentation.ERROR:
        lines += [view.summary, view.message or ""]
        return "\n".join(lines)

    lines.append(view.summary)
    if view.state is Presentation.EMPTY:
        lines.append(view.message or "")
        if view.empty_action:
            lines.append(f"[{view.empty_action.label}] -> {view.empty_action.href}")
        return "\n".join(lines)
    if view.state is Presentation.LOADING:
        return "\n".join(lines)

    grid = [view.headers] + [[c.text for c in row.cells] for row in view.rows]
    widths = [max(len(r[i]) for r in grid) for i in range(len(view.headers))]
    for i, r in enumerate(grid):
        lines.append("  ".join(cell.ljust(w) for cell, w in zip(r, widths)).rstrip())
        if i == 0:
            lines.append("  ".join("-" * w for w in widths))
    return "\n".join(lines)


async def run(filters: FilterState, gate: CapabilityGate, endpoint: Optional[str] = None) -> TableView:
    async with EntitiesClient(endpoint) as client:
        table = EntityTable(QueryCache(client.fetch), gate, filters)
        return await table.load()


def _options(pairs) -> str:
    return ", ".join(v for v, _ in pairs if v)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="entityview",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            f"""\
            List registry entities
            ----------------------
            Known countries: {_options(COUNTRY_OPTIONS)}
            Known statuses:  {_options(STATUS_OPTIONS)}
            Other values are passed through unchanged.
            """
        ),
    )
    parser.add_argument("--search", default="", help="name search text")
    parser.add_argument("--country", default="", help="jurisdiction code filter")
    parser.add_argument("--status", default="", help="life-cycle status filter")
    parser.add_argument(
        "--permission", action="append", default=None,
        help="granted capability (repeatable, e.g. entities:create)",
    )
    parser.add_argument("--endpoint", default=None, help="entities read endpoint URL")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    granted = args.permission if args.permission is not None else settings.granted_permissions
    filters = FilterState(args.search, args.country, args.status)
    view = asyncio.run(run(filters, CapabilityGate(granted), args.endpoint))
    print(format_view(view))
    return 1 if view.state is Presentation.ERROR else 0


if __name__ == "__main__":
    sys.exit(main())

"""
tests/test_columns.py
=====================

Unit tests for the column projection in entityview.columns.
"""

import pytest

from entityview.columns import (
    COLUMNS,
    DEFAULT_BADGE,
    PLACEHOLDER,
    format_date,
    jurisdiction_label,
    project,
    status_badge,
    verified_ratio,
)
from entityview.models import Entity, Registration
from conftest import ACME_JSON


def _cells_by_id(entity):
    return {col.id: cell for col, cell in zip(COLUMNS, project(entity))}


def test_column_order_and_headers():
    assert [c.id for c in COLUMNS] == [
        "name", "country", "legalForm", "status", "registrations", "createdAt", "actions",
    ]
    assert [c.header for c in COLUMNS] == [
        "Business Name", "Country", "Legal Form", "Status", "Registrations", "Created", "Actions",
    ]


def test_acme_row(acme):
    cells = _cells_by_id(acme)
    assert cells["name"].text == "Acme"
    assert cells["name"].href == "/admin/entities/1"
    assert cells["country"].text == "🇦🇪 UAE"
    assert cells["legalForm"].text == PLACEHOLDER
    assert cells["status"].text == "ACTIVE"
    assert cells["status"].style == "success"
    assert cells["registrations"].text == "1/2"
    assert cells["createdAt"].text == "Jan 1, 2024"


@pytest.mark.parametrize("code, label", [("AE", "🇦🇪 UAE"), ("SA", "🇸🇦 KSA"), ("EG", "🇪🇬 Egypt")])
def test_known_jurisdictions(code, label):
    assert jurisdiction_label(code) == label


def test_unknown_jurisdiction_falls_back_to_raw_code():
    ent = Entity.from_json(dict(ACME_JSON, country="FR"))
    assert _cells_by_id(ent)["country"].text == "FR"
    assert jurisdiction_label("") == ""


def test_unknown_status_gets_default_badge():
    ent = Entity.from_json(dict(ACME_JSON, status="SUSPENDED"))
    cell = _cells_by_id(ent)["status"]
    assert cell.text == "SUSPENDED"
    assert cell.style == DEFAULT_BADGE


def test_known_status_badges():
    assert status_badge("ACTIVE") == "success"
    assert status_badge("PENDING") == "warning"
    assert status_badge("ARCHIVED") == "neutral"


def test_verified_ratio_with_no_registrations():
    ent = Entity("z", "Zero", "EG", "PENDING", "2024-01-01")
    assert verified_ratio(ent) == "0/0"


def test_verified_ratio_counts_only_verified():
    ent = Entity(
        "v", "Mixed", "SA", "ACTIVE", "2024-01-01",
        registrations=[
            Registration("VAT", "VERIFIED"),
            Registration("CR", "verified"),
            Registration("TRADE", "REJECTED"),
            Registration("ZATCA", "VERIFIED"),
        ],
    )
    assert verified_ratio(ent) == "2/4"


def test_legal_form_shown_when_present():
    ent = Entity.from_json(dict(ACME_JSON, legalForm="LLC"))
    assert _cells_by_id(ent)["legalForm"].text == "LLC"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-01-01T00:00:00Z", "Jan 1, 2024"),
        ("2023-11-05T14:00:00+04:00", "Nov 5, 2023"),
        ("2024-12-31", "Dec 31, 2024"),
        ("not a date", "not a date"),
        ("", PLACEHOLDER),
    ],
)
def test_format_date(value, expected):
    assert format_date(value) == expected


def test_action_is_always_rendered(acme):
    action = _cells_by_id(acme)["actions"]
    assert action.href == "/admin/entities/1"
    assert action.text


def test_derivations_are_total_on_minimal_record():
    ent = Entity.from_json({"id": "m", "name": "Minimal"})
    assert [c.text for c in project(ent)] == ["Minimal", "", PLACEHOLDER, "", "0/0", PLACEHOLDER, "View"]


def test_format_date_ignores_process_locale(monkeypatch):
    import locale

    monkeypatch.setattr(locale, "getlocale", lambda *a: ("de_DE", "UTF-8"))
    assert format_date("2024-10-03T00:00:00Z") == "Oct 3, 2024"
    assert "locale" in format_date.__doc__

"""Tests for container listings."""

import pytest

from satchel import describe, format_entries
from satchel.diagnostics import EntryInfo, entry_kind

from conftest import Service


@pytest.fixture
def populated(container):
    """Container with one entry of every kind."""
    def upper(text):
        return text.upper()

    container.set("name", "billing")
    container.set("service", lambda c: Service(c.get("name")))
    container.share("shared", lambda c: ["once"])
    container.protect("upper", upper)
    return container


class TestEntryKind:
    """Tests for classifying stored values."""

    def test_kinds(self, populated):
        kinds = {key: entry_kind(populated.raw(key)) for key in populated.keys()}

        assert kinds == {
            "name": "parameter",
            "service": "service",
            "shared": "shared",
            "upper": "protected",
        }


class TestDescribe:
    """Tests for describe()."""

    def test_resolved_values(self, populated):
        rows = describe(populated)

        assert [r.key for r in rows] == ["name", "service", "shared", "upper"]
        values = {r.key: r.value for r in rows}
        assert values["name"] == "billing"
        assert values["service"].name == "billing"
        assert values["shared"] == ["once"]
        assert values["upper"]("x") == "X"

    def test_resolving_memoizes_shared(self, populated):
        rows = describe(populated)
        shared = next(r.value for r in rows if r.key == "shared")

        assert populated.get("shared") is shared
        assert populated.raw("shared").resolved

    def test_raw_values(self, populated):
        rows = describe(populated, resolve=False)

        assert all(r.value is populated.raw(r.key) for r in rows)
        assert not populated.raw("shared").resolved

    def test_factory_errors_propagate(self, container):
        container.set("broken", lambda c: c.get("absent"))

        with pytest.raises(LookupError):
            describe(container)

    def test_empty(self, container):
        assert describe(container) == []


class TestFormatEntries:
    """Tests for format_entries()."""

    def test_aligned_table(self):
        text = format_entries([
            EntryInfo(key="a", kind="parameter", value=1),
            EntryInfo(key="longer", kind="shared", value="x"),
        ])

        assert text.splitlines() == [
            "a       parameter  1",
            "longer  shared     'x'",
        ]

    def test_empty(self):
        assert format_entries([]) == "(no entries)"

    def test_non_string_keys(self, container):
        container.set(42, "answer").set("name", "x")

        text = format_entries(describe(container))

        assert text.splitlines() == [
            "42    parameter  'answer'",
            "name  parameter  'x'",
        ]

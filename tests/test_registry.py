"""Tests for the calendar item registry."""

import pytest

from exchange_freebusy.errors import RegistryFrozenError
from exchange_freebusy.items import calendar_event_from_xml
from exchange_freebusy.registry import DEFAULT_REGISTRY, ItemRegistry


def _ctor(node):
    return node


class TestItemRegistry:
    def test_register_and_resolve(self):
        registry = ItemRegistry()
        registry.register("CalendarEvent", _ctor)
        assert registry.resolve("CalendarEvent") is _ctor
        assert "CalendarEvent" in registry
        assert len(registry) == 1

    def test_resolve_absent_returns_none(self):
        assert ItemRegistry().resolve("Nope") is None

    def test_lookup_is_exact(self):
        registry = ItemRegistry({"CalendarEvent": _ctor})
        assert registry.resolve("calendarevent") is None

    def test_duplicate_registration_rejected(self):
        registry = ItemRegistry({"CalendarEvent": _ctor})
        with pytest.raises(ValueError):
            registry.register("CalendarEvent", _ctor)

    def test_frozen_registry_is_read_only(self):
        registry = ItemRegistry({"CalendarEvent": _ctor}).freeze()
        assert registry.frozen
        with pytest.raises(RegistryFrozenError):
            registry.register("Note", _ctor)
        assert registry.tags() == ["CalendarEvent"]

    def test_default_registry(self):
        assert DEFAULT_REGISTRY.frozen
        assert DEFAULT_REGISTRY.resolve("CalendarEvent") is calendar_event_from_xml
        assert list(DEFAULT_REGISTRY) == ["CalendarEvent"]

"""Tag name to record constructor lookup for CalendarEventArray children."""

import xml.etree.ElementTree as ET
from collections.abc import Callable, Iterator
from typing import Any

from exchange_freebusy.errors import RegistryFrozenError
from exchange_freebusy.items import calendar_event_from_xml

ItemConstructor = Callable[[ET.Element], Any]


class ItemRegistry:
    """Mapping from a calendar item's local tag name to its constructor.

    Populate once with ``register`` and call ``freeze``; a frozen registry
    is read-only and safe to share between concurrent decoders.
    """

    def __init__(self, constructors: dict[str, ItemConstructor] | None = None):
        self._constructors: dict[str, ItemConstructor] = {}
        self._frozen = False
        for tag, constructor in (constructors or {}).items():
            self.register(tag, constructor)

    def register(self, tag: str, constructor: ItemConstructor) -> None:
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register <{tag}>: registry is frozen")
        if tag in self._constructors:
            raise ValueError(f"A constructor is already registered for <{tag}>")
        self._constructors[tag] = constructor

    def resolve(self, tag: str) -> ItemConstructor | None:
        return self._constructors.get(tag)

    def freeze(self) -> "ItemRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def tags(self) -> list[str]:
        return sorted(self._constructors)

    def __contains__(self, tag: object) -> bool:
        return tag in self._constructors

    def __len__(self) -> int:
        return len(self._constructors)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tags())


DEFAULT_REGISTRY = ItemRegistry({
    "CalendarEvent": calendar_event_from_xml,
}).freeze()

"""Cart aggregation and pricing."""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Callable
from uuid import uuid4

from pizzaria.models import CartEntry, ItemCandidate, ItemKey


def new_entry_id() -> str:
    return uuid4().hex


@dataclass(frozen=True)
class Cart:
    """
    Ordered, immutable collection of cart entries.

    Every mutation returns a new Cart. Entries are unique by item key
    (name, size, flavour sequence); adding an equivalent item bumps the
    quantity of the existing entry instead.
    """

    entries: tuple[CartEntry, ...] = ()

    def add(self, candidate: ItemCandidate, id_factory: Callable[[], str] = new_entry_id) -> Cart:
        key = candidate.key
        for idx, entry in enumerate(self.entries):
            if entry.key == key:
                bumped = replace(entry, quantity=entry.quantity + 1)
                return Cart(self.entries[:idx] + (bumped,) + self.entries[idx + 1 :])
        return Cart(self.entries + (CartEntry(id=id_factory(), item=candidate, quantity=1),))

    def set_quantity(self, entry_id: str, quantity: int) -> Cart:
        """Overwrite an entry's quantity; zero removes it."""
        if quantity < 0:
            raise ValueError("quantity must be >= 0")
        if quantity == 0:
            return Cart(tuple(entry for entry in self.entries if entry.id != entry_id))
        return Cart(
            tuple(replace(entry, quantity=quantity) if entry.id == entry_id else entry for entry in self.entries)
        )

    def find(self, key: ItemKey) -> CartEntry | None:
        """Entry holding items equivalent to `key`, if any."""
        for entry in self.entries:
            if entry.key == key:
                return entry
        return None

    def get(self, entry_id: str) -> CartEntry | None:
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        return None

    def total(self) -> Decimal:
        return sum((entry.line_total for entry in self.entries), Decimal("0"))

    def item_count(self) -> int:
        """Number of distinct entries, not units."""
        return len(self.entries)

    def quantity_count(self) -> int:
        return sum(entry.quantity for entry in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

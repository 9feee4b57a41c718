"""Static menu data wrapped into typed records."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pizzaria.constant import DRINKS, HAMBURGERS, PIZZA_FLAVORS, PIZZA_SIZES
from pizzaria.models import DRINK, HAMBURGER, PIZZA, DrinkItem, HamburgerItem, ItemCandidate, PizzaItem


@dataclass(frozen=True)
class PizzaSize:
    """One pizza size with its price and how many flavours it may be split into."""

    code: str
    label: str
    price: Decimal
    max_flavors: int

    @property
    def display_name(self) -> str:
        return f"Pizza {self.label}"


@dataclass(frozen=True)
class MenuItem:
    """A searchable menu row."""

    item_id: str
    category: str
    name: str
    price: Decimal
    size: str | None = None


PIZZA_SIZE_BY_CODE: dict[str, PizzaSize] = {
    code: PizzaSize(
        code=code,
        label=str(meta["label"]),
        price=Decimal(str(meta["price"])),
        max_flavors=int(meta["max_flavors"]),
    )
    for code, meta in PIZZA_SIZES.items()
}


def _slug(text: str) -> str:
    return "_".join(text.lower().replace(",", "_").split())


MENU_BY_CATEGORY: dict[str, list[MenuItem]] = {
    PIZZA: [
        MenuItem(f"pizza_{size.code.lower()}", PIZZA, size.display_name, size.price, size.code)
        for size in PIZZA_SIZE_BY_CODE.values()
    ],
    HAMBURGER: [
        MenuItem(_slug(burger["name"]), HAMBURGER, burger["name"], Decimal(burger["price"]))
        for burger in HAMBURGERS
    ],
    DRINK: [
        MenuItem(_slug(f"{drink['name']} {drink['size']}"), DRINK, drink["name"], Decimal(drink["price"]), drink["size"])
        for drink in DRINKS
    ],
}


def pizza_size(code: str) -> PizzaSize:
    """Get a pizza size by its code (P, M, G, F)."""
    try:
        return PIZZA_SIZE_BY_CODE[code]
    except KeyError:
        raise ValueError(f"Unknown pizza size: {code!r}") from None


def build_pizza(size_code: str, flavors: list[str] | tuple[str, ...]) -> PizzaItem:
    """Build a pizza candidate, keeping the flavour order as chosen."""
    size = pizza_size(size_code)
    chosen = tuple(flavors)
    if not (1 <= len(chosen) <= size.max_flavors):
        raise ValueError(f"{size.display_name} takes 1 to {size.max_flavors} flavors, got {len(chosen)}")
    unknown = [flavor for flavor in chosen if flavor not in PIZZA_FLAVORS]
    if unknown:
        raise ValueError(f"Unknown flavors: {', '.join(unknown)}")
    if len(set(chosen)) != len(chosen):
        raise ValueError("A flavor can only be chosen once")
    return PizzaItem(name=size.display_name, size=size.code, flavors=chosen, unit_price=size.price)


def candidate_for_menu_item(item: MenuItem) -> ItemCandidate:
    """Turn a hamburger or drink menu row into a cart candidate."""
    if item.category == HAMBURGER:
        return HamburgerItem(name=item.name, unit_price=item.price)
    if item.category == DRINK:
        if item.size is None:
            raise ValueError(f"Drink row without a size: {item.item_id}")
        return DrinkItem(name=item.name, size=item.size, unit_price=item.price)
    raise ValueError("Pizzas need a flavor choice; use build_pizza()")


def search_menu(category: str, query: str) -> list[MenuItem]:
    """Case-insensitive substring search within one category."""
    source = MENU_BY_CATEGORY[category]
    if not query:
        return source
    q = query.lower()
    return [item for item in source if q in item.name.lower() or (item.size and q in item.size.lower())]

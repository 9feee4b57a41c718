"""Domain models for the order terminal."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

PIZZA = "pizza"
HAMBURGER = "hamburger"
DRINK = "drink"
CATEGORIES = (PIZZA, HAMBURGER, DRINK)

CARD = "card"
CASH = "cash"
PIX = "pix"
PAYMENT_METHODS = (CARD, CASH, PIX)

ItemKey = tuple[str, str | None, tuple[str, ...]]


@dataclass(frozen=True)
class PizzaItem:
    """A pizza of one size with an ordered flavour selection."""

    name: str
    size: str
    flavors: tuple[str, ...]
    unit_price: Decimal

    category: ClassVar[str] = PIZZA

    @property
    def key(self) -> ItemKey:
        return (self.name, self.size, self.flavors)


@dataclass(frozen=True)
class HamburgerItem:
    name: str
    unit_price: Decimal

    category: ClassVar[str] = HAMBURGER
    size: ClassVar[None] = None
    flavors: ClassVar[tuple[str, ...]] = ()

    @property
    def key(self) -> ItemKey:
        return (self.name, None, ())


@dataclass(frozen=True)
class DrinkItem:
    """A drink in one volume variant."""

    name: str
    size: str
    unit_price: Decimal

    category: ClassVar[str] = DRINK
    flavors: ClassVar[tuple[str, ...]] = ()

    @property
    def key(self) -> ItemKey:
        return (self.name, self.size, ())


ItemCandidate = PizzaItem | HamburgerItem | DrinkItem


@dataclass(frozen=True)
class CartEntry:
    """One line of the cart: a catalog item and how many of it."""

    id: str
    item: ItemCandidate
    quantity: int = 1

    @property
    def category(self) -> str:
        return self.item.category

    @property
    def name(self) -> str:
        return self.item.name

    @property
    def size(self) -> str | None:
        return self.item.size

    @property
    def flavors(self) -> tuple[str, ...]:
        return self.item.flavors

    @property
    def unit_price(self) -> Decimal:
        return self.item.unit_price

    @property
    def key(self) -> ItemKey:
        return self.item.key

    @property
    def line_total(self) -> Decimal:
        return self.item.unit_price * self.quantity


@dataclass(frozen=True)
class CardPayment:
    code: ClassVar[str] = CARD


@dataclass(frozen=True)
class CashPayment:
    change_for: Decimal

    code: ClassVar[str] = CASH


@dataclass(frozen=True)
class PixPayment:
    code: ClassVar[str] = PIX


PaymentMethod = CardPayment | CashPayment | PixPayment


@dataclass
class PaymentDraft:
    """Raw payment form input, edited freely until submitted."""

    method: str = CARD
    change_for: Decimal | None = None
    address: str = ""
    phone: str = ""
    observation: str = ""


@dataclass(frozen=True)
class PaymentSubmission:
    """Validated payment and delivery data, fixed once checkout completes."""

    method: PaymentMethod
    address: str
    phone: str
    observation: str = ""

    @property
    def change_for(self) -> Decimal | None:
        if isinstance(self.method, CashPayment):
            return self.method.change_for
        return None


@dataclass(frozen=True)
class Order:
    """The finalized order: cart snapshot, payment data and total."""

    code: str
    entries: tuple[CartEntry, ...]
    submission: PaymentSubmission
    total: Decimal

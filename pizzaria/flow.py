"""Order flow state machine: Browsing -> Payment -> Receipt -> Browsing."""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable

from pizzaria.cart import Cart, new_entry_id
from pizzaria.config import ORDER_CODE_PREFIX
from pizzaria.debuglog import log_debug
from pizzaria.errors import EmptyCart, InvalidTransition, OrderError
from pizzaria.message import format_money
from pizzaria.models import CartEntry, ItemCandidate, Order, PaymentDraft, PaymentSubmission
from pizzaria.payment import validate_payment


class Phase(str, Enum):
    BROWSING = "browsing"
    PAYMENT = "payment"
    RECEIPT = "receipt"


@dataclass(frozen=True)
class OrderState:
    """The whole application state; replaced, never mutated."""

    phase: Phase = Phase.BROWSING
    cart: Cart = Cart()
    submission: PaymentSubmission | None = None
    order_code: str | None = None

    def to_dict(self) -> dict[str, object]:
        """JSON-serializable snapshot."""
        submission = None
        if self.submission is not None:
            change_for = self.submission.change_for
            submission = {
                "method": self.submission.method.code,
                "change_for": format_money(change_for) if change_for is not None else None,
                "address": self.submission.address,
                "phone": self.submission.phone,
                "observation": self.submission.observation,
            }
        return {
            "phase": self.phase.value,
            "cart": [_entry_to_dict(entry) for entry in self.cart.entries],
            "total": format_money(self.cart.total()),
            "submission": submission,
            "order_code": self.order_code,
        }


def _entry_to_dict(entry: CartEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "category": entry.category,
        "name": entry.name,
        "size": entry.size,
        "flavors": list(entry.flavors),
        "unit_price": format_money(entry.unit_price),
        "quantity": entry.quantity,
    }


@dataclass(frozen=True)
class AddItem:
    candidate: ItemCandidate
    entry_id: str | None = None


@dataclass(frozen=True)
class SetQuantity:
    entry_id: str
    quantity: int


@dataclass(frozen=True)
class RequestCheckout:
    pass


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class SubmitPayment:
    draft: PaymentDraft
    order_code: str


@dataclass(frozen=True)
class NewOrder:
    pass


Event = AddItem | SetQuantity | RequestCheckout | Back | SubmitPayment | NewOrder


def _add_item(state: OrderState, event: AddItem) -> OrderState:
    if event.entry_id is None:
        cart = state.cart.add(event.candidate)
    else:
        entry_id = event.entry_id
        cart = state.cart.add(event.candidate, id_factory=lambda: entry_id)
    return replace(state, cart=cart)


def _set_quantity(state: OrderState, event: SetQuantity) -> OrderState:
    return replace(state, cart=state.cart.set_quantity(event.entry_id, event.quantity))


def _request_checkout(state: OrderState, event: RequestCheckout) -> OrderState:
    if state.cart.item_count() == 0:
        raise EmptyCart()
    return replace(state, phase=Phase.PAYMENT)


def _back(state: OrderState, event: Back) -> OrderState:
    return replace(state, phase=Phase.BROWSING)


def _submit_payment(state: OrderState, event: SubmitPayment) -> OrderState:
    submission = validate_payment(event.draft, state.cart.total())
    return replace(state, phase=Phase.RECEIPT, submission=submission, order_code=event.order_code)


def _new_order(state: OrderState, event: NewOrder) -> OrderState:
    return OrderState()


TRANSITIONS: dict[tuple[Phase, type], Callable[[OrderState, object], OrderState]] = {
    (Phase.BROWSING, AddItem): _add_item,
    (Phase.BROWSING, SetQuantity): _set_quantity,
    (Phase.BROWSING, RequestCheckout): _request_checkout,
    (Phase.PAYMENT, Back): _back,
    (Phase.PAYMENT, SubmitPayment): _submit_payment,
    (Phase.RECEIPT, NewOrder): _new_order,
}


def transition(state: OrderState, event: Event) -> OrderState:
    """
    Apply one event and return the next state.

    Raises an OrderError subclass when a guard refuses the event (the input
    state is left as it was) and InvalidTransition when the current phase
    does not define the event at all.
    """
    handler = TRANSITIONS.get((state.phase, type(event)))
    if handler is None:
        raise InvalidTransition(state.phase.value, type(event).__name__)
    return handler(state, event)


def make_order_code(clock: Callable[[], float] = time.time) -> str:
    """Receipt code: prefix plus the last six digits of the millisecond clock."""
    millis = str(int(clock() * 1000))
    return f"{ORDER_CODE_PREFIX}{millis[-6:]}"


class OrderFlowController:
    """Single owner of the order state; every change goes through transition()."""

    def __init__(self, clock: Callable[[], float] = time.time, id_factory: Callable[[], str] = new_entry_id) -> None:
        self.state = OrderState()
        self._clock = clock
        self._id_factory = id_factory

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def cart(self) -> Cart:
        return self.state.cart

    @property
    def submission(self) -> PaymentSubmission | None:
        return self.state.submission

    def dispatch(self, event: Event) -> OrderState:
        name = type(event).__name__
        try:
            next_state = transition(self.state, event)
        except OrderError as exc:
            log_debug("transition_refused", phase=self.state.phase.value, event=name, reason=type(exc).__name__)
            raise
        except InvalidTransition:
            log_debug("transition_invalid", phase=self.state.phase.value, event=name)
            raise
        log_debug(
            "transition",
            event=name,
            src=self.state.phase.value,
            dst=next_state.phase.value,
            entries=next_state.cart.item_count(),
        )
        self.state = next_state
        return next_state

    def add(self, candidate: ItemCandidate) -> CartEntry:
        """Add one unit of a catalog item and return the entry that holds it."""
        state = self.dispatch(AddItem(candidate, entry_id=self._id_factory()))
        entry = state.cart.find(candidate.key)
        if entry is None:
            raise RuntimeError(f"{candidate.name} missing from cart after AddItem")
        return entry

    def set_quantity(self, entry_id: str, quantity: int) -> None:
        self.dispatch(SetQuantity(entry_id, quantity))

    def request_checkout(self) -> None:
        self.dispatch(RequestCheckout())

    def back(self) -> None:
        self.dispatch(Back())

    def submit_payment(self, draft: PaymentDraft) -> PaymentSubmission:
        state = self.dispatch(SubmitPayment(draft, order_code=make_order_code(self._clock)))
        if state.submission is None:
            raise RuntimeError("receipt reached without a payment submission")
        return state.submission

    def new_order(self) -> None:
        self.dispatch(NewOrder())

    def order(self) -> Order:
        """The finalized order; only available on the receipt."""
        if self.state.phase is not Phase.RECEIPT:
            raise InvalidTransition(self.state.phase.value, "order")
        if self.state.submission is None or self.state.order_code is None:
            raise RuntimeError("receipt reached without a payment submission")
        return Order(
            code=self.state.order_code,
            entries=self.state.cart.entries,
            submission=self.state.submission,
            total=self.state.cart.total(),
        )

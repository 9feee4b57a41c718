"""Order flow error taxonomy."""

from __future__ import annotations

from decimal import Decimal


class OrderError(Exception):
    """
    User-input failure that blocks a transition.
    The customer recovers by correcting the input; state never changes.
    """

    default_message = "Pedido inválido."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyCart(OrderError):
    default_message = "Adicione itens ao carrinho antes de confirmar o pedido!"


class MissingAddress(OrderError):
    default_message = "Por favor, preencha o endereço de entrega!"


class MissingPhone(OrderError):
    default_message = "Por favor, preencha o telefone para contato!"


class InsufficientChange(OrderError):
    """Cash handed over would not cover the order total."""

    default_message = "O valor para troco deve ser maior ou igual ao total do pedido!"

    def __init__(self, change_for: Decimal, total: Decimal) -> None:
        self.change_for = change_for
        self.total = total
        super().__init__()


class InvalidTransition(RuntimeError):
    """An event was dispatched in a phase that does not define it."""

    def __init__(self, phase: str, event: str) -> None:
        self.phase = phase
        self.event = event
        super().__init__(f"{event} is not allowed while {phase}")

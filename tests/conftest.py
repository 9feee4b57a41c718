from decimal import Decimal

import pytest

from pizzaria import config
from pizzaria.data import build_pizza
from pizzaria.models import DrinkItem, HamburgerItem, PaymentDraft


@pytest.fixture(autouse=True)
def debug_log(tmp_path, monkeypatch):
    path = tmp_path / "debug.log"
    monkeypatch.setattr(config, "DEBUG_LOG_PATH", str(path))
    return path


@pytest.fixture
def pizza_media():
    return build_pizza("M", ["Calabresa"])


@pytest.fixture
def coca_lata():
    return DrinkItem(name="Coca-Cola Lata", size="350ml", unit_price=Decimal("4.50"))


@pytest.fixture
def x_burger():
    return HamburgerItem(name="X-Burger", unit_price=Decimal("18.90"))


@pytest.fixture
def draft():
    return PaymentDraft(method="card", address="Rua das Flores, 10", phone="(11) 98888-7777")

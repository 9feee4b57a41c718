"""Runtime configuration defaults for the order terminal."""

from __future__ import annotations

import os

RESTAURANT_NAME = "Sabor da Terra"
CONTACT_PHONE = "(11) 99999-9999"
DELIVERY_ESTIMATE = "30-45 minutos"

# Destination for the order summary handoff; never taken from user input.
WHATSAPP_NUMBER = os.environ.get("PIZZARIA_WHATSAPP_NUMBER", "5511999999999")
WHATSAPP_BASE_URL = "https://wa.me"

DEBUG_LOG_PATH = os.environ.get("PIZZARIA_DEBUG_LOG", "/tmp/pizzaria-debug.log")

ORDER_CODE_PREFIX = "SB"

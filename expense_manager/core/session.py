"""
Session State
Per-app state for the single in-memory session: transactions, user name,
selected currency and month, and the timed welcome gate.
"""
import logging
import time
from datetime import date
from enum import Enum
from typing import Callable, Optional

from fastapi import Request

from expense_manager.core.config import Settings
from expense_manager.core.reference import CURRENCIES, get_currency
from expense_manager.db.memory import TransactionStore
from expense_manager.models.transaction import Currency
from expense_manager.utils.analyzer import start_of_month

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    WELCOME = "welcome"
    NAME_PROMPT = "name_prompt"
    READY = "ready"


class WelcomeGate:
    """
    Welcome screen shown for a fixed delay after the session starts, then the
    name prompt until a name is entered. Driven purely by elapsed time.
    """

    def __init__(self, delay_seconds: float, clock: Callable[[], float] = time.monotonic) -> None:
        self._delay = delay_seconds
        self._clock = clock
        self._started_at = clock()

    def elapsed(self) -> float:
        return self._clock() - self._started_at

    def phase(self, has_name: bool) -> Phase:
        if self.elapsed() < self._delay:
            return Phase.WELCOME
        if not has_name:
            return Phase.NAME_PROMPT
        return Phase.READY


class SessionState:
    def __init__(self, settings: Settings, clock: Callable[[], float] = time.monotonic) -> None:
        self.store = TransactionStore()
        self.user_name = ""
        self.currency: Currency = get_currency(settings.DEFAULT_CURRENCY) or CURRENCIES[0]
        self.selected_month: date = start_of_month(date.today())
        self.welcome = WelcomeGate(settings.WELCOME_DELAY_SECONDS, clock=clock)

    @property
    def phase(self) -> Phase:
        return self.welcome.phase(bool(self.user_name))

    def set_user_name(self, name: str) -> None:
        self.user_name = name.strip()
        logger.info(f"User name set to '{self.user_name}'")

    def select_currency(self, code: str) -> Optional[Currency]:
        currency = get_currency(code)
        if currency is None:
            logger.warning(f"Unknown currency code '{code}'")
            return None
        self.currency = currency
        logger.info(f"Currency switched to {currency.code}")
        return currency

    def select_month(self, target: date) -> None:
        self.selected_month = start_of_month(target)
        logger.info(f"Selected month {self.selected_month:%Y-%m}")


def get_session(request: Request) -> SessionState:
    return request.app.state.session

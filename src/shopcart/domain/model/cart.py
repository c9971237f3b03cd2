"""Cart aggregate, the core of the domain.

The Cart owns an ordered list of line items and derives every total from
it on demand.  Checkout is a simulated payment call: it waits for a fixed
delay and then succeeds or fails at random.
"""

from __future__ import annotations

import asyncio
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from decimal import Decimal

from shopcart.domain.exceptions import PaymentFailure
from shopcart.domain.model.line_item import LineItem
from shopcart.domain.model.value_objects import Money

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
TAX_RATE = Decimal("0.10")
SHIPPING_FEE = Money(Decimal("5.00"))
SUCCESS_RATE = 0.8
CHECKOUT_DELAY_SECONDS = 2.0

OutcomeSource = Callable[[], float]
Sleep = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class CheckoutReceipt:
    """Amounts charged by a successful checkout."""

    total_amount: Money
    tax_amount: Money
    shipping_amount: Money


class Cart:
    """Aggregate root holding the line items in insertion order.

    Duplicate ids are allowed; nothing is deduplicated on ``add_item``.

    ``outcome_source`` returns a float in ``[0, 1)`` and decides each
    checkout; ``sleep`` stands in for network latency.  Both are
    injectable so tests stay deterministic and never wait on a clock.
    """

    def __init__(
        self,
        outcome_source: OutcomeSource = random.random,
        sleep: Sleep = asyncio.sleep,
        checkout_delay: float = CHECKOUT_DELAY_SECONDS,
    ) -> None:
        self._items: list[LineItem] = []
        self._outcome_source = outcome_source
        self._sleep = sleep
        self._checkout_delay = checkout_delay

    # --- Mutations ------------------------------------------------------------

    def add_item(self, item: LineItem) -> None:
        self._items.append(item)

    def remove_item(self, product_id: str) -> None:
        """Drop every item whose id matches; unknown ids are ignored."""
        self._items = [item for item in self._items if item.id != product_id]

    # --- Computed properties --------------------------------------------------

    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self._items)

    def get_item_count(self) -> int:
        return len(self._items)

    def get_total_amount(self) -> Decimal:
        """Sum of unit prices.  Quantity is not factored in."""
        return sum((item.price for item in self._items), Decimal("0"))

    def quote(self) -> CheckoutReceipt:
        """Amounts a successful checkout would charge right now."""
        subtotal = Money(self.get_total_amount())
        tax = subtotal * TAX_RATE
        shipping = Money.zero() if self.get_item_count() == 0 else SHIPPING_FEE
        return CheckoutReceipt(
            total_amount=subtotal + tax + shipping,
            tax_amount=tax,
            shipping_amount=shipping,
        )

    # --- Checkout -------------------------------------------------------------

    async def checkout(self) -> CheckoutReceipt:
        """Simulate a payment for the current cart contents.

        Amounts are fixed when the call is made; items added or removed
        while the payment is pending do not change them.  The item list
        itself is left untouched whatever the outcome.

        Raises PaymentFailure when the outcome draw misses ``SUCCESS_RATE``.
        """
        receipt = self.quote()
        await self._sleep(self._checkout_delay)
        if self._outcome_source() < SUCCESS_RATE:
            return receipt
        raise PaymentFailure()

"""Application service: Checkout use case.

Drives the view through the checkout lifecycle: the loader is shown
while the payment is pending, exactly one of the success or error
messages follows, and the loader is hidden whatever the outcome.
"""

from __future__ import annotations

import structlog

from shopcart.application.cart_view import CartView
from shopcart.application.dto import ReceiptDTO, to_receipt_dto
from shopcart.domain.exceptions import PaymentFailure
from shopcart.domain.model.cart import Cart

log = structlog.get_logger(__name__)


class CheckoutHandler:

    def __init__(self, cart: Cart, view: CartView) -> None:
        self._cart = cart
        self._view = view

    async def handle(self) -> ReceiptDTO | None:
        """Run one checkout attempt.

        Returns the receipt on success, or None when the payment failed
        (the failure has already been shown to the user).  No retry.
        """
        item_count = self._cart.get_item_count()
        log.info("checkout_started", item_count=item_count)
        self._view.show_loader()
        try:
            receipt = await self._cart.checkout()
        except PaymentFailure as exc:
            log.warning("checkout_failed", item_count=item_count, reason=str(exc))
            self._view.show_error_message(str(exc))
            return None
        else:
            dto = to_receipt_dto(receipt)
            log.info("checkout_succeeded", total=dto.total_amount)
            self._view.show_success_message(
                f"Payment successful. Total amount: {dto.total_amount}"
            )
            return dto
        finally:
            self._view.hide_loader()

"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the presentation and application layers without
exposing domain internals.  Money fields are pre-formatted, e.g. "$15.00".
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.model.cart import Cart, CheckoutReceipt
from shopcart.domain.model.value_objects import format_currency


@dataclass(frozen=True)
class CartSummaryDTO:
    """Output: what the presentation layer shows after every change."""

    item_count: int
    subtotal: str


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    name: str
    price: str
    quantity: int


@dataclass(frozen=True)
class CartDTO:
    """Output: the full cart as displayed to the user."""

    items: list[CartLineDTO]
    item_count: int
    subtotal: str


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: amounts charged by a successful checkout."""

    total_amount: str
    tax_amount: str
    shipping_amount: str


# --- Mapping ------------------------------------------------------------------


def summarize(cart: Cart) -> CartSummaryDTO:
    return CartSummaryDTO(
        item_count=cart.get_item_count(),
        subtotal=format_currency(cart.get_total_amount()),
    )


def to_receipt_dto(receipt: CheckoutReceipt) -> ReceiptDTO:
    return ReceiptDTO(
        total_amount=str(receipt.total_amount),
        tax_amount=str(receipt.tax_amount),
        shipping_amount=str(receipt.shipping_amount),
    )

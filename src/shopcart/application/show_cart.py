"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from shopcart.application.dto import CartDTO, CartLineDTO
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.value_objects import format_currency


class ShowCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self) -> CartDTO:
        return CartDTO(
            items=[
                CartLineDTO(
                    product_id=item.id,
                    name=item.name,
                    price=format_currency(item.price),
                    quantity=item.quantity,
                )
                for item in self._cart.items
            ],
            item_count=self._cart.get_item_count(),
            subtotal=format_currency(self._cart.get_total_amount()),
        )

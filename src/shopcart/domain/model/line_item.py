"""LineItem: a single product entry in the cart."""

from __future__ import annotations

from decimal import Decimal

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.value_objects import to_decimal


class LineItem:
    """A product entry with fixed identity and a mutable quantity.

    ``id``, ``name`` and ``price`` are read-only.  ``quantity`` is at
    least 1 from construction on and changes only through
    ``increase_quantity()`` / ``decrease_quantity()``.
    """

    __slots__ = ("_id", "_name", "_price", "_quantity")

    def __init__(self, id: str, name: str, price: Decimal, quantity: int = 1) -> None:
        if not isinstance(quantity, int) or quantity < 1:
            raise ValidationError(f"Quantity must be a positive integer, got {quantity!r}")
        self._id = id
        self._name = name
        self._price = price
        self._quantity = quantity

    @staticmethod
    def create(
        id: str,
        name: str,
        price: str | float | int | Decimal,
        quantity: int = 1,
    ) -> LineItem:
        """Build a line item from caller-supplied values.

        No checks on the id format or the price sign are made.  Raises
        ValidationError if *quantity* is below 1.
        """
        return LineItem(id=id, name=name, price=to_decimal(price), quantity=quantity)

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def quantity(self) -> int:
        return self._quantity

    def increase_quantity(self) -> None:
        self._quantity += 1

    def decrease_quantity(self) -> None:
        """Decrement quantity; a no-op once it is down to 1."""
        if self._quantity > 1:
            self._quantity -= 1

    def __repr__(self) -> str:
        return (
            f"LineItem(id={self._id!r}, name={self._name!r}, "
            f"price={self._price!r}, quantity={self._quantity})"
        )

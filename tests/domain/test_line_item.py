"""Unit tests for the LineItem entity."""

from decimal import Decimal

import pytest

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.line_item import LineItem


class TestLineItemCreation:

    def test_defaults_quantity_to_one(self):
        item = LineItem.create("a", "Widget", "20.00")
        assert item.id == "a"
        assert item.name == "Widget"
        assert item.price == Decimal("20.00")
        assert item.quantity == 1

    def test_explicit_quantity(self):
        assert LineItem.create("a", "Widget", 1, quantity=4).quantity == 4

    def test_float_price_coerced_to_decimal(self):
        assert LineItem.create("a", "Widget", 3.1).price == Decimal("3.1")

    def test_no_validation_on_price_or_id(self):
        item = LineItem.create("", "", -5)
        assert item.id == ""
        assert item.price == Decimal("-5")

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError, match="positive integer"):
            LineItem.create("a", "Widget", "1", quantity=0)

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError, match="positive integer"):
            LineItem.create("a", "Widget", "1", quantity=-3)

    def test_non_integer_quantity_rejected(self):
        with pytest.raises(ValidationError, match="positive integer"):
            LineItem.create("a", "Widget", "1", quantity=1.5)

    @pytest.mark.parametrize("attr", ["id", "name", "price", "quantity"])
    def test_fields_are_read_only(self, attr):
        item = LineItem.create("a", "Widget", "1")
        with pytest.raises(AttributeError):
            setattr(item, attr, "changed")


class TestLineItemQuantity:

    def test_increase(self):
        item = LineItem.create("a", "Widget", "1")
        item.increase_quantity()
        item.increase_quantity()
        assert item.quantity == 3

    def test_increase_is_unbounded(self):
        item = LineItem.create("a", "Widget", "1")
        for _ in range(1000):
            item.increase_quantity()
        assert item.quantity == 1001

    def test_decrease(self):
        item = LineItem.create("a", "Widget", "1", quantity=3)
        item.decrease_quantity()
        assert item.quantity == 2

    def test_decrease_at_one_stays_at_one(self):
        item = LineItem.create("a", "Widget", "1")
        item.decrease_quantity()
        assert item.quantity == 1

    def test_decrease_never_goes_below_one(self):
        item = LineItem.create("a", "Widget", "1", quantity=2)
        for _ in range(5):
            item.decrease_quantity()
        assert item.quantity == 1

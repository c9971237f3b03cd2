"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from shopcart.domain.exceptions import ValidationError

CURRENCY_SYMBOL = "$"


def to_decimal(amount: str | float | int | Decimal) -> Decimal:
    """Coerce a number to Decimal via its string form.

    Going through ``str`` keeps ``0.1`` as ``Decimal("0.1")`` instead of
    the binary float expansion.
    """
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def format_currency(amount: str | float | int | Decimal) -> str:
    """Render *amount* fixed to two decimal places with a currency symbol.

    Strings are parsed like caller input: ValidationError if not numeric.
    """
    if isinstance(amount, str):
        amount = Money.of(amount).amount
    return f"{CURRENCY_SYMBOL}{to_decimal(amount):.2f}"


@dataclass(frozen=True)
class Money:
    """Monetary amount.

    Uses Decimal to avoid floating-point rounding errors in totals.
    Unlike a ledger amount, a cart price may be any number the caller
    supplies, so no sign check is made here.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: Decimal | int) -> Money:
        if not isinstance(factor, (Decimal, int)):
            raise TypeError(
                f"Can only multiply Money by Decimal or int, got {type(factor).__name__}"
            )
        return Money(self.amount * factor)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return format_currency(self.amount)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Parse caller input into Money.

        Raises ValidationError for anything that is not a finite number.
        """
        try:
            value = to_decimal(amount.strip() if isinstance(amount, str) else amount)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite():
            raise ValidationError(f"Invalid money amount: {amount!r}")
        return Money(value)

"""Abstract output port for the presentation layer.

Defined in the application layer so handlers never depend on a concrete
UI.  Implementations (console, test fakes) live elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.application.dto import CartSummaryDTO


class CartView(ABC):

    @abstractmethod
    def render_summary(self, summary: CartSummaryDTO) -> None:
        """Show the current item count and subtotal."""

    @abstractmethod
    def show_loader(self) -> None:
        """Show the busy indicator while a checkout is pending."""

    @abstractmethod
    def hide_loader(self) -> None:
        """Hide the busy indicator."""

    @abstractmethod
    def show_success_message(self, message: str) -> None:
        """Tell the user the payment went through."""

    @abstractmethod
    def show_error_message(self, message: str) -> None:
        """Tell the user the payment failed."""

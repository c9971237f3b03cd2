"""Tests for the console CartView."""

from shopcart.application.dto import CartSummaryDTO
from shopcart.infrastructure.cli.console_view import ConsoleCartView


def test_loader_lifecycle_output(capsys) -> None:
    view = ConsoleCartView()

    view.show_loader()
    view.hide_loader()

    assert capsys.readouterr().out == "Processing payment...\n"


def test_summary_rendered(capsys) -> None:
    ConsoleCartView().render_summary(CartSummaryDTO(item_count=2, subtotal="$23.10"))
    assert capsys.readouterr().out == "Items: 2  Subtotal: $23.10\n"


def test_quiet_view_skips_summary(capsys) -> None:
    ConsoleCartView(quiet=True).render_summary(CartSummaryDTO(item_count=1, subtotal="$1.00"))
    assert capsys.readouterr().out == ""


def test_error_goes_to_stderr(capsys) -> None:
    ConsoleCartView().show_error_message("Failed to process the payment. Please try again.")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Failed to process the payment" in captured.err

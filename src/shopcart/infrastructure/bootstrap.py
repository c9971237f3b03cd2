"""Composition root: wires the cart to its runtime collaborators.

This is the only place that decides where checkout randomness and
latency come from.  Every other module receives them by injection.
"""

from __future__ import annotations

import random

from shopcart.domain.model.cart import CHECKOUT_DELAY_SECONDS, Cart


def cart(
    seed: int | None = None,
    checkout_delay: float = CHECKOUT_DELAY_SECONDS,
) -> Cart:
    """Build the process-wide cart.

    A *seed* gives a reproducible sequence of checkout outcomes.
    """
    rng = random.Random(seed)
    return Cart(outcome_source=rng.random, checkout_delay=checkout_delay)

from typing import Protocol, runtime_checkable


@runtime_checkable
class CheckoutScreen(Protocol):
    """
    A step of the checkout flow. What "loaded" means differs per step, so
    every step supplies its own check instead of sharing one.
    """

    def verify_page_loaded(self) -> None:
        ...

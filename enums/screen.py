from enum import Enum


class Screen(Enum):
    """Screens of the shop workflow with their URL path and title text."""

    LOGIN = ("", None)
    PRODUCTS = ("inventory.html", "Products")
    CART = ("cart.html", "Your Cart")
    CHECKOUT_STEP_ONE = ("checkout-step-one.html", "Checkout: Your Information")
    CHECKOUT_STEP_TWO = ("checkout-step-two.html", "Checkout: Overview")
    CHECKOUT_COMPLETE = ("checkout-complete.html", "Checkout: Complete!")

    def __init__(self, path: str, title):
        self.path = path
        self.title = title

    @property
    def next_screen(self):
        """Screen reached by the default forward action on this one."""
        return _NEXT_SCREENS[self]


_NEXT_SCREENS = {
    Screen.LOGIN: Screen.PRODUCTS,
    Screen.PRODUCTS: Screen.CART,
    Screen.CART: Screen.CHECKOUT_STEP_ONE,
    Screen.CHECKOUT_STEP_ONE: Screen.CHECKOUT_STEP_TWO,
    Screen.CHECKOUT_STEP_TWO: Screen.CHECKOUT_COMPLETE,
    Screen.CHECKOUT_COMPLETE: Screen.PRODUCTS,
}

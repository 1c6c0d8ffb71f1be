import logging
from typing import Optional
from pages.cart_page import CartPage
from pages.checkout_complete_page import CheckoutCompletePage
from pages.checkout_page import CheckoutScreen
from pages.checkout_step_one_page import CheckoutStepOnePage
from pages.checkout_step_two_page import CheckoutStepTwoPage
from pages.login_page import LoginPage
from pages.products_page import ProductsPage
from utils.data_generator import CustomerData

logger = logging.getLogger(__name__)


class ShopService:
    """
    Multi-screen shopper workflows. Each step confirms the screen it lands
    on before returning its page object.
    """

    def arrive_at(self, step: CheckoutScreen) -> CheckoutScreen:
        step.verify_page_loaded()
        return step

    def login(self, page, config, username: Optional[str] = None,
              password: Optional[str] = None) -> ProductsPage:
        login_page = LoginPage(page, config)
        login_page.open()
        if username is None and password is None:
            login_page.login_with_valid_credentials()
        else:
            login_page.login(username or "", password or "")
        login_page.verify_successful_login()

        products_page = ProductsPage(page, config)
        products_page.verify_page_loaded()
        return products_page

    def add_products_to_cart(self, page, config, product_names) -> CartPage:
        products_page = ProductsPage(page, config)
        for product_name in product_names:
            products_page.add_product_to_cart(product_name)
        products_page.verify_cart_item_count(len(product_names))
        products_page.click_shopping_cart()

        cart_page = CartPage(page, config)
        cart_page.verify_page_loaded()
        for product_name in product_names:
            cart_page.verify_product_in_cart(product_name)
        return cart_page

    def checkout(self, page, config, customer: Optional[CustomerData] = None) -> CheckoutStepTwoPage:
        CartPage(page, config).click_checkout()

        step_one_page = CheckoutStepOnePage(page, config)
        self.arrive_at(step_one_page)
        if customer is None:
            customer = step_one_page.fill_random_customer_information()
        else:
            step_one_page.fill_customer_information(customer.first_name, customer.last_name,
                                                    customer.zip_code)
        logger.info("Checkout as %s %s", customer.first_name, customer.last_name)
        step_one_page.click_continue()

        step_two_page = CheckoutStepTwoPage(page, config)
        self.arrive_at(step_two_page)
        return step_two_page

    def place_order(self, page, config, product_names,
                    customer: Optional[CustomerData] = None) -> CheckoutCompletePage:
        self.login(page, config)
        self.add_products_to_cart(page, config, product_names)
        step_two_page = self.checkout(page, config, customer)
        step_two_page.verify_order_item_count(len(product_names))
        step_two_page.click_finish()

        complete_page = CheckoutCompletePage(page, config)
        complete_page.verify_complete_order_success()
        return complete_page

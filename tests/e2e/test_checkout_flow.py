import pytest
from common.constants import (MISSING_FIRST_NAME_ERROR, MISSING_LAST_NAME_ERROR,
                              MISSING_POSTAL_CODE_ERROR, SAUCE_LABS_BACKPACK)
from pages.cart_page import CartPage
from pages.checkout_complete_page import CheckoutCompletePage
from pages.checkout_step_one_page import CheckoutStepOnePage
from pages.checkout_step_two_page import CheckoutStepTwoPage
from pages.products_page import ProductsPage
from services.shop_service import ShopService
from utils.data_generator import CustomerData, generate_customer_data

pytestmark = pytest.mark.e2e


@pytest.fixture
def cart_page(page, config):
    shop_service = ShopService()
    shop_service.login(page, config)
    return shop_service.add_products_to_cart(page, config, [SAUCE_LABS_BACKPACK])


# Page objects are used directly in the test
def test_complete_purchase_flow(page, config, cart_page):
    cart_page.verify_checkout_button_visible()
    cart_page.click_checkout()

    step_one_page = CheckoutStepOnePage(page, config)
    step_one_page.verify_page_loaded()
    customer = step_one_page.complete_step_one_with_random_data()
    assert customer.zip_code.isdigit() and len(customer.zip_code) == 5

    step_two_page = CheckoutStepTwoPage(page, config)
    step_two_page.verify_page_loaded()
    step_two_page.verify_sauce_labs_backpack_in_order_summary()
    step_two_page.verify_order_item_count(1)
    step_two_page.verify_order_summary_complete()
    assert step_two_page.get_total_amount().startswith("$")
    assert step_two_page.get_payment_information()
    assert step_two_page.get_shipping_information()
    step_two_page.click_finish()

    complete_page = CheckoutCompletePage(page, config)
    complete_page.verify_complete_order_success()
    complete_page.click_back_home()

    products_page = ProductsPage(page, config)
    products_page.verify_page_loaded()
    products_page.verify_cart_item_count(0)


# Test with shop service
def test_place_order_with_shop_service(page, config):
    complete_page = ShopService().place_order(
        page, config, [SAUCE_LABS_BACKPACK, "Sauce Labs Bike Light"])
    complete_page.verify_success_message("Your order has been dispatched")


def test_customer_information_round_trip(page, config, cart_page):
    cart_page.click_checkout()
    step_one_page = CheckoutStepOnePage(page, config)
    customer = generate_customer_data()
    step_one_page.fill_customer_information(customer.first_name, customer.last_name, customer.zip_code)

    assert step_one_page.get_first_name_value() == customer.first_name
    assert step_one_page.get_last_name_value() == customer.last_name
    assert step_one_page.get_zip_code_value() == customer.zip_code
    step_one_page.verify_all_fields_filled()

    step_one_page.clear_all_fields()
    assert step_one_page.get_first_name_value() == ""


@pytest.mark.parametrize("first_name, last_name, zip_code, error_message", [
    ("", "", "", MISSING_FIRST_NAME_ERROR),
    ("Ann", "", "12345", MISSING_LAST_NAME_ERROR),
    ("Ann", "Lee", "", MISSING_POSTAL_CODE_ERROR),
])
def test_customer_information_required(page, config, cart_page,
                                       first_name, last_name, zip_code, error_message):
    cart_page.click_checkout()
    step_one_page = CheckoutStepOnePage(page, config)
    step_one_page.fill_customer_information(first_name, last_name, zip_code)
    step_one_page.click_continue()

    step_one_page.verify_error_message(error_message)
    step_one_page.verify_page_loaded()


def test_order_totals_are_consistent(page, config):
    shop_service = ShopService()
    shop_service.login(page, config)
    shop_service.add_products_to_cart(page, config, [SAUCE_LABS_BACKPACK, "Sauce Labs Fleece Jacket"])
    step_two_page = shop_service.checkout(page, config, CustomerData("Ann", "Lee", "12345"))

    step_two_page.verify_order_item_count(2)
    assert sorted(step_two_page.get_all_product_names_in_order_summary()) == [
        SAUCE_LABS_BACKPACK, "Sauce Labs Fleece Jacket"]
    step_two_page.verify_order_totals()


def test_cancel_checkout_returns_to_cart(page, config, cart_page):
    cart_page.click_checkout()
    step_one_page = CheckoutStepOnePage(page, config)
    step_one_page.click_cancel()

    cart_page = CartPage(page, config)
    cart_page.verify_page_loaded()
    cart_page.verify_sauce_labs_backpack_in_cart()


def test_cancel_overview_returns_to_products(page, config, cart_page):
    step_two_page = ShopService().checkout(page, config)
    step_two_page.click_cancel()

    products_page = ProductsPage(page, config)
    products_page.verify_page_loaded()
    products_page.verify_cart_item_count(1)

# Literal values of the saucedemo shop under test.

BASE_URL = "https://www.saucedemo.com/"

# Test users
VALID_USERNAME = "standard_user"
VALID_PASSWORD = "secret_sauce"

# Products
SAUCE_LABS_BACKPACK = "Sauce Labs Backpack"

# Success messages
ORDER_COMPLETE_HEADER = "THANK YOU FOR YOUR ORDER"
ORDER_COMPLETE_MESSAGE = "Thank you for your order!"
ORDER_DISPATCHED_MESSAGE = "Your order has been dispatched"

# Error messages
INVALID_CREDENTIALS_ERROR = "Epic sadface: Username and password do not match any user in this service"
MISSING_USERNAME_ERROR = "Epic sadface: Username is required"
MISSING_PASSWORD_ERROR = "Epic sadface: Password is required"
MISSING_FIRST_NAME_ERROR = "Error: First Name is required"
MISSING_LAST_NAME_ERROR = "Error: Last Name is required"
MISSING_POSTAL_CODE_ERROR = "Error: Postal Code is required"

# Timeouts (ms)
DEFAULT_ELEMENT_TIMEOUT = 10000
DEFAULT_PAGE_TIMEOUT = 30000
DEFAULT_LOAD_STATE = "networkidle"

# Selector placeholder replaced with a locator's bound keyword
KEYWORD_PLACEHOLDER = "#KEYWORD#"

# Order summary label prefixes
SUBTOTAL_LABEL = "Item total: "
TAX_LABEL = "Tax: "
TOTAL_LABEL = "Total: "

# Product sort options
SORT_NAME_ASC = "az"
SORT_NAME_DESC = "za"
SORT_PRICE_ASC = "lohi"
SORT_PRICE_DESC = "hilo"

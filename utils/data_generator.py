"""
Random test data for the checkout forms, generated with Faker.
"""

from dataclasses import dataclass

from faker import Faker

fake = Faker("en_US")


@dataclass(frozen=True)
class CustomerData:
    first_name: str
    last_name: str
    zip_code: str


def generate_first_name() -> str:
    return fake.first_name()


def generate_last_name() -> str:
    return fake.last_name()


def generate_zip_code() -> str:
    """Random 5 digit ZIP code without a leading zero."""
    return str(fake.random_int(min=10000, max=99999))


def generate_customer_data() -> CustomerData:
    """Random first name, last name and ZIP code for checkout step one."""
    return CustomerData(
        first_name=generate_first_name(),
        last_name=generate_last_name(),
        zip_code=generate_zip_code(),
    )


def generate_email() -> str:
    return fake.email()


def generate_phone_number() -> str:
    """Random US phone number formatted as '(AAA) BBB-CCCC'."""
    area_code = fake.random_int(min=200, max=999)
    exchange = fake.random_int(min=200, max=999)
    line = fake.random_int(min=1000, max=9999)
    return f"({area_code}) {exchange}-{line}"

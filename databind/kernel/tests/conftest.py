"""
Kernel test configuration.

Sample entities shared by the entity, mode, and reducer tests: one component
prop and the two datasets a host would offer.
"""

import pytest

from databind.kernel.entities import dataset_of, field_of, prop_of

CATALOG_REF = {"type": "something", "id": "somesuch"}
PURCHASES_REF = {"type": "somethingElse", "id": "somesuchOther"}


@pytest.fixture
def value_prop():
    return prop_of("value", ["Text", "Number"])


@pytest.fixture
def catalog():
    return dataset_of(
        name="Catalog",
        controller_ref=CATALOG_REF,
        fields=[field_of("title", "Text"), field_of("price", "Number")],
    )


@pytest.fixture
def purchases():
    return dataset_of(
        name="Purchases",
        controller_ref=PURCHASES_REF,
        fields=[
            field_of("invoiceNumber", "Number"),
            field_of("totalAmount", "Number"),
            field_of("email", "Text"),
        ],
    )

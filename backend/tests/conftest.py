"""Root conftest — shared catalog records for core and API tests."""

import os

import pytest

from catalog.core.domain_types import (
    Category, CategoryId, Product, ProductId, Sex, User, UserId,
)
from catalog.core.join_catalog import CatalogIndex

# Keep test output readable
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def users():
    return [
        User(UserId(1), "Roma", Sex.MALE),
        User(UserId(2), "Anna", Sex.FEMALE),
        User(UserId(3), "Max", Sex.MALE),
    ]


@pytest.fixture
def categories():
    return [
        Category(CategoryId(1), "Grocery", "🍞", UserId(2)),
        Category(CategoryId(2), "Drinks", "🍺", UserId(1)),
        Category(CategoryId(3), "Fruits", "🍏", UserId(3)),
    ]


@pytest.fixture
def products():
    return [
        Product(ProductId(1), "Milk", CategoryId(2)),
        Product(ProductId(2), "Bread", CategoryId(1)),
        Product(ProductId(3), "Apple", CategoryId(3)),
        Product(ProductId(4), "Banana", CategoryId(3)),
        Product(ProductId(5), "Sugar", CategoryId(1)),
    ]


@pytest.fixture
def catalog_index(products, categories, users):
    return CatalogIndex.build(products, categories, users)

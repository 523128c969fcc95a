"""Pytest configuration and fixtures"""
from decimal import Decimal

import pytest

from shopcart import App, Cart, CartItem, SummaryFormatter


@pytest.fixture
def empty_cart():
    """Cart with no items"""
    return Cart()


@pytest.fixture
def sample_cart():
    """Cart holding items priced 10.00 and 5.50"""
    return Cart(items=[
        CartItem(identifier="notebook", price=Decimal("10.00")),
        CartItem(identifier="pen", price=Decimal("5.50")),
    ])


@pytest.fixture
def formatter():
    """Formatter with the default template"""
    return SummaryFormatter("Total: {total}, Items: {count}")


@pytest.fixture
def make_app(formatter):
    """Build an App around a cart and a list of item names"""
    def _make(cart=None, items=()):
        return App(cart=cart, formatter=formatter, items=items)
    return _make

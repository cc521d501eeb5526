import unittest
from decimal import Decimal

from apps.carts.models import Cart, Product, subtract_money, to_money
from .factories import make_cart, make_product


class ProductModelTests(unittest.TestCase):
    def test_build_computes_line_total(self):
        product = make_product(price="12.35", quantity=3)
        self.assertEqual(product.total, Decimal("37.05"))
        self.assertEqual(product.price, Decimal("12.35"))

    def test_price_is_rounded_to_cents(self):
        product = Product.build("p", "t", "d", "u", price=1.005, quantity=2)
        self.assertEqual(product.price, Decimal("1.01"))
        self.assertEqual(product.total, Decimal("2.02"))

    def test_equality_is_by_id(self):
        self.assertEqual(make_product("p1", price="1.00"), make_product("p1", price="2.00"))
        self.assertNotEqual(make_product("p1"), make_product("p2"))


class CartModelTests(unittest.TestCase):
    def test_build_derives_totals(self):
        cart = make_cart(
            products=[
                make_product("a", price="10.00", quantity=2),
                make_product("b", price="5.50", quantity=4),
            ]
        )
        self.assertEqual(cart.total, Decimal("42.00"))
        self.assertEqual(cart.discount, Decimal("0.00"))
        self.assertEqual(cart.total_products, 2)
        self.assertEqual(cart.total_quantity, 6)

    def test_build_subtracts_initial_discount(self):
        cart = Cart.build("c", "u", "s", [make_product(price="50.00")], discount="7.5")
        self.assertEqual(cart.total, Decimal("42.50"))
        self.assertEqual(cart.discount, Decimal("7.50"))

    def test_empty_cart(self):
        cart = Cart.build("c", "u", "s")
        self.assertEqual(cart.products, [])
        self.assertEqual(cart.total, Decimal("0.00"))
        self.assertEqual(cart.total_quantity, 0)

    def test_to_money(self):
        self.assertEqual(to_money("3"), Decimal("3.00"))
        self.assertEqual(to_money(2.675), Decimal("2.68"))

    def test_to_money_keeps_large_amounts(self):
        self.assertEqual(str(to_money("1e30")), "1" + "0" * 30 + ".00")
        self.assertEqual(to_money("9.995"), Decimal("10.00"))

    def test_subtract_money_is_exact(self):
        self.assertEqual(subtract_money("50.00", "10"), Decimal("40.00"))
        self.assertEqual(
            str(subtract_money("0.01", "1" + "0" * 40)),
            "-" + "9" * 40 + ".99",
        )

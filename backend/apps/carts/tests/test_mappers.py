import unittest
from decimal import Decimal

from apps.carts.mappers import CartMapper, ProductMapper
from .factories import make_cart, make_product


class CartMapperTests(unittest.TestCase):
    def setUp(self):
        self.mapper = CartMapper(ProductMapper())

    def test_to_document_uses_camel_case_and_string_decimals(self):
        cart = make_cart(products=[make_product(price="3.10", quantity=2)])
        document = self.mapper.to_document(cart)
        self.assertEqual(document["userId"], "frodo@example.com")
        self.assertEqual(document["sessionId"], "session-c1")
        self.assertEqual(document["total"], "6.20")
        self.assertEqual(document["discount"], "0.00")
        self.assertEqual(document["totalProducts"], 1)
        self.assertEqual(document["totalQuantity"], 2)
        self.assertEqual(document["products"][0]["thumbnailUrl"], "https://example.com/p1.png")
        self.assertEqual(document["products"][0]["price"], "3.10")

    def test_from_document_restores_stored_values(self):
        document = {
            "id": "c9",
            "userId": "sam@example.com",
            "sessionId": "s",
            "products": [
                {
                    "id": "p",
                    "title": "Rope",
                    "description": "Elven rope",
                    "thumbnailUrl": "u",
                    "price": "2.00",
                    "quantity": 5,
                    "total": "10.00",
                }
            ],
            "total": "7.00",
            "discount": "3.00",
            "totalProducts": 1,
            "totalQuantity": 5,
        }
        cart = self.mapper.from_document(document)
        # stored totals are taken as-is, not recomputed
        self.assertEqual(cart.total, Decimal("7.00"))
        self.assertEqual(cart.discount, Decimal("3.00"))
        self.assertEqual(cart.products[0].total, Decimal("10.00"))
        self.assertEqual(cart.products[0].thumbnail_url, "u")

    def test_from_document_defaults_missing_counters(self):
        cart = self.mapper.from_document(
            {"id": "c", "products": [{"id": "p", "quantity": 4, "price": "1", "total": "4"}]}
        )
        self.assertEqual(cart.total_products, 1)
        self.assertEqual(cart.total_quantity, 4)
        self.assertEqual(cart.discount, Decimal("0.00"))
        self.assertEqual(cart.user_id, "")

    def test_to_dto(self):
        dto = self.mapper.to_dto(make_cart(products=[make_product(price="1.50", quantity=2)]))
        self.assertEqual(dto.total, "3.00")
        self.assertEqual(dto.products[0].total, "3.00")
        self.assertEqual(dto.total_quantity, 2)
        self.assertEqual(len(self.mapper.many_to_dto([make_cart("a"), make_cart("b")])), 2)

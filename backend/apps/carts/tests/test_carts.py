from decimal import Decimal
from unittest.mock import patch

from django.test import SimpleTestCase

from apps.carts.container import build_cart_service
from apps.carts.views import CartDetailView, CartDiscountView, CartListView, CartPageView
from .factories import make_cart, make_client, make_product, make_repository


class TestCartPages(SimpleTestCase):
    def setUp(self):
        self.store = make_client()
        self.repo = make_repository(self.store)
        for cart_id, price in (("c1", "50.00"), ("c2", "10.00"), ("c3", "75.00")):
            self.repo.save(make_cart(cart_id, products=[make_product(price=price)]))
        service = build_cart_service(self.store)
        self.patchers = [
            patch.object(view, "service", service)
            for view in (CartPageView, CartListView, CartDetailView, CartDiscountView)
        ]
        for patcher in self.patchers:
            patcher.start()

    def tearDown(self):
        for patcher in self.patchers:
            patcher.stop()

    def test_search_cart_lists_matching_carts_ascending(self):
        res = self.client.post("/searchCart", {"total": "50"})
        self.assertEqual(res.status_code, 200)
        self.assertEqual([c["id"] for c in res.context["carts"]], ["c1", "c3"])
        self.assertContains(res, "Carts with total &ge; 50")
        self.assertNotContains(res, "csrfmiddlewaretoken")

    def test_apply_discount_compounds_and_rerenders(self):
        res = self.client.post("/applyDiscount", {"cartId": "c1", "total": "0", "discount": "10"})
        self.assertEqual(res.status_code, 200)
        carts = {c["id"]: c for c in res.context["carts"]}
        self.assertEqual(carts["c1"]["total"], "40.00")
        self.assertEqual(carts["c1"]["discount"], "10.00")

        res = self.client.post("/applyDiscount", {"cartId": "c1", "total": "0", "discount": "5"})
        carts = {c["id"]: c for c in res.context["carts"]}
        self.assertEqual(carts["c1"]["total"], "35.00")
        self.assertEqual(carts["c1"]["discount"], "5.00")
        self.assertEqual(self.repo.find_by_id("c1").total, Decimal("35.00"))

    def test_apply_discount_filters_with_submitted_total(self):
        res = self.client.post("/applyDiscount", {"cartId": "c3", "total": "60", "discount": "20"})
        self.assertEqual([c["id"] for c in res.context["carts"]], [])

    def test_apply_discount_unknown_cart_does_not_create(self):
        res = self.client.post("/applyDiscount", {"cartId": "ghost", "total": "0", "discount": "5"})
        self.assertEqual(res.status_code, 200)
        self.assertIsNone(self.repo.find_by_id("ghost"))
        self.assertEqual(self.repo.count(), 3)

    def test_huge_threshold_renders_empty_list(self):
        res = self.client.post("/searchCart", {"total": "1e30"})
        self.assertEqual(res.status_code, 200)
        self.assertEqual(list(res.context["carts"]), [])
        self.assertContains(res, "No carts found.")

    def test_huge_discount_renders_list(self):
        res = self.client.post("/applyDiscount", {"cartId": "c2", "total": "-1e31", "discount": "1e30"})
        self.assertEqual(res.status_code, 200)
        carts = {c["id"]: c for c in res.context["carts"]}
        self.assertEqual(carts["c2"]["total"], "-" + "9" * 29 + "0.00")

    def test_invalid_total_renders_error_page(self):
        res = self.client.post("/searchCart", {"total": ""})
        self.assertEqual(res.status_code, 400)
        self.assertContains(res, "Validation failed", status_code=400)

    def test_json_body_on_form_page_is_rejected(self):
        res = self.client.post("/searchCart", {"total": "1"}, content_type="application/json")
        self.assertEqual(res.status_code, 415)
        self.assertContains(res, "Unsupported media type", status_code=415)

    def test_api_round_trip(self):
        res = self.client.get("/api/carts/", {"minTotal": "20"})
        self.assertEqual(res.status_code, 200)
        self.assertEqual([c["id"] for c in res.json()], ["c1", "c3"])

        res = self.client.post(
            "/api/carts/c2/discount/", {"discount": "2.5"}, content_type="application/json"
        )
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["total"], "7.50")

        res = self.client.get("/api/carts/c2")
        self.assertEqual(res.json()["discount"], "2.50")

        res = self.client.get("/api/carts/ghost/")
        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.json()["error"]["code"], "NOT_FOUND")

from django.conf import settings
from django.test import SimpleTestCase

from .test_store import open_store


class SessionPagesTests(SimpleTestCase):
    def session_id(self):
        return self.client.cookies[settings.SESSION_COOKIE_NAME].value

    def test_first_visit_sets_session_cookie(self):
        res = self.client.get("/home")
        self.assertEqual(res.status_code, 200)
        cookie = res.cookies[settings.SESSION_COOKIE_NAME]
        self.assertTrue(cookie.value)
        self.assertTrue(cookie["httponly"])
        self.assertEqual(list(res.context["session_attribute_names"]), [])
        self.assertContains(res, "No attributes stored in this session.")
        self.assertNotContains(res, "csrfmiddlewaretoken")
        self.assertContains(res, cookie.value)

    def test_set_value_then_home_lists_names(self):
        self.client.get("/home")
        session_id = self.session_id()

        res = self.client.post("/setValue", {"key": "colour", "value": "green"})
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.context["session_attribute_names"], ["colour"])

        res = self.client.get("/setValue", {"key": "size", "value": "xl"})
        self.assertEqual(res.context["session_attribute_names"], ["colour", "size"])
        self.assertEqual(self.session_id(), session_id)
        self.assertEqual(open_store(session_id).get("size"), "xl")

        res = self.client.get("/home")
        self.assertContains(res, "<li>colour</li>")
        self.assertContains(res, "<li>size</li>")

    def test_set_value_on_first_visit_starts_session(self):
        res = self.client.post("/setValue", {"key": "k", "value": "v"})
        self.assertEqual(res.status_code, 200)
        self.assertEqual(open_store(self.session_id()).attribute_names(), ["k"])

    def test_set_value_ignores_incomplete_pairs(self):
        self.client.get("/")
        session_id = self.session_id()
        for params in ({}, {"key": "k"}, {"value": "v"}, {"key": "", "value": "v"}):
            res = self.client.post("/setValue", params)
            self.assertEqual(res.status_code, 200)
        self.assertEqual(open_store(session_id).attribute_names(), [])

    def test_sessions_do_not_leak_between_clients(self):
        self.client.post("/setValue", {"key": "k", "value": "v"})
        other = self.client_class()
        res = other.get("/home")
        self.assertEqual(list(res.context["session_attribute_names"]), [])

    def test_unknown_cookie_gets_replaced(self):
        forged = "f" * 32
        self.client.cookies[settings.SESSION_COOKIE_NAME] = forged
        res = self.client.get("/home")
        self.assertNotEqual(res.cookies[settings.SESSION_COOKIE_NAME].value, forged)

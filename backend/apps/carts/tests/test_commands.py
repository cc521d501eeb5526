import unittest
from io import StringIO
from unittest.mock import patch

from django.core.management import call_command

from apps.carts.seed import CartSeeder
from .factories import make_cart, make_client, make_repository


class SeedCartsCommandTests(unittest.TestCase):
    def setUp(self):
        self.client = make_client()
        self.repo = make_repository(self.client)

        def build_seeder(seed=None):
            return CartSeeder(make_repository(self.client), seed=seed)

        self.patcher = patch(
            "apps.carts.management.commands.seed_carts.build_cart_seeder",
            side_effect=build_seeder,
        )
        self.mock_build = self.patcher.start()

    def tearDown(self):
        self.patcher.stop()

    def test_command_replaces_carts(self):
        self.repo.save(make_cart("stale"))
        out = StringIO()
        call_command("seed_carts", count=3, seed=7, stdout=out)
        self.assertEqual(self.repo.count(), 3)
        self.assertIsNone(self.repo.find_by_id("stale"))
        self.assertIn("Seeded 3 carts.", out.getvalue())
        self.mock_build.assert_called_once_with(seed=7)

    def test_command_defaults_to_configured_count(self):
        call_command("seed_carts", stdout=StringIO())
        self.assertEqual(self.repo.count(), 10)

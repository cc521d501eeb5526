from django.conf import settings
from django.core.management.base import BaseCommand

from apps.carts.container import build_cart_seeder


class Command(BaseCommand):
    help = "Delete all carts and generate a fresh set of demo carts."

    def add_arguments(self, parser):
        parser.add_argument(
            "--count",
            type=int,
            default=settings.SEED_CART_COUNT,
            help="Number of carts to generate",
        )
        parser.add_argument(
            "--seed",
            type=int,
            default=None,
            help="Seed for the fake data generator (repeatable data sets)",
        )

    def handle(self, *args, **options):
        seeder = build_cart_seeder(seed=options["seed"])
        self.stdout.write("Seeding carts...")
        carts = seeder.run(options["count"])
        for cart in carts:
            self.stdout.write(
                f"  cart {cart.id}: {cart.total_products} products, total {cart.total}"
            )
        self.stdout.write(self.style.SUCCESS(f"Seeded {len(carts)} carts."))

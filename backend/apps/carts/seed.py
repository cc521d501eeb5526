from __future__ import annotations

from typing import List, Optional

from faker import Faker

from apps.common import get_logger
from .models import Cart, Product
from .protocols import CartRepositoryProtocol

logger = get_logger(__name__).bind(component="carts", layer="seed")

DEFAULT_CART_COUNT = 10
MIN_PRODUCTS, MAX_PRODUCTS = 1, 10
MIN_QUANTITY, MAX_QUANTITY = 1, 10
MIN_PRICE, MAX_PRICE = 1, 100


class CartSeeder:
    """Replaces the stored carts with freshly generated demo data."""

    def __init__(
        self,
        carts: CartRepositoryProtocol,
        *,
        faker: Optional[Faker] = None,
        seed: Optional[int] = None,
    ):
        self.carts = carts
        self.faker = faker or Faker()
        if seed is not None:
            self.faker.seed_instance(seed)

    def make_product(self) -> Product:
        fake = self.faker
        return Product.build(
            id=fake.ean8(),
            title=fake.catch_phrase(),
            description=fake.sentence(nb_words=8),
            thumbnail_url=fake.image_url(),
            price=fake.pydecimal(right_digits=2, min_value=MIN_PRICE, max_value=MAX_PRICE),
            quantity=fake.random_int(MIN_QUANTITY, MAX_QUANTITY),
        )

    def make_products(self, count: int) -> List[Product]:
        return [self.make_product() for _ in range(count)]

    def make_cart(self) -> Cart:
        fake = self.faker
        products = self.make_products(fake.random_int(MIN_PRODUCTS, MAX_PRODUCTS))
        return Cart.build(
            id=fake.ean8(),
            user_id=fake.email(),
            session_id=fake.uuid4(),
            products=products,
        )

    def run(self, count: int = DEFAULT_CART_COUNT) -> List[Cart]:
        removed = self.carts.delete_all()
        created: List[Cart] = []
        # 8-digit ids can collide; a duplicate would overwrite an earlier cart
        used_ids = set()
        while len(created) < count:
            cart = self.make_cart()
            if cart.id in used_ids:
                continue
            used_ids.add(cart.id)
            self.carts.save(cart)
            created.append(cart)
        logger.info("Seeded carts", removed=removed, created=len(created))
        return created

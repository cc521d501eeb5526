from decimal import Decimal

import fakeredis

from apps.carts.models import Cart, Product
from apps.carts.repositories import CartRepository


def make_client():
    return fakeredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)


def make_repository(client=None):
    return CartRepository(client or make_client())


def make_product(product_id="p1", price="10.00", quantity=1, description="Shire pipe weed"):
    return Product.build(
        id=product_id,
        title=f"Product {product_id}",
        description=description,
        thumbnail_url=f"https://example.com/{product_id}.png",
        price=Decimal(price),
        quantity=quantity,
    )


def make_cart(cart_id="c1", user_id="frodo@example.com", products=None):
    return Cart.build(
        id=cart_id,
        user_id=user_id,
        session_id=f"session-{cart_id}",
        products=products if products is not None else [make_product()],
    )

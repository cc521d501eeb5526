from __future__ import annotations

from typing import Optional

from django.conf import settings

from apps.common.store import get_document_store_client

from .mappers import CartMapper, ProductMapper
from .repositories import CartRepository
from .seed import CartSeeder
from .services import CartService


def build_cart_repository(client=None) -> CartRepository:
    return CartRepository(
        client if client is not None else get_document_store_client(),
        CartMapper(ProductMapper()),
        prefix=settings.CART_KEY_PREFIX,
    )


def build_cart_service(client=None) -> CartService:
    return CartService(
        carts=build_cart_repository(client),
        cart_mapper=CartMapper(ProductMapper()),
    )


def build_cart_seeder(client=None, *, seed: Optional[int] = None) -> CartSeeder:
    return CartSeeder(build_cart_repository(client), seed=seed)

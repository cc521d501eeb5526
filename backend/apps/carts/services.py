from __future__ import annotations

from typing import List, Optional

from apps.common import get_logger
from .dtos import CartDTO
from .models import Cart, subtract_money, to_decimal, to_money
from .protocols import CartMapperProtocol, CartRepositoryProtocol

logger = get_logger(__name__).bind(component="carts", layer="service")


class CartNotFoundError(Exception):
    """Raised when a cart id has no stored document."""

    def __init__(self, cart_id: str):
        super().__init__(f"Cart {cart_id} does not exist")
        self.cart_id = cart_id


class CartService:
    def __init__(
        self,
        carts: CartRepositoryProtocol,
        cart_mapper: CartMapperProtocol,
    ):
        self.carts = carts
        self.cart_mapper = cart_mapper
        self.logger = logger.bind(service="CartService")

    def find_all_cart_total_greater_than(self, total) -> List[CartDTO]:
        """Carts whose total is at least ``total``, ascending by total.

        The comparison is inclusive: a cart whose total equals the threshold
        is part of the result.
        """
        threshold = to_decimal(total)
        carts = self.carts.find_all_by_total_at_least(threshold)
        self.logger.debug("Filtered carts by total", threshold=threshold, matches=len(carts))
        return self.cart_mapper.many_to_dto(carts)

    def list_carts(self) -> List[CartDTO]:
        """Every stored cart, ascending by total."""
        return self.cart_mapper.many_to_dto(self.carts.find_all_by_total_at_least(None))

    def _load(self, cart_id: str) -> Cart:
        cart = self.carts.find_by_id(cart_id)
        if cart is None:
            raise CartNotFoundError(cart_id)
        return cart

    def find_by_id(self, cart_id: str) -> CartDTO:
        return self.cart_mapper.to_dto(self._load(cart_id))

    def find_by_user_id(self, user_id: str) -> Optional[CartDTO]:
        cart = self.carts.find_one_by_user_id(user_id)
        return self.cart_mapper.to_dto(cart) if cart else None

    def search_products(self, text: str) -> List[CartDTO]:
        carts = self.carts.search_product_descriptions(text)
        self.logger.debug("Searched product descriptions", query=text, matches=len(carts))
        return self.cart_mapper.many_to_dto(carts)

    def apply_discount(self, cart_id: str, discount) -> Optional[CartDTO]:
        """
        Set the cart's discount and subtract it from the cart's current total.

        The subtraction starts from the stored total, which already reflects any
        earlier discount, so repeated calls compound. Returns ``None`` without
        writing anything when the cart does not exist.
        """
        try:
            cart = self._load(cart_id)
        except CartNotFoundError:
            self.logger.warning("Discount requested for unknown cart", cart_id=cart_id)
            return None
        amount = to_money(discount)
        previous_total = cart.total
        cart.discount = amount
        cart.total = subtract_money(previous_total, amount)
        self.carts.save(cart)
        self.logger.info(
            "Discount applied",
            cart_id=cart_id,
            discount=amount,
            previous_total=previous_total,
            total=cart.total,
        )
        return self.cart_mapper.to_dto(cart)

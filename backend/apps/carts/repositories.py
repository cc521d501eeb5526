from typing import List, Optional

from apps.common.repository import DocumentRepository
from .indexes import CART_INDEXES
from .mappers import CartMapper
from .models import Cart

DEFAULT_PREFIX = "cart"


class CartRepository(DocumentRepository[Cart]):
    def __init__(self, client, mapper: Optional[CartMapper] = None, *, prefix: str = DEFAULT_PREFIX):
        super().__init__(client, mapper or CartMapper(), prefix=prefix, indexes=CART_INDEXES)

    def find_by_id(self, cart_id: str) -> Optional[Cart]:
        return self.get(cart_id)

    def find_one_by_user_id(self, user_id: str) -> Optional[Cart]:
        carts = self.find_by_tag("userId", user_id)
        return carts[0] if carts else None

    def find_all_by_total_at_least(self, minimum) -> List[Cart]:
        carts = self.find_by_range("total", minimum=minimum)
        if minimum is None:
            return carts
        # index scores are floats; the stored Decimal total decides
        return [cart for cart in carts if cart.total >= minimum]

    def search_product_descriptions(self, text: str) -> List[Cart]:
        return self.search_text("products.description", text)
